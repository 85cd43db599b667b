# -*- coding: utf-8 -*-
"""Admin dashboard (requires an admin user)."""
