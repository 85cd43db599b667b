# -*- coding: utf-8 -*-
"""Dosha-keyed diet charts."""
