# -*- coding: utf-8 -*-
"""Accounts, password hashing and session tokens."""
