# -*- coding: utf-8 -*-
"""Dosha-keyed daily routines."""
