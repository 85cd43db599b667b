# -*- coding: utf-8 -*-
"""Ayurveda wellness backend."""
