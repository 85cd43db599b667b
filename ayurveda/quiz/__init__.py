# -*- coding: utf-8 -*-
"""Prakriti quiz: question bank, scoring and stored results."""

from .scoring import DOSHAS, determine_prakriti, rank, tally

__all__ = ["DOSHAS", "determine_prakriti", "rank", "tally"]
