# -*- coding: utf-8 -*-
"""Prakriti scoring — tally answers and pick the dominant/secondary dosha."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Tuple

DOSHAS: Tuple[str, str, str] = ("vata", "pitta", "kapha")


def tally(answers: Mapping[str, str]) -> Dict[str, int]:
    """Count how many answers picked each dosha.

    Values outside the three doshas are ignored.
    """
    scores = {dosha: 0 for dosha in DOSHAS}
    for dosha in answers.values():
        if dosha in scores:
            scores[dosha] += 1
    return scores


def rank(scores: Mapping[str, int]) -> List[Tuple[str, int]]:
    # sorted() is stable, so ties keep vata > pitta > kapha order.
    return sorted(
        ((dosha, int(scores.get(dosha, 0))) for dosha in DOSHAS),
        key=lambda item: item[1],
        reverse=True,
    )


def determine_prakriti(scores: Mapping[str, int]) -> Tuple[str, Optional[str]]:
    ranked = rank(scores)
    dominant = ranked[0][0]
    secondary = ranked[1][0] if ranked[1][1] > 0 else None
    return dominant, secondary


def validate_answers(answers: Mapping[str, str], question_ids: List[str]) -> List[str]:
    """Return human-readable problems with a submission (empty when valid)."""
    problems: List[str] = []
    known = set(question_ids)
    unknown = sorted(qid for qid in answers if qid not in known)
    if unknown:
        problems.append(f"Unknown question ids: {', '.join(unknown)}")
    missing = [qid for qid in question_ids if qid not in answers]
    if missing:
        problems.append(f"Unanswered questions: {', '.join(missing)}")
    invalid = sorted(qid for qid, dosha in answers.items() if dosha not in DOSHAS)
    if invalid:
        problems.append(f"Invalid answers for: {', '.join(invalid)}")
    return problems
