# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from ayurveda.quiz.scoring import determine_prakriti, rank, tally, validate_answers


class TestTally(unittest.TestCase):
    def test_counts_each_dosha(self) -> None:
        answers = {"q1": "vata", "q2": "pitta", "q3": "vata", "q4": "kapha", "q5": "vata"}
        self.assertEqual(tally(answers), {"vata": 3, "pitta": 1, "kapha": 1})

    def test_ignores_unknown_values(self) -> None:
        self.assertEqual(tally({"q1": "fire", "q2": "pitta"}), {"vata": 0, "pitta": 1, "kapha": 0})

    def test_empty(self) -> None:
        self.assertEqual(tally({}), {"vata": 0, "pitta": 0, "kapha": 0})


class TestDeterminePrakriti(unittest.TestCase):
    def test_dominant_and_secondary(self) -> None:
        self.assertEqual(determine_prakriti({"vata": 2, "pitta": 7, "kapha": 4}), ("pitta", "kapha"))

    def test_secondary_omitted_when_zero(self) -> None:
        self.assertEqual(determine_prakriti({"vata": 0, "pitta": 0, "kapha": 5}), ("kapha", None))

    def test_ties_keep_vata_pitta_kapha_order(self) -> None:
        self.assertEqual(determine_prakriti({"vata": 3, "pitta": 3, "kapha": 3}), ("vata", "pitta"))
        self.assertEqual(determine_prakriti({"vata": 1, "pitta": 4, "kapha": 4}), ("pitta", "kapha"))
        self.assertEqual(determine_prakriti({"vata": 4, "pitta": 1, "kapha": 4}), ("vata", "kapha"))

    def test_all_zero_defaults_to_vata(self) -> None:
        self.assertEqual(determine_prakriti({}), ("vata", None))

    def test_rank_orders_descending(self) -> None:
        self.assertEqual(
            rank({"vata": 1, "pitta": 5, "kapha": 3}),
            [("pitta", 5), ("kapha", 3), ("vata", 1)],
        )


class TestValidateAnswers(unittest.TestCase):
    def test_complete_submission(self) -> None:
        self.assertEqual(validate_answers({"a": "vata", "b": "kapha"}, ["a", "b"]), [])

    def test_reports_missing_unknown_and_invalid(self) -> None:
        problems = validate_answers({"a": "earth", "z": "vata"}, ["a", "b"])
        self.assertEqual(len(problems), 3)
        self.assertIn("Unknown question ids: z", problems[0])
        self.assertIn("Unanswered questions: b", problems[1])
        self.assertIn("Invalid answers for: a", problems[2])


if __name__ == "__main__":
    unittest.main()
