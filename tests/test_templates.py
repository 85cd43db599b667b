# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from ayurveda.diet.models import DietTemplate
from ayurveda.diet.storage import get_template as get_diet_template
from ayurveda.diet.templates import DIET_TEMPLATES
from ayurveda.quiz.questions import QUESTION_BANK
from ayurveda.quiz.scoring import DOSHAS
from ayurveda.schedule.models import ScheduleTemplate
from ayurveda.schedule.storage import get_template as get_schedule_template
from ayurveda.schedule.templates import SCHEDULE_TEMPLATES


class TestTemplates(unittest.TestCase):
    def test_every_dosha_has_templates(self) -> None:
        self.assertEqual(set(DIET_TEMPLATES), set(DOSHAS))
        self.assertEqual(set(SCHEDULE_TEMPLATES), set(DOSHAS))

    def test_templates_validate(self) -> None:
        for dosha in DOSHAS:
            diet = DietTemplate(**get_diet_template(dosha))
            self.assertTrue(diet.foods_to_favor)
            self.assertTrue(diet.meal_suggestions.snacks)
            schedule = ScheduleTemplate(**get_schedule_template(dosha))
            self.assertEqual(set(schedule.meal_times), {"breakfast", "lunch", "dinner"})

    def test_kapha_wakes_earliest(self) -> None:
        self.assertEqual(SCHEDULE_TEMPLATES["kapha"]["wake_time"], "05:30")
        self.assertEqual(SCHEDULE_TEMPLATES["pitta"]["sleep_time"], "22:30")

    def test_get_template_returns_a_copy(self) -> None:
        copy = get_diet_template("vata")
        copy["foods_to_favor"].append("Ice cream")
        self.assertNotIn("Ice cream", DIET_TEMPLATES["vata"]["foods_to_favor"])

    def test_unknown_dosha(self) -> None:
        with self.assertRaises(KeyError):
            get_schedule_template("ether")


class TestQuestionBank(unittest.TestCase):
    def test_ids_and_order_are_unique(self) -> None:
        ids = [q["id"] for q in QUESTION_BANK]
        orders = [q["order_number"] for q in QUESTION_BANK]
        self.assertEqual(len(ids), len(set(ids)))
        self.assertEqual(orders, sorted(set(orders)))

    def test_categories(self) -> None:
        self.assertEqual({q["category"] for q in QUESTION_BANK}, {"physical", "mental", "behavioral"})


if __name__ == "__main__":
    unittest.main()
