# -*- coding: utf-8 -*-
"""Static daily schedule templates per dosha."""

from __future__ import annotations

from typing import Any, Dict

SCHEDULE_TEMPLATES: Dict[str, Dict[str, Any]] = {
    "vata": {
        "wake_time": "06:00",
        "morning_routine": [
            "Drink warm water with ginger",
            "Self-massage with sesame oil",
            "Gentle yoga or stretching",
            "Meditation (20 minutes)",
            "Warm breakfast",
        ],
        "meal_times": {
            "breakfast": "07:30 - 08:00",
            "lunch": "12:00 - 13:00",
            "dinner": "18:00 - 19:00",
        },
        "exercise_schedule": [
            "Morning: Gentle yoga or walking (30 min)",
            "Evening: Light stretching (15 min)",
        ],
        "meditation_times": ["Morning: 06:30 - 06:50", "Evening: 19:30 - 19:50"],
        "sleep_time": "22:00",
    },
    "pitta": {
        "wake_time": "06:00",
        "morning_routine": [
            "Drink cool water",
            "Self-massage with coconut oil",
            "Moderate yoga practice",
            "Meditation (15 minutes)",
            "Light breakfast",
        ],
        "meal_times": {
            "breakfast": "07:00 - 08:00",
            "lunch": "12:30 - 13:30",
            "dinner": "18:30 - 19:30",
        },
        "exercise_schedule": [
            "Morning: Moderate exercise - swimming, cycling (45 min)",
            "Evening: Cooling walk (20 min)",
        ],
        "meditation_times": ["Morning: 06:30 - 06:45", "Evening: 20:00 - 20:15"],
        "sleep_time": "22:30",
    },
    "kapha": {
        "wake_time": "05:30",
        "morning_routine": [
            "Drink warm water with honey and lemon",
            "Vigorous dry brushing",
            "Energetic yoga or exercise",
            "Meditation (10 minutes)",
            "Light breakfast (optional)",
        ],
        "meal_times": {
            "breakfast": "07:00 - 08:00 (optional)",
            "lunch": "11:30 - 12:30",
            "dinner": "17:30 - 18:30",
        },
        "exercise_schedule": [
            "Morning: Vigorous exercise - running, aerobics (60 min)",
            "Evening: Active walk or sports (30 min)",
        ],
        "meditation_times": ["Morning: 06:00 - 06:10", "Evening: 19:00 - 19:10"],
        "sleep_time": "22:00",
    },
}
