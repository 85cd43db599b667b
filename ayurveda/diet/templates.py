# -*- coding: utf-8 -*-
"""Static diet templates per dosha."""

from __future__ import annotations

from typing import Any, Dict

DIET_TEMPLATES: Dict[str, Dict[str, Any]] = {
    "vata": {
        "foods_to_favor": [
            "Warm, cooked foods",
            "Sweet fruits (bananas, avocados, mangoes)",
            "Cooked vegetables (sweet potatoes, carrots, beets)",
            "Whole grains (rice, wheat, oats)",
            "Warming spices (ginger, cinnamon, cumin)",
            "Healthy fats (ghee, sesame oil, nuts)",
            "Warm milk and dairy",
        ],
        "foods_to_avoid": [
            "Cold, raw foods",
            "Dry, light foods",
            "Bitter vegetables (kale, spinach)",
            "Beans (except mung beans)",
            "Carbonated drinks",
            "Caffeine",
        ],
        "meal_suggestions": {
            "breakfast": ["Warm oatmeal with cinnamon", "Scrambled eggs with toast", "Smoothie with banana and dates"],
            "lunch": ["Vegetable soup with rice", "Chicken curry with quinoa", "Stir-fried vegetables with noodles"],
            "dinner": ["Khichdi with ghee", "Baked fish with sweet potato", "Pasta with creamy sauce"],
            "snacks": ["Almonds", "Fresh dates", "Warm herbal tea"],
        },
        "lifestyle_tips": [
            "Eat warm, freshly cooked meals",
            "Maintain regular meal times",
            "Avoid skipping meals",
            "Stay hydrated with warm water",
            "Practice calming activities like yoga",
            "Get adequate rest and sleep",
        ],
    },
    "pitta": {
        "foods_to_favor": [
            "Cool, refreshing foods",
            "Sweet fruits (melons, grapes, coconuts)",
            "Leafy greens and vegetables",
            "Whole grains (barley, oats, rice)",
            "Cooling herbs (cilantro, mint, fennel)",
            "Moderate amounts of dairy",
            "Sweet and bitter tastes",
        ],
        "foods_to_avoid": [
            "Spicy, hot foods",
            "Sour fruits (citrus)",
            "Tomatoes and hot peppers",
            "Red meat",
            "Alcohol",
            "Fried foods",
        ],
        "meal_suggestions": {
            "breakfast": ["Coconut pancakes", "Fruit salad with yogurt", "Smoothie with berries"],
            "lunch": ["Quinoa salad with cucumber", "Grilled chicken with greens", "Vegetable wrap"],
            "dinner": ["Steamed fish with vegetables", "Rice with lentil curry", "Pasta primavera"],
            "snacks": ["Fresh fruits", "Cucumber slices", "Coconut water"],
        },
        "lifestyle_tips": [
            "Eat cooling, fresh foods",
            "Avoid excessive heat and sun",
            "Practice moderation in all activities",
            "Engage in cooling exercises like swimming",
            "Take breaks to prevent burnout",
            "Avoid competitive situations",
        ],
    },
    "kapha": {
        "foods_to_favor": [
            "Light, warm foods",
            "Spicy and pungent foods",
            "Bitter vegetables (kale, spinach)",
            "Lighter grains (quinoa, millet, barley)",
            "Warming spices (ginger, black pepper)",
            "Legumes and beans",
            "Honey in moderation",
        ],
        "foods_to_avoid": [
            "Heavy, oily foods",
            "Sweet, salty foods",
            "Dairy products",
            "Wheat and rice",
            "Red meat",
            "Cold drinks",
        ],
        "meal_suggestions": {
            "breakfast": ["Light vegetable soup", "Poached eggs with greens", "Fruit salad with ginger tea"],
            "lunch": ["Spicy lentil soup", "Grilled chicken salad", "Vegetable stir-fry"],
            "dinner": ["Vegetable curry with quinoa", "Baked fish with steamed vegetables", "Bean soup"],
            "snacks": ["Apple slices", "Roasted chickpeas", "Herbal tea"],
        },
        "lifestyle_tips": [
            "Eat light, warm, dry foods",
            "Avoid overeating",
            "Stay active with vigorous exercise",
            "Wake up early",
            "Avoid afternoon naps",
            "Seek variety and stimulation",
        ],
    },
}
