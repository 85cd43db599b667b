# -*- coding: utf-8 -*-
"""Default Prakriti question bank, seeded into an empty database."""

from __future__ import annotations

from typing import Dict, List


def _q(order: int, category: str, question: str, vata: str, pitta: str, kapha: str) -> Dict[str, object]:
    return {
        "id": f"q{order:02d}",
        "category": category,
        "question": question,
        "vata_option": vata,
        "pitta_option": pitta,
        "kapha_option": kapha,
        "order_number": order,
    }


QUESTION_BANK: List[Dict[str, object]] = [
    # physical
    _q(
        1,
        "physical",
        "How would you describe your body frame?",
        "Thin and light, I find it hard to gain weight",
        "Medium and muscular, my weight is fairly stable",
        "Broad and solid, I gain weight easily",
    ),
    _q(
        2,
        "physical",
        "What is your skin usually like?",
        "Dry, rough or thin",
        "Warm, oily and prone to rashes or redness",
        "Thick, smooth and cool",
    ),
    _q(
        3,
        "physical",
        "How is your hair?",
        "Dry, frizzy or brittle",
        "Fine and straight, early greying or thinning",
        "Thick, wavy and lustrous",
    ),
    _q(
        4,
        "physical",
        "How is your appetite?",
        "Irregular, I sometimes forget to eat",
        "Strong, I get irritable if I miss a meal",
        "Steady but slow, I can skip meals easily",
    ),
    _q(
        5,
        "physical",
        "How is your digestion?",
        "Variable, with gas or bloating",
        "Quick, sometimes with acidity or heartburn",
        "Slow and heavy after meals",
    ),
    _q(
        6,
        "physical",
        "Which weather bothers you the most?",
        "Cold, dry and windy weather",
        "Hot and humid weather",
        "Cold and damp weather",
    ),
    _q(
        7,
        "physical",
        "How do you usually sleep?",
        "Lightly, I wake up easily",
        "Moderately and soundly, about 6 to 8 hours",
        "Deeply and long, I find it hard to wake up",
    ),
    _q(
        8,
        "physical",
        "How is your energy through the day?",
        "Comes in bursts, then I tire quickly",
        "Intense and well directed",
        "Steady and enduring, slow to start",
    ),
    # mental
    _q(
        9,
        "mental",
        "How do you learn new things?",
        "Quickly, but I forget quickly too",
        "Sharply and with focus, I remember well",
        "Slowly, but once learned I never forget",
    ),
    _q(
        10,
        "mental",
        "How does your mind usually feel?",
        "Restless, full of ideas",
        "Focused, analytical and driven",
        "Calm, steady and content",
    ),
    _q(
        11,
        "mental",
        "How do you respond to stress?",
        "Anxious and worried",
        "Irritable and impatient",
        "Withdrawn, I avoid the problem",
    ),
    _q(
        12,
        "mental",
        "How do you make decisions?",
        "I change my mind often",
        "Quickly and decisively",
        "Slowly, after careful thought",
    ),
    _q(
        13,
        "mental",
        "What best describes your memory?",
        "Good short-term memory, poor long-term",
        "Sharp and precise",
        "Slow to take in but long lasting",
    ),
    # behavioral
    _q(
        14,
        "behavioral",
        "How do you speak?",
        "Fast, talkative, jumping between topics",
        "Clear, precise and convincing",
        "Slow, calm and deliberate",
    ),
    _q(
        15,
        "behavioral",
        "How do you walk?",
        "Fast and light",
        "Purposeful and determined",
        "Slow and steady",
    ),
    _q(
        16,
        "behavioral",
        "How do you handle money?",
        "I spend impulsively",
        "I spend on purpose, usually on quality",
        "I save and spend reluctantly",
    ),
    _q(
        17,
        "behavioral",
        "How do you approach daily routines?",
        "I dislike routine and prefer variety",
        "I like plans and schedules I set myself",
        "I love routine and resist change",
    ),
    _q(
        18,
        "behavioral",
        "How do you act in social situations?",
        "Lively and enthusiastic, but I tire easily",
        "Confident, I tend to take the lead",
        "Warm and loyal, I prefer a few close friends",
    ),
]
