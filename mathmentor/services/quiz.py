"""Randomised arithmetic and geometry questions for the mini quiz."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..core import QuizGenerationError, ValidationError

QUESTION_MODES = ("mixed", "arithmetic", "geometry")

OPTION_COUNT = 4
MAX_DRAWS = 1000

# Correct-answer XP by question family; wrong answers earn nothing.
XP_REWARDS = {"arithmetic": 10, "geometry": 15}

# Shapes are drawn in a 240x120 view box, 8px per unit, centred on (120, 60).
_VIEW_CX, _VIEW_CY = 120, 60
_UNIT_PX = 8
_TRIANGLE_PERIMETER_PATH = "M 85 85 L 120 25 L 155 85 Z"


@dataclass
class Shape:
    type: str
    dimensions: List[int]
    svg_path: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "dimensions": list(self.dimensions), "svgPath": self.svg_path}


@dataclass
class Question:
    id: int
    question: str
    options: List[str]
    correct_answer: int
    operation: str
    type: str
    shape: Optional[Shape] = field(default=None)

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_answer]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "question": self.question,
            "options": list(self.options),
            "correctAnswer": self.correct_answer,
            "operation": self.operation,
            "type": self.type,
        }
        if self.shape is not None:
            data["shape"] = self.shape.to_dict()
        return data


def xp_for_answer(question_type: str, correct: bool) -> int:
    """XP awarded for answering a question of ``question_type``."""

    if not correct:
        return 0
    return XP_REWARDS.get(question_type, 0)


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def _is_whole(value: float) -> bool:
    return float(value).is_integer()


def format_number(value: float) -> str:
    """Render answers the way the quiz shows them: ``12`` or ``7.5``."""

    if _is_whole(value):
        return str(int(value))
    return str(value)


def _build_options(
    correct: float,
    perturb: Callable[[random.Random], float],
    rng: random.Random,
) -> tuple[List[str], int]:
    """Correct answer plus three distinct positive distractors, shuffled."""

    whole = _is_whole(correct)
    wrong: List[float] = []
    draws = 0
    while len(wrong) < OPTION_COUNT - 1:
        draws += 1
        if draws > MAX_DRAWS:
            raise QuizGenerationError(f"Could not find distractors for {correct}")
        candidate = correct + perturb(rng)
        candidate = _round_half_up(candidate) if whole else _round_half_up(candidate, 1)
        if candidate == correct or candidate <= 0 or candidate in wrong:
            continue
        wrong.append(candidate)

    options = [format_number(correct)] + [format_number(value) for value in wrong]
    rng.shuffle(options)
    return options, options.index(format_number(correct))


def generate_arithmetic_question(rng: Optional[random.Random] = None) -> Question:
    rng = rng or random.Random()
    symbol, name = rng.choice(
        [("+", "addition"), ("-", "subtraction"), ("×", "multiplication"), ("÷", "division")]
    )

    if symbol == "+":
        left, right = rng.randint(1, 50), rng.randint(1, 50)
        answer = left + right
    elif symbol == "-":
        left, right = rng.randint(25, 74), rng.randint(1, 25)
        answer = left - right
    elif symbol == "×":
        left, right = rng.randint(1, 12), rng.randint(1, 12)
        answer = left * right
    else:
        # Build the dividend from the quotient so the result is always whole.
        right, answer = rng.randint(1, 12), rng.randint(1, 12)
        left = right * answer

    spread = 5 if symbol == "÷" else 10
    options, correct_index = _build_options(
        answer, lambda r: r.randint(-spread, spread - 1), rng
    )
    return Question(
        id=rng.getrandbits(32),
        question=f"{left} {symbol} {right} = ?",
        options=options,
        correct_answer=correct_index,
        operation=name,
        type="arithmetic",
    )


def _box_path(width_units: int, height_units: int) -> tuple[int, int, int, int]:
    width = width_units * _UNIT_PX
    height = height_units * _UNIT_PX
    return _VIEW_CX - width // 2, _VIEW_CY - height // 2, width, height


def _geometry_perturb(correct: float) -> Callable[[random.Random], float]:
    if correct < 10:
        spread = 3
    elif correct < 50:
        spread = 10
    else:
        spread = 20
    return lambda r: r.uniform(-spread, spread)


def generate_geometry_question(rng: Optional[random.Random] = None) -> Question:
    rng = rng or random.Random()
    shape_type = rng.choice(["triangle", "rectangle"])
    measure = rng.choice(["area", "perimeter"])

    if shape_type == "triangle" and measure == "area":
        base, height = rng.randint(3, 12), rng.randint(3, 10)
        dimensions = [base, height]
        answer = _round_half_up(base * height / 2, 1)
        x, y, w, h = _box_path(base, height)
        svg_path = f"M {x} {y} L {x + w} {y} L {x + w // 2} {y + h} Z"
    elif shape_type == "triangle":
        dimensions = [rng.randint(4, 11) for _ in range(3)]
        answer = sum(dimensions)
        svg_path = _TRIANGLE_PERIMETER_PATH
    else:
        length, width = rng.randint(4, 11), rng.randint(3, 8)
        dimensions = [length, width]
        answer = length * width if measure == "area" else 2 * (length + width)
        x, y, w, h = _box_path(length, width)
        svg_path = f"M {x} {y} L {x + w} {y} L {x + w} {y + h} L {x} {y + h} Z"

    options, correct_index = _build_options(answer, _geometry_perturb(answer), rng)
    return Question(
        id=rng.getrandbits(32),
        question=f"What is the {measure} of this {shape_type}?",
        options=options,
        correct_answer=correct_index,
        operation=f"geometry-{shape_type}-{measure}",
        type="geometry",
        shape=Shape(type=shape_type, dimensions=dimensions, svg_path=svg_path),
    )


def generate_question(mode: str = "mixed", rng: Optional[random.Random] = None) -> Question:
    """Generate one question; ``mixed`` picks either family with equal odds."""

    if mode not in QUESTION_MODES:
        raise ValidationError(f"Unknown question mode: {mode}")
    rng = rng or random.Random()
    if mode == "mixed":
        mode = rng.choice(["arithmetic", "geometry"])
    if mode == "geometry":
        return generate_geometry_question(rng)
    return generate_arithmetic_question(rng)


__all__ = [
    "OPTION_COUNT",
    "QUESTION_MODES",
    "Question",
    "Shape",
    "XP_REWARDS",
    "format_number",
    "generate_arithmetic_question",
    "generate_geometry_question",
    "generate_question",
    "xp_for_answer",
]
