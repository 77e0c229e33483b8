import random

import pytest

from mathmentor.core import QuizGenerationError, ValidationError
from mathmentor.services import quiz
from mathmentor.services.quiz import (
    format_number,
    generate_arithmetic_question,
    generate_geometry_question,
    generate_question,
    xp_for_answer,
)


def _correct_value(question):
    return float(question.correct_option)


def _check_options(question):
    assert len(question.options) == 4
    assert len(set(question.options)) == 4
    values = [float(option) for option in question.options]
    assert all(value > 0 for value in values if value != _correct_value(question))
    if _correct_value(question).is_integer():
        assert all(value.is_integer() for value in values)


@pytest.mark.parametrize("seed", range(200))
def test_arithmetic_questions(seed):
    question = generate_arithmetic_question(random.Random(seed))
    _check_options(question)
    assert question.type == "arithmetic"
    assert question.shape is None

    left, symbol, right, _, _ = question.question.split()
    left, right = int(left), int(right)
    expected = {
        "+": lambda: left + right,
        "-": lambda: left - right,
        "×": lambda: left * right,
        "÷": lambda: left // right,
    }[symbol]()
    assert int(question.correct_option) == expected
    if symbol == "÷":
        assert left % right == 0
        assert 1 <= right <= 12 and 1 <= expected <= 12


@pytest.mark.parametrize("seed", range(200))
def test_geometry_questions(seed):
    question = generate_geometry_question(random.Random(seed))
    _check_options(question)
    assert question.type == "geometry"
    shape = question.shape
    dims = shape.dimensions
    correct = _correct_value(question)

    if question.operation == "geometry-triangle-area":
        assert correct == dims[0] * dims[1] / 2
    elif question.operation == "geometry-triangle-perimeter":
        assert len(dims) == 3
        assert correct == sum(dims)
    elif question.operation == "geometry-rectangle-area":
        assert correct == dims[0] * dims[1]
    else:
        assert question.operation == "geometry-rectangle-perimeter"
        assert correct == 2 * (dims[0] + dims[1])
    assert shape.svg_path.endswith("Z")


def test_modes_restrict_family():
    rng = random.Random(7)
    assert {generate_question("arithmetic", rng).type for _ in range(30)} == {"arithmetic"}
    assert {generate_question("geometry", rng).type for _ in range(30)} == {"geometry"}
    assert {generate_question("mixed", rng).type for _ in range(60)} == {"arithmetic", "geometry"}


def test_unknown_mode():
    with pytest.raises(ValidationError):
        generate_question("trigonometry")


def test_same_seed_same_question():
    a = generate_question("mixed", random.Random(42)).to_dict()
    b = generate_question("mixed", random.Random(42)).to_dict()
    assert a == b


def test_rectangle_path_is_centred():
    rng = random.Random()
    for _ in range(50):
        question = generate_geometry_question(rng)
        if question.shape.type == "rectangle":
            length, width = question.shape.dimensions
            x = 120 - length * 4
            y = 60 - width * 4
            assert question.shape.svg_path.startswith(f"M {x} {y} ")


def test_format_number():
    assert format_number(12) == "12"
    assert format_number(12.0) == "12"
    assert format_number(7.5) == "7.5"


def test_xp_for_answer():
    assert xp_for_answer("arithmetic", True) == 10
    assert xp_for_answer("geometry", True) == 15
    assert xp_for_answer("geometry", False) == 0
    assert xp_for_answer("arithmetic", False) == 0


def test_generation_gives_up_eventually(monkeypatch):
    monkeypatch.setattr(quiz, "MAX_DRAWS", 5)
    with pytest.raises(QuizGenerationError):
        quiz._build_options(3, lambda r: 0, random.Random(1))
