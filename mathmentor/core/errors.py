"""Domain exceptions raised by the service layer."""

from __future__ import annotations


class MathMentorError(Exception):
    """Base class for errors raised by mathmentor."""


class ValidationError(MathMentorError):
    """Malformed or missing input; surfaces as HTTP 400."""


class UserNotFound(MathMentorError):
    """No user with the requested id; surfaces as HTTP 404."""

    def __init__(self, user_id: str):
        super().__init__("User not found")
        self.user_id = user_id


class QuizGenerationError(MathMentorError):
    """The question generator could not find enough distinct distractors."""


__all__ = [
    "MathMentorError",
    "QuizGenerationError",
    "UserNotFound",
    "ValidationError",
]
