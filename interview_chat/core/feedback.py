"""Structured interview feedback and its extraction from free-form model output.

Models are asked to answer with a bare JSON object, but in practice they wrap it
in prose or Markdown fences. ``parse_feedback`` scans the text for balanced
``{...}`` spans, returns the first one that decodes and validates as
``Feedback`` and raises ``FeedbackParseFailure`` otherwise. Callers that must
not fail use ``default_feedback()`` instead.
"""
import json
from typing import Any, Dict, Iterator, List

from pydantic import ValidationError, field_validator

from interview_chat.core.models import CamelModel

MIN_SCORE = 0
MAX_SCORE = 100


class FeedbackParseFailure(ValueError):
    pass


def _clamp(value: int | float) -> int | float:
    return max(MIN_SCORE, min(MAX_SCORE, value))


class Feedback(CamelModel):
    overall_score: int | float
    skill_ratings: Dict[str, int | float]
    summary: str
    improvement_plan: List[str]

    @field_validator("overall_score")
    @classmethod
    def clamp_score(cls, v: int | float) -> int | float:
        return _clamp(v)

    @field_validator("skill_ratings")
    @classmethod
    def clamp_ratings(cls, v: Dict[str, int | float]) -> Dict[str, int | float]:
        return {skill: _clamp(rating) for skill, rating in v.items()}


DEFAULT_FEEDBACK: Dict[str, Any] = {
    "overallScore": 70,
    "skillRatings": {"technical_knowledge": 70, "communication": 75, "problem_solving": 70},
    "summary": (
        "Thank you for completing this mock interview. You showed good potential and understanding "
        "of the core concepts. Continue practicing to improve your confidence and depth of knowledge."
    ),
    "improvementPlan": [
        "Practice explaining complex concepts in simple terms",
        "Work on more hands-on projects to gain practical experience",
        "Study common interview patterns for your target role",
    ],
}


def default_feedback() -> Feedback:
    return Feedback.model_validate(DEFAULT_FEEDBACK)


def iter_json_objects(text: str) -> Iterator[str]:
    """Yield the top-level balanced ``{...}`` spans of ``text`` in order.

    Braces inside JSON string literals (including escaped quotes) are ignored.
    An opening brace that is never closed is skipped.
    """
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        next_from = start + 1
        for idx in range(start, len(text)):
            char = text[idx]
            if in_string:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == '"':
                    in_string = False
            elif char == '"':
                in_string = True
            elif char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    yield text[start:idx + 1]
                    next_from = idx + 1
                    break
        start = text.find("{", next_from)


def iter_json_dicts(text: str) -> Iterator[Dict[str, Any]]:
    for candidate in iter_json_objects(text or ""):
        try:
            value = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(value, dict):
            yield value


def parse_feedback(content: str) -> Feedback:
    found_object = False
    for data in iter_json_dicts(content):
        found_object = True
        try:
            return Feedback.model_validate(data)
        except ValidationError:
            continue
    if found_object:
        raise FeedbackParseFailure("Feedback JSON is missing or has invalid fields")
    raise FeedbackParseFailure("Could not parse feedback JSON")
