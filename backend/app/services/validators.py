"""
Validation of generated question sets.

The text-generation service is asked for a JSON array of question/answer
records. This module checks that the parsed payload has that shape before it
reaches the pipeline state; it does not judge whether answers are correct.
"""
from __future__ import annotations
from typing import Any, Dict, List, Tuple

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from backend.app.models.schemas import QuestionAnswer

QUESTION_LIST = TypeAdapter(List[QuestionAnswer])


class QuestionSetValidator:
    """
    Validator for generated question/answer payloads.

    A payload passes when it is a list and every element is an object with
    string `question` and `answer` fields. Extra fields are ignored.
    """

    @staticmethod
    def validate(payload: Any) -> Tuple[bool, Dict]:
        """
        Validate a decoded JSON payload.

        Args:
            payload: The decoded JSON value returned by the generation service

        Returns:
            Tuple of (is_valid, details) where details carries the failure
            reason (and pydantic errors, if any) when the payload is rejected
        """
        if not isinstance(payload, list):
            return False, {"reason": "not_a_list", "type": type(payload).__name__}
        try:
            QUESTION_LIST.validate_python(payload)
        except PydanticValidationError as e:
            errors = [
                {"loc": list(err["loc"]), "msg": err["msg"]}
                for err in e.errors()
            ]
            return False, {"reason": "invalid_records", "errors": errors}
        return True, {}

    @staticmethod
    def parse(payload: Any) -> List[QuestionAnswer]:
        return QUESTION_LIST.validate_python(payload)
