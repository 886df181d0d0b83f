from enum import Enum
from typing import Any, Optional

from app.exception import BusinessException


class QuestionErrorCode(Enum):
    INVALID_INPUT = ("QUESTION_001", "The input is empty or malformed.")
    PROVIDER_FAILED = ("QUESTION_002", "The question provider request failed.")
    SCHEMA_VIOLATION = ("QUESTION_003", "The provider response did not match the question schema.")

    def __init__(self, code: str, message: str):
        self._code = code
        self._message = message

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message


class QuestionException(BusinessException):
    def __init__(self, code: Enum, *, detail: Optional[Any] = None):
        super().__init__(code, detail=detail)
        self.code = code

    def __str__(self) -> str:
        if self.detail:
            return f"{self.error_message} ({self.detail})"
        return self.error_message


class InvalidInputError(QuestionException):
    def __init__(self, detail: Optional[Any] = None):
        super().__init__(QuestionErrorCode.INVALID_INPUT, detail=detail)


class ProviderError(QuestionException):
    def __init__(self, detail: Optional[Any] = None):
        super().__init__(QuestionErrorCode.PROVIDER_FAILED, detail=detail)


class SchemaViolationError(QuestionException):
    def __init__(self, detail: Optional[Any] = None):
        super().__init__(QuestionErrorCode.SCHEMA_VIOLATION, detail=detail)
