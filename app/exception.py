from enum import Enum
from typing import Any, Optional


class BusinessException(Exception):
    def __init__(self, code: Enum, *, detail: Optional[Any] = None):
        super().__init__(getattr(code, "message", str(code)))
        self.code = code
        self.detail = detail

    @property
    def error_code(self) -> str:
        return getattr(self.code, "code", getattr(self.code, "name", "UNKNOWN"))

    @property
    def error_message(self) -> str:
        return getattr(self.code, "message", str(self.code))
