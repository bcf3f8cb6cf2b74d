# schemas/marking.py
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Reason(str, Enum):
    INVALID_FORMAT = "Invalid numeric format"
    USER_NOT_FINITE = "User input is not a finite number"
    EXPECTED_NOT_FINITE = "Expected answer is not a finite number"
    CORRECT = "Correct"
    INCORRECT = "Incorrect value"


# ---------- Single answer ----------


class ValidationResult(BaseModel):
    is_valid: bool
    reason: Reason
    user_input: str
    expected: Optional[str] = None
    # only set once both sides parsed to finite numbers
    user_number: Optional[float] = None
    expected_number: Optional[float] = None


# ---------- Batch ----------


class AnswerCheck(BaseModel):
    index: int
    expression: Optional[str] = None
    user_input: Optional[str] = None
    expected: Optional[str] = None
    is_valid: bool
