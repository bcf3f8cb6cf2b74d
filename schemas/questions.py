# schemas/questions.py
from __future__ import annotations

from typing import Literal, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from rounding import to_answer_text

Operation = Literal["+", "-", "*", "/"]
OPERATIONS: Tuple[str, ...] = ("+", "-", "*", "/")


class Question(BaseModel):
    # Immutable once generated. Aliases keep the {"question", "answer"} shape
    # older callers send working.
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    expression: str = Field(alias="question")
    canonical_answer: str = Field(alias="answer")
    numeric_answer: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("numeric_answer", "numericAnswer")
    )
    operation: Optional[Operation] = None
    operands: Optional[Tuple[int, int]] = None

    @field_validator("canonical_answer", mode="before")
    @classmethod
    def _stringify_answer(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return to_answer_text(v)
        return v


class Operands(BaseModel):
    num1: int
    num2: int


class QuestionStats(BaseModel):
    operands: Operands
    result: float
    operation: Operation
    difficulty: int = Field(ge=1, le=10)
    has_decimals: bool
