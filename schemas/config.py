# schemas/config.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from schemas.questions import OPERATIONS, Operation


class NumberRange(BaseModel):
    model_config = ConfigDict(extra="forbid")

    min: int
    max: int

    @model_validator(mode="after")
    def _check_order(self):
        if self.min > self.max:
            raise ValueError(f"number_range min ({self.min}) is greater than max ({self.max})")
        return self


class QuizConfig(BaseModel):
    """Generation and validation settings. Upper-case legacy keys are accepted too."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, validate_assignment=True)

    division_precision: int = Field(default=2, ge=0, le=10, alias="DIVISION_PRECISION")
    number_range: NumberRange = Field(
        default_factory=lambda: NumberRange(min=1, max=100), alias="NUMBER_RANGE"
    )
    tolerance: float = Field(default=1e-10, ge=0, alias="FLOAT_TOLERANCE")
    operations: List[Operation] = Field(
        default_factory=lambda: list(OPERATIONS), min_length=1, alias="OPERATIONS"
    )
    avoid_negative_results: bool = Field(default=True, alias="AVOID_NEGATIVE_RESULTS")
    avoid_division_by_zero: bool = Field(default=True, alias="AVOID_DIVISION_BY_ZERO")
    max_attempts: int = Field(default=100, ge=1, alias="MAX_ATTEMPTS")

    @field_validator("operations")
    @classmethod
    def _dedupe(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(v))
