"""
Score inputs: which category is being written and the value to write.

A score input is one of two cases:

- PointsInput for the nine categories that carry a user-entered value
  (ones through sixes, choice, full house, four of a kind). Its points may
  be None while the front end is still asking the user for a number; inject()
  fills it in once the number is known.
- ClaimInput for small straight, large straight and yacht, which are either
  made (fixed award) or failed (zero).

Inputs are frozen; filling a placeholder returns a new input.
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, NonNegativeInt, model_validator

from scoring.enums import Category
from scoring.exceptions import InvalidScoreValueError


class PointsInput(BaseModel):
    """Write a point value (or clear the slot when points is None)."""

    model_config = ConfigDict(frozen=True)

    category: Category
    points: NonNegativeInt | None = None

    @model_validator(mode="after")
    def _validate_category(self) -> Self:
        if not self.category.takes_points:
            raise ValueError(f"{self.category.value} is claimed, not scored with points")
        return self

    @property
    def is_complete(self) -> bool:
        return self.points is not None


class ClaimInput(BaseModel):
    """Mark a claim category as made or failed."""

    model_config = ConfigDict(frozen=True)

    category: Category
    claimed: bool

    @model_validator(mode="after")
    def _validate_category(self) -> Self:
        if not self.category.is_claim:
            raise ValueError(f"{self.category.value} takes points, not a claim")
        return self

    @property
    def is_complete(self) -> bool:
        return True

    @property
    def points(self) -> int:
        return self.category.award if self.claimed else 0


ScoreInput = PointsInput | ClaimInput


def placeholder(category: Category) -> PointsInput:
    """Return the unfilled input for a value-carrying category."""
    return PointsInput(category=category)


def inject(score_input: ScoreInput, points: int) -> ScoreInput:
    """Fill an unfilled PointsInput with points.

    Inputs that already carry a value, and claim inputs, are returned
    unchanged.
    """
    if isinstance(score_input, PointsInput) and score_input.points is None:
        return PointsInput(category=score_input.category, points=points)
    return score_input


def from_value(category: Category, value: int) -> ScoreInput:
    """Build a complete input from a parsed value.

    Claim categories accept 1 (made) or 0 (failed); any other value is
    rejected. Value categories take the number as their points.
    """
    if category.is_claim:
        if value not in (0, 1):
            raise InvalidScoreValueError(str(value), f"{category.label} takes 1 (made) or 0 (failed)")
        return ClaimInput(category=category, claimed=bool(value))
    if value < 0:
        raise InvalidScoreValueError(str(value), "score cannot be negative")
    return PointsInput(category=category, points=value)
