"""
Per-player Yacht scoreboard and the rule that derives its totals.

The category fields are the source of truth. left_to_get_bonus, bonus and
total_score are derived from them by recomputed(); with_score() always returns
an already recomputed board, so a Scoreboard never carries stale totals.
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, NonNegativeInt, ValidationInfo, field_validator

from scoring.enums import FREE_CATEGORIES, NUMBER_CATEGORIES, Category
from scoring.inputs import ClaimInput, ScoreInput

BONUS_LIMIT = 63
BONUS_SCORE = 35

NUM_CATEGORIES = len(Category)

Points = NonNegativeInt | None
NumberSlots = tuple[Points, Points, Points, Points, Points, Points]


class Scoreboard(BaseModel):
    """One player's category values and derived totals.

    Field names match the persisted score file layout.
    """

    model_config = ConfigDict(frozen=True)

    numbers: NumberSlots = (None, None, None, None, None, None)  # ones .. sixes
    left_to_get_bonus: NonNegativeInt = BONUS_LIMIT
    bonus: NonNegativeInt = 0
    choice: Points = None
    full_house: Points = None
    four_of_kind: Points = None
    small_straight: Points = None  # fixed award or 0 once claimed
    large_straight: Points = None
    yacht: Points = None
    total_score: NonNegativeInt = 0

    @field_validator("small_straight", "large_straight", "yacht")
    @classmethod
    def _validate_claim_value(cls, v: int | None, info: ValidationInfo) -> int | None:
        if v is None:
            return v
        award = Category(info.field_name).award
        if v not in (0, award):
            raise ValueError(f"{info.field_name} must be 0 or {award}, got {v}")
        return v

    @property
    def numbers_sum(self) -> int:
        return sum(n for n in self.numbers if n is not None)

    def value_of(self, category: Category) -> int | None:
        """Stored value for a category, None when not scored yet."""
        if category.is_number:
            return self.numbers[category.number_index]
        return getattr(self, category.value)

    @property
    def filled_categories(self) -> int:
        return sum(1 for category in Category if self.value_of(category) is not None)

    @property
    def is_complete(self) -> bool:
        return self.filled_categories == NUM_CATEGORIES

    def recomputed(self) -> Self:
        """Return a copy whose derived fields match the category fields."""
        numbers_sum = self.numbers_sum
        bonus = BONUS_SCORE if numbers_sum >= BONUS_LIMIT else 0
        lower_sum = sum(
            value
            for category in Category
            if not category.is_number and (value := self.value_of(category)) is not None
        )
        return self.model_copy(
            update={
                "left_to_get_bonus": max(0, BONUS_LIMIT - numbers_sum),
                "bonus": bonus,
                "total_score": numbers_sum + bonus + lower_sum,
            },
        )

    def with_score(self, score_input: ScoreInput) -> Self:
        """Return a recomputed copy with one category overwritten."""
        category = score_input.category
        if isinstance(score_input, ClaimInput):
            update: dict[str, object] = {category.value: score_input.points}
        elif category in NUMBER_CATEGORIES:
            numbers = list(self.numbers)
            numbers[category.number_index] = score_input.points
            update = {"numbers": tuple(numbers)}
        elif category in FREE_CATEGORIES:
            update = {category.value: score_input.points}
        else:  # pragma: no cover - every category is one of the three kinds
            raise ValueError(f"unhandled category {category.value}")
        return self.model_copy(update=update).recomputed()
