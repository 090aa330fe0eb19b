import pytest
from pydantic import ValidationError

from scoring.enums import Category
from scoring.exceptions import InvalidScoreValueError
from scoring.inputs import ClaimInput, PointsInput, from_value, inject, placeholder


class TestPointsInput:
    def test_placeholder_is_incomplete(self):
        score_input = placeholder(Category.CHOICE)

        assert score_input.category == Category.CHOICE
        assert score_input.points is None
        assert score_input.is_complete is False

    def test_rejects_claim_category(self):
        with pytest.raises(ValidationError, match="claimed, not scored with points"):
            PointsInput(category=Category.YACHT, points=50)

    def test_rejects_negative_points(self):
        with pytest.raises(ValidationError):
            PointsInput(category=Category.ONES, points=-3)


class TestClaimInput:
    def test_made_claim_is_worth_the_award(self):
        assert ClaimInput(category=Category.SMALL_STRAIGHT, claimed=True).points == 15
        assert ClaimInput(category=Category.LARGE_STRAIGHT, claimed=True).points == 30
        assert ClaimInput(category=Category.YACHT, claimed=True).points == 50

    def test_failed_claim_is_worth_zero(self):
        score_input = ClaimInput(category=Category.YACHT, claimed=False)

        assert score_input.points == 0
        assert score_input.is_complete is True

    def test_rejects_value_category(self):
        with pytest.raises(ValidationError, match="takes points, not a claim"):
            ClaimInput(category=Category.CHOICE, claimed=True)


class TestInject:
    def test_fills_placeholder(self):
        filled = inject(placeholder(Category.THREES), 9)

        assert filled == PointsInput(category=Category.THREES, points=9)
        assert filled.is_complete is True

    def test_does_not_mutate_placeholder(self):
        empty = placeholder(Category.THREES)
        inject(empty, 9)

        assert empty.points is None

    def test_leaves_filled_input_unchanged(self):
        filled = PointsInput(category=Category.FIVES, points=10)

        assert inject(filled, 25) is filled

    def test_leaves_claim_unchanged(self):
        claim = ClaimInput(category=Category.YACHT, claimed=True)

        assert inject(claim, 0) is claim


class TestFromValue:
    def test_value_category(self):
        assert from_value(Category.FULL_HOUSE, 28) == PointsInput(category=Category.FULL_HOUSE, points=28)

    @pytest.mark.parametrize(("value", "claimed"), [(1, True), (0, False)])
    def test_claim_category(self, value, claimed):
        assert from_value(Category.LARGE_STRAIGHT, value) == ClaimInput(
            category=Category.LARGE_STRAIGHT,
            claimed=claimed,
        )

    def test_claim_rejects_other_values(self):
        with pytest.raises(InvalidScoreValueError, match="takes 1 \\(made\\) or 0 \\(failed\\)"):
            from_value(Category.YACHT, 50)

    def test_rejects_negative(self):
        with pytest.raises(InvalidScoreValueError, match="cannot be negative"):
            from_value(Category.ONES, -1)
