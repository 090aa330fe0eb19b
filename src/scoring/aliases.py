"""Text parsing for category names and score values typed by the user."""

from scoring.enums import Category
from scoring.exceptions import InvalidCategoryError, InvalidScoreValueError

CATEGORY_ALIASES: dict[str, Category] = {
    "1": Category.ONES,
    "1s": Category.ONES,
    "ones": Category.ONES,
    "2": Category.TWOS,
    "2s": Category.TWOS,
    "twos": Category.TWOS,
    "3": Category.THREES,
    "3s": Category.THREES,
    "threes": Category.THREES,
    "4": Category.FOURS,
    "4s": Category.FOURS,
    "fours": Category.FOURS,
    "5": Category.FIVES,
    "5s": Category.FIVES,
    "fives": Category.FIVES,
    "6": Category.SIXES,
    "6s": Category.SIXES,
    "sixes": Category.SIXES,
    "c": Category.CHOICE,
    "ch": Category.CHOICE,
    "choice": Category.CHOICE,
    "h": Category.FULL_HOUSE,
    "fh": Category.FULL_HOUSE,
    "fullhouse": Category.FULL_HOUSE,
    "full_house": Category.FULL_HOUSE,
    "k": Category.FOUR_OF_KIND,
    "4k": Category.FOUR_OF_KIND,
    "fk": Category.FOUR_OF_KIND,
    "fourofakind": Category.FOUR_OF_KIND,
    "four_of_kind": Category.FOUR_OF_KIND,
    "s": Category.SMALL_STRAIGHT,
    "ss": Category.SMALL_STRAIGHT,
    "smallstraight": Category.SMALL_STRAIGHT,
    "small_straight": Category.SMALL_STRAIGHT,
    "l": Category.LARGE_STRAIGHT,
    "ls": Category.LARGE_STRAIGHT,
    "largestraight": Category.LARGE_STRAIGHT,
    "large_straight": Category.LARGE_STRAIGHT,
    "y": Category.YACHT,
    "yacht": Category.YACHT,
}

_TRUE_WORDS = {"true", "t"}
_FALSE_WORDS = {"false", "f"}


def parse_category(text: str) -> Category:
    """Resolve a case-insensitive category alias."""
    category = CATEGORY_ALIASES.get(text.strip().lower())
    if category is None:
        raise InvalidCategoryError(text)
    return category


def parse_score_value(text: str, *, allow_bool: bool = True) -> int:
    """Parse a non-negative integer score.

    With allow_bool, "true"/"t" and "false"/"f" (any case) are accepted as 1
    and 0, so claim categories can be entered as booleans.
    """
    stripped = text.strip()
    lowered = stripped.lower()
    if allow_bool and lowered in _TRUE_WORDS:
        return 1
    if allow_bool and lowered in _FALSE_WORDS:
        return 0
    if not stripped.isascii() or not stripped.isdigit():
        raise InvalidScoreValueError(text)
    return int(stripped)


def aliases_for(category: Category) -> list[str]:
    """All aliases of a category, in table order (used by help output)."""
    return [alias for alias, target in CATEGORY_ALIASES.items() if target is category]
