"""
String enum definitions for Yacht scoring categories.
"""

from enum import Enum, StrEnum


class CategoryKind(str, Enum):
    """How a category's stored value is produced."""

    NUMBER = "number"  # upper section, counts toward the bonus
    FREE = "free"  # free-form point value entered by the user
    CLAIM = "claim"  # fixed award or zero


class Category(StrEnum):
    """The twelve scoring slots, in scoreboard order."""

    ONES = "ones"
    TWOS = "twos"
    THREES = "threes"
    FOURS = "fours"
    FIVES = "fives"
    SIXES = "sixes"
    CHOICE = "choice"
    FULL_HOUSE = "full_house"
    FOUR_OF_KIND = "four_of_kind"
    SMALL_STRAIGHT = "small_straight"
    LARGE_STRAIGHT = "large_straight"
    YACHT = "yacht"

    @property
    def kind(self) -> CategoryKind:
        if self in NUMBER_CATEGORIES:
            return CategoryKind.NUMBER
        if self in CLAIM_AWARDS:
            return CategoryKind.CLAIM
        return CategoryKind.FREE

    @property
    def is_number(self) -> bool:
        return self.kind == CategoryKind.NUMBER

    @property
    def is_claim(self) -> bool:
        return self.kind == CategoryKind.CLAIM

    @property
    def takes_points(self) -> bool:
        """True for the nine categories that carry a user-entered value."""
        return not self.is_claim

    @property
    def number_index(self) -> int:
        """Slot in Scoreboard.numbers (0 for ones through 5 for sixes)."""
        if not self.is_number:
            raise ValueError(f"{self.value} is not a number category")
        return NUMBER_CATEGORIES.index(self)

    @property
    def award(self) -> int:
        """Fixed score for a successful claim."""
        if not self.is_claim:
            raise ValueError(f"{self.value} is not a claim category")
        return CLAIM_AWARDS[self]

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]

    @property
    def hotkey(self) -> str:
        return CATEGORY_HOTKEYS[self]


NUMBER_CATEGORIES: tuple[Category, ...] = (
    Category.ONES,
    Category.TWOS,
    Category.THREES,
    Category.FOURS,
    Category.FIVES,
    Category.SIXES,
)

FREE_CATEGORIES: tuple[Category, ...] = (
    Category.CHOICE,
    Category.FULL_HOUSE,
    Category.FOUR_OF_KIND,
)

SMALL_STRAIGHT_SCORE = 15
LARGE_STRAIGHT_SCORE = 30
YACHT_SCORE = 50

CLAIM_AWARDS: dict[Category, int] = {
    Category.SMALL_STRAIGHT: SMALL_STRAIGHT_SCORE,
    Category.LARGE_STRAIGHT: LARGE_STRAIGHT_SCORE,
    Category.YACHT: YACHT_SCORE,
}

CATEGORY_LABELS: dict[Category, str] = {
    Category.ONES: "Ones",
    Category.TWOS: "Twos",
    Category.THREES: "Threes",
    Category.FOURS: "Fours",
    Category.FIVES: "Fives",
    Category.SIXES: "Sixes",
    Category.CHOICE: "Choice",
    Category.FULL_HOUSE: "Full House",
    Category.FOUR_OF_KIND: "Four of a Kind",
    Category.SMALL_STRAIGHT: "Small Straight",
    Category.LARGE_STRAIGHT: "Large Straight",
    Category.YACHT: "* YACHT *",
}

# keys used by the board screen, also shown next to the row labels
CATEGORY_HOTKEYS: dict[Category, str] = {
    Category.ONES: "1",
    Category.TWOS: "2",
    Category.THREES: "3",
    Category.FOURS: "4",
    Category.FIVES: "5",
    Category.SIXES: "6",
    Category.CHOICE: "c",
    Category.FULL_HOUSE: "h",
    Category.FOUR_OF_KIND: "k",
    Category.SMALL_STRAIGHT: "s",
    Category.LARGE_STRAIGHT: "l",
    Category.YACHT: "y",
}
