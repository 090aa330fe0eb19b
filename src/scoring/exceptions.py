"""Typed domain exceptions for scorekeeping.

Everything the core rejects is a subclass of ScoringError. Front ends catch
ScoringError at their boundary and turn it into a message for the user; none
of these errors end the program.
"""

from pathlib import Path


class ScoringError(Exception):
    """Base exception for scorekeeping failures."""


class PlayerNotFoundError(ScoringError):
    """No scoreboard is registered under the given player name."""

    def __init__(self, player: str) -> None:
        self.player = player
        super().__init__(f"There is no player named '{player}'")


class InvalidPlayerNameError(ScoringError):
    """Player name is empty after trimming whitespace."""


class InvalidCategoryError(ScoringError):
    """Category alias is not in the alias table."""

    def __init__(self, alias: str) -> None:
        self.alias = alias
        super().__init__(f"Invalid category: '{alias}'")


class InvalidScoreValueError(ScoringError):
    """User-supplied score value is not a valid number for the category."""

    def __init__(self, text: str, reason: str = "not a number") -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid score '{text}': {reason}")


class ScoreFileError(ScoringError):
    """Score file could not be read, parsed, or written.

    Attributes:
        path: The file that was being loaded or saved.
        reason: Human-readable explanation of the failure.

    """

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
