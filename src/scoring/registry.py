"""In-memory player registry: player name -> Scoreboard."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Annotated, Any

import structlog
from pydantic import BeforeValidator, StringConstraints, TypeAdapter

from scoring.exceptions import InvalidPlayerNameError, PlayerNotFoundError
from scoring.scoreboard import Scoreboard

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from scoring.inputs import ScoreInput

logger = structlog.get_logger()

PlayerName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _reject_colliding_names(document: object) -> object:
    """Names are stripped on load, so two keys must not strip to the same name."""
    if isinstance(document, dict):
        seen: set[object] = set()
        for key in document:
            name = key.strip() if isinstance(key, str) else key
            if name in seen:
                raise ValueError(f"duplicate player name {name!r}")
            seen.add(name)
    return document


_DOCUMENT_ADAPTER: TypeAdapter[dict[str, Scoreboard]] = TypeAdapter(
    Annotated[dict[PlayerName, Scoreboard], BeforeValidator(_reject_colliding_names)],
)


def _normalize_name(name: str) -> str:
    stripped = name.strip()
    if not stripped:
        raise InvalidPlayerNameError("Player name must not be empty")
    return stripped


class PlayerRegistry:
    """Scoreboards of every registered player.

    The registry is the only place scoreboards change. Scoreboards are frozen,
    so every write stores a new, already recomputed board; callers that hold a
    board from get() or iterate() keep a consistent snapshot.

    Mutating operations run under a lock so one registry can be shared by
    several front ends without interleaving writes.
    """

    def __init__(self, players: Mapping[str, Scoreboard] | None = None) -> None:
        self._players: dict[str, Scoreboard] = dict(players or {})
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._players

    def __iter__(self) -> Iterator[tuple[str, Scoreboard]]:
        return iter(self.iterate())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlayerRegistry):
            return NotImplemented
        return self._players == other._players

    __hash__ = None  # type: ignore[assignment]

    def is_empty(self) -> bool:
        return not self._players

    def names(self) -> list[str]:
        return list(self._players)

    def get(self, name: str) -> Scoreboard | None:
        return self._players.get(name.strip())

    def iterate(self) -> list[tuple[str, Scoreboard]]:
        """Snapshot of (name, scoreboard) pairs in insertion order."""
        return list(self._players.items())

    def add_player(self, name: str) -> Scoreboard:
        """Register a player with a fresh scoreboard.

        Re-adding an existing player replaces their scoreboard with a fresh
        one, which resets their score.
        """
        name = _normalize_name(name)
        scoreboard = Scoreboard()
        with self._lock:
            reset = name in self._players
            self._players[name] = scoreboard
        logger.info("player added", player=name, reset=reset)
        return scoreboard

    def remove_player(self, name: str) -> bool:
        """Remove a player. Returns False if no such player was registered."""
        name = name.strip()
        with self._lock:
            removed = self._players.pop(name, None) is not None
        if removed:
            logger.info("player removed", player=name)
        else:
            logger.warning("cannot remove unknown player", player=name)
        return removed

    def clear_all_scores(self) -> None:
        """Reset every player's scoreboard, keeping the set of players."""
        with self._lock:
            for name in self._players:
                self._players[name] = Scoreboard()
        logger.info("scores cleared", players=len(self._players))

    def score(self, player_name: str, score_input: ScoreInput) -> Scoreboard:
        """Apply a category write and return the player's new scoreboard.

        Raises PlayerNotFoundError when the player is not registered; the
        registry is left untouched in that case.
        """
        name = player_name.strip()
        with self._lock:
            current = self._players.get(name)
            if current is None:
                raise PlayerNotFoundError(player_name)
            updated = current.with_score(score_input)
            self._players[name] = updated
        logger.debug(
            "score applied",
            player=name,
            category=score_input.category,
            points=score_input.points,
            cleared=not score_input.is_complete,
            total_score=updated.total_score,
        )
        return updated

    def apply_score(self, player_name: str, score_input: ScoreInput) -> bool:
        """Apply a category write. Returns False if the player is unknown."""
        try:
            self.score(player_name, score_input)
        except PlayerNotFoundError:
            logger.warning("score for unknown player discarded", player=player_name, category=score_input.category)
            return False
        return True

    def serialize(self) -> dict[str, Any]:
        """Whole registry as a JSON-compatible document."""
        return {name: board.model_dump(mode="json") for name, board in self.iterate()}

    @classmethod
    def deserialize(cls, document: object) -> PlayerRegistry:
        """Build a registry from a document produced by serialize().

        Raises pydantic.ValidationError when the document is structurally
        invalid. Stored totals are re-derived from the category values; a
        stored total that disagrees is logged and replaced.
        """
        parsed = _DOCUMENT_ADAPTER.validate_python(document)
        players: dict[str, Scoreboard] = {}
        for name, stored in parsed.items():
            board = stored.recomputed()
            if board != stored:
                logger.warning(
                    "stored totals disagree with categories",
                    player=name,
                    stored_total=stored.total_score,
                    total_score=board.total_score,
                )
            players[name] = board
        return cls(players)
