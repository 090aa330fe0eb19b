"""Interactive line-edited shell for keeping score without the full-screen board."""

from __future__ import annotations

import cmd
from typing import TYPE_CHECKING, TextIO

import structlog

from board.render import render_board
from console.commands import (
    USAGE,
    AddPlayer,
    ApplyScore,
    ClearScores,
    CommandError,
    ListPlayers,
    LoadScores,
    Quit,
    RemovePlayer,
    SaveScores,
    ShowBoard,
    parse_command,
)
from scoring.aliases import aliases_for
from scoring.enums import Category
from scoring.exceptions import PlayerNotFoundError, ScoringError
from scoring.persistence import load_registry, save_registry
from scoring.scoreboard import NUM_CATEGORIES

if TYPE_CHECKING:
    from console.commands import Command
    from scoring.registry import PlayerRegistry
    from shared.settings import AppSettings

logger = structlog.get_logger()


class ScoreShell(cmd.Cmd):
    """Read-eval loop over console.commands.

    Every error is printed and the loop continues; only `quit` or EOF end it.
    """

    intro = "phasellus: Yacht scorekeeper. Type `help` for the list of commands."

    def __init__(
        self,
        registry: PlayerRegistry,
        settings: AppSettings,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        self.registry = registry
        self.settings = settings
        self.prompt = settings.prompt
        if stdin is not None:
            self.use_rawinput = False

    def _say(self, text: str = "") -> None:
        self.stdout.write(f"{text}\n")

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> bool:
        try:
            command = parse_command(line)
        except (CommandError, ScoringError) as exc:
            logger.debug("rejected command", line=line, error=str(exc))
            self._say(str(exc))
            return False
        return self.execute(command)

    def do_EOF(self, _arg: str) -> bool:  # noqa: N802
        self._say()
        return True

    def do_help(self, arg: str) -> None:
        verb = arg.strip().lower()
        if verb in USAGE:
            self._say(f"Usage: {USAGE[verb]}")
            return
        self._say("Commands:")
        for usage in USAGE.values():
            self._say(f"  {usage}")
        self._say()
        self._say("Categories (case-insensitive):")
        for category in Category:
            self._say(f"  {category.label:<16} {', '.join(aliases_for(category))}")
        self._say()
        self._say("Values are whole numbers; true/t and false/f count as 1 and 0.")
        self._say("Straights and yacht take 1 (made) or 0 (failed).")

    def execute(self, command: Command) -> bool:
        """Run one parsed command. Returns True when the shell should exit."""
        if isinstance(command, Quit):
            return True
        if isinstance(command, AddPlayer):
            self._add_player(command)
        elif isinstance(command, RemovePlayer):
            if not self.registry.remove_player(command.name):
                self._say("There is no player to remove from the list")
        elif isinstance(command, ApplyScore):
            self._apply_score(command)
        elif isinstance(command, ClearScores):
            self.registry.clear_all_scores()
            self._say("All scores cleared")
        elif isinstance(command, ShowBoard):
            for line in render_board(self.registry, width=0, height=0, hint=None):
                self._say(line)
        elif isinstance(command, ListPlayers):
            self._list_players()
        elif isinstance(command, SaveScores):
            self._save(command)
        elif isinstance(command, LoadScores):
            self._load(command)
        return False

    def _add_player(self, command: AddPlayer) -> None:
        try:
            reset = command.name.strip() in self.registry
            self.registry.add_player(command.name)
        except ScoringError as exc:
            self._say(str(exc))
            return
        if reset:
            self._say(f"Scores of {command.name.strip()} were reset")

    def _apply_score(self, command: ApplyScore) -> None:
        try:
            board = self.registry.score(command.name, command.score_input)
        except PlayerNotFoundError as exc:
            self._say(str(exc))
            return
        name = command.name.strip()
        if not command.score_input.is_complete:
            self._say(f"{name}: {command.score_input.category.label} cleared")
        self._say(f"{name}: total {board.total_score} (bonus {board.bonus})")
        if board.is_complete:
            self._say(f"{name} has filled every category")

    def _list_players(self) -> None:
        if self.registry.is_empty():
            self._say("No players")
            return
        for name, board in self.registry:
            self._say(f"{name}: {board.total_score} ({board.filled_categories}/{NUM_CATEGORIES} filled)")

    def _save(self, command: SaveScores) -> None:
        path = command.path or self.settings.scores_file
        try:
            save_registry(self.registry, path)
        except ScoringError as exc:
            self._say(str(exc))
            return
        self._say(f"Saved {len(self.registry)} players to {path}")

    def _load(self, command: LoadScores) -> None:
        path = command.path or self.settings.scores_file
        try:
            loaded = load_registry(path)
        except ScoringError as exc:
            self._say(str(exc))
            return
        self.registry = loaded
        self._say(f"Loaded {len(loaded)} players from {path}")
