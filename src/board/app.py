"""Full-screen scoreboard UI built on Textual.

BoardScreen owns the PlayerRegistry for the whole session and hands it to the
ScoreboardView that draws it. Every score change goes through
PlayerRegistry.apply_score; the screen only collects the (player, category,
value) triple through modal dialogs.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

import structlog
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widget import Widget

from board.render import render_board
from board.screens import ConfirmScreen, HelpScreen, PromptScreen
from scoring.aliases import parse_score_value
from scoring.enums import Category
from scoring.exceptions import InvalidPlayerNameError, InvalidScoreValueError, ScoreFileError
from scoring.inputs import ClaimInput, inject, placeholder
from scoring.persistence import load_registry, save_registry
from scoring.registry import PlayerRegistry
from shared.settings import AppSettings

if TYPE_CHECKING:
    from scoring.inputs import ScoreInput

logger = structlog.get_logger()


class ScoreboardView(Widget):
    """Draws the registry as a box-drawn table filling the widget."""

    DEFAULT_CSS = """
    ScoreboardView {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(self, registry: PlayerRegistry, *, id: str | None = None) -> None:  # noqa: A002
        super().__init__(id=id)
        self.registry = registry

    def render(self) -> Text:
        lines = render_board(self.registry, self.size.width, self.size.height)
        return Text("\n".join(lines), no_wrap=True, overflow="crop")


class BoardScreen(Screen[None]):
    """Main screen: scoreboard table plus single-key commands."""

    BINDINGS = [
        Binding("q", "app.quit", "Quit"),
        Binding("question_mark", "help", "Help"),
        Binding("a", "add_player", "Add player"),
        Binding("d", "delete_player", "Delete player"),
        Binding("C,shift+c", "clear_scores", "Clear scores"),
        Binding("w", "save", "Save"),
        Binding("o", "load", "Load"),
        *(
            Binding(category.hotkey, f"score('{category.value}')", category.label, show=False)
            for category in Category
        ),
    ]

    def __init__(self, registry: PlayerRegistry, settings: AppSettings) -> None:
        super().__init__()
        self.registry = registry
        self.settings = settings

    def compose(self) -> ComposeResult:
        yield ScoreboardView(self.registry, id="scoreboard")

    def refresh_board(self) -> None:
        view = self.query_one(ScoreboardView)
        view.registry = self.registry
        view.refresh()

    # --- players ---

    def action_help(self) -> None:
        self.app.push_screen(HelpScreen())

    def action_add_player(self) -> None:
        self.app.push_screen(PromptScreen("Add Player", "Input a player name to add"), self._add_player)

    def _add_player(self, name: str | None) -> None:
        if name is None:
            return
        try:
            self.registry.add_player(name)
        except InvalidPlayerNameError as exc:
            self.notify(str(exc), title="Cannot Add Player", severity="error")
            return
        self.refresh_board()

    def action_delete_player(self) -> None:
        self.app.push_screen(PromptScreen("Delete Player", "Input a player name to remove"), self._delete_player)

    def _delete_player(self, name: str | None) -> None:
        if name is None:
            return
        if not self.registry.remove_player(name):
            self.notify("There is no player to remove from the list", title="Cannot Delete Player", severity="error")
            return
        self.refresh_board()

    def action_clear_scores(self) -> None:
        self.registry.clear_all_scores()
        self.refresh_board()

    # --- scores ---

    def action_score(self, category_value: str) -> None:
        category = Category(category_value)
        if category.is_claim:
            prompt = PromptScreen(category.label, "Input the player name")
            self.app.push_screen(prompt, partial(self._confirm_claim, category))
        else:
            prompt = PromptScreen(category.label, "Input the score")
            self.app.push_screen(prompt, partial(self._got_points, category))

    def _got_points(self, category: Category, text: str | None) -> None:
        if text is None:
            return
        try:
            points = parse_score_value(text, allow_bool=False)
        except InvalidScoreValueError as exc:
            logger.info("score input aborted", category=category, reason=exc.reason)
            self.notify(str(exc), title=category.label, severity="warning")
            return
        score_input = inject(placeholder(category), points)
        prompt = PromptScreen(category.label, "Input the player name")
        self.app.push_screen(prompt, partial(self._apply_score, score_input))

    def _confirm_claim(self, category: Category, name: str | None) -> None:
        if name is None:
            return
        if name not in self.registry:
            self._report_unknown_player(name)
            return
        question = ConfirmScreen(category.label, f"Did {name.strip()} make {category.label}?")
        self.app.push_screen(question, partial(self._claim, category, name))

    def _claim(self, category: Category, name: str, claimed: bool | None) -> None:  # noqa: FBT001
        if claimed is None:
            return
        self._apply_score(ClaimInput(category=category, claimed=claimed), name)

    def _apply_score(self, score_input: ScoreInput, name: str | None) -> None:
        if name is None:
            return
        if not self.registry.apply_score(name, score_input):
            self._report_unknown_player(name)
            return
        self.refresh_board()
        board = self.registry.get(name)
        if board is not None and board.is_complete:
            self.notify(f"{name.strip()} has filled every category", title="Scorecard Complete")

    def _report_unknown_player(self, name: str) -> None:
        self.notify(f"There is no player named '{name.strip()}'", title="Cannot Update Score", severity="error")

    # --- files ---

    def action_save(self) -> None:
        prompt = PromptScreen("Save Scores", "Input the file to save to", value=str(self.settings.scores_file))
        self.app.push_screen(prompt, self._save)

    def _save(self, path: str | None) -> None:
        if not path or not path.strip():
            return
        try:
            save_registry(self.registry, path.strip())
        except ScoreFileError as exc:
            self.notify(str(exc), title="Cannot Save Scores", severity="error")
            return
        self.notify(f"Saved {len(self.registry)} players to {path.strip()}")

    def action_load(self) -> None:
        prompt = PromptScreen("Load Scores", "Input the file to load from", value=str(self.settings.scores_file))
        self.app.push_screen(prompt, self._load)

    def _load(self, path: str | None) -> None:
        if not path or not path.strip():
            return
        try:
            loaded = load_registry(path.strip())
        except ScoreFileError as exc:
            self.notify(str(exc), title="Cannot Load Scores", severity="error")
            return
        self.registry = loaded
        self.refresh_board()
        self.notify(f"Loaded {len(loaded)} players from {path.strip()}")


class ScoreboardApp(App[None]):
    """Yacht scorekeeper terminal application."""

    TITLE = "phasellus"

    def __init__(self, registry: PlayerRegistry | None = None, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._board = BoardScreen(registry if registry is not None else PlayerRegistry(), settings or AppSettings())

    @property
    def registry(self) -> PlayerRegistry:
        return self._board.registry

    def on_mount(self) -> None:
        self.push_screen(self._board)
