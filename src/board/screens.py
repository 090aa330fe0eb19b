"""Modal dialogs used by the board screen."""

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from scoring.enums import Category

DIALOG_CSS = """
{name} {{
    align: center middle;
}}

{name} > Vertical {{
    width: 50;
    height: auto;
    padding: 1 2;
    border: thick $accent;
    background: $surface;
}}

{name} .dialog-title {{
    text-style: bold;
    margin-bottom: 1;
}}

{name} .dialog-buttons {{
    height: auto;
    margin-top: 1;
}}
"""


class PromptScreen(ModalScreen[str | None]):
    """Ask for one line of text. Dismisses with the text, or None on cancel."""

    DEFAULT_CSS = DIALOG_CSS.format(name="PromptScreen")

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, title: str, message: str, value: str = "") -> None:
        super().__init__()
        self.title_text = title
        self.message = message
        self.initial_value = value

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self.title_text, classes="dialog-title", markup=False)
            yield Label(self.message, markup=False)
            yield Input(value=self.initial_value, id="prompt-input")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Ok", id="ok", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one(Input).focus()

    @on(Input.Submitted)
    def _submit(self, event: Input.Submitted) -> None:
        self.dismiss(event.value)

    @on(Button.Pressed, "#ok")
    def _ok(self) -> None:
        self.dismiss(self.query_one(Input).value)

    @on(Button.Pressed, "#cancel")
    def _cancel_pressed(self) -> None:
        self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class ConfirmScreen(ModalScreen[bool | None]):
    """Yes/no question. Dismisses with True, False, or None on Esc."""

    DEFAULT_CSS = DIALOG_CSS.format(name="ConfirmScreen")

    BINDINGS = [
        Binding("y", "answer(True)", "Yes"),
        Binding("n", "answer(False)", "No"),
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, title: str, question: str) -> None:
        super().__init__()
        self.title_text = title
        self.question = question

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self.title_text, classes="dialog-title", markup=False)
            yield Label(self.question, markup=False)
            with Horizontal(classes="dialog-buttons"):
                yield Button("Yes (y)", id="yes", variant="primary")
                yield Button("No (n)", id="no")
                yield Button("Cancel", id="cancel")

    @on(Button.Pressed, "#yes")
    def _yes(self) -> None:
        self.dismiss(True)

    @on(Button.Pressed, "#no")
    def _no(self) -> None:
        self.dismiss(False)

    @on(Button.Pressed, "#cancel")
    def _cancel_pressed(self) -> None:
        self.dismiss(None)

    def action_answer(self, answer: bool) -> None:  # noqa: FBT001
        self.dismiss(answer)

    def action_cancel(self) -> None:
        self.dismiss(None)


class HelpScreen(ModalScreen[None]):
    """Key binding reference."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    #help-panel {
        width: 50;
        height: auto;
        padding: 1 2;
        border: thick $accent;
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("q", "dismiss", "Close"),
        Binding("escape", "dismiss", "Close"),
        Binding("question_mark", "dismiss", "Close"),
    ]

    def compose(self) -> ComposeResult:
        player_keys = [
            ("a", "add player"),
            ("d", "delete player"),
            ("w", "save scores to a file"),
            ("o", "load scores from a file"),
            ("q", "quit this program"),
        ]
        score_keys = [
            ("1 ~ 6", "add score at ones, ..., sixes"),
            *(
                (category.hotkey, f"add score at {category.label.lower()}")
                for category in Category
                if not category.is_number
            ),
            ("C", "clear all scores"),
        ]
        text = "[bold]Keybindings for phasellus[/bold]\n\n"
        text += "<Player Related Keybindings>\n"
        for key, desc in player_keys:
            text += f"  {key}: {desc}\n"
        text += "\n<Score Related Keybindings>\n"
        for key, desc in score_keys:
            text += f"  {key}: {desc}\n"
        text += "\n[dim]Press `q` to close this help message[/dim]"
        yield Center(Static(text, id="help-panel"))

