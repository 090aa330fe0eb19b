"""
Command parsing for the line-oriented shell.

Each input line becomes one typed command object; execution lives in
console.shell. Parsing never touches the registry.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from scoring.aliases import parse_category, parse_score_value
from scoring.inputs import from_value, placeholder

if TYPE_CHECKING:
    from collections.abc import Callable

    from scoring.inputs import ScoreInput


class CommandError(Exception):
    """Input line is not a well-formed command."""


@dataclass(frozen=True)
class AddPlayer:
    name: str


@dataclass(frozen=True)
class RemovePlayer:
    name: str


@dataclass(frozen=True)
class ApplyScore:
    name: str
    score_input: ScoreInput


@dataclass(frozen=True)
class ClearScores:
    pass


@dataclass(frozen=True)
class ShowBoard:
    pass


@dataclass(frozen=True)
class ListPlayers:
    pass


@dataclass(frozen=True)
class SaveScores:
    path: Path | None = None


@dataclass(frozen=True)
class LoadScores:
    path: Path | None = None


@dataclass(frozen=True)
class Quit:
    pass


Command = (
    AddPlayer | RemovePlayer | ApplyScore | ClearScores | ShowBoard | ListPlayers | SaveScores | LoadScores | Quit
)

USAGE: dict[str, str] = {
    "add": "add NAME",
    "del": "del NAME",
    "score": "score NAME CATEGORY VALUE",
    "erase": "erase NAME CATEGORY",
    "clear": "clear",
    "show": "show",
    "players": "players",
    "save": "save [PATH]",
    "load": "load [PATH]",
    "quit": "quit",
}

_VERB_ALIASES = {
    "remove": "del",
    "delete": "del",
    "rm": "del",
    "exit": "quit",
    "q": "quit",
    "ls": "players",
}


def _split(line: str) -> list[str]:
    try:
        return shlex.split(line)
    except ValueError as exc:
        raise CommandError(f"Cannot parse line: {exc}") from exc


def _expect(verb: str, args: list[str], minimum: int, maximum: int) -> None:
    if not minimum <= len(args) <= maximum:
        raise CommandError(f"Usage: {USAGE[verb]}")


def _parse_add(args: list[str]) -> AddPlayer:
    _expect("add", args, 1, 1)
    return AddPlayer(name=args[0])


def _parse_del(args: list[str]) -> RemovePlayer:
    _expect("del", args, 1, 1)
    return RemovePlayer(name=args[0])


def parse_score(args: list[str]) -> ApplyScore:
    """Parse the arguments of `score NAME CATEGORY VALUE`.

    Raises InvalidCategoryError or InvalidScoreValueError for a bad category
    or value.
    """
    _expect("score", args, 3, 3)
    name, alias, value = args
    category = parse_category(alias)
    return ApplyScore(name=name, score_input=from_value(category, parse_score_value(value)))


def parse_erase(args: list[str]) -> ApplyScore:
    """Parse `erase NAME CATEGORY`, which clears a value category."""
    _expect("erase", args, 2, 2)
    name, alias = args
    category = parse_category(alias)
    if category.is_claim:
        raise CommandError(f"{category.label} cannot be erased; score it as 0 instead")
    return ApplyScore(name=name, score_input=placeholder(category))


def _no_args(verb: str, command: Command) -> Callable[[list[str]], Command]:
    def parse(args: list[str]) -> Command:
        _expect(verb, args, 0, 0)
        return command

    return parse


def _parse_save(args: list[str]) -> SaveScores:
    _expect("save", args, 0, 1)
    return SaveScores(path=Path(args[0]) if args else None)


def _parse_load(args: list[str]) -> LoadScores:
    _expect("load", args, 0, 1)
    return LoadScores(path=Path(args[0]) if args else None)


_PARSERS: dict[str, Callable[[list[str]], Command]] = {
    "add": _parse_add,
    "del": _parse_del,
    "score": parse_score,
    "erase": parse_erase,
    "clear": _no_args("clear", ClearScores()),
    "show": _no_args("show", ShowBoard()),
    "players": _no_args("players", ListPlayers()),
    "save": _parse_save,
    "load": _parse_load,
    "quit": lambda _args: Quit(),
}


def parse_command(line: str) -> Command:
    """Parse one shell line.

    Raises CommandError for unknown verbs or wrong argument counts, and the
    scoring errors for bad categories or values.
    """
    words = _split(line)
    if not words:
        raise CommandError("Empty command")
    verb = words[0].lower()
    parser = _PARSERS.get(_VERB_ALIASES.get(verb, verb))
    if parser is None:
        raise CommandError(f"Unknown command: '{words[0]}'")
    return parser(words[1:])
