import pytest
from rich.cells import cell_len

from board.render import HELP_HINT, TABLE_HEIGHT, player_column_width, render_board, table_width
from scoring.enums import Category
from scoring.inputs import ClaimInput, PointsInput
from scoring.registry import PlayerRegistry
from scoring.scoreboard import Scoreboard


@pytest.fixture
def registry() -> PlayerRegistry:
    registry = PlayerRegistry()
    registry.add_player("Ann")
    return registry


class TestColumnWidths:
    def test_minimum_width(self):
        assert player_column_width("A", Scoreboard()) == 6

    def test_width_follows_name(self):
        assert player_column_width("Alexandra", Scoreboard()) == len("Alexandra") + 3

    def test_wide_characters_count_double(self):
        assert player_column_width("ボブ", Scoreboard()) == 7

    def test_width_follows_values(self):
        board = Scoreboard().with_score(PointsInput(category=Category.CHOICE, points=12345))
        assert player_column_width("A", board) == 8

    def test_table_width(self, registry):
        registry.add_player("Alexandra")
        assert table_width(registry) == 24 + 1 + 6 + 12 + 1

    def test_empty_table_width(self):
        assert table_width(PlayerRegistry()) == 26


class TestRenderBoard:
    def test_grid_size_without_hint(self, registry):
        lines = render_board(registry, 0, 0, hint=None)

        assert len(lines) == TABLE_HEIGHT + 1
        assert all(cell_len(line) == table_width(registry) for line in lines)

    def test_top_border(self, registry):
        lines = render_board(registry, 0, 0, hint=None)

        assert lines[0] == "┌" + "─" * 23 + "┬┬" + "─" * 5 + "┐"

    def test_bottom_border(self, registry):
        lines = render_board(registry, 0, 0, hint=None)

        assert lines[TABLE_HEIGHT] == "└" + "─" * 23 + "┴┴" + "─" * 5 + "┘"

    def test_section_rules(self, registry):
        lines = render_board(registry, 0, 0, hint=None)

        for row in (2, 9, 12, 19, 20):
            assert lines[row] == "├" + "─" * 23 + "┼┼" + "─" * 5 + "┤"

    def test_name_row(self, registry):
        lines = render_board(registry, 0, 0, hint=None)

        assert lines[1] == "│" + " " * 9 + "Name" + " " * 10 + "││ Ann │"

    def test_row_labels(self, registry):
        lines = render_board(registry, 0, 0, hint=None)

        assert "Ones   (1)" in lines[3]
        assert "Sixes  (6)" in lines[8]
        assert "Left to get bonus" in lines[10]
        assert "Bonus" in lines[11]
        assert "Choice     (c)" in lines[13]
        assert "Four of a kind (k)" in lines[15]
        assert "* YACHT *    (y)" in lines[18]
        assert "Total" in lines[21]

    def test_unset_values_are_blank(self, registry):
        lines = render_board(registry, 0, 0, hint=None)

        for row in (*range(3, 9), *range(13, 19)):
            assert lines[row][26:31] == " " * 5

    def test_derived_rows_for_fresh_board(self, registry):
        lines = render_board(registry, 0, 0, hint=None)

        assert lines[10][27:29] == "63"
        assert lines[11][27:28] == "0"
        assert lines[21][27:28] == "0"

    def test_scored_values(self, registry):
        registry.score("Ann", PointsInput(category=Category.THREES, points=9))
        registry.score("Ann", ClaimInput(category=Category.YACHT, claimed=True))
        registry.score("Ann", ClaimInput(category=Category.SMALL_STRAIGHT, claimed=False))

        lines = render_board(registry, 0, 0, hint=None)

        assert lines[5][27:28] == "9"
        assert lines[18][27:29] == "50"
        assert lines[16][27:28] == "0"
        assert lines[10][27:29] == "54"
        assert lines[21][27:29] == "59"

    def test_players_in_registration_order(self, registry):
        registry.add_player("Bob")

        lines = render_board(registry, 0, 0, hint=None)

        assert lines[1].index("Ann") < lines[1].index("Bob")
        assert lines[0].endswith("┬" + "─" * 5 + "┐")

    def test_wide_name_keeps_table_aligned(self):
        registry = PlayerRegistry()
        registry.add_player("ボブ")

        lines = render_board(registry, 0, 0, hint=None)

        assert {cell_len(line) for line in lines} == {table_width(registry)}

    def test_no_players(self):
        lines = render_board(PlayerRegistry(), 0, 0, hint=None)

        assert lines[0] == "┌" + "─" * 23 + "┬┐"
        assert lines[1].endswith("││")


class TestLayout:
    def test_table_is_centred(self, registry):
        lines = render_board(registry, 80, 30)

        left = (80 - 32) // 2
        top = 30 // 2 - 11
        assert len(lines) == 30
        assert lines[top].startswith(" " * left + "┌")
        assert all(line == "" for line in lines[:top])

    def test_help_hint_on_last_line(self, registry):
        lines = render_board(registry, 80, 30)

        assert lines[-1] == " " + HELP_HINT

    def test_small_terminal_grows_grid(self, registry):
        lines = render_board(registry, 10, 5)

        assert len(lines) == TABLE_HEIGHT + 2
        assert lines[0].startswith("┌")
        assert lines[-1] == " " + HELP_HINT

    def test_hint_wider_than_table_is_not_cut(self):
        lines = render_board(PlayerRegistry(), 0, 0)

        assert lines[-1] == " " + HELP_HINT
        assert len(lines[0]) == 26

    def test_layout_is_recomputed_each_call(self, registry):
        before = render_board(registry, 80, 30)
        registry.add_player("Alexandra")
        after = render_board(registry, 80, 30)

        assert before[4].index("┌") > after[4].index("┌")
