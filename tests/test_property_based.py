import pytest
try:
    from hypothesis import given, strategies as st  # type: ignore
except ModuleNotFoundError:  # pragma: no cover - test infra
    pytest.skip("Hypothesis not installed", allow_module_level=True)

from tictactoe.board import Board, Mark, all_positions, deserialize_board, serialize_board
from tictactoe.game import Game
from tictactoe.ui import PlayerParseError, parse_game_players

positions = st.sampled_from(all_positions())
marks = st.sampled_from(list(Mark))


@given(positions, marks)
def test_set_then_get(pos, mark):
    board = Board()
    board.set_cell(*pos, mark)
    assert board.get_cell(*pos) is mark


@given(positions, marks, marks)
def test_first_write_wins(pos, m1, m2):
    board = Board()
    board.set_cell(*pos, m1)
    board.set_cell(*pos, m2)
    assert board.get_cell(*pos) is m1


@given(st.lists(st.tuples(positions, marks), max_size=20))
def test_board_string_round_trip(writes):
    board = Board()
    for pos, mark in writes:
        board.set_cell(*pos, mark)
    assert deserialize_board(serialize_board(board)) == board
    assert len(board) == len({pos for pos, _ in writes})


@given(st.integers(min_value=1, max_value=50))
def test_nth_mark_parity(n):
    game = Game()
    mark = None
    for _ in range(n):
        mark = game.next_mark()
    assert mark is (Mark.X if n % 2 == 1 else Mark.O)


@given(st.text().filter(lambda s: s not in ("1", "2", "3")))
def test_parse_failure_echoes_input(raw):
    with pytest.raises(PlayerParseError) as exc:
        parse_game_players(raw)
    assert str(exc.value) == f"Unable to parse game players from string index: {raw}"
