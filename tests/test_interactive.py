import io

import pytest

from snakeboard.interactive import CLEAR_SCREEN, InteractiveGame, main, read_key
from snakeboard.state import create_default_state


def test_read_key_from_plain_stream():
    stream = io.StringIO("ws")
    assert read_key(stream) == "w"
    assert read_key(stream) == "s"
    assert read_key(stream) is None


def test_slower_adds_a_tenth():
    game = InteractiveGame(create_default_state(), 1.0)
    game.slower()
    assert game.interval == pytest.approx(1.1)


def test_faster_removes_a_tenth():
    game = InteractiveGame(create_default_state(), 1.0)
    game.faster()
    assert game.interval == pytest.approx(0.9)


def test_slower_then_faster_round_trip():
    game = InteractiveGame(create_default_state(), 0.5)
    game.slower()
    game.faster()
    assert game.interval == pytest.approx(0.5)


def test_faster_stops_at_a_tenth():
    game = InteractiveGame(create_default_state(), 0.1)
    game.faster()
    assert game.interval == pytest.approx(0.1)


def test_slower_rounds_up_to_whole_second():
    game = InteractiveGame(create_default_state(), 0.95)
    game.slower()
    assert game.interval == pytest.approx(1.0)


def test_bracket_keys_change_speed_not_board():
    game = InteractiveGame(create_default_state(), 1.0)
    game.handle_key("[")
    game.handle_key("[")
    game.handle_key("]")
    assert game.interval > 1.0
    assert str(game.state) == str(create_default_state())


def test_handle_key_steers_snake():
    game = InteractiveGame(create_default_state(), 1.0)
    game.handle_key("w")
    assert game.state.get_board_at(2, 4) == "W"


def test_step_moves_snake():
    game = InteractiveGame(create_default_state(), 1.0)
    assert game.step() == 1
    expected = create_default_state()
    expected.set_board_at(2, 2, " ")
    expected.set_board_at(2, 3, "d")
    expected.set_board_at(2, 4, ">")
    expected.set_board_at(2, 5, "D")
    assert str(game.state) == str(expected)


def test_step_after_redirect_goes_down():
    game = InteractiveGame(create_default_state(), 1.0)
    game.handle_key("s")
    game.step()
    assert game.state.get_board_at(3, 4) == "S"
    assert game.state.get_board_at(2, 4) == "v"
    assert (game.state.snakes[0].head_row, game.state.snakes[0].head_col) == (3, 4)


def test_step_with_no_live_snakes():
    state = create_default_state()
    state.snakes[0].live = False
    game = InteractiveGame(state, 1.0)
    assert game.step() == 0
    assert str(game.state) == str(create_default_state())


def test_main_usage_error(capsys):
    assert main(["-x"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main(["-i", str(tmp_path / "missing.snk")]) == 1
    assert capsys.readouterr().err


def test_main_runs_until_input_ends(tmp_path, monkeypatch, capsys):
    board = tmp_path / "board.snk"
    create_default_state().save_board(board)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["-i", str(board), "-d", "0.01"]) == 0
    assert capsys.readouterr().out.startswith(CLEAR_SCREEN)


def test_main_bad_delay_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["-d", "abc"]) == 0
    assert "Error parsing delay" in capsys.readouterr().err