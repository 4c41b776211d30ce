import pytest

from snakeboard.snake_utils import (
    DetRandom,
    corner_food,
    det_rand,
    deterministic_food,
    random_turn,
    redirect_snake,
)
from snakeboard.state import GameState, Snake, create_default_state


def _stars(state):
    return sum(row.count("*") for row in state.board)


def test_det_rand_zero_behaves_like_one():
    assert det_rand(0) == det_rand(1) == 0x80000057


def test_det_rand_even_values_shift():
    assert det_rand(2) == 1
    assert det_rand(4) == 2


def test_det_random_follows_det_rand():
    rng = DetRandom()
    first = rng.next()
    second = rng.next()
    assert first == det_rand(1)
    assert second == det_rand(first)
    assert rng.state == second


def test_det_random_stays_in_32_bits_and_nonzero():
    rng = DetRandom(12345)
    values = [rng.next() for _ in range(1000)]
    assert all(0 < v <= 0xFFFFFFFF for v in values)


def test_corner_food():
    state = create_default_state()
    assert corner_food(state) == (1, 1)
    assert state.get_board_at(1, 1) == "*"


def test_deterministic_food_places_on_blank_square():
    state = create_default_state()
    for _ in range(20):
        before = [list(row) for row in state.board]
        row, col = deterministic_food(state)
        assert before[row][col] == " "
        assert state.get_board_at(row, col) == "*"
        assert _stars(state) == sum(r.count("*") for r in before) + 1


def test_deterministic_food_full_board_raises():
    state = GameState(["###", "#*#", "###"], [])
    with pytest.raises(ValueError):
        deterministic_food(state)


def test_update_state_with_deterministic_food_keeps_food_count():
    state = create_default_state()
    state.set_board_at(2, 5, "*")
    state.update_state(deterministic_food)
    assert state.get_board_at(2, 5) == "D"
    assert _stars(state) == 2
    assert state.snakes[0].tail_col == 2


@pytest.mark.parametrize("key, head", [("w", "W"), ("a", "A"), ("s", "S"), ("d", "D")])
def test_redirect_snake(key, head):
    state = create_default_state()
    redirect_snake(state, key)
    assert state.get_board_at(2, 4) == head


def test_redirect_snake_ignores_other_keys():
    state = create_default_state()
    redirect_snake(state, "k")
    assert str(state) == str(create_default_state())


def test_redirect_dead_snake_does_nothing():
    state = create_default_state()
    state.snakes[0].live = False
    redirect_snake(state, "w")
    assert state.get_board_at(2, 4) == "D"


def test_random_turn_sets_perpendicular_body_char():
    state = create_default_state()
    state.snakes.append(Snake(tail_row=5, tail_col=2, head_row=5, head_col=4))
    state.set_board_at(5, 2, "d")
    state.set_board_at(5, 3, ">")
    state.set_board_at(5, 4, ">")
    for _ in range(10):
        state.set_board_at(5, 4, ">")
        random_turn(state, 1)
        assert state.get_board_at(5, 4) in {"v", "^"}
    assert state.get_board_at(2, 4) == "D"