"""Tests for playroom.snakes (rolls, turn order, messages)."""

import pytest

from playroom.board import LADDERS, SNAKES
from playroom.snakes import (
    START_MESSAGE,
    SnakeLadderState,
    apply_roll,
    new_game,
    plan_roll,
)


def _at(p0: int, p1: int = 1, active: int = 0) -> SnakeLadderState:
    return SnakeLadderState(positions=(p0, p1), active_player=active)


# ── new_game ─────────────────────────────────────────────────────────

def test_initial_state():
    state = new_game()
    assert state.positions == (1, 1)
    assert state.active_player == 0
    assert state.last_roll is None
    assert state.winner is None
    assert state.message == START_MESSAGE == "Player 1's turn! Roll the dice 🎲"


# ── plan_roll ────────────────────────────────────────────────────────

def test_plain_move():
    result = plan_roll(0, 2, 1)
    assert result.landing == 3
    assert result.final == 3
    assert not result.hopped


def test_first_roll_hits_ladder_2():
    result = plan_roll(0, 1, 1)
    assert result.landing == 2
    assert result.final == 38
    assert result.path == (2, 38)


def test_overshoot_stays_put():
    result = plan_roll(0, 95, 6)
    assert result.overshoot
    assert result.final == 95
    assert not result.extra_turn


def test_exact_100_wins():
    result = plan_roll(1, 95, 5)
    assert result.final == 100
    assert result.won
    assert not result.extra_turn


# ── apply_roll: movement ─────────────────────────────────────────────

def test_ladder_from_start():
    state = apply_roll(new_game(), 1)
    assert state.positions == (38, 1)
    assert state.last_roll == 1


def test_snake_16_to_6():
    state = apply_roll(_at(10), 6)
    assert state.positions == (6, 1)


def test_overshoot_forfeits_and_passes_turn():
    state = apply_roll(_at(95), 6)
    assert state.positions == (95, 1)
    assert state.active_player == 1
    assert state.winner is None
    assert state.message == (
        "Player 1 needs an exact roll to reach 100. Player 2's turn! Roll the dice 🎲"
    )


def test_overshoot_for_every_roll_leaves_position():
    for start in range(95, 100):
        if start in SNAKES:
            continue
        for roll in range(1, 7):
            if start + roll <= 100:
                continue
            state = apply_roll(_at(start), roll)
            assert state.positions[0] == start


def test_roll_only_moves_active_player():
    state = apply_roll(_at(10, 40, active=1), 3)
    assert state.positions == (10, 43)


def test_final_position_never_a_jump_square():
    for start in range(1, 100):
        if start in SNAKES or start in LADDERS:
            continue
        for roll in range(1, 7):
            pos = apply_roll(_at(start), roll).positions[0]
            assert pos not in SNAKES
            assert pos not in LADDERS


# ── apply_roll: turn order ───────────────────────────────────────────

def test_normal_roll_passes_turn():
    state = apply_roll(new_game(), 3)
    assert state.positions == (4, 1)
    assert state.active_player == 1
    assert state.message == "Player 2's turn! Roll the dice 🎲"


def test_six_keeps_turn():
    state = apply_roll(new_game(), 6)
    assert state.positions == (14, 1)  # 1 + 6 = 7, ladder to 14
    assert state.active_player == 0
    assert state.message == "Player 1 rolled a 6! Go again."


def test_six_keeps_turn_for_second_player():
    state = apply_roll(_at(10, 30, active=1), 6)
    assert state.positions == (10, 44)  # 30 + 6 = 36, ladder to 44
    assert state.active_player == 1
    assert state.message == "Player 2 rolled a 6! Go again."


def test_turn_alternates():
    state = new_game()
    state = apply_roll(state, 2)
    assert state.active_player == 1
    state = apply_roll(state, 2)
    assert state.active_player == 0
    assert state.message == "Player 1's turn! Roll the dice 🎲"


# ── apply_roll: winning ──────────────────────────────────────────────

def test_exact_landing_wins():
    state = apply_roll(_at(95), 5)
    assert state.positions == (100, 1)
    assert state.winner == 0
    assert state.is_over
    assert state.message == "Player 1 wins! 🏆"


def test_winning_with_a_six_does_not_grant_extra_turn():
    state = apply_roll(_at(60, 94, active=1), 6)
    assert state.winner == 1
    assert state.last_move.extra_turn is False
    assert state.message == "Player 2 wins! 🏆"


def test_roll_after_win_is_no_op():
    won = apply_roll(_at(95), 5)
    assert apply_roll(won, 3) is won


# ── contract violations ──────────────────────────────────────────────

@pytest.mark.parametrize("roll", [0, 7, -1])
def test_out_of_range_roll_raises(roll):
    with pytest.raises(ValueError):
        apply_roll(new_game(), roll)


def test_non_integer_roll_raises():
    with pytest.raises(ValueError):
        apply_roll(new_game(), 2.5)
    with pytest.raises(ValueError):
        apply_roll(new_game(), True)


def test_apply_roll_is_deterministic():
    assert apply_roll(_at(20), 2) == apply_roll(_at(20), 2)


# ── state construction ───────────────────────────────────────────────

def test_pawn_on_100_means_game_over():
    state = SnakeLadderState(positions=(100, 40), active_player=1)
    assert state.winner == 0
    assert state.is_over
    assert state.message == "Player 1 wins! 🏆"
    assert apply_roll(state, 3) is state


def test_second_pawn_on_100_wins_for_player_2():
    state = SnakeLadderState(positions=(40, 100))
    assert state.winner == 1


@pytest.mark.parametrize("positions", [(0, 1), (1, 101), (1,), (1, 1, 1), (1.5, 1)])
def test_bad_positions_rejected(positions):
    with pytest.raises(ValueError):
        SnakeLadderState(positions=positions)


@pytest.mark.parametrize("square", [2, 16, 99])
def test_pawn_cannot_rest_on_a_jump_square(square):
    with pytest.raises(ValueError, match="snake or ladder"):
        SnakeLadderState(positions=(square, 1))


def test_bad_active_player_rejected():
    with pytest.raises(ValueError):
        SnakeLadderState(active_player=2)


def test_winner_must_be_on_100():
    with pytest.raises(ValueError):
        SnakeLadderState(positions=(50, 1), winner=0)


def test_states_are_hashable():
    state = apply_roll(new_game(), 1)
    assert isinstance(state.last_move.path, tuple)
    assert hash(state) == hash(apply_roll(new_game(), 1))
