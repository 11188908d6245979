"""Unit tests for turn resolution in apply_action."""

import random
from dataclasses import replace

import pytest
from unotable.engine import Color, DrawCard, PlayCards, apply_action, next_seat
from unotable.engine.card import (
    DRAW_TWO,
    REVERSE,
    SKIP,
    WILD,
    WILD_DRAW_FOUR,
    action_card,
    number_card,
    wild_card,
)


def _filler(n: int, color: Color = Color.YELLOW):
    return [number_card(color, 1 + i % 9) for i in range(n)]


def test_stack_of_two_colors(make_state) -> None:
    blue, green = number_card(Color.BLUE, 7), number_card(Color.GREEN, 7)
    keep = number_card(Color.RED, 2)
    state = make_state([[blue, green, keep]], [number_card(Color.RED, 7)])
    new = apply_action(state, 0, PlayCards((blue, green)))
    assert new.active_color == Color.GREEN
    assert new.discard_pile[-2:] == (blue, green)
    assert new.hands[0] == (keep,)
    assert new.current_seat == next_seat(0, 1) == 3
    assert new.direction == 1


def test_skip_passes_over_one_seat(make_state) -> None:
    skip = action_card(Color.RED, SKIP)
    state = make_state([[skip, number_card(Color.RED, 2)]], [number_card(Color.RED, 7)])
    new = apply_action(state, 0, PlayCards((skip,)))
    assert new.current_seat == 1
    assert "Bot 4 is skipped" in new.history
    assert new.message == "Player 1 played skip! Bot 4 is skipped"


def test_stacked_skips_pass_one_seat(make_state) -> None:
    s1, s2 = action_card(Color.RED, SKIP), action_card(Color.BLUE, SKIP)
    state = make_state([[s1, s2, number_card(Color.RED, 2)]], [number_card(Color.RED, 7)])
    new = apply_action(state, 0, PlayCards((s1, s2)))
    assert new.current_seat == 1
    assert new.active_color == Color.BLUE


def test_reverse_flips_direction(make_state) -> None:
    rev = action_card(Color.RED, REVERSE)
    state = make_state([[rev, number_card(Color.RED, 2)]], [number_card(Color.RED, 7)])
    new = apply_action(state, 0, PlayCards((rev,)))
    assert new.direction == -1
    assert new.current_seat == next_seat(0, -1) == 2


def test_reverse_by_opponent(make_state) -> None:
    rev = action_card(Color.RED, REVERSE)
    state = make_state(
        [[], [rev, number_card(Color.RED, 2)]],
        [number_card(Color.RED, 7)],
        current_seat=1,
        direction=-1,
    )
    new = apply_action(state, 1, PlayCards((rev,)))
    assert new.direction == 1
    assert new.current_seat == 2


def test_draw_two_stack(make_state) -> None:
    d1, d2 = action_card(Color.RED, DRAW_TWO), action_card(Color.GREEN, DRAW_TWO)
    pile = _filler(10)
    state = make_state(
        [[d1, d2, number_card(Color.RED, 2)], _filler(3)],
        [number_card(Color.RED, 7), action_card(Color.BLUE, DRAW_TWO)],
        draw=pile,
        active_color=Color.RED,
    )
    new = apply_action(state, 0, PlayCards((d1, d2)))
    assert len(new.hands[3]) == 4
    assert new.hands[3] == tuple(reversed(pile[-4:]))
    assert len(new.draw_pile) == 6
    assert new.current_seat == 1
    assert "Bot 4 drew 4 cards (penalty)" in new.history


def test_wild_draw_four_chosen_color(make_state) -> None:
    wd4 = wild_card(WILD_DRAW_FOUR)
    state = make_state(
        [[wd4, number_card(Color.RED, 2)]],
        [number_card(Color.RED, 7)],
        draw=_filler(8),
    )
    new = apply_action(state, 0, PlayCards((wd4,), chosen_color=Color.YELLOW))
    assert new.active_color == Color.YELLOW
    assert len(new.hands[3]) == 4
    assert new.current_seat == next_seat(3, 1) == 1
    assert "Player 1 played wild_draw_four (chose yellow)" in new.history


def test_wild_requires_color(make_state) -> None:
    wild = wild_card(WILD)
    state = make_state([[wild, number_card(Color.RED, 2)]], [number_card(Color.RED, 7)])
    with pytest.raises(ValueError):
        apply_action(state, 0, PlayCards((wild,)))


def test_illegal_play_raises(make_state) -> None:
    blue = number_card(Color.BLUE, 2)
    state = make_state([[blue]], [number_card(Color.RED, 7)])
    with pytest.raises(ValueError):
        apply_action(state, 0, PlayCards((blue,)))


def test_card_not_in_hand_raises(make_state) -> None:
    state = make_state([[number_card(Color.RED, 1)]], [number_card(Color.RED, 7)])
    with pytest.raises(ValueError):
        apply_action(state, 0, PlayCards((number_card(Color.RED, 1),)))


def test_out_of_turn_raises(make_state) -> None:
    red = number_card(Color.RED, 1)
    state = make_state([[red], [red]], [number_card(Color.RED, 7)], current_seat=0)
    with pytest.raises(ValueError):
        apply_action(state, 1, DrawCard())


def test_removes_exact_copy(make_state) -> None:
    a, b = number_card(Color.RED, 5), number_card(Color.RED, 5)
    state = make_state([[a, b]], [number_card(Color.RED, 7)])
    new = apply_action(state, 0, PlayCards((b,)))
    assert new.hands[0] == (a,)
    assert new.hands[0][0].id == a.id


def test_winning_card_effects_not_applied(make_state) -> None:
    d2 = action_card(Color.RED, DRAW_TWO)
    state = make_state([[d2], _filler(2)], [number_card(Color.RED, 7)], draw=_filler(5))
    new = apply_action(state, 0, PlayCards((d2,)))
    assert new.winner == 0
    assert new.current_seat == 0
    assert len(new.hands[3]) == 0
    assert len(new.draw_pile) == 5
    assert new.message == "You won!"


def test_winning_skip_by_opponent(make_state) -> None:
    skip = action_card(Color.RED, SKIP)
    state = make_state([[], [], [skip]], [number_card(Color.RED, 7)], current_seat=2)
    new = apply_action(state, 2, PlayCards((skip,)))
    assert new.winner == 2
    assert new.current_seat == 2
    assert new.message == "Bot 3 won!"


def test_terminal_state_is_frozen(make_state) -> None:
    state = make_state([[number_card(Color.RED, 1)]], [number_card(Color.RED, 7)])
    over = replace(state, winner=2)
    assert apply_action(over, 0, DrawCard()) is over


def test_draw_passes_turn(make_state) -> None:
    pile = _filler(3)
    top = number_card(Color.RED, 7)
    state = make_state([[number_card(Color.BLUE, 1)]], [top], draw=pile)
    new = apply_action(state, 0, DrawCard())
    assert new.hands[0][-1] == pile[-1]
    assert new.current_seat == 3
    assert new.discard_pile == (top,)
    assert new.active_color == state.active_color


def test_draw_with_no_cards_left(make_state) -> None:
    state = make_state([[number_card(Color.BLUE, 1)]], [number_card(Color.RED, 7)])
    new = apply_action(state, 0, DrawCard())
    assert len(new.hands[0]) == 1
    assert new.current_seat == 3
    assert "could not draw" in new.history[-1]


def test_penalty_recycles_discard(make_state) -> None:
    d2 = action_card(Color.RED, DRAW_TWO)
    under = number_card(Color.RED, 3)
    top = number_card(Color.RED, 7)
    state = make_state([[d2, number_card(Color.BLUE, 1)]], [under, top])
    new = apply_action(state, 0, PlayCards((d2,)), random.Random(0))
    # Only under and top could be recycled; the draw two stays face up
    assert sorted(str(c) for c in new.hands[3]) == ["red_3", "red_7"]
    assert new.discard_pile == (d2,)
    assert new.draw_pile == ()
    assert new.current_seat == 1


def test_card_count_conserved(make_state) -> None:
    d2 = action_card(Color.RED, DRAW_TWO)
    state = make_state(
        [[d2, number_card(Color.BLUE, 1)], _filler(2)],
        [number_card(Color.RED, 3), number_card(Color.RED, 7)],
        draw=_filler(1),
    )
    new = apply_action(state, 0, PlayCards((d2,)), random.Random(0))
    assert new.card_count() == state.card_count()


def test_opponent_skip_passes_over_human(make_state) -> None:
    skip = action_card(Color.RED, SKIP)
    state = make_state(
        [[number_card(Color.BLUE, 1)], [], [skip, number_card(Color.RED, 2)]],
        [number_card(Color.RED, 7)],
        current_seat=2,
    )
    new = apply_action(state, 2, PlayCards((skip,)))
    assert new.current_seat == 3
    assert "Player 1 is skipped" in new.history


def test_skip_counter_clockwise(make_state) -> None:
    skip = action_card(Color.RED, SKIP)
    state = make_state(
        [[number_card(Color.BLUE, 1)], [], [], [skip, number_card(Color.RED, 2)]],
        [number_card(Color.RED, 7)],
        current_seat=3,
        direction=-1,
    )
    new = apply_action(state, 3, PlayCards((skip,)))
    assert new.current_seat == 2
    assert new.direction == -1
    assert "Player 1 is skipped" in new.history
