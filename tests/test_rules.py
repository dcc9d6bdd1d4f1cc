"""Unit tests for the legality rule and state transitions."""

import random

import pytest
from unoquiz.engine import (
    Card,
    Color,
    advance_turn,
    apply_card_effect,
    can_play,
    check_winner,
    current_color,
    deal,
    discard_final_card,
    draw,
    playable_cards,
    remove_card,
    score_round,
    select_card,
)


def test_can_play_matches_active_color(card) -> None:
    top = card("red", value=5)
    assert can_play(card("blue", value=2), top, Color.BLUE)
    assert not can_play(card("green", value=2), top, Color.BLUE)


def test_can_play_matches_top_color_and_number(card) -> None:
    top = card("red", value=5)
    assert can_play(card("red", value=9), top, Color.RED)
    assert can_play(card("yellow", value=5), top, Color.RED)
    assert not can_play(card("yellow", value=6), top, Color.RED)


def test_can_play_same_action_any_color(card) -> None:
    top = card("red", "skip")
    assert can_play(card("blue", "skip"), top, Color.RED)
    assert not can_play(card("blue", "reverse"), top, Color.RED)
    # number cards never match action cards by value
    assert not can_play(card("blue", value=0), top, Color.RED)


@pytest.mark.parametrize("action", ["skip", "reverse", "draw2"])
def test_can_play_symmetric_for_same_action(card, action) -> None:
    a = card("green", action)
    b = card("green", action)
    for color in (Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW):
        assert can_play(a, b, color)
        assert can_play(b, a, color)


@pytest.mark.parametrize("action", ["wild", "wild4"])
def test_wild_always_playable(card, action) -> None:
    wild = card("wild", action)
    for top in (card("red", value=3), card("blue", "draw2"), card("yellow", "wild4")):
        for color in (Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW):
            assert can_play(wild, top, color)


def test_playable_cards_keeps_hand_order(card) -> None:
    top = card("red", value=5)
    hand = [card("blue", value=1), card("red", value=1), card("wild", "wild"), card("green", value=5)]
    assert playable_cards(hand, top, Color.RED) == hand[1:]


def test_card_validation(card) -> None:
    with pytest.raises(ValueError):
        card("red", "number", None)
    with pytest.raises(ValueError):
        card("red", "skip", 3)
    with pytest.raises(ValueError):
        card("wild", "number", 4)


def test_card_points(card) -> None:
    assert card("red", value=7).points == 7
    assert card("red", value=0).points == 0
    assert card("blue", "reverse").points == 20
    assert card("wild", "wild4").points == 50


def test_advance_turn_wraps_backwards(card, state_of) -> None:
    state = state_of([[card("red", value=1)]] * 3, [card("red", value=2)], direction=-1)
    new_state = advance_turn(state)
    assert new_state.current_player_index == 2
    assert "P2" in new_state.message
    assert state.current_player_index == 0


def test_advance_turn_wraps_forwards(card, state_of) -> None:
    state = state_of([[card("red", value=1)]] * 3, [card("red", value=2)], current=2)
    assert advance_turn(state).current_player_index == 0


def test_number_card_only_discards(card, state_of) -> None:
    played = card("red", value=3)
    state = state_of([[card("blue", value=1)], [card("blue", value=2)]], [card("red", value=2)])
    new_state = apply_card_effect(state, played)
    assert new_state.top_discard() == played
    assert new_state.current_player_index == 0
    assert new_state.direction == 1


def test_skip_jumps_one_player(card, state_of) -> None:
    hands = [[card("blue", value=1)] for _ in range(3)]
    state = state_of(hands, [card("red", value=2)])
    after = apply_card_effect(state, card("red", "skip"))
    assert after.current_player_index == 1
    assert "P1" in after.message
    assert advance_turn(after).current_player_index == 2


def test_reverse_with_three_players(card, state_of) -> None:
    hands = [[card("blue", value=1)] for _ in range(3)]
    state = state_of(hands, [card("red", value=2)])
    after = advance_turn(apply_card_effect(state, card("red", "reverse")))
    assert after.direction == -1
    assert after.current_player_index == 2


def test_reverse_with_two_players_returns_turn(card, state_of) -> None:
    state = state_of([[card("blue", value=1)], [card("blue", value=2)]], [card("red", value=2)])
    after = advance_turn(apply_card_effect(state, card("red", "reverse")))
    assert after.direction == -1
    assert after.current_player_index == 0


def test_draw2_makes_next_player_draw_and_skips_them(card, state_of) -> None:
    deck = [card("green", value=i) for i in range(1, 6)]
    hands = [[card("blue", value=1)] for _ in range(3)]
    state = state_of(hands, [card("red", value=2)], deck=deck)
    after = apply_card_effect(state, card("red", "draw2"))
    assert len(after.players[1].hand) == 3
    assert list(after.players[1].hand[1:]) == deck[:2]
    assert len(after.deck) == 3
    assert "P1" in after.message
    assert advance_turn(after).current_player_index == 2


def test_draw2_respects_direction(card, state_of) -> None:
    deck = [card("green", value=i) for i in range(1, 6)]
    hands = [[card("blue", value=1)] for _ in range(3)]
    state = state_of(hands, [card("red", value=2)], deck=deck, direction=-1)
    after = apply_card_effect(state, card("red", "draw2"))
    assert len(after.players[2].hand) == 3
    assert advance_turn(after).current_player_index == 1


def test_wild_binds_chosen_color(card, state_of) -> None:
    wild = card("wild", "wild")
    state = state_of([[card("blue", value=1)], [card("blue", value=2)]], [card("red", value=2)])
    after = apply_card_effect(state, wild, Color.GREEN)
    assert after.top_discard().color == Color.GREEN
    assert after.top_discard().id == wild.id
    assert current_color(after) == Color.GREEN
    assert after.current_player_index == 0
    # the card object given in is untouched
    assert wild.color == Color.WILD


def test_wild_without_color_falls_back(card, state_of) -> None:
    state = state_of([[card("blue", value=1)], [card("blue", value=2)]], [card("red", value=2)])
    after = apply_card_effect(state, card("wild", "wild"))
    assert after.top_discard().color == Color.RED
    after = apply_card_effect(state, card("wild", "wild"), Color.WILD)
    assert after.top_discard().color != Color.WILD


def test_wild4_recolors_draws_four_and_skips(card, state_of) -> None:
    deck = [card("green", value=i) for i in range(1, 7)]
    hands = [[card("blue", value=1)] for _ in range(3)]
    state = state_of(hands, [card("red", value=2)], deck=deck)
    after = apply_card_effect(state, card("wild", "wild4"), Color.YELLOW)
    assert after.top_discard().color == Color.YELLOW
    assert len(after.players[1].hand) == 5
    assert advance_turn(after).current_player_index == 2


def test_effect_does_not_touch_players_hand(card, state_of) -> None:
    played = card("red", value=3)
    state = state_of([[played, card("blue", value=1)], [card("blue", value=2)]], [card("red", value=2)])
    after = apply_card_effect(state, played)
    assert after.players[0].hand == state.players[0].hand


def test_draw_from_front(card, state_of) -> None:
    deck = [card("green", value=i) for i in range(1, 5)]
    state = state_of([[], [card("blue", value=2)]], [card("red", value=2)], deck=deck)
    after = draw(state, "p0", 2)
    assert list(after.players[0].hand) == deck[:2]
    assert list(after.deck) == deck[2:]
    assert after.total_cards() == state.total_cards()


def test_draw_unknown_player_is_noop(card, state_of) -> None:
    state = state_of([[card("blue", value=1)], [card("blue", value=2)]], [card("red", value=2)],
                     deck=[card("green", value=1)])
    assert draw(state, "nobody", 1) is state


def test_draw_reshuffles_discard_when_deck_short(card, state_of) -> None:
    deck = [card("green", value=1)]
    discard = [card("red", value=i) for i in range(1, 6)]
    state = state_of([[card("blue", value=1)], [card("blue", value=2)]], discard, deck=deck)
    after = draw(state, "p0", 3, random.Random(0))
    assert after.discard_pile == (discard[-1],)
    assert len(after.players[0].hand) == 4
    # the card that was still in the deck is drawn first
    assert after.players[0].hand[1] == deck[0]
    assert len(after.deck) == 2
    assert after.total_cards() == state.total_cards()


def test_draw_best_effort_when_exhausted(card, state_of) -> None:
    discard = [card("red", value=1), card("red", value=2)]
    state = state_of([[], [card("blue", value=2)]], discard, deck=[])
    after = draw(state, "p0", 4)
    assert len(after.players[0].hand) == 1
    assert after.deck == ()
    assert after.discard_pile == (discard[-1],)


def test_current_color_fallback(card, state_of) -> None:
    state = state_of([[card("blue", value=1)], [card("blue", value=2)]], [])
    assert current_color(state) == Color.RED


def test_check_winner_lowest_seat(card, state_of) -> None:
    state = state_of([[card("blue", value=1)], [], []], [card("red", value=2)])
    assert check_winner(state).id == "p1"
    state = state_of([[card("blue", value=1)], [card("blue", value=1)]], [card("red", value=2)])
    assert check_winner(state) is None


def test_score_round_scenario(card, state_of) -> None:
    state = state_of([[], [card("blue", "draw2"), card("green", value=7)]], [card("red", value=2)])
    winner = check_winner(state)
    scored = score_round(state, winner)
    assert scored.players[0].score == 27
    assert scored.players[1].score == 0
    assert scored.winner.name == "P0"
    assert scored.winner.score == 27


def test_score_round_counts_wilds_and_all_losers(card, state_of) -> None:
    hands = [[card("wild", "wild")], [], [card("red", value=4), card("yellow", "skip")]]
    state = state_of(hands, [card("red", value=2)])
    scored = score_round(state, state.players[1])
    assert scored.players[1].score == 50 + 4 + 20


def test_select_and_remove_card(card, state_of) -> None:
    chosen = card("red", value=3)
    state = state_of([[chosen, card("blue", value=1)], [card("blue", value=2)]], [card("red", value=2)])
    selected = select_card(state, chosen)
    assert selected.active_card == chosen
    removed = remove_card(selected, "p0", chosen.id)
    assert chosen not in removed.players[0].hand
    assert remove_card(removed, "p0", chosen.id) is removed
    assert advance_turn(removed).active_card is None


def test_discard_final_card_keeps_conservation(card, state_of) -> None:
    last = card("red", "draw2")
    state = state_of([[last], [card("blue", value=2)]], [card("red", value=2)])
    before = state.total_cards()
    state = discard_final_card(remove_card(state, "p0", last.id), last)
    assert state.total_cards() == before
    assert state.top_discard() == last
    # no effect resolved
    assert len(state.players[1].hand) == 1


def test_transitions_keep_108_cards() -> None:
    rng = random.Random(11)
    state = deal(["Ana", "Bia", "Caio", "Duda"], rng=rng)
    for _ in range(300):
        player = state.current_player()
        top = state.top_discard()
        options = playable_cards(player.hand, top, current_color(state))
        if options:
            chosen: Card = options[0]
            state = remove_card(state, player.id, chosen.id)
            if check_winner(state):
                break
            color = Color.BLUE if chosen.is_wild else None
            state = apply_card_effect(state, chosen, color, rng)
            assert state.top_discard().color != Color.WILD
        else:
            state = draw(state, player.id, 1, rng)
        state = advance_turn(state)
        assert 0 <= state.current_player_index < 4
        assert state.total_cards() == 108
