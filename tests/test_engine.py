"""Unit tests for the deck, trivia bank and dealing."""

import random
from collections import Counter
from dataclasses import replace

import pytest
from unoquiz.engine import (
    CardAction,
    Color,
    all_questions,
    build_deck,
    deal,
    next_round,
)
from unoquiz.engine.trivia import categories, questions_by_category


def test_trivia_bank_size_and_categories() -> None:
    questions = all_questions()
    assert len(questions) >= 40
    assert len(categories()) >= 4
    assert sum(len(v) for v in questions_by_category().values()) == len(questions)
    for q in questions:
        assert len(q.options) == 4
        assert 0 <= q.correct < 4


def test_build_deck_size() -> None:
    deck = build_deck(random.Random(42))
    assert len(deck) == 108


def test_build_deck_composition() -> None:
    deck = build_deck(random.Random(7))
    for color in (Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW):
        of_color = [c for c in deck if c.color == color]
        assert len(of_color) == 25
        numbers = Counter(c.value for c in of_color if c.action == CardAction.NUMBER)
        assert numbers[0] == 1
        for value in range(1, 10):
            assert numbers[value] == 2
        actions = Counter(c.action for c in of_color if c.action != CardAction.NUMBER)
        assert actions == {CardAction.SKIP: 2, CardAction.REVERSE: 2, CardAction.DRAW2: 2}
    wilds = [c for c in deck if c.color == Color.WILD]
    assert Counter(c.action for c in wilds) == {CardAction.WILD: 4, CardAction.WILD4: 4}


def test_build_deck_reproducible() -> None:
    d1 = build_deck(random.Random(123))
    d2 = build_deck(random.Random(123))
    assert [str(c) for c in d1] == [str(c) for c in d2]
    assert [c.question.text for c in d1] == [c.question.text for c in d2]


def test_card_ids_unique_while_questions_shared() -> None:
    deck = build_deck(random.Random(3))
    assert len({c.id for c in deck}) == 108
    distinct_questions = {id(c.question) for c in deck}
    assert len(distinct_questions) == len(all_questions())


def test_deal() -> None:
    state = deal(["Ana", "Bia", "Caio"], rng=random.Random(1))
    assert [len(p.hand) for p in state.players] == [7, 7, 7]
    assert len(state.discard_pile) == 1
    assert state.discard_pile[0].action == CardAction.NUMBER
    assert state.current_player_index == 0
    assert state.direction == 1
    assert state.winner is None
    assert "Ana" in state.message
    assert len(state.deck) == 108 - 7 * 3 - 1
    assert state.total_cards() == 108


def test_deal_assigns_avatars_by_seat() -> None:
    a = deal(["Ana", "Bia"], rng=random.Random(1))
    b = deal(["Caio", "Duda"], rng=random.Random(2))
    assert [p.avatar for p in a.players] == [p.avatar for p in b.players]
    assert len({p.id for p in a.players}) == 2


def test_deal_round_robin_from_deck_front() -> None:
    deck = build_deck(random.Random(9))
    state = deal(["Ana", "Bia"], rng=random.Random(9))
    assert [str(c) for c in state.players[0].hand] == [str(c) for c in deck[0:14:2]]
    assert [str(c) for c in state.players[1].hand] == [str(c) for c in deck[1:14:2]]


@pytest.mark.parametrize("names", [["Solo"], ["A", "B", "C", "D", "E"], []])
def test_deal_rejects_bad_player_count(names) -> None:
    with pytest.raises(ValueError):
        deal(names)


def test_deal_rejects_blank_name() -> None:
    with pytest.raises(ValueError):
        deal(["Ana", "  "])


def test_next_round_carries_scores() -> None:
    state = deal(["Ana", "Bia"], rng=random.Random(4))
    first = state.players[0]
    state = replace(state, players=(replace(first, score=42), state.players[1]))
    fresh = next_round(state, rng=random.Random(5))
    assert fresh.round_number == 2
    assert [p.score for p in fresh.players] == [42, 0]
    assert fresh.total_cards() == 108
