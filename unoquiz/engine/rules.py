"""UNO Quiz rules: legality check and state transitions.

Every transition takes a GameState and returns a new one; inputs are never
mutated. Randomness (reshuffles) comes from an optional random.Random.
"""

import logging
import random
from dataclasses import replace
from typing import Iterable, List, Mapping, Optional, Sequence

from unoquiz.engine.card import FALLBACK_COLOR, Card, CardAction, Color
from unoquiz.engine.deck import build_deck
from unoquiz.engine.game_state import AVATARS, GameState, Player

logger = logging.getLogger(__name__)

HAND_SIZE = 7
MIN_PLAYERS = 2
MAX_PLAYERS = 4


def can_play(card: Card, top_card: Card, active_color: Color) -> bool:
    """Check if `card` can be played on `top_card` under `active_color`."""
    # Wild can always be played
    if card.is_wild:
        return True
    if card.color == active_color:
        return True
    if card.color == top_card.color:
        return True
    # Same action, any color (skip on skip, draw2 on draw2...)
    if card.action != CardAction.NUMBER and card.action == top_card.action:
        return True
    if (
        card.action == CardAction.NUMBER
        and top_card.action == CardAction.NUMBER
        and card.value == top_card.value
    ):
        return True
    return False


def playable_cards(hand: Iterable[Card], top_card: Card, active_color: Color) -> List[Card]:
    """Cards from `hand` that may be played now, in hand order."""
    return [c for c in hand if can_play(c, top_card, active_color)]


def current_color(state: GameState) -> Color:
    """Color that must be matched: the top card's (resolved) color."""
    top = state.top_discard()
    if top is None:
        return FALLBACK_COLOR
    return top.color


def check_winner(state: GameState) -> Optional[Player]:
    """First player in seat order with an empty hand."""
    return next((p for p in state.players if not p.hand), None)


def deal(
    player_names: Sequence[str],
    rng: Optional[random.Random] = None,
    round_number: int = 1,
    scores: Optional[Mapping[str, int]] = None,
) -> GameState:
    """Create initial game state: deal 7 cards each, one number card on discard."""
    names = [name.strip() for name in player_names]
    if not MIN_PLAYERS <= len(names) <= MAX_PLAYERS:
        raise ValueError(f"UNO Quiz needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {len(names)}")
    if any(not name for name in names):
        raise ValueError("Player names must be non-empty")

    rng = rng or random.Random()
    scores = scores or {}
    deck = build_deck(rng)

    hands: List[List[Card]] = [[] for _ in names]
    position = 0
    for _ in range(HAND_SIZE):
        for hand in hands:
            hand.append(deck[position])
            position += 1

    # First card must be a number card; cards passed over stay in the deck
    top_index = position
    while deck[top_index].action != CardAction.NUMBER:
        top_index += 1
    top = deck[top_index]
    remaining = deck[position:top_index] + deck[top_index + 1:]

    players = tuple(
        Player(
            id=f"p{seat}-{rng.getrandbits(32):08x}",
            name=name,
            avatar=AVATARS[seat % len(AVATARS)],
            hand=tuple(hand),
            score=scores.get(name, 0),
        )
        for seat, (name, hand) in enumerate(zip(names, hands))
    )
    message = f"{players[0].name}'s turn"
    return GameState(
        players=players,
        current_player_index=0,
        direction=1,
        discard_pile=(top,),
        deck=tuple(remaining),
        round_number=round_number,
        message=message,
        history=(f"Round {round_number} started, first card {top}",),
    )


def _reshuffle(state: GameState, rng: Optional[random.Random]) -> GameState:
    """Move all discards except the top behind the remaining deck, shuffled."""
    if len(state.discard_pile) <= 1:
        return state
    pool = list(state.discard_pile[:-1])
    (rng or random).shuffle(pool)
    logger.debug("Reshuffling %d discarded cards into the deck", len(pool))
    return replace(
        state,
        deck=state.deck + tuple(pool),
        discard_pile=state.discard_pile[-1:],
    )


def draw(
    state: GameState,
    player_id: str,
    count: int,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Move `count` cards from the front of the deck into a player's hand.

    Reshuffles first if the deck is short. Draws as many as exist; an unknown
    player id leaves the state unchanged.
    """
    seat = state.seat_of(player_id)
    if seat is None or count <= 0:
        return state

    if len(state.deck) < count:
        state = _reshuffle(state, rng)

    drawn = state.deck[:count]
    if len(drawn) < count:
        logger.warning("Deck exhausted: %s drew %d of %d cards", player_id, len(drawn), count)
    player = state.players[seat]
    players = list(state.players)
    players[seat] = replace(player, hand=player.hand + drawn)
    noun = "card" if len(drawn) == 1 else "cards"
    return replace(
        state,
        players=tuple(players),
        deck=state.deck[len(drawn):],
        history=state.history + (f"{player.name} drew {len(drawn)} {noun}",),
    )


def _next_index(state: GameState) -> int:
    return (state.current_player_index + state.direction) % len(state.players)


def advance_turn(state: GameState) -> GameState:
    """Pass the turn to the next seat in the current direction."""
    index = _next_index(state)
    return replace(
        state,
        current_player_index=index,
        active_card=None,
        message=f"{state.players[index].name}'s turn",
    )


def select_card(state: GameState, card: Card) -> GameState:
    """Mark `card` as chosen while its gating question is pending."""
    player = state.current_player()
    return replace(
        state,
        active_card=card,
        message=f"{player.name} is answering a {card.question.category} question",
    )


def remove_card(state: GameState, player_id: str, card_id: str) -> GameState:
    """Take the card with `card_id` out of a player's hand."""
    seat = state.seat_of(player_id)
    if seat is None:
        return state
    player = state.players[seat]
    hand = tuple(c for c in player.hand if c.id != card_id)
    if len(hand) == len(player.hand):
        return state
    players = list(state.players)
    players[seat] = replace(player, hand=hand)
    return replace(state, players=tuple(players))


def discard_final_card(state: GameState, card: Card) -> GameState:
    """Put the round-winning card on the discard pile without resolving it."""
    return replace(
        state,
        discard_pile=state.discard_pile + (card,),
        active_card=None,
        history=state.history + (f"{state.current_player().name} played {card}",),
    )


def _force_draw_and_skip(
    state: GameState,
    count: int,
    rng: Optional[random.Random],
) -> GameState:
    """Next player draws `count` cards and loses their turn."""
    target = state.players[_next_index(state)]
    state = draw(state, target.id, count, rng)
    state = advance_turn(state)
    return replace(state, message=f"+{count} {target.name} drew {count} cards!")


def apply_card_effect(
    state: GameState,
    card: Card,
    chosen_color: Optional[Color] = None,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Put `card` on the discard pile and resolve its effect.

    The card must already be out of the player's hand. Effects that skip a
    player advance the turn once here; the caller still advances afterwards.
    """
    player = state.current_player()
    event = f"{player.name} played {card}"
    if card.is_wild:
        color = chosen_color if chosen_color not in (None, Color.WILD) else FALLBACK_COLOR
        card = card.with_color(color)
        event += f" (chose {color.value})"

    state = replace(
        state,
        discard_pile=state.discard_pile + (card,),
        active_card=None,
        history=state.history + (event,),
    )

    if card.action == CardAction.SKIP:
        skipped = state.players[_next_index(state)]
        state = advance_turn(state)
        state = replace(state, message=f"{skipped.name} was skipped!")
    elif card.action == CardAction.REVERSE:
        state = replace(state, direction=-state.direction)
        if len(state.players) == 2:
            # Reverse with two players works like a skip
            state = advance_turn(state)
        state = replace(state, message="Direction reversed!")
    elif card.action == CardAction.DRAW2:
        state = _force_draw_and_skip(state, 2, rng)
    elif card.action == CardAction.WILD:
        state = replace(state, message=f"Wild! Color is now {card.color.value}")
    elif card.action == CardAction.WILD4:
        state = _force_draw_and_skip(state, 4, rng)
        state = replace(state, message=f"Wild +4! Color is now {card.color.value}. {state.message}")

    return state


def score_round(state: GameState, winner: Player) -> GameState:
    """Add every loser's remaining card points to the winner's score.

    Call exactly once per round; a second call counts the points again.
    """
    total = sum(
        card.points
        for p in state.players
        if p.id != winner.id
        for card in p.hand
    )
    players = tuple(
        replace(p, score=p.score + total) if p.id == winner.id else p
        for p in state.players
    )
    champion = next((p for p in players if p.id == winner.id), winner)
    return replace(
        state,
        players=players,
        winner=champion,
        active_card=None,
        message=f"{champion.name} wins round {state.round_number} (+{total} points)!",
        history=state.history + (f"{champion.name} WON and scored {total} points",),
    )


def next_round(state: GameState, rng: Optional[random.Random] = None) -> GameState:
    """Deal a fresh round to the same seats, carrying scores over."""
    return deal(
        [p.name for p in state.players],
        rng=rng,
        round_number=state.round_number + 1,
        scores={p.name: p.score for p in state.players},
    )
