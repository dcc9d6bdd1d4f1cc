"""LLM agent using the OpenAI library with OpenRouter, Groq, Ollama or Hugging Face."""

import json
import logging
import re
import time
from typing import Optional

from openai import OpenAI

from unoquiz.agents.random_agent import preferred_color
from unoquiz.config import provider_settings
from unoquiz.engine import PLAYABLE_COLORS, Card, Color, PlayerView, Question

logger = logging.getLogger(__name__)

DRAW = "DRAW"


def _format_player_view(pv: PlayerView) -> str:
    """Format player view as text for the LLM."""
    lines = [
        "=== Your hand ===",
        " ".join(str(c) for c in pv.my_hand),
        "",
        "=== Top card on discard ===",
        str(pv.top_discard) if pv.top_discard else "None",
        "",
        "=== Current color to match ===",
        pv.active_color.value.upper(),
        "",
        "=== Other players' card counts ===",
    ]
    for name, count in pv.num_cards_per_player.items():
        if name != pv.name:
            lines.append(f"  {name}: {count} cards")
    lines.extend([
        "",
        "=== Direction ===",
        "clockwise" if pv.direction == 1 else "counter-clockwise",
        "",
        "=== Game History (last 10 events) ===",
    ])
    if pv.history:
        lines.extend(f"- {h}" for h in pv.history)
    else:
        lines.append("No history yet.")
    return "\n".join(lines)


def _format_options(labels: list[str]) -> str:
    return "\n".join(f"{i}: {label}" for i, label in enumerate(labels))


def _parse_index_response(response: str, key: str, upper: int) -> Optional[int]:
    """Parse an index in [0, upper) out of an LLM response.

    Tries a JSON object with `key`, then a loose `key: N` match, then the
    first standalone number.
    """
    json_match = re.search(r"(\{.*?\})", response, re.DOTALL)
    if json_match:
        json_str = json_match.group(1)
        for candidate in (json_str, json_str.replace("'", '"')):
            try:
                data = json.loads(candidate)
            except json.JSONDecodeError:
                continue
            if isinstance(data, dict) and isinstance(data.get(key), int):
                idx = data[key]
                if 0 <= idx < upper:
                    return idx
                logger.debug("Index %s out of range (0-%d)", idx, upper - 1)
            break

    match = re.search(rf"[\"']?{key}[\"']?\s*:\s*(\d+)", response, re.IGNORECASE)
    if match:
        idx = int(match.group(1))
        if 0 <= idx < upper:
            return idx

    cleaned = re.sub(r"[{}\[\]\"'.,:]", " ", response)
    for word in cleaned.split():
        if word.isdigit() and 0 <= int(word) < upper:
            return int(word)
    return None


def _wants_draw(response: str) -> bool:
    return DRAW in response.upper() and not re.search(r"\d", response)


def _parse_color_response(response: str) -> Optional[Color]:
    """First playable color named in the response."""
    lowered = response.lower()
    found = []
    for color in PLAYABLE_COLORS:
        match = re.search(rf"\b{color.value}\b", lowered)
        if match:
            found.append((match.start(), color))
    if not found:
        return None
    return min(found, key=lambda pair: pair[0])[1]


class LLMAgent:
    """Agent that uses an LLM to pick cards and answer trivia."""

    def __init__(
        self,
        provider: str = "openrouter",
        model: str = "openai/gpt-4o-mini",
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        rate_limit: Optional[float] = None,
        retries: int = 3,
    ):
        base_url, key = provider_settings(provider, api_key)
        self._client = OpenAI(api_key=key, base_url=base_url)
        self._model = model
        self._timeout = timeout
        self._provider = provider
        self._rate_limit = rate_limit  # Requests per minute
        self._retries = retries
        self._request_history: list[float] = []

        logger.info(
            "[%s] Initialized with provider=%s, base_url=%s, timeout=%ss, rate_limit=%s rpm",
            self.name, provider, base_url, timeout, rate_limit or "None",
        )

    @property
    def name(self) -> str:
        return f"llm-{self._model}"

    def _wait_for_rate_limit(self) -> None:
        """Block if rate limit is exceeded."""
        if not self._rate_limit:
            return

        now = time.time()
        self._request_history = [t for t in self._request_history if now - t < 60.0]

        if len(self._request_history) >= self._rate_limit:
            wait_time = 60.0 - (now - self._request_history[0])
            if wait_time > 0:
                logger.info("[%s] Rate limit reached, waiting %.2fs", self.name, wait_time)
                time.sleep(wait_time)

        self._request_history.append(time.time())

    def _ask(self, prompt: str) -> Optional[str]:
        """One completion request; None on failure."""
        self._wait_for_rate_limit()
        kwargs = {
            "model": self._model,
            "messages": [{"role": "user", "content": prompt}],
            "timeout": self._timeout,
        }
        if "gpt-4" in self._model or "gpt-3.5" in self._model or self._provider == "groq":
            kwargs["response_format"] = {"type": "json_object"}

        start_time = time.time()
        try:
            resp = self._client.chat.completions.create(**kwargs)
        except Exception as e:  # network, auth and provider errors all retry
            logger.warning(
                "[%s] Request failed after %.2fs: %s: %s",
                self.name, time.time() - start_time, type(e).__name__, e,
            )
            return None
        logger.debug("[%s] Received response in %.2fs", self.name, time.time() - start_time)
        return resp.choices[0].message.content or ""

    def choose_card(self, player_view: PlayerView, playable: list[Card]) -> Optional[Card]:
        if not playable:
            return None

        prompt = f"""You are playing UNO Quiz.
Objective: empty your hand. Match the top discard card by color or value; wild cards can be played on anything.
Every card you play comes with a trivia question: a wrong answer makes you draw a card instead.

{_format_player_view(player_view)}

=== Playable cards ===
{_format_options([str(c) for c in playable])}

INSTRUCTIONS:
Respond with a JSON object containing the index of the card to play, e.g. {{"card_index": 0}}.
Respond with {{"action": "{DRAW}"}} to draw instead.
"""
        for attempt in range(1, self._retries + 1):
            content = self._ask(prompt)
            if content is None:
                continue
            idx = _parse_index_response(content, "card_index", len(playable))
            if idx is not None:
                return playable[idx]
            if _wants_draw(content):
                return None
            logger.warning("[%s] Could not parse card choice (attempt %d): %r", self.name, attempt, content)

        logger.warning("[%s] All retries failed, playing first playable card", self.name)
        return playable[0]

    def answer_question(self, question: Question, player_view: PlayerView) -> Optional[int]:
        prompt = f"""Answer this trivia question ({question.category}).

{question.text}

{_format_options(list(question.options))}

Respond with a JSON object containing the index of the correct option, e.g. {{"answer_index": 1}}.
"""
        for attempt in range(1, self._retries + 1):
            content = self._ask(prompt)
            if content is None:
                continue
            idx = _parse_index_response(content, "answer_index", len(question.options))
            if idx is not None:
                return idx
            logger.warning("[%s] Could not parse answer (attempt %d): %r", self.name, attempt, content)

        # Treated like a timeout
        return None

    def choose_color(self, player_view: PlayerView) -> Color:
        prompt = f"""You played a wild card in UNO Quiz and must choose the new color.

{_format_player_view(player_view)}

Respond with a JSON object, e.g. {{"color": "blue"}}. Choose one of: {", ".join(c.value for c in PLAYABLE_COLORS)}.
"""
        for _ in range(self._retries):
            content = self._ask(prompt)
            if content is None:
                continue
            color = _parse_color_response(content)
            if color is not None:
                return color
        return preferred_color(player_view.my_hand)
