"""LLM move advisor using OpenAI library with OpenRouter, Groq, Ollama or Hugging Face."""

import json
import os
import re
import time
from dataclasses import dataclass
from typing import Optional

from openai import OpenAI

from unoengine.agents.scripted_agent import ScriptedAgent
from unoengine.engine import Action, Card, ChooseColor, PlayCard, PlayerView, is_playable

OPENROUTER_BASE = "https://openrouter.ai/api/v1"
GROQ_BASE = "https://api.groq.com/openai/v1"
OLLAMA_BASE = "http://localhost:11434/v1"
HUGGINGFACE_BASE = "https://router.huggingface.co/v1"


@dataclass(frozen=True)
class MoveSuggestion:
    """Advice from the model. card is None when it sees no possible move."""

    card: Optional[Card]
    reason: str
    hand_index: Optional[int] = None


def _format_prompt(pv: PlayerView) -> str:
    """Format the suggestion prompt: hand, top discard and player names."""
    lines = [
        "You are an expert Uno player. Given the current state of the game, "
        "determine the best card for the current player to play.",
        "",
        f"The current player is: {pv.player_names[pv.player_index]}",
        f"The next player is: {pv.next_player_name}",
        "",
        "The current player's hand is:",
    ]
    lines.extend(f"  {i}: {card}" for i, card in enumerate(pv.my_hand))
    lines.extend([
        "",
        f"The top card on the discard pile is: {pv.top_discard}",
        f"The color to match is: {pv.current_color.value}",
        "",
        "Other players' card counts:",
    ])
    for i, (name, count) in enumerate(zip(pv.player_names, pv.cards_per_player)):
        if i != pv.player_index:
            lines.append(f"  {name}: {count} cards")
    lines.extend([
        "",
        "Consider the game rules of Uno, and try to make a strategic move. Explain your reasoning.",
        "If there is no possible move, hand_index should be null, and you should clearly explain why.",
        'Respond with a JSON object, e.g. {"hand_index": 2, "reason": "..."}',
    ])
    return "\n".join(lines)


def _parse_suggestion(response: str, hand: tuple[Card, ...]) -> MoveSuggestion | None:
    """Parse LLM response into a MoveSuggestion. Returns None if unreadable."""
    json_match = re.search(r'(\{.*\})', response, re.DOTALL)
    if json_match:
        json_str = json_match.group(1)
        for candidate in (json_str, json_str.replace("'", '"')):
            try:
                data = json.loads(candidate)
            except json.JSONDecodeError:
                continue
            if isinstance(data, dict) and "hand_index" in data:
                reason = str(data.get("reason", ""))
                idx = data["hand_index"]
                if idx is None:
                    return MoveSuggestion(card=None, reason=reason)
                if isinstance(idx, int) and 0 <= idx < len(hand):
                    return MoveSuggestion(card=hand[idx], reason=reason, hand_index=idx)
                print(f"[_parse_suggestion] Index {idx} out of range (0-{len(hand) - 1})")
                return None

    # Matches: "hand_index": 1, 'hand_index': 1, hand_index: 1
    match = re.search(r'["\']?hand_index["\']?\s*:\s*(\d+)', response, re.IGNORECASE)
    if match:
        idx = int(match.group(1))
        if 0 <= idx < len(hand):
            return MoveSuggestion(card=hand[idx], reason=response.strip(), hand_index=idx)
    return None


class LLMAgent:
    """Agent that asks an LLM which card to play.

    suggest_move only gives advice; get_action turns the advice into a legal
    action and falls back to the scripted policy when the advice is unusable.
    """

    def __init__(
        self,
        provider: str = "openrouter",
        model: str = "openai/gpt-4o-mini",
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        max_attempts: int = 3,
    ):
        if provider == "openrouter":
            base_url = OPENROUTER_BASE
            key = api_key or os.environ.get("OPENROUTER_API_KEY")
        elif provider == "groq":
            base_url = GROQ_BASE
            key = api_key or os.environ.get("GROQ_API_KEY")
        elif provider == "ollama":
            base_url = os.environ.get("OLLAMA_BASE_URL", OLLAMA_BASE)
            key = "ollama"
        elif provider == "huggingface":
            base_url = HUGGINGFACE_BASE
            key = api_key or os.environ.get("HUGGINGFACE_API_KEY")
        else:
            raise ValueError(f"Unknown provider: {provider}")

        if not key:
            raise ValueError(f"API key required for {provider}. Set {provider.upper()}_API_KEY or pass api_key.")

        self._client = OpenAI(api_key=key, base_url=base_url)
        self._model = model
        self._timeout = timeout
        self._provider = provider
        self._max_attempts = max_attempts
        self._fallback = ScriptedAgent(name=f"{self.name}-fallback")

        print(f"[{self.name}] Initialized with provider={provider}, base_url={base_url}, timeout={timeout}s")

    @property
    def name(self) -> str:
        return f"llm-{self._model}"

    def suggest_move(self, player_view: PlayerView) -> MoveSuggestion | None:
        """Ask the model for a card to play. Never touches game state."""
        prompt = _format_prompt(player_view)

        for attempt in range(1, self._max_attempts + 1):
            start_time = time.time()
            try:
                kwargs = {
                    "model": self._model,
                    "messages": [{"role": "user", "content": prompt}],
                    "timeout": self._timeout,
                }
                if "gpt-4" in self._model or "gpt-3.5" in self._model or "groq" in self._provider:
                    kwargs["response_format"] = {"type": "json_object"}

                print(f"[{self.name}] Attempt {attempt}: Sending request to {self._provider}...")
                resp = self._client.chat.completions.create(**kwargs)
                content = resp.choices[0].message.content or ""
                print(f"[{self.name}] Received response in {time.time() - start_time:.2f}s")

                suggestion = _parse_suggestion(content, player_view.my_hand)
                if suggestion is not None:
                    return suggestion
                print(f"[{self.name}] Failed to parse suggestion from response:")
                print(content)
            except Exception as e:
                duration = time.time() - start_time
                print(f"[{self.name}] Error on attempt {attempt} after {duration:.2f}s: {type(e).__name__}: {e}")
        return None

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_index: int,
    ) -> Action | None:
        if not legal_actions:
            return None
        if isinstance(legal_actions[0], ChooseColor):
            return self._fallback.get_action(player_view, legal_actions, player_index)

        suggestion = self.suggest_move(player_view)
        action = suggestion_to_action(suggestion, player_view, legal_actions)
        if action is not None:
            print(f"[{self.name}] Playing {suggestion.card}: {suggestion.reason}")
            return action

        print(f"[{self.name}] No usable suggestion. Using scripted fallback.")
        return self._fallback.get_action(player_view, legal_actions, player_index)


def suggestion_to_action(
    suggestion: MoveSuggestion | None,
    player_view: PlayerView,
    legal_actions: list[Action],
) -> PlayCard | None:
    """Map a suggestion onto a legal PlayCard, or None if it names no legal play."""
    if suggestion is None or suggestion.hand_index is None:
        return None
    card = player_view.my_hand[suggestion.hand_index]
    if not is_playable(card, player_view.top_discard, player_view.current_color):
        return None
    action = PlayCard(suggestion.hand_index)
    return action if action in legal_actions else None
