"""Single game runner."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from unoengine.engine import (
    Action,
    ActionRequired,
    ChooseColor,
    DrawCard,
    GameState,
    PlayCard,
    PlayerView,
    SetupFailure,
    UnoError,
    choose_color,
    handle_draw,
    initialize_game,
    legal_actions,
    play_card,
)

if TYPE_CHECKING:
    from unoengine.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[str]
    num_turns: int
    player_names: tuple[str, ...]
    final_state: GameState


def apply_action(
    state: GameState,
    player_index: int,
    action: Action,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Dispatch an action to the matching engine operation."""
    if isinstance(action, PlayCard):
        return play_card(state, player_index, action.hand_index, rng)
    if isinstance(action, ChooseColor):
        return choose_color(state, player_index, action.color)
    if isinstance(action, DrawCard):
        return handle_draw(state, player_index, rng)
    raise TypeError(f"Unknown action: {action!r}")


class GameRunner:
    """Runs a single UNO game to completion.

    Agents are seated in the given order; the first agent is player 0.
    Names must be unique since results are reported by name.
    """

    def __init__(
        self,
        agents: Sequence[tuple[str, "AgentProtocol"]],
        seed: Optional[int] = None,
        max_turns: int = 1000,
        strict_draw: bool = False,
    ):
        names = [name for name, _ in agents]
        if len(set(names)) != len(names):
            raise SetupFailure(f"Player names must be unique: {names}")
        self._agents = list(agents)
        self._rng = random.Random(seed)
        self._max_turns = max_turns
        self._strict_draw = strict_draw

    def run(self) -> GameResult:
        """Run the game and return the result."""
        names = [name for name, _ in self._agents]
        state = initialize_game(names, rng=self._rng)
        num_turns = 0

        while state.action_required is not ActionRequired.GAME_OVER and num_turns < self._max_turns:
            idx = state.current_player_index
            agent = self._agents[idx][1]
            legal = legal_actions(state, strict_draw=self._strict_draw)

            player_view = PlayerView.from_state(state, idx)
            action = agent.get_action(player_view, legal, idx)
            if action is None:
                action = next((a for a in legal if isinstance(a, DrawCard)), legal[0])

            try:
                state = apply_action(state, idx, action, self._rng)
            except UnoError as e:
                logger.warning("%s chose an illegal action %r: %s", names[idx], action, e)
                state = apply_action(state, idx, legal[-1], self._rng)
            num_turns += 1

        if state.action_required is not ActionRequired.GAME_OVER:
            logger.info("Game stopped after %d turns without a winner", num_turns)

        return GameResult(
            winner=names[state.winner] if state.winner is not None else None,
            num_turns=num_turns,
            player_names=tuple(names),
            final_state=state,
        )
