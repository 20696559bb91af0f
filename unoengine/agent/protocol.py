"""Agent protocol - interface that scripted, LLM and human agents implement."""

from typing import Protocol

from unoengine.engine import Action, PlayerView


class AgentProtocol(Protocol):
    """Interface for UNO-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_index: int,
    ) -> Action | None:
        """Choose an action given the player view and legal actions.

        Args:
            player_view: Filtered view with only this player's hand and public info.
            legal_actions: List of valid actions to choose from. When the game
                waits for a color choice these are all ChooseColor actions.
            player_index: This agent's seat.

        Returns:
            One of the legal actions, or None to let the runner pick a fallback.
        """
        ...
