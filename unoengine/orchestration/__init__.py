"""Game orchestration."""

from unoengine.orchestration.game_runner import GameResult, GameRunner, apply_action
from unoengine.orchestration.tournament import run_tournament

__all__ = ["GameResult", "GameRunner", "apply_action", "run_tournament"]
