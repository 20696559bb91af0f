"""Card, Color and CardType types for UNO."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class Color(str, Enum):
    """Card colors. WILD only ever appears on wild-type cards."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    WILD = "wild"

    @classmethod
    def playable(cls) -> Iterator["Color"]:
        """The four colors a player can be asked to match."""
        return iter((cls.RED, cls.GREEN, cls.BLUE, cls.YELLOW))


class CardType(str, Enum):
    """Card types."""

    NUMBER = "number"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"
    WILD = "wild"
    WILD_DRAW_FOUR = "wild_draw_four"

    @property
    def is_wild(self) -> bool:
        return self in (CardType.WILD, CardType.WILD_DRAW_FOUR)


@dataclass(frozen=True)
class Card:
    """A UNO card.

    Number cards carry a value 0-9; every other type has value=None.
    Wild and Wild Draw Four are the only cards colored WILD.
    """

    color: Color
    type: CardType
    value: Optional[int] = None

    def __post_init__(self) -> None:
        if self.type is CardType.NUMBER:
            if self.value is None or not 0 <= self.value <= 9:
                raise ValueError(f"Number card needs a value 0-9, got {self.value!r}")
        elif self.value is not None:
            raise ValueError(f"{self.type.value} cards have no value")
        if self.type.is_wild and self.color is not Color.WILD:
            raise ValueError("Wild cards must have color=WILD")
        if not self.type.is_wild and self.color is Color.WILD:
            raise ValueError("Non-wild cards must have a real color")

    @property
    def is_wild(self) -> bool:
        return self.type.is_wild

    def __str__(self) -> str:
        if self.is_wild:
            return self.type.value
        if self.type is CardType.NUMBER:
            return f"{self.color.value}_{self.value}"
        return f"{self.color.value}_{self.type.value}"
