"""Card and Color types for UNO."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class CardKind(str, Enum):
    """Card families."""

    NUMBER = "number"
    ACTION = "action"
    WILD = "wild"


SKIP = "skip"
REVERSE = "reverse"
DRAW_TWO = "draw_two"
WILD = "wild"
WILD_DRAW_FOUR = "wild_draw_four"

NUMBER_RANKS = tuple(range(10))
ACTION_RANKS = (SKIP, REVERSE, DRAW_TWO)
WILD_RANKS = (WILD, WILD_DRAW_FOUR)

Rank = Union[int, str]


def _new_card_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass(frozen=True)
class Card:
    """A UNO card.

    Number cards: color is set, rank is an int 0-9.
    Action cards: color is set, rank is "skip", "reverse" or "draw_two".
    Wild cards: color is None, rank is "wild" or "wild_draw_four".

    The id makes two otherwise identical cards distinct, so a hand can drop
    one specific copy.
    """

    kind: CardKind
    color: Optional[Color]
    rank: Rank
    id: str = field(default_factory=_new_card_id)

    def __post_init__(self) -> None:
        if self.kind == CardKind.NUMBER and self.rank not in NUMBER_RANKS:
            raise ValueError(f"Invalid number rank: {self.rank!r}")
        if self.kind == CardKind.ACTION and self.rank not in ACTION_RANKS:
            raise ValueError(f"Invalid action rank: {self.rank!r}")
        if self.kind == CardKind.WILD and self.rank not in WILD_RANKS:
            raise ValueError(f"Invalid wild rank: {self.rank!r}")
        if self.kind == CardKind.WILD and self.color is not None:
            raise ValueError("Wild cards must have color=None")
        if self.kind != CardKind.WILD and self.color is None:
            raise ValueError("Non-wild cards must have a color")

    @property
    def is_wild(self) -> bool:
        return self.kind == CardKind.WILD

    def __str__(self) -> str:
        if self.color is None:
            return str(self.rank)
        return f"{self.color.value}_{self.rank}"


def number_card(color: Color, rank: int, card_id: Optional[str] = None) -> Card:
    return Card(kind=CardKind.NUMBER, color=color, rank=rank, id=card_id or _new_card_id())


def action_card(color: Color, rank: str, card_id: Optional[str] = None) -> Card:
    return Card(kind=CardKind.ACTION, color=color, rank=rank, id=card_id or _new_card_id())


def wild_card(rank: str = WILD, card_id: Optional[str] = None) -> Card:
    return Card(kind=CardKind.WILD, color=None, rank=rank, id=card_id or _new_card_id())
