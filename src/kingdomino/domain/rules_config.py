"""Declarative rule configuration for the kingdom domain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kingdomino.config import Settings

STANDARD_BOARD_SIZE = 5
LARGE_BOARD_SIZE = 7


@dataclass(frozen=True, slots=True)
class KingdomRules:
    """Board extent for a single kingdom.

    The board is a square of ``board_size`` cells per side centred on the
    castle, so no occupied cell may sit more than ``half_width`` cells from
    the origin on either axis.
    """

    board_size: int = STANDARD_BOARD_SIZE

    def __post_init__(self) -> None:
        if self.board_size < 3 or self.board_size % 2 == 0:
            raise ValueError(f"board_size must be an odd integer >= 3, got {self.board_size}")

    @property
    def half_width(self) -> int:
        return self.board_size // 2

    @property
    def max_cells(self) -> int:
        return self.board_size * self.board_size


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container."""

    kingdom: KingdomRules = KingdomRules()

    @classmethod
    def from_settings(cls, settings: Settings) -> RulesConfig:
        """Build rules from application settings."""

        return cls(kingdom=KingdomRules(board_size=settings.board_size))


DEFAULT_RULES = RulesConfig()
LARGE_RULES = RulesConfig(kingdom=KingdomRules(board_size=LARGE_BOARD_SIZE))
