from .kingdom import DominoSideRead, KingdomRead, PlacementRead, PositionRead

__all__ = [
    "DominoSideRead",
    "KingdomRead",
    "PlacementRead",
    "PositionRead",
]
