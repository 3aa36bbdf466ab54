"""Domain model for a Kingdomino kingdom.

This package exposes:

* Enumerations for terrain, orientation and rejection reasons (see :mod:`enums`).
* Immutable tile and placement values (see :mod:`models`).
* The fixed domino catalog (see :mod:`catalog`).
* Pure cell geometry for placements (see :mod:`geometry`).
* Rule configuration objects (see :mod:`rules_config`).
* The mutable :class:`~kingdomino.domain.kingdom.Kingdom` and its placement rules.
"""

from . import (
    catalog,
    enums,
    geometry,
    kingdom,
    models,
    rules_config,
)

__all__ = [
    "catalog",
    "enums",
    "geometry",
    "kingdom",
    "models",
    "rules_config",
]
