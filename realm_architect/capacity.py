"""Population capacity: how many citizens current housing can hold."""

from __future__ import annotations

from collections.abc import Iterable

from realm_architect.config import DEFAULT_CONFIG, GameConfig
from realm_architect.models import PlacedStructure


def max_population_capacity(
    structures: Iterable[PlacedStructure], config: GameConfig = DEFAULT_CONFIG
) -> int:
    """Base capacity plus every structure's housing.

    Always computed from the list passed in; callers recompute after any
    change to the structure list rather than holding on to a value.
    """
    capacity = config.base_population_capacity
    for structure in structures:
        building = config.buildings.get(structure.type_id)
        if building is not None:
            capacity += building.population_capacity
    return capacity
