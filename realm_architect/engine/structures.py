"""Structure lifecycle: placing and demolishing buildings.

Both operations are no-ops once the game is over. Placement fails silently
(unknown type, unaffordable); callers that want to explain the failure
check can_afford() first. Demolition reports problems through
current_event instead of raising.
"""

from __future__ import annotations

import logging
import math
import time
import uuid

from realm_architect.capacity import max_population_capacity
from realm_architect.config import DEFAULT_CONFIG, GameConfig
from realm_architect.models import BuildingType, GameState, PlacedStructure, ResourceSet

logger = logging.getLogger(__name__)


def can_afford(resources: ResourceSet, building: BuildingType) -> bool:
    """All-or-nothing: every cost component must be covered."""
    return resources.covers(building.cost)


def new_structure_id() -> str:
    return f"struct_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


def _append_event(state: GameState, message: str) -> None:
    state.current_event = f"{state.current_event} | {message}" if state.current_event else message


def place_building(
    state: GameState, building_type_id: str, config: GameConfig = DEFAULT_CONFIG
) -> GameState:
    """Pay for and place a building. Returns `state` itself on any failure."""
    if state.is_game_over:
        return state
    building = config.buildings.get(building_type_id)
    if building is None:
        logger.warning("Unknown building type %r; nothing placed", building_type_id)
        return state
    if not can_afford(state.resources, building):
        logger.debug("Cannot afford %s: cost=%s", building.id, building.cost)
        return state

    new_state = state.model_copy(deep=True)
    res = new_state.resources
    for res_name, amount in building.cost.items():
        res.set(res_name, res.get(res_name) - amount)
    structure = PlacedStructure(id=new_structure_id(), type_id=building.id)
    new_state.structures.append(structure)
    new_state.selected_building_for_construction = None
    logger.info("Placed %s (%s)", building.name, structure.id)
    return new_state


def delete_structure(
    state: GameState, structure_id: str, config: GameConfig = DEFAULT_CONFIG
) -> GameState:
    """Demolish a structure, refunding part of its cost.

    Losing housing shrinks capacity; citizens beyond the new capacity leave,
    and if that empties the realm the game ends.
    """
    if state.is_game_over:
        return state

    new_state = state.model_copy(deep=True)
    index = next(
        (i for i, s in enumerate(new_state.structures) if s.id == structure_id), None
    )
    if index is None:
        logger.warning("Structure %s not found for demolition", structure_id)
        _append_event(new_state, f"Error: Structure ID {structure_id} not found for demolition.")
        return new_state

    removed = new_state.structures.pop(index)
    building = config.buildings.get(removed.type_id)
    if building is None:
        logger.warning("Demolished structure %s has unknown type %r", structure_id, removed.type_id)
        _append_event(new_state, "An unknown structure was demolished. No resources recovered.")
        return new_state

    res = new_state.resources
    recovered: list[str] = []
    for res_name, amount in building.cost.items():
        refund = math.floor(amount * config.refund_percentage)
        if refund > 0:
            res.set(res_name, res.get(res_name) + refund)
            recovered.append(f"{refund} {res_name}")

    if building.population_capacity:
        capacity = max_population_capacity(new_state.structures, config)
        if res.population > capacity:
            evicted = res.population - capacity
            res.population = capacity
            _append_event(new_state, f"{evicted} citizen(s) were left homeless and departed.")
            if res.population <= 0:
                new_state.is_game_over = True
                _append_event(
                    new_state,
                    f"Demolishing vital housing ({building.name}) left your last citizens "
                    "without shelter. The realm is lost.",
                )
                logger.info("game over: demolished %s emptied the realm", building.name)
                return new_state

    refund_text = f"Recovered {', '.join(recovered)}." if recovered else "No resources recovered."
    _append_event(new_state, f"{building.name} demolished. {refund_text}")
    logger.info("Demolished %s (%s)", building.name, structure_id)
    return new_state
