"""Action orchestrator: one player action end-to-end.

Action flow:
  1. Run the action (turn advance, placement, demolition) on the state.
  2. Unless that ended the game, evaluate quests on the resulting state.
  3. Return the final state plus the quest notices produced in step 2.

Selecting a building for construction is pure UI state and does not
trigger quest evaluation.
"""

from __future__ import annotations

import logging
import random

from pydantic import BaseModel, Field

from realm_architect.config import DEFAULT_CONFIG, GameConfig
from realm_architect.models import CompletedQuestInfo, GameState

from .quests import check_and_complete_quests
from .structures import delete_structure, place_building
from .turn import advance_turn

logger = logging.getLogger(__name__)


class ActionResult(BaseModel):
    state: GameState
    notices: list[CompletedQuestInfo] = Field(default_factory=list)


def _with_quests(state: GameState, config: GameConfig) -> ActionResult:
    if state.is_game_over:
        return ActionResult(state=state)
    state, notices = check_and_complete_quests(state, config)
    if notices:
        logger.debug("%d quest(s) completed: %s", len(notices), [n.title for n in notices])
    return ActionResult(state=state, notices=notices)


def take_turn(
    state: GameState,
    config: GameConfig = DEFAULT_CONFIG,
    rng: random.Random | None = None,
) -> ActionResult:
    return _with_quests(advance_turn(state, config, rng), config)


def build(
    state: GameState, building_type_id: str, config: GameConfig = DEFAULT_CONFIG
) -> ActionResult:
    return _with_quests(place_building(state, building_type_id, config), config)


def demolish(
    state: GameState, structure_id: str, config: GameConfig = DEFAULT_CONFIG
) -> ActionResult:
    return _with_quests(delete_structure(state, structure_id, config), config)


def select_building(
    state: GameState, building_type_id: str | None, config: GameConfig = DEFAULT_CONFIG
) -> GameState:
    """Set (or clear, with None) the building selected for construction."""
    if building_type_id is not None and building_type_id not in config.buildings:
        raise ValueError(f"Unknown building type: {building_type_id}")
    new_state = state.model_copy(deep=True)
    new_state.selected_building_for_construction = building_type_id
    return new_state
