"""Simulation engine.

Pure state transitions over GameState:
  advance_turn: one turn of upkeep, food, population and events
  place_building: pay for and place a building
  delete_structure: demolish with partial refund and eviction
  check_and_complete_quests: complete satisfied quests, chaining rewards

The orchestrator composes them the way the game's calling layer must:
every state-mutating action is followed by quest evaluation unless the
game has ended (take_turn, build, demolish).
"""

from .orchestrator import (  # noqa: F401
    ActionResult,
    build,
    demolish,
    select_building,
    take_turn,
)
from .quests import check_and_complete_quests, is_criterion_met  # noqa: F401
from .structures import (  # noqa: F401
    can_afford,
    delete_structure,
    new_structure_id,
    place_building,
)
from .turn import advance_turn, food_needed  # noqa: F401
