"""In-memory realm registry.

Each realm is a GameState plus the random source its turns draw from.
Realms live for the lifetime of the process; saving games is left to
clients, which receive the full state after every action.

init_sessions() resets the registry. With a seed, every realm created
afterwards gets its own random.Random(seed), so a replayed sequence of
actions reproduces the same game.
"""

import logging
import random
import uuid

from realm_architect.config import DEFAULT_CONFIG, GameConfig, new_game_state
from realm_architect.models import GameState

logger = logging.getLogger(__name__)

_realms: dict[str, GameState] = {}
_rngs: dict[str, random.Random] = {}
_seed: int | None = None


def init_sessions(seed: int | None = None) -> None:
    global _seed
    _realms.clear()
    _rngs.clear()
    _seed = seed


def create_realm(config: GameConfig = DEFAULT_CONFIG) -> tuple[str, GameState]:
    realm_id = uuid.uuid4().hex[:12]
    state = new_game_state(config)
    _realms[realm_id] = state
    _rngs[realm_id] = random.Random(_seed)
    logger.info("Created realm %s", realm_id)
    return realm_id, state


def list_realms() -> list[dict]:
    return [
        {
            "id": realm_id,
            "current_turn": state.current_turn,
            "population": state.resources.population,
            "is_game_over": state.is_game_over,
        }
        for realm_id, state in _realms.items()
    ]


def get_realm(realm_id: str) -> GameState | None:
    return _realms.get(realm_id)


def save_realm(realm_id: str, state: GameState) -> None:
    if realm_id not in _realms:
        raise KeyError(realm_id)
    _realms[realm_id] = state


def realm_rng(realm_id: str) -> random.Random:
    return _rngs[realm_id]


def delete_realm(realm_id: str) -> bool:
    if realm_id not in _realms:
        return False
    del _realms[realm_id]
    _rngs.pop(realm_id, None)
    logger.info("Deleted realm %s", realm_id)
    return True
