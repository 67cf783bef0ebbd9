"""Realm lifecycle + player action endpoints.

Every mutating action runs through the engine orchestrator, so quests are
re-evaluated after it and any completion notices come back in the response.
"""

from fastapi import APIRouter, HTTPException

from backend import sessions
from realm_architect.config import DEFAULT_CONFIG
from realm_architect.engine import build, can_afford, demolish, select_building, take_turn
from realm_architect.engine.orchestrator import ActionResult
from realm_architect.models import GameState

from .models import PlaceBody, RealmResponse, SelectBody

router = APIRouter()


def _load(realm_id: str) -> GameState:
    state = sessions.get_realm(realm_id)
    if state is None:
        raise HTTPException(404, "Realm not found")
    return state


def _load_playable(realm_id: str) -> GameState:
    state = _load(realm_id)
    if state.is_game_over:
        raise HTTPException(409, "The realm has fallen; start a new one")
    return state


def _commit(realm_id: str, result: ActionResult) -> RealmResponse:
    sessions.save_realm(realm_id, result.state)
    return RealmResponse(id=realm_id, state=result.state, notices=result.notices)


@router.get("/realms")
async def list_realms():
    """List all realms in this process."""
    return sessions.list_realms()


@router.post("/realms", status_code=201)
async def create_realm() -> RealmResponse:
    """Start a new realm at turn 1."""
    realm_id, state = sessions.create_realm()
    return RealmResponse(id=realm_id, state=state)


@router.get("/realms/{realm_id}")
async def get_realm(realm_id: str) -> RealmResponse:
    """Get a realm's current state."""
    return RealmResponse(id=realm_id, state=_load(realm_id))


@router.delete("/realms/{realm_id}")
async def delete_realm(realm_id: str):
    """Abandon a realm."""
    if not sessions.delete_realm(realm_id):
        raise HTTPException(404, "Realm not found")
    return {"ok": True}


@router.post("/realms/{realm_id}/turn")
async def end_turn(realm_id: str) -> RealmResponse:
    """Advance one turn, then check quests."""
    state = _load_playable(realm_id)
    result = take_turn(state, DEFAULT_CONFIG, sessions.realm_rng(realm_id))
    return _commit(realm_id, result)


@router.patch("/realms/{realm_id}/selection")
async def update_selection(realm_id: str, body: SelectBody) -> RealmResponse:
    """Select a building type for construction (null clears the selection)."""
    state = _load_playable(realm_id)
    try:
        state = select_building(state, body.building_id)
    except ValueError as e:
        raise HTTPException(400, str(e))
    sessions.save_realm(realm_id, state)
    return RealmResponse(id=realm_id, state=state)


@router.post("/realms/{realm_id}/structures", status_code=201)
async def place_structure(realm_id: str, body: PlaceBody) -> RealmResponse:
    """Construct a building, paying its full cost."""
    state = _load_playable(realm_id)
    building = DEFAULT_CONFIG.buildings.get(body.building_id)
    if building is None:
        raise HTTPException(400, f"Unknown building type: {body.building_id}")
    if not can_afford(state.resources, building):
        raise HTTPException(400, f"Not enough resources to build a {building.name}")
    return _commit(realm_id, build(state, body.building_id))


@router.delete("/realms/{realm_id}/structures/{structure_id}")
async def demolish_structure(realm_id: str, structure_id: str) -> RealmResponse:
    """Demolish a structure for a partial refund.

    An unknown structure id is not an HTTP error: the returned state's
    current_event explains what happened.
    """
    state = _load_playable(realm_id)
    return _commit(realm_id, demolish(state, structure_id))
