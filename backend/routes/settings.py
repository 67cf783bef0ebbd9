"""Health check and catalog endpoints."""

from fastapi import APIRouter

from realm_architect.config import APP_TITLE, DEFAULT_CONFIG

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/catalog")
async def get_catalog():
    """Static game data for clients: buildings, resources, quests."""
    return {
        "title": APP_TITLE,
        "buildings": [b.model_dump() for b in DEFAULT_CONFIG.buildings.values()],
        "resources": {k: v.model_dump() for k, v in DEFAULT_CONFIG.resource_details.items()},
        "quests": [q.model_dump() for q in DEFAULT_CONFIG.quests.values()],
        "base_population_capacity": DEFAULT_CONFIG.base_population_capacity,
    }
