"""FastAPI API endpoints under /api.

Endpoint groups: health + catalog (static game data), realms (create, list,
get, delete) and the player actions nested under /api/realms/{realm_id}/:
turn, selection, structures.
"""

from fastapi import APIRouter

from .realms import router as realms_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(realms_router)
