"""Pydantic request/response models for API endpoints."""

from pydantic import BaseModel, Field

from realm_architect.models import CompletedQuestInfo, GameState


class PlaceBody(BaseModel):
    building_id: str


class SelectBody(BaseModel):
    building_id: str | None = None


class RealmResponse(BaseModel):
    id: str
    state: GameState
    notices: list[CompletedQuestInfo] = Field(default_factory=list)
