"""Core domain models.

Every engine function takes and returns these types. Pydantic validates
catalog data at load time and game states at the HTTP boundary; inside the
engine, states are deep-copied and then mutated in place.
"""

from __future__ import annotations

import random
from typing import Annotated, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

ResourceName = Literal["wood", "stone", "food", "gold", "population"]
MaterialName = Literal["wood", "stone", "food", "gold"]  # everything but population

MATERIALS: tuple[str, ...] = ("wood", "stone", "food", "gold")


class ResourceSet(BaseModel):
    """The realm's stockpile. Population doubles as a resource."""

    wood: int = Field(default=0, ge=0)
    stone: int = Field(default=0, ge=0)
    food: int = Field(default=0, ge=0)
    gold: int = Field(default=0, ge=0)
    population: int = Field(default=0, ge=0)

    def get(self, name: str) -> int:
        return getattr(self, name)

    def set(self, name: str, value: int) -> None:
        setattr(self, name, value)

    def covers(self, cost: dict[str, int]) -> bool:
        """True if every component of `cost` is fully affordable."""
        return all(self.get(res) >= amount for res, amount in cost.items())


class BuildingType(BaseModel):
    """A catalog entry. Never mutated after the catalog is loaded."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    cost: dict[MaterialName, int] = Field(default_factory=dict)
    upkeep: dict[MaterialName, int] = Field(default_factory=dict)
    production: dict[MaterialName, int] = Field(default_factory=dict)
    population_capacity: int = 0
    production_bonus: dict[MaterialName, int] = Field(default_factory=dict)  # realm-wide, per building


class PlacedStructure(BaseModel):
    id: str
    type_id: str


class PlayerQuest(BaseModel):
    quest_id: str
    status: Literal["active", "completed"] = "active"


# ---------------------------------------------------------------------------
# Quest criteria, tagged on `type`
# ---------------------------------------------------------------------------

class BuildCriterion(BaseModel):
    type: Literal["build"] = "build"
    description: str = ""
    building_id: str
    target_count: int


class ResourceReachCriterion(BaseModel):
    type: Literal["resource_reach"] = "resource_reach"
    description: str = ""
    resource_type: MaterialName
    target_amount: int


class PopulationReachCriterion(BaseModel):
    type: Literal["population_reach"] = "population_reach"
    description: str = ""
    target_amount: int


class TurnReachCriterion(BaseModel):
    type: Literal["turn_reach"] = "turn_reach"
    description: str = ""
    target_turn: int


class StructureCountReachCriterion(BaseModel):
    type: Literal["structure_count_reach"] = "structure_count_reach"
    description: str = ""
    target_amount: int


QuestCriterion = Annotated[
    Union[
        BuildCriterion,
        ResourceReachCriterion,
        PopulationReachCriterion,
        TurnReachCriterion,
        StructureCountReachCriterion,
    ],
    Field(discriminator="type"),
]


class QuestReward(BaseModel):
    model_config = ConfigDict(frozen=True)

    resources: dict[MaterialName, int] = Field(default_factory=dict)
    message: str | None = None  # shown with the completion notice


class QuestDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    criteria: list[QuestCriterion]
    reward: QuestReward = Field(default_factory=QuestReward)
    is_achievement: bool = False


# ---------------------------------------------------------------------------
# Turn events
# ---------------------------------------------------------------------------

class EventSnapshot(BaseModel):
    """Read-only view handed to an event effect.

    `resources` and `structures` are copies; nothing an effect does to them
    reaches the game state. `rng` is the engine's random source.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    resources: ResourceSet
    structures: list[PlacedStructure]
    current_turn: int
    rng: random.Random = Field(default_factory=random.Random, exclude=True, repr=False)

    def count(self, type_id: str) -> int:
        return sum(1 for s in self.structures if s.type_id == type_id)


class EventEffectResult(BaseModel):
    resource_delta: dict[ResourceName, int] = Field(default_factory=dict)
    additional_message: str | None = None


class GameEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    effect: Callable[[EventSnapshot], EventEffectResult] | None = None


# ---------------------------------------------------------------------------
# Aggregate root
# ---------------------------------------------------------------------------

class GameState(BaseModel):
    resources: ResourceSet
    structures: list[PlacedStructure] = Field(default_factory=list)
    current_turn: int = Field(default=1, ge=1)
    current_event: str | None = None  # " | "-joined messages of the last action
    is_game_over: bool = False
    player_quests: list[PlayerQuest] = Field(default_factory=list)
    selected_building_for_construction: str | None = None  # UI selection only


class CompletedQuestInfo(BaseModel):
    """Transient notice for a quest completed during evaluation."""

    title: str
    message: str | None = None
    is_achievement: bool = False


class ResourceDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
