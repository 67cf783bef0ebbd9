"""Static configuration tables.

Catalogs are written as plain dicts and validated into frozen models once,
at import. Nothing here changes at runtime; engine functions receive the
tables bundled in a GameConfig (DEFAULT_CONFIG unless a caller overrides it).

Housing follows the capacity model: a hut raises the population ceiling and
immigration fills it one citizen per turn. Buildings never grant citizens
directly.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from realm_architect.events import TURN_EVENTS
from realm_architect.models import (
    BuildingType,
    GameEvent,
    GameState,
    PlayerQuest,
    QuestDefinition,
    ResourceDetail,
    ResourceSet,
)

APP_TITLE = "Realm Architect"

INITIAL_RESOURCES = ResourceSet(wood=100, stone=100, food=50, gold=20, population=5)

BASE_POPULATION_CAPACITY = 5
FOOD_PER_PERSON = 0.5  # two citizens eat one food per turn
STARVATION_DIVISOR = 2  # one death per two missing food
REFUND_PERCENTAGE = 0.5
HAZARD_PROBABILITY = 0.02
HAZARD_MAX_LOSS = 3
GIFT_PERIOD = 10
GIFT_MAX_AMOUNT = 10


_BUILDINGS: list[dict[str, Any]] = [
    {
        "id": "hut",
        "name": "Hut",
        "description": "Basic housing. Increases population capacity.",
        "cost": {"wood": 50, "stone": 20},
        "upkeep": {"food": 1},
        "population_capacity": 5,
    },
    {
        "id": "farm",
        "name": "Farm",
        "description": "Produces food for your realm. Requires workers (population).",
        "cost": {"wood": 30, "stone": 10},
        "upkeep": {"gold": 1},
        "production": {"food": 5},
    },
    {
        "id": "loggingCamp",
        "name": "Logging Camp",
        "description": "Harvests wood from nearby forests. Requires workers.",
        "cost": {"stone": 30, "gold": 5},
        "upkeep": {"food": 1},
        "production": {"wood": 3},
    },
    {
        "id": "stoneQuarry",
        "name": "Stone Quarry",
        "description": "Extracts stone from the earth. Requires workers.",
        "cost": {"wood": 20, "stone": 50},
        "upkeep": {"food": 1},
        "production": {"stone": 3},
    },
    {
        "id": "goldMine",
        "name": "Gold Mine",
        "description": "Extracts gold ore. Requires workers.",
        "cost": {"wood": 40, "stone": 60},
        "upkeep": {"food": 2, "wood": 1},
        "production": {"gold": 2},
    },
    {
        "id": "lumberMill",
        "name": "Lumber Mill",
        "description": "Processes timber into usable wood more efficiently. Requires workers.",
        "cost": {"stone": 40, "gold": 10},
        "upkeep": {"food": 1},
        "production": {"wood": 4},
    },
    {
        "id": "market",
        "name": "Market",
        "description": "Generates gold through trade and commerce.",
        "cost": {"wood": 70, "stone": 30},
        "upkeep": {"food": 1},
        "production": {"gold": 5},
    },
    {
        "id": "library",
        "name": "Library",
        "description": "Scholars improve techniques across the realm: +1 wood, stone and food per library.",
        "cost": {"wood": 100, "stone": 150, "gold": 50},
        "upkeep": {"gold": 5},
        "production_bonus": {"wood": 1, "stone": 1, "food": 1},
    },
    {
        "id": "barracks",
        "name": "Barracks",
        "description": "Trains soldiers who keep raiders away from your stores.",
        "cost": {"wood": 80, "stone": 100, "gold": 30},
        "upkeep": {"food": 3, "gold": 3},
    },
    {
        "id": "warehouse",
        "name": "Warehouse",
        "description": "Keeps stock safe from fire and spoilage.",
        "cost": {"wood": 120, "stone": 80},
        "upkeep": {"gold": 2},
    },
]

BUILDING_TYPES: dict[str, BuildingType] = {
    b["id"]: BuildingType.model_validate(b) for b in _BUILDINGS
}

RESOURCE_DETAILS: dict[str, ResourceDetail] = {
    "wood": ResourceDetail(name="Wood", description="Timber for construction and mine supports."),
    "stone": ResourceDetail(name="Stone", description="Quarried stone for sturdy buildings."),
    "food": ResourceDetail(name="Food", description="Feeds your citizens; two people eat one food per turn."),
    "gold": ResourceDetail(name="Gold", description="Pays upkeep. An empty treasury halts gold-paid workers."),
    "population": ResourceDetail(name="Population", description="Your citizens. Limited by housing."),
}


def _build(building_id: str, count: int, description: str) -> dict[str, Any]:
    return {"type": "build", "building_id": building_id, "target_count": count, "description": description}


def _reach(resource: str, amount: int, description: str) -> dict[str, Any]:
    return {"type": "resource_reach", "resource_type": resource, "target_amount": amount, "description": description}


def _population(amount: int, description: str) -> dict[str, Any]:
    return {"type": "population_reach", "target_amount": amount, "description": description}


def _turn(turn: int, description: str) -> dict[str, Any]:
    return {"type": "turn_reach", "target_turn": turn, "description": description}


_QUESTS: list[dict[str, Any]] = [
    # Early game
    {
        "id": "firstShelter",
        "title": "First Shelter",
        "description": "Provide basic housing for your people.",
        "criteria": [_build("hut", 1, "Construct 1 Hut.")],
        "reward": {"resources": {"wood": 20, "stone": 10}, "message": "Your first citizens have a place to call home!"},
    },
    {
        "id": "growingPopulation",
        "title": "Growing Populace",
        "description": "Reach a population of 10.",
        "criteria": [_population(10, "Have 10 citizens.")],
        "reward": {"resources": {"food": 20}, "message": "Your realm is attracting more people!"},
    },
    {
        "id": "firstWood",
        "title": "Gather Wood",
        "description": "Establish a Logging Camp to start your wood supply.",
        "criteria": [_build("loggingCamp", 1, "Construct 1 Logging Camp.")],
        "reward": {"resources": {"wood": 30}, "message": "The forests begin to yield their bounty."},
    },
    {
        "id": "firstStone",
        "title": "Gather Stone",
        "description": "Build a Stone Quarry to gather essential building materials.",
        "criteria": [_build("stoneQuarry", 1, "Construct 1 Stone Quarry.")],
        "reward": {"resources": {"stone": 30}, "message": "Stone is now being extracted."},
    },
    {
        "id": "farmInitiative",
        "title": "Farming Initiative",
        "description": "Secure a steady food supply by building a farm.",
        "criteria": [_build("farm", 1, "Construct 1 Farm.")],
        "reward": {"resources": {"food": 15}, "message": "The fields will soon feed your people."},
    },
    {
        "id": "prospectForGold",
        "title": "Prospect for Gold",
        "description": "Build a Gold Mine to start enriching your realm.",
        "criteria": [_build("goldMine", 1, "Construct 1 Gold Mine.")],
        "reward": {"resources": {"gold": 10, "stone": 10}, "message": "The glint of gold promises prosperity!"},
    },
    # Mid game
    {
        "id": "sustainableFood",
        "title": "Sustainable Food Source",
        "description": "Ensure your realm has a steady food income by building two farms.",
        "criteria": [_build("farm", 2, "Construct 2 Farms.")],
        "reward": {"resources": {"food": 30, "gold": 10}, "message": "Your people will not go hungry!"},
    },
    {
        "id": "woodSurplus",
        "title": "Wood Surplus",
        "description": "Upgrade your wood production with a Lumber Mill.",
        "criteria": [_build("lumberMill", 1, "Construct 1 Lumber Mill.")],
        "reward": {"resources": {"wood": 50}, "message": "Efficient wood processing has begun!"},
    },
    {
        "id": "marketEconomy",
        "title": "Market Economy",
        "description": "Build a Market to boost your gold income.",
        "criteria": [_build("market", 1, "Construct 1 Market.")],
        "reward": {"resources": {"gold": 30}, "message": "Commerce flourishes in your realm!"},
    },
    {
        "id": "resourceAbundance",
        "title": "Resource Abundance",
        "description": "Achieve a comfortable level of all basic resources.",
        "is_achievement": True,
        "criteria": [
            _reach("wood", 200, "Have 200 Wood."),
            _reach("stone", 200, "Have 200 Stone."),
            _reach("food", 100, "Have 100 Food."),
        ],
        "reward": {"resources": {"gold": 25}, "message": "Your realm is prospering with abundant resources!"},
    },
    {
        "id": "bustlingTown",
        "title": "Bustling Town",
        "description": "Grow your population to 25 hardworking citizens.",
        "is_achievement": True,
        "criteria": [_population(25, "Reach a population of 25.")],
        "reward": {"resources": {"gold": 50, "food": 20}, "message": "Your realm is becoming a lively settlement!"},
    },
    {
        "id": "decadeOfRule",
        "title": "Decade of Rule",
        "description": "Successfully manage your realm for 10 turns.",
        "is_achievement": True,
        "criteria": [_turn(10, "Reach Turn 10.")],
        "reward": {"resources": {"gold": 20}, "message": "A seasoned ruler, guiding your realm through its first decade!"},
    },
    {
        "id": "treasuryGrowth",
        "title": "Treasury Growth",
        "description": "Amass a treasure of 100 gold.",
        "is_achievement": True,
        "criteria": [_reach("gold", 100, "Accumulate 100 Gold.")],
        "reward": {"message": "Your coffers are overflowing!"},
    },
    # Late game
    {
        "id": "industrialPowerhouse",
        "title": "Industrial Powerhouse",
        "description": "Have at least two of each primary production building (Farm, Logging Camp, Stone Quarry, Gold Mine).",
        "is_achievement": True,
        "criteria": [
            _build("farm", 2, "Build 2 Farms."),
            _build("loggingCamp", 2, "Build 2 Logging Camps."),
            _build("stoneQuarry", 2, "Build 2 Stone Quarries."),
            _build("goldMine", 2, "Build 2 Gold Mines."),
        ],
        "reward": {"resources": {"gold": 100}, "message": "Your realm's production capacity is unmatched!"},
    },
    {
        "id": "metropolisBuilder",
        "title": "Metropolis Builder",
        "description": "Reach a population of 50 citizens, forming a true metropolis.",
        "is_achievement": True,
        "criteria": [_population(50, "Reach 50 citizens.")],
        "reward": {"resources": {"food": 50, "gold": 50}, "message": "A true metropolis under your rule!"},
    },
    {
        "id": "masterArchitect",
        "title": "Master Architect",
        "description": "Construct a total of 10 buildings of any type, shaping the landscape.",
        "is_achievement": True,
        "criteria": [
            {"type": "structure_count_reach", "target_amount": 10, "description": "Construct 10 total buildings."},
        ],
        "reward": {"message": "Your architectural vision shapes the land!"},
    },
    {
        "id": "economicStability",
        "title": "Economic Stability",
        "description": "Build a treasury of 150 gold with at least 15 citizens by turn 15.",
        "is_achievement": True,
        "criteria": [
            _reach("gold", 150, "Have 150 Gold."),
            _population(15, "Have at least 15 Population."),
            _turn(15, "Reach Turn 15 while meeting other conditions."),
        ],
        "reward": {"resources": {"gold": 75}, "message": "Your realm enjoys prolonged economic stability!"},
    },
    {
        "id": "selfSufficientRealm",
        "title": "Self-Sufficient Realm",
        "description": "Establish a broad production base and keep it running until turn 20.",
        "is_achievement": True,
        "criteria": [
            _build("farm", 3, "Build 3 Farms."),
            _build("lumberMill", 2, "Build 2 Lumber Mills."),
            _build("stoneQuarry", 2, "Build 2 Stone Quarries."),
            _turn(20, "Reach turn 20 with high production."),
        ],
        "reward": {"message": "Your realm is a model of self-sufficiency!"},
    },
    {
        "id": "knowledgeSeeker",
        "title": "Knowledge Seeker",
        "description": "Construct a Library to foster learning and innovation.",
        "criteria": [_build("library", 1, "Build 1 Library.")],
        "reward": {"resources": {"gold": 40}, "message": "The pursuit of knowledge elevates your realm."},
    },
    {
        "id": "guardianOfTheRealm",
        "title": "Guardian of the Realm",
        "description": "Establish Barracks to train defenders for your realm.",
        "is_achievement": True,
        "criteria": [_build("barracks", 1, "Build 1 Barracks.")],
        "reward": {"message": "Your realm's defenses are strengthened!"},
    },
    {
        "id": "masterTrader",
        "title": "Master Trader",
        "description": "Build 2 Markets and accumulate 200 Gold.",
        "is_achievement": True,
        "criteria": [
            _build("market", 2, "Construct 2 Markets."),
            _reach("gold", 200, "Accumulate 200 Gold."),
        ],
        "reward": {"resources": {"wood": 50, "stone": 50}, "message": "Your trade network is legendary!"},
    },
    {
        "id": "longLiveTheRealm",
        "title": "Long Live the Realm!",
        "description": "Successfully guide your realm for 25 turns.",
        "is_achievement": True,
        "criteria": [_turn(25, "Reach Turn 25.")],
        "reward": {"resources": {"gold": 100}, "message": "Your reign has stood the test of time!"},
    },
    {
        "id": "resourceHoarder",
        "title": "Resource Hoarder",
        "description": "Accumulate 500 of Wood, Stone, and Food.",
        "is_achievement": True,
        "criteria": [
            _reach("wood", 500, "Accumulate 500 Wood."),
            _reach("stone", 500, "Accumulate 500 Stone."),
            _reach("food", 500, "Accumulate 500 Food."),
        ],
        "reward": {"message": "Your storehouses are overflowing beyond measure!"},
    },
]

QUEST_DEFINITIONS: dict[str, QuestDefinition] = {
    q["id"]: QuestDefinition.model_validate(q) for q in _QUESTS
}


class GameConfig(BaseModel):
    """Catalogs and tunables consumed by the engine.

    Tests and alternative rulesets build their own instance; the catalogs
    are shared with DEFAULT_CONFIG and must be treated as read-only.
    """

    model_config = ConfigDict(frozen=True)

    buildings: dict[str, BuildingType] = Field(default_factory=lambda: dict(BUILDING_TYPES))
    quests: dict[str, QuestDefinition] = Field(default_factory=lambda: dict(QUEST_DEFINITIONS))
    events: list[GameEvent] = Field(default_factory=lambda: list(TURN_EVENTS))
    resource_details: dict[str, ResourceDetail] = Field(default_factory=lambda: dict(RESOURCE_DETAILS))
    initial_resources: ResourceSet = Field(default_factory=lambda: INITIAL_RESOURCES.model_copy())

    base_population_capacity: int = BASE_POPULATION_CAPACITY
    food_per_person: float = FOOD_PER_PERSON
    starvation_divisor: int = STARVATION_DIVISOR
    refund_percentage: float = REFUND_PERCENTAGE
    hazard_probability: float = HAZARD_PROBABILITY
    hazard_max_loss: int = HAZARD_MAX_LOSS
    gift_period: int = GIFT_PERIOD
    gift_max_amount: int = GIFT_MAX_AMOUNT


DEFAULT_CONFIG = GameConfig()


def initialize_player_quests(config: GameConfig = DEFAULT_CONFIG) -> list[PlayerQuest]:
    """One active PlayerQuest per catalog entry, in catalog order."""
    return [PlayerQuest(quest_id=quest_id) for quest_id in config.quests]


def new_game_state(config: GameConfig = DEFAULT_CONFIG) -> GameState:
    """The turn-1 state of a fresh realm."""
    return GameState(
        resources=config.initial_resources.model_copy(),
        player_quests=initialize_player_quests(config),
    )
