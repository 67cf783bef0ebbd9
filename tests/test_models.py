"""Tests for realm_architect.models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from realm_architect.models import (
    BuildCriterion,
    BuildingType,
    EventEffectResult,
    GameEvent,
    GameState,
    PlayerQuest,
    QuestCriterion,
    QuestDefinition,
    QuestReward,
    ResourceReachCriterion,
    ResourceSet,
)


class TestResourceSet:
    def test_defaults_to_zero(self) -> None:
        r = ResourceSet()
        assert r.model_dump() == {"wood": 0, "stone": 0, "food": 0, "gold": 0, "population": 0}

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ResourceSet(food=-1)

    def test_get_and_set_by_name(self) -> None:
        r = ResourceSet(wood=3)
        r.set("wood", 7)
        assert r.get("wood") == 7

    def test_covers(self) -> None:
        r = ResourceSet(wood=50, stone=20)
        assert r.covers({"wood": 50, "stone": 20})
        assert not r.covers({"wood": 51})
        assert r.covers({})


class TestBuildingType:
    def test_optional_maps_default_empty(self) -> None:
        b = BuildingType(id="shed", name="Shed")
        assert b.cost == {}
        assert b.upkeep == {}
        assert b.production == {}
        assert b.population_capacity == 0

    def test_population_not_a_cost(self) -> None:
        with pytest.raises(ValidationError):
            BuildingType(id="x", name="X", cost={"population": 1})


class TestQuestModels:
    def test_criterion_discriminated_by_type(self) -> None:
        adapter = TypeAdapter(QuestCriterion)
        c = adapter.validate_python({"type": "build", "building_id": "hut", "target_count": 2})
        assert isinstance(c, BuildCriterion)
        c = adapter.validate_python({"type": "resource_reach", "resource_type": "gold", "target_amount": 5})
        assert isinstance(c, ResourceReachCriterion)

    def test_unknown_criterion_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TypeAdapter(QuestCriterion).validate_python({"type": "dance", "target_amount": 1})

    def test_resource_reach_rejects_population(self) -> None:
        with pytest.raises(ValidationError):
            ResourceReachCriterion(resource_type="population", target_amount=10)

    def test_reward_never_grants_population(self) -> None:
        with pytest.raises(ValidationError):
            QuestReward(resources={"population": 5})

    def test_definition_from_dict(self) -> None:
        q = QuestDefinition.model_validate({
            "id": "q",
            "title": "Q",
            "criteria": [{"type": "turn_reach", "target_turn": 3}],
        })
        assert q.reward.resources == {}
        assert q.is_achievement is False

    def test_player_quest_defaults_active(self) -> None:
        assert PlayerQuest(quest_id="q").status == "active"

    def test_player_quest_status_restricted(self) -> None:
        with pytest.raises(ValidationError):
            PlayerQuest(quest_id="q", status="failed")


class TestGameEvent:
    def test_effect_optional(self) -> None:
        assert GameEvent(message="Calm.").effect is None

    def test_effect_must_be_callable(self) -> None:
        with pytest.raises(ValidationError):
            GameEvent(message="x", effect="not callable")

    def test_effect_result_defaults(self) -> None:
        r = EventEffectResult()
        assert r.resource_delta == {}
        assert r.additional_message is None


class TestGameState:
    def test_defaults(self) -> None:
        s = GameState(resources=ResourceSet())
        assert s.current_turn == 1
        assert s.structures == []
        assert s.player_quests == []
        assert s.current_event is None
        assert s.is_game_over is False

    def test_turn_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            GameState(resources=ResourceSet(), current_turn=0)

    def test_serialise_roundtrip(self) -> None:
        s = GameState(
            resources=ResourceSet(wood=1, population=2),
            structures=[{"id": "a", "type_id": "hut"}],
            player_quests=[{"quest_id": "q", "status": "completed"}],
            current_event="Hello.",
        )
        restored = GameState.model_validate_json(s.model_dump_json())
        assert restored == s

    def test_deep_copy_does_not_alias(self) -> None:
        s = GameState(resources=ResourceSet(wood=1), structures=[{"id": "a", "type_id": "hut"}])
        c = s.model_copy(deep=True)
        c.resources.wood = 9
        c.structures.pop()
        assert s.resources.wood == 1
        assert len(s.structures) == 1
