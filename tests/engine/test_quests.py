"""Tests for quest evaluation and reward chaining."""

from realm_architect.config import GameConfig
from realm_architect.engine.quests import check_and_complete_quests, is_criterion_met
from realm_architect.models import (
    BuildCriterion,
    GameState,
    PlacedStructure,
    PlayerQuest,
    PopulationReachCriterion,
    QuestDefinition,
    QuestReward,
    ResourceReachCriterion,
    ResourceSet,
    StructureCountReachCriterion,
    TurnReachCriterion,
)

FIRST_HUT = QuestDefinition(
    id="firstHut",
    title="First Shelter",
    criteria=[BuildCriterion(building_id="hut", target_count=1)],
    reward=QuestReward(resources={"wood": 20, "stone": 10}, message="A home!"),
)
WOOD_PILE = QuestDefinition(
    id="woodPile",
    title="Wood Pile",
    criteria=[ResourceReachCriterion(resource_type="wood", target_amount=130)],
    is_achievement=True,
)


def _config(*quests) -> GameConfig:
    return GameConfig(quests={q.id: q for q in quests})


def _state(quest_ids, structures=(), turn=1, **resources) -> GameState:
    values = {"wood": 100, "stone": 100, "food": 50, "gold": 20, "population": 5}
    values.update(resources)
    return GameState(
        resources=ResourceSet(**values),
        structures=[PlacedStructure(id=f"s{i}", type_id=t) for i, t in enumerate(structures)],
        current_turn=turn,
        player_quests=[PlayerQuest(quest_id=q) for q in quest_ids],
    )


# ── is_criterion_met ────────────────────────────────────────


class TestCriteria:
    def test_build_counts_matching_type(self) -> None:
        state = _state([], structures=["hut", "farm", "hut"])
        assert is_criterion_met(BuildCriterion(building_id="hut", target_count=2), state)
        assert not is_criterion_met(BuildCriterion(building_id="hut", target_count=3), state)
        assert not is_criterion_met(BuildCriterion(building_id="market", target_count=1), state)

    def test_resource_reach(self) -> None:
        state = _state([], gold=100)
        assert is_criterion_met(ResourceReachCriterion(resource_type="gold", target_amount=100), state)
        assert not is_criterion_met(ResourceReachCriterion(resource_type="gold", target_amount=101), state)

    def test_population_reach(self) -> None:
        state = _state([], population=10)
        assert is_criterion_met(PopulationReachCriterion(target_amount=10), state)
        assert not is_criterion_met(PopulationReachCriterion(target_amount=11), state)

    def test_turn_reach(self) -> None:
        state = _state([], turn=10)
        assert is_criterion_met(TurnReachCriterion(target_turn=10), state)
        assert not is_criterion_met(TurnReachCriterion(target_turn=11), state)

    def test_structure_count_reach(self) -> None:
        state = _state([], structures=["hut", "farm"])
        assert is_criterion_met(StructureCountReachCriterion(target_amount=2), state)
        assert not is_criterion_met(StructureCountReachCriterion(target_amount=3), state)

    def test_unknown_criterion_fails_closed(self) -> None:
        assert is_criterion_met(object(), _state([])) is False


# ── check_and_complete_quests ───────────────────────────────


def test_completes_quest_and_applies_reward():
    state = _state(["firstHut"], structures=["hut"])
    new, notices = check_and_complete_quests(state, _config(FIRST_HUT))
    assert new.player_quests[0].status == "completed"
    assert new.resources.wood == 120
    assert new.resources.stone == 110
    assert [n.title for n in notices] == ["Quest Completed: First Shelter"]
    assert notices[0].message == "A home!"
    assert notices[0].is_achievement is False


def test_reward_unlocks_another_quest_in_same_call():
    # woodPile is checked first and fails; firstHut's reward then satisfies it
    state = _state(["woodPile", "firstHut"], structures=["hut"], wood=110)
    new, notices = check_and_complete_quests(state, _config(FIRST_HUT, WOOD_PILE))
    assert [n.title for n in notices] == [
        "Quest Completed: First Shelter",
        "Achievement Unlocked: Wood Pile",
    ]
    assert all(q.status == "completed" for q in new.player_quests)
    assert new.resources.wood == 130


def test_achievement_default_message():
    state = _state(["woodPile"], wood=200)
    _, notices = check_and_complete_quests(state, _config(WOOD_PILE))
    assert notices[0].message == "A milestone reached!"
    assert notices[0].is_achievement is True


def test_quest_default_message():
    plain = QuestDefinition(id="plain", title="Plain", criteria=[TurnReachCriterion(target_turn=1)])
    _, notices = check_and_complete_quests(_state(["plain"]), _config(plain))
    assert notices[0].message == "You earned a reward!"


def test_all_criteria_must_hold():
    both = QuestDefinition(
        id="both",
        title="Both",
        criteria=[
            BuildCriterion(building_id="hut", target_count=1),
            PopulationReachCriterion(target_amount=50),
        ],
    )
    new, notices = check_and_complete_quests(_state(["both"], structures=["hut"]), _config(both))
    assert notices == []
    assert new.player_quests[0].status == "active"


def test_second_evaluation_is_idempotent():
    config = _config(FIRST_HUT)
    first, notices = check_and_complete_quests(_state(["firstHut"], structures=["hut"]), config)
    assert len(notices) == 1
    second, notices = check_and_complete_quests(first, config)
    assert notices == []
    assert second.resources == first.resources
    assert second.player_quests == first.player_quests


def test_completed_quest_stays_completed_when_criteria_lapse():
    config = _config(FIRST_HUT)
    done, _ = check_and_complete_quests(_state(["firstHut"], structures=["hut"]), config)
    lapsed = done.model_copy(update={"structures": []})
    again, notices = check_and_complete_quests(lapsed, config)
    assert notices == []
    assert again.player_quests[0].status == "completed"


def test_unknown_quest_id_skipped():
    state = _state(["missing", "firstHut"], structures=["hut"])
    new, notices = check_and_complete_quests(state, _config(FIRST_HUT))
    assert len(notices) == 1
    assert new.player_quests[0].status == "active"


def test_game_over_returns_no_notices():
    state = _state(["firstHut"], structures=["hut"]).model_copy(update={"is_game_over": True})
    new, notices = check_and_complete_quests(state, _config(FIRST_HUT))
    assert notices == []
    assert new.player_quests[0].status == "active"


def test_input_state_not_mutated():
    state = _state(["firstHut"], structures=["hut"])
    check_and_complete_quests(state, _config(FIRST_HUT))
    assert state.player_quests[0].status == "active"
    assert state.resources.wood == 100
