"""Quest evaluation.

check_and_complete_quests() sweeps the active quests repeatedly: a reward
granted in one sweep can satisfy a resource threshold of another quest, so
sweeping continues until one completes nothing. Completed quests are never
re-evaluated, which makes a second call on the same state a no-op.
"""

from __future__ import annotations

import logging

from realm_architect.config import DEFAULT_CONFIG, GameConfig
from realm_architect.models import (
    BuildCriterion,
    CompletedQuestInfo,
    GameState,
    PopulationReachCriterion,
    QuestCriterion,
    QuestDefinition,
    ResourceReachCriterion,
    StructureCountReachCriterion,
    TurnReachCriterion,
)

logger = logging.getLogger(__name__)


def is_criterion_met(criterion: QuestCriterion, state: GameState) -> bool:
    if isinstance(criterion, BuildCriterion):
        count = sum(1 for s in state.structures if s.type_id == criterion.building_id)
        return count >= criterion.target_count
    if isinstance(criterion, ResourceReachCriterion):
        return state.resources.get(criterion.resource_type) >= criterion.target_amount
    if isinstance(criterion, PopulationReachCriterion):
        return state.resources.population >= criterion.target_amount
    if isinstance(criterion, TurnReachCriterion):
        return state.current_turn >= criterion.target_turn
    if isinstance(criterion, StructureCountReachCriterion):
        return len(state.structures) >= criterion.target_amount
    logger.warning("Unhandled quest criterion %r; treated as not met", criterion)
    return False


def _notice(quest: QuestDefinition) -> CompletedQuestInfo:
    prefix = "Achievement Unlocked" if quest.is_achievement else "Quest Completed"
    default = "A milestone reached!" if quest.is_achievement else "You earned a reward!"
    return CompletedQuestInfo(
        title=f"{prefix}: {quest.title}",
        message=quest.reward.message or default,
        is_achievement=quest.is_achievement,
    )


def check_and_complete_quests(
    state: GameState, config: GameConfig = DEFAULT_CONFIG
) -> tuple[GameState, list[CompletedQuestInfo]]:
    """Complete every quest whose criteria all hold and apply its reward.

    Returns the new state and the completion notices in completion order.
    """
    if state.is_game_over:
        return state, []

    new_state = state.model_copy(deep=True)
    notices: list[CompletedQuestInfo] = []

    completed_any = True
    while completed_any:
        completed_any = False
        for player_quest in new_state.player_quests:
            if player_quest.status != "active":
                continue
            quest = config.quests.get(player_quest.quest_id)
            if quest is None:
                logger.warning("Quest definition not found for id %r", player_quest.quest_id)
                continue
            if not all(is_criterion_met(c, new_state) for c in quest.criteria):
                continue

            player_quest.status = "completed"
            for res_name, amount in quest.reward.resources.items():
                new_state.resources.set(res_name, new_state.resources.get(res_name) + amount)
            notices.append(_notice(quest))
            completed_any = True
            logger.info("Quest %s completed on turn %d", quest.id, new_state.current_turn)

    return new_state, notices
