"""Turn engine: advances the realm by one turn.

Phase order (each phase sees the results of the ones before it):
  1. Turn counter +1.
  2. Immigration: one citizen may arrive if housing and food allow.
  3. Upkeep & production. Work stoppage (gold <= 0 before this phase) halts
     production of every building that pays gold upkeep. Upkeep is charged
     first (clamped at 0), then production and library-style bonuses added.
  4. Food consumption: ceil(population * food_per_person).
  5. Starvation: a deficit kills ceil(deficit / divisor) citizens (min 1);
     food at exactly 0 after eating costs one citizen.
  6. Overcrowding: citizens beyond capacity leave.
  7. Game over if nobody is left; return immediately.
  8. Coffers-empty notice if production stopped without a per-building note.
  9. Hazard: small chance an ambush kills 1..hazard_max_loss citizens.
     If that empties the realm, the game ends and the turn returns here.
 10. Catalog event: one entry chosen uniformly, effect applied.
 11. Periodic gift every gift_period turns.
 12. Messages joined with " | " into current_event.

Randomness comes only from the `rng` argument, in this order:
rng.random() for the hazard roll, rng.randint() for its losses,
rng.choice() for the catalog event, whatever the event effect draws,
then rng.choice() / rng.randint() for the gift.
"""

from __future__ import annotations

import logging
import math
import random

from realm_architect.capacity import max_population_capacity
from realm_architect.config import DEFAULT_CONFIG, GameConfig
from realm_architect.models import MATERIALS, EventSnapshot, GameState, ResourceSet

logger = logging.getLogger(__name__)

STOPPAGE_NOTE = "lack of gold"
CALAMITY_NOTE = "calamity"


def food_needed(population: int, config: GameConfig = DEFAULT_CONFIG) -> int:
    """Food eaten per turn by `population` citizens, rounded up."""
    return math.ceil(population * config.food_per_person)


def advance_turn(
    state: GameState,
    config: GameConfig = DEFAULT_CONFIG,
    rng: random.Random | None = None,
) -> GameState:
    """Return the state one turn later. A finished game is returned as-is."""
    if state.is_game_over:
        return state

    rng = rng or random.Random()
    new_state = state.model_copy(deep=True)
    res = new_state.resources
    messages: list[str] = []

    def _finish() -> GameState:
        new_state.current_event = " | ".join(m for m in messages if m)
        return new_state

    # 1. Turn counter
    new_state.current_turn += 1
    logger.debug("turn %d begins pop=%d food=%d gold=%d",
                 new_state.current_turn, res.population, res.food, res.gold)

    # 2. Immigration
    capacity = max_population_capacity(new_state.structures, config)
    if res.population < capacity:
        messages.append(_admit_immigrant(res, config))

    # 3. Upkeep & production
    work_stoppage = res.gold <= 0
    _apply_upkeep_and_production(new_state, config, work_stoppage, messages)

    # 4. Food consumption
    consumed = food_needed(res.population, config)
    res.food -= consumed

    # 5. Starvation
    starved = _apply_starvation(res, consumed, config, messages)

    # 6. Overcrowding
    capacity = max_population_capacity(new_state.structures, config)
    evicted = 0
    if res.population > capacity:
        evicted = res.population - capacity
        res.population = capacity
        messages.append(
            f"{evicted} citizen(s) left the realm due to overcrowding and lack of housing."
        )

    # 7. Game over before events
    if res.population <= 0:
        new_state.is_game_over = True
        if starved:
            messages.append("The last of your people have perished. Your realm has fallen into ruin.")
        elif evicted:
            messages.append("With no homes left to shelter them, the last of your people have departed. Your realm stands empty.")
        else:
            messages.append("Your realm has fallen due to depopulation.")
        logger.info("game over on turn %d (depopulation)", new_state.current_turn)
        return _finish()

    # 8. Work stoppage notice
    if work_stoppage and not any(STOPPAGE_NOTE in m for m in messages):
        messages.append("The realm's coffers are empty! Workers are unpaid, and overall production is affected.")

    # 9. Hazard
    if rng.random() < config.hazard_probability:
        _apply_hazard(new_state, config, rng, messages)
        if new_state.is_game_over:
            return _finish()

    # 10. Catalog event
    if config.events:
        _apply_random_event(new_state, config, rng, messages)

    # 11. Periodic gift
    if not new_state.is_game_over and new_state.current_turn % config.gift_period == 0:
        resource = rng.choice(MATERIALS)
        amount = rng.randint(1, config.gift_max_amount)
        res.set(resource, res.get(resource) + amount)
        messages.append(
            f"A passing caravan left a gift of {amount} {resource} to honor turn {new_state.current_turn}!"
        )

    # 12. Finalize
    return _finish()


def _admit_immigrant(res: ResourceSet, config: GameConfig) -> str:
    if res.food >= food_needed(res.population + 1, config):
        res.population += 1
        return "A new citizen has arrived, drawn by available housing."
    if res.food < food_needed(res.population, config):
        return "Potential settlers were deterred by the severe food shortage."
    return "Housing is available, but there is not quite enough food to support another citizen."


def _apply_upkeep_and_production(
    state: GameState, config: GameConfig, work_stoppage: bool, messages: list[str]
) -> None:
    total_upkeep: dict[str, int] = {}
    total_production: dict[str, int] = {}
    type_counts: dict[str, int] = {}

    for structure in state.structures:
        building = config.buildings.get(structure.type_id)
        if building is None:
            logger.warning("Structure %s has unknown type %r; skipped", structure.id, structure.type_id)
            continue
        type_counts[building.id] = type_counts.get(building.id, 0) + 1

        for res_name, amount in building.upkeep.items():
            total_upkeep[res_name] = total_upkeep.get(res_name, 0) + amount

        if work_stoppage and building.upkeep.get("gold", 0) > 0:
            note = f"{building.name} ceased production due to {STOPPAGE_NOTE} for upkeep."
            if note not in messages:
                messages.append(note)
            continue

        for res_name, amount in building.production.items():
            total_production[res_name] = total_production.get(res_name, 0) + amount

    if not work_stoppage:
        for type_id, count in type_counts.items():
            building = config.buildings[type_id]
            if not building.production_bonus:
                continue
            gains = []
            for res_name, amount in building.production_bonus.items():
                total_production[res_name] = total_production.get(res_name, 0) + amount * count
                gains.append(f"+{amount * count} {res_name}")
            messages.append(f"{building.name} knowledge boosts production: {', '.join(gains)}.")

    res = state.resources
    for res_name, amount in total_upkeep.items():
        res.set(res_name, max(0, res.get(res_name) - amount))
    for res_name, amount in total_production.items():
        res.set(res_name, res.get(res_name) + amount)
    logger.debug("upkeep=%s production=%s stoppage=%s", total_upkeep, total_production, work_stoppage)


def _apply_starvation(
    res: ResourceSet, consumed: int, config: GameConfig, messages: list[str]
) -> bool:
    """Apply starvation deaths. Returns True if anyone starved."""
    if res.food < 0:
        deficit = -res.food
        lost = min(res.population, max(1, math.ceil(deficit / config.starvation_divisor)))
        res.food = 0
        if lost > 0:
            res.population -= lost
            messages.append(f"{lost} citizen(s) perished from starvation!")
            return True
    elif res.food == 0 and res.population > 0 and consumed > 0:
        res.population -= 1
        messages.append("1 citizen starved due to critical food shortage!")
        return True
    return False


def _apply_hazard(
    state: GameState, config: GameConfig, rng: random.Random, messages: list[str]
) -> None:
    res = state.resources
    lost = min(res.population, rng.randint(1, config.hazard_max_loss))
    res.population -= lost
    messages.append(f"Bandits ambushed a group of travelling citizens! {lost} citizen(s) were lost.")
    if res.population <= 0:
        state.is_game_over = True
        messages.append("A sudden calamity has wiped out your remaining population! The realm is lost.")
        logger.info("game over on turn %d (ambush)", state.current_turn)


def _apply_random_event(
    state: GameState, config: GameConfig, rng: random.Random, messages: list[str]
) -> None:
    event = rng.choice(config.events)
    messages.append(event.message)
    if event.effect is None:
        return

    res = state.resources
    snapshot = EventSnapshot(
        resources=res.model_copy(),
        structures=[s.model_copy() for s in state.structures],
        current_turn=state.current_turn,
        rng=rng,
    )
    result = event.effect(snapshot)

    for res_name, delta in result.resource_delta.items():
        if res_name == "population":
            if delta > 0:
                room = max(0, max_population_capacity(state.structures, config) - res.population)
                if delta > room:
                    messages.append(
                        f"Only {room} of {delta} newcomer(s) could be housed; the rest moved on."
                    )
                    delta = room
            res.population = max(0, res.population + delta)
        else:
            res.set(res_name, max(0, res.get(res_name) + delta))

    if result.additional_message:
        messages.append(result.additional_message)

    if res.population <= 0 and not state.is_game_over:
        state.is_game_over = True
        if not any(CALAMITY_NOTE in m for m in messages):
            messages.append("A sudden calamity has wiped out your remaining population! The realm is lost.")
        else:
            messages.append("The realm has fallen due to events beyond your control.")
        logger.info("game over on turn %d (event)", state.current_turn)
