"""Turn-event catalog.

One entry is drawn uniformly at random each turn. Events with an `effect`
return a resource delta computed from a snapshot of the realm; the turn
engine applies it (clamping population to housing and everything to >= 0).

Effects are pure: they read the snapshot, may draw from `snapshot.rng`, and
never touch the game state themselves. Percentage-based gains and losses
round down.
"""

from __future__ import annotations

from realm_architect.models import EventEffectResult, EventSnapshot, GameEvent


def _trade_route(snap: EventSnapshot) -> EventEffectResult:
    markets = snap.count("market")
    if not markets:
        return EventEffectResult()
    gold = 3 * markets
    return EventEffectResult(
        resource_delta={"gold": gold},
        additional_message=f"Your markets profit from the new route: +{gold} gold.",
    )


def _ancient_ruins(snap: EventSnapshot) -> EventEffectResult:
    libraries = snap.count("library")
    if not libraries:
        return EventEffectResult()
    gold = 10 * libraries
    return EventEffectResult(
        resource_delta={"gold": gold},
        additional_message=f"Scholars from your library decipher the ruins: +{gold} gold.",
    )


def _bountiful_harvest(snap: EventSnapshot) -> EventEffectResult:
    food = 5 + 3 * snap.count("farm")
    return EventEffectResult(
        resource_delta={"food": food},
        additional_message=f"The granaries swell: +{food} food.",
    )


def _mineral_vein(snap: EventSnapshot) -> EventEffectResult:
    stone = snap.rng.randint(5, 15)
    gold = snap.rng.randint(2, 6)
    return EventEffectResult(
        resource_delta={"stone": stone, "gold": gold},
        additional_message=f"Miners extract {stone} stone and {gold} gold from the vein.",
    )


def _improved_logging(snap: EventSnapshot) -> EventEffectResult:
    camps = snap.count("loggingCamp") + snap.count("lumberMill")
    wood = max(3, 2 * camps)
    return EventEffectResult(
        resource_delta={"wood": wood},
        additional_message=f"Woodcutters bring in an extra {wood} wood.",
    )


def _new_family(snap: EventSnapshot) -> EventEffectResult:
    newcomers = snap.rng.randint(1, 3)
    return EventEffectResult(
        resource_delta={"population": newcomers},
        additional_message=f"{newcomers} newcomer(s) ask to join the realm.",
    )


def _gold_unrest(snap: EventSnapshot) -> EventEffectResult:
    if snap.resources.gold >= 10:
        return EventEffectResult(
            additional_message="Fortunately, the treasury is healthy enough to calm the grumbling.",
        )
    return EventEffectResult(
        resource_delta={"population": -1},
        additional_message="A disgruntled worker packed up and left the realm.",
    )


def _sickness(snap: EventSnapshot) -> EventEffectResult:
    lost = max(1, snap.resources.population // 10)
    return EventEffectResult(
        resource_delta={"population": -lost},
        additional_message=f"{lost} citizen(s) succumbed to the illness.",
    )


def _low_taxes(snap: EventSnapshot) -> EventEffectResult:
    gold = snap.resources.gold
    if gold <= 0:
        return EventEffectResult()
    loss = max(1, gold // 10)
    return EventEffectResult(
        resource_delta={"gold": -loss},
        additional_message=f"The treasury is {loss} gold lighter than planned.",
    )


def _abundant_wildlife(snap: EventSnapshot) -> EventEffectResult:
    return EventEffectResult(
        resource_delta={"food": 5},
        additional_message="Hunters bring back 5 food.",
    )


def _small_fire(snap: EventSnapshot) -> EventEffectResult:
    wood = snap.resources.wood
    if snap.count("warehouse"):
        loss = wood * 5 // 100
        note = f"Your warehouse kept most of the stock safe; only {loss} wood was lost."
    else:
        loss = wood * 10 // 100
        note = f"{loss} wood went up in smoke."
    return EventEffectResult(resource_delta={"wood": -loss}, additional_message=note)


def _bandit_raid(snap: EventSnapshot) -> EventEffectResult:
    if snap.count("barracks"):
        return EventEffectResult(
            additional_message="Soldiers from your barracks drove the raiders off empty-handed.",
        )
    loss = snap.resources.gold * 20 // 100
    return EventEffectResult(
        resource_delta={"gold": -loss},
        additional_message=f"The raiders made off with {loss} gold.",
    )


TURN_EVENTS: list[GameEvent] = [
    GameEvent(message="A gentle breeze rustles the leaves, a peaceful day."),
    GameEvent(
        message="Traders report a new route opening nearby, promising future opportunities.",
        effect=_trade_route,
    ),
    GameEvent(message="A meteor shower was spotted last night! Some say it's a good omen."),
    GameEvent(
        message="Old ruins were discovered by scouts, hinting at ancient secrets.",
        effect=_ancient_ruins,
    ),
    GameEvent(
        message="Bountiful harvest! Food production is up this season.",
        effect=_bountiful_harvest,
    ),
    GameEvent(
        message="A rare mineral vein was found, increasing stone and gold prospects.",
        effect=_mineral_vein,
    ),
    GameEvent(
        message="Improved logging techniques have slightly boosted wood output this turn.",
        effect=_improved_logging,
    ),
    GameEvent(
        message="A new family has arrived at the gates, hoping to settle in your realm.",
        effect=_new_family,
    ),
    GameEvent(
        message="Whispers of unrest due to low gold reserves. Workers are grumbling.",
        effect=_gold_unrest,
    ),
    GameEvent(
        message="Sickness has spread, a few people are unable to work or have tragically passed.",
        effect=_sickness,
    ),
    GameEvent(
        message="Tax collectors report slightly lower than expected gold income.",
        effect=_low_taxes,
    ),
    GameEvent(message="A wandering bard has composed a song about your growing realm!"),
    GameEvent(
        message="Local wildlife seems more abundant this season.",
        effect=_abundant_wildlife,
    ),
    GameEvent(
        message="A small fire broke out but was quickly extinguished.",
        effect=_small_fire,
    ),
    GameEvent(
        message="Bandits were sighted raiding caravans near the border.",
        effect=_bandit_raid,
    ),
    GameEvent(message="Neighboring settlements speak of your realm with cautious optimism."),
]
