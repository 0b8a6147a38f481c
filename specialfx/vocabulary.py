"""Closed sets of world-effect and sound identifiers a sink understands.

Identifiers are canonical upper-case names (``"MOBSPAWNER_FLAMES"``,
``"LEVEL_UP"``).  Lookups are case-insensitive; an unknown name raises
:class:`~specialfx.errors.UnknownEnumValue`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable

from .errors import UnknownEnumValue


def _names(names: Iterable[str]) -> FrozenSet[str]:
    return frozenset(name.upper() for name in names)


@dataclass(frozen=True)
class Vocabulary:
    """Identifiers accepted for ``effect`` and ``sound`` specs."""

    effects: FrozenSet[str]
    sounds: FrozenSet[str]

    def resolve_effect(self, name: str) -> str:
        candidate = name.upper()
        if candidate not in self.effects:
            raise UnknownEnumValue("effect", name)
        return candidate

    def resolve_sound(self, name: str) -> str:
        candidate = name.upper()
        if candidate not in self.sounds:
            raise UnknownEnumValue("sound", name)
        return candidate


WORLD_EFFECTS = _names(
    [
        "click1",
        "click2",
        "bow_fire",
        "door_toggle",
        "extinguish",
        "record_play",
        "ghast_shriek",
        "ghast_shoot",
        "blaze_shoot",
        "zombie_chew_wooden_door",
        "zombie_chew_iron_door",
        "zombie_destroy_door",
        "smoke",
        "step_sound",
        "potion_break",
        "ender_signal",
        "mobspawner_flames",
    ]
)

SOUNDS = _names(
    [
        "ambience_cave",
        "ambience_rain",
        "ambience_thunder",
        "anvil_break",
        "anvil_land",
        "anvil_use",
        "arrow_hit",
        "burp",
        "chest_close",
        "chest_open",
        "click",
        "door_close",
        "door_open",
        "drink",
        "eat",
        "explode",
        "fall_big",
        "fall_small",
        "fire",
        "fire_ignite",
        "fizz",
        "fuse",
        "glass",
        "hurt_flesh",
        "item_break",
        "item_pickup",
        "lava",
        "lava_pop",
        "level_up",
        "note_bass",
        "note_bass_drum",
        "note_bass_guitar",
        "note_piano",
        "note_pling",
        "note_snare_drum",
        "note_sticks",
        "orb_pickup",
        "piston_extend",
        "piston_retract",
        "portal",
        "portal_travel",
        "portal_trigger",
        "shoot_arrow",
        "splash",
        "splash2",
        "successful_hit",
        "swim",
        "water",
        "wood_click",
        "cat_meow",
        "chicken_egg_pop",
        "enderdragon_growl",
        "enderman_teleport",
        "firework_blast",
        "firework_launch",
        "firework_twinkle",
        "villager_no",
        "villager_yes",
        "wither_spawn",
        "wolf_howl",
    ]
)

DEFAULT_VOCABULARY = Vocabulary(effects=WORLD_EFFECTS, sounds=SOUNDS)
