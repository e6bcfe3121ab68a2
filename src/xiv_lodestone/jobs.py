"""
Classes, jobs and per-class progress.

ClassType is the closed catalog of every class and job shown on a
character's class_job page. ClassInfo holds the level and experience for
one of them. A ClassMap records every row that was parsed; rows for
locked jobs are stored as None so "locked" and "not on the page" are both
answered by ``classes.get(class_type) is None``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from xiv_lodestone.exceptions import ClassTypeParseError


class ClassType(Enum):
    # Tanks
    GLADIATOR = "Gladiator"
    PALADIN = "Paladin"
    MARAUDER = "Marauder"
    WARRIOR = "Warrior"
    DARK_KNIGHT = "Dark Knight"
    GUNBREAKER = "Gunbreaker"
    # Healers
    CONJURER = "Conjurer"
    WHITE_MAGE = "White Mage"
    SCHOLAR = "Scholar"
    ASTROLOGIAN = "Astrologian"
    SAGE = "Sage"
    # Melee DPS
    PUGILIST = "Pugilist"
    MONK = "Monk"
    LANCER = "Lancer"
    DRAGOON = "Dragoon"
    ROGUE = "Rogue"
    NINJA = "Ninja"
    SAMURAI = "Samurai"
    REAPER = "Reaper"
    VIPER = "Viper"
    # Physical ranged DPS
    ARCHER = "Archer"
    BARD = "Bard"
    MACHINIST = "Machinist"
    DANCER = "Dancer"
    # Magical ranged DPS
    THAUMATURGE = "Thaumaturge"
    BLACK_MAGE = "Black Mage"
    ARCANIST = "Arcanist"
    SUMMONER = "Summoner"
    RED_MAGE = "Red Mage"
    PICTOMANCER = "Pictomancer"
    BLUE_MAGE = "Blue Mage"
    # Disciples of the Hand
    CARPENTER = "Carpenter"
    BLACKSMITH = "Blacksmith"
    ARMORER = "Armorer"
    GOLDSMITH = "Goldsmith"
    LEATHERWORKER = "Leatherworker"
    WEAVER = "Weaver"
    ALCHEMIST = "Alchemist"
    CULINARIAN = "Culinarian"
    # Disciples of the Land
    MINER = "Miner"
    BOTANIST = "Botanist"
    FISHER = "Fisher"

    @classmethod
    def parse(cls, text: str) -> ClassType:
        member = _CLASS_TYPES.get(text.strip().upper())
        if member is None:
            raise ClassTypeParseError(text)
        return member

    @property
    def base_class(self) -> ClassType | None:
        """The class whose progress this job shares, if it is an advanced job."""
        return ADVANCED_JOB_BASES.get(self)

    def __str__(self) -> str:
        return self.value


_CLASS_TYPES: dict[str, ClassType] = {member.value.upper(): member for member in ClassType}
_CLASS_TYPES["BLUE MAGE (LIMITED JOB)"] = ClassType.BLUE_MAGE

# Jobs unlocked at level 30 that level together with their base class.
ADVANCED_JOB_BASES: dict[ClassType, ClassType] = {
    ClassType.PALADIN: ClassType.GLADIATOR,
    ClassType.WARRIOR: ClassType.MARAUDER,
    ClassType.WHITE_MAGE: ClassType.CONJURER,
    ClassType.MONK: ClassType.PUGILIST,
    ClassType.DRAGOON: ClassType.LANCER,
    ClassType.NINJA: ClassType.ROGUE,
    ClassType.BARD: ClassType.ARCHER,
    ClassType.BLACK_MAGE: ClassType.THAUMATURGE,
    ClassType.SUMMONER: ClassType.ARCANIST,
}


class ClassInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int = Field(ge=0, le=2**32 - 1)
    current_xp: int | None = Field(default=None, ge=0, le=2**32 - 1)
    max_xp: int | None = Field(default=None, ge=0, le=2**32 - 1)

    @model_validator(mode="after")
    def _validate_xp_pair(self) -> ClassInfo:
        if (self.current_xp is None) != (self.max_xp is None):
            raise ValueError("current_xp and max_xp must both be present or both be absent")
        return self


ClassMap = dict[ClassType, ClassInfo | None]


def record_class(classes: ClassMap, class_type: ClassType, info: ClassInfo | None) -> None:
    """
    Store a parsed class row in the map.

    An advanced job's progress is also written under its base class, so
    looking up either Paladin or Gladiator returns the same ClassInfo once
    Paladin is unlocked. A locked job never overwrites a base class that
    already has a row of its own.
    """
    base = ADVANCED_JOB_BASES.get(class_type)
    if base is not None and (info is not None or base not in classes):
        classes[base] = info
    classes[class_type] = info
