"""Pydantic models for records extracted from Lodestone pages."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from xiv_lodestone.catalog import Clan, Datacenter, Gender, GrandCompany, Race, Server
from xiv_lodestone.exceptions import CategoryParseError
from xiv_lodestone.jobs import ClassInfo, ClassType

_U16_MAX = 2**16 - 1
_U32_MAX = 2**32 - 1
_I32_MAX = 2**31 - 1
_I64_MAX = 2**63 - 1


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Profile ---


class Attribute(_Record):
    level: int = Field(ge=0, le=_U16_MAX)


ResourceKind = Literal["MP", "GP", "CP"]


class SecondaryResource(_Record):
    """MP for combat classes, GP for gatherers, CP for crafters. Only one is ever shown."""

    kind: ResourceKind
    value: int = Field(ge=0, le=_U32_MAX)


class CharacterImages(_Record):
    avatar_small: str
    full_body: str


class Profile(_Record):
    user_id: int = Field(gt=0)
    title: str | None = None
    free_company: str | None = None
    name: str
    nameday: str
    guardian: str
    city_state: str
    server: Server
    race: Race
    clan: Clan
    gender: Gender
    hp: int = Field(ge=0, le=_U32_MAX)
    secondary_resource: SecondaryResource
    attributes: Mapping[str, Attribute] = Field(default_factory=dict, validate_default=True)
    classes: Mapping[ClassType, ClassInfo | None] = Field(
        default_factory=dict, validate_default=True
    )
    character_images: CharacterImages

    # Held as read-only views; dumped back out as plain dicts.
    @field_validator("attributes", "classes", mode="after")
    @classmethod
    def _freeze_mapping(cls, value: Mapping) -> Mapping:
        return MappingProxyType(dict(value))

    @field_serializer("attributes", "classes", mode="wrap")
    def _dump_mapping(self, value: Mapping, handler) -> Any:
        return handler(dict(value))

    def class_info(self, class_type: ClassType) -> ClassInfo | None:
        return self.classes.get(class_type)

    def level(self, class_type: ClassType) -> int | None:
        """
        Level of a class, or None when it is locked or absent.

        Advanced jobs share their base class's level: once Paladin is
        unlocked both Paladin and Gladiator report the same value, while a
        locked Paladin returns None even though Gladiator has a level.
        """
        info = self.class_info(class_type)
        return info.level if info is not None else None


# --- World status ---


class ServerCategory(Enum):
    STANDARD = "Standard"
    PREFERRED = "Preferred"
    CONGESTED = "Congested"
    NEW = "New"

    @classmethod
    def parse(cls, text: str) -> ServerCategory:
        trimmed = text.strip()
        for member in cls:
            if member.value == trimmed:
                return member
        raise CategoryParseError(trimmed)

    def __str__(self) -> str:
        return self.value


class CharacterAvailability(Enum):
    AVAILABLE = "Characters available"
    UNAVAILABLE = "Characters not available"

    def __str__(self) -> str:
        return self.value


class Online(_Record):
    state: Literal["online"] = "online"
    category: ServerCategory
    availability: CharacterAvailability

    def __str__(self) -> str:
        return "Online"


class PartialMaintenance(_Record):
    state: Literal["partial_maintenance"] = "partial_maintenance"
    category: ServerCategory
    availability: CharacterAvailability

    def __str__(self) -> str:
        return "Partial Maintenance"


class Maintenance(_Record):
    state: Literal["maintenance"] = "maintenance"

    def __str__(self) -> str:
        return "Maintenance"


ServerStatus = Annotated[
    Online | PartialMaintenance | Maintenance,
    Field(discriminator="state"),
]


class ServerDetails(_Record):
    name: str
    status: ServerStatus


class DataCenterDetails(_Record):
    name: Datacenter
    servers: tuple[ServerDetails, ...] = ()


# --- Rankings ---


class FreeCompanyRankingResult(_Record):
    ranking: int = Field(ge=-_I32_MAX - 1, le=_I32_MAX)
    free_company_name: str
    world_name: Server
    datacenter: Datacenter
    grand_company: GrandCompany
    company_credits: int = Field(ge=-_I64_MAX - 1, le=_I64_MAX)


# --- Search ---


class ProfileSearchResult(_Record):
    user_id: int = Field(ge=0, le=_U32_MAX)
    name: str
    world: str
