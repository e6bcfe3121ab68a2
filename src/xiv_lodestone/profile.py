"""
Character profile extraction.

A profile is assembled from two pages: the main character page and its
class_job subpage. Extraction is all-or-nothing; the first missing node
or undecodable value raises and no partial Profile is returned. Only the
title and free company are optional.
"""

import html
import logging
import re

from bs4 import Tag

from xiv_lodestone.catalog import Clan, Gender, Race, Server
from xiv_lodestone.document import (
    find_by_class,
    find_by_tag,
    first_by_class,
    inner_markup,
    parse_int,
    require_class,
    require_tag,
    text_of,
)
from xiv_lodestone.exceptions import ImageNodeMissing, ImageUrlMissing, InvalidData, NodeNotFound
from xiv_lodestone.jobs import ClassInfo, ClassMap, ClassType, record_class
from xiv_lodestone.models import Attribute, CharacterImages, Profile, SecondaryResource

log = logging.getLogger(__name__)

_U16_MAX = 2**16 - 1
_U32_MAX = 2**32 - 1

_LINE_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)
# Any whitespace except a plain space; spaces belong to multi-word names.
_TOKEN_SEPARATOR = re.compile(r"[^\S ]+")

_PARAM_MARKERS: dict[str, str] = {
    "character__param__text__hp--en-us": "HP",
    "character__param__text__mp--en-us": "MP",
    "character__param__text__gp--en-us": "GP",
    "character__param__text__cp--en-us": "CP",
}

# Armory groups on the class_job page: tanks/healers, DPS, crafters, gatherers.
_CLASS_GROUP_LIMIT = 4


def extract_profile(user_id: int, main_doc: Tag, classes_doc: Tag) -> Profile:
    name = _extract_name(main_doc)
    title = _extract_title(main_doc)
    free_company = _extract_free_company(main_doc)
    nameday = text_of(require_class(main_doc, "character-block__birth")).strip()
    guardian = text_of(require_class(main_doc, "character-block__name", 1)).strip()
    city_state = text_of(require_class(main_doc, "character-block__name", 2)).strip()
    server = _extract_server(main_doc)
    race, clan, gender = _extract_char_info(main_doc)
    hp, secondary = _extract_params(main_doc)
    attributes = _extract_attributes(main_doc)
    character_images = _extract_images(main_doc)
    classes = extract_classes(classes_doc)

    profile = Profile(
        user_id=user_id,
        title=title,
        free_company=free_company,
        name=name,
        nameday=nameday,
        guardian=guardian,
        city_state=city_state,
        server=server,
        race=race,
        clan=clan,
        gender=gender,
        hp=hp,
        secondary_resource=secondary,
        attributes=attributes,
        classes=classes,
        character_images=character_images,
    )
    log.debug(
        "Profile %d: %s, %d attributes, %d classes",
        user_id,
        profile.name,
        len(profile.attributes),
        len(profile.classes),
    )
    return profile


def extract_classes(doc: Tag) -> ClassMap:
    classes: ClassMap = {}
    for group in find_by_class(doc, "character__content")[:_CLASS_GROUP_LIMIT]:
        for item in find_by_tag(group, "li"):
            # "Paladin / Gladiator" names the job first
            name = text_of(require_class(item, "character__job__name")).split(" / ")[0]
            level_text = text_of(require_class(item, "character__job__level")).strip()
            info = None if level_text == "-" else _extract_class_info(item, level_text)
            record_class(classes, ClassType.parse(name), info)
    return classes


def _extract_class_info(item: Tag, level_text: str) -> ClassInfo:
    parts = text_of(require_class(item, "character__job__exp")).split(" / ")
    if len(parts) != 2:
        raise InvalidData("character__job__exp")

    current_xp = _parse_xp(parts[0])
    max_xp = _parse_xp(parts[1])
    if (current_xp is None) != (max_xp is None):
        raise InvalidData("character__job__exp")

    return ClassInfo(
        level=parse_int(level_text, "character__job__level", maximum=_U32_MAX),
        current_xp=current_xp,
        max_xp=max_xp,
    )


def _parse_xp(text: str) -> int | None:
    text = text.strip()
    if text == "--":
        return None
    return parse_int(text.replace(",", ""), "character__job__exp", maximum=_U32_MAX)


def _extract_name(doc: Tag) -> str:
    return text_of(require_class(doc, "frame__chara__name")).strip()


def _extract_title(doc: Tag) -> str | None:
    node = first_by_class(doc, "frame__chara__title")
    return text_of(node).strip() if node is not None else None


def _extract_free_company(doc: Tag) -> str | None:
    node = first_by_class(doc, "character__freecompany__name")
    if node is None:
        return None
    link = node.find("a")
    return text_of(link).strip() if link is not None else None


def _extract_server(doc: Tag) -> Server:
    # Rendered as "Server\xa0[Datacenter]" or "Server [Datacenter]"
    text = text_of(require_class(doc, "frame__chara__world")).strip()
    world = text.split("\xa0")[0]
    if not world:
        raise InvalidData("Could not find server string")
    server = world.split(" ")[0]
    if not server:
        raise InvalidData("Server string was empty")
    return Server.parse(server)


def _extract_char_info(doc: Tag) -> tuple[Race, Clan, Gender]:
    """
    Decode the "Race / Clan / Gender" block.

    The block reads ``Race<br>Clan / Gender``. Spaces inside a name are
    kept, so "Seeker of the Sun" stays one token. The only race whose name
    has a space is Au Ra; when its two words arrive as separate tokens the
    block has four tokens instead of three.
    """
    markup = _LINE_BREAK.sub("\n", inner_markup(require_class(doc, "character-block__name")))
    markup = markup.replace(" / ", "\n")
    tokens = [
        html.unescape(token).strip(" ")
        for token in _TOKEN_SEPARATOR.split(markup)
        if token.strip(" ")
    ]

    if len(tokens) == 3:
        return Race.parse(tokens[0]), Clan.parse(tokens[1]), Gender.parse(tokens[2])
    if len(tokens) == 4 and f"{tokens[0]} {tokens[1]}" == Race.AU_RA.value:
        return Race.AU_RA, Clan.parse(tokens[2]), Gender.parse(tokens[3])
    raise InvalidData("character-block__name")


def _extract_params(doc: Tag) -> tuple[int, SecondaryResource]:
    block = require_class(doc, "character__param")
    hp: int | None = None
    secondary: SecondaryResource | None = None

    for item in find_by_tag(block, "li"):
        kind = _param_kind(item)
        if kind is None:
            continue
        value_text = text_of(require_tag(item, "span"))
        if kind == "HP":
            if hp is None:
                hp = parse_int(value_text, "HP", maximum=_U32_MAX)
        elif secondary is None:
            secondary = SecondaryResource(
                kind=kind, value=parse_int(value_text, kind, maximum=_U32_MAX)
            )

    if hp is None:
        raise NodeNotFound("HP not found")
    if secondary is None:
        raise InvalidData("MP, GP or CP not found")
    return hp, secondary


def _param_kind(item: Tag) -> str | None:
    for marker, kind in _PARAM_MARKERS.items():
        if first_by_class(item, marker) is not None:
            return kind
    return None


def _extract_attributes(doc: Tag) -> dict[str, Attribute]:
    block = require_class(doc, "character__profile__data")
    attributes: dict[str, Attribute] = {}
    for row in find_by_tag(block, "tr"):
        name = text_of(require_tag(row, "span")).strip()
        level = parse_int(text_of(require_tag(row, "td")), name, maximum=_U16_MAX)
        attributes[name] = Attribute(level=level)
    return attributes


def _extract_images(doc: Tag) -> CharacterImages:
    return CharacterImages(
        avatar_small=_image_url(doc, "character-block__face", "src"),
        full_body=_image_url(doc, "js__image_popup", "href"),
    )


def _image_url(doc: Tag, class_name: str, attribute: str) -> str:
    node = first_by_class(doc, class_name)
    if node is None:
        raise ImageNodeMissing(class_name)
    url = node.get(attribute)
    if not url:
        raise ImageUrlMissing(class_name)
    return url
