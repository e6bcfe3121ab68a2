"""
World status extraction.

The world status page lists datacenter groups, each with an ordered list
of worlds. Every world row carries one of three status icons and, unless
it is under full maintenance, a category label and a character creation
icon.
"""

import logging

from bs4 import Tag

from xiv_lodestone.catalog import Datacenter
from xiv_lodestone.document import find_by_class, first_by_class, text_of
from xiv_lodestone.exceptions import NodeMissing
from xiv_lodestone.models import (
    CharacterAvailability,
    DataCenterDetails,
    Maintenance,
    Online,
    PartialMaintenance,
    ServerCategory,
    ServerDetails,
    ServerStatus,
)

log = logging.getLogger(__name__)

_ONLINE = "world-ic__1"
_PARTIAL_MAINTENANCE = "world-ic__2"
_MAINTENANCE = "world-ic__3"


def extract_server_status(doc: Tag) -> list[DataCenterDetails]:
    datacenters = []
    for group in find_by_class(doc, "world-dcgroup__item"):
        header = first_by_class(group, "world-dcgroup__header")
        if header is None:
            raise NodeMissing("world-dcgroup__header")
        datacenters.append(
            DataCenterDetails(
                name=Datacenter.parse(text_of(header)),
                servers=[_extract_server(row) for row in find_by_class(group, "world-list__item")],
            )
        )
    log.debug("World status: %d datacenters", len(datacenters))
    return datacenters


def _extract_server(row: Tag) -> ServerDetails:
    status = _extract_status(row)
    name = first_by_class(row, "world-list__world_name")
    if name is None:
        raise NodeMissing("world-list__world_name")
    return ServerDetails(name=text_of(name).strip(), status=status)


def _extract_status(row: Tag) -> ServerStatus:
    if first_by_class(row, _ONLINE) is not None:
        return Online(category=_extract_category(row), availability=_extract_availability(row))
    if first_by_class(row, _PARTIAL_MAINTENANCE) is not None:
        return PartialMaintenance(
            category=_extract_category(row), availability=_extract_availability(row)
        )
    if first_by_class(row, _MAINTENANCE) is not None:
        return Maintenance()
    raise NodeMissing(_MAINTENANCE)


def _extract_category(row: Tag) -> ServerCategory:
    node = first_by_class(row, "world-list__world_category")
    if node is None:
        raise NodeMissing("world-list__world_category")
    return ServerCategory.parse(text_of(node))


def _extract_availability(row: Tag) -> CharacterAvailability:
    if first_by_class(row, "world-ic__available") is not None:
        return CharacterAvailability.AVAILABLE
    if first_by_class(row, "world-ic__unavailable") is not None:
        return CharacterAvailability.UNAVAILABLE
    raise NodeMissing("world-ic__unavailable")
