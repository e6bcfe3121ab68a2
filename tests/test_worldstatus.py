"""Tests for worldstatus module."""

import pytest

from conftest import load_fixture, read_fixture
from xiv_lodestone.catalog import Datacenter
from xiv_lodestone.document import parse_document
from xiv_lodestone.exceptions import CategoryParseError, DatacenterParseError, NodeMissing
from xiv_lodestone.models import (
    CharacterAvailability,
    Maintenance,
    Online,
    PartialMaintenance,
    ServerCategory,
)
from xiv_lodestone.worldstatus import extract_server_status


def _patched(old: str, new: str):
    html = read_fixture("worldstatus.html")
    assert old in html
    return parse_document(html.replace(old, new, 1))


def test_datacenters_and_worlds_keep_page_order():
    datacenters = extract_server_status(load_fixture("worldstatus.html"))

    assert [dc.name for dc in datacenters] == [
        Datacenter.ELEMENTAL,
        Datacenter.PRIMAL,
        Datacenter.LIGHT,
    ]
    assert [server.name for server in datacenters[0].servers] == ["Aegis", "Atomos", "Carbuncle"]
    assert [server.name for server in datacenters[1].servers] == [
        "Behemoth",
        "Famfrit",
        "Hyperion",
    ]


def test_server_statuses():
    elemental, primal, light = extract_server_status(load_fixture("worldstatus.html"))

    assert elemental.servers[0].status == Online(
        category=ServerCategory.STANDARD, availability=CharacterAvailability.AVAILABLE
    )
    assert elemental.servers[1].status == Online(
        category=ServerCategory.CONGESTED, availability=CharacterAvailability.UNAVAILABLE
    )
    assert elemental.servers[2].status == PartialMaintenance(
        category=ServerCategory.PREFERRED, availability=CharacterAvailability.AVAILABLE
    )
    assert primal.servers[1].status.category is ServerCategory.NEW
    assert primal.servers[2].status == Maintenance()
    assert light.servers[0].status.category is ServerCategory.PREFERRED


def test_full_maintenance_snapshot():
    datacenters = extract_server_status(load_fixture("worldstatus_maintenance.html"))

    assert [dc.name for dc in datacenters] == [Datacenter.AETHER, Datacenter.CRYSTAL]
    assert [server.name for dc in datacenters for server in dc.servers] == [
        "Adamantoise",
        "Cactuar",
        "Balmung",
        "Brynhildr",
    ]
    assert all(
        isinstance(server.status, Maintenance) for dc in datacenters for server in dc.servers
    )


def test_server_list_is_read_only():
    datacenters = extract_server_status(load_fixture("worldstatus.html"))

    assert isinstance(datacenters[0].servers, tuple)
    with pytest.raises(AttributeError):
        datacenters[0].servers.append(datacenters[1].servers[0])


def test_empty_page_has_no_datacenters():
    assert extract_server_status(parse_document("<html><body></body></html>")) == []


def test_category_is_case_sensitive():
    with pytest.raises(CategoryParseError) as exc_info:
        extract_server_status(_patched(">Standard<", ">standard<"))

    assert exc_info.value.actual == "standard"


def test_unknown_category_raises():
    with pytest.raises(CategoryParseError, match="'Conjested'"):
        extract_server_status(_patched(">Congested<", ">Conjested<"))


def test_missing_status_icon_raises():
    with pytest.raises(NodeMissing):
        extract_server_status(_patched('class="world-ic__1 js__tooltip"', 'class="js__tooltip"'))


def test_missing_availability_raises():
    with pytest.raises(NodeMissing, match="world-ic__unavailable"):
        extract_server_status(
            _patched('class="world-ic__available js__tooltip"', 'class="js__tooltip"')
        )


def test_missing_datacenter_header_raises():
    with pytest.raises(NodeMissing, match="world-dcgroup__header"):
        extract_server_status(_patched('<h2 class="world-dcgroup__header">Elemental</h2>', ""))


def test_unknown_datacenter_raises():
    with pytest.raises(DatacenterParseError):
        extract_server_status(_patched(">Elemental<", ">Nym<"))


def test_status_display_strings():
    online = Online(category=ServerCategory.NEW, availability=CharacterAvailability.AVAILABLE)

    assert str(online) == "Online"
    assert str(Maintenance()) == "Maintenance"
    assert str(ServerCategory.CONGESTED) == "Congested"
    assert str(CharacterAvailability.UNAVAILABLE) == "Characters not available"
