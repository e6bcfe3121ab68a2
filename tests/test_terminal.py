from io import StringIO
from unittest.mock import patch

from xiv_lodestone import terminal
from xiv_lodestone.catalog import Datacenter
from xiv_lodestone.models import (
    CharacterAvailability,
    DataCenterDetails,
    Maintenance,
    Online,
    PartialMaintenance,
    ServerCategory,
    ServerDetails,
)

ONLINE = Online(category=ServerCategory.STANDARD, availability=CharacterAvailability.AVAILABLE)


def test_colorize_with_tty():
    with patch("sys.stdout.isatty", return_value=True):
        result = terminal.colorize("test", terminal.Color.BRIGHT_RED)
        assert "\033[91m" in result
        assert "test" in result
        assert "\033[0m" in result


def test_colorize_without_tty():
    with patch("sys.stdout.isatty", return_value=False):
        result = terminal.colorize("test", terminal.Color.BRIGHT_RED)
        assert result == "test"
        assert "\033" not in result


def test_error_goes_to_stderr():
    output = StringIO()
    with patch("sys.stderr", output):
        terminal.error("Character 1 not found")

    assert "Character 1 not found" in output.getvalue()


def test_status_label_without_tty():
    partial = PartialMaintenance(
        category=ServerCategory.CONGESTED, availability=CharacterAvailability.UNAVAILABLE
    )
    with patch("sys.stdout.isatty", return_value=False):
        assert terminal.status_label(Maintenance()) == "Maintenance"
        assert terminal.status_label(ONLINE) == "Online (Standard, Characters available)"
        assert terminal.status_label(partial) == (
            "Partial Maintenance (Congested, Characters not available)"
        )


def test_server_status_output():
    datacenters = [
        DataCenterDetails(
            name=Datacenter.PRIMAL,
            servers=[
                ServerDetails(name="Famfrit", status=ONLINE),
                ServerDetails(name="Hyperion", status=Maintenance()),
            ],
        )
    ]
    output = StringIO()
    with patch("sys.stdout", output):
        terminal.server_status(datacenters)

    result = output.getvalue()
    assert "Primal" in result
    assert "  Famfrit: Online (Standard, Characters available)" in result
    assert "  Hyperion: Maintenance" in result


def test_yaml_block_keeps_key_order():
    output = StringIO()
    with patch("sys.stdout", output):
        terminal.yaml_block({"name": "Strawberry Custard", "clan": "Plainsfolk"})

    assert output.getvalue() == "name: Strawberry Custard\nclan: Plainsfolk\n"
