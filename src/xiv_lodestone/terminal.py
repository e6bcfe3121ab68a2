"""
Terminal output for the lodestone CLI.

ANSI colours for dark backgrounds, disabled automatically when stdout is
not a TTY, plus renderers for world status and YAML record dumps.
"""

import sys
from enum import Enum

import yaml

from xiv_lodestone.models import DataCenterDetails, Maintenance, PartialMaintenance, ServerStatus


class Color(Enum):
    RESET = "\033[0m"
    BOLD = "\033[1m"

    YELLOW = "\033[33m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_CYAN = "\033[96m"
    BRIGHT_WHITE = "\033[97m"


def _supports_color() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def colorize(text: str, *colors: Color) -> str:
    if not _supports_color():
        return text
    prefix = "".join(c.value for c in colors)
    return f"{prefix}{text}{Color.RESET.value}"


def warning(message: str) -> None:
    print(colorize(f"⚠ {message}", Color.BRIGHT_YELLOW))


def error(message: str) -> None:
    print(colorize(f"✗ {message}", Color.BRIGHT_RED), file=sys.stderr)


def section_header(title: str) -> None:
    separator = "=" * 60
    print(f"\n{colorize(separator, Color.BRIGHT_BLUE)}")
    print(colorize(title, Color.BOLD, Color.BRIGHT_CYAN))
    print(colorize(separator, Color.BRIGHT_BLUE))


def key_value(key: str, value: str, indent: int = 0) -> None:
    spaces = " " * indent
    colored_key = colorize(f"{key}:", Color.BRIGHT_WHITE)
    print(f"{spaces}{colored_key} {value}")


def yaml_block(data: object) -> None:
    print(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), end="")


def status_label(status: ServerStatus) -> str:
    if isinstance(status, Maintenance):
        return colorize(str(status), Color.BRIGHT_RED)
    if isinstance(status, PartialMaintenance):
        return colorize(f"{status} ({status.category}, {status.availability})", Color.YELLOW)
    return colorize(f"{status} ({status.category}, {status.availability})", Color.BRIGHT_GREEN)


def server_status(datacenters: list[DataCenterDetails]) -> None:
    for datacenter in datacenters:
        section_header(str(datacenter.name))
        for server in datacenter.servers:
            key_value(server.name, status_label(server.status), indent=2)
