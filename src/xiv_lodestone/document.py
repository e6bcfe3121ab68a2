"""
Document-tree helpers over BeautifulSoup.

Lodestone pages carry no schema, so every lookup here either returns the
node it was asked for or raises NodeNotFound naming the marker that went
missing. Extractors build on these instead of calling BeautifulSoup
directly so that error reporting stays uniform.
"""

import re

from bs4 import BeautifulSoup, Tag

from xiv_lodestone.exceptions import IntegerParseError, NodeNotFound

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_document(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


def find_by_class(node: Tag, class_name: str) -> list[Tag]:
    return node.find_all(class_=class_name)


def find_by_tag(node: Tag, name: str) -> list[Tag]:
    return node.find_all(name)


def first_by_class(node: Tag, class_name: str) -> Tag | None:
    return node.find(class_=class_name)


def require_class(node: Tag, class_name: str, nth: int = 0) -> Tag:
    found = node.find_all(class_=class_name, limit=nth + 1)
    if len(found) <= nth:
        raise NodeNotFound(f"{class_name}({nth})")
    return found[nth]


def require_tag(node: Tag, name: str, nth: int = 0) -> Tag:
    found = node.find_all(name, limit=nth + 1)
    if len(found) <= nth:
        raise NodeNotFound(f"<{name}>({nth})")
    return found[nth]


def element_children(node: Tag) -> list[Tag]:
    return [child for child in node.children if isinstance(child, Tag)]


def text_of(node: Tag) -> str:
    return node.get_text()


def inner_markup(node: Tag) -> str:
    return node.decode_contents()


def parse_int(text: str, what: str, minimum: int = 0, maximum: int | None = None) -> int:
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped):
        raise IntegerParseError(what, text)
    value = int(stripped)
    if value < minimum or (maximum is not None and value > maximum):
        raise IntegerParseError(what, text)
    return value
