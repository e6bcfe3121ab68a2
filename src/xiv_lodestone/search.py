"""
Character search.

SearchQuery is an immutable builder for the character search filters;
each method returns a new query. Result extraction is lenient: an entry
without a usable id, name or world is dropped instead of failing the
whole search, since a partial result list is still useful.
"""

from __future__ import annotations

import logging
import re

from bs4 import Tag
from pydantic import BaseModel, ConfigDict

from xiv_lodestone.catalog import Datacenter, GrandCompany, Language, Server
from xiv_lodestone.document import find_by_class, first_by_class, text_of
from xiv_lodestone.models import ProfileSearchResult

log = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")
_U32_MAX = 2**32 - 1


# Builder arguments are catalog members or text naming one.
def _member(catalog, value):
    if isinstance(value, catalog):
        return value
    return catalog.parse(value)


class SearchQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    # A search targets one world or one whole datacenter, never both.
    location: Server | Datacenter | None = None
    languages: tuple[Language, ...] = ()
    grand_companies: tuple[GrandCompany, ...] = ()

    def character(self, name: str) -> SearchQuery:
        return self.model_copy(update={"name": name})

    def server(self, server: Server | str) -> SearchQuery:
        return self.model_copy(update={"location": _member(Server, server)})

    def datacenter(self, datacenter: Datacenter | str) -> SearchQuery:
        return self.model_copy(update={"location": _member(Datacenter, datacenter)})

    def language(self, language: Language | str) -> SearchQuery:
        language = _member(Language, language)
        if language in self.languages:
            return self
        return self.model_copy(update={"languages": (*self.languages, language)})

    def grand_company(self, grand_company: GrandCompany | str) -> SearchQuery:
        grand_company = _member(GrandCompany, grand_company)
        if grand_company in self.grand_companies:
            return self
        return self.model_copy(
            update={"grand_companies": (*self.grand_companies, grand_company)}
        )

    def query_params(self) -> list[tuple[str, str | int]]:
        params: list[tuple[str, str | int]] = []
        if self.name is not None:
            params.append(("q", self.name))
        if isinstance(self.location, Datacenter):
            params.append(("worldname", f"_dc_{self.location}"))
        elif isinstance(self.location, Server):
            params.append(("worldname", str(self.location)))
        params.extend(("blog_lang", language.code) for language in self.languages)
        params.extend(("gcid", gc.gcid) for gc in self.grand_companies)
        return params


def extract_search_results(doc: Tag) -> list[ProfileSearchResult]:
    results = []
    for entry in find_by_class(doc, "entry__link"):
        result = _extract_entry(entry)
        if result is None:
            log.debug("Dropping search entry without id, name or world: %s", entry.get("href"))
            continue
        results.append(result)
    return results


def _extract_entry(entry: Tag) -> ProfileSearchResult | None:
    # The id is the first digit run in e.g. "/lodestone/character/11908971/"
    match = _DIGITS.search(entry.get("href") or "")
    if match is None:
        return None
    user_id = int(match.group())
    if user_id > _U32_MAX:
        return None

    name = first_by_class(entry, "entry__name")
    world = first_by_class(entry, "entry__world")
    if name is None or world is None:
        return None

    return ProfileSearchResult(
        user_id=user_id, name=text_of(name).strip(), world=text_of(world).strip()
    )
