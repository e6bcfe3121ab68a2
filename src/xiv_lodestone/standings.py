"""
Free company leaderboard extraction.

Ranking rows are decomposed positionally:

    rank | crest | <h4>name</h4><p>World [Datacenter]</p> | <img alt="GC"> | credits

Each position that is missing raises its own FreeCompanyParseError
subclass so a layout change points straight at the broken column.
"""

from __future__ import annotations

import logging
from typing import Literal

from bs4 import Tag
from pydantic import BaseModel, ConfigDict, Field

from xiv_lodestone.catalog import Datacenter, GrandCompany, Server
from xiv_lodestone.document import element_children, first_by_class, parse_int, text_of
from xiv_lodestone.exceptions import (
    CreditsMissing,
    DataCenterMissing,
    FreeCompanyMissing,
    FreeCompanyParseError,
    GrandCompanyMissing,
    RankingMissing,
    TableNotFound,
    WorldNameMissing,
)
from xiv_lodestone.models import FreeCompanyRankingResult

log = logging.getLogger(__name__)

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1

RankingPeriod = Literal["weekly", "monthly"]


class FreeCompanyLeaderboardQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Meaning undocumented by the site; passed through as-is.
    filter: int | None = None
    world_name: Server | None = None
    dc_group: Datacenter | None = None
    page: int | None = Field(default=None, ge=1, le=5)
    grand_company: GrandCompany | None = None

    def query_params(self) -> list[tuple[str, str | int]]:
        params: list[tuple[str, str | int]] = []
        if self.filter is not None:
            params.append(("filter", self.filter))
        if self.world_name is not None:
            params.append(("world_name", str(self.world_name)))
        if self.dc_group is not None:
            params.append(("dcgroup", str(self.dc_group)))
        if self.page is not None:
            params.append(("page", self.page))
        if self.grand_company is not None:
            params.append(("gcid", self.grand_company.gcid))
        return params


def ranking_url(base_url: str, period: RankingPeriod, offset: int | None = None) -> str:
    url = f"{base_url}/ranking/fc/{period}"
    if offset is not None:
        url = f"{url}/{offset}"
    return f"{url}/"


def extract_free_company_rankings(doc: Tag) -> list[FreeCompanyRankingResult]:
    table = first_by_class(doc, "ranking-character")
    if table is None:
        raise TableNotFound()

    results = [_extract_row(row) for row in table.find_all("tr") if row.find("td") is not None]
    log.debug("Ranking table: %d rows", len(results))
    return results


def _nth(nodes: list[Tag], index: int, error: type[FreeCompanyParseError]) -> Tag:
    if index >= len(nodes):
        raise error()
    return nodes[index]


def _extract_row(row: Tag) -> FreeCompanyRankingResult:
    cells = element_children(row)

    ranking = parse_int(
        text_of(_nth(cells, 0, RankingMissing)), "ranking", minimum=_I32_MIN, maximum=_I32_MAX
    )
    # cells[1] is the crest
    company = element_children(_nth(cells, 2, FreeCompanyMissing))
    free_company_name = text_of(_nth(company, 0, FreeCompanyMissing)).strip()
    world_name, datacenter = _split_world(text_of(_nth(company, 1, WorldNameMissing)))

    icon = _nth(cells, 3, GrandCompanyMissing).find(True)
    if icon is None or icon.get("alt") is None:
        raise GrandCompanyMissing()
    grand_company = GrandCompany.parse(icon["alt"])

    company_credits = parse_int(
        text_of(_nth(cells, 4, CreditsMissing)),
        "company credits",
        minimum=_I64_MIN,
        maximum=_I64_MAX,
    )

    return FreeCompanyRankingResult(
        ranking=ranking,
        free_company_name=free_company_name,
        world_name=world_name,
        datacenter=datacenter,
        grand_company=grand_company,
        company_credits=company_credits,
    )


def _split_world(text: str) -> tuple[Server, Datacenter]:
    parts = text.replace("\xa0", " ").split()
    if not parts:
        raise WorldNameMissing()
    if len(parts) < 2:
        raise DataCenterMissing()
    # "[Primal]" -> "Primal"
    return Server.parse(parts[0]), Datacenter.parse(parts[1].strip("[]"))
