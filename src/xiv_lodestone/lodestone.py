"""
Lodestone client for character, search, world status and ranking pages.

Fetches pages with httpx and hands the parsed document to the matching
extractor. Nothing is cached and nothing is retried: every call issues
fresh requests and re-parses the result.

Each operation has a blocking form built on ``httpx.get`` and an ``_async``
form that takes a caller-owned ``httpx.AsyncClient``, so many lookups can
share one connection pool. The async profile lookup fetches the main page
and the class_job subpage concurrently.
"""

import asyncio
import logging

import httpx

from xiv_lodestone.config import Settings, get_settings
from xiv_lodestone.document import parse_document
from xiv_lodestone.exceptions import CharacterNotFound, LodestoneError, PageNotFound, TransportError
from xiv_lodestone.models import (
    DataCenterDetails,
    FreeCompanyRankingResult,
    Profile,
    ProfileSearchResult,
)
from xiv_lodestone.profile import extract_profile
from xiv_lodestone.search import SearchQuery, extract_search_results
from xiv_lodestone.standings import (
    FreeCompanyLeaderboardQuery,
    RankingPeriod,
    extract_free_company_rankings,
    ranking_url,
)
from xiv_lodestone.worldstatus import extract_server_status

log = logging.getLogger(__name__)

QueryParams = list[tuple[str, str | int]]


def _request_options(settings: Settings, params: QueryParams | None) -> dict:
    return {
        "params": params,
        "headers": {"User-Agent": settings.user_agent},
        "timeout": settings.api_timeout,
        "follow_redirects": True,
    }


def _transport_error(url: str, e: httpx.HTTPError) -> TransportError:
    if isinstance(e, httpx.HTTPStatusError):
        if e.response.status_code == 404:
            return PageNotFound(url)
        return TransportError(f"Failed to fetch {url}: HTTP {e.response.status_code}")
    return TransportError(f"Network error fetching {url}: {e}")


def fetch_page(url: str, params: QueryParams | None = None) -> str:
    log.info("Fetching %s", url)
    try:
        response = httpx.get(url, **_request_options(get_settings(), params))
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise _transport_error(url, e) from e

    return response.text


async def fetch_page_async(
    client: httpx.AsyncClient, url: str, params: QueryParams | None = None
) -> str:
    log.info("Fetching %s", url)
    try:
        response = await client.get(url, **_request_options(get_settings(), params))
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise _transport_error(url, e) from e

    return response.text


# --- Profiles ---


def _profile_url(user_id: int) -> str:
    if user_id <= 0:
        raise LodestoneError(f"Invalid character ID: {user_id}")
    return f"{get_settings().base_url}/character/{user_id}/"


def get_profile(user_id: int) -> Profile:
    profile_url = _profile_url(user_id)
    try:
        main_html = fetch_page(profile_url)
        classes_html = fetch_page(f"{profile_url}class_job/")
    except PageNotFound as e:
        log.warning("Character %d: not found on the Lodestone", user_id)
        raise CharacterNotFound(user_id, e.url) from e

    return extract_profile(user_id, parse_document(main_html), parse_document(classes_html))


async def get_profile_async(client: httpx.AsyncClient, user_id: int) -> Profile:
    profile_url = _profile_url(user_id)
    try:
        main_html, classes_html = await asyncio.gather(
            fetch_page_async(client, profile_url),
            fetch_page_async(client, f"{profile_url}class_job/"),
        )
    except PageNotFound as e:
        log.warning("Character %d: not found on the Lodestone", user_id)
        raise CharacterNotFound(user_id, e.url) from e

    return extract_profile(user_id, parse_document(main_html), parse_document(classes_html))


# --- Search ---


def search(query: SearchQuery) -> list[ProfileSearchResult]:
    url = f"{get_settings().base_url}/character/"
    return _search_results(fetch_page(url, query.query_params()))


async def search_async(client: httpx.AsyncClient, query: SearchQuery) -> list[ProfileSearchResult]:
    url = f"{get_settings().base_url}/character/"
    return _search_results(await fetch_page_async(client, url, query.query_params()))


def _search_results(html: str) -> list[ProfileSearchResult]:
    results = extract_search_results(parse_document(html))
    log.info("Search returned %d character(s)", len(results))
    return results


# --- World status ---


def get_server_status() -> list[DataCenterDetails]:
    url = f"{get_settings().base_url}/worldstatus/"
    return extract_server_status(parse_document(fetch_page(url)))


async def get_server_status_async(client: httpx.AsyncClient) -> list[DataCenterDetails]:
    url = f"{get_settings().base_url}/worldstatus/"
    return extract_server_status(parse_document(await fetch_page_async(client, url)))


# --- Rankings ---


def get_weekly_rankings(
    query: FreeCompanyLeaderboardQuery | None = None, week: int | None = None
) -> list[FreeCompanyRankingResult]:
    return _get_rankings("weekly", query or FreeCompanyLeaderboardQuery(), week)


def get_monthly_rankings(
    query: FreeCompanyLeaderboardQuery | None = None, month: int | None = None
) -> list[FreeCompanyRankingResult]:
    return _get_rankings("monthly", query or FreeCompanyLeaderboardQuery(), month)


async def get_weekly_rankings_async(
    client: httpx.AsyncClient,
    query: FreeCompanyLeaderboardQuery | None = None,
    week: int | None = None,
) -> list[FreeCompanyRankingResult]:
    return await _get_rankings_async(
        client, "weekly", query or FreeCompanyLeaderboardQuery(), week
    )


async def get_monthly_rankings_async(
    client: httpx.AsyncClient,
    query: FreeCompanyLeaderboardQuery | None = None,
    month: int | None = None,
) -> list[FreeCompanyRankingResult]:
    return await _get_rankings_async(
        client, "monthly", query or FreeCompanyLeaderboardQuery(), month
    )


def _get_rankings(
    period: RankingPeriod, query: FreeCompanyLeaderboardQuery, offset: int | None
) -> list[FreeCompanyRankingResult]:
    url = ranking_url(get_settings().base_url, period, offset)
    return extract_free_company_rankings(parse_document(fetch_page(url, query.query_params())))


async def _get_rankings_async(
    client: httpx.AsyncClient,
    period: RankingPeriod,
    query: FreeCompanyLeaderboardQuery,
    offset: int | None,
) -> list[FreeCompanyRankingResult]:
    url = ranking_url(get_settings().base_url, period, offset)
    html = await fetch_page_async(client, url, query.query_params())
    return extract_free_company_rankings(parse_document(html))
