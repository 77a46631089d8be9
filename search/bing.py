from config import settings
from .base import (
    AnchorSpec,
    SearchEngine,
    build_search_url,
    extract_link,
    fetch_search_result,
    find_link,
)
from core.result import Result

# Bing 결과 HTML 은 href="<링크>" 형태. site prefix 로 바로 시작 위치를 잡는다
ANCHOR = AnchorSpec(prefix_token="", terminator='"')

ENGINE = SearchEngine(
    name="bing",
    base_url=settings.BING_SEARCH_URL,
    query_param="q",
    anchor=ANCHOR,
)


def extract(response, site_prefix) -> Result:
    """결과 HTML 에서 site_prefix 로 시작하는 첫 링크 (site_prefix 포함, 디코딩 없음)"""
    return extract_link(response, site_prefix, ANCHOR)


def search_url(query) -> Result:
    return build_search_url(ENGINE, query)


def search_result(query, timeout: float = None) -> Result:
    return fetch_search_result(ENGINE, query, timeout=timeout)


def search_result_link(query, site_prefix, timeout: float = None) -> Result:
    return find_link(ENGINE, query, site_prefix, timeout=timeout)
