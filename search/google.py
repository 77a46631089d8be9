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

# AJAX Search API 응답(JSON 형태 텍스트)의 결과 항목:
#   {"unescapedUrl":"...","url":"<인코딩된 링크>","visibleUrl":"..."}
ANCHOR = AnchorSpec(prefix_token='"url":"', terminator='","visibleUrl"', decode=True)

ENGINE = SearchEngine(
    name="google",
    base_url=settings.GOOGLE_SEARCH_URL,
    query_param="q",
    anchor=ANCHOR,
)


def extract(response, site_prefix) -> Result:
    """
    "url":"<site_prefix>... 의 첫 항목에서 링크를 잘라 디코딩.
    site_prefix 는 응답과 같은 인코딩 형태로 전달해야 한다 (예: http%3A%2F%2F...)
    """
    return extract_link(response, site_prefix, ANCHOR)


def search_url(query) -> Result:
    return build_search_url(ENGINE, query)


def search_result(query, timeout: float = None) -> Result:
    return fetch_search_result(ENGINE, query, timeout=timeout)


def search_result_link(query, site_prefix, timeout: float = None) -> Result:
    return find_link(ENGINE, query, site_prefix, timeout=timeout)
