# core/pipeline.py
import logging

from core.result import Absent, Ok, Reason, Result
from search import bing, google
from search.base import SearchEngine, build_search_url, fetch_search_result, find_link

logger = logging.getLogger(__name__)

# 검색 엔진 목록
ENGINES = {
    bing.ENGINE.name: bing.ENGINE,
    google.ENGINE.name: google.ENGINE,
}
DEFAULT_ENGINE = bing.ENGINE.name

__all__ = [
    "ENGINES",
    "DEFAULT_ENGINE",
    "get_engine",
    "build_search_url",
    "search_result",
    "first_link_for",
]


def get_engine(engine) -> Result:
    """엔진 이름(str) 또는 SearchEngine 을 받아 SearchEngine 반환"""
    if engine is None:
        return Absent(Reason.INPUT_ABSENT)
    if isinstance(engine, SearchEngine):
        return Ok(engine)
    found = ENGINES.get(str(engine).strip().lower())
    if found is None:
        logger.warning(f"[Pipeline] 알 수 없는 엔진: {engine}")
        return Absent(Reason.NOT_FOUND)
    return Ok(found)


def search_result(query, engine=DEFAULT_ENGINE, timeout: float = None) -> Result:
    """검색 엔진의 원본 응답 본문"""
    return get_engine(engine).then(
        lambda eng: fetch_search_result(eng, query, timeout=timeout)
    )


def first_link_for(
    query, site_prefix, engine=DEFAULT_ENGINE, timeout: float = None
) -> Result:
    """
    query 로 검색한 결과에서 site_prefix 에 해당하는 첫 링크.
    단계별로 Absent 가 나오면 바로 Absent 반환
    """
    selected = get_engine(engine)
    if not selected:
        return selected
    eng = selected.value

    result = find_link(eng, query, site_prefix, timeout=timeout)
    if result:
        logger.info(f"[Pipeline] {eng.name} 링크 추출 성공: {result.value}")
    else:
        logger.info(
            f"[Pipeline] {eng.name} 링크 없음 ({result.reason.value}): '{query}' / {site_prefix}"
        )
    return result
