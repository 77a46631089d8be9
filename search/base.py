import logging
from dataclasses import dataclass

from core.result import Absent, Ok, Reason, Result
from utils import codec, loader

logger = logging.getLogger(__name__)


# 검색 엔진의 기본 골격


@dataclass(frozen=True)
class AnchorSpec:
    """
    응답 본문에서 링크의 시작/끝을 찾기 위한 토큰
    - prefix_token: site prefix 앞에 붙는 고정 토큰 (없으면 "")
    - terminator: 링크 끝을 나타내는 토큰
    - decode: 잘라낸 링크를 퍼센트 디코딩할지 여부
    """

    prefix_token: str
    terminator: str
    decode: bool = False


@dataclass(frozen=True)
class SearchEngine:
    name: str
    base_url: str
    query_param: str
    anchor: AnchorSpec


def extract_link(response, site_prefix, anchor: AnchorSpec) -> Result:
    """
    response 에서 prefix_token + site_prefix 의 첫 위치를 찾고,
    그 위치부터 terminator 까지를 잘라 반환.
    잘라낸 문자열은 prefix_token 바로 뒤에서 시작한다 (site_prefix 포함).
    """
    if response is None or site_prefix is None:
        return Absent(Reason.INPUT_ABSENT)

    start = response.find(anchor.prefix_token + site_prefix)
    if start == -1:  # 링크 시작 위치 없음
        logger.debug(f"[Extract] site prefix 없음: {site_prefix}")
        return Absent(Reason.NOT_FOUND)

    end = response.find(anchor.terminator, start)
    if end == -1:  # 링크 끝 위치 없음 (잘린 응답)
        logger.debug(f"[Extract] terminator 없음: {anchor.terminator!r}")
        return Absent(Reason.NOT_FOUND)

    link = response[start + len(anchor.prefix_token) : end]
    if anchor.decode:
        return codec.decode(link)
    return Ok(link)


def build_search_url(engine: SearchEngine, query) -> Result:
    # base_url 에 이미 쿼리 파라미터가 있으면 '&' 로 이어붙임 (google: ?v=1.0)
    joiner = "&" if "?" in engine.base_url else "?"
    return codec.encode(query).then(
        lambda encoded: Ok(f"{engine.base_url}{joiner}{engine.query_param}={encoded}")
    )


def fetch_search_result(engine: SearchEngine, query, timeout: float = None) -> Result:
    """검색 엔진의 원본 응답 본문"""
    return build_search_url(engine, query).then(
        lambda url: loader.load_as_string(url, timeout=timeout)
    )


def find_link(engine: SearchEngine, query, site_prefix, timeout: float = None) -> Result:
    """query 검색 결과에서 site_prefix 에 해당하는 첫 링크"""
    if site_prefix is None:
        return Absent(Reason.INPUT_ABSENT)
    return fetch_search_result(engine, query, timeout=timeout).then(
        lambda body: extract_link(body, site_prefix, engine.anchor)
    )
