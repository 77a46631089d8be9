import re
import logging
import requests

from config import settings
from core.result import Absent, Ok, Reason, Result, from_optional

logger = logging.getLogger(__name__)

# 플랫폼과 무관한 고정 줄 구분자
LINE_SEPARATOR = "\n"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_CHUNK_SIZE = 8192


def normalize(body: str) -> str:
    """줄바꿈을 LINE_SEPARATOR 로 통일하고, 마지막 구분자 하나만 제거"""
    text = _LINE_BREAK.sub(LINE_SEPARATOR, body)
    if text.endswith(LINE_SEPARATOR):
        text = text[: -len(LINE_SEPARATOR)]
    return text


def split_lines(text: str) -> list:
    return text.split(LINE_SEPARATOR)


def read_text(response: requests.Response) -> str:
    """스트리밍 응답 본문을 UTF-8 로 읽어 정규화된 텍스트로 반환"""
    body = b"".join(response.iter_content(chunk_size=_CHUNK_SIZE))
    return normalize(body.decode("utf-8", errors="replace"))


def load_as_string(url, timeout: float = None) -> Result:
    """
    URL 의 내용을 문자열로 반환.
    - url 이 None 이면 요청 없이 Absent
    - 요청/응답 에러는 예외 대신 Absent (빈 본문은 Ok(""))
    """
    return from_optional(url).then(lambda u: _fetch_text(u, timeout))


def _fetch_text(url: str, timeout) -> Result:
    timeout = settings.resolve_timeout(timeout)
    try:
        with requests.get(
            url, headers=settings.default_headers(), stream=True, timeout=timeout
        ) as response:
            response.raise_for_status()
            text = read_text(response)
    except requests.exceptions.RequestException as e:
        logger.warning(f"[Loader] 요청 실패 {url}: {e}")
        return Absent(Reason.TRANSPORT_FAILURE)

    logger.debug(f"[Loader] {url} 로드 완료 (len: {len(text)})")
    return Ok(text)


def load_as_list(url, timeout: float = None) -> Result:
    """URL 의 내용을 줄 단위 리스트로 반환 (추가 요청 없음)"""
    return load_as_string(url, timeout=timeout).then(
        lambda text: Ok(split_lines(text))
    )


def content_length(url, timeout: float = None) -> Result:
    """페이지 크기(byte). Content-Length 헤더가 없으면 Absent"""
    if url is None:
        return Absent(Reason.INPUT_ABSENT)

    timeout = settings.resolve_timeout(timeout)
    try:
        response = requests.head(
            url,
            headers=settings.default_headers(),
            allow_redirects=True,
            timeout=timeout,
        )
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.warning(f"[Loader] HEAD 요청 실패 {url}: {e}")
        return Absent(Reason.TRANSPORT_FAILURE)

    raw = response.headers.get("Content-Length")
    try:
        return Ok(int(raw))
    except (TypeError, ValueError):
        logger.debug(f"[Loader] Content-Length 없음: {url}")
        return Absent(Reason.NOT_FOUND)
