import re
import logging
from urllib.parse import quote_plus, unquote_to_bytes

from core.result import Absent, Ok, Reason, Result, from_optional

logger = logging.getLogger(__name__)

# '%' 뒤에 16진수 2자리가 오지 않는 경우
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _quote(text: str) -> Result:
    try:
        return Ok(quote_plus(text, safe="*", encoding="utf-8", errors="strict"))
    except UnicodeEncodeError as e:
        logger.warning(f"[Codec] UTF-8 인코딩 실패: {e}")
        return Absent(Reason.DECODE_FAILURE)


def _unquote(text: str) -> Result:
    if _MALFORMED_ESCAPE.search(text):
        logger.debug(f"[Codec] 잘못된 escape 포함: {text[:80]!r}")
        return Absent(Reason.DECODE_FAILURE)
    try:
        raw = unquote_to_bytes(text.replace("+", " "))
        return Ok(raw.decode("utf-8"))
    except UnicodeError as e:
        logger.debug(f"[Codec] UTF-8 디코딩 실패: {e}")
        return Absent(Reason.DECODE_FAILURE)


def encode(text) -> Result:
    """텍스트를 UTF-8 기준 쿼리 문자열 형식으로 인코딩 (공백은 '+')"""
    return from_optional(text).then(_quote)


def decode(text) -> Result:
    """
    응답에서 잘라낸 퍼센트 인코딩 텍스트를 UTF-8 로 디코딩.
    잘못된 escape('%G1', 끝의 '%')나 UTF-8 이 아닌 바이트는 예외 대신 Absent.
    """
    return from_optional(text).then(_unquote)
