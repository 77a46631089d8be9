import os
import logging
import webbrowser
from pathlib import Path

import requests

from config import settings
from core.result import Absent, Ok, Reason, Result
from utils.loader import read_text

logger = logging.getLogger(__name__)


# 기본 브라우저로 링크 열기
def open_link(url) -> bool:
    if url is None:
        return False
    try:
        return bool(webbrowser.open(url))
    except webbrowser.Error as e:
        logger.warning(f"[Browser] 링크 열기 실패 {url}: {e}")
        return False


# payload 전송 후 응답 반환
def post(url, payload, timeout: float = None) -> Result:
    if url is None or payload is None:
        return Absent(Reason.INPUT_ABSENT)

    headers = settings.default_headers()
    headers["Content-Type"] = "application/x-www-form-urlencoded"
    try:
        with requests.post(
            url,
            data=payload.encode("utf-8"),
            headers=headers,
            stream=True,
            timeout=settings.resolve_timeout(timeout),
        ) as response:
            response.raise_for_status()
            return Ok(read_text(response))
    except requests.exceptions.RequestException as e:
        logger.warning(f"[Post] 요청 실패 {url}: {e}")
        return Absent(Reason.TRANSPORT_FAILURE)


def save(destination, url, timeout: float = None) -> bool:
    """
    url 의 내용을 destination 파일로 저장.
    파일이 이미 있으면 다운로드 없이 True.
    실패 시 중간까지 쓴 파일은 삭제 (다음 호출에서 '이미 있음'으로 오인 방지)
    """
    if destination is None or url is None:
        return False

    path = Path(destination)
    if path.exists():
        logger.debug(f"[Save] 이미 존재: {path}")
        return True

    try:
        with requests.get(
            url,
            headers=settings.default_headers(),
            stream=True,
            timeout=settings.resolve_timeout(timeout),
        ) as response:
            response.raise_for_status()
            with open(path, "wb") as f:
                for chunk in response.iter_content(chunk_size=8192):
                    f.write(chunk)
    except (requests.exceptions.RequestException, OSError) as e:
        logger.warning(f"[Save] 다운로드 실패 {url} -> {path}: {e}")
        if path.exists():
            try:
                os.remove(path)
            except OSError as rm_e:
                logger.error(f"[Save] 임시 파일 삭제 실패 {path}: {rm_e}")
        return False

    logger.info(f"[Save] 저장 완료: {path}")
    return True
