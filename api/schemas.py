# api/schemas.py
from typing import Optional

from pydantic import BaseModel


class LinkRequest(BaseModel):
    """검색어와 찾을 사이트 prefix 를 받는 요청 모델"""

    query: str
    site: str
    engine: str = "bing"


class LinkResponse(BaseModel):
    """추출된 링크를 반환하는 응답 모델"""

    link: Optional[str] = None
    engine: str
