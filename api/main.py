import logging
import os

import uvicorn
from fastapi import FastAPI, HTTPException

from config import settings
from core.pipeline import ENGINES, first_link_for, get_engine
from .schemas import LinkRequest, LinkResponse

log_level = getattr(logging, settings.LOG_LEVEL, logging.INFO)
if not isinstance(log_level, int):
    log_level = logging.INFO
logging.basicConfig(
    level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# FastAPI 앱
app = FastAPI(
    title="Search Link API",
    description="Finds the first link to a site in a search engine's raw result page.",
    version="1.0.0",
)


# API 엔드포인트 정의
@app.post(
    "/link",
    response_model=LinkResponse,
    summary="First Link For Site",
    description="Searches the query on the given engine and returns the first link that starts with the site prefix.",
    tags=["Search"],
)
def first_link_endpoint(request: LinkRequest):
    if not request.site or not request.site.strip():
        logger.warning("Received invalid request: site is empty.")
        raise HTTPException(status_code=400, detail="Site prefix cannot be empty.")

    engine = get_engine(request.engine)
    if not engine:
        raise HTTPException(
            status_code=400, detail=f"Unknown search engine: {request.engine}"
        )

    logger.info(
        f"Received API request: '{request.query}' / {request.site} ({engine.value.name})"
    )
    result = first_link_for(request.query, request.site, engine.value)
    if not result:
        # 네트워크 에러와 검색 결과 없음은 구분하지 않음
        raise HTTPException(status_code=404, detail="링크를 찾지 못했습니다.")

    return LinkResponse(link=result.value, engine=engine.value.name)


@app.get(
    "/health",
    summary="Health Check",
    description="Checks if the API is running and lists the available search engines.",
    tags=["Health"],
)
def health_check():
    return {"status": "ok", "engines": sorted(ENGINES)}


# uvicorn - 로컬 실행 용

if __name__ == "__main__":
    port = int(os.getenv("PORT", 8000))  # 환경 변수 - 포트번호
    logger.info(f"FastAPI 서버 Uvicorn 실행. 포트넘버: {port}")
    uvicorn.run(app, host="0.0.0.0", port=port)
