"""
한국 이름 생성 FastAPI 메인 애플리케이션
영문 이름 → 한국 이름(한글·한자·뜻) 생성, 번역 캐시 및 즐겨찾기 API
"""

from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.cache.name_cache import KoreanNameCache, get_name_cache
from app.config import Settings, get_settings
from app.schemas import (
    CacheStats,
    FavoriteEntry,
    FavoriteRequest,
    FavoriteResponse,
    Gender,
    RecentTranslation,
    TranslateRequest,
    TranslateResponse,
)
from app.services.name_generation_service import (
    NameGenerationError,
    NameGenerationService,
    get_name_generator,
)
from app.services.translator_service import KoreanNameTranslator

# FastAPI 앱 생성
app = FastAPI(
    title="Korean Name Generator",
    description="영문 이름을 AI로 한국 이름(한글·한자·뜻)으로 바꿔 주는 API",
    version="2.0.0"
)

# CORS 설정 (프론트엔드 연동)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Validation 에러 핸들러
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    print(f"\n{'='*60}")
    print(f"❌ VALIDATION ERROR DETAILS:")
    print(f"   URL: {request.url}")
    print(f"   Method: {request.method}")
    print(f"   Validation Errors: {exc.errors()}")
    print(f"{'='*60}\n")

    return JSONResponse(
        status_code=422,
        content={
            "detail": jsonable_encoder(exc.errors()),
            "message": "Request validation failed. Check server logs for details."
        }
    )


def get_translator(
    cache: KoreanNameCache = Depends(get_name_cache),
    generator: NameGenerationService = Depends(get_name_generator),
) -> KoreanNameTranslator:
    return KoreanNameTranslator(cache, generator)


@app.get("/healthz")
def health_check(settings: Settings = Depends(get_settings)):
    """헬스 체크"""
    return {"status": "ok", "service": settings.service_name}


@app.post("/api/translate", response_model=TranslateResponse)
def translate(request: TranslateRequest, translator: KoreanNameTranslator = Depends(get_translator)):
    """
    영문 이름 → 한국 이름 생성 API

    요청 형식:
    {
        "englishName": "Michael Johnson",
        "gender": "male",
        "forceNew": false
    }
    """
    if not request.english_name.strip():
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid input", "message": "Please provide an English name"}
        )

    print(f"📋 번역 요청: {request.english_name} ({request.gender or '-'}) forceNew={request.force_new}")

    try:
        return translator.translate(request.english_name, request.gender, force_new=request.force_new)
    except NameGenerationError as e:
        print(f"❌ 이름 생성 오류: {e}")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "Generation failed",
                "message": "AI failed to generate Korean name. Please try again."
            }
        )


# ─────────────────────────────────────────────────────────────
# 번역 캐시
# ─────────────────────────────────────────────────────────────

@app.get("/api/cache/recent", response_model=List[RecentTranslation])
def recent_translations(limit: int = Query(5, ge=1, le=100), cache: KoreanNameCache = Depends(get_name_cache)):
    """최근 번역 목록 (최신순)"""
    return cache.list_recent(limit)


@app.get("/api/cache/stats", response_model=CacheStats)
def cache_stats(cache: KoreanNameCache = Depends(get_name_cache)):
    return cache.get_stats()


@app.delete("/api/cache")
def clear_cache(cache: KoreanNameCache = Depends(get_name_cache)):
    cache.clear()
    return {"success": True}


@app.delete("/api/cache/entry")
def remove_cache_entry(
    english_name: str = Query(..., alias="englishName"),
    gender: Optional[Gender] = None,
    cache: KoreanNameCache = Depends(get_name_cache),
):
    cache.remove(english_name, gender)
    return {"success": True}


# ─────────────────────────────────────────────────────────────
# 즐겨찾기
# ─────────────────────────────────────────────────────────────

@app.get("/api/favorites", response_model=List[FavoriteEntry])
def list_favorites(cache: KoreanNameCache = Depends(get_name_cache)):
    return cache.get_favorites()


@app.post("/api/favorites", response_model=FavoriteResponse)
def add_favorite(request: FavoriteRequest, cache: KoreanNameCache = Depends(get_name_cache)):
    if not request.english_name.strip():
        raise HTTPException(status_code=400, detail="englishName은 필수입니다.")

    added = cache.add_to_favorites(request.english_name, request.gender, request.korean)
    return {
        "success": added,
        "message": "Added to favorites!" if added else "Already in favorites!",
    }


@app.delete("/api/favorites", response_model=FavoriteResponse)
def remove_favorite(
    english_name: str = Query(..., alias="englishName"),
    gender: Optional[Gender] = None,
    cache: KoreanNameCache = Depends(get_name_cache),
):
    return {"success": cache.remove_from_favorites(english_name, gender)}


# 루트 경로 (API 문서 안내)
@app.get("/")
def root():
    return {
        "service": "Korean Name Generator",
        "version": "2.0.0",
        "docs": "/docs",
        "endpoints": {
            "translate": "/api/translate",
            "recent": "/api/cache/recent",
            "cache_stats": "/api/cache/stats",
            "clear_cache": "/api/cache",
            "remove_cache_entry": "/api/cache/entry",
            "favorites": "/api/favorites",
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
