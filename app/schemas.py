"""
app/schemas.py
==============

Pydantic 데이터 모델(Pydantic Schemas) 정의 모듈
FastAPI 엔드포인트 Request/Response 바디 검증 및 문서화를 담당합니다.

섹션별 역할
------------
1. 번역 요청 모델
   * `TranslateRequest` : 영문 이름 + 성별 + 강제 재생성 여부

2. 번역 결과 모델 (캐시에 그대로 저장되는 구조)
   * `EnglishName` / `NamePart` / `GivenNamePart` / `KoreanName`

3. 캐시·즐겨찾기 모델
   * `CacheStats`, `RecentTranslation`, `FavoriteRequest`, `FavoriteEntry`,
     `FavoriteResponse`

주의사항
~~~~~~~~
• 이 모듈은 비즈니스 로직이 없는 순수 데이터 클래스만 포함해야 합니다.
• JSON 필드명은 프론트엔드와 저장 블롭 형식(camelCase)을 그대로 따르므로
  ``alias`` 로 매핑합니다.
"""

from typing import Any, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

Gender = Literal["male", "female"]


# ─────────────────────────────────────────────────────────────────
# 1) 번역 요청 스키마
# ─────────────────────────────────────────────────────────────────

class TranslateRequest(BaseModel):
    """/api/translate Request Body 모델."""
    model_config = ConfigDict(populate_by_name=True)

    english_name: str = Field(
        ...,  # 필수값
        alias="englishName",
        examples=["Michael Johnson"],
        description="한국 이름으로 바꿀 영문 이름",
    )
    gender: Optional[Gender] = None
    force_new: bool = Field(default=False, alias="forceNew", description="캐시 무시하고 다시 생성")


# ─────────────────────────────────────────────────────────────────
# 2) 번역 결과 스키마
# ─────────────────────────────────────────────────────────────────

class EnglishName(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    surname: str = ""
    full_name: str = Field(alias="fullName")


class NamePart(BaseModel):
    """성(姓) 한 글자: 한글, 한자, 뜻."""
    korean: str
    hanja: Optional[str] = None
    meaning: Optional[str] = None


class GivenNamePart(NamePart):
    overall_meaning: Optional[str] = None


class KoreanName(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    surname: NamePart
    given_name: GivenNamePart = Field(alias="givenName")
    full_name: str = Field(alias="fullName")
    full_hanja: str = Field(alias="fullHanja")


class TranslateResponse(BaseModel):
    """/api/translate 성공 응답 모델."""
    success: bool = True
    english: EnglishName
    korean: KoreanName
    gender: Optional[Gender] = None
    model: str
    timestamp: str
    cached: bool = False


# ─────────────────────────────────────────────────────────────────
# 3) 캐시·즐겨찾기 스키마
# ─────────────────────────────────────────────────────────────────

class CacheStats(BaseModel):
    count: int
    byte_size: int = Field(alias="byteSize")
    max_size: int = Field(alias="maxSize")


class RecentTranslation(BaseModel):
    """'최근 번역' 패널 항목."""
    english: Optional[str] = None
    gender: Optional[str] = None
    korean: str = "N/A"
    cached: str


class FavoriteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    english_name: str = Field(..., alias="englishName")
    gender: Optional[Gender] = None
    korean: Any = Field(..., description="번역 결과의 korean 블록")


class FavoriteEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    english: str
    gender: Optional[str] = None
    korean: Any = None
    saved_at: str = Field(alias="savedAt")
    timestamp: int


class FavoriteResponse(BaseModel):
    success: bool
    message: Optional[str] = None
