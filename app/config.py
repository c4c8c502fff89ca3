"""
app/config.py
=============
Pydantic 기반 전역 설정 모듈

• 한국 이름 생성 서비스 전역에서 공통으로 참조할 **환경 변수**를 `Settings`
  클래스로 정의합니다.
• `.env` 파일(or 시스템 환경 변수)로부터 값을 읽어와 모델·API 키·저장 경로 등
  런타임 설정을 관리합니다.
• 캐시 용량·만료 시간·즐겨찾기 개수는 설정이 아니라 `app.cache` 모듈의
  고정 상수입니다.
• `@lru_cache` 데코레이터를 사용한 `get_settings()` 헬퍼는 FastAPI 의존성
  주입(Dependency Injection) 시 프로세스 단위 **싱글턴**으로 재사용됩니다.

Example
~~~~~~~
```python
from fastapi import Depends
from app.config import get_settings

@app.get("/config")
def show_config(settings = Depends(get_settings)):
    return {"name_model": settings.name_model}
```
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """환경 변수 → 타입 안전한 설정 객체(Pydantic).

    Attributes
    ----------
    openai_api_key : str
        OpenAI API 인증 토큰.
    name_model : str, default "gpt-4o-mini"
        한국 이름 생성에 사용할 GPT 모델명.
    name_temperature : float, default 0.7
        생성 다양성(temperature).
    name_max_tokens : int, default 300
        응답 최대 토큰 수.
    storage_dir : str, default "data/name_cache"
        번역 캐시·즐겨찾기 JSON 블롭을 저장할 디렉터리.
    service_name : str
        헬스 체크 응답에 노출되는 서비스 이름.
    """

    openai_api_key: str
    name_model: str = "gpt-4o-mini"
    name_temperature: float = 0.7
    name_max_tokens: int = 300
    storage_dir: str = "data/name_cache"
    service_name: str = "korean-name-generator"

    # .env 파일 위치 및 인코딩 설정
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """FastAPI DI용 Settings 싱글턴을 반환합니다."""
    return Settings()
