"""
app/cache/name_cache.py
=======================
번역 캐시 + 즐겨찾기 **파사드(Facade)**

애플리케이션의 나머지 부분은 이 모듈의 `KoreanNameCache` 만 사용합니다.

* 캐시      : ``get`` / ``set`` / ``remove`` / ``clear`` / ``get_stats`` /
  ``get_all_cached`` / ``list_recent``
* 즐겨찾기  : ``add_to_favorites`` / ``remove_from_favorites`` /
  ``get_favorites`` / ``is_favorite``

`get_name_cache()` 는 `get_settings()` 와 같은 방식의 프로세스 단위 싱글턴으로,
FastAPI ``Depends`` 로 주입되며 테스트에서는 ``dependency_overrides`` 로
`MemoryStorage` 기반 인스턴스로 교체합니다.
"""

from functools import lru_cache
from typing import Any, Dict, List, Optional

from app.cache.clock import Clock, now_ms
from app.cache.favorites import FavoritesStore
from app.cache.storage import FileStorage, KeyValueStorage
from app.cache.translation_cache import TranslationCacheStore
from app.config import get_settings


class KoreanNameCache:
    """번역 캐시와 즐겨찾기를 하나로 묶은 진입점."""

    def __init__(self, storage: KeyValueStorage, clock: Clock = now_ms):
        self.translations = TranslationCacheStore(storage, clock)
        self.favorites = FavoritesStore(storage, clock)

    # 번역 캐시 -----------------------------------------------------------
    def get(self, english_name: str, gender: Optional[str] = None) -> Optional[Any]:
        return self.translations.get(english_name, gender)

    def set(self, english_name: str, gender: Optional[str], translation: Any):
        self.translations.set(english_name, gender, translation)

    def remove(self, english_name: str, gender: Optional[str] = None):
        self.translations.remove(english_name, gender)

    def clear(self):
        self.translations.clear()

    def get_stats(self) -> Dict[str, int]:
        return self.translations.stats()

    def get_all_cached(self) -> List[Dict[str, Any]]:
        """'최근 번역' 패널용 요약 목록 (최신순)."""
        return self.translations.list_recent()

    def list_recent(self, limit: int) -> List[Dict[str, Any]]:
        return self.translations.list_recent(limit)

    # 즐겨찾기 -------------------------------------------------------------
    def add_to_favorites(self, english_name: str, gender: Optional[str], korean_result: Any) -> bool:
        return self.favorites.add(english_name, gender, korean_result)

    def remove_from_favorites(self, english_name: str, gender: Optional[str] = None) -> bool:
        return self.favorites.remove(english_name, gender)

    def get_favorites(self) -> List[Dict[str, Any]]:
        return self.favorites.list()

    def is_favorite(self, english_name: str, gender: Optional[str] = None) -> bool:
        return self.favorites.is_favorite(english_name, gender)


@lru_cache
def get_name_cache() -> KoreanNameCache:
    """설정된 디렉터리의 FileStorage 를 쓰는 KoreanNameCache 싱글턴."""
    settings = get_settings()
    return KoreanNameCache(FileStorage(settings.storage_dir))
