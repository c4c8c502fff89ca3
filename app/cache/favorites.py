"""
즐겨찾기 저장소
``korean_name_favorites_v1`` 키 아래 JSON 배열(최신 항목이 앞)로 보관
"""

import json
from typing import Any, Dict, List, Optional

from app.cache.clock import Clock, is_timestamp, iso_from_ms, now_ms
from app.cache.exceptions import CorruptPersistedDataError, StoreError
from app.cache.storage import KeyValueStorage

FAVORITES_KEY = "korean_name_favorites_v1"
FAVORITES_CAP = 20


class FavoritesStore:
    """(영문 이름, 성별) 쌍이 유일한 최대 20개짜리 즐겨찾기 목록"""

    def __init__(self, storage: KeyValueStorage, clock: Clock = now_ms):
        self.storage = storage
        self.clock = clock
        self.last_error: Optional[StoreError] = None

    def _load(self) -> List[Dict[str, Any]]:
        blob = self.storage.read(FAVORITES_KEY)
        if not blob:
            return []
        try:
            favorites = json.loads(blob)
        except ValueError as e:
            raise CorruptPersistedDataError(FAVORITES_KEY, str(e)) from e
        if not isinstance(favorites, list) or not all(isinstance(fav, dict) for fav in favorites):
            raise CorruptPersistedDataError(FAVORITES_KEY, "object 배열이 아님")
        if not all(is_timestamp(fav.get("timestamp")) for fav in favorites):
            raise CorruptPersistedDataError(FAVORITES_KEY, "timestamp 가 숫자가 아닌 항목")
        return favorites

    def _save(self, favorites: List[Dict[str, Any]]):
        try:
            blob = json.dumps(favorites, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise CorruptPersistedDataError(FAVORITES_KEY, f"직렬화 실패: {e}") from e
        self.storage.write(FAVORITES_KEY, blob)

    def _absorb(self, action: str, error: StoreError):
        self.last_error = error
        print(f"⚠️ 즐겨찾기 {action} 오류: {error}")

    @staticmethod
    def _matches(fav: Dict[str, Any], english_name: str, gender: Optional[str]) -> bool:
        return fav.get("english") == english_name and fav.get("gender") == gender

    def add(self, english_name: str, gender: Optional[str], korean_result: Any) -> bool:
        """
        즐겨찾기에 추가합니다.

        Returns:
            추가되면 True, 이미 같은 (이름, 성별)이 있거나 저장 실패 시 False
        """
        try:
            try:
                favorites = self._load()
            except CorruptPersistedDataError as e:
                self._absorb("조회", e)
                favorites = []
            if any(self._matches(fav, english_name, gender) for fav in favorites):
                self.last_error = None
                return False

            now = self.clock()
            favorites.insert(0, {
                "id": now,
                "english": english_name,
                "gender": gender,
                "korean": korean_result,
                "savedAt": iso_from_ms(now),
                "timestamp": now,
            })
            del favorites[FAVORITES_CAP:]

            self._save(favorites)
            self.last_error = None
            return True
        except StoreError as e:
            self._absorb("추가", e)
            return False

    def remove(self, english_name: str, gender: Optional[str] = None) -> bool:
        """일치하는 항목을 모두 삭제합니다. 일치 항목이 없어도 True."""
        try:
            favorites = self._load()
            filtered = [fav for fav in favorites if not self._matches(fav, english_name, gender)]
            self._save(filtered)
            self.last_error = None
            return True
        except StoreError as e:
            self._absorb("삭제", e)
            return False

    def list(self) -> List[Dict[str, Any]]:
        """timestamp 내림차순(최근 저장 먼저)으로 정렬한 즐겨찾기 목록"""
        try:
            favorites = self._load()
            self.last_error = None
        except StoreError as e:
            self._absorb("조회", e)
            return []
        return sorted(favorites, key=lambda fav: fav.get("timestamp", 0), reverse=True)

    def is_favorite(self, english_name: str, gender: Optional[str] = None) -> bool:
        try:
            favorites = self._load()
            self.last_error = None
        except StoreError as e:
            self._absorb("조회", e)
            return False
        return any(self._matches(fav, english_name, gender) for fav in favorites)

    def clear(self):
        try:
            self.storage.delete(FAVORITES_KEY)
            self.last_error = None
        except StoreError as e:
            self._absorb("초기화", e)
