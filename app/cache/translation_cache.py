"""
app/cache/translation_cache.py
==============================
**TTL + 용량 제한** 한국 이름 번역 캐시 모듈입니다

목적
----
같은 영문 이름(+성별)에 대해 GPT 호출을 반복하지 않도록 생성 결과를
``korean_name_translations_v2`` 키 아래 JSON 객체 하나로 저장합니다.

```
{
  "michael_johnson_male": {
    "translation": {...},       # 호출자가 넘긴 결과 그대로
    "timestamp": 1725170000000, # 저장 시각 (ms)
    "englishName": "Michael Johnson",
    "gender": "male"
  }
}
```

* **TTL**      : 저장 후 24시간(`EXPIRY_TIME_MS`)이 지난 항목은 없는 것으로 취급하고
  조회 시 삭제합니다.
* **용량 제한** : 항목 수가 `MAX_SIZE`(100) 이상인 상태에서 저장하면 `timestamp`
  가 가장 오래된 `EVICTION_BATCH`(10)개를 한 번에 지운 뒤 저장합니다.

모든 연산은 매번 저장소에서 읽고-수정하고-씁니다(메모리 상태를 들고 있지 않음).
저장소 오류나 손상된 블롭은 경고만 출력하고 기본값을 반환합니다.
"""

import json
from typing import Any, Dict, List, Optional

from app.cache.clock import Clock, is_timestamp, iso_from_ms, now_ms
from app.cache.exceptions import CorruptPersistedDataError, StoreError
from app.cache.name_key import normalize_key
from app.cache.storage import KeyValueStorage

CACHE_KEY = "korean_name_translations_v2"
MAX_SIZE = 100
EVICTION_BATCH = 10
EXPIRY_TIME_MS = 24 * 60 * 60 * 1000  # 24시간


class TranslationCacheStore:
    """영문 이름(+성별) → 번역 결과 캐시."""

    def __init__(self, storage: KeyValueStorage, clock: Clock = now_ms):
        self.storage = storage
        self.clock = clock
        self.last_error: Optional[StoreError] = None

    # ------------------------------------------------------------------
    # 내부 계층: StoreError 를 그대로 던집니다
    # ------------------------------------------------------------------
    def _load(self) -> Dict[str, Dict[str, Any]]:
        blob = self.storage.read(CACHE_KEY)
        if not blob:
            return {}
        try:
            cache = json.loads(blob)
        except ValueError as e:
            raise CorruptPersistedDataError(CACHE_KEY, str(e)) from e
        if not isinstance(cache, dict):
            raise CorruptPersistedDataError(CACHE_KEY, f"object 가 아닌 {type(cache).__name__}")
        if not all(isinstance(item, dict) for item in cache.values()):
            raise CorruptPersistedDataError(CACHE_KEY, "항목이 object 가 아님")
        if not all(is_timestamp(item.get("timestamp")) for item in cache.values()):
            raise CorruptPersistedDataError(CACHE_KEY, "timestamp 가 숫자가 아닌 항목")
        return cache

    def _save(self, cache: Dict[str, Dict[str, Any]]):
        try:
            blob = json.dumps(cache, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise CorruptPersistedDataError(CACHE_KEY, f"직렬화 실패: {e}") from e
        self.storage.write(CACHE_KEY, blob)

    def _absorb(self, action: str, error: StoreError):
        self.last_error = error
        print(f"⚠️ 번역 캐시 {action} 오류: {error}")

    @staticmethod
    def _evict_oldest(cache: Dict[str, Dict[str, Any]]):
        """timestamp 오름차순으로 가장 오래된 EVICTION_BATCH 개 삭제."""
        oldest = sorted(cache.items(), key=lambda item: item[1].get("timestamp", 0))
        for key, _ in oldest[:EVICTION_BATCH]:
            del cache[key]

    # ------------------------------------------------------------------
    # 공개 연산
    # ------------------------------------------------------------------
    def get(self, english_name: str, gender: Optional[str] = None) -> Optional[Any]:
        """캐시된 번역 결과를 반환합니다. 없거나 만료되었으면 ``None``."""
        try:
            cache = self._load()
            key = normalize_key(english_name, gender)
            item = cache.get(key)
            self.last_error = None
            if not item:
                return None

            if self.clock() - item.get("timestamp", 0) > EXPIRY_TIME_MS:
                del cache[key]
                self._save(cache)
                return None

            return item.get("translation")
        except StoreError as e:
            self._absorb("읽기", e)
            return None

    def set(self, english_name: str, gender: Optional[str], translation: Any):
        """번역 결과를 저장합니다. 같은 키가 있으면 덮어씁니다."""
        if translation is None:
            return

        try:
            try:
                cache = self._load()
            except CorruptPersistedDataError as e:
                # 손상된 블롭은 버리고 빈 캐시에서 다시 시작
                self._absorb("읽기", e)
                cache = {}
            key = normalize_key(english_name, gender)

            if len(cache) >= MAX_SIZE:
                self._evict_oldest(cache)

            entry = {
                "translation": translation,
                "timestamp": self.clock(),
                "englishName": english_name,
            }
            if gender:
                entry["gender"] = gender
            cache[key] = entry

            self._save(cache)
            self.last_error = None
        except StoreError as e:
            self._absorb("쓰기", e)

    def remove(self, english_name: str, gender: Optional[str] = None):
        """항목 하나를 삭제합니다. 없는 키는 무시."""
        try:
            cache = self._load()
            cache.pop(normalize_key(english_name, gender), None)
            self._save(cache)
            self.last_error = None
        except StoreError as e:
            self._absorb("삭제", e)

    def clear(self):
        """캐시 블롭 전체를 삭제합니다."""
        try:
            self.storage.delete(CACHE_KEY)
            self.last_error = None
        except StoreError as e:
            self._absorb("초기화", e)

    def stats(self) -> Dict[str, int]:
        """``{count, byteSize, maxSize}``. byteSize 는 직렬화된 블롭의 바이트 수(관측용)."""
        try:
            cache = self._load()
            self.last_error = None
        except StoreError as e:
            self._absorb("통계", e)
            return {"count": 0, "byteSize": 0, "maxSize": MAX_SIZE}

        return {
            "count": len(cache),
            "byteSize": len(json.dumps(cache, ensure_ascii=False).encode("utf-8")),
            "maxSize": MAX_SIZE,
        }

    def list_recent(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """최근 저장 순(timestamp 내림차순)으로 화면 표시용 요약을 반환합니다.

        각 항목은 ``{english, gender, korean, cached}`` 이며, 번역 결과에
        ``korean.fullName`` 이 없으면 ``korean`` 은 ``'N/A'`` 입니다.
        """
        try:
            cache = self._load()
            self.last_error = None
        except StoreError as e:
            self._absorb("목록", e)
            return []

        # 같은 timestamp 면 나중에 저장한 항목이 먼저
        items = sorted(reversed(list(cache.values())), key=lambda item: item.get("timestamp", 0), reverse=True)
        if limit is not None:
            items = items[:limit]

        recent = []
        for item in items:
            translation = item.get("translation")
            korean = translation.get("korean") if isinstance(translation, dict) else None
            full_name = korean.get("fullName") if isinstance(korean, dict) else None
            recent.append({
                "english": item.get("englishName"),
                "gender": item.get("gender"),
                "korean": full_name or "N/A",
                "cached": iso_from_ms(item.get("timestamp", 0)),
            })
        return recent
