"""
번역 캐시·즐겨찾기 저장소 내부 예외.

스토어 내부에서만 발생하며, 공개 연산은 이 예외를 잡아서
None / False / 빈 리스트 / 0으로 채운 통계로 바꿔 반환합니다.
"""


class StoreError(Exception):
    """캐시 저장소 예외의 베이스 클래스."""
    pass


class StorageUnavailableError(StoreError):
    """영속 저장소에 접근할 수 없을 때 (권한, 디스크, 비활성화 등)."""
    pass


class CorruptPersistedDataError(StoreError):
    """저장된 블롭이 JSON으로 파싱되지 않거나 최상위 타입이 다를 때."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"'{key}' 블롭 손상: {reason}")
        self.key = key
