"""밀리초 타임스탬프 헬퍼 (스토어에 주입 가능한 시계)."""

import time
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], int]
MAX_TIMESTAMP_MS = 253_402_300_799_999  # 9999-12-31T23:59:59.999Z


def now_ms() -> int:
    """현재 시각을 epoch 밀리초 정수로 반환합니다."""
    return int(time.time() * 1000)


def iso_from_ms(timestamp_ms: int) -> str:
    """epoch 밀리초 → ``2025-09-01T12:00:00.000Z`` 형식 문자열."""
    dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def is_timestamp(value) -> bool:
    """JSON 에서 읽은 값이 0 ~ 9999년 범위의 숫자 타임스탬프인지 (bool, NaN 제외)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return 0 <= value <= MAX_TIMESTAMP_MS
