"""
영문 이름 + 성별 → 캐시 키 정규화.

``"  Kelly   O'Connell "`` 와 ``"kelly o'connell"`` 은 같은 키가 되고,
성별이 주어지면 ``_male`` / ``_female`` 접미사로 키 공간이 나뉩니다.
빈 이름 검사는 호출하는 쪽 책임입니다.
"""

import re
from typing import Optional

_WHITESPACE = re.compile(r"\s+")


def normalize_key(english_name: str, gender: Optional[str] = None) -> str:
    """캐시 키를 반환합니다. 예: ``("Michael  Johnson", "male") → "michael_johnson_male"``"""
    key = _WHITESPACE.sub("_", english_name.lower().strip())
    if gender:
        key = f"{key}_{gender}"
    return key
