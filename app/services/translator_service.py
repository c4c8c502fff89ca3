"""
한국 이름 번역 흐름 서비스
캐시 확인 → (미스 시) 모델 호출 → 기본값 보정 → 캐시 저장
"""

from typing import Any, Dict, List, Optional

from app.cache.name_cache import KoreanNameCache
from app.services.name_generation_service import NameGenerationService

# 모델 응답에 표시 필드가 비어 있을 때 채워 넣는 고정 값
DEFAULT_SURNAME = {"korean": "김", "hanja": "金", "meaning": "gold, metal"}
DEFAULT_GIVEN_NAMES = {
    "male": {
        "korean": "준서",
        "hanja": "俊徐",
        "meaning": "handsome + calm",
        "overall_meaning": "handsome and calm",
    },
    "female": {
        "korean": "민서",
        "hanja": "敏瑞",
        "meaning": "smart + auspicious",
        "overall_meaning": "intelligent and blessed",
    },
}


def compose_full_name(first_name: str, last_name: str = "") -> str:
    """이름/성 입력칸 → 전체 영문 이름."""
    first_name = first_name.strip()
    last_name = last_name.strip()
    return f"{first_name} {last_name}" if last_name else first_name


def apply_display_fallbacks(result: Dict[str, Any], gender: Optional[str]) -> Dict[str, Any]:
    """
    ``korean`` 블록의 성/이름/전체 이름/전체 한자 중 빠진 값을 기본값으로 채웁니다.

    성/이름이 dict 가 아니라 문자열로 온 경우 그 문자열을 한글 값으로 사용합니다.
    """
    korean = dict(result.get("korean") or {})
    default_given = DEFAULT_GIVEN_NAMES["male" if gender == "male" else "female"]

    surname = korean.get("surname")
    if not (isinstance(surname, dict) and surname.get("korean")):
        text = surname if isinstance(surname, str) and surname else DEFAULT_SURNAME["korean"]
        surname = dict(DEFAULT_SURNAME, korean=text)

    given_name = korean.get("givenName")
    if not (isinstance(given_name, dict) and given_name.get("korean")):
        text = given_name if isinstance(given_name, str) and given_name else default_given["korean"]
        given_name = dict(default_given, korean=text)

    korean["surname"] = surname
    korean["givenName"] = given_name
    korean["fullName"] = korean.get("fullName") or surname["korean"] + given_name["korean"]
    korean["fullHanja"] = korean.get("fullHanja") or \
        (surname.get("hanja") or DEFAULT_SURNAME["hanja"]) + (given_name.get("hanja") or default_given["hanja"])

    return {**result, "korean": korean}


class KoreanNameTranslator:
    """화면 계층이 쓰는 번역·즐겨찾기 흐름"""

    def __init__(self, cache: KoreanNameCache, generator: NameGenerationService):
        self.cache = cache
        self.generator = generator

    def translate(self, english_name: str, gender: Optional[str] = None, force_new: bool = False) -> Dict[str, Any]:
        """
        영문 이름을 한국 이름으로 변환합니다.

        Args:
            english_name: 영문 이름 (앞뒤 공백 허용)
            gender: "male" / "female" / None
            force_new: True 면 캐시를 건너뛰고 다시 생성 ("다시 생성" 버튼)

        Returns:
            번역 결과 딕셔너리. 캐시 적중이면 ``cached`` 가 True

        Raises:
            ValueError: 공백만 있는 이름
            NameGenerationError: 모델 호출 실패 (캐시에 저장하지 않음)
        """
        full_name = english_name.strip()
        if not full_name:
            raise ValueError("영문 이름을 입력해 주세요")

        if not force_new:
            cached = self.cache.get(full_name, gender)
            if cached:
                print(f"📦 캐시 적중: {full_name} ({gender or '-'})")
                return {**cached, "cached": True}

        data = self.generator.generate(full_name, gender)
        result = apply_display_fallbacks(data, gender)
        self.cache.set(full_name, gender, result)
        return result

    def add_favorite(self, english_name: str, gender: Optional[str], korean_result: Any) -> bool:
        return self.cache.add_to_favorites(english_name, gender, korean_result)

    def remove_favorite(self, english_name: str, gender: Optional[str] = None) -> bool:
        return self.cache.remove_from_favorites(english_name, gender)

    def favorites(self) -> List[Dict[str, Any]]:
        return self.cache.get_favorites()

    def recent(self, limit: int = 5) -> List[Dict[str, Any]]:
        return self.cache.list_recent(limit)
