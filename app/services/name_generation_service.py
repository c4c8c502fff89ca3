"""
한국 이름 생성 서비스 (OpenAI)
영문 이름 + 성별 → 한글 성/이름, 한자, 뜻
"""

import json
import re
from functools import lru_cache
from typing import Any, Dict, Optional

from openai import OpenAI

from app.cache.clock import iso_from_ms, now_ms
from app.config import get_settings

_CODE_FENCE_OPEN = re.compile(r"```json\s*")
_CODE_FENCE_CLOSE = re.compile(r"\s*```")


class NameGenerationError(Exception):
    """모델 호출 실패 또는 응답 구조 오류."""
    pass


def build_prompt(english_name: str, gender: Optional[str] = None) -> str:
    gender_line = f"- Gender: {gender}\n" if gender else ""
    return f"""You are a Korean naming expert. Create a Korean name for: "{english_name}"
{gender_line}
RULES:
- Korean surname: 1 character (김, 이, 박, 최, 정, etc.)
- Korean given name: 2 characters
- Consider the gender and meaning of the English name
- Use appropriate hanja (Chinese characters)
- Provide meaningful translations

RESPOND in this EXACT JSON format only:
{{
  "surname": {{
    "korean": "박",
    "hanja": "朴",
    "meaning": "simple, honest"
  }},
  "givenName": {{
    "korean": "서연",
    "hanja": "瑞然",
    "meaning": "auspicious (瑞) + natural (然)",
    "overall_meaning": "naturally blessed"
  }}
}}"""


def parse_model_output(text: str) -> Dict[str, Any]:
    """모델 응답 텍스트에서 코드 펜스를 걷어내고 JSON 을 파싱합니다."""
    clean_text = _CODE_FENCE_CLOSE.sub("", _CODE_FENCE_OPEN.sub("", text)).strip()
    try:
        parsed = json.loads(clean_text)
    except ValueError as e:
        raise NameGenerationError(f"JSON 파싱 실패: {e}") from e

    surname = parsed.get("surname") if isinstance(parsed, dict) else None
    given_name = parsed.get("givenName") if isinstance(parsed, dict) else None
    if not isinstance(surname, dict) or not surname.get("korean") \
            or not isinstance(given_name, dict) or not given_name.get("korean"):
        raise NameGenerationError("응답에 surname.korean / givenName.korean 이 없습니다")
    return parsed


def build_response(english_name: str, gender: Optional[str], parsed: Dict[str, Any], model: str) -> Dict[str, Any]:
    """파싱된 모델 출력 → API 성공 응답 페이로드."""
    clean_name = english_name.strip()
    name_parts = clean_name.split(" ")
    surname = parsed["surname"]
    given_name = parsed["givenName"]

    return {
        "success": True,
        "english": {
            "firstName": name_parts[0],
            "surname": " ".join(name_parts[1:]),
            "fullName": clean_name,
        },
        "korean": {
            "surname": {
                "korean": surname.get("korean"),
                "hanja": surname.get("hanja"),
                "meaning": surname.get("meaning"),
            },
            "givenName": {
                "korean": given_name.get("korean"),
                "hanja": given_name.get("hanja"),
                "meaning": given_name.get("meaning"),
                "overall_meaning": given_name.get("overall_meaning"),
            },
            "fullName": surname["korean"] + given_name["korean"],
            "fullHanja": (surname.get("hanja") or "") + (given_name.get("hanja") or ""),
        },
        "gender": gender,
        "model": model,
        "timestamp": iso_from_ms(now_ms()),
        "cached": False,
    }


class NameGenerationService:
    def __init__(self, client: Optional[OpenAI] = None):
        settings = get_settings()
        self.model = settings.name_model
        self.temperature = settings.name_temperature
        self.max_tokens = settings.name_max_tokens
        self.client = client or OpenAI(api_key=settings.openai_api_key)

    def generate(self, english_name: str, gender: Optional[str] = None) -> Dict[str, Any]:
        """
        영문 이름에 어울리는 한국 이름을 생성합니다.

        Args:
            english_name: 공백이 정리된 영문 이름 (예: "Michael Johnson")
            gender: "male" / "female" / None

        Returns:
            API 성공 응답 딕셔너리 (``cached: False``)

        Raises:
            NameGenerationError: 호출 실패, JSON 파싱 실패, 필수 필드 누락
        """
        clean_name = english_name.strip()
        print(f"🤖 이름 생성 요청: {clean_name} ({gender or '성별 미지정'})")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": "You generate Korean names and answer with JSON only."},
                    {"role": "user", "content": build_prompt(clean_name, gender)},
                ],
                response_format={"type": "json_object"},
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
            text = response.choices[0].message.content or ""
        except Exception as e:
            print(f"❌ 이름 생성 API 호출 실패: {e}")
            raise NameGenerationError(str(e)) from e

        parsed = parse_model_output(text)
        result = build_response(clean_name, gender, parsed, self.model)
        print(f"✅ 생성 완료: {clean_name} → {result['korean']['fullName']}")
        return result


@lru_cache
def get_name_generator() -> NameGenerationService:
    """FastAPI DI용 NameGenerationService 싱글턴."""
    return NameGenerationService()
