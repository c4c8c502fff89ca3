"""이름 생성 서비스 테스트 (OpenAI 클라이언트는 가짜 객체로 대체)"""

import json
from types import SimpleNamespace

import pytest

from app.services.name_generation_service import (
    NameGenerationError,
    NameGenerationService,
    build_prompt,
    parse_model_output,
)

MODEL_JSON = {
    "surname": {"korean": "박", "hanja": "朴", "meaning": "simple, honest"},
    "givenName": {
        "korean": "서연",
        "hanja": "瑞然",
        "meaning": "auspicious (瑞) + natural (然)",
        "overall_meaning": "naturally blessed",
    },
}


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_service(content=None, error=None):
    completions = FakeCompletions(content, error)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return NameGenerationService(client=client), completions


def test_generate_builds_response():
    service, completions = make_service(json.dumps(MODEL_JSON, ensure_ascii=False))
    result = service.generate("  Kelly O'Connell ", "female")

    assert result["success"] is True
    assert result["cached"] is False
    assert result["gender"] == "female"
    assert result["english"] == {"firstName": "Kelly", "surname": "O'Connell", "fullName": "Kelly O'Connell"}
    assert result["korean"]["fullName"] == "박서연"
    assert result["korean"]["fullHanja"] == "朴瑞然"
    assert result["korean"]["givenName"]["overall_meaning"] == "naturally blessed"
    assert result["timestamp"].endswith("Z")
    assert completions.kwargs["response_format"] == {"type": "json_object"}
    assert "Kelly O'Connell" in completions.kwargs["messages"][1]["content"]


def test_single_word_name_has_empty_surname():
    service, _ = make_service(json.dumps(MODEL_JSON))
    result = service.generate("Emma")
    assert result["english"] == {"firstName": "Emma", "surname": "", "fullName": "Emma"}


def test_code_fences_are_stripped():
    text = "```json\n" + json.dumps(MODEL_JSON) + "\n```"
    assert parse_model_output(text)["surname"]["korean"] == "박"


def test_missing_korean_fields_raise():
    with pytest.raises(NameGenerationError):
        parse_model_output(json.dumps({"surname": {"hanja": "朴"}, "givenName": {"korean": "서연"}}))


def test_invalid_json_raises():
    with pytest.raises(NameGenerationError):
        parse_model_output("Sorry, I cannot help with that.")


def test_upstream_failure_raises():
    service, _ = make_service(error=RuntimeError("connection reset"))
    with pytest.raises(NameGenerationError):
        service.generate("Michael Johnson", "male")


def test_prompt_mentions_gender_only_when_given():
    assert "Gender: male" in build_prompt("Michael Johnson", "male")
    assert "Gender:" not in build_prompt("Michael Johnson")
