"""번역 흐름(캐시 → 생성 → 저장) 테스트"""

import pytest

from app.services.name_generation_service import NameGenerationError
from app.services.translator_service import (
    KoreanNameTranslator,
    apply_display_fallbacks,
    compose_full_name,
)


@pytest.fixture
def translator(name_cache, generator):
    return KoreanNameTranslator(name_cache, generator)


def test_miss_generates_and_caches(translator, generator, name_cache):
    result = translator.translate("Michael Johnson", "male")
    assert result["cached"] is False
    assert result["korean"]["fullName"] == "박준서"
    assert generator.calls == [("Michael Johnson", "male")]
    assert name_cache.get("michael johnson", "male") == result


def test_hit_skips_generator(translator, generator):
    translator.translate("Michael Johnson", "male")
    again = translator.translate("  michael   JOHNSON ", "male")
    assert again["cached"] is True
    assert len(generator.calls) == 1


def test_force_new_bypasses_cache(translator, generator):
    translator.translate("Emma Watson", "female")
    result = translator.translate("Emma Watson", "female", force_new=True)
    assert result["cached"] is False
    assert len(generator.calls) == 2


def test_gender_is_separate_subject(translator, generator):
    translator.translate("Alex Kim", "male")
    translator.translate("Alex Kim", "female")
    assert len(generator.calls) == 2


def test_failure_is_not_cached(translator, generator, name_cache):
    generator.fail = True
    with pytest.raises(NameGenerationError):
        translator.translate("Sarah Davis", "female")
    assert name_cache.get("Sarah Davis", "female") is None


def test_blank_name_rejected(translator, generator):
    with pytest.raises(ValueError):
        translator.translate("   ", "male")
    assert generator.calls == []


def test_fallbacks_fill_missing_fields():
    result = apply_display_fallbacks({"success": True, "korean": {"surname": "이", "givenName": None}}, "male")
    korean = result["korean"]
    assert korean["surname"] == {"korean": "이", "hanja": "金", "meaning": "gold, metal"}
    assert korean["givenName"]["korean"] == "준서"
    assert korean["fullName"] == "이준서"
    assert korean["fullHanja"] == "金俊徐"


def test_fallbacks_use_female_defaults_and_keep_present_values():
    result = apply_display_fallbacks({"korean": {"fullName": "최민서"}}, "female")
    assert result["korean"]["givenName"]["hanja"] == "敏瑞"
    assert result["korean"]["surname"]["korean"] == "김"
    assert result["korean"]["fullName"] == "최민서"


def test_compose_full_name():
    assert compose_full_name(" Kelly ", " O'Connell ") == "Kelly O'Connell"
    assert compose_full_name("Emma", "  ") == "Emma"


def test_favorites_and_recent(translator):
    result = translator.translate("Jennifer Miller", "female")
    assert translator.add_favorite("Jennifer Miller", "female", result["korean"])
    assert not translator.add_favorite("Jennifer Miller", "female", result["korean"])
    assert [fav["english"] for fav in translator.favorites()] == ["Jennifer Miller"]
    assert translator.recent()[0]["korean"] == "박서연"
    assert translator.remove_favorite("Jennifer Miller", "female")
    assert translator.favorites() == []


def test_fallbacks_ignore_dict_parts_without_korean():
    result = apply_display_fallbacks(
        {"korean": {"surname": {"hanja": "朴"}, "givenName": {"meaning": "x"}}}, "male")
    korean = result["korean"]
    assert korean["surname"]["korean"] == "김"
    assert korean["givenName"]["korean"] == "준서"
    assert korean["fullName"] == "김준서"
