"""캐시 파사드 테스트"""

from app.cache.translation_cache import EXPIRY_TIME_MS


def test_whitespace_and_case_insensitive_hit(name_cache, make_result):
    r1 = make_result("박준서")
    name_cache.set("Michael Johnson", "male", r1)
    assert name_cache.get("michael   johnson", "male") == r1
    assert name_cache.get("Michael Johnson", "female") is None


def test_cache_and_favorites_are_independent(name_cache, storage, make_result):
    name_cache.set("Emma Watson", "female", make_result())
    name_cache.add_to_favorites("Emma Watson", "female", make_result()["korean"])

    name_cache.clear()
    assert name_cache.get("Emma Watson", "female") is None
    assert name_cache.is_favorite("Emma Watson", "female")
    assert set(storage.blobs) == {"korean_name_favorites_v1"}


def test_favorites_outlive_cache_expiry(name_cache, clock, make_result):
    name_cache.set("Emma Watson", "female", make_result())
    name_cache.add_to_favorites("Emma Watson", "female", make_result()["korean"])
    clock.advance(EXPIRY_TIME_MS * 2)
    assert name_cache.get("Emma Watson", "female") is None
    assert len(name_cache.get_favorites()) == 1


def test_get_all_cached_and_list_recent(name_cache, clock, make_result):
    for i, name in enumerate(["A One", "B Two", "C Three"]):
        name_cache.set(name, "male", make_result(f"김{i}"))
        clock.advance(1)

    assert [item["english"] for item in name_cache.get_all_cached()] == ["C Three", "B Two", "A One"]
    assert [item["korean"] for item in name_cache.list_recent(1)] == ["김2"]


def test_stats_and_remove(name_cache, make_result):
    name_cache.set("David Smith", "male", make_result())
    assert name_cache.get_stats()["count"] == 1
    name_cache.remove("david smith", "male")
    assert name_cache.get_stats()["count"] == 0


def test_remove_from_favorites(name_cache, make_result):
    assert name_cache.add_to_favorites("Sarah Davis", "female", make_result()["korean"])
    assert name_cache.remove_from_favorites("Sarah Davis", "female")
    assert name_cache.get_favorites() == []
