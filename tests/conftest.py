"""
공통 테스트 픽스처
메모리 저장소, 조작 가능한 시계, 가짜 이름 생성기, FastAPI TestClient
"""

import os

os.environ.setdefault("OPENAI_API_KEY", "test-key")

import pytest
from fastapi.testclient import TestClient

from app.cache.name_cache import KoreanNameCache, get_name_cache
from app.cache.storage import MemoryStorage
from app.main import app
from app.services.name_generation_service import (
    NameGenerationError,
    build_response,
    get_name_generator,
)

START_MS = 1_725_170_400_000  # 2024-09-01T06:00:00Z


class FakeClock:
    def __init__(self, now: int = START_MS):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int):
        self.now += ms


class FakeGenerator:
    """OpenAI 대신 고정된 이름을 돌려주는 생성기"""

    def __init__(self):
        self.calls = []
        self.fail = False

    def generate(self, english_name, gender=None):
        self.calls.append((english_name, gender))
        if self.fail:
            raise NameGenerationError("upstream down")
        given = "준서" if gender == "male" else "서연"
        parsed = {
            "surname": {"korean": "박", "hanja": "朴", "meaning": "simple, honest"},
            "givenName": {
                "korean": given,
                "hanja": "瑞然",
                "meaning": "auspicious (瑞) + natural (然)",
                "overall_meaning": "naturally blessed",
            },
        }
        return build_response(english_name, gender, parsed, "fake-model")


def sample_result(full_name: str = "박서연") -> dict:
    return {
        "success": True,
        "english": {"firstName": "Kelly", "surname": "O'Connell", "fullName": "Kelly O'Connell"},
        "korean": {"fullName": full_name},
        "model": "fake-model",
        "cached": False,
    }


@pytest.fixture
def make_result():
    return sample_result


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def name_cache(storage, clock):
    return KoreanNameCache(storage, clock)


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def client(name_cache, generator):
    app.dependency_overrides[get_name_cache] = lambda: name_cache
    app.dependency_overrides[get_name_generator] = lambda: generator
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
