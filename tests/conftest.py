"""
pytest configuration and shared fixtures
"""
import pytest

from photoprep.types import BoundingBox, DetectedObject


# pytest-asyncio mode 설정
pytest_plugins = ('pytest_asyncio',)


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "asyncio: marks tests as async")


@pytest.fixture
def make_detection():
    """DetectedObject 생성 헬퍼"""
    def _make(label, confidence=0.9, bbox=(0, 0, 10, 10)):
        return DetectedObject(label=label, confidence=confidence, bbox=BoundingBox(*bbox))
    return _make


@pytest.fixture
def kitchen_scene(make_detection):
    """오븐 + 병 (kitchen으로 분류되는 기본 장면)"""
    return [
        make_detection("oven", 0.9, (0, 0, 1, 1)),
        make_detection("bottle", 0.9, (10, 20, 5, 5)),
    ]


@pytest.fixture
def living_room_scene(make_detection):
    """의자 3개 + 소파 + TV"""
    return [
        make_detection("chair", 0.8, (10, 200, 50, 80)),
        make_detection("chair", 0.7, (120, 210, 50, 80)),
        make_detection("chair", 0.6, (240, 205, 50, 80)),
        make_detection("couch", 0.95, (300, 150, 400, 200)),
        make_detection("tv", 0.9, (350, 20, 200, 120)),
    ]
