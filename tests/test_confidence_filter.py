"""
Tests for photoprep/processors/2_confidence_filter.py

ConfidenceFilter 단위 테스트:
- adaptive 임계치 (우선순위 클래스 / 방별 클래스 / 일반 클래스)
- 고정 임계치
"""

import pytest
from unittest.mock import patch

from photoprep.config import Config
from photoprep.processors import ConfidenceFilter
from photoprep.types import RoomType


class TestAdaptiveThresholds:
    """기본(adaptive) 임계치 테스트"""

    def test_default_thresholds(self):
        with patch.object(Config, 'MIN_CONFIDENCE', None):
            f = ConfidenceFilter()
        assert f.min_confidence is None
        assert f.base_threshold == 0.15
        assert f.priority_threshold == 0.12

    def test_priority_class_uses_lower_threshold(self, make_detection):
        with patch.object(Config, 'MIN_CONFIDENCE', None):
            f = ConfidenceFilter()
        assert f.admit(make_detection("person", 0.13), RoomType.GENERAL)
        assert f.admit(make_detection("cell phone", 0.13), RoomType.GENERAL)
        assert not f.admit(make_detection("person", 0.11), RoomType.GENERAL)

    def test_generic_class_uses_base_threshold(self, make_detection):
        with patch.object(Config, 'MIN_CONFIDENCE', None):
            f = ConfidenceFilter()
        assert not f.admit(make_detection("vase", 0.13), RoomType.GENERAL)
        assert f.admit(make_detection("vase", 0.15), RoomType.GENERAL)

    def test_room_specific_classes(self, make_detection):
        """방별 키워드 클래스는 그 방에서만 낮은 임계치"""
        with patch.object(Config, 'MIN_CONFIDENCE', None):
            f = ConfidenceFilter()
        assert f.admit(make_detection("plate", 0.13), RoomType.KITCHEN)
        assert not f.admit(make_detection("plate", 0.13), RoomType.BEDROOM)
        assert f.admit(make_detection("towel", 0.13), RoomType.BATHROOM)
        assert not f.admit(make_detection("towel", 0.13), RoomType.KITCHEN)
        assert f.admit(make_detection("pillow", 0.13), RoomType.BEDROOM)


class TestFixedThreshold:
    """고정 임계치 테스트"""

    def test_min_confidence_sets_base(self, make_detection):
        f = ConfidenceFilter(min_confidence=0.5)
        assert f.base_threshold == 0.5
        assert f.priority_threshold == 0.12
        assert not f.admit(make_detection("vase", 0.4), RoomType.GENERAL)
        assert f.admit(make_detection("person", 0.2), RoomType.GENERAL)

    def test_low_min_confidence_lowers_priority(self):
        f = ConfidenceFilter(min_confidence=0.05)
        assert f.base_threshold == 0.05
        assert f.priority_threshold == 0.05

    def test_config_min_confidence(self):
        with patch.object(Config, 'MIN_CONFIDENCE', 0.3):
            f = ConfidenceFilter()
        assert f.base_threshold == 0.3

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError):
            ConfidenceFilter(min_confidence=1.5)
        with pytest.raises(ValueError):
            ConfidenceFilter(min_confidence=-0.1)


class TestFilter:
    """filter 함수 테스트"""

    def test_keeps_order(self, make_detection):
        objects = [
            make_detection("vase", 0.9),
            make_detection("vase", 0.01),
            make_detection("cup", 0.5),
            make_detection("lamp", 0.2),
        ]
        with patch.object(Config, 'MIN_CONFIDENCE', None):
            admitted = ConfidenceFilter().filter(objects, RoomType.KITCHEN)
        assert [o.label for o in admitted] == ["vase", "cup", "lamp"]

    def test_empty(self):
        assert ConfidenceFilter().filter([], RoomType.GENERAL) == []
