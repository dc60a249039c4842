"""
Tests for photoprep/data/knowledge_base.py

Knowledge Base 모듈의 단위 테스트:
- 규칙 테이블 구조 검증
- 헬퍼 함수 테스트
"""

import pytest
from photoprep.data.knowledge_base import (
    CLUTTER_REASON_RULES,
    CLUTTER_VOCABULARY,
    DEFAULT_UNIDENTIFIED_BUCKET,
    FURNITURE_KEEP_SET,
    MOVABLE_FURNITURE_SET,
    PRIORITY_CLASSES,
    ROOM_INDICATORS,
    STYLING_TIPS,
    TIERS,
    describe_rules,
    get_all_room_keywords,
    get_priority_classes,
    get_room_tiers,
    get_strong_indicators,
    get_styling_tips,
    get_unidentified_bucket,
)
from photoprep.types import ItemCategory, RoomType


class TestRoomIndicators:
    """ROOM_INDICATORS 구조 검증 테스트"""

    def test_every_detectable_room_has_indicators(self):
        """general을 제외한 모든 방 종류에 키워드 티어가 있는지 확인"""
        for room_type in RoomType:
            if room_type == RoomType.GENERAL:
                assert room_type not in ROOM_INDICATORS
            else:
                assert room_type in ROOM_INDICATORS, f"'{room_type}'에 키워드 티어가 없습니다"

    def test_all_tiers_present(self):
        """모든 방에 strong/medium/weak 티어가 있는지 확인"""
        for room_type, tiers in ROOM_INDICATORS.items():
            assert set(tiers.keys()) == set(TIERS), f"'{room_type}' 티어 누락"

    def test_tiers_are_disjoint(self):
        """한 방의 티어끼리 키워드가 겹치지 않는지 확인"""
        for room_type, tiers in ROOM_INDICATORS.items():
            assert not tiers["strong"] & tiers["medium"], room_type
            assert not tiers["strong"] & tiers["weak"], room_type
            assert not tiers["medium"] & tiers["weak"], room_type

    def test_keywords_are_lower_case(self):
        """키워드가 모두 소문자인지 확인 (라벨은 소문자로 정규화됨)"""
        for keyword in get_all_room_keywords():
            assert keyword == keyword.lower()

    def test_tables_are_read_only(self):
        """규칙 테이블이 런타임에 변경되지 않는지 확인"""
        with pytest.raises(TypeError):
            ROOM_INDICATORS[RoomType.KITCHEN] = {}
        with pytest.raises(AttributeError):
            FURNITURE_KEEP_SET.add("lamp")


class TestFurnitureSets:
    """고정/이동식 가구 세트 테스트"""

    def test_keep_set_contains_large_furniture(self):
        for name in ("couch", "bed", "toilet", "refrigerator", "tv", "dining table"):
            assert name in FURNITURE_KEEP_SET

    def test_movable_set_contains_seating(self):
        for name in ("chair", "stool", "ottoman", "bench"):
            assert name in MOVABLE_FURNITURE_SET

    def test_keep_and_movable_are_disjoint(self):
        assert not FURNITURE_KEEP_SET & MOVABLE_FURNITURE_SET


class TestClutterRules:
    """치울 물건 규칙 테스트"""

    def test_vocabulary_not_empty(self):
        assert len(CLUTTER_VOCABULARY) > 100

    def test_reason_rules_structure(self):
        """사유 규칙 구조 확인"""
        for rule in CLUTTER_REASON_RULES:
            assert rule["match"] in ("contains", "exact")
            assert isinstance(rule["category"], ItemCategory)
            assert rule["reason"]
            assert len(rule["keywords"]) > 0

    def test_occupant_rule_comes_first(self):
        """사람/반려동물 규칙이 가장 먼저 검사되는지 확인"""
        assert CLUTTER_REASON_RULES[0]["category"] == ItemCategory.OCCUPANT
        assert "person" in CLUTTER_REASON_RULES[0]["keywords"]


class TestStylingTips:
    """스타일링 팁 테이블 테스트"""

    def test_every_room_has_tips(self):
        for room_type in RoomType:
            entry = get_styling_tips(room_type)
            assert entry is not None, f"'{room_type}'에 팁이 없습니다"
            assert entry["title"]
            assert entry["location"]
            assert len(entry["tips"]) > 0

    def test_kitchen_tips_order(self):
        tips = STYLING_TIPS[RoomType.KITCHEN]["tips"]
        assert tips[0] == "Clear ALL countertops - show maximum space"
        assert tips[-1] == "Turn on under-cabinet lighting"


class TestHelpers:
    """헬퍼 함수 테스트"""

    def test_get_room_tiers_general_is_empty(self):
        assert len(get_room_tiers(RoomType.GENERAL)) == 0

    def test_get_strong_indicators(self):
        assert "toilet" in get_strong_indicators(RoomType.BATHROOM)
        assert "oven" in get_strong_indicators(RoomType.KITCHEN)
        assert get_strong_indicators(RoomType.GENERAL) == frozenset()

    def test_get_priority_classes_common(self):
        assert get_priority_classes() == PRIORITY_CLASSES
        assert get_priority_classes(RoomType.GENERAL) == PRIORITY_CLASSES

    def test_get_priority_classes_room_specific(self):
        kitchen = get_priority_classes(RoomType.KITCHEN)
        assert "plate" in kitchen
        assert "person" in kitchen
        assert "towel" in get_priority_classes(RoomType.BATHROOM)
        assert "towel" not in kitchen

    def test_get_unidentified_bucket(self):
        assert get_unidentified_bucket(RoomType.KITCHEN)[0] == "Kitchen clutter"
        assert get_unidentified_bucket(RoomType.BATHROOM)[0] == "Bathroom items"
        assert get_unidentified_bucket(RoomType.BEDROOM)[0] == "Bedroom clutter"
        assert get_unidentified_bucket(RoomType.LIVING_ROOM) == DEFAULT_UNIDENTIFIED_BUCKET
        assert get_unidentified_bucket(RoomType.GENERAL) == ("Visible clutter", "Remove this object")

    def test_describe_rules(self):
        summary = describe_rules()
        assert summary["room_types"] == 5
        assert summary["keep_furniture"] == len(FURNITURE_KEEP_SET)
        assert summary["clutter_keywords"] == len(CLUTTER_VOCABULARY)
        assert summary["reason_rules"] == len(CLUTTER_REASON_RULES)
