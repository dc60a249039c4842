"""
Stage 3: 치울 물건 추천 + 스타일링 팁

선별된 탐지 결과를 규칙 테이블과 대조합니다:
1. 고정/대형 가구 → 제외 (절대 치우라고 하지 않음)
2. 이동식 가구 → 별도 기록 후 스타일링 팁에서 사용
3. 치울 물건 키워드 → SpecificItem (사유 + 분류)
4. 그 외 → 방 종류별 버킷 (CategorizedItem)
5. 이름 기준 중복 제거 (count 증가)
6. 방 종류별 스타일링 팁 추가
"""

import importlib
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from photoprep.config import Config
from photoprep.data.knowledge_base import (
    CLUTTER_REASON_RULES,
    CLUTTER_VOCABULARY,
    DEFAULT_CLUTTER_CATEGORY,
    DEFAULT_CLUTTER_REASON,
    FURNITURE_KEEP_SET,
    MOVABLE_FURNITURE_SET,
    SEATING_KEYWORDS,
    get_strong_indicators,
    get_styling_tips,
    get_unidentified_bucket,
)
from photoprep.types import (
    BoundingBox,
    CategorizedItem,
    DetectedObject,
    ItemCategory,
    Recommendation,
    RoomType,
    SpecificItem,
    StylingTip,
)
from photoprep.utils.keyword_matcher import KeywordMatcher

# 숫자로 시작하는 파일명을 위한 동적 import
_stage2 = importlib.import_module('.2_confidence_filter', package='photoprep.processors')
ConfidenceFilter = _stage2.ConfidenceFilter

logger = logging.getLogger(__name__)


@dataclass
class MovableFurniture:
    """스타일링 팁용으로 기록한 이동식 가구"""
    name: str
    bbox: BoundingBox


@dataclass
class RecommendationResult:
    """추천 결과 + 부가 정보"""
    recommendations: List[Recommendation] = field(default_factory=list)
    total_detected: int = 0
    total_admitted: int = 0
    movable_furniture: List[MovableFurniture] = field(default_factory=list)


class RecommendationEngine:
    """
    치울 물건 추천기

    AI Logic Step 3: (탐지 결과, 방 종류) → 추천 목록

    라벨이 어떤 규칙에도 매칭되지 않으면 방 종류별 버킷으로 보내며,
    라벨 때문에 예외를 던지지 않는다.
    """

    def __init__(
        self,
        min_confidence: Optional[float] = None,
        apply_confidence_filter: bool = True,
        include_general_tips: Optional[bool] = None
    ):
        """
        Args:
            min_confidence: 고정 기본 임계치 (None이면 adaptive)
            apply_confidence_filter: False면 신뢰도 필터 생략
            include_general_tips: general 방에도 팁 추가 (None이면 Config.INCLUDE_GENERAL_TIPS)
        """
        self.confidence_filter = ConfidenceFilter(min_confidence) if apply_confidence_filter else None
        self.include_general_tips = (
            Config.INCLUDE_GENERAL_TIPS if include_general_tips is None else include_general_tips
        )

    # =========================================================================
    # Per-object rules
    # =========================================================================

    @staticmethod
    def is_kept_furniture(label: str) -> bool:
        return KeywordMatcher.matches(label, FURNITURE_KEEP_SET, KeywordMatcher.BIDIRECTIONAL)

    @staticmethod
    def is_movable_furniture(label: str) -> bool:
        return KeywordMatcher.matches(label, MOVABLE_FURNITURE_SET, KeywordMatcher.BIDIRECTIONAL)

    @staticmethod
    def is_clutter(label: str) -> bool:
        return KeywordMatcher.matches(label, CLUTTER_VOCABULARY, KeywordMatcher.BIDIRECTIONAL)

    @staticmethod
    def reason_for(label: str) -> Tuple[str, ItemCategory]:
        """
        치울 물건의 사유와 분류를 찾습니다.

        Args:
            label: 탐지 라벨

        Returns:
            (사유, ItemCategory) - 매칭되는 규칙이 없으면 기본 사유
        """
        for rule in CLUTTER_REASON_RULES:
            if KeywordMatcher.matches(label, rule["keywords"], rule["match"]):
                return rule["reason"], rule["category"]
        return DEFAULT_CLUTTER_REASON, DEFAULT_CLUTTER_CATEGORY

    def categorize(
        self,
        obj: DetectedObject,
        room_type: RoomType,
        movable: List[MovableFurniture]
    ) -> Optional[Recommendation]:
        """
        탐지 결과 하나를 추천 항목으로 변환합니다.

        Args:
            obj: 탐지 결과
            room_type: 방 종류
            movable: 이동식 가구 기록 리스트 (매칭 시 추가됨)

        Returns:
            SpecificItem | CategorizedItem | None (가구인 경우)
        """
        label = obj.label

        if self.is_kept_furniture(label):
            return None

        if self.is_movable_furniture(label):
            movable.append(MovableFurniture(name=label, bbox=obj.bbox))
            return None

        location = obj.bbox.top_left()

        if self.is_clutter(label):
            reason, category = self.reason_for(label)
            return SpecificItem(
                name=label,
                confidence=Config.SPECIFIC_ITEM_CONFIDENCE,
                location=location,
                reason=reason,
                item_category=category,
            )

        bucket, hint = get_unidentified_bucket(room_type)
        return CategorizedItem(
            name=bucket,
            confidence=Config.CATEGORIZED_ITEM_CONFIDENCE,
            location=location,
            category=hint,
        )

    @staticmethod
    def deduplicate(items: Sequence[Recommendation]) -> List[Recommendation]:
        """
        이름(소문자) 기준으로 중복을 제거합니다.

        첫 항목의 사유/분류를 유지하고 이후 항목은 count만 증가시킨다.
        처음 등장한 순서를 유지한다.
        """
        unique: Dict[str, Recommendation] = {}
        for item in items:
            key = item.name.lower()
            if key not in unique:
                item.count = 1
                unique[key] = item
            else:
                unique[key].count += 1
        return list(unique.values())

    # =========================================================================
    # Styling tips
    # =========================================================================

    @staticmethod
    def has_strong_indicator(objects: Sequence[DetectedObject], room_type: RoomType) -> bool:
        strong = get_strong_indicators(room_type)
        return any(KeywordMatcher.matches(obj.label, strong, KeywordMatcher.EXACT) for obj in objects)

    @staticmethod
    def furniture_tip(room_type: RoomType, movable: Sequence[MovableFurniture]) -> Optional[str]:
        """
        이동식 가구에 대한 추가 팁 문장을 만듭니다.

        Args:
            room_type: LIVING_ROOM 또는 GENERAL만 문장을 만든다
            movable: 기록된 이동식 가구

        Returns:
            팁 문장 또는 None
        """
        if not movable:
            return None

        if room_type == RoomType.LIVING_ROOM:
            chairs = [
                f for f in movable
                if any(keyword in f.name.lower() for keyword in SEATING_KEYWORDS)
            ]
            limit = Config.MAX_CHAIRS_BEFORE_REMOVAL
            if len(chairs) > limit:
                return (
                    f"Consider removing {len(chairs) - limit} extra chair(s) "
                    f"to make room feel more spacious"
                )
            if chairs:
                return "Evaluate if extra chairs obstruct walking space - remove if needed"
            return None

        if room_type == RoomType.GENERAL:
            names = ", ".join(f.name.lower() for f in movable)
            return f"Consider removing movable furniture ({names}) if it makes the space feel crowded"

        return None

    def styling_tips(
        self,
        objects: Sequence[DetectedObject],
        admitted: Sequence[DetectedObject],
        room_type: RoomType,
        movable: Sequence[MovableFurniture]
    ) -> List[StylingTip]:
        """
        방 종류별 스타일링 팁을 만듭니다.

        Args:
            objects: 필터 전 전체 탐지 결과 (strong 단서 확인용)
            admitted: 필터를 통과한 탐지 결과
            room_type: 방 종류
            movable: 기록된 이동식 가구

        Returns:
            StylingTip 0개 또는 1개
        """
        if room_type == RoomType.GENERAL:
            if not (self.include_general_tips and admitted):
                return []
        elif not self.has_strong_indicator(objects, room_type):
            return []

        entry = get_styling_tips(room_type)
        if entry is None:
            return []

        tips = list(entry["tips"])
        extra = self.furniture_tip(room_type, movable)
        if extra:
            tips.append(extra)

        return [StylingTip(name=entry["title"], location=entry["location"], tips=tips)]

    # =========================================================================
    # Entry points
    # =========================================================================

    def recommend_with_details(
        self,
        objects: Sequence[DetectedObject],
        room_type: RoomType
    ) -> RecommendationResult:
        """
        추천 목록과 부가 정보를 함께 반환합니다.

        Args:
            objects: 탐지 결과 (필터 전)
            room_type: Stage 1에서 추정한 방 종류

        Returns:
            RecommendationResult
        """
        room_type = RoomType(room_type)

        if self.confidence_filter is not None:
            admitted = self.confidence_filter.filter(objects, room_type)
        else:
            admitted = list(objects)

        movable: List[MovableFurniture] = []
        items = []
        for obj in admitted:
            item = self.categorize(obj, room_type, movable)
            if item is not None:
                items.append(item)

        unique_items = self.deduplicate(items)
        tips = self.styling_tips(objects, admitted, room_type, movable)

        logger.debug(
            f"[RecommendationEngine] room={room_type.value} items={len(unique_items)} "
            f"movable={len(movable)} tips={len(tips)}"
        )

        return RecommendationResult(
            recommendations=unique_items + tips,
            total_detected=len(objects),
            total_admitted=len(admitted),
            movable_furniture=movable,
        )

    def recommend(
        self,
        objects: Sequence[DetectedObject],
        room_type: RoomType
    ) -> List[Recommendation]:
        """
        추천 목록을 반환합니다 (중복 제거된 항목 → 스타일링 팁 순서).

        Args:
            objects: 탐지 결과 (필터 전)
            room_type: 방 종류

        Returns:
            추천 리스트 (빈 입력이면 빈 리스트)
        """
        return self.recommend_with_details(objects, room_type).recommendations


def summarize_recommendations(recommendations: Sequence[Recommendation]) -> Dict[str, int]:
    """
    추천 목록 요약 (UI 헤더의 "N개 치우기" 표시용)

    Returns:
        {"specific": 2, "categorized": 1, "styling": 1, "total_items": 5}
    """
    summary = {"specific": 0, "categorized": 0, "styling": 0, "total_items": 0}
    for rec in recommendations:
        summary[rec.type] += 1
        if rec.type != "styling":
            summary["total_items"] += rec.count
    return summary
