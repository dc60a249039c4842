"""
Stage 2: 신뢰도 기반 추천 대상 선별

추천 목록에 넣을 탐지 결과만 남깁니다 (방 종류 추정은 필터 전 전체 결과 사용).
사람/반려동물/컵 같은 우선순위 클래스와 방별 키워드 클래스는
오탐 비용이 낮으므로 더 낮은 임계치를 적용합니다.
"""

import logging
from typing import List, Optional, Sequence

from photoprep.config import Config
from photoprep.data.knowledge_base import get_priority_classes
from photoprep.types import DetectedObject, RoomType
from photoprep.utils.keyword_matcher import KeywordMatcher

logger = logging.getLogger(__name__)


class ConfidenceFilter:
    """
    추천 대상 선별기

    기본값(adaptive):
        우선순위 클래스 → Config.CONF_THRESHOLD_PRIORITY
        그 외          → Config.CONF_THRESHOLD_BASE

    min_confidence를 지정하면 그 값이 기본 임계치가 되고,
    우선순위 클래스는 min(min_confidence, CONF_THRESHOLD_PRIORITY)를 사용한다.
    """

    def __init__(self, min_confidence: Optional[float] = None):
        """
        Args:
            min_confidence: 고정 기본 임계치 [0, 1] (None이면 Config.MIN_CONFIDENCE, 그것도 None이면 adaptive)
        """
        if min_confidence is None:
            min_confidence = Config.MIN_CONFIDENCE
        if min_confidence is not None and not 0.0 <= min_confidence <= 1.0:
            raise ValueError(f"min_confidence must be within [0, 1], got {min_confidence}")

        self.min_confidence = min_confidence
        if min_confidence is None:
            self.base_threshold = Config.CONF_THRESHOLD_BASE
            self.priority_threshold = Config.CONF_THRESHOLD_PRIORITY
        else:
            self.base_threshold = min_confidence
            self.priority_threshold = min(min_confidence, Config.CONF_THRESHOLD_PRIORITY)

    def threshold_for(self, label: str, room_type: RoomType) -> float:
        """
        라벨에 적용할 임계치를 반환합니다.

        Args:
            label: 탐지 라벨
            room_type: 방 종류

        Returns:
            임계치
        """
        if KeywordMatcher.matches(label, get_priority_classes(room_type), KeywordMatcher.CONTAINS):
            return self.priority_threshold
        return self.base_threshold

    def admit(self, obj: DetectedObject, room_type: RoomType) -> bool:
        return obj.confidence >= self.threshold_for(obj.label, room_type)

    def filter(self, objects: Sequence[DetectedObject], room_type: RoomType) -> List[DetectedObject]:
        """
        임계치 이상인 탐지 결과만 반환합니다 (순서 유지).

        Args:
            objects: 탐지 결과
            room_type: 방 종류

        Returns:
            선별된 탐지 결과
        """
        admitted = [obj for obj in objects if self.admit(obj, room_type)]
        logger.debug(
            f"[ConfidenceFilter] {len(admitted)}/{len(objects)} objects above threshold"
        )
        return admitted
