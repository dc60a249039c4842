"""
Stage 1: 방 종류 추정

탐지 라벨을 방 종류별 키워드 티어(strong/medium/weak)와 대조해
가중치 점수를 합산하고, 충분한 점수 차이가 날 때만 방 종류를 확정합니다.

신뢰도 필터를 거치지 않은 전체 탐지 결과를 사용합니다.
(낮은 점수로 잡힌 변기/오븐 같은 결정적 단서를 놓치지 않기 위함)
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from photoprep.config import Config
from photoprep.data.knowledge_base import ROOM_INDICATORS, TIERS
from photoprep.types import DetectedObject, RoomType
from photoprep.utils.keyword_matcher import KeywordMatcher

logger = logging.getLogger(__name__)


@dataclass
class RoomClassification:
    """방 종류 추정 결과"""
    room_type: RoomType                     # 확정된 방 종류 (불확실하면 GENERAL)
    confidence: float                       # 1위 점수 (GENERAL이면 0)
    scores: Dict[RoomType, float] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            "room_type": self.room_type.value,
            "confidence": self.confidence,
            "scores": {room.value: score for room, score in self.scores.items()},
        }


class RoomClassifier:
    """
    방 종류 추정기

    AI Logic Step 1: 탐지 라벨 → 방 종류

    판정 규칙:
        1위 점수 >= score_floor 이고
        1위 점수 > 2위 점수 * margin_ratio 일 때만 1위 방을 반환
    """

    def __init__(
        self,
        indicators=None,
        score_floor: Optional[float] = None,
        margin_ratio: Optional[float] = None
    ):
        """
        Args:
            indicators: 방 종류별 키워드 티어 (None이면 Knowledge Base 사용)
            score_floor: 최소 점수 (None이면 Config.ROOM_SCORE_FLOOR)
            margin_ratio: 2위 대비 배율 (None이면 Config.ROOM_MARGIN_RATIO)
        """
        self.indicators = indicators if indicators is not None else ROOM_INDICATORS
        self.score_floor = Config.ROOM_SCORE_FLOOR if score_floor is None else score_floor
        self.margin_ratio = Config.ROOM_MARGIN_RATIO if margin_ratio is None else margin_ratio

    def match_tier(self, label: str, room_type: RoomType) -> Optional[str]:
        """
        라벨이 매칭되는 가장 높은 티어를 찾습니다.

        Args:
            label: 탐지 라벨
            room_type: 방 종류

        Returns:
            "strong" | "medium" | "weak" 또는 None
        """
        tiers = self.indicators.get(room_type, {})
        for tier in TIERS:
            if KeywordMatcher.matches(label, tiers.get(tier, ()), KeywordMatcher.EXACT):
                return tier
        return None

    def score(self, objects: Sequence[DetectedObject]) -> Dict[RoomType, float]:
        """
        방 종류별 점수판을 계산합니다.

        Args:
            objects: 탐지 결과 (신뢰도 무관)

        Returns:
            {RoomType.KITCHEN: 7.0, RoomType.BATHROOM: 0.0, ...}
        """
        scores = {room_type: 0.0 for room_type in self.indicators}
        for obj in objects:
            for room_type in scores:
                tier = self.match_tier(obj.label, room_type)
                if tier is not None:
                    scores[room_type] += Config.tier_weight(tier)
        return scores

    def classify(self, objects: Sequence[DetectedObject]) -> RoomClassification:
        """
        방 종류를 추정합니다.

        Args:
            objects: 탐지 결과 (빈 리스트 가능)

        Returns:
            RoomClassification
        """
        scores = self.score(objects)
        ranked: List = sorted(scores.items(), key=lambda item: item[1], reverse=True)

        if not ranked:
            return RoomClassification(RoomType.GENERAL, 0.0, scores)

        top_room, top_score = ranked[0]
        second_score = ranked[1][1] if len(ranked) > 1 else 0.0

        if top_score >= self.score_floor and top_score > second_score * self.margin_ratio:
            logger.debug(
                f"[RoomClassifier] {top_room.value} (score={top_score}, runner-up={second_score})"
            )
            return RoomClassification(top_room, top_score, scores)

        logger.debug(
            f"[RoomClassifier] general (top={top_room.value}:{top_score}, runner-up={second_score})"
        )
        return RoomClassification(RoomType.GENERAL, 0.0, scores)
