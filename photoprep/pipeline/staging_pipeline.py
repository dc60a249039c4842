"""
Photo Staging Pipeline

사진 한 장의 탐지 결과로 방 종류 추정과 추천 목록 생성을 묶는 오케스트레이터:

1. 외부 탐지기 결과 수신 (label, confidence, bbox)
2. RoomClassifier로 방 종류 추정 (필터 전 전체 결과)
3. RecommendationEngine으로 치울 물건 + 스타일링 팁 생성
4. 요약 정보와 함께 PipelineResult 반환

탐지기 호출, 카메라, 렌더링은 이 파이프라인 밖의 책임입니다.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from photoprep.processors import (
    MovableFurniture,
    RecommendationEngine,
    RoomClassification,
    RoomClassifier,
    summarize_recommendations,
)
from photoprep.types import DetectedObject, Recommendation, RoomType

logger = logging.getLogger(__name__)

DetectionInput = Union[DetectedObject, Mapping[str, Any]]


@dataclass
class PipelineResult:
    """파이프라인 실행 결과"""
    classification: RoomClassification
    recommendations: List[Recommendation] = field(default_factory=list)
    total_detected: int = 0
    total_admitted: int = 0
    movable_furniture: List[MovableFurniture] = field(default_factory=list)
    processing_time_seconds: float = 0.0

    @property
    def room_type(self) -> RoomType:
        return self.classification.room_type

    def to_dict(self) -> Dict[str, Any]:
        return {
            "room": self.classification.to_dict(),
            "recommendations": [rec.to_dict() for rec in self.recommendations],
            "summary": summarize_recommendations(self.recommendations),
            "total_detected": self.total_detected,
            "total_admitted": self.total_admitted,
            "movable_furniture": [
                {"name": f.name, "bbox": f.bbox.as_list()} for f in self.movable_furniture
            ],
            "processing_time_seconds": self.processing_time_seconds,
        }


def to_detected_objects(detections: Sequence[DetectionInput]) -> List[DetectedObject]:
    """
    탐지기 레코드를 DetectedObject로 변환합니다.

    Raises:
        InvalidDetectionError: bbox/신뢰도 형식이 잘못된 경우
    """
    return [
        d if isinstance(d, DetectedObject) else DetectedObject.from_dict(d)
        for d in detections
    ]


class StagingPipeline:
    """
    사진 스테이징 파이프라인

    Stages:
        Stage 1: RoomClassifier - 탐지 라벨 → 방 종류
        Stage 2-3: RecommendationEngine - 신뢰도 선별 → 치울 물건 + 스타일링 팁
    """

    def __init__(
        self,
        min_confidence: Optional[float] = None,
        include_general_tips: Optional[bool] = None,
        classifier: Optional[RoomClassifier] = None,
        engine: Optional[RecommendationEngine] = None
    ):
        """
        Args:
            min_confidence: 추천 대상 고정 임계치 (None이면 adaptive)
            include_general_tips: general 방에도 팁 추가 여부
            classifier: 방 종류 추정기 (None이면 기본값)
            engine: 추천기 (None이면 min_confidence/include_general_tips로 생성)
        """
        self.classifier = classifier or RoomClassifier()
        self.engine = engine or RecommendationEngine(
            min_confidence=min_confidence,
            include_general_tips=include_general_tips,
        )

    def classify(self, detections: Sequence[DetectionInput]) -> RoomClassification:
        return self.classifier.classify(to_detected_objects(detections))

    def process(
        self,
        detections: Sequence[DetectionInput],
        room_type: Optional[RoomType] = None
    ) -> PipelineResult:
        """
        사진 한 장의 탐지 결과를 처리합니다.

        Args:
            detections: 탐지 결과 (DetectedObject 또는 dict)
            room_type: 호출자가 방 종류를 알고 있으면 지정 (추정 생략)

        Returns:
            PipelineResult
        """
        start_time = time.time()
        objects = to_detected_objects(detections)

        classification = self.classifier.classify(objects)
        if room_type is not None:
            room_type = RoomType(room_type)
            if room_type != classification.room_type:
                logger.debug(
                    f"[StagingPipeline] room override: {classification.room_type.value} -> {room_type.value}"
                )
                classification = RoomClassification(
                    room_type=room_type,
                    confidence=classification.scores.get(room_type, 0.0),
                    scores=classification.scores,
                )

        details = self.engine.recommend_with_details(objects, classification.room_type)
        elapsed = time.time() - start_time

        logger.info(
            f"[StagingPipeline] {len(objects)} detections -> room={classification.room_type.value} "
            f"({len(details.recommendations)} recommendations, {elapsed * 1000:.1f}ms)"
        )

        return PipelineResult(
            classification=classification,
            recommendations=details.recommendations,
            total_detected=details.total_detected,
            total_admitted=details.total_admitted,
            movable_furniture=details.movable_furniture,
            processing_time_seconds=elapsed,
        )
