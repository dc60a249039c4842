# Photo Prep - Room Classification and Clutter Recommendation Module
"""
Photo Prep Module

부동산 실내 사진 촬영 준비를 위한 스테이징 추천 시스템

Pipeline:
    1. 외부 탐지기 결과 수신 (label, confidence, bbox)
    2. 키워드 티어 점수로 방 종류 추정 (1_room_classify.py)
    3. 신뢰도 기반 추천 대상 선별 (2_confidence_filter.py)
    4. 규칙 테이블 대조 → 치울 물건 + 스타일링 팁 (3_clutter_recommend.py)

Directory Structure:
    photoprep/
    ├── pipeline/           # 통합 파이프라인 오케스트레이터
    ├── processors/         # 단계별 모듈
    ├── data/               # Knowledge Base (키워드/규칙/팁 테이블)
    ├── utils/              # 키워드 매칭
    ├── types.py            # 입력/출력 데이터 구조
    └── config.py           # 설정

Usage:
    from photoprep import StagingPipeline

    pipeline = StagingPipeline()
    result = pipeline.process([
        {"label": "oven", "confidence": 0.9, "bbox": [0, 0, 1, 1]},
        {"label": "bottle", "confidence": 0.9, "bbox": [10, 20, 5, 5]},
    ])
"""

__version__ = "1.2.0"

# 주요 클래스 노출
from .types import (
    BoundingBox,
    CategorizedItem,
    DetectedObject,
    InvalidDetectionError,
    ItemCategory,
    Recommendation,
    RoomType,
    SpecificItem,
    StylingTip,
)
from .processors import (
    RoomClassifier,
    RoomClassification,
    ConfidenceFilter,
    RecommendationEngine,
    RecommendationResult,
)
from .pipeline import StagingPipeline, PipelineResult

__all__ = [
    # Types
    'BoundingBox',
    'CategorizedItem',
    'DetectedObject',
    'InvalidDetectionError',
    'ItemCategory',
    'Recommendation',
    'RoomType',
    'SpecificItem',
    'StylingTip',
    # Processors
    'RoomClassifier',
    'RoomClassification',
    'ConfidenceFilter',
    'RecommendationEngine',
    'RecommendationResult',
    # Pipeline
    'StagingPipeline',
    'PipelineResult',
]
