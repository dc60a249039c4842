"""
Staging Processors

AI Logic 단계별 모듈:
1. 탐지 라벨로 방 종류 추정 (필터 전 전체 결과)
2. 신뢰도 기반 추천 대상 선별
3. 규칙 테이블 대조 → 치울 물건 + 스타일링 팁
"""

import importlib

# 숫자가 포함된 파일명을 위한 동적 import
_stage1 = importlib.import_module('.1_room_classify', package='photoprep.processors')
_stage2 = importlib.import_module('.2_confidence_filter', package='photoprep.processors')
_stage3 = importlib.import_module('.3_clutter_recommend', package='photoprep.processors')

# 클래스 노출
RoomClassifier = _stage1.RoomClassifier
RoomClassification = _stage1.RoomClassification
ConfidenceFilter = _stage2.ConfidenceFilter
RecommendationEngine = _stage3.RecommendationEngine
RecommendationResult = _stage3.RecommendationResult
MovableFurniture = _stage3.MovableFurniture
summarize_recommendations = _stage3.summarize_recommendations

__all__ = [
    # Step 1: Room
    'RoomClassifier',
    'RoomClassification',
    # Step 2-3: Recommendations
    'ConfidenceFilter',
    'RecommendationEngine',
    'RecommendationResult',
    'MovableFurniture',
    'summarize_recommendations',
]
