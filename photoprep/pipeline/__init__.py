"""
Photo Staging Pipeline

방 종류 추정 → 치울 물건 추천 → 스타일링 팁
"""

from .staging_pipeline import StagingPipeline, PipelineResult, to_detected_objects

__all__ = [
    'StagingPipeline',
    'PipelineResult',
    'to_detected_objects'
]
