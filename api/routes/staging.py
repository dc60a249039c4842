"""
Staging Routes

/classify-room, /recommend, /analyze-detections
"""

import logging
from typing import List

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.config import MAX_DETECTIONS
from api.models import (
    AnalyzeDetectionsResponse,
    ClassifyRoomRequest,
    DetectionItem,
    RecommendRequest,
    RecommendResponse,
    RoomClassificationResponse,
)
from photoprep.pipeline import StagingPipeline
from photoprep.processors import summarize_recommendations
from photoprep.types import InvalidDetectionError

logger = logging.getLogger(__name__)

router = APIRouter()

# Shared default pipeline (stateless, safe across requests)
_default_pipeline = StagingPipeline()


def get_pipeline(request: RecommendRequest = None) -> StagingPipeline:
    """
    Return the shared pipeline, or a per-request one when tunables are set.
    """
    if request is None:
        return _default_pipeline
    if request.min_confidence is None and request.include_general_tips is None:
        return _default_pipeline
    return StagingPipeline(
        min_confidence=request.min_confidence,
        include_general_tips=request.include_general_tips,
    )


def _records(detections: List[DetectionItem]) -> List[dict]:
    return [d.to_record() for d in detections]


def _too_many(detections: List[DetectionItem]):
    if len(detections) > MAX_DETECTIONS:
        return JSONResponse(
            status_code=400,
            content={"error": f"Maximum {MAX_DETECTIONS} detections allowed per photo"},
        )
    return None


@router.post("/classify-room", response_model=RoomClassificationResponse)
async def classify_room(request: ClassifyRoomRequest):
    """
    Classify the room type of one photo from its detections.

    Returns:
        {"room_type": "kitchen", "confidence": 7.0, "scores": {...}}
    """
    error = _too_many(request.detections)
    if error is not None:
        return error

    try:
        classification = get_pipeline().classify(_records(request.detections))
    except InvalidDetectionError as e:
        logger.warning(f"[classify-room] invalid detection: {e}")
        return JSONResponse(status_code=400, content={"error": str(e)})

    return classification.to_dict()


@router.post("/recommend", response_model=RecommendResponse)
async def recommend(request: RecommendRequest):
    """
    Build the ordered removal/styling recommendation list for one photo.

    When room_type is omitted the room is classified from the detections first.
    """
    error = _too_many(request.detections)
    if error is not None:
        return error

    try:
        result = get_pipeline(request).process(
            _records(request.detections),
            room_type=request.room_type,
        )
    except InvalidDetectionError as e:
        logger.warning(f"[recommend] invalid detection: {e}")
        return JSONResponse(status_code=400, content={"error": str(e)})

    return {
        "room_type": result.room_type.value,
        "recommendations": [rec.to_dict() for rec in result.recommendations],
        "summary": summarize_recommendations(result.recommendations),
        "total_detected": result.total_detected,
        "total_admitted": result.total_admitted,
    }


@router.post("/analyze-detections", response_model=AnalyzeDetectionsResponse)
async def analyze_detections(request: RecommendRequest):
    """
    Classify the room and build recommendations in one call.
    """
    error = _too_many(request.detections)
    if error is not None:
        return error

    try:
        result = get_pipeline(request).process(
            _records(request.detections),
            room_type=request.room_type,
        )
    except InvalidDetectionError as e:
        logger.warning(f"[analyze-detections] invalid detection: {e}")
        return JSONResponse(status_code=400, content={"error": str(e)})

    data = result.to_dict()
    return {
        "room": data["room"],
        "recommendations": data["recommendations"],
        "summary": data["summary"],
        "total_detected": data["total_detected"],
        "total_admitted": data["total_admitted"],
        "processing_time_seconds": data["processing_time_seconds"],
    }
