"""
Pydantic Request/Response Models
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from photoprep.types import RoomType


# ============================================================================
# Detection Models
# ============================================================================

class DetectionItem(BaseModel):
    """One object reported by the external detector"""
    label: str
    confidence: float
    bbox: List[float]  # [x, y, width, height] in pixels

    def to_record(self) -> dict:
        return {"label": self.label, "confidence": self.confidence, "bbox": self.bbox}


class ClassifyRoomRequest(BaseModel):
    """Room classification request"""
    detections: List[DetectionItem] = Field(default_factory=list)


class RecommendRequest(BaseModel):
    """Recommendation request (room_type omitted -> classified first)"""
    detections: List[DetectionItem] = Field(default_factory=list)
    room_type: Optional[RoomType] = None
    min_confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    include_general_tips: Optional[bool] = None


# ============================================================================
# Response Models
# ============================================================================

class RoomClassificationResponse(BaseModel):
    """Room classification result"""
    room_type: RoomType
    confidence: float
    scores: Dict[str, float]


class RecommendationItem(BaseModel):
    """One recommendation (specific | categorized | styling)"""
    type: str
    name: str
    location: str
    confidence: Optional[int] = None
    reason: Optional[str] = None
    item_category: Optional[str] = None
    category: Optional[str] = None
    count: Optional[int] = None
    tips: Optional[List[str]] = None


class RecommendResponse(BaseModel):
    """Recommendation result"""
    room_type: RoomType
    recommendations: List[RecommendationItem]
    summary: Dict[str, int]
    total_detected: int
    total_admitted: int


class AnalyzeDetectionsResponse(BaseModel):
    """Classification + recommendations for one photo"""
    room: RoomClassificationResponse
    recommendations: List[RecommendationItem]
    summary: Dict[str, int]
    total_detected: int
    total_admitted: int
    processing_time_seconds: float
