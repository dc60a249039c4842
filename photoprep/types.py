"""
Core types for the staging engine.

탐지 결과 입력과 추천 결과 출력에 공통으로 쓰이는 데이터 구조.
이 모듈은 I/O나 외부 라이브러리에 의존하지 않습니다.
"""

import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union


class InvalidDetectionError(ValueError):
    """탐지 결과가 입력 계약(라벨/신뢰도/bbox 형식)을 위반한 경우"""


class RoomType(str, Enum):
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    BEDROOM = "bedroom"
    LIVING_ROOM = "living_room"
    DINING_ROOM = "dining_room"
    GENERAL = "general"


class ItemCategory(str, Enum):
    OCCUPANT = "occupant"
    MESS = "mess"
    CLUTTER = "clutter"
    PERSONAL = "personal"
    DECOR_EXCESSIVE = "decor-excessive"
    DECOR_CHECK = "decor-check"


def _require_number(value: Any, field_name: str) -> float:
    # bool은 int의 하위 타입이므로 따로 거른다
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidDetectionError(
            f"{field_name} must be a number, got {type(value).__name__}"
        )
    number = float(value)
    if not math.isfinite(number):
        raise InvalidDetectionError(f"{field_name} must be finite, got {value!r}")
    return number


def _round_half_up(value: float) -> int:
    # .5는 0에서 먼 쪽으로 (10.5 → 11, -2.5 → -3)
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class BoundingBox:
    """픽셀 단위 bbox (좌상단 x, y + 너비/높이)"""
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        for name in ("x", "y", "width", "height"):
            object.__setattr__(self, name, _require_number(getattr(self, name), f"bbox.{name}"))
        if self.width < 0 or self.height < 0:
            raise InvalidDetectionError(
                f"bbox size must be non-negative, got {self.width}x{self.height}"
            )

    @classmethod
    def from_sequence(cls, values: Sequence[Any]) -> "BoundingBox":
        """
        [x, y, width, height] 형식에서 생성합니다.

        Raises:
            InvalidDetectionError: 원소 수가 4가 아니거나 숫자가 아닌 경우
        """
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise InvalidDetectionError(
                f"bbox must be a sequence of 4 numbers, got {type(values).__name__}"
            )
        if len(values) != 4:
            raise InvalidDetectionError(
                f"bbox must have exactly 4 elements, got {len(values)}"
            )
        return cls(*values)

    def top_left(self) -> str:
        """좌상단 좌표를 "x, y" 정수 문자열로 반환"""
        return f"{_round_half_up(self.x)}, {_round_half_up(self.y)}"

    def as_list(self) -> List[float]:
        return [self.x, self.y, self.width, self.height]


@dataclass(frozen=True)
class DetectedObject:
    """외부 탐지기가 보고한 객체 하나"""
    label: str
    confidence: float
    bbox: BoundingBox

    def __post_init__(self):
        if not isinstance(self.label, str):
            raise InvalidDetectionError(
                f"label must be a string, got {type(self.label).__name__}"
            )
        confidence = _require_number(self.confidence, "confidence")
        if not 0.0 <= confidence <= 1.0:
            raise InvalidDetectionError(
                f"confidence must be within [0, 1], got {confidence}"
            )
        object.__setattr__(self, "confidence", confidence)
        if not isinstance(self.bbox, BoundingBox):
            object.__setattr__(self, "bbox", BoundingBox.from_sequence(self.bbox))

    @property
    def normalized_label(self) -> str:
        return self.label.strip().lower()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DetectedObject":
        """
        탐지기 레코드에서 생성합니다.

        탐지기마다 키 이름이 달라서 다음 별칭을 허용합니다:
            label | class, confidence | score, bbox | bounding_box

        Args:
            data: {"label": "cup", "confidence": 0.9, "bbox": [x, y, w, h]}

        Returns:
            DetectedObject

        Raises:
            InvalidDetectionError: 필수 키가 없거나 값이 잘못된 경우
        """
        label = _first_present(data, ("label", "class"))
        confidence = _first_present(data, ("confidence", "score"))
        bbox = _first_present(data, ("bbox", "bounding_box"))
        if isinstance(bbox, Mapping):
            try:
                bbox = [bbox["x"], bbox["y"], bbox["width"], bbox["height"]]
            except KeyError as e:
                raise InvalidDetectionError(f"bbox is missing key {e}") from e
        return cls(label=label, confidence=confidence, bbox=bbox)


def _first_present(data: Mapping[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    raise InvalidDetectionError(f"detection is missing '{keys[0]}'")


# =============================================================================
# Recommendations
# =============================================================================

@dataclass
class SpecificItem:
    """규칙 테이블에서 인식된 치울 물건"""
    name: str
    confidence: int
    location: str
    reason: str
    item_category: ItemCategory
    count: int = 1
    type: str = field(default="specific", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "confidence": self.confidence,
            "location": self.location,
            "reason": self.reason,
            "item_category": self.item_category.value,
            "count": self.count,
        }


@dataclass
class CategorizedItem:
    """인식되지 않은 물건을 방 종류별 버킷으로 묶은 항목"""
    name: str
    confidence: int
    location: str
    category: str
    count: int = 1
    type: str = field(default="categorized", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "confidence": self.confidence,
            "location": self.location,
            "category": self.category,
            "count": self.count,
        }


@dataclass
class StylingTip:
    """특정 탐지와 무관한 방 전체 스테이징 조언"""
    name: str
    location: str
    tips: List[str] = field(default_factory=list)
    type: str = field(default="styling", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "location": self.location,
            "tips": list(self.tips),
        }


Recommendation = Union[SpecificItem, CategorizedItem, StylingTip]
