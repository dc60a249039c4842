import os
from typing import Dict, Optional


def _env_float(name: str) -> Optional[float]:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return None
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    # --- Room Classification ---
    # 티어별 가중치 (strong → medium → weak 순서로 첫 매칭만 반영)
    TIER_WEIGHTS: Dict[str, float] = {
        "strong": 5.0,
        "medium": 2.0,
        "weak": 0.5,
    }

    # 1위 점수가 이 값 미만이면 general
    ROOM_SCORE_FLOOR = 5.0

    # 1위 점수가 2위 점수 * 이 비율을 초과해야 확정
    ROOM_MARGIN_RATIO = 1.5

    # --- Confidence Admission ---
    # 일반 클래스 기본 임계치
    CONF_THRESHOLD_BASE = 0.15
    # 사람/반려동물/컵 등 우선순위 클래스와 방별 키워드 클래스
    CONF_THRESHOLD_PRIORITY = 0.12

    # 호출자가 지정하는 고정 임계치 (None이면 adaptive)
    MIN_CONFIDENCE: Optional[float] = _env_float("PHOTOPREP_MIN_CONFIDENCE")

    # --- Recommendation Display ---
    # 탐지기 점수와 무관한 표시용 고정값
    SPECIFIC_ITEM_CONFIDENCE = 100
    CATEGORIZED_ITEM_CONFIDENCE = 85

    # 거실 팁: 이 수를 초과하는 의자는 제거 권장
    MAX_CHAIRS_BEFORE_REMOVAL = 2

    # general 방에도 스타일링 팁을 붙일지 여부
    INCLUDE_GENERAL_TIPS: bool = _env_bool("PHOTOPREP_INCLUDE_GENERAL_TIPS")

    @staticmethod
    def tier_weight(tier: str) -> float:
        """
        티어 이름에 대한 가중치를 반환합니다.

        Args:
            tier: "strong" | "medium" | "weak"

        Returns:
            가중치 (알 수 없는 티어는 0.0)
        """
        return Config.TIER_WEIGHTS.get(tier, 0.0)
