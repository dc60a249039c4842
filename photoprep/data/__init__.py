# Staging Data Module
from .knowledge_base import (
    RULES_VERSION,
    TIERS,
    ROOM_INDICATORS,
    FURNITURE_KEEP_SET,
    MOVABLE_FURNITURE_SET,
    CLUTTER_VOCABULARY,
    CLUTTER_REASON_RULES,
    STYLING_TIPS,
    # Core functions
    get_room_tiers,
    get_strong_indicators,
    get_priority_classes,
    get_unidentified_bucket,
    get_styling_tips,
    get_all_room_keywords,
    describe_rules,
)

__all__ = [
    'RULES_VERSION',
    'TIERS',
    'ROOM_INDICATORS',
    'FURNITURE_KEEP_SET',
    'MOVABLE_FURNITURE_SET',
    'CLUTTER_VOCABULARY',
    'CLUTTER_REASON_RULES',
    'STYLING_TIPS',
    # Core functions
    'get_room_tiers',
    'get_strong_indicators',
    'get_priority_classes',
    'get_unidentified_bucket',
    'get_styling_tips',
    'get_all_room_keywords',
    'describe_rules',
]
