"""
Health Check Routes

/health, /rules endpoints
"""

from fastapi import APIRouter

import photoprep
from photoprep.data import RULES_VERSION, describe_rules

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": photoprep.__version__,
        "rules_version": RULES_VERSION,
    }


@router.get("/rules")
async def rules_summary():
    """
    Rule table sizes.

    Returns:
        {
            "rules_version": str,
            "room_types": int,
            "clutter_keywords": int,
            ...
        }
    """
    summary = describe_rules()
    summary["rules_version"] = RULES_VERSION
    return summary
