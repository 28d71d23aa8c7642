from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..dependencies import get_composer
from ..roadmap import RoadmapComposer, validate_profile
from ..roadmap_templates import REQUIRED_PROFILE_FIELDS, SUPPORTED_INTERESTS
from ..schemas import RoadmapResponse, RoadmapUserSummary, UserProfile


router = APIRouter(tags=["roadmap"])
logger = logging.getLogger(__name__)


@router.post("/generate-roadmap", response_model=RoadmapResponse, response_model_exclude_none=True)
def generate_roadmap(profile: UserProfile, composer: RoadmapComposer = Depends(get_composer)):
    # ProfileValidationError propagates to the app-level handler as a 400
    validate_profile(profile)
    logger.info("Generating personalized roadmap for: %s", profile.name)
    try:
        roadmap = composer.compose(profile)
    except Exception as e:
        logger.exception("Error generating roadmap")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to generate roadmap", "message": str(e) or "Internal server error"},
        )
    return RoadmapResponse(
        roadmap=roadmap,
        generated_at=datetime.now(timezone.utc).isoformat(),
        user_profile=RoadmapUserSummary(
            name=profile.name,
            experience=profile.experience,
            primary_interest=profile.interests[0],
            time_commitment=profile.time_commitment,
        ),
    )


@router.get("/generate-roadmap")
def describe_roadmap_generator():
    return {
        "message": "AI Roadmap Generator API",
        "description": "POST your user profile to generate a personalized learning roadmap",
        "required_fields": REQUIRED_PROFILE_FIELDS,
        "supported_interests": SUPPORTED_INTERESTS,
    }
