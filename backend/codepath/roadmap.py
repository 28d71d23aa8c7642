from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

from .errors import ProfileValidationError
from .roadmap_templates import (
    DEFAULT_STEPS,
    FRAMEWORK_STEP_ID,
    MILESTONE_TEMPLATES,
    REACT_FRAMEWORK_DESCRIPTION,
    STEP_TEMPLATES,
)
from .schemas import LearningRoadmap, Milestone, RoadmapStep, UserProfile

logger = logging.getLogger(__name__)

FULL_TIME_MARKERS = ("Full-time", "8+")
FULL_TIME_DURATION = "3-4 months"
PART_TIME_DURATION = "6-8 months"
DEFAULT_INTEREST = "Programming"


def validate_profile(profile: UserProfile) -> None:
    """Reject profiles without a name, interests or goals."""
    if not profile.name or not profile.interests or not profile.goals:
        raise ProfileValidationError()


def primary_interest(profile: UserProfile) -> str:
    if profile.interests and profile.interests[0]:
        return profile.interests[0]
    return DEFAULT_INTEREST


def is_full_time(time_commitment: str) -> bool:
    # Case-sensitive substring test, e.g. "Full-time (8+ hours/day)"
    return any(marker in time_commitment for marker in FULL_TIME_MARKERS)


class RoadmapComposer:
    """Builds a learning roadmap from a learner profile.

    Selection is a pure table lookup: the primary interest picks one of the
    step templates, time commitment picks the total duration, and milestones
    are windowed over the chosen steps. No randomness and no I/O.
    """

    def __init__(
        self,
        templates: Optional[Dict[str, List[Dict[str, Any]]]] = None,
        default_steps: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.templates = STEP_TEMPLATES if templates is None else templates
        self.default_steps = DEFAULT_STEPS if default_steps is None else default_steps

    def steps_for(self, profile: UserProfile) -> List[RoadmapStep]:
        interest = primary_interest(profile)
        records = self.templates.get(interest, self.default_steps)
        steps = [RoadmapStep.model_validate(record) for record in records]
        if interest == "Web Development" and "React" in profile.interests:
            for step in steps:
                if step.id == FRAMEWORK_STEP_ID:
                    step.description = REACT_FRAMEWORK_DESCRIPTION
        return steps

    @staticmethod
    def milestones_for(steps: List[RoadmapStep]) -> List[Milestone]:
        milestones = []
        for week, title, description, start, stop in MILESTONE_TEMPLATES:
            skills = [skill for step in steps[start:stop] for skill in step.skills[:2]]
            milestones.append(Milestone(week=week, title=title, description=description, skills=skills))
        return milestones[: math.ceil(len(steps) / 2)]

    def compose(self, profile: UserProfile) -> LearningRoadmap:
        interest = primary_interest(profile)
        steps = self.steps_for(profile)
        total_duration = FULL_TIME_DURATION if is_full_time(profile.time_commitment) else PART_TIME_DURATION
        difficulty = "Beginner-Friendly" if profile.experience == "complete-beginner" else "Progressive"
        focus = " and ".join(profile.goals[:2])
        logger.info("Composed %d-step %s roadmap for %s", len(steps), interest, profile.name)
        return LearningRoadmap(
            title=f"{interest} Learning Path for {profile.name}",
            description=(
                f"Personalized {interest.lower()} roadmap designed for {profile.experience} level, "
                f"focusing on {focus}"
            ),
            total_duration=total_duration,
            difficulty=difficulty,
            steps=steps,
            milestones=self.milestones_for(steps),
        )
