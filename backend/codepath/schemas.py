"""
Request/response and domain models shared by the routers and services.

Domain records serialise with camelCase aliases, the shape the web frontend
consumes, and accept either camelCase or snake_case on input.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


Experience = Literal["complete-beginner", "some-coding", "career-change"]
Difficulty = Literal["beginner", "intermediate", "advanced"]
StepType = Literal["theory", "practice", "project", "assessment"]
ResourceType = Literal["video", "article", "course", "practice", "project"]

DIFFICULTIES: List[str] = ["beginner", "intermediate", "advanced"]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# ROADMAP
# ============================================================================

class UserProfile(CamelModel):
    """Learner profile posted by the roadmap wizard.

    Required fields are checked by the route, not by the model, so a missing
    name or empty interests/goals surfaces as the documented 400 envelope.
    """
    name: Optional[str] = None
    experience: Experience = "complete-beginner"
    interests: List[str] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)
    time_commitment: str = ""
    preferred_learning: List[str] = Field(default_factory=list)
    background: str = ""


class Resource(CamelModel):
    type: ResourceType
    title: str
    url: str
    duration: str


class ChannelReference(CamelModel):
    name: str
    url: str
    subscribers: str
    description: str


class DocumentationReference(CamelModel):
    name: str
    url: str
    description: str


class BookReference(CamelModel):
    title: str
    author: str
    url: Optional[str] = None
    free: bool = False


class PracticeSite(CamelModel):
    name: str
    url: str
    description: str
    difficulty: str


class Community(CamelModel):
    name: str
    url: str
    description: str


class LearningResources(CamelModel):
    youtube_channels: List[ChannelReference] = Field(default_factory=list)
    documentation: List[DocumentationReference] = Field(default_factory=list)
    books: List[BookReference] = Field(default_factory=list)
    practice_websites: List[PracticeSite] = Field(default_factory=list)
    communities: List[Community] = Field(default_factory=list)


class RoadmapStep(CamelModel):
    id: str
    title: str
    description: str
    duration: str
    difficulty: Difficulty
    type: StepType
    resources: List[Resource] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    # Titles of earlier steps; informational only
    prerequisites: List[str] = Field(default_factory=list)
    is_completed: bool = False
    learning_resources: Optional[LearningResources] = None


class Milestone(CamelModel):
    week: int
    title: str
    description: str
    skills: List[str] = Field(default_factory=list)


class LearningRoadmap(CamelModel):
    title: str
    description: str
    total_duration: str
    difficulty: str
    steps: List[RoadmapStep]
    milestones: List[Milestone]


class RoadmapUserSummary(BaseModel):
    name: str
    experience: str
    primary_interest: str
    time_commitment: str


class RoadmapResponse(BaseModel):
    success: bool = True
    roadmap: LearningRoadmap
    generated_at: str
    user_profile: RoadmapUserSummary


# ============================================================================
# QUIZ
# ============================================================================

class QuizQuestion(CamelModel):
    question: str
    options: Dict[str, str]
    answer: str
    explanation: str
    code_snippet: Optional[str] = None
    difficulty: Difficulty
    category: str

    @model_validator(mode="after")
    def _answer_is_an_option(self) -> "QuizQuestion":
        if self.answer not in self.options:
            raise ValueError(f"answer {self.answer!r} is not one of the option labels {sorted(self.options)}")
        return self


class UserPerformance(CamelModel):
    average_score: float = 0
    weak_areas: List[str] = Field(default_factory=list)
    strong_areas: List[str] = Field(default_factory=list)


class QuizRequest(CamelModel):
    language: Optional[str] = None
    topic: Optional[str] = None
    difficulty: str = "beginner"
    quiz_type: str = "multiple-choice"
    question_count: int = 5
    include_code_snippets: bool = True
    include_practical_examples: bool = True
    user_performance: Optional[UserPerformance] = None
    adaptive_difficulty: bool = False


class QuizResponse(CamelModel):
    quiz: List[QuizQuestion]
    language: str
    topic: str
    difficulty: str
    quiz_type: str
    question_count: int
    include_code_snippets: bool
    include_practical_examples: bool
    source: Literal["ai", "bank"]


class QuizResult(CamelModel):
    score: int = Field(ge=0)
    total_questions: int = Field(gt=0)
    topic: str
    language: str
    timestamp: datetime = Field(default_factory=utcnow)
    quiz_type: Optional[str] = None
    # Seconds
    time_spent: Optional[float] = None
    streak_count: Optional[int] = None
    difficulty: Optional[str] = None

    @field_validator("timestamp")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @model_validator(mode="after")
    def _score_within_total(self) -> "QuizResult":
        if self.score > self.total_questions:
            raise ValueError("score cannot exceed totalQuestions")
        return self

    @property
    def ratio(self) -> float:
        return self.score / self.total_questions


class PerformanceStats(CamelModel):
    total_quizzes: int = 0
    average_score: float = 0
    best_score: float = 0
    current_difficulty: Difficulty = "beginner"
    total_time_spent: float = 0
    average_time_per_question: float = 0
    streak_history: List[int] = Field(default_factory=list)
    improvement_rate: float = 0
    weak_areas: List[str] = Field(default_factory=list)
    strong_areas: List[str] = Field(default_factory=list)
    learning_path: List[str] = Field(default_factory=list)
    last_quiz_date: str = ""
    consistency_score: float = 0


class GlobalStats(CamelModel):
    total_quizzes: int = 0
    total_questions: int = 0
    average_score: float = 0
    total_time_spent: float = 0
    favorite_language: str = ""
    favorite_topic: str = ""
    total_streak: int = 0


# ============================================================================
# CHANNELS
# ============================================================================

class ProgrammingChannel(CamelModel):
    name: str
    url: str
    # Display string such as "2.1M", not a number
    subscribers: str
    description: str
    language: str
