from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ..dependencies import get_quiz_bank, get_quiz_generator, get_quiz_tracker
from ..errors import CodepathError
from ..quiz_bank import QuizBank
from ..quiz_generator import QuizGenerator
from ..quiz_tracker import QuizTracker
from ..schemas import GlobalStats, PerformanceStats, QuizQuestion, QuizRequest, QuizResponse, QuizResult


router = APIRouter(tags=["quiz"])
logger = logging.getLogger(__name__)


# ============================================================================
# QUIZ BANK
# ============================================================================

@router.get("/quiz/topics")
def list_quiz_topics(bank: QuizBank = Depends(get_quiz_bank)):
    return {
        "topics": bank.list_topics(),
        "difficulties": bank.list_difficulties(),
        "counts": bank.summary(),
    }


@router.get("/quiz/questions", response_model=List[QuizQuestion], response_model_exclude_none=True)
def get_quiz_questions(
    topic: str,
    difficulty: str = "beginner",
    count: int = 5,
    bank: QuizBank = Depends(get_quiz_bank),
):
    # Unknown topic or difficulty is an empty list, not an error
    return bank.get_questions(topic, difficulty, count)


@router.post("/generate-quiz", response_model=QuizResponse, response_model_exclude_none=True)
async def generate_quiz(req: QuizRequest, generator: QuizGenerator = Depends(get_quiz_generator)):
    try:
        return await generator.generate(req)
    except CodepathError:
        raise
    except Exception:
        logger.exception("Error generating quiz")
        return JSONResponse(status_code=500, content={"error": "Failed to generate quiz"})


# ============================================================================
# LEARNER PERFORMANCE
# ============================================================================

@router.post("/quiz/results/{learner_id}", status_code=201)
def save_quiz_result(learner_id: str, result: QuizResult, tracker: QuizTracker = Depends(get_quiz_tracker)):
    tracker.save_result(learner_id, result)
    return {"saved": True, "total": len(tracker.history(learner_id))}


@router.get("/quiz/results/{learner_id}", response_model=List[QuizResult], response_model_exclude_none=True)
def list_quiz_results(learner_id: str, tracker: QuizTracker = Depends(get_quiz_tracker)):
    return tracker.history(learner_id)


@router.delete("/quiz/results/{learner_id}")
def clear_quiz_results(learner_id: str, tracker: QuizTracker = Depends(get_quiz_tracker)):
    tracker.clear(learner_id)
    return {"cleared": True}


@router.get("/quiz/stats/{learner_id}", response_model=PerformanceStats)
def get_performance_stats(
    learner_id: str,
    topic: str = Query(...),
    language: str = Query(...),
    tracker: QuizTracker = Depends(get_quiz_tracker),
):
    return tracker.performance_stats(learner_id, topic, language)


@router.get("/quiz/stats/{learner_id}/global", response_model=GlobalStats)
def get_global_stats(learner_id: str, tracker: QuizTracker = Depends(get_quiz_tracker)):
    return tracker.global_stats(learner_id)


@router.get("/quiz/difficulty/{learner_id}")
def estimate_quiz_difficulty(
    learner_id: str,
    topic: str = Query(...),
    language: str = Query(...),
    tracker: QuizTracker = Depends(get_quiz_tracker),
):
    return {
        "topic": topic,
        "language": language,
        "difficulty": tracker.estimate_difficulty(learner_id, topic, language),
    }
