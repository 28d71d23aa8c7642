"""
Quiz performance tracking.

Keeps each learner's recent quiz results in memory and derives difficulty
estimates and performance summaries from them. One tracker is owned by the
application; tests construct their own with a fixed clock.
"""

from __future__ import annotations

import logging
import math
import threading
from collections import Counter, OrderedDict
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from .schemas import GlobalStats, PerformanceStats, QuizResult, utcnow

logger = logging.getLogger(__name__)

RECENT_WINDOW = timedelta(days=30)


def _mean_ratio(results: List[QuizResult]) -> float:
    if not results:
        return 0.0
    return sum(r.ratio for r in results) / len(results)


def _aggregate_ratio(results: List[QuizResult]) -> float:
    total_questions = sum(r.total_questions for r in results)
    if not total_questions:
        return 0.0
    return sum(r.score for r in results) / total_questions


def difficulty_for_ratio(ratio: float) -> str:
    if ratio >= 0.8:
        return "advanced"
    if ratio >= 0.6:
        return "intermediate"
    return "beginner"


def learning_path(results: List[QuizResult]) -> List[str]:
    """Next-step suggestions from the last five results, oldest first."""
    if not results:
        return []
    avg = _mean_ratio(results[-5:])
    if avg < 0.6:
        path = ["Review fundamental concepts", "Practice basic syntax", "Take beginner-level quizzes"]
    elif avg < 0.8:
        path = ["Practice intermediate concepts", "Work on problem-solving", "Try scenario-based questions"]
    else:
        path = ["Advanced topics exploration", "Real-world applications", "Teach others (peer learning)"]

    quiz_types = Counter(r.quiz_type for r in results if r.quiz_type)
    if quiz_types:
        most_used = quiz_types.most_common(1)[0][0]
        if most_used == "multiple-choice":
            path.append("Try code completion questions")
        elif most_used == "code-completion":
            path.append("Practice scenario-based questions")
    return path


def consistency_score(results: List[QuizResult]) -> float:
    if len(results) < 2:
        return 0.0
    ordered = sorted(results, key=lambda r: r.timestamp)
    gaps = [(b.timestamp - a.timestamp).total_seconds() / 86400 for a, b in zip(ordered, ordered[1:])]
    avg_gap_days = sum(gaps) / len(gaps)
    return min(100.0, max(0.0, 100 - avg_gap_days))


def _mean_time(results: List[QuizResult]) -> Optional[float]:
    timed = [r.time_spent for r in results if r.time_spent]
    if not timed:
        return None
    return sum(timed) / len(timed)


def weak_areas(results: List[QuizResult]) -> List[str]:
    areas: List[str] = []
    avg = _mean_ratio(results[-3:])
    if avg < 0.5:
        areas += ["Basic concepts", "Fundamental syntax"]
    if avg < 0.7:
        areas.append("Problem-solving skills")
    avg_time = _mean_time(results)
    if avg_time is not None and avg_time > 120:
        areas.append("Speed and efficiency")
    return areas


def strong_areas(results: List[QuizResult]) -> List[str]:
    areas: List[str] = []
    if _mean_ratio(results[-3:]) > 0.8:
        areas += ["Conceptual understanding", "Problem-solving"]
    if any(r.streak_count and r.streak_count > 2 for r in results):
        areas.append("Consistent performance")
    avg_time = _mean_time(results)
    if avg_time is not None and avg_time < 60:
        areas.append("Quick thinking")
    return areas


class QuizTracker:
    def __init__(
        self,
        *,
        max_history: int = 50,
        max_learners: int = 1000,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.max_history = max_history
        self.max_learners = max_learners
        self._clock = clock
        # Ordered by last save; the front is evicted first
        self._history: OrderedDict[str, List[QuizResult]] = OrderedDict()
        self._lock = threading.Lock()

    def save_result(self, learner_id: str, result: QuizResult) -> None:
        with self._lock:
            history = self._history.setdefault(learner_id, [])
            self._history.move_to_end(learner_id)
            history.append(result)
            if len(history) > self.max_history:
                del history[: len(history) - self.max_history]
            while len(self._history) > self.max_learners:
                evicted, _ = self._history.popitem(last=False)
                logger.info("Quiz history full; evicted learner %s", evicted)

    def history(self, learner_id: str) -> List[QuizResult]:
        with self._lock:
            return list(self._history.get(learner_id, []))

    def clear(self, learner_id: str) -> None:
        with self._lock:
            self._history.pop(learner_id, None)

    def _topic_results(self, learner_id: str, topic: str, language: str) -> List[QuizResult]:
        results = [r for r in self.history(learner_id) if r.topic == topic and r.language == language]
        return sorted(results, key=lambda r: r.timestamp)

    def estimate_difficulty(self, learner_id: str, topic: str, language: str) -> str:
        cutoff = self._clock() - RECENT_WINDOW
        recent = [r for r in self._topic_results(learner_id, topic, language) if r.timestamp > cutoff]
        if not recent:
            return "beginner"
        return difficulty_for_ratio(_aggregate_ratio(recent))

    def performance_stats(self, learner_id: str, topic: str, language: str) -> PerformanceStats:
        results = self._topic_results(learner_id, topic, language)
        if not results:
            return PerformanceStats()

        total_questions = sum(r.total_questions for r in results)
        total_time = sum(r.time_spent or 0 for r in results)

        half = math.ceil(len(results) / 2)
        first_avg = _mean_ratio(results[:half])
        second_avg = _mean_ratio(results[half:])
        improvement = ((second_avg - first_avg) / first_avg) * 100 if first_avg > 0 else 0.0

        return PerformanceStats(
            total_quizzes=len(results),
            average_score=_aggregate_ratio(results),
            best_score=max(r.ratio for r in results),
            current_difficulty=self.estimate_difficulty(learner_id, topic, language),
            total_time_spent=total_time,
            average_time_per_question=total_time / total_questions,
            streak_history=[r.streak_count for r in results if r.streak_count],
            improvement_rate=improvement,
            weak_areas=weak_areas(results),
            strong_areas=strong_areas(results),
            learning_path=learning_path(results),
            last_quiz_date=results[-1].timestamp.date().isoformat(),
            consistency_score=consistency_score(results),
        )

    def global_stats(self, learner_id: str) -> GlobalStats:
        results = self.history(learner_id)
        if not results:
            return GlobalStats()
        languages = Counter(r.language for r in results)
        topics = Counter(r.topic for r in results)
        return GlobalStats(
            total_quizzes=len(results),
            total_questions=sum(r.total_questions for r in results),
            average_score=_aggregate_ratio(results),
            total_time_spent=sum(r.time_spent or 0 for r in results),
            favorite_language=languages.most_common(1)[0][0],
            favorite_topic=topics.most_common(1)[0][0],
            total_streak=max((r.streak_count or 0 for r in results), default=0),
        )
