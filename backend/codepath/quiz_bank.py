"""
Static quiz question bank.

The bank is a topic -> difficulty -> questions table loaded once from JSON at
startup. Every entry is validated while loading; a malformed entry raises
QuizBankIntegrityError so the process never serves a question whose answer is
not one of its options. Queries never raise: unknown keys return empty lists.
"""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from .errors import QuizBankIntegrityError
from .schemas import DIFFICULTIES, QuizQuestion

logger = logging.getLogger(__name__)

DEFAULT_BANK_PATH = Path(__file__).resolve().parent / "data" / "quiz_bank.json"
FALLBACK_DIFFICULTY = "beginner"


def parse_bank(raw: Dict[str, Any]) -> Dict[str, Dict[str, List[QuizQuestion]]]:
    if not isinstance(raw, dict):
        raise QuizBankIntegrityError("Quiz bank must be a mapping of topic to difficulty buckets")
    bank: Dict[str, Dict[str, List[QuizQuestion]]] = {}
    for topic, buckets in raw.items():
        if not isinstance(buckets, dict):
            raise QuizBankIntegrityError(f"Topic {topic!r} must map difficulties to question lists")
        bank[topic] = {}
        for difficulty, entries in buckets.items():
            if difficulty not in DIFFICULTIES:
                raise QuizBankIntegrityError(f"Topic {topic!r} has unknown difficulty {difficulty!r}")
            questions = []
            for index, entry in enumerate(entries or []):
                try:
                    question = QuizQuestion.model_validate(entry)
                except ValidationError as e:
                    raise QuizBankIntegrityError(
                        f"Invalid question {topic!r}/{difficulty}[{index}]: {e}"
                    ) from e
                if question.difficulty != difficulty:
                    raise QuizBankIntegrityError(
                        f"Question {topic!r}/{difficulty}[{index}] is tagged {question.difficulty!r}"
                    )
                questions.append(question)
            bank[topic][difficulty] = questions
    return bank


class QuizBank:
    def __init__(
        self,
        questions: Dict[str, Dict[str, List[QuizQuestion]]],
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._bank = questions
        self._rng = rng or random.Random()

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], *, rng: Optional[random.Random] = None) -> "QuizBank":
        return cls(parse_bank(raw), rng=rng)

    @classmethod
    def from_json(cls, path: Union[str, Path, None] = None, *, rng: Optional[random.Random] = None) -> "QuizBank":
        source = Path(path) if path else DEFAULT_BANK_PATH
        try:
            with open(source, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise QuizBankIntegrityError(f"Quiz bank {source} is not valid JSON: {e}") from e
        except OSError as e:
            raise QuizBankIntegrityError(f"Quiz bank {source} could not be read: {e}") from e
        bank = cls.from_dict(raw, rng=rng)
        logger.info("Loaded quiz bank from %s: %d topics, %d questions", source, len(bank.list_topics()), bank.total())
        return bank

    def list_topics(self) -> List[str]:
        return list(self._bank.keys())

    @staticmethod
    def list_difficulties() -> List[str]:
        # Fixed list; some topics leave buckets empty
        return list(DIFFICULTIES)

    def available(self, topic: str, difficulty: str) -> List[QuizQuestion]:
        """Questions a query for (topic, difficulty) draws from, unshuffled.

        Beginner is used only when the topic has no bucket for the requested
        difficulty at all; a present but empty bucket stays empty.
        """
        buckets = self._bank.get(topic)
        if buckets is None:
            return []
        questions = buckets.get(difficulty)
        if questions is None:
            questions = buckets.get(FALLBACK_DIFFICULTY, [])
        return list(questions)

    def get_questions(self, topic: str, difficulty: str, count: int = 5) -> List[QuizQuestion]:
        if count <= 0:
            return []
        pool = self.available(topic, difficulty)
        self._rng.shuffle(pool)
        return pool[:count]

    def summary(self) -> Dict[str, Dict[str, int]]:
        return {
            topic: {difficulty: len(questions) for difficulty, questions in buckets.items()}
            for topic, buckets in self._bank.items()
        }

    def total(self) -> int:
        return sum(len(questions) for buckets in self._bank.values() for questions in buckets.values())
