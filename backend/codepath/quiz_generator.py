"""
Quiz Generation Service
=======================

Produces a quiz for a (language, topic, difficulty) request. When an LLM is
configured the quiz is generated from a tutor prompt; any generation failure,
or no LLM at all, falls back to the static quiz bank. The roadmap composer
never goes through this service.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, List, Optional, Protocol

from .errors import QuizRequestError, QuizUnavailableError
from .quiz_bank import QuizBank
from .schemas import QuizQuestion, QuizRequest, QuizResponse, UserPerformance

logger = logging.getLogger(__name__)


QUIZ_TYPE_INSTRUCTIONS = {
    "multiple-choice": "Create multiple-choice questions with 4 options (A, B, C, D)",
    "true-false": "Create true/false questions with explanations",
    "fill-blank": "Create fill-in-the-blank questions with code snippets",
    "code-completion": "Create code completion questions where users complete code snippets",
    "matching": "Create matching questions (e.g., match concepts to definitions)",
    "scenario": "Create scenario-based questions with real-world programming situations",
}

_FORMAT_EXAMPLE = """[
  {
    "question": "...",
    "options": { "A": "...", "B": "...", "C": "...", "D": "..." },
    "answer": "A",
    "explanation": "...",
    "codeSnippet": "...",
    "difficulty": "beginner|intermediate|advanced",
    "category": "concept|syntax|best-practice|debugging"
  }
]"""


class TextGenerator(Protocol):
    async def generate(self, prompt: str, *, max_tokens: Optional[int] = None) -> str: ...

    async def aclose(self) -> None: ...


def adjust_difficulty(difficulty: str, performance: UserPerformance) -> str:
    """Step difficulty one level based on the learner's average score (percent)."""
    avg = performance.average_score or 0
    if avg > 80 and difficulty == "beginner":
        return "intermediate"
    if avg > 85 and difficulty == "intermediate":
        return "advanced"
    if avg < 60 and difficulty == "intermediate":
        return "beginner"
    if avg < 70 and difficulty == "advanced":
        return "intermediate"
    return difficulty


def build_quiz_prompt(req: QuizRequest, difficulty: str) -> str:
    lines = [
        f'You are an expert programming tutor. Generate a {difficulty} level quiz for "{req.topic}" in {req.language}.',
    ]
    perf = req.user_performance
    if perf is not None:
        weak = ", ".join(perf.weak_areas) or "None identified"
        strong = ", ".join(perf.strong_areas) or "None identified"
        lines.append(
            f"User Context: Average score: {perf.average_score}%, Weak areas: {weak}, "
            f"Strong areas: {strong}. Focus more on weak areas."
        )
    instruction = QUIZ_TYPE_INSTRUCTIONS.get(req.quiz_type, QUIZ_TYPE_INSTRUCTIONS["multiple-choice"])
    lines += [
        f"Generate {req.question_count} {req.quiz_type} questions.",
        "",
        "Requirements:",
        f"- {instruction}",
        "- " + ("Include relevant code snippets where appropriate" if req.include_code_snippets else "Focus on conceptual questions"),
        "- " + ("Include practical, real-world examples" if req.include_practical_examples else "Focus on theoretical concepts"),
        "- Provide detailed explanations for correct answers",
        f"- Ensure questions are appropriate for {difficulty} level",
        "- Make questions engaging and educational",
        "",
        "Format your response as a JSON array like this:",
        _FORMAT_EXAMPLE,
        "",
        "Make sure the JSON is valid and parsable. Output ONLY the JSON array.",
    ]
    return "\n".join(lines)


def _extract_json_array(text: str) -> List[Any]:
    try:
        data = json.loads(text)
        if isinstance(data, list):
            return data
    except Exception:
        pass
    code_block = re.search(r"```(?:json)?\s*([\s\S]*?)\s*```", text)
    if code_block:
        try:
            data = json.loads(code_block.group(1))
            if isinstance(data, list):
                return data
        except Exception:
            pass
    first = text.find("[")
    last = text.rfind("]")
    if first != -1 and last > first:
        data = json.loads(text[first : last + 1])
        if isinstance(data, list):
            return data
    raise ValueError("LLM did not return a JSON array of questions")


def parse_generated_quiz(text: str) -> List[QuizQuestion]:
    return [QuizQuestion.model_validate(item) for item in _extract_json_array(text)]


class QuizGenerator:
    def __init__(
        self,
        bank: QuizBank,
        *,
        client_factory: Optional[Callable[[], TextGenerator]] = None,
        max_tokens: int = 1500,
    ) -> None:
        self.bank = bank
        self.client_factory = client_factory
        self.max_tokens = max_tokens

    async def _generate_with_llm(self, req: QuizRequest, difficulty: str) -> Optional[List[QuizQuestion]]:
        if self.client_factory is None:
            return None
        try:
            client = self.client_factory()
            try:
                text = await client.generate(build_quiz_prompt(req, difficulty), max_tokens=self.max_tokens)
            finally:
                await client.aclose()
            quiz = parse_generated_quiz(text)
        except Exception as e:
            logger.warning("AI quiz generation failed for %s/%s, using quiz bank: %s", req.language, req.topic, e)
            return None
        return quiz or None

    async def generate(self, req: QuizRequest) -> QuizResponse:
        if not req.language or not req.topic:
            raise QuizRequestError()
        difficulty = req.difficulty
        if req.adaptive_difficulty and req.user_performance is not None:
            difficulty = adjust_difficulty(req.difficulty, req.user_performance)
            if difficulty != req.difficulty:
                logger.info("Adjusted quiz difficulty %s -> %s", req.difficulty, difficulty)

        source = "ai"
        quiz = await self._generate_with_llm(req, difficulty)
        if quiz is None:
            source = "bank"
            quiz = self.bank.get_questions(req.topic, req.difficulty, req.question_count)
            if not quiz:
                raise QuizUnavailableError()
        logger.info("Served %d %s questions for %s from %s", len(quiz), req.topic, req.language, source)

        return QuizResponse(
            quiz=quiz,
            language=req.language,
            topic=req.topic,
            difficulty=req.difficulty,
            quiz_type=req.quiz_type,
            question_count=req.question_count,
            include_code_snippets=req.include_code_snippets,
            include_practical_examples=req.include_practical_examples,
            source=source,
        )
