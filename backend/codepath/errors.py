from __future__ import annotations
from typing import Optional


class CodepathError(Exception):
	"""Base error rendered to clients as {"error": message}."""

	status_code: int = 500
	message: str = "Internal server error"

	def __init__(self, message: Optional[str] = None) -> None:
		if message is not None:
			self.message = message
		super().__init__(self.message)


class ProfileValidationError(CodepathError):
	status_code = 400
	message = "Missing required profile information"


class QuizRequestError(CodepathError):
	status_code = 400
	message = "Language and topic are required"


class QuizUnavailableError(CodepathError):
	status_code = 500
	message = "Failed to generate quiz and no fallback available."


class QuizBankIntegrityError(CodepathError):
	# Raised while loading the bank, so a malformed file stops startup
	status_code = 500
	message = "Quiz bank failed validation"
