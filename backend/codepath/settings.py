from typing import Annotated, Any, List, Optional

from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import Field, field_validator

class Settings(BaseSettings):
	openai_api_key: Optional[str] = Field(default=None, validation_alias="OPENAI_API_KEY")
	openai_model: str = Field(default="gpt-4o-mini", validation_alias="OPENAI_MODEL")
	openai_base_url: str = Field(default="https://api.openai.com/v1/chat/completions", validation_alias="OPENAI_BASE_URL")
	openai_timeout_seconds: float = Field(default=30, validation_alias="OPENAI_TIMEOUT_SECONDS")

	# OpenRouter fallback configuration (optional)
	openrouter_api_key: Optional[str] = Field(default=None, validation_alias="OPENROUTER_API_KEY")
	openrouter_model: str = Field(default="meta-llama/llama-3.1-8b-instruct:free", validation_alias="OPENROUTER_MODEL")
	openrouter_base_url: str = Field(default="https://openrouter.ai/api/v1/chat/completions", validation_alias="OPENROUTER_BASE_URL")
	openrouter_referer: str = Field(default="https://localhost", validation_alias="OPENROUTER_HTTP_REFERER")
	openrouter_title: str = Field(default="Codepath Learning Platform", validation_alias="OPENROUTER_TITLE")

	# Quiz bank file; None uses the bundled data/quiz_bank.json
	quiz_bank_path: Optional[str] = Field(default=None, validation_alias="QUIZ_BANK_PATH")
	# Most recent results kept per learner
	quiz_history_limit: int = Field(default=50, validation_alias="QUIZ_HISTORY_LIMIT")
	# Learners tracked at once; the least recently active is evicted past this
	quiz_max_learners: int = Field(default=1000, validation_alias="QUIZ_MAX_LEARNERS")

	# Comma-separated, e.g. CORS_ORIGINS=http://localhost:3000,https://codepath.dev
	cors_origins: Annotated[List[str], NoDecode] = Field(default=["*"], validation_alias="CORS_ORIGINS")
	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

	@field_validator("cors_origins", mode="before")
	@classmethod
	def _split_origins(cls, v: Any) -> Any:
		if isinstance(v, str):
			return [origin.strip() for origin in v.split(",") if origin.strip()]
		return v

settings = Settings()
