from __future__ import annotations
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .settings import Settings, settings as default_settings
from .errors import CodepathError
from .channels import ChannelDirectory
from .llm_client import LLMClient
from .quiz_bank import QuizBank
from .quiz_generator import QuizGenerator
from .quiz_tracker import QuizTracker
from .roadmap import RoadmapComposer
from .routers import health
from .routers import roadmap
from .routers import channels
from .routers import quiz

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
	cfg = app_settings or default_settings
	logging.basicConfig(level=cfg.log_level.upper(), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

	app = FastAPI(title="Codepath Learning API", version="0.1.0")
	app.add_middleware(
		CORSMiddleware,
		allow_origins=cfg.cors_origins,
		allow_credentials=True,
		allow_methods=["*"],
		allow_headers=["*"],
	)

	# Composition root: one instance of each service per app
	quiz_bank = QuizBank.from_json(cfg.quiz_bank_path)
	client_factory = (lambda: LLMClient(settings=cfg)) if cfg.openai_api_key else None
	app.state.settings = cfg
	app.state.composer = RoadmapComposer()
	app.state.quiz_bank = quiz_bank
	app.state.quiz_generator = QuizGenerator(quiz_bank, client_factory=client_factory)
	app.state.quiz_tracker = QuizTracker(max_history=cfg.quiz_history_limit, max_learners=cfg.quiz_max_learners)
	app.state.channels = ChannelDirectory()
	if client_factory is None:
		logger.info("OPENAI_API_KEY not set; quizzes are served from the quiz bank")

	@app.exception_handler(CodepathError)
	async def codepath_error_handler(request: Request, exc: CodepathError):
		return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

	app.include_router(health.router)
	app.include_router(roadmap.router)
	app.include_router(channels.router)
	app.include_router(quiz.router)

	@app.get("/info")
	def info():
		return {
			"status": "ok",
			"llm_configured": bool(cfg.openai_api_key),
			"quiz_topics": len(quiz_bank.list_topics()),
			"channel_languages": len(app.state.channels.languages()),
		}

	return app


app = create_app()


if __name__ == "__main__":
	import uvicorn
	uvicorn.run(app, host="0.0.0.0", port=8000)
