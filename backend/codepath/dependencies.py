from fastapi import Request

from .channels import ChannelDirectory
from .quiz_bank import QuizBank
from .quiz_generator import QuizGenerator
from .quiz_tracker import QuizTracker
from .roadmap import RoadmapComposer


# Services are built once by main.create_app and live on app.state
def get_composer(request: Request) -> RoadmapComposer:
	return request.app.state.composer


def get_quiz_bank(request: Request) -> QuizBank:
	return request.app.state.quiz_bank


def get_quiz_generator(request: Request) -> QuizGenerator:
	return request.app.state.quiz_generator


def get_quiz_tracker(request: Request) -> QuizTracker:
	return request.app.state.quiz_tracker


def get_channel_directory(request: Request) -> ChannelDirectory:
	return request.app.state.channels
