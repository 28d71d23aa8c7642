from __future__ import annotations
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..channels import ChannelDirectory
from ..dependencies import get_channel_directory
from ..schemas import ProgrammingChannel

router = APIRouter(tags=["channels"])
logger = logging.getLogger(__name__)


@router.get("/get-youtube-channels", response_model=List[ProgrammingChannel])
def get_youtube_channels(language: Optional[str] = None, directory: ChannelDirectory = Depends(get_channel_directory)):
	# Unknown language falls through to every channel, never a 404
	try:
		return directory.get_channels(language)
	except Exception:
		logger.exception("Error fetching YouTube channels")
		return JSONResponse(status_code=500, content={"error": "Failed to fetch YouTube channels"})
