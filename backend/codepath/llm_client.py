from __future__ import annotations
import logging
import httpx
from typing import Any, Dict, List, Optional
from .settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class LLMClient:
	"""Chat-completion client for OpenAI with an optional OpenRouter fallback."""

	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		model: Optional[str] = None,
		base_url: Optional[str] = None,
		settings: Optional[Settings] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		cfg = settings or default_settings
		self.api_key = api_key or cfg.openai_api_key
		if not self.api_key:
			raise ValueError("OPENAI_API_KEY is not configured")
		self.model = model or cfg.openai_model
		self.base_url = base_url or cfg.openai_base_url
		self._client = httpx.AsyncClient(timeout=cfg.openai_timeout_seconds, transport=transport)
		self._fallback_client: Optional[httpx.AsyncClient] = None
		self._fallback_enabled = bool(cfg.openrouter_api_key)
		self._openrouter_api_key = cfg.openrouter_api_key
		self._openrouter_model = cfg.openrouter_model
		self._openrouter_base_url = cfg.openrouter_base_url
		self._openrouter_headers = {
			"Authorization": f"Bearer {self._openrouter_api_key}" if self._openrouter_api_key else "",
			"Content-Type": "application/json",
			"HTTP-Referer": cfg.openrouter_referer,
			"X-Title": cfg.openrouter_title,
		}
		if self._fallback_enabled:
			self._fallback_client = httpx.AsyncClient(timeout=cfg.openai_timeout_seconds, transport=transport)

	async def generate(
		self,
		prompt: str,
		*,
		system: Optional[str] = None,
		max_tokens: Optional[int] = None,
		temperature: float = 0.7,
	) -> str:
		messages: List[Dict[str, str]] = []
		if system:
			messages.append({"role": "system", "content": system})
		messages.append({"role": "user", "content": prompt})
		payload: Dict[str, Any] = {"model": self.model, "messages": messages, "temperature": temperature}
		if max_tokens is not None:
			payload["max_tokens"] = max_tokens
		headers = {"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"}
		last_error: Optional[Exception] = None
		try:
			r = await self._client.post(self.base_url, headers=headers, json=payload)
			r.raise_for_status()
		except httpx.HTTPError as err:
			last_error = err
		if last_error is None:
			try:
				return _message_content(r.json())
			except Exception:
				last_error = RuntimeError(f"Unexpected OpenAI response: {r.text}")
		if not self._fallback_enabled:
			raise last_error
		logger.warning("OpenAI call failed (%s); retrying via OpenRouter", last_error)
		return await self._fallback_generate(messages, last_error)

	async def aclose(self) -> None:
		await self._client.aclose()
		if self._fallback_client is not None:
			await self._fallback_client.aclose()

	async def _fallback_generate(self, messages: List[Dict[str, str]], primary_error: Optional[Exception]) -> str:
		if not self._fallback_client or not self._openrouter_api_key:
			raise primary_error or RuntimeError("Fallback requested but OpenRouter is not configured")
		headers = {k: v for k, v in self._openrouter_headers.items() if v}
		payload: Dict[str, Any] = {
			"model": self._openrouter_model,
			"messages": messages,
		}
		try:
			r = await self._fallback_client.post(
				self._openrouter_base_url,
				headers=headers,
				json=payload,
			)
			r.raise_for_status()
			return _message_content(r.json())
		except Exception as fallback_err:
			if primary_error is not None:
				raise RuntimeError(
					f"OpenAI primary call failed ({primary_error}); fallback via OpenRouter also failed"
				) from fallback_err
			raise fallback_err


def _message_content(data: Dict[str, Any]) -> str:
	return data["choices"][0]["message"]["content"]
