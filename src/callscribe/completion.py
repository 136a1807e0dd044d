"""Completion service used by both clients, backed by Gemini."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Dict, Optional, Protocol

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class CompletionRequest:
    contents: str
    system_instruction: str
    response_schema: Dict[str, Any]
    response_mime_type: str = "application/json"


class CompletionService(Protocol):
    """Anything that turns a request into the raw response text."""

    def invoke(self, request: CompletionRequest) -> str:
        ...


class GeminiCompletionService:
    """Structured JSON generation through google-generativeai."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        temperature: Optional[float] = None,
    ) -> None:
        import google.generativeai as genai

        self._genai = genai
        self.model = model
        self.temperature = temperature
        genai.configure(api_key=api_key)
        logger.info("Gemini configured (model=%s)", model)

    def _generation_config(self, request: CompletionRequest) -> Dict[str, Any]:
        config: Dict[str, Any] = {
            "response_mime_type": request.response_mime_type,
            "response_schema": request.response_schema,
        }
        if self.temperature is not None:
            config["temperature"] = self.temperature
        return config

    def invoke(self, request: CompletionRequest) -> str:
        model = self._genai.GenerativeModel(
            model_name=self.model,
            system_instruction=request.system_instruction,
        )
        response = model.generate_content(
            request.contents,
            generation_config=self._generation_config(request),
        )
        try:
            text = response.text
        except ValueError as exc:
            # Blocked or empty candidates have no text part.
            logger.warning("Gemini returned no text: %s", exc)
            return ""
        return text or ""


def build_completion_service(api_key: str, service_config: Any) -> GeminiCompletionService:
    return GeminiCompletionService(
        api_key=api_key,
        model=service_config.model,
        temperature=service_config.temperature,
    )
