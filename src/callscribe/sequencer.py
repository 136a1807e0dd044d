"""Follow-up email sequence generation."""

from __future__ import annotations

import json
import logging
from typing import List, Optional

from .completion import CompletionRequest, CompletionService
from .errors import (
    GenerationConfigurationError,
    GenerationInputError,
    GenerationMalformedError,
    GenerationTransportError,
)
from .models import SEQUENCE_LENGTH, EmailDraft, GenerationSettings
from .prompts import build_generation_instruction, build_generation_prompt
from .schemas import SchemaVariant, get_schema_variant

logger = logging.getLogger(__name__)


class SequenceGenerationClient:
    def __init__(
        self,
        service: Optional[CompletionService],
        api_key: Optional[str],
        variant: SchemaVariant | str | None = None,
    ) -> None:
        self.service = service
        self.api_key = api_key
        if isinstance(variant, SchemaVariant):
            self.variant = variant
        else:
            self.variant = get_schema_variant(variant)

    def build_request(
        self, transcript: str, settings: Optional[GenerationSettings] = None
    ) -> CompletionRequest:
        return CompletionRequest(
            contents=build_generation_prompt(transcript),
            system_instruction=build_generation_instruction(settings, self.variant),
            response_schema=self.variant.response_schema,
        )

    def generate(
        self, transcript: str, settings: Optional[GenerationSettings] = None
    ) -> List[EmailDraft]:
        if not self.api_key:
            raise GenerationConfigurationError("API key is missing.")
        if not transcript or not transcript.strip():
            raise GenerationInputError("Transcript is empty.")

        settings = settings or GenerationSettings()
        logger.info(
            "Generating email sequence (variant=%s, settings=%s)",
            self.variant.name,
            settings.to_dict(),
        )
        request = self.build_request(transcript, settings)
        try:
            text = self.service.invoke(request)
        except Exception as exc:
            logger.exception("Failed to generate emails")
            raise GenerationTransportError(f"Generation request failed: {exc}") from exc

        if not text or not text.strip():
            raise GenerationMalformedError("No response from AI.")

        try:
            payload = json.loads(text)
            drafts = self._parse_drafts(payload)
        except ValueError as exc:
            logger.error("Unusable email sequence response: %s", exc)
            raise GenerationMalformedError(
                "Email sequence response did not match the schema.",
                {"reason": str(exc)},
            ) from exc

        if len(drafts) != SEQUENCE_LENGTH:
            logger.warning(
                "Expected %s emails, got %s", SEQUENCE_LENGTH, len(drafts)
            )
        return drafts

    def _parse_drafts(self, payload: object) -> List[EmailDraft]:
        if not isinstance(payload, dict):
            raise ValueError("Expected a JSON object with an emails list")
        emails = payload.get("emails")
        if not isinstance(emails, list):
            raise ValueError("Field emails must be a list")
        return [
            EmailDraft.from_payload(item, require_reasoning=self.variant.include_reasoning)
            for item in emails
        ]
