"""Structured call notes from a transcript."""

from __future__ import annotations

import json
import logging
from typing import Optional

from .completion import CompletionRequest, CompletionService
from .errors import (
    ExtractionConfigurationError,
    ExtractionInputError,
    ExtractionMalformedError,
    ExtractionTransportError,
)
from .models import AnalysisRecord
from .prompts import EXTRACTION_INSTRUCTION
from .schemas import ANALYSIS_SCHEMA

logger = logging.getLogger(__name__)


class ExtractionClient:
    def __init__(
        self, service: Optional[CompletionService], api_key: Optional[str]
    ) -> None:
        self.service = service
        self.api_key = api_key

    @staticmethod
    def build_request(transcript: str) -> CompletionRequest:
        return CompletionRequest(
            contents=transcript,
            system_instruction=EXTRACTION_INSTRUCTION,
            response_schema=ANALYSIS_SCHEMA,
        )

    def extract(self, transcript: str) -> AnalysisRecord:
        """Run one extraction call and return the fifteen-field record.

        Raises an ExtractionError subclass on a missing key, a blank
        transcript, a failed call, or a response that is empty or does not
        match the schema. Nothing is retried.
        """
        if not self.api_key:
            raise ExtractionConfigurationError("API key is missing.")
        if not transcript or not transcript.strip():
            raise ExtractionInputError("Transcript is empty.")

        logger.info("Analyzing transcript (%s chars)", len(transcript))
        request = self.build_request(transcript)
        try:
            text = self.service.invoke(request)
        except Exception as exc:
            logger.exception("Error analyzing transcript")
            raise ExtractionTransportError(f"Analysis request failed: {exc}") from exc

        if not text or not text.strip():
            raise ExtractionMalformedError("No response from AI.")
        logger.debug("Analysis response: %s chars", len(text))

        try:
            record = AnalysisRecord.from_payload(json.loads(text))
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError too.
            logger.error("Unusable analysis response: %s", exc)
            raise ExtractionMalformedError(
                "Analysis response did not match the schema.", {"reason": str(exc)}
            ) from exc
        return record
