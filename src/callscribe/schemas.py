"""Structured output schemas sent with each request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .errors import ConfigurationError
from .models import ANALYSIS_FIELDS


_ANALYSIS_DESCRIPTIONS: Dict[str, str] = {
    "yearRoundEmployees": "Number of permanent employees. Pure number only.",
    "seasonalEmployees": "Number of seasonal employees. Pure number only.",
    "numberOfClients": "Number of clients. Pure number only.",
    "estimatedRevenue": "Estimated revenue. Pure number only, no formatting.",
    "firmIndustry": "The industry of the firm.",
    "currentSoftware": "Software currently used and its purpose. Use bullets if multiple.",
    "decisionMaker": "Who is the decision maker.",
    "buyingTimeline": "When they plan to buy.",
    "nextSteps": "Next steps and meeting time. Write as a task for myself.",
    "whatResonated": "What features solved their problems.",
    "objections": "Real objections mentioned. Use bullets if multiple.",
    "painPoints": "Problems and negative impacts. Use bullets.",
    "notes": "Interesting facts, location, urgency, competitors. Ignore the rep's words.",
    "likelihoodToClose": "Score out of 10 (e.g. '5/10').",
    "howTheyFoundUs": "How they found the product.",
}

ANALYSIS_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        key: {"type": "STRING", "description": _ANALYSIS_DESCRIPTIONS[key]}
        for key, _attr in ANALYSIS_FIELDS
    },
    "required": [key for key, _attr in ANALYSIS_FIELDS],
}


def email_sequence_schema(include_reasoning: bool = False) -> Dict[str, Any]:
    properties: Dict[str, Any] = {
        "subject": {"type": "STRING", "description": "Email subject line."},
        "body": {"type": "STRING", "description": "Email body, ready to send."},
        "recommendedDate": {
            "type": "STRING",
            "description": "When to send it, e.g. 'Tomorrow morning' or 'Day 7'.",
        },
    }
    required = ["subject", "body", "recommendedDate"]
    if include_reasoning:
        properties["reasoning"] = {
            "type": "STRING",
            "description": "Why this touch point is sent and what it aims for.",
        }
        required.append("reasoning")
    return {
        "type": "OBJECT",
        "properties": {
            "emails": {
                "type": "ARRAY",
                "items": {
                    "type": "OBJECT",
                    "properties": properties,
                    "required": required,
                },
            }
        },
        "required": ["emails"],
    }


@dataclass(frozen=True)
class SchemaVariant:
    """One shape of the email draft together with the rules that go with it."""

    name: str
    include_reasoning: bool
    rules: Tuple[str, ...]
    response_schema: Dict[str, Any] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "response_schema", email_sequence_schema(self.include_reasoning)
        )


SCHEMA_VARIANTS: Dict[str, SchemaVariant] = {
    "current": SchemaVariant(
        name="current",
        include_reasoning=False,
        rules=(
            "Never include raw links or URLs.",
            "Never use bracketed placeholders like [Name] or [Link]. Write the real words or leave it out.",
            "No emojis in the subject line or the main text of the body.",
        ),
    ),
    "reasoning": SchemaVariant(
        name="reasoning",
        include_reasoning=True,
        rules=(
            "You may mention a resource by name (guide, case study, video) so I can attach it.",
            "Fill in reasoning with one sentence on why this touch point is sent at this moment.",
            "Follow the emoji style setting for the body.",
        ),
    ),
}

DEFAULT_VARIANT = "current"


def get_schema_variant(name: str | None = None) -> SchemaVariant:
    key = name or DEFAULT_VARIANT
    try:
        return SCHEMA_VARIANTS[key]
    except KeyError:
        raise ConfigurationError(
            f"Unknown email schema variant: {key}",
            {"available": sorted(SCHEMA_VARIANTS)},
        ) from None
