"""Data models for Callscribe."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace as dc_replace
from typing import Any, Dict, List, Optional, Tuple


# Wire key (camelCase, as the model returns it) -> attribute name.
ANALYSIS_FIELDS: List[Tuple[str, str]] = [
    ("yearRoundEmployees", "year_round_employees"),
    ("seasonalEmployees", "seasonal_employees"),
    ("numberOfClients", "number_of_clients"),
    ("estimatedRevenue", "estimated_revenue"),
    ("firmIndustry", "firm_industry"),
    ("currentSoftware", "current_software"),
    ("decisionMaker", "decision_maker"),
    ("buyingTimeline", "buying_timeline"),
    ("nextSteps", "next_steps"),
    ("whatResonated", "what_resonated"),
    ("objections", "objections"),
    ("painPoints", "pain_points"),
    ("notes", "notes"),
    ("likelihoodToClose", "likelihood_to_close"),
    ("howTheyFoundUs", "how_they_found_us"),
]

ANALYSIS_ROWS: List[Tuple[str, str]] = [
    ("Number of year-round employees", "year_round_employees"),
    ("Number of seasonal employees", "seasonal_employees"),
    ("Number of clients", "number_of_clients"),
    ("Estimated revenue per year", "estimated_revenue"),
    ("Firm industry", "firm_industry"),
    ("Current software used and purpose", "current_software"),
    ("Decision maker", "decision_maker"),
    ("Buying timeline", "buying_timeline"),
    ("Next steps", "next_steps"),
    ("What resonated with the firm", "what_resonated"),
    ("Objections", "objections"),
    ("Pain points", "pain_points"),
    ("Notes", "notes"),
    ("Likelihood to close", "likelihood_to_close"),
    ("How they found us", "how_they_found_us"),
]

SEQUENCE_LENGTH = 6

SETTING_CHOICES: Dict[str, Tuple[str, str]] = {
    "tone": ("casual", "formal"),
    "brevity": ("brief", "standard"),
    "directness": ("polite", "direct"),
    "emojis": ("none", "minimal"),
    "focus": ("value", "relationship"),
    "urgency": ("patient", "urgent"),
}


@dataclass(frozen=True)
class AnalysisRecord:
    year_round_employees: str
    seasonal_employees: str
    number_of_clients: str
    estimated_revenue: str
    firm_industry: str
    current_software: str
    decision_maker: str
    buying_timeline: str
    next_steps: str
    what_resonated: str
    objections: str
    pain_points: str
    notes: str
    likelihood_to_close: str
    how_they_found_us: str

    @classmethod
    def from_payload(cls, payload: Any) -> "AnalysisRecord":
        """Build a record from the decoded JSON object returned by the model.

        Every one of the fifteen keys must be present with a string value.
        Empty strings are fine, nulls and other types are not. Unknown keys
        are ignored.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
        missing = [key for key, _attr in ANALYSIS_FIELDS if key not in payload]
        if missing:
            raise ValueError(f"Missing fields: {', '.join(missing)}")
        values: Dict[str, str] = {}
        for key, attr in ANALYSIS_FIELDS:
            value = payload[key]
            if not isinstance(value, str):
                raise ValueError(
                    f"Field {key} must be a string, got {type(value).__name__}"
                )
            values[attr] = value
        return cls(**values)

    def to_payload(self) -> Dict[str, str]:
        return {key: getattr(self, attr) for key, attr in ANALYSIS_FIELDS}


@dataclass(frozen=True)
class EmailDraft:
    subject: str
    body: str
    recommended_date: str
    reasoning: Optional[str] = None

    @classmethod
    def from_payload(cls, item: Any, require_reasoning: bool = False) -> "EmailDraft":
        if not isinstance(item, dict):
            raise ValueError(f"Expected an email object, got {type(item).__name__}")
        values: Dict[str, Any] = {}
        for key, attr in (
            ("subject", "subject"),
            ("body", "body"),
            ("recommendedDate", "recommended_date"),
        ):
            value = item.get(key)
            if not isinstance(value, str):
                raise ValueError(f"Email field {key} must be a string")
            values[attr] = value
        reasoning = item.get("reasoning")
        if reasoning is None and require_reasoning:
            raise ValueError("Email field reasoning is required")
        if reasoning is not None and not isinstance(reasoning, str):
            raise ValueError("Email field reasoning must be a string")
        values["reasoning"] = reasoning
        return cls(**values)

    def to_payload(self) -> Dict[str, str]:
        payload = {
            "subject": self.subject,
            "body": self.body,
            "recommendedDate": self.recommended_date,
        }
        if self.reasoning is not None:
            payload["reasoning"] = self.reasoning
        return payload


EmailSequence = List[EmailDraft]


@dataclass(frozen=True)
class GenerationSettings:
    tone: str = "casual"
    brevity: str = "brief"
    directness: str = "polite"
    emojis: str = "none"
    focus: str = "value"
    urgency: str = "patient"

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            allowed = SETTING_CHOICES[item.name]
            if value not in allowed:
                raise ValueError(
                    f"Invalid {item.name} {value!r}; expected one of {', '.join(allowed)}"
                )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GenerationSettings":
        data = dict(data or {})
        unknown = sorted(set(data) - set(SETTING_CHOICES))
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(unknown)}")
        return cls(**{key: str(value) for key, value in data.items()})

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    def replace(self, **changes: str) -> "GenerationSettings":
        return dc_replace(self, **changes)
