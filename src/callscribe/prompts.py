"""Instruction text for the extraction and generation requests."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .models import SETTING_CHOICES, GenerationSettings
from .schemas import SchemaVariant, get_schema_variant


EXTRACTION_INSTRUCTION = """
You are a sales rep analyzing a call transcript. You are writing these notes FOR YOURSELF to read later.

**Tone & Style Rules:**
1. **Informal & Simple**: Use simple words. No corporate jargon. Write like a human taking quick notes.
2. **First Person / Direct**: Never say "The prospect said" or "The client wants". Say "They want..." or "She mentioned...".
3. **Their Words**: Reuse the words and the language of the transcript.
4. **Action Oriented**: Write "Next Steps" as a to-do list for yourself (e.g. "I need to send the proposal...", "Call them back on Tuesday").
5. **Formatting**: Use bullet points ( - ) for any field with more than one item.

**Extraction Rules:**
1. **Numbers**: For employees and clients, write the PURE NUMBER only (e.g. "5").
2. **Estimated Revenue**: Calculate it from the firm size.
   * 1-5 employees: ~95k per employee.
   * 5-20 employees: ~135k per employee.
   * Return the PURE NUMBER only, no currency sign or separators (e.g. "450000").
3. **Current Software**: Only list what they use *now*.
4. **Notes**: SKIP anything I (the sales rep) said. Only focus on their situation, location, urgency or competitors.
5. **Likelihood to close**: Just the score (e.g. "8/10").
""".strip()


SETTING_FRAGMENTS: Dict[str, Dict[str, str]] = {
    "tone": {
        "casual": 'Casual and friendly, like texting a colleague. Open with "Hey" and their first name, never "Dear".',
        "formal": 'Professional and courteous. Open with "Hello" and their first name, and keep a business register.',
    },
    "brevity": {
        "brief": "Keep every email ultra short, 1-2 sentences max.",
        "standard": "Keep every email to 3-4 sentences max.",
    },
    "directness": {
        "polite": "Ask softly and leave room for them to say no.",
        "direct": "Get to the point in the first sentence and ask plainly for what you want.",
    },
    "emojis": {
        "none": "Do not use any emojis.",
        "minimal": "At most one emoji per email, and only in the sign-off.",
    },
    "focus": {
        "value": "Lead with the concrete outcome and the time or money they get back.",
        "relationship": "Lead with rapport, refer to personal details they shared on the call.",
    },
    "urgency": {
        "patient": "Space the emails out over about a month and never push for a fast answer.",
        "urgent": "Space the emails out over about two weeks and tie each one to their deadline.",
    },
}

SEQUENCE_ARC: Tuple[str, ...] = (
    "Recap the call and check that I understood their situation correctly.",
    "Offer a resource that addresses one specific pain point they mentioned. Do not include a link.",
    "A soft nudge to keep the conversation going.",
    'A minimal check: "Are you still looking to solve X?", where X is their main problem.',
    "Future-pace the outcome: paint what their week looks like once the problem is solved.",
    "A break-up email that says I will stop reaching out if I do not hear back.",
)

_GENERATION_INTRO = (
    "You are a sales rep writing a follow-up email sequence to a prospect after the call "
    "in the transcript. Write exactly {count} emails, in the order they will be sent. "
    "Use the details and the words from the call."
)

_CLOSING_RULE = "Every email must end with a question or a clear call to action."

_TIMING_RULE = (
    "Set recommendedDate for each email as a plain-language send time relative to the call "
    '(e.g. "Tomorrow morning", "Day 3, after lunch").'
)


def setting_fragment(name: str, value: str) -> str:
    if name not in SETTING_FRAGMENTS:
        raise ValueError(f"Unknown setting: {name}")
    try:
        return SETTING_FRAGMENTS[name][value]
    except KeyError:
        allowed = ", ".join(SETTING_CHOICES[name])
        raise ValueError(f"Invalid {name} {value!r}; expected one of {allowed}") from None


def style_lines(settings: GenerationSettings) -> List[str]:
    values = settings.to_dict()
    return [
        f"- {name.capitalize()}: {setting_fragment(name, values[name])}"
        for name in SETTING_CHOICES
    ]


def build_generation_instruction(
    settings: Optional[GenerationSettings] = None,
    variant: SchemaVariant | str | None = None,
) -> str:
    """Assemble the system instruction for the email sequence request.

    Pure function of its inputs: each toggle selects exactly one fragment
    from SETTING_FRAGMENTS and the variant contributes its own rules.
    """
    settings = settings or GenerationSettings()
    if not isinstance(variant, SchemaVariant):
        variant = get_schema_variant(variant)

    lines: List[str] = [_GENERATION_INTRO.format(count=len(SEQUENCE_ARC)), ""]
    lines.append("**Style:**")
    lines.extend(style_lines(settings))
    lines.append("")
    lines.append("**Rules:**")
    for rule in variant.rules:
        lines.append(f"- {rule}")
    lines.append(f"- {_CLOSING_RULE}")
    lines.append(f"- {_TIMING_RULE}")
    lines.append("")
    lines.append("**Sequence:**")
    for index, step in enumerate(SEQUENCE_ARC, start=1):
        lines.append(f"{index}. {step}")
    return "\n".join(lines)


def build_generation_prompt(transcript: str) -> str:
    return f"Here is the transcript of my sales call. Write the follow-up sequence.\n---\n{transcript}"
