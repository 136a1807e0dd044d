"""Markdown rendering of call notes and email sequences."""

from __future__ import annotations

from typing import List

from .models import ANALYSIS_ROWS, AnalysisRecord, EmailDraft


def _clean_text(value: str) -> str:
    return " ".join(value.split())


def _table_cell(value: str) -> str:
    text = value.strip()
    if not text:
        return "-"
    text = text.replace("|", "\\|")
    return "<br>".join(line.strip() for line in text.splitlines() if line.strip())


def render_analysis(record: AnalysisRecord) -> str:
    lines: List[str] = []
    lines.append("## Call Notes")
    lines.append("")
    for label, attr in ANALYSIS_ROWS:
        value = getattr(record, attr).strip()
        lines.append(f"**{label}**")
        lines.append("")
        lines.extend(value.splitlines() if value else ["-"])
        lines.append("")
    return "\n".join(lines)


def render_analysis_table(record: AnalysisRecord) -> str:
    lines: List[str] = []
    lines.append("| Field | Value |")
    lines.append("| --- | --- |")
    for label, attr in ANALYSIS_ROWS:
        lines.append(f"| {label} | {_table_cell(getattr(record, attr))} |")
    lines.append("")
    return "\n".join(lines)


def render_email(draft: EmailDraft, index: int) -> str:
    lines: List[str] = []
    lines.append(f"### Touch Point #{index}")
    lines.append("")
    lines.append(f"- Send: {_clean_text(draft.recommended_date)}")
    lines.append(f"- Subject: {_clean_text(draft.subject)}")
    if draft.reasoning:
        lines.append(f"- Why: {_clean_text(draft.reasoning)}")
    lines.append("")
    lines.extend(draft.body.strip().splitlines())
    lines.append("")
    return "\n".join(lines)


def render_sequence(drafts: List[EmailDraft]) -> str:
    lines: List[str] = []
    lines.append("## Follow-up Sequence")
    lines.append("")
    lines.append(f"{len(drafts)} touch points")
    lines.append("")
    for index, draft in enumerate(drafts, start=1):
        lines.append(render_email(draft, index))
    return "\n".join(lines)
