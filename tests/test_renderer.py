from callscribe.models import ANALYSIS_FIELDS, AnalysisRecord, EmailDraft
from callscribe.renderer import (
    render_analysis,
    render_analysis_table,
    render_email,
    render_sequence,
)


def _record(**overrides):
    values = {attr: "" for _key, attr in ANALYSIS_FIELDS}
    values.update(overrides)
    return AnalysisRecord(**values)


def test_render_analysis_includes_labels_and_bullets():
    record = _record(
        estimated_revenue="450000",
        pain_points="- Chasing documents\n- Manual invoices",
        likelihood_to_close="7/10",
    )
    note = render_analysis(record)
    assert "## Call Notes" in note
    assert "**Estimated revenue per year**\n\n450000" in note
    assert "- Chasing documents\n- Manual invoices" in note
    assert "**Likelihood to close**\n\n7/10" in note
    assert "**Objections**\n\n-" in note


def test_render_analysis_table_escapes_cells():
    record = _record(current_software="- Excel | billing\n- Gmail")
    table = render_analysis_table(record)
    assert "| Field | Value |" in table
    assert "| Current software used and purpose | - Excel \\| billing<br>- Gmail |" in table
    assert "| Decision maker | - |" in table


def test_render_email_with_reasoning():
    draft = EmailDraft(
        subject="Quick recap",
        body="Hey Dana,\nDid I get that right?",
        recommended_date="Tomorrow morning",
        reasoning="Confirms the pain points.",
    )
    text = render_email(draft, 1)
    assert text.startswith("### Touch Point #1")
    assert "- Send: Tomorrow morning" in text
    assert "- Subject: Quick recap" in text
    assert "- Why: Confirms the pain points." in text
    assert "Hey Dana,\nDid I get that right?" in text


def test_render_sequence_numbers_in_order():
    drafts = [
        EmailDraft(subject=f"S{i}", body=f"B{i}?", recommended_date=f"Day {i}")
        for i in range(1, 7)
    ]
    text = render_sequence(drafts)
    assert "6 touch points" in text
    positions = [text.index(f"### Touch Point #{i}") for i in range(1, 7)]
    assert positions == sorted(positions)
    assert "- Why:" not in text
