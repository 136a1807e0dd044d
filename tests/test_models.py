import pytest

from callscribe.models import (
    ANALYSIS_FIELDS,
    ANALYSIS_ROWS,
    AnalysisRecord,
    EmailDraft,
    GenerationSettings,
)


def test_analysis_fields_cover_record():
    assert len(ANALYSIS_FIELDS) == 15
    assert [attr for _key, attr in ANALYSIS_FIELDS] == [attr for _label, attr in ANALYSIS_ROWS]


def test_from_payload_accepts_empty_strings(analysis_payload):
    analysis_payload["objections"] = ""
    record = AnalysisRecord.from_payload(analysis_payload)
    assert record.objections == ""
    assert record.to_payload() == analysis_payload


def test_from_payload_ignores_extra_keys(analysis_payload):
    analysis_payload["extra"] = "ignored"
    record = AnalysisRecord.from_payload(analysis_payload)
    assert "extra" not in record.to_payload()


def test_from_payload_rejects_missing_field(analysis_payload):
    del analysis_payload["howTheyFoundUs"]
    with pytest.raises(ValueError, match="howTheyFoundUs"):
        AnalysisRecord.from_payload(analysis_payload)


def test_from_payload_rejects_null(analysis_payload):
    analysis_payload["notes"] = None
    with pytest.raises(ValueError):
        AnalysisRecord.from_payload(analysis_payload)


def test_from_payload_rejects_non_object():
    with pytest.raises(ValueError):
        AnalysisRecord.from_payload(["not", "an", "object"])


def test_email_draft_reasoning_optional():
    draft = EmailDraft.from_payload(
        {"subject": "Hi", "body": "Quick one?", "recommendedDate": "Tomorrow"}
    )
    assert draft.reasoning is None
    assert draft.to_payload() == {
        "subject": "Hi",
        "body": "Quick one?",
        "recommendedDate": "Tomorrow",
    }


def test_email_draft_requires_reasoning_when_asked():
    with pytest.raises(ValueError):
        EmailDraft.from_payload(
            {"subject": "Hi", "body": "Quick one?", "recommendedDate": "Tomorrow"},
            require_reasoning=True,
        )


def test_email_draft_rejects_missing_subject():
    with pytest.raises(ValueError):
        EmailDraft.from_payload({"body": "Quick one?", "recommendedDate": "Tomorrow"})


def test_settings_defaults():
    settings = GenerationSettings()
    assert settings.to_dict() == {
        "tone": "casual",
        "brevity": "brief",
        "directness": "polite",
        "emojis": "none",
        "focus": "value",
        "urgency": "patient",
    }


def test_settings_reject_unknown_value():
    with pytest.raises(ValueError):
        GenerationSettings(tone="sarcastic")


def test_settings_from_dict_fills_defaults():
    settings = GenerationSettings.from_dict({"tone": "formal"})
    assert settings.tone == "formal"
    assert settings.brevity == "brief"


def test_settings_from_dict_rejects_unknown_key():
    with pytest.raises(ValueError):
        GenerationSettings.from_dict({"volume": "loud"})


def test_settings_replace_keeps_other_values():
    settings = GenerationSettings().replace(urgency="urgent")
    assert settings.urgency == "urgent"
    assert settings.tone == "casual"
