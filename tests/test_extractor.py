import json

import pytest

from callscribe.errors import (
    ConfigurationError,
    ExtractionConfigurationError,
    ExtractionError,
    ExtractionInputError,
    ExtractionMalformedError,
    ExtractionTransportError,
    MalformedResponseError,
)
from callscribe.extractor import ExtractionClient
from callscribe.prompts import EXTRACTION_INSTRUCTION
from callscribe.schemas import ANALYSIS_SCHEMA


def test_extract_returns_fields_from_response(fake_service, analysis_payload):
    service = fake_service(reply=json.dumps(analysis_payload))
    client = ExtractionClient(service, api_key="key")

    record = client.extract("We have 4 staff and use spreadsheets.")

    assert record.to_payload() == analysis_payload
    assert record.year_round_employees == analysis_payload["yearRoundEmployees"]
    assert record.how_they_found_us == analysis_payload["howTheyFoundUs"]


def test_extract_sends_transcript_instruction_and_schema(fake_service, analysis_payload):
    service = fake_service(reply=json.dumps(analysis_payload))
    ExtractionClient(service, api_key="key").extract("raw transcript")

    request = service.requests[0]
    assert request.contents == "raw transcript"
    assert request.system_instruction == EXTRACTION_INSTRUCTION
    assert request.response_schema is ANALYSIS_SCHEMA
    assert request.response_mime_type == "application/json"


@pytest.mark.parametrize("api_key", [None, ""])
def test_extract_without_key_never_calls_service(fake_service, api_key):
    service = fake_service(reply="{}")
    client = ExtractionClient(service, api_key=api_key)

    with pytest.raises(ExtractionConfigurationError) as info:
        client.extract("transcript")

    assert isinstance(info.value, ConfigurationError)
    assert isinstance(info.value, ExtractionError)
    assert service.calls == 0


@pytest.mark.parametrize("transcript", ["", "   \n\t"])
def test_extract_blank_transcript(fake_service, transcript):
    service = fake_service(reply="{}")
    with pytest.raises(ExtractionInputError):
        ExtractionClient(service, api_key="key").extract(transcript)
    assert service.calls == 0


@pytest.mark.parametrize("reply", ["", "   "])
def test_extract_empty_response(fake_service, reply):
    service = fake_service(reply=reply)
    with pytest.raises(MalformedResponseError):
        ExtractionClient(service, api_key="key").extract("transcript")


def test_extract_invalid_json(fake_service):
    service = fake_service(reply="{not json")
    with pytest.raises(ExtractionMalformedError):
        ExtractionClient(service, api_key="key").extract("transcript")


def test_extract_missing_field_is_not_filled(fake_service, analysis_payload):
    del analysis_payload["notes"]
    service = fake_service(reply=json.dumps(analysis_payload))
    with pytest.raises(ExtractionMalformedError) as info:
        ExtractionClient(service, api_key="key").extract("transcript")
    assert "notes" in str(info.value)


def test_extract_transport_error_is_wrapped(fake_service):
    cause = ConnectionError("quota exceeded")
    service = fake_service(error=cause)
    with pytest.raises(ExtractionTransportError) as info:
        ExtractionClient(service, api_key="key").extract("transcript")
    assert info.value.__cause__ is cause
    assert "quota exceeded" in str(info.value)
    assert service.calls == 1
