import json

import pytest

from callscribe.models import ANALYSIS_FIELDS


class FakeCompletionService:
    """Records every request and answers with canned text or an exception."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.requests = []

    @property
    def calls(self):
        return len(self.requests)

    def invoke(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_service():
    return FakeCompletionService


@pytest.fixture
def analysis_payload():
    return {key: f"value for {key}" for key, _attr in ANALYSIS_FIELDS}


@pytest.fixture
def email_payload():
    return {
        "emails": [
            {
                "subject": f"Subject {i}",
                "body": f"Hey Dana, body {i}?",
                "recommendedDate": f"Day {i * 3}",
            }
            for i in range(1, 7)
        ]
    }


@pytest.fixture
def as_json():
    return lambda payload: json.dumps(payload)
