import pytest

from recruit_client.core.error_messages import (
    JOB_CREATION_EXTRACTORS,
    JOB_CREATION_FALLBACK,
    RESUME_UPLOAD_EXTRACTORS,
    RESUME_UPLOAD_FALLBACK,
    exception_message,
    extract_error_message,
)
from recruit_client.integrations.auth_provider import AuthProviderError


def job_error(payload):
    return extract_error_message(payload, JOB_CREATION_EXTRACTORS, JOB_CREATION_FALLBACK)


def upload_error(payload):
    return extract_error_message(payload, RESUME_UPLOAD_EXTRACTORS, RESUME_UPLOAD_FALLBACK)


@pytest.mark.parametrize("payload, expected", [
    ("title required", "title required"),
    ({"detail": "x"}, "x"),
    ({"message": "bad request"}, "bad request"),
    ({"error": "boom"}, "boom"),
    ({"detail": "first", "message": "second"}, "first"),
    ({"detail": "", "error": "boom"}, "boom"),
    ({}, JOB_CREATION_FALLBACK),
    (None, JOB_CREATION_FALLBACK),
    ("", JOB_CREATION_FALLBACK),
])
def test_job_creation_chain(payload, expected):
    assert job_error(payload) == expected


def test_job_creation_serializes_unrecognized_payload():
    assert job_error({"title": ["This field is required."]}) == '{"title": ["This field is required."]}'
    assert job_error([1, 2]) == "[1, 2]"


def test_job_creation_serializes_structured_detail():
    message = job_error({"detail": [{"loc": ["body", "title"], "msg": "field required"}]})

    assert message.startswith("[")
    assert "field required" in message


@pytest.mark.parametrize("payload, expected", [
    ({"message": "Unsupported file"}, "Unsupported file"),
    ({"detail": "x"}, RESUME_UPLOAD_FALLBACK),
    ("plain text", RESUME_UPLOAD_FALLBACK),
    ({}, RESUME_UPLOAD_FALLBACK),
    (None, RESUME_UPLOAD_FALLBACK),
])
def test_resume_upload_chain(payload, expected):
    assert upload_error(payload) == expected


def test_exception_message():
    assert exception_message(AuthProviderError("Invalid login credentials")) == "Invalid login credentials"
    assert exception_message(AuthProviderError()) is None
    assert exception_message(RuntimeError("network down")) == "network down"
    assert exception_message(RuntimeError()) is None
