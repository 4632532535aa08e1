import asyncio

import pytest

from recruit_client.core.error_messages import RESUME_UPLOAD_FALLBACK
from recruit_client.models.resume import SubmissionStatus
from recruit_client.services.resume_submission import (
    MISSING_INPUT_MESSAGE,
    UPLOAD_SUCCESS_MESSAGE,
    ResumeSubmissionFlow,
)

from conftest import json_error


@pytest.fixture
def flow(api):
    flow = ResumeSubmissionFlow(api=api)
    asyncio.run(flow.load_jobs())
    return flow


def test_load_jobs_and_options(flow):
    assert flow.job_options() == [
        (1, "Backend Engineer - Engineering"),
        (2, "Recruiter - General"),
    ]
    assert flow.status == SubmissionStatus.EMPTY
    assert flow.submit_label == "Upload & Assess"


def test_load_jobs_failure_leaves_empty_list(api, backend):
    backend.jobs_failure = json_error({"detail": "down"}, status_code=500)
    flow = ResumeSubmissionFlow(api=api)

    assert asyncio.run(flow.load_jobs()) == []
    assert flow.jobs == []


def test_select_job_accepts_string_id(flow):
    flow.select_job("2")

    assert flow.selected_job_id == 2


def test_select_unknown_job(flow):
    with pytest.raises(ValueError):
        flow.select_job(99)

    flow.select_job(1)
    flow.select_job("")
    assert flow.selected_job_id is None


def test_attach_keeps_first_allowed_file(flow, docx_file, pdf_file, text_file):
    assert flow.attach_file([text_file, docx_file, pdf_file]) is docx_file
    assert flow.file is docx_file
    assert flow.status == SubmissionStatus.SELECTED

    assert flow.attach_file(pdf_file) is pdf_file
    assert flow.file is pdf_file


def test_attach_rejected_file_changes_nothing(flow, pdf_file, text_file):
    flow.attach_file(pdf_file)

    assert flow.attach_file([text_file]) is None
    assert flow.file is pdf_file


def test_submit_without_file_or_job(flow, backend, pdf_file):
    result = asyncio.run(flow.submit())

    assert result.is_error
    assert result.message == MISSING_INPUT_MESSAGE

    flow.attach_file(pdf_file)
    asyncio.run(flow.submit())

    assert flow.result.message == MISSING_INPUT_MESSAGE
    assert flow.file is pdf_file
    assert backend.uploads == []


def test_submit_success_resets_inputs(flow, backend, pdf_file):
    events = []
    flow.add_callback("state_change", lambda f: events.append(f.status))
    flow.select_job(1)
    flow.attach_file(pdf_file)
    assert flow.can_submit

    result = asyncio.run(flow.submit())

    assert result.is_success
    assert result.message == UPLOAD_SUCCESS_MESSAGE
    assert result.payload["name"] == "Ada Lovelace"
    assert result.as_status() == {"type": "success", "message": UPLOAD_SUCCESS_MESSAGE}
    assert flow.file is None
    assert flow.selected_job_id is None
    assert flow.status == SubmissionStatus.SUCCESS
    assert events == [SubmissionStatus.SUBMITTING, SubmissionStatus.SUCCESS]
    assert len(backend.uploads) == 1
    assert backend.uploads[0]["job_id"] == "1"


def test_submit_error_keeps_file_for_retry(flow, backend, pdf_file):
    backend.upload_failure = json_error({"message": "Could not parse resume"})
    flow.select_job(2)
    flow.attach_file(pdf_file)

    result = asyncio.run(flow.submit())

    assert result.is_error
    assert result.message == "Could not parse resume"
    assert flow.file is pdf_file
    assert flow.selected_job_id == 2
    assert flow.status == SubmissionStatus.ERROR
    assert flow.can_submit


def test_submit_error_without_message_uses_fallback(flow, backend, pdf_file):
    backend.upload_failure = json_error({"detail": "x"}, status_code=500)
    flow.select_job(2)
    flow.attach_file(pdf_file)

    assert asyncio.run(flow.submit()).message == RESUME_UPLOAD_FALLBACK


def test_new_file_clears_previous_status(flow, backend, pdf_file, docx_file):
    backend.upload_failure = json_error({"message": "bad"})
    flow.select_job(1)
    flow.attach_file(pdf_file)
    asyncio.run(flow.submit())

    flow.attach_file(docx_file)

    assert flow.result.as_status() is None
    assert flow.status == SubmissionStatus.SELECTED


def test_remove_file(flow, pdf_file):
    flow.attach_file(pdf_file)
    flow.remove_file()

    assert flow.file is None
    assert flow.status == SubmissionStatus.EMPTY


def test_submit_while_busy_is_ignored(flow, backend, pdf_file, docx_file):
    flow.select_job(1)
    flow.attach_file(pdf_file)
    flow.result.start()

    assert flow.submit_label == "Analyzing..."
    assert not flow.can_submit

    asyncio.run(flow.submit())
    flow.attach_file(docx_file)

    assert backend.uploads == []
    assert flow.busy
    assert flow.status == SubmissionStatus.SUBMITTING


def test_detached_host_is_not_notified(flow, pdf_file):
    events = []
    flow.add_callback("state_change", events.append)
    flow.detach()
    flow.select_job(1)
    flow.attach_file(pdf_file)

    assert asyncio.run(flow.submit()).is_success
    assert events == []


class SlowUploadAPI:
    """上传需要一段时间才返回的假客户端"""

    def __init__(self):
        self.uploads = []

    async def upload_resume(self, resume_file, job_id):
        self.uploads.append((resume_file.filename, job_id))
        await asyncio.sleep(0.05)
        return {"name": "Ada Lovelace"}


def test_remove_file_while_uploading_keeps_flow_busy(pdf_file, docx_file):
    api = SlowUploadAPI()
    flow = ResumeSubmissionFlow(api=api)
    flow.select_job(1)
    flow.attach_file(pdf_file)

    async def scenario():
        first = asyncio.create_task(flow.submit())
        await asyncio.sleep(0.01)

        flow.remove_file()
        assert flow.file is None
        assert flow.busy
        assert flow.status == SubmissionStatus.SUBMITTING

        flow.attach_file(docx_file)
        await flow.submit()
        assert flow.busy

        return await first

    result = asyncio.run(scenario())

    assert api.uploads == [("ada.pdf", 1)]
    assert result.is_success
    assert not flow.busy
