"""测试公共夹具: FastAPI假后端 + 假认证服务"""

import os

# 导入客户端之前关闭文件日志，避免测试写入logs目录
os.environ["LOG_TO_FILE"] = "false"
os.environ.pop("DISPLAY_TIMEZONE", None)

from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi import FastAPI, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse

from recruit_client.integrations.recruitment_api import RecruitmentAPI
from recruit_client.models.resume import DOCX_MIME, PDF_MIME, ResumeFile

TEST_BASE_URL = "http://testserver/api"


class FakeBackend:
    """记录请求并可配置失败响应的假招聘后端"""

    def __init__(self):
        self.jobs: List[Dict[str, Any]] = [
            {"id": 1, "title": "Backend Engineer", "department": "Engineering",
             "description": "APIs", "requirements": "Python"},
            {"id": 2, "title": "Recruiter", "department": None,
             "description": "Hiring", "requirements": "People skills"},
        ]
        self.created: List[Dict[str, Any]] = []
        self.uploads: List[Dict[str, Any]] = []
        self.jobs_failure: Optional[Any] = None
        self.create_failure: Optional[Any] = None
        self.upload_failure: Optional[Any] = None
        self.upload_result: Dict[str, Any] = {
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "score": 92,
            "resume": {
                "parsed_data": {"skills": ["Python", "Math"], "years": 5},
                "uploaded_at": "2024-01-05T15:45:00",
                "file": "https://files.example.com/ada.pdf",
            },
        }

    def build_app(self) -> FastAPI:
        app = FastAPI()

        @app.get("/api/recruitment/jobs/")
        async def list_jobs():
            if self.jobs_failure is not None:
                return self.jobs_failure
            return self.jobs

        @app.post("/api/recruitment/jobs/")
        async def create_job(request: Request):
            body = await request.json()
            self.created.append(body)
            if self.create_failure is not None:
                return self.create_failure
            job = {"id": len(self.jobs) + 1, **body}
            self.jobs.append(job)
            return JSONResponse(job, status_code=201)

        @app.post("/api/recruitment/upload-resume/")
        async def upload_resume(file: UploadFile = File(...), job_id: str = Form(...)):
            content = await file.read()
            self.uploads.append({
                "filename": file.filename,
                "content": content,
                "content_type": file.content_type,
                "job_id": job_id,
            })
            if self.upload_failure is not None:
                return self.upload_failure
            return self.upload_result

        return app


def json_error(payload: Any, status_code: int = 400) -> JSONResponse:
    return JSONResponse(payload, status_code=status_code)


def text_error(text: str, status_code: int = 400) -> PlainTextResponse:
    return PlainTextResponse(text, status_code=status_code)


class FakeAuthProvider:
    """记录调用的假认证服务"""

    def __init__(self, result: Any = "session", error: Optional[BaseException] = None):
        self.result = result
        self.error = error
        self.calls: List[tuple] = []

    async def _respond(self, call: tuple):
        self.calls.append(call)
        if self.error is not None:
            raise self.error
        return self.result

    async def login(self, email: str, password: str):
        return await self._respond(("login", email, password))

    async def signup(self, email: str, password: str):
        return await self._respond(("signup", email, password))

    async def login_with_federated_provider(self):
        return await self._respond(("federated",))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def api(backend) -> RecruitmentAPI:
    transport = httpx.ASGITransport(app=backend.build_app())
    return RecruitmentAPI(base_url=TEST_BASE_URL, token="", transport=transport)


@pytest.fixture
def pdf_file() -> ResumeFile:
    return ResumeFile(filename="ada.pdf", content=b"%PDF-1.4 resume", content_type=PDF_MIME)


@pytest.fixture
def docx_file() -> ResumeFile:
    return ResumeFile(filename="ada.docx", content=b"PK docx resume", content_type=DOCX_MIME)


@pytest.fixture
def text_file() -> ResumeFile:
    return ResumeFile(filename="notes.txt", content=b"plain", content_type="text/plain")


@pytest.fixture
def auth_provider() -> FakeAuthProvider:
    return FakeAuthProvider()
