"""招聘后端API集成模块"""

from typing import Any, Dict, List, Optional

import httpx
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from ..utils.config import get_settings
from ..utils.logger import api_logger
from ..models.job import Job, JobCreate, JobId
from ..models.resume import ResumeFile

settings = get_settings()


class RecruitmentAPIError(Exception):
    """招聘后端API异常

    status_code和payload在HTTP错误时来自响应；网络错误时均为None。
    """

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


def _is_network_error(exc: BaseException) -> bool:
    return isinstance(exc, RecruitmentAPIError) and exc.status_code is None


def _decode_payload(response: httpx.Response) -> Any:
    """解析响应体，优先JSON，否则返回文本"""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class RecruitmentAPI:
    """招聘后端API客户端"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url or settings.api.base_url
        self.token = token if token is not None else settings.api.token
        self.timeout = timeout if timeout is not None else settings.api.timeout
        self.jobs_path = settings.api.jobs_path
        self.upload_path = settings.api.upload_path

        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=headers,
            transport=transport
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.client.aclose()

    async def _make_request(self, method: str, url: str, **kwargs) -> Any:
        """发送API请求"""
        try:
            response = await self.client.request(method, url, **kwargs)
            response.raise_for_status()
            return _decode_payload(response)

        except httpx.HTTPStatusError as e:
            payload = _decode_payload(e.response)
            api_logger.error(f"招聘API HTTP错误: {method} {url} - {e.response.status_code} - {payload!r}")
            raise RecruitmentAPIError(
                f"HTTP错误: {e.response.status_code}",
                status_code=e.response.status_code,
                payload=payload
            ) from e
        except httpx.RequestError as e:
            api_logger.error(f"招聘API请求错误: {method} {url} - {str(e)}")
            raise RecruitmentAPIError(f"网络请求失败: {str(e)}") from e

    @retry(
        retry=retry_if_exception(_is_network_error),
        stop=stop_after_attempt(settings.api.max_retries),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True
    )
    async def list_jobs(self) -> List[Job]:
        """获取岗位列表(只读请求，网络错误时重试)"""
        data = await self._make_request("GET", self.jobs_path)
        jobs = [Job.model_validate(item) for item in data or []]

        api_logger.info(f"岗位列表获取成功，共{len(jobs)}个岗位")

        return jobs

    async def create_job(self, job_data: JobCreate) -> Job:
        """创建岗位"""
        data = await self._make_request("POST", self.jobs_path, json=job_data.model_dump())
        job = Job.model_validate(data)

        api_logger.info(f"岗位创建成功: {job.title} (ID: {job.id})")

        return job

    async def upload_resume(self, resume_file: ResumeFile, job_id: JobId) -> Any:
        """上传简历并触发解析评分"""
        files = {"file": (resume_file.filename, resume_file.content, resume_file.content_type)}
        data: Dict[str, str] = {"job_id": str(job_id)}

        result = await self._make_request("POST", self.upload_path, files=files, data=data)

        api_logger.info(f"简历上传成功: {resume_file.filename} -> 岗位 {job_id}")

        return result

    async def close(self):
        """关闭客户端"""
        await self.client.aclose()


# 全局API实例
_recruitment_api_instance = None


def get_recruitment_api() -> RecruitmentAPI:
    """获取招聘API实例"""
    global _recruitment_api_instance
    if _recruitment_api_instance is None:
        _recruitment_api_instance = RecruitmentAPI()
    return _recruitment_api_instance


async def close_recruitment_api():
    """关闭招聘API实例"""
    global _recruitment_api_instance
    if _recruitment_api_instance:
        await _recruitment_api_instance.close()
        _recruitment_api_instance = None
