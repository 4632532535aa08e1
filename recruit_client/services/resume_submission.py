"""简历上传流程"""

from typing import Any, Iterable, List, Optional, Tuple, Union

from ..core.error_messages import (
    RESUME_UPLOAD_EXTRACTORS,
    RESUME_UPLOAD_FALLBACK,
    extract_error_message,
)
from ..core.result_state import FlowStatus, ResultState
from ..integrations.recruitment_api import RecruitmentAPI, RecruitmentAPIError, get_recruitment_api
from ..models.job import Job, JobId
from ..models.resume import ResumeFile, SubmissionStatus
from ..utils.logger import flow_logger
from .flow_base import FlowBase

MISSING_INPUT_MESSAGE = "Please select a file and job role"
UPLOAD_SUCCESS_MESSAGE = "Resume uploaded and processed successfully!"


class ResumeSubmissionFlow(FlowBase):
    """简历上传流程

    状态: empty -> selected -> submitting -> success / error。
    成功后清空文件和岗位选择；失败时保留文件，方便直接重试。
    """

    def __init__(self, api: Optional[RecruitmentAPI] = None):
        super().__init__()
        self.api = api or get_recruitment_api()

        self.jobs: List[Job] = []
        self.selected_job_id: Optional[JobId] = None
        self.file: Optional[ResumeFile] = None
        self.result: ResultState[Any] = ResultState()

    @property
    def status(self) -> SubmissionStatus:
        if self.result.status == FlowStatus.BUSY:
            return SubmissionStatus.SUBMITTING
        if self.result.status == FlowStatus.SUCCESS:
            return SubmissionStatus.SUCCESS
        if self.result.status == FlowStatus.ERROR:
            return SubmissionStatus.ERROR
        if self.file is not None:
            return SubmissionStatus.SELECTED
        return SubmissionStatus.EMPTY

    @property
    def busy(self) -> bool:
        return self.result.busy

    @property
    def can_submit(self) -> bool:
        return not self.busy and self.file is not None and self._has_job()

    @property
    def submit_label(self) -> str:
        return "Analyzing..." if self.busy else "Upload & Assess"

    def _has_job(self) -> bool:
        return self.selected_job_id not in (None, "")

    async def load_jobs(self) -> List[Job]:
        """加载可选岗位列表，失败时保持空列表"""
        try:
            self.jobs = await self.api.list_jobs()
        except Exception as e:
            flow_logger.error(f"获取岗位列表失败: {str(e)}")
            self.jobs = []
        return self.jobs

    def job_options(self) -> List[Tuple[JobId, str]]:
        """岗位下拉选项 (id, 展示文本)"""
        return [(job.id, job.display_label) for job in self.jobs]

    def select_job(self, job_id: Optional[JobId]):
        """选择岗位；已加载岗位列表时只能选择其中的岗位"""
        if job_id in (None, ""):
            self.selected_job_id = None
            return

        if self.jobs:
            match = next((job for job in self.jobs if str(job.id) == str(job_id)), None)
            if match is None:
                raise ValueError(f"岗位不存在: {job_id}")
            job_id = match.id

        self.selected_job_id = job_id

    def attach_file(self, files: Union[ResumeFile, Iterable[ResumeFile]]) -> Optional[ResumeFile]:
        """选择简历文件，只保留第一个符合类型要求的文件"""
        if isinstance(files, ResumeFile):
            files = [files]

        accepted = []
        for resume_file in files:
            if resume_file.is_allowed_type:
                accepted.append(resume_file)
            else:
                flow_logger.warning(f"不支持的文件类型，已忽略: {resume_file.filename} ({resume_file.content_type})")

        if not accepted:
            return None

        self.file = accepted[0]
        if not self.busy:
            self.result.reset()

        flow_logger.info(f"已选择简历文件: {self.file.filename} ({self.file.size_label})")

        return self.file

    def remove_file(self):
        """移除已选择的文件并清除提示；上传中只移除文件，保持忙碌状态"""
        self.file = None
        if not self.busy:
            self.result.reset()

    async def submit(self) -> ResultState[Any]:
        """上传简历"""
        if self.busy:
            flow_logger.warning("简历正在上传中，忽略重复提交")
            return self.result

        if self.file is None or not self._has_job():
            self.result.fail(MISSING_INPUT_MESSAGE)
            await self._trigger_callback("state_change", self)
            return self.result

        resume_file = self.file
        job_id = self.selected_job_id

        self.result.start()
        await self._trigger_callback("state_change", self)

        try:
            payload = await self.api.upload_resume(resume_file, job_id)
        except RecruitmentAPIError as e:
            flow_logger.error(f"简历上传失败: {resume_file.filename} - {e.message}")
            self.result.fail(extract_error_message(e.payload, RESUME_UPLOAD_EXTRACTORS, RESUME_UPLOAD_FALLBACK))
        except Exception as e:
            flow_logger.error(f"简历上传异常: {resume_file.filename} - {str(e)}")
            self.result.fail(RESUME_UPLOAD_FALLBACK)
        else:
            self.result.succeed(UPLOAD_SUCCESS_MESSAGE, payload)
            self.file = None
            self.selected_job_id = None
            flow_logger.info(f"简历上传并解析完成: {resume_file.filename} -> 岗位 {job_id}")

        await self._trigger_callback("state_change", self)
        return self.result
