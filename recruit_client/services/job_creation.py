"""岗位创建流程"""

from typing import Optional

from ..core.error_messages import (
    JOB_CREATION_EXTRACTORS,
    JOB_CREATION_FALLBACK,
    extract_error_message,
)
from ..core.result_state import ResultState
from ..integrations.recruitment_api import RecruitmentAPI, RecruitmentAPIError, get_recruitment_api
from ..models.job import Job, JobCreate
from ..utils.logger import flow_logger
from .flow_base import FlowBase


class JobCreationFlow(FlowBase):
    """岗位创建流程

    回调事件:
        job_added(job): 后端返回新岗位
        close(): 通知宿主关闭表单
        state_change(flow): 状态变化
    """

    EVENTS = ("job_added", "close", "state_change")

    def __init__(self, api: Optional[RecruitmentAPI] = None):
        super().__init__()
        self.api = api or get_recruitment_api()

        self.is_open = False
        self.title = ""
        self.description = ""
        self.requirements = ""
        self.result: ResultState[Job] = ResultState()

    @property
    def busy(self) -> bool:
        return self.result.busy

    @property
    def error(self) -> Optional[str]:
        return self.result.message if self.result.is_error else None

    @property
    def submit_label(self) -> str:
        return "Publishing..." if self.busy else "Create Job Post"

    def _clear_fields(self):
        self.title = ""
        self.description = ""
        self.requirements = ""

    def open(self):
        """打开表单，清空上一次的输入和错误"""
        self._clear_fields()
        self.result.reset()
        self.is_open = True

    async def close(self):
        """关闭表单并通知宿主"""
        self.is_open = False
        await self._trigger_callback("close")

    async def submit(self) -> ResultState[Job]:
        """提交岗位

        必填字段为空时由JobCreate抛出pydantic.ValidationError，不会发起请求。
        """
        if self.busy:
            flow_logger.warning("岗位正在提交中，忽略重复提交")
            return self.result

        self.result.reset()

        job_data = JobCreate(
            title=self.title,
            description=self.description,
            requirements=self.requirements
        )

        self.result.start()
        await self._trigger_callback("state_change", self)

        try:
            job = await self.api.create_job(job_data)
        except RecruitmentAPIError as e:
            flow_logger.error(f"岗位创建失败: {e.message} - 响应数据: {e.payload!r}")
            self.result.fail(extract_error_message(e.payload, JOB_CREATION_EXTRACTORS, JOB_CREATION_FALLBACK))
            await self._trigger_callback("state_change", self)
            return self.result
        except Exception as e:
            flow_logger.error(f"岗位创建异常: {str(e)}")
            self.result.fail(JOB_CREATION_FALLBACK)
            await self._trigger_callback("state_change", self)
            return self.result

        self.result.succeed(payload=job)
        await self._trigger_callback("job_added", job)
        await self.close()
        self._clear_fields()
        await self._trigger_callback("state_change", self)

        return self.result
