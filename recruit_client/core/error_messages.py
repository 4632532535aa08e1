"""错误消息提取

后端返回的错误载荷形状不固定，按顺序尝试一组提取函数，
第一个返回非空字符串的结果生效，全部落空时使用兜底文案。
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional, Sequence

from ..utils.helpers import safe_json_dumps
from ..utils.logger import app_logger

Extractor = Callable[[Any], Optional[str]]

JOB_CREATION_FALLBACK = "Failed to create job"
RESUME_UPLOAD_FALLBACK = "Upload failed. Please try again."


def string_payload(payload: Any) -> Optional[str]:
    """载荷本身就是字符串时原样使用"""
    if isinstance(payload, str) and payload:
        return payload
    return None


def field(name: str) -> Extractor:
    """读取载荷中的指定字段"""

    def extract(payload: Any) -> Optional[str]:
        if not isinstance(payload, Mapping):
            return None
        value = payload.get(name)
        if not value:
            return None
        if isinstance(value, str):
            return value
        return safe_json_dumps(value) or None

    extract.__name__ = f"field_{name}"
    return extract


def serialized_payload(payload: Any) -> Optional[str]:
    """最后手段：序列化整个载荷(空载荷不参与)"""
    if not payload:
        return None
    return safe_json_dumps(payload) or None


JOB_CREATION_EXTRACTORS: Sequence[Extractor] = (
    string_payload,
    field("detail"),
    field("message"),
    field("error"),
    serialized_payload,
)

RESUME_UPLOAD_EXTRACTORS: Sequence[Extractor] = (
    field("message"),
)


def extract_error_message(payload: Any, extractors: Sequence[Extractor], fallback: str) -> str:
    """按顺序提取错误消息"""
    for extractor in extractors:
        message = extractor(payload)
        if message:
            return message

    if payload:
        app_logger.warning(f"无法识别的错误载荷，使用兜底文案: {payload!r}")
    return fallback


def exception_message(exc: BaseException) -> Optional[str]:
    """读取异常携带的可读消息"""
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or None
