"""辅助函数模块"""

import json
import mimetypes
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Any, Optional, Union

# 固定英文月份缩写，不受系统locale影响
_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# mimetypes在部分系统上不认识docx
_EXTRA_MIME_TYPES = {
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".pdf": "application/pdf",
}


def get_mime_type(file_path: Union[str, Path]) -> str:
    """获取文件MIME类型"""
    suffix = Path(file_path).suffix.lower()
    if suffix in _EXTRA_MIME_TYPES:
        return _EXTRA_MIME_TYPES[suffix]
    mime_type, _ = mimetypes.guess_type(str(file_path))
    return mime_type or 'application/octet-stream'


def bytes_to_mb(size_bytes: int) -> float:
    """字节数转换为MB"""
    return size_bytes / (1024 * 1024)


def format_size_mb(size_bytes: int) -> str:
    """格式化文件大小，保留两位小数"""
    return f"{bytes_to_mb(size_bytes):.2f} MB"


def parse_datetime(value: Any) -> Optional[datetime]:
    """解析日期时间(datetime或ISO 8601字符串)"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_datetime(dt: datetime, tz: Optional[tzinfo] = None) -> str:
    """按en-US格式输出短日期时间，如 Jan 5, 2024, 3:45 PM"""
    if tz is not None and dt.tzinfo is not None:
        dt = dt.astimezone(tz)

    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{_MONTH_ABBR[dt.month - 1]} {dt.day}, {dt.year}, {hour}:{dt.minute:02d} {meridiem}"


def safe_json_dumps(obj: Any, default: str = "") -> str:
    """安全的JSON序列化"""
    try:
        return json.dumps(obj, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return default
