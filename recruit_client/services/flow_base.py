"""表单流程基类"""

import asyncio
from typing import Callable, Dict, List, Tuple

from ..utils.logger import flow_logger


class FlowBase:
    """表单流程基类，负责宿主回调的注册与触发

    宿主视图消失时调用detach()，进行中的请求仍会完成并更新状态，
    但不再通知宿主。
    """

    EVENTS: Tuple[str, ...] = ("state_change",)

    def __init__(self):
        self.callbacks: Dict[str, List[Callable]] = {event: [] for event in self.EVENTS}

    def add_callback(self, event: str, callback: Callable):
        """添加回调函数"""
        if event not in self.callbacks:
            flow_logger.warning(f"{type(self).__name__} 不支持的回调事件: {event}")
            return
        self.callbacks[event].append(callback)

    def detach(self):
        """移除全部回调"""
        for callbacks in self.callbacks.values():
            callbacks.clear()

    async def _trigger_callback(self, event: str, *args, **kwargs):
        """触发回调函数"""
        for callback in list(self.callbacks.get(event, [])):
            try:
                if asyncio.iscoroutinefunction(callback):
                    await callback(*args, **kwargs)
                else:
                    callback(*args, **kwargs)
            except Exception as e:
                flow_logger.error(f"回调函数执行失败: {event} - {str(e)}")
