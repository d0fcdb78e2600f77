# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""日志初始化 + 项目统一 logger

setup_logging() 只在进程入口 / app 工厂调用一次；业务代码直接用 mlogger 或
logging.getLogger(__name__)，trace_id 由 TraceIdFilter 补齐。
"""

from __future__ import annotations

import logging
from typing import Union

from marquei.common.trace import current_trace_id

LOG_FORMAT = "[%(asctime)s - %(levelname)s - trace=%(trace_id)s - %(name)s - %(message)s]"

mlogger = logging.getLogger("marquei")


class TraceIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        # 调用方通过 extra 显式传入的 trace_id 优先
        if not getattr(record, "trace_id", None):
            setattr(record, "trace_id", current_trace_id())
        return True


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    root = logging.getLogger()
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)

    for h in root.handlers:
        if not any(isinstance(f, TraceIdFilter) for f in h.filters):
            h.addFilter(TraceIdFilter())
