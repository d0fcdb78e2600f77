# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import Any, Optional

from marquei.common.logging import mlogger


class BaseService:
    """service 基类：日志统一带上调用方的 trace_id"""

    def __init__(self, logger: logging.Logger = mlogger) -> None:
        self.logger = logger
        self.trace_id: Optional[str] = None

    def log(self, level: int, message: str, **fields: Any) -> None:
        self.logger.log(level, message, extra={"trace_id": self.trace_id, **fields})
