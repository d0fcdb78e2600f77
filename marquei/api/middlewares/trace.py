# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import Callable

from marquei.common.http import HttpRequest, HttpResponse, ok
from marquei.common.trace import new_trace_id

logger = logging.getLogger(__name__)


class TraceMiddleware:
    """每个请求生成一个新的 trace_id（不复用、不持久化）"""

    def __init__(self, id_factory: Callable[[], str] = new_trace_id) -> None:
        self._id_factory = id_factory

    async def handle(self, request: HttpRequest) -> HttpResponse:
        trace_id = self._id_factory()

        # 根路径探活不打日志
        if request.path != "/" or request.method != "GET":
            logger.info(
                "%s %s",
                request.method,
                request.path,
                extra={"method": request.method, "path": request.path, "trace_id": trace_id},
            )

        return ok({"trace_id": trace_id})
