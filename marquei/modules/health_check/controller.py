# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Callable

from marquei.common.http import HttpRequest, HttpResponse, get_http_error, ok
from marquei.modules.health_check.service import HealthCheckService


class HealthCheckController:
    def __init__(self, service_factory: Callable[[], HealthCheckService]) -> None:
        self._service_factory = service_factory

    async def handle(self, request: HttpRequest) -> HttpResponse:
        ctx = request.context
        client = ctx.client
        try:
            content = await self._service_factory().run(
                trace_id=ctx.trace_id,
                client_id=getattr(client, "id", None),
            )
            return ok({"content": content})
        except Exception as e:  # noqa: BLE001
            return get_http_error(e)
