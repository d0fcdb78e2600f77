# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""把 handle(HttpRequest) -> HttpResponse 适配到 FastAPI / Starlette

- adapt_middleware: 生成路由级依赖；2xx 时把 body 中值为真的条目合并进 RequestContext 并继续，
  否则中断请求并输出 {message, code}
- PipelineMiddleware: 全局（路由之前）执行的 middleware，语义同上
- adapt_route: 生成 endpoint；2xx 直接输出 body，否则输出 {message, code}
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict

from fastapi.encoders import jsonable_encoder
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from marquei.common.context import RequestContext, get_request_context
from marquei.common.errors import BadRequestError
from marquei.common.http import Handler, HttpRequest, HttpResponse, PipelineHalted, error_payload
from marquei.common.obfuscate import obfuscate_fields
from marquei.common.trace import bind_trace_id, unbind_trace_id

logger = logging.getLogger(__name__)

TRACE_HEADER = "X-Trace-Id"


async def read_json_body(request: Request) -> Any:
    """只解析 JSON 请求体；空 body 或非 JSON content-type 视为 {}"""
    content_type = request.headers.get("content-type", "")
    if "json" not in content_type:
        return {}
    raw = await request.body()
    if not raw:
        return {}
    try:
        return await request.json()
    except ValueError as e:
        raise BadRequestError("invalid JSON body") from e


def build_middleware_request(request: Request, body: Any) -> HttpRequest:
    headers: Dict[str, Any] = dict(request.headers)
    data: Dict[str, Any] = {
        "access_token": headers.get("x-access-token"),
        **headers,
        "body": body if body is not None else {},
        "params": dict(request.path_params),
        "query": dict(request.query_params),
    }
    return HttpRequest(
        data=data,
        method=request.method,
        path=request.url.path,
        context=get_request_context(request),
    )


def build_route_request(request: Request, body: Any) -> HttpRequest:
    data: Dict[str, Any] = {}
    if isinstance(body, dict):
        data.update(body)
    data.update(request.path_params)
    data.update(request.query_params)
    return HttpRequest(
        data=data,
        method=request.method,
        path=request.url.path,
        context=get_request_context(request),
    )


def render_error(response: HttpResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=jsonable_encoder(error_payload(response)))


def apply_to_context(context: RequestContext, response: HttpResponse) -> None:
    if isinstance(response.body, dict):
        context.merge(response.body)


async def _run(middleware: Handler, request: HttpRequest) -> HttpResponse:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s <- %s", type(middleware).__name__, obfuscate_fields(request.data))
    return await middleware.handle(request)


def adapt_middleware(middleware: Handler) -> Callable[[Request], Awaitable[None]]:
    async def dependency(request: Request) -> None:
        body = await read_json_body(request)
        response = await _run(middleware, build_middleware_request(request, body))
        if not response.is_success:
            raise PipelineHalted(response)
        context = get_request_context(request)
        apply_to_context(context, response)
        # 每个请求有自己的执行上下文，无需还原
        bind_trace_id(context)

    dependency.__name__ = f"{type(middleware).__name__}_dependency"
    return dependency


class PipelineMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, middleware: Handler) -> None:
        super().__init__(app)
        self._middleware = middleware

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await _run(self._middleware, build_middleware_request(request, {}))
        if not response.is_success:
            return render_error(response)

        context = get_request_context(request)
        apply_to_context(context, response)

        token = bind_trace_id(context)
        try:
            http_response = await call_next(request)
        finally:
            unbind_trace_id(token)
        if context.trace_id:
            http_response.headers[TRACE_HEADER] = context.trace_id
        return http_response


def adapt_route(controller: Handler) -> Callable[[Request], Awaitable[Response]]:
    async def endpoint(request: Request) -> Response:
        body = await read_json_body(request)
        response = await controller.handle(build_route_request(request, body))
        if not response.is_success:
            return render_error(response)
        if response.status_code == 204 or response.body is None:
            return Response(status_code=response.status_code)
        return JSONResponse(status_code=response.status_code, content=jsonable_encoder(response.body))

    endpoint.__name__ = f"{type(controller).__name__}_endpoint"
    return endpoint
