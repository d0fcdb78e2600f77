# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""请求/响应信封 + 纯函数响应工具

约定：
- middleware / controller 的契约统一为 handle(HttpRequest) -> HttpResponse
- 2xx 视为成功，其余一律按错误信封 {message, code} 输出
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

from marquei.common.context import RequestContext
from marquei.common.errors import AppError


@dataclass
class HttpRequest:
    data: Dict[str, Any] = field(default_factory=dict)
    method: str = "GET"
    path: str = "/"
    context: RequestContext = field(default_factory=RequestContext)


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: Any = None
    code: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299


class Handler(Protocol):
    async def handle(self, request: HttpRequest) -> HttpResponse:
        ...


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=data)


def created(data: Any) -> HttpResponse:
    return HttpResponse(status_code=201, body=data)


def no_content() -> HttpResponse:
    return HttpResponse(status_code=204)


def get_http_error(error: BaseException) -> HttpResponse:
    """异常 -> 错误信封；没有可识别状态码的一律按 500 处理"""
    status_code = getattr(error, "status_code", None)
    if not isinstance(status_code, int) or status_code <= 0:
        status_code = 500
    return HttpResponse(status_code=status_code, body=error, code=getattr(error, "code", None))


def error_payload(response: HttpResponse) -> Dict[str, Any]:
    body = response.body
    if isinstance(body, AppError):
        message: Any = body.message
    elif isinstance(body, BaseException):
        message = str(body)
    else:
        message = body
    return {"message": message, "code": response.code}


class PipelineHalted(Exception):
    """middleware 返回非 2xx 时抛出，由全局 handler 按 {message, code} 输出"""

    def __init__(self, response: HttpResponse) -> None:
        super().__init__(response.status_code)
        self.response = response
