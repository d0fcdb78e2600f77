# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""trace_id 的生成与日志侧绑定

trace_id 以 RequestContext 为准；这里的 ContextVar 只是它在日志侧的镜像，
管线把 middleware 结果合并进上下文后绑定，请求结束时还原。
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from typing import Optional

from marquei.common.context import RequestContext

UNTRACED = "-"

_bound_trace_id: ContextVar[Optional[str]] = ContextVar("marquei_trace_id", default=None)


def new_trace_id() -> str:
    return uuid.uuid4().hex


def bind_trace_id(context: RequestContext) -> Optional[Token]:
    """上下文里已有 trace_id 时绑定到当前执行上下文，返回用于还原的 token"""
    if not context.trace_id:
        return None
    return _bound_trace_id.set(context.trace_id)


def unbind_trace_id(token: Optional[Token]) -> None:
    if token is not None:
        _bound_trace_id.reset(token)


def current_trace_id() -> str:
    return _bound_trace_id.get() or UNTRACED
