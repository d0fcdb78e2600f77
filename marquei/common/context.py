# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""请求级上下文（locals）

每个请求独占一个 RequestContext，挂在 Starlette 的 scope state 上，
不同请求之间不会共享；middleware 成功后把结果合并进来，controller 读取。
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from starlette.requests import HTTPConnection

_STATE_KEY = "context"


class RequestContext:
    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(values or {})

    @property
    def trace_id(self) -> Optional[str]:
        return self._values.get("trace_id")

    @property
    def client(self) -> Any:
        return self._values.get("client")

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def merge(self, entries: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]) -> None:
        """合并 middleware 结果，值为假（None / "" / 0 / 空容器）的条目直接丢弃"""
        items = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in items:
            if value:
                self._values[key] = value

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __repr__(self) -> str:
        return f"RequestContext({self._values!r})"


def get_request_context(conn: HTTPConnection) -> RequestContext:
    """取当前请求的上下文，不存在则创建"""
    ctx = getattr(conn.state, _STATE_KEY, None)
    if ctx is None:
        ctx = RequestContext()
        setattr(conn.state, _STATE_KEY, ctx)
    return ctx
