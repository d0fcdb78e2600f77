# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Any, Dict, Type

from pydantic import BaseModel, ConfigDict, ValidationError

from marquei.common.errors import BadRequestError, format_validation_errors
from marquei.common.http import HttpRequest, HttpResponse, get_http_error, ok


class RequestSchema(BaseModel):
    """路由级校验 schema 的基类：按需覆盖 body / params / query"""

    model_config = ConfigDict(extra="ignore")

    body: Dict[str, Any] = {}
    params: Dict[str, Any] = {}
    query: Dict[str, Any] = {}


class ValidateRequestMiddleware:
    """一次性收集全部校验错误，要么整体通过，要么整体报错"""

    def __init__(self, schema: Type[BaseModel]) -> None:
        self._schema = schema

    @property
    def schema(self) -> Type[BaseModel]:
        return self._schema

    async def handle(self, request: HttpRequest) -> HttpResponse:
        data = request.data
        try:
            self._schema.model_validate(
                {
                    "body": data.get("body") or {},
                    "params": data.get("params") or {},
                    "query": data.get("query") or {},
                }
            )
        except ValidationError as e:
            return get_http_error(BadRequestError(format_validation_errors(e.errors())))

        return ok({"validated": True})
