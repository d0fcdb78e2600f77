# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""管线中的 middleware：成功时向 RequestContext 贡献数据并继续，失败时直接结束请求"""

from __future__ import annotations

from marquei.api.middlewares.auth_client import AuthClientKeycloakMiddleware, AuthenticatedClient
from marquei.api.middlewares.trace import TraceMiddleware
from marquei.api.middlewares.validate_request import RequestSchema, ValidateRequestMiddleware

__all__ = [
    "AuthClientKeycloakMiddleware",
    "AuthenticatedClient",
    "RequestSchema",
    "TraceMiddleware",
    "ValidateRequestMiddleware",
]
