# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Awaitable, Callable, Type

from pydantic import BaseModel
from starlette.requests import Request

from marquei.api.handlers import adapt_middleware
from marquei.api.middlewares import AuthClientKeycloakMiddleware, TraceMiddleware, ValidateRequestMiddleware
from marquei.infra.keycloak import KeycloakTokenVerifier, make_keycloak_verifier

_token_verifier_singleton = make_keycloak_verifier()
_trace_middleware_singleton = TraceMiddleware()
_auth_client_middleware_singleton = AuthClientKeycloakMiddleware(_token_verifier_singleton)


def get_token_verifier() -> KeycloakTokenVerifier:
    return _token_verifier_singleton


def get_trace_middleware() -> TraceMiddleware:
    return _trace_middleware_singleton


# 路由级依赖：Depends(auth_client_keycloak)
auth_client_keycloak = adapt_middleware(_auth_client_middleware_singleton)


def validate_request(schema: Type[BaseModel]) -> Callable[[Request], Awaitable[None]]:
    """注册路由时绑定 schema：Depends(validate_request(CreateClientRequest))"""
    return adapt_middleware(ValidateRequestMiddleware(schema))
