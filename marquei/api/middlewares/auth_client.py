# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""Keycloak Bearer token 鉴权

流程：
1. 取 authorization 头（唯一来源：data["authorization"]），缺失 -> 3001
2. 必须是 "Bearer <token>"，否则 -> 3002
3. 用 realm 的 JWKS 校验签名 / iss / aud
4. payload 没有 sub -> 3003
5. 成功后把 client 写入 RequestContext

校验失败按 PyJWT 异常类型映射成不同的 403 子码，所有失败路径都会带 trace_id 记日志。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from jwt.exceptions import (
    DecodeError,
    ExpiredSignatureError,
    ImmatureSignatureError,
    InvalidAudienceError,
    InvalidIssuedAtError,
    InvalidIssuerError,
    InvalidJTIError,
    InvalidSignatureError,
    MissingRequiredClaimError,
)

from marquei.common.errors import AuthErrorCode, ForbiddenError
from marquei.common.http import HttpRequest, HttpResponse, get_http_error, ok
from marquei.infra.keycloak import KeycloakTokenVerifier

logger = logging.getLogger(__name__)

BEARER = "Bearer"

# 透传给下游的额外 claims
EXTRA_CLAIMS: Tuple[str, ...] = ("preferred_username", "name")

_CLAIM_ERRORS: Dict[type, str] = {
    ImmatureSignatureError: "nbf",
    InvalidIssuedAtError: "iat",
    InvalidJTIError: "jti",
}

# PyJWT 对非数字的 exp / nbf 抛 DecodeError，消息里带 "claim (exp)"
_CLAIM_IN_MESSAGE = re.compile(r"claim \((\w+)\)")

_MISSING_CLAIM_MESSAGES: Dict[str, str] = {
    "iss": "invalid token: issuer mismatch",
    "aud": "invalid token: audience mismatch",
}


@dataclass
class AuthenticatedClient:
    id: str
    email: Optional[str] = None
    claims: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "AuthenticatedClient":
        claims = {k: payload[k] for k in EXTRA_CLAIMS if payload.get(k) is not None}
        return cls(id=str(payload["sub"]), email=payload.get("email"), claims=claims)


class AuthClientKeycloakMiddleware:
    def __init__(self, verifier: KeycloakTokenVerifier) -> None:
        self._verifier = verifier

    async def handle(self, request: HttpRequest) -> HttpResponse:
        trace_id = request.context.trace_id
        authorization = request.data.get("authorization")

        if not authorization:
            return self._reject(trace_id, "token not provided", AuthErrorCode.TOKEN_NOT_PROVIDED)

        parts = str(authorization).split(" ")
        scheme = parts[0]
        token = parts[1] if len(parts) > 1 else ""
        if scheme != BEARER or not token:
            return self._reject(trace_id, "invalid token format", AuthErrorCode.INVALID_TOKEN_FORMAT)

        try:
            payload = await self._verifier.verify_async(token)
        except Exception as e:  # noqa: BLE001
            message, code = _map_verification_error(e)
            return self._reject(trace_id, message, code, cause=e)

        if not payload.get("sub"):
            return self._reject(trace_id, "client identifier missing", AuthErrorCode.CLIENT_ID_MISSING)

        return ok({"client": AuthenticatedClient.from_payload(payload)})

    @staticmethod
    def _reject(
        trace_id: Optional[str],
        message: str,
        code: AuthErrorCode,
        cause: Optional[BaseException] = None,
    ) -> HttpResponse:
        extra: Dict[str, Any] = {
            "trace_id": trace_id,
            "error_message": message,
            "error_code": int(code),
        }
        if cause is None:
            logger.warning("auth rejected: %s (code=%s)", message, int(code), extra=extra)
        else:
            extra["cause"] = type(cause).__name__
            logger.error(
                "JWT verification failed: %s (code=%s, cause=%s: %s)",
                message,
                int(code),
                type(cause).__name__,
                cause,
                extra=extra,
            )
        return get_http_error(ForbiddenError(message, int(code)))


def _map_verification_error(error: BaseException) -> Tuple[str, AuthErrorCode]:
    if isinstance(error, ExpiredSignatureError):
        return "token expired", AuthErrorCode.TOKEN_EXPIRED
    if isinstance(error, InvalidIssuerError):
        return "invalid token: issuer mismatch", AuthErrorCode.CLAIM_VALIDATION_FAILED
    if isinstance(error, InvalidAudienceError):
        return "invalid token: audience mismatch", AuthErrorCode.CLAIM_VALIDATION_FAILED
    if isinstance(error, MissingRequiredClaimError):
        if error.claim in _MISSING_CLAIM_MESSAGES:
            return _MISSING_CLAIM_MESSAGES[error.claim], AuthErrorCode.CLAIM_VALIDATION_FAILED
        return (
            f"invalid token: claim validation failed ({error.claim or 'unknown'})",
            AuthErrorCode.CLAIM_VALIDATION_FAILED,
        )
    for error_type, claim in _CLAIM_ERRORS.items():
        if isinstance(error, error_type):
            return f"invalid token: claim validation failed ({claim})", AuthErrorCode.CLAIM_VALIDATION_FAILED
    # 签名不匹配也是 DecodeError 的子类，但不算结构错误
    if isinstance(error, InvalidSignatureError):
        return "unauthorized", AuthErrorCode.UNAUTHORIZED
    if isinstance(error, DecodeError):
        match = _CLAIM_IN_MESSAGE.search(str(error))
        if match:
            return f"invalid token: claim validation failed ({match.group(1)})", AuthErrorCode.CLAIM_VALIDATION_FAILED
        return "invalid token", AuthErrorCode.TOKEN_INVALID
    return "unauthorized", AuthErrorCode.UNAUTHORIZED
