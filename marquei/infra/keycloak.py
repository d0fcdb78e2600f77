# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""Keycloak access token 校验

公钥从 realm 的 JWKS 端点懒加载，由 PyJWKClient 自行缓存；
本模块只做签名 + iss / aud / exp 校验，不做任何授权判断。
"""

from __future__ import annotations

import ssl
from typing import Any, Dict, Optional, Sequence

import certifi
import jwt
from jwt import PyJWKClient
from starlette.concurrency import run_in_threadpool

from marquei.infra.config import Settings, settings

ACCOUNT_AUDIENCE = "account"


class KeycloakTokenVerifier:
    def __init__(
        self,
        *,
        issuer: str,
        audiences: Sequence[str],
        jwks_url: Optional[str] = None,
        jwk_client: Any = None,
        algorithms: Sequence[str] = ("RS256",),
        cache_seconds: int = 300,
        timeout: int = 10,
    ) -> None:
        if jwk_client is None:
            if not jwks_url:
                raise ValueError("jwks_url is required when jwk_client is not given")
            jwk_client = PyJWKClient(
                jwks_url,
                cache_keys=True,
                cache_jwk_set=True,
                lifespan=cache_seconds,
                timeout=timeout,
                ssl_context=ssl.create_default_context(cafile=certifi.where()),
            )
        self._jwk_client = jwk_client
        self._issuer = issuer
        self._audiences = list(audiences)
        self._algorithms = list(algorithms)

    @property
    def issuer(self) -> str:
        return self._issuer

    @property
    def audiences(self) -> list:
        return list(self._audiences)

    def verify(self, token: str) -> Dict[str, Any]:
        """校验 token 并返回 payload；失败时原样抛出 PyJWT 的异常"""
        signing_key = self._jwk_client.get_signing_key_from_jwt(token)
        return jwt.decode(
            token,
            signing_key.key,
            algorithms=self._algorithms,
            audience=self._audiences,
            issuer=self._issuer,
            # Keycloak 的 sub 可能是非字符串，统一在 AuthenticatedClient 里转成 str
            options={"verify_sub": False},
        )

    async def verify_async(self, token: str) -> Dict[str, Any]:
        # JWKS 拉取是阻塞 IO，放到线程池里跑
        return await run_in_threadpool(self.verify, token)


def make_keycloak_verifier(cfg: Settings = settings) -> KeycloakTokenVerifier:
    return KeycloakTokenVerifier(
        issuer=cfg.keycloak_issuer,
        audiences=[cfg.KEYCLOAK_AUDIENCE, ACCOUNT_AUDIENCE],
        jwks_url=cfg.keycloak_jwks_url,
        cache_seconds=cfg.KEYCLOAK_JWKS_CACHE_SECONDS,
        timeout=cfg.KEYCLOAK_HTTP_TIMEOUT_SECONDS,
    )
