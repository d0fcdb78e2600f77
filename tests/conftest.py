# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

import os

# settings 在 import 时即读取环境变量，必须先于任何 marquei 导入
os.environ.setdefault("KEYCLOAK_BASE_URL", "https://auth.marquei.test")
os.environ.setdefault("KEYCLOAK_REALM", "marquei")
os.environ.setdefault("KEYCLOAK_AUDIENCE", "marquei-backend")
os.environ.setdefault("ENV", "production")

import time
from types import SimpleNamespace

import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa
from fastapi.testclient import TestClient

from marquei.api import deps
from marquei.infra.config import settings
from marquei.infra.keycloak import KeycloakTokenVerifier


class StubJwkClient:
    """替代 PyJWKClient：不走网络，直接返回测试公钥"""

    def __init__(self, public_key, error=None):
        self.public_key = public_key
        self.error = error
        self.calls = 0

    def get_signing_key_from_jwt(self, token):
        self.calls += 1
        if self.error is not None:
            raise self.error
        jwt.get_unverified_header(token)
        return SimpleNamespace(key=self.public_key)


@pytest.fixture(scope="session")
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def jwk_client(rsa_private_key):
    return StubJwkClient(rsa_private_key.public_key())


@pytest.fixture
def verifier(jwk_client):
    return KeycloakTokenVerifier(
        issuer=settings.keycloak_issuer,
        audiences=[settings.KEYCLOAK_AUDIENCE, "account"],
        jwk_client=jwk_client,
    )


@pytest.fixture
def make_token(rsa_private_key):
    def _make(drop=(), key=None, **claims):
        now = int(time.time())
        payload = {
            "sub": "client-123",
            "email": "ana@marquei.com.br",
            "preferred_username": "ana",
            "iss": settings.keycloak_issuer,
            "aud": settings.KEYCLOAK_AUDIENCE,
            "iat": now,
            "exp": now + 300,
        }
        payload.update(claims)
        for name in drop:
            payload.pop(name, None)
        return jwt.encode(payload, key or rsa_private_key, algorithm="RS256", headers={"kid": "test-kid"})

    return _make


@pytest.fixture
def shared_verifier(monkeypatch, jwk_client):
    """把应用共享的 verifier 换成测试用 JWK client"""
    verifier = deps.get_token_verifier()
    monkeypatch.setattr(verifier, "_jwk_client", jwk_client)
    return verifier


@pytest.fixture
def production_mode(monkeypatch):
    monkeypatch.setattr(settings, "ENV", "production")


@pytest.fixture
def development_mode(monkeypatch):
    monkeypatch.setattr(settings, "ENV", "development")


@pytest.fixture
def client(shared_verifier, production_mode):
    from marquei.main import create_app

    with TestClient(create_app()) as c:
        yield c
