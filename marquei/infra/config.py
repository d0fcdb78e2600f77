# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """全局配置，从 .env / 环境变量读取"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 运行环境
    ENV: str = Field(
        "development",
        description="运行环境: development / production",
        validation_alias=AliasChoices("ENV", "NODE_ENV", "env"),
    )

    # HTTP
    HOST: str = Field("0.0.0.0", description="监听地址")
    PORT: int = Field(
        3000,
        description="监听端口",
        validation_alias=AliasChoices("PORT", "port"),
    )
    SHUTDOWN_GRACE_SECONDS: int = Field(
        30,
        description="收到 SIGTERM 后等待在途请求完成的最长时间（秒）",
        validation_alias=AliasChoices("SHUTDOWN_GRACE_SECONDS", "shutdown_grace_seconds"),
    )

    # 日志
    LOG_LEVEL: str = Field(
        "INFO",
        description="日志级别",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )

    # Keycloak
    KEYCLOAK_BASE_URL: str = Field(
        ...,
        description="Keycloak 根地址，例如 https://auth.example.com",
        validation_alias=AliasChoices("KEYCLOAK_BASE_URL", "keycloak_base_url"),
    )
    KEYCLOAK_REALM: str = Field(
        ...,
        description="Keycloak realm",
        validation_alias=AliasChoices("KEYCLOAK_REALM", "keycloak_realm"),
    )
    KEYCLOAK_AUDIENCE: str = Field(
        ...,
        description="access token 期望的 audience（除 account 外）",
        validation_alias=AliasChoices("KEYCLOAK_AUDIENCE", "keycloak_audience"),
    )
    KEYCLOAK_JWKS_CACHE_SECONDS: int = Field(
        300,
        description="JWKS 公钥缓存时间（秒）",
        validation_alias=AliasChoices("KEYCLOAK_JWKS_CACHE_SECONDS", "keycloak_jwks_cache_seconds"),
    )
    KEYCLOAK_HTTP_TIMEOUT_SECONDS: int = Field(
        10,
        description="拉取 JWKS 的超时（秒）",
        validation_alias=AliasChoices("KEYCLOAK_HTTP_TIMEOUT_SECONDS", "keycloak_http_timeout_seconds"),
    )

    @property
    def is_development(self) -> bool:
        return self.ENV.lower() in ("dev", "development")

    @property
    def keycloak_issuer(self) -> str:
        return f"{self.KEYCLOAK_BASE_URL.rstrip('/')}/realms/{self.KEYCLOAK_REALM}"

    @property
    def keycloak_jwks_url(self) -> str:
        return f"{self.keycloak_issuer}/protocol/openid-connect/certs"


settings = Settings()
