# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Union

Message = Union[str, List[str]]


class ErrorKind(Enum):
    """错误种类（封闭集合），值为固定的 HTTP 状态码"""

    BAD_REQUEST = 400
    FORBIDDEN = 403
    NOT_FOUND = 404
    INTERNAL = 500


class AuthErrorCode(IntEnum):
    """鉴权失败的业务子码，供客户端区分"""

    TOKEN_NOT_PROVIDED = 3001
    INVALID_TOKEN_FORMAT = 3002
    CLIENT_ID_MISSING = 3003
    TOKEN_EXPIRED = 3004
    TOKEN_INVALID = 3005
    CLAIM_VALIDATION_FAILED = 3006
    UNAUTHORIZED = 3007


@dataclass
class AppError(Exception):
    """异常统一"""
    message: Message
    status_code: int = 500
    code: Optional[int] = None

    def __str__(self) -> str:
        if isinstance(self.message, list):
            return "; ".join(self.message)
        return self.message


class BadRequestError(AppError):
    kind = ErrorKind.BAD_REQUEST

    def __init__(self, message: Message = "bad request", code: Optional[int] = None) -> None:
        super().__init__(message=message, status_code=400, code=code)


class ForbiddenError(AppError):
    kind = ErrorKind.FORBIDDEN

    def __init__(self, message: Message = "forbidden", code: Optional[int] = None) -> None:
        super().__init__(message=message, status_code=403, code=code)


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: Message = "not found", code: Optional[int] = None) -> None:
        super().__init__(message=message, status_code=404, code=code)


class InternalServerError(AppError):
    kind = ErrorKind.INTERNAL

    def __init__(self, message: Message = "internal server error", code: Optional[int] = None) -> None:
        super().__init__(message=message, status_code=500, code=code)


def format_validation_errors(errors: List[dict]) -> List[str]:
    """pydantic 的 errors() -> ["body.email: value is not a valid email address", ...]"""
    messages: List[str] = []
    for err in errors:
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "")
        msg = err.get("msg", "invalid value")
        messages.append(f"{loc}: {msg}" if loc else msg)
    return messages
