# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from marquei.common.errors import AppError, format_validation_errors
from marquei.common.http import PipelineHalted, error_payload
from marquei.infra.config import settings

logger = logging.getLogger(__name__)


def _err_payload(message: Any, code: Optional[int] = None) -> Dict[str, Any]:
    return jsonable_encoder({"message": message, "code": code})


async def pipeline_halted_handler(request: Request, exc: PipelineHalted) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(
        status_code=exc.response.status_code,
        content=jsonable_encoder(error_payload(exc.response)),
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(
        status_code=exc.status_code,
        content=_err_payload(exc.message, exc.code),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(
        status_code=400,
        content=_err_payload(format_validation_errors(list(exc.errors()))),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
    logger.exception("Internal Server Error")

    # 开发环境透出原始信息（有状态码时一并透出），生产环境一律屏蔽
    if settings.is_development:
        status_code = getattr(exc, "status_code", None)
        return JSONResponse(
            status_code=status_code if isinstance(status_code, int) else 500,
            content=_err_payload(str(exc), getattr(exc, "code", None)),
        )
    return JSONResponse(
        status_code=500,
        content=_err_payload("Internal Server Error"),
    )
