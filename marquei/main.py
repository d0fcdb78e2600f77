# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List, Optional

from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from marquei import __version__
from marquei.api.deps import get_trace_middleware
from marquei.api.handlers import PipelineMiddleware
from marquei.api.routes import ROUTERS, register_routes
from marquei.common.errors import AppError
from marquei.common.exception_handlers import (
    app_error_handler,
    pipeline_halted_handler,
    unhandled_error_handler,
    validation_error_handler,
)
from marquei.common.http import PipelineHalted
from marquei.common.logging import mlogger, setup_logging
from marquei.infra.config import settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    mlogger.info("Starting %s in %s mode", app.title, settings.ENV)
    yield
    mlogger.info("Finished graceful shutdown")


def create_app(routers: Optional[Dict[str, List[APIRouter]]] = None) -> FastAPI:
    setup_logging(settings.LOG_LEVEL.upper())

    app = FastAPI(
        title="marquei-backend",
        version=__version__,
        lifespan=lifespan,
    )

    # ---------- middlewares / handlers ----------

    app.add_middleware(PipelineMiddleware, middleware=get_trace_middleware())

    app.add_exception_handler(PipelineHalted, pipeline_halted_handler)
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # 探活：纯文本，不走信封
    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def liveness() -> str:
        return "ok"

    register_routes(app, ROUTERS if routers is None else routers)
    return app


app = create_app()
