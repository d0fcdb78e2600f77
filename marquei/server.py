# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""进程入口

uvicorn 收到 SIGTERM 后停止接收新连接，等待在途请求完成（最多 SHUTDOWN_GRACE_SECONDS 秒）再退出。
"""

from __future__ import annotations

import uvicorn

from marquei.common.logging import mlogger, setup_logging
from marquei.infra.config import settings


def main() -> None:
    setup_logging(settings.LOG_LEVEL.upper())
    mlogger.info("Initializing setup of services...")
    uvicorn.run(
        "marquei.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        timeout_graceful_shutdown=settings.SHUTDOWN_GRACE_SECONDS,
    )


if __name__ == "__main__":
    main()
