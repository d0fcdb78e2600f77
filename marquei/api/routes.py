# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""路由注册表：版本前缀 -> router 列表，启动时显式挂载，不做目录扫描"""

from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, FastAPI

from marquei.api.v1 import health as health_v1

ROUTERS: Dict[str, List[APIRouter]] = {
    "v1": [health_v1.router],
}


def register_routes(app: FastAPI, routers: Dict[str, List[APIRouter]] = ROUTERS) -> None:
    for version, version_routers in routers.items():
        for router in version_routers:
            app.include_router(router, prefix=f"/api/{version}")
