# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from fastapi import APIRouter, Depends

from marquei.api.deps import auth_client_keycloak
from marquei.api.handlers import adapt_route
from marquei.modules.health_check import make_health_check_controller


router = APIRouter(tags=["health"])

router.add_api_route(
    "/health",
    adapt_route(make_health_check_controller()),
    methods=["GET"],
    dependencies=[Depends(auth_client_keycloak)],
)
