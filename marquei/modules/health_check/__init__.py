# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from marquei.modules.health_check.controller import HealthCheckController
from marquei.modules.health_check.service import HealthCheckService


def make_health_check_service() -> HealthCheckService:
    return HealthCheckService()


def make_health_check_controller() -> HealthCheckController:
    return HealthCheckController(make_health_check_service)


__all__ = [
    "HealthCheckController",
    "HealthCheckService",
    "make_health_check_controller",
    "make_health_check_service",
]
