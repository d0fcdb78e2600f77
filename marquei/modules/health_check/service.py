# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import Optional

from marquei.modules.shared import BaseService


class HealthCheckService(BaseService):
    async def run(self, *, trace_id: Optional[str], client_id: Optional[str] = None) -> bool:
        self.trace_id = trace_id
        self.log(logging.INFO, "Health check called.", client_id=client_id)
        return True
