# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""通用基础设施（错误/响应信封/上下文/日志/trace 等）

约定：
- middleware / controller 不向外抛业务异常：统一通过 get_http_error 转成 HttpResponse 返回
- middleware 成功时只往 RequestContext 写数据，不结束请求；controller 总是结束请求
- trace_id 由 trace middleware 生成，写入 RequestContext 与日志上下文，便于线上排障
"""

from __future__ import annotations
