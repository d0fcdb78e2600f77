# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""Marquei 后端：请求管线（trace / 鉴权 / 校验 / 适配器）"""

__version__ = "1.0.0"
