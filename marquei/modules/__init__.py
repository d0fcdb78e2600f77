# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""业务模块：controller 满足 handle(HttpRequest) -> HttpResponse，service 承载业务逻辑"""
