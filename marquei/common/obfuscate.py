# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Any, Iterable, Mapping

SENSITIVE_FIELDS = ("authorization", "x-access-token", "access_token", "password")


def obfuscate_fields(target: Any, words: Iterable[str] = SENSITIVE_FIELDS) -> Any:
    """返回一个深拷贝，命中 words 的 key 对应的值替换为等长的 *

    空值保持原样；嵌套的 dict / list 会递归处理。原对象不会被修改。
    """
    keys = frozenset(words)

    def _walk(node: Any) -> Any:
        if isinstance(node, Mapping):
            out = {}
            for k, v in node.items():
                if k in keys and v:
                    out[k] = "*" * len(str(v))
                else:
                    out[k] = _walk(v)
            return out
        if isinstance(node, (list, tuple)):
            return [_walk(v) for v in node]
        return node

    return _walk(target)
