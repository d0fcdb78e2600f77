# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from marquei.common.context import RequestContext
from marquei.common.obfuscate import obfuscate_fields


def test_merge_drops_falsy_values():
    ctx = RequestContext()
    ctx.merge({"foo": "bar", "baz": None, "empty": "", "zero": 0})
    assert ctx.as_dict() == {"foo": "bar"}
    assert "baz" not in ctx


def test_merge_keeps_previous_entries():
    ctx = RequestContext({"trace_id": "t-1"})
    ctx.merge({"client": {"id": "c-1"}, "trace_id": None})
    assert ctx.trace_id == "t-1"
    assert ctx.client == {"id": "c-1"}


def test_contexts_are_independent():
    a, b = RequestContext(), RequestContext()
    a.merge({"trace_id": "a"})
    assert b.trace_id is None


def test_obfuscate_masks_nested_fields_without_mutating():
    target = {
        "authorization": "Bearer abc",
        "body": {"password": "secret", "name": "Ana"},
        "items": [{"access_token": "xyz"}],
        "x-access-token": None,
    }
    masked = obfuscate_fields(target)
    assert masked["authorization"] == "*" * len("Bearer abc")
    assert masked["body"] == {"password": "******", "name": "Ana"}
    assert masked["items"] == [{"access_token": "***"}]
    assert masked["x-access-token"] is None
    assert target["body"]["password"] == "secret"


def test_obfuscate_custom_words():
    assert obfuscate_fields({"cpf": "12345678900", "name": "Ana"}, ["cpf"]) == {"cpf": "*" * 11, "name": "Ana"}
