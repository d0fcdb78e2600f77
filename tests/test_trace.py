# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

import logging

from marquei.common.context import RequestContext
from marquei.common.logging import TraceIdFilter
from marquei.common.trace import UNTRACED, bind_trace_id, current_trace_id, new_trace_id, unbind_trace_id


def _record(**extra):
    record = logging.LogRecord("marquei", logging.INFO, __file__, 1, "hello", None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_new_trace_ids_are_distinct():
    assert new_trace_id() != new_trace_id()


def test_context_without_trace_id_is_not_bound():
    assert bind_trace_id(RequestContext()) is None
    assert current_trace_id() == UNTRACED


def test_bind_and_unbind_follow_the_request_context():
    token = bind_trace_id(RequestContext({"trace_id": "t-42"}))
    try:
        assert current_trace_id() == "t-42"
    finally:
        unbind_trace_id(token)

    assert current_trace_id() == UNTRACED


def test_filter_fills_bound_trace_id():
    token = bind_trace_id(RequestContext({"trace_id": "t-bound"}))
    try:
        record = _record()
        assert TraceIdFilter().filter(record) is True
    finally:
        unbind_trace_id(token)

    assert record.trace_id == "t-bound"


def test_filter_keeps_explicit_trace_id():
    token = bind_trace_id(RequestContext({"trace_id": "t-bound"}))
    try:
        record = _record(trace_id="t-explicit")
        TraceIdFilter().filter(record)
    finally:
        unbind_trace_id(token)

    assert record.trace_id == "t-explicit"


def test_filter_without_bound_trace_id():
    record = _record()
    TraceIdFilter().filter(record)
    assert record.trace_id == UNTRACED
