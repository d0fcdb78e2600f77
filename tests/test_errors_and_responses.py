# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

import pytest

from marquei.common.errors import (
    AppError,
    AuthErrorCode,
    BadRequestError,
    ErrorKind,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    format_validation_errors,
)
from marquei.common.http import (
    HttpResponse,
    created,
    error_payload,
    get_http_error,
    no_content,
    ok,
)


@pytest.mark.parametrize(
    "error_cls, kind",
    [
        (BadRequestError, ErrorKind.BAD_REQUEST),
        (ForbiddenError, ErrorKind.FORBIDDEN),
        (NotFoundError, ErrorKind.NOT_FOUND),
        (InternalServerError, ErrorKind.INTERNAL),
    ],
)
def test_every_error_kind_fixes_its_status(error_cls, kind):
    err = error_cls("boom", 42)
    assert err.status_code == kind.value
    assert err.kind is kind
    assert err.message == "boom"
    assert err.code == 42


def test_error_code_is_optional():
    assert NotFoundError("missing").code is None


def test_list_message_renders_joined():
    err = BadRequestError(["a: required", "b: invalid"])
    assert str(err) == "a: required; b: invalid"


def test_auth_error_codes():
    assert [int(c) for c in AuthErrorCode] == [3001, 3002, 3003, 3004, 3005, 3006, 3007]


def test_success_helpers():
    assert ok({"a": 1}) == HttpResponse(status_code=200, body={"a": 1})
    assert created({"id": "x"}) == HttpResponse(status_code=201, body={"id": "x"})
    assert no_content() == HttpResponse(status_code=204)
    assert ok({}).is_success and no_content().is_success


def test_get_http_error_keeps_status_and_code():
    err = ForbiddenError("nope", 3001)
    response = get_http_error(err)
    assert response.status_code == 403
    assert response.code == 3001
    assert response.body is err
    assert not response.is_success


def test_get_http_error_defaults_to_500():
    err = RuntimeError("unexpected")
    response = get_http_error(err)
    assert response.status_code == 500
    assert response.code is None
    assert response.body is err


def test_get_http_error_rejects_bogus_status():
    err = AppError(message="weird", status_code=0)
    assert get_http_error(err).status_code == 500


def test_helpers_are_pure():
    data = {"content": True}
    assert ok(data) == ok(data)
    err = BadRequestError("bad", 7)
    assert get_http_error(err) == get_http_error(err)


def test_error_payload_shapes():
    assert error_payload(get_http_error(ForbiddenError("denied", 3002))) == {"message": "denied", "code": 3002}
    assert error_payload(get_http_error(ValueError("raw"))) == {"message": "raw", "code": None}
    assert error_payload(HttpResponse(status_code=418, body="teapot")) == {"message": "teapot", "code": None}


def test_format_validation_errors():
    errors = [
        {"loc": ("body", "name"), "msg": "Field required"},
        {"loc": ("query", "page"), "msg": "Input should be a valid integer"},
        {"loc": (), "msg": "bad"},
    ]
    assert format_validation_errors(errors) == [
        "body.name: Field required",
        "query.page: Input should be a valid integer",
        "bad",
    ]
