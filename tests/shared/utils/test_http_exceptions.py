# -*- coding: utf-8 -*-
import pytest
from fastapi import HTTPException

from showcase.shared.results import (
    ErrorType,
    ResultError,
    bad_request,
    conflict,
    forbidden,
    not_found,
    ok,
    unauthorized,
)
from showcase.shared.utils import (
    BadRequestException,
    ConflictException,
    ForbiddenException,
    NotFoundException,
    UnauthorizedException,
    exception_for,
    unwrap_or_raise,
)


def test_success_unwraps_value():
    result = ok([1, 2])
    assert result.is_success and not result.is_failure
    assert unwrap_or_raise(result) == [1, 2]


def test_failure_unwrap_raises_result_error():
    with pytest.raises(ResultError):
        not_found("Project not found.").unwrap()


def test_expect_failure_on_success_raises():
    with pytest.raises(ResultError):
        ok(1).expect_failure()


@pytest.mark.parametrize(
    "failure,exc_type,status",
    [
        (not_found("Project not found."), NotFoundException, 404),
        (conflict("A project with the same title already exists."), ConflictException, 409),
        (bad_request("Tag titles cannot be empty."), BadRequestException, 400),
        (unauthorized("Nope."), UnauthorizedException, 401),
        (forbidden("Nope."), ForbiddenException, 403),
    ],
)
def test_failure_maps_to_http_exception(failure, exc_type, status):
    exc = exception_for(failure)
    assert isinstance(exc, exc_type)
    assert isinstance(exc, HTTPException)
    assert exc.status_code == status
    assert exc.detail == failure.message


def test_unwrap_or_raise_raises_mapped_exception():
    with pytest.raises(ConflictException) as ei:
        unwrap_or_raise(conflict("A tag with the same title already exists."))
    assert ei.value.detail == "A tag with the same title already exists."


def test_error_type_values_are_stable():
    assert ErrorType.NOT_FOUND == "not_found"
    assert ErrorType.CONFLICT == "conflict"
