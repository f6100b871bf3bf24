# -*- coding: utf-8 -*-
"""
backend/showcase/shared/results/result.py

Tipo Result para operaciones de servicio: éxito con valor o fallo
tipificado (ErrorType + mensaje legible).

Los servicios devuelven Result en lugar de lanzar excepciones para los
fallos esperables (no encontrado, conflicto, petición inválida). La capa
HTTP traduce el ErrorType a código de estado con unwrap_or_raise().

Autor: Equipo Showcase
Fecha: 2026-10-03
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")


class ErrorType(StrEnum):
    """Categorías de fallo reconocidas por la API."""
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"


class ResultError(RuntimeError):
    """Uso incorrecto de un Result (p.ej. unwrap() sobre un Failure)."""


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def expect_failure(self) -> NoReturn:
        raise ResultError("Se esperaba un Failure y se obtuvo un Success")


@dataclass(frozen=True, slots=True)
class Failure:
    error_type: ErrorType
    message: str

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ResultError(f"unwrap() sobre Failure({self.error_type}): {self.message}")

    def expect_failure(self) -> "Failure":
        return self


Result = Union[Success[T], Failure]


# === Constructores ===

def ok(value: T) -> Success[T]:
    return Success(value)


def not_found(message: str) -> Failure:
    return Failure(ErrorType.NOT_FOUND, message)


def conflict(message: str) -> Failure:
    return Failure(ErrorType.CONFLICT, message)


def bad_request(message: str) -> Failure:
    return Failure(ErrorType.BAD_REQUEST, message)


def unauthorized(message: str) -> Failure:
    return Failure(ErrorType.UNAUTHORIZED, message)


def forbidden(message: str) -> Failure:
    return Failure(ErrorType.FORBIDDEN, message)


__all__ = [
    "ErrorType",
    "ResultError",
    "Success",
    "Failure",
    "Result",
    "ok",
    "not_found",
    "conflict",
    "bad_request",
    "unauthorized",
    "forbidden",
]

# Fin del archivo backend/showcase/shared/results/result.py
