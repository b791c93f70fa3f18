# src/scope_context/errors.py
"""
Códigos de estado y excepciones del contexto de scopes.

Hay dos superficies sobre la misma taxonomía:
- API de objetos (Context, ScopeStack, Scope): lanza excepciones derivadas de
  ContextError; cada una lleva su `status`.
- API de códigos (scope_context.api): devuelve un Status, nunca lanza por
  estas condiciones.

Las excepciones heredan también de la builtin "natural" (KeyError para
Redefined/Undefined, RuntimeError para Minimized/Maximized, ...) para que
el código que ya hace `except KeyError` siga funcionando.
"""

from enum import IntEnum


class Status(IntEnum):
    SUCCESS = 0
    NULL_POINTER = -0x01
    ALLOCATION_FAILURE = -0x02
    MINIMIZED = -0x04
    MAXIMIZED = -0x08
    REDEFINED = -0x10
    UNDEFINED = -0x20
    INVALID_KEY = -0x40
    INVALID_VALUE = -0x80

    def describe(self) -> str:
        """Human readable message for this status."""
        return _MESSAGES[self]

    @property
    def ok(self) -> bool:
        return self is Status.SUCCESS


_MESSAGES = {
    Status.SUCCESS: "Success.",
    Status.NULL_POINTER: "Null pointer.",
    Status.ALLOCATION_FAILURE: "Memory allocation failure.",
    Status.MINIMIZED: "Memory is minimised.",
    Status.MAXIMIZED: "Memory is maximised.",
    Status.REDEFINED: "Redefined.",
    Status.UNDEFINED: "Undefined.",
    Status.INVALID_KEY: "Invalid key.",
    Status.INVALID_VALUE: "Invalid value.",
}


class ContextError(Exception):
    """Base class; `status` tells which Status the error maps to."""

    status: Status = Status.SUCCESS

    def __init__(self, message: str = ""):
        super().__init__(message or self.status.describe())
        self.message = message or self.status.describe()

    def __str__(self) -> str:
        # KeyError.__str__ would quote the message
        return self.message


class NullPointerError(ContextError, ValueError):
    status = Status.NULL_POINTER


class AllocationError(ContextError, MemoryError):
    status = Status.ALLOCATION_FAILURE


class MinimizedError(ContextError, RuntimeError):
    status = Status.MINIMIZED


class MaximizedError(ContextError, RuntimeError):
    status = Status.MAXIMIZED


class RedefinedError(ContextError, KeyError):
    status = Status.REDEFINED


class UndefinedError(ContextError, KeyError):
    status = Status.UNDEFINED


class InvalidKeyError(ContextError, ValueError):
    status = Status.INVALID_KEY


class InvalidValueError(ContextError, ValueError):
    status = Status.INVALID_VALUE
