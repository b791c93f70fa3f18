# src/scope_context/hashing.py
"""Función de hash de las tablas de scope."""

from .errors import InvalidKeyError, NullPointerError

# tamaño por defecto de cada tabla (slots por scope)
DEFAULT_CAPACITY = 256


def ctx_hash(key: str, capacity: int = DEFAULT_CAPACITY) -> int:
    """
    Map `key` to a bucket index in [0, capacity).

    For every UTF-8 byte b: acc = (acc + b) * b, then acc %= capacity.
    The reduction happens after each byte, not once at the end; other
    accumulation orders give a different probe layout.
    """
    if key is None:
        raise NullPointerError("key is None")
    if not isinstance(key, str):
        raise InvalidKeyError(f"key must be a string, got {type(key).__name__}")
    if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
        raise ValueError("capacity must be a positive integer")
    acc = 0
    for b in key.encode("utf-8"):
        acc = (acc + b) * b
        acc %= capacity
    return acc
