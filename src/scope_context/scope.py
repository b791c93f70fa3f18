# src/scope_context/scope.py
"""
Scope: tabla hash de capacidad fija con direccionamiento abierto.

- Cada slot es None (libre) o un Binding(key, value). No se usa la clave
  vacía como centinela, así que "" es una clave válida.
- Colisiones: sondeo lineal con wrap-around, (i + 1) % capacity.
- La tabla no crece: con size == capacity, insert falla con MaximizedError
  antes de sondear.
- No hay borrado, por eso find puede detenerse en el primer slot libre.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional
import logging

from .errors import (
    InvalidKeyError,
    InvalidValueError,
    MaximizedError,
    NullPointerError,
    RedefinedError,
)
from .hashing import DEFAULT_CAPACITY, ctx_hash

log = logging.getLogger(__name__)

# buffer de clave de referencia: 256 bytes, 255 utilizables
KEY_LENGTH = 256
DEFAULT_KEY_LIMIT = KEY_LENGTH - 1

# rango de un int de C
INTEGER_MIN = -(2 ** 31)
INTEGER_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class Binding:
    key: str
    value: int


def validate_key(key, key_limit: int = DEFAULT_KEY_LIMIT) -> str:
    """Return `key` unchanged or raise NullPointerError / InvalidKeyError."""
    if key is None:
        raise NullPointerError("key is None")
    if not isinstance(key, str):
        raise InvalidKeyError(f"key must be a string, got {type(key).__name__}")
    if len(key.encode("utf-8")) > key_limit:
        raise InvalidKeyError(f"key longer than {key_limit} bytes")
    return key


def validate_value(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(f"value must be an int, got {type(value).__name__}")
    if not INTEGER_MIN <= value <= INTEGER_MAX:
        raise InvalidValueError(f"value {value} outside [{INTEGER_MIN}, {INTEGER_MAX}]")
    return value


def check_positive(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer")
    return value


class Scope:
    """One level of bindings."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY, key_limit: int = DEFAULT_KEY_LIMIT):
        self.capacity: int = check_positive("capacity", capacity)
        self.key_limit: int = check_positive("key_limit", key_limit)
        self._slots: List[Optional[Binding]] = [None] * self.capacity
        self._size: int = 0

    @property
    def size(self) -> int:
        """Number of occupied slots (not the capacity)."""
        return self._size

    @property
    def is_full(self) -> bool:
        return self._size >= self.capacity

    @property
    def load_factor(self) -> float:
        return self._size / self.capacity

    def _probe(self, key: str):
        """Slot indices in probe order, at most `capacity` of them."""
        index = ctx_hash(key, self.capacity)
        for _ in range(self.capacity):
            yield index
            index = (index + 1) % self.capacity

    def insert(self, key: str, value: int) -> int:
        """
        Bind key -> value in this scope and return the slot index used.

        Raises MaximizedError if the table is already full (checked before
        probing) and RedefinedError if the key is already bound here; in both
        cases the table is left untouched.
        """
        validate_key(key, self.key_limit)
        validate_value(value)
        if self.is_full:
            log.debug("insert %r rejected: scope full (%d/%d)", key, self._size, self.capacity)
            raise MaximizedError(f"scope is full ({self.capacity} bindings)")

        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                self._slots[index] = Binding(key, value)
                self._size += 1
                return index
            if slot.key == key:
                log.debug("insert %r rejected: already bound in this scope", key)
                raise RedefinedError(f"'{key}' is already defined in this scope")

        # solo si size no refleja los slots ocupados
        raise MaximizedError(f"no free slot found for '{key}'")

    def find(self, key: str) -> Optional[Binding]:
        """Binding for `key` in this scope, or None."""
        validate_key(key, self.key_limit)
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot.key == key:
                return slot
        return None

    def clear(self) -> None:
        """Free every slot."""
        self._slots = [None] * self.capacity
        self._size = 0

    def summary(self) -> Dict[str, object]:
        return {
            "size": self._size,
            "capacity": self.capacity,
            "load_factor": round(self.load_factor, 4),
        }

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self.find(key) is not None

    def __repr__(self) -> str:
        return f"<Scope size={self._size} capacity={self.capacity}>"
