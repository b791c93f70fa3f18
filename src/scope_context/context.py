# src/scope_context/context.py
"""
Context: pila de scopes + operaciones de binding.

Uso típico:
    ctx = Context()
    ctx.insert("a", 10)
    with ctx.scope():
        ctx.insert("a", 20)          # sombrea el 'a' global
        assert ctx.search("a") == 20
    assert ctx.search("a") == 10

insert siempre escribe en el scope actual; search recorre de interno a
externo y devuelve el primer match. No es thread-safe: un Context tiene un
único dueño a la vez.
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import Dict, Iterator, Optional
import logging

from .errors import NullPointerError, UndefinedError
from .hashing import DEFAULT_CAPACITY
from .scope import DEFAULT_KEY_LIMIT, Scope, validate_key
from .scope_stack import ScopeStack

log = logging.getLogger(__name__)


class Context:
    def __init__(self, capacity: int = DEFAULT_CAPACITY, key_limit: int = DEFAULT_KEY_LIMIT):
        self._stack: Optional[ScopeStack] = ScopeStack(capacity, key_limit)
        self.capacity = self._stack.capacity
        self.key_limit = self._stack.key_limit

    def _live(self) -> ScopeStack:
        if self._stack is None:
            raise NullPointerError("context has been released")
        return self._stack

    # ---------- lifecycle ----------

    @property
    def released(self) -> bool:
        return self._stack is None

    @property
    def depth(self) -> int:
        """Number of active scopes (>= 1)."""
        return self._live().depth

    @property
    def current(self) -> Scope:
        return self._live().innermost

    def push_scope(self) -> None:
        self._live().push()

    def pop_scope(self) -> None:
        """Leave the innermost scope. Raises MinimizedError at depth 1."""
        self._live().pop()

    def reset(self) -> None:
        """Back to the just-allocated state. No-op on a released context."""
        if self._stack is not None:
            self._stack.reset()

    def release(self) -> None:
        """Drop every scope; later operations raise NullPointerError."""
        if self._stack is not None:
            self._stack.release()
            self._stack = None

    @contextmanager
    def scope(self) -> Iterator[Scope]:
        """
        with ctx.scope():
            ...   # bindings made here disappear on exit

        On exit the stack goes back to the depth it had on entry, whatever
        was pushed or popped inside the block.
        """
        stack = self._live()
        entry_depth = stack.depth
        scope = stack.push()
        try:
            yield scope
        finally:
            # tras release() no queda nada que truncar
            if not stack.released:
                stack.truncate(entry_depth)

    def __enter__(self) -> "Context":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.release()
        return None

    # ---------- bindings ----------

    def insert(self, key: str, value: int) -> None:
        """
        Bind key in the current scope.
        Raises RedefinedError if key is already bound in this same scope and
        MaximizedError if the scope is full. Outer bindings may be shadowed.
        """
        self._live().innermost.insert(key, value)

    def search(self, key: str) -> int:
        """Value of the innermost binding for key; UndefinedError if none."""
        stack = self._live()
        validate_key(key, self.key_limit)
        for scope in stack.walk():
            if scope.size == 0:
                continue
            binding = scope.find(key)
            if binding is not None:
                return binding.value
        raise UndefinedError(f"'{key}' is not defined")

    def lookup(self, key: str, default: Optional[int] = None) -> Optional[int]:
        try:
            return self.search(key)
        except UndefinedError:
            return default

    def __contains__(self, key) -> bool:
        return self.lookup(key) is not None

    # ---------- diagnostics ----------

    def summary(self) -> Dict[str, object]:
        """Occupancy per scope (never the bindings themselves)."""
        stack = self._live()
        return {
            "depth": stack.depth,
            "capacity": self.capacity,
            "key_limit": self.key_limit,
            "scopes": stack.summary(),
        }

    def __repr__(self) -> str:
        if self._stack is None:
            return "<Context released>"
        return f"<Context depth={self._stack.depth} capacity={self.capacity}>"
