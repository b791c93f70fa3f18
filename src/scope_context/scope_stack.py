# src/scope_context/scope_stack.py
"""
ScopeStack: pila de scopes.

Convención:
    * index 0 es el scope más externo (global) y nunca se saca con pop().
    * index -1 es el scope actual (más interno).
    * push = append, pop = list.pop.
"""

from __future__ import annotations
from typing import Dict, Iterator, List
import logging

from .errors import AllocationError, MinimizedError, NullPointerError
from .hashing import DEFAULT_CAPACITY
from .scope import DEFAULT_KEY_LIMIT, Scope, check_positive

log = logging.getLogger(__name__)


class ScopeStack:
    def __init__(self, capacity: int = DEFAULT_CAPACITY, key_limit: int = DEFAULT_KEY_LIMIT):
        self.capacity: int = check_positive("capacity", capacity)
        self.key_limit: int = check_positive("key_limit", key_limit)
        self._scopes: List[Scope] = []
        self._released: bool = False
        self._scopes.append(self._new_scope())

    def _new_scope(self) -> Scope:
        try:
            return Scope(self.capacity, self.key_limit)
        except MemoryError as exc:
            raise AllocationError(f"could not allocate a scope of {self.capacity} slots") from exc

    def _live(self) -> List[Scope]:
        if self._released:
            raise NullPointerError("scope stack has been released")
        return self._scopes

    # ---------- lifecycle ----------

    @property
    def released(self) -> bool:
        return self._released

    def push(self) -> Scope:
        """Create a new innermost scope and return it."""
        scopes = self._live()
        scope = self._new_scope()
        scopes.append(scope)
        log.debug("push: depth=%d", len(scopes))
        return scope

    def pop(self) -> Scope:
        """
        Remove and return the innermost scope.
        At depth 1 raises MinimizedError and leaves the stack as is.
        """
        scopes = self._live()
        if len(scopes) <= 1:
            raise MinimizedError("cannot pop the outermost scope")
        scope = scopes.pop()
        log.debug("pop: depth=%d", len(scopes))
        return scope

    def truncate(self, depth: int) -> None:
        """Drop inner scopes until at most `depth` remain (never below 1)."""
        scopes = self._live()
        del scopes[max(depth, 1):]
        log.debug("truncate: depth=%d", len(scopes))

    def reset(self) -> None:
        """Drop every scope except the outermost and clear it. No-op once released."""
        if self._released:
            return
        del self._scopes[1:]
        self._scopes[0].clear()
        log.debug("reset: depth=1")

    def release(self) -> None:
        """Drop every scope; afterwards push/pop/access raise NullPointerError."""
        if self._released:
            return
        self._scopes.clear()
        self._released = True
        log.debug("release: all scopes dropped")

    # ---------- access ----------

    @property
    def depth(self) -> int:
        """0 once released."""
        return len(self._scopes)

    @property
    def innermost(self) -> Scope:
        return self._live()[-1]

    @property
    def outermost(self) -> Scope:
        return self._live()[0]

    def walk(self) -> Iterator[Scope]:
        """Scopes from innermost to outermost."""
        return reversed(self._live())

    def summary(self) -> List[Dict[str, object]]:
        out = []
        for level, scope in enumerate(self._scopes):
            entry = {"level": level}
            entry.update(scope.summary())
            out.append(entry)
        return out

    def __len__(self) -> int:
        return len(self._scopes)

    def __repr__(self) -> str:
        return f"<ScopeStack depth={len(self._scopes)} capacity={self.capacity}>"
