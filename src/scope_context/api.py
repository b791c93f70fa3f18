# src/scope_context/api.py
"""
Superficie por códigos de estado.

Cada función recibe el handle (puede ser None) y devuelve un Status en vez de
lanzar. Útil para embebedores que prefieren comprobar códigos:

    ctx = ctx_alloc()
    if ctx_insert(ctx, "a", 10) is not Status.SUCCESS: ...
    status, value = ctx_search(ctx, "a")
"""

from __future__ import annotations
from typing import Optional, Tuple
import logging

from .context import Context
from .errors import ContextError, Status
from .hashing import DEFAULT_CAPACITY, ctx_hash as _hash
from .scope import DEFAULT_KEY_LIMIT

log = logging.getLogger(__name__)


def _usable(ctx: Optional[Context]) -> bool:
    return ctx is not None and not ctx.released


def ctx_alloc(capacity: int = DEFAULT_CAPACITY, key_limit: int = DEFAULT_KEY_LIMIT) -> Optional[Context]:
    """New context with one (global) scope, or None if memory ran out."""
    try:
        return Context(capacity, key_limit)
    except MemoryError:
        log.warning("ctx_alloc: allocation failure (capacity=%d)", capacity)
        return None


def ctx_free(ctx: Optional[Context]) -> None:
    if _usable(ctx):
        ctx.release()


def ctx_reset(ctx: Optional[Context]) -> None:
    if _usable(ctx):
        ctx.reset()


def ctx_push(ctx: Optional[Context]) -> Status:
    if not _usable(ctx):
        return Status.NULL_POINTER
    try:
        ctx.push_scope()
    except ContextError as e:
        return e.status
    return Status.SUCCESS


def ctx_pop(ctx: Optional[Context]) -> Status:
    if not _usable(ctx):
        return Status.NULL_POINTER
    try:
        ctx.pop_scope()
    except ContextError as e:
        return e.status
    return Status.SUCCESS


def ctx_hash(key: str, capacity: int = DEFAULT_CAPACITY) -> int:
    return _hash(key, capacity)


def ctx_insert(ctx: Optional[Context], key: str, value: int) -> Status:
    if not _usable(ctx) or key is None:
        return Status.NULL_POINTER
    try:
        ctx.insert(key, value)
    except ContextError as e:
        return e.status
    return Status.SUCCESS


def ctx_search(ctx: Optional[Context], key: str) -> Tuple[Status, Optional[int]]:
    """(Status.SUCCESS, value) or (error status, None)."""
    if not _usable(ctx) or key is None:
        return Status.NULL_POINTER, None
    try:
        value = ctx.search(key)
    except ContextError as e:
        return e.status, None
    return Status.SUCCESS, value
