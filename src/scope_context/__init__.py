"""
Pila de scopes con tablas hash de capacidad fija para resolver nombres.
Exporta el Context, la superficie por códigos (api) y los errores.
"""

from .api import (
    ctx_alloc,
    ctx_free,
    ctx_hash,
    ctx_insert,
    ctx_pop,
    ctx_push,
    ctx_reset,
    ctx_search,
)
from .context import Context
from .errors import (
    AllocationError,
    ContextError,
    InvalidKeyError,
    InvalidValueError,
    MaximizedError,
    MinimizedError,
    NullPointerError,
    RedefinedError,
    Status,
    UndefinedError,
)
from .hashing import DEFAULT_CAPACITY
from .scope import DEFAULT_KEY_LIMIT, INTEGER_MAX, INTEGER_MIN, KEY_LENGTH, Binding, Scope
from .scope_stack import ScopeStack

__all__ = [
    # Contexto
    'Context',
    'ScopeStack',
    'Scope',
    'Binding',

    # Códigos de estado
    'ctx_alloc',
    'ctx_free',
    'ctx_reset',
    'ctx_push',
    'ctx_pop',
    'ctx_hash',
    'ctx_insert',
    'ctx_search',

    # Errores
    'Status',
    'ContextError',
    'NullPointerError',
    'AllocationError',
    'MinimizedError',
    'MaximizedError',
    'RedefinedError',
    'UndefinedError',
    'InvalidKeyError',
    'InvalidValueError',

    # Configuración
    'DEFAULT_CAPACITY',
    'DEFAULT_KEY_LIMIT',
    'KEY_LENGTH',
    'INTEGER_MIN',
    'INTEGER_MAX',
]
