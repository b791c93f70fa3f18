# src/scope_context/driver.py
"""
Driver de línea de comandos: ejecuta un script de bindings sobre un Context.

    scope-context [--capacity N] [--key-limit N] [--verbose] script.ctx

Formato del script (una orden por línea, '#' inicia comentario):

    insert a 10
    push
    insert b 20
    search a
    pop
    search b        # -> [ERROR] ... (UNDEFINED)
    hash a
    depth
    dump
    reset

Código de salida: 0 si todas las órdenes tuvieron éxito, 1 si alguna falló,
2 si el script no se pudo leer o los argumentos no son válidos.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple
import argparse
import json
import logging
import sys

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
from .errors import Status
from .hashing import DEFAULT_CAPACITY
from .scope import DEFAULT_KEY_LIMIT

log = logging.getLogger(__name__)


class ScriptError(Exception):
    """Malformed script line (unknown command, wrong arity, bad integer)."""


def _arity(args: List[str], n: int, usage: str) -> None:
    if len(args) != n:
        raise ScriptError(f"usage: {usage}")


def _cmd_push(ctx: Context, args: List[str]) -> Tuple[Status, str]:
    _arity(args, 0, "push")
    status = ctx_push(ctx)
    return status, f"push -> depth {ctx.depth}"


def _cmd_pop(ctx: Context, args: List[str]) -> Tuple[Status, str]:
    _arity(args, 0, "pop")
    status = ctx_pop(ctx)
    return status, f"pop -> depth {ctx.depth}"


def _cmd_reset(ctx: Context, args: List[str]) -> Tuple[Status, str]:
    _arity(args, 0, "reset")
    ctx_reset(ctx)
    return Status.SUCCESS, "reset -> depth 1"


def _cmd_insert(ctx: Context, args: List[str]) -> Tuple[Status, str]:
    _arity(args, 2, "insert KEY VALUE")
    key, raw = args
    try:
        value = int(raw)
    except ValueError:
        raise ScriptError(f"not an integer: {raw!r}")
    status = ctx_insert(ctx, key, value)
    return status, f"insert {key} = {value}"


def _cmd_search(ctx: Context, args: List[str]) -> Tuple[Status, str]:
    _arity(args, 1, "search KEY")
    key = args[0]
    status, value = ctx_search(ctx, key)
    if status is Status.SUCCESS:
        return status, f"search {key} -> {value}"
    return status, f"search {key}"


def _cmd_hash(ctx: Context, args: List[str]) -> Tuple[Status, str]:
    _arity(args, 1, "hash KEY")
    return Status.SUCCESS, f"hash {args[0]} -> {ctx_hash(args[0], ctx.capacity)}"


def _cmd_depth(ctx: Context, args: List[str]) -> Tuple[Status, str]:
    _arity(args, 0, "depth")
    return Status.SUCCESS, f"depth {ctx.depth}"


def _cmd_dump(ctx: Context, args: List[str]) -> Tuple[Status, str]:
    _arity(args, 0, "dump")
    return Status.SUCCESS, json.dumps(ctx.summary(), sort_keys=True)


COMMANDS: Dict[str, Callable[[Context, List[str]], Tuple[Status, str]]] = {
    "push": _cmd_push,
    "pop": _cmd_pop,
    "reset": _cmd_reset,
    "insert": _cmd_insert,
    "search": _cmd_search,
    "hash": _cmd_hash,
    "depth": _cmd_depth,
    "dump": _cmd_dump,
}


def run_script(ctx: Context, lines, out=None) -> int:
    """
    Execute script lines against ctx, printing one line per command.
    Returns the number of failed commands.
    """
    out = out or sys.stdout
    failures = 0
    for lineno, raw in enumerate(lines, start=1):
        text = raw.split("#", 1)[0].strip()
        if not text:
            continue
        name, *args = text.split()
        handler = COMMANDS.get(name.lower())
        try:
            if handler is None:
                raise ScriptError(f"unknown command {name!r}")
            status, message = handler(ctx, args)
        except ScriptError as e:
            failures += 1
            print(f"[ERROR] line {lineno}: {e}", file=out)
            continue

        if status is Status.SUCCESS:
            print(f"[OK] {message}", file=out)
        else:
            failures += 1
            log.debug("line %d: %s failed with %s", lineno, name, status.name)
            print(f"[ERROR] line {lineno}: {message}: {status.describe()} ({status.name})", file=out)
    return failures


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scope-context", description="Run a scoped binding script.")
    parser.add_argument("script", help="path to the script file")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY, help="slots per scope")
    parser.add_argument("--key-limit", type=int, default=DEFAULT_KEY_LIMIT, help="max key length in bytes")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        with open(args.script, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as e:
        print(f"[ERROR] cannot read {args.script}: {e}", file=sys.stderr)
        return 2

    try:
        ctx = ctx_alloc(args.capacity, args.key_limit)
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    if ctx is None:
        print(f"[ERROR] {Status.ALLOCATION_FAILURE.describe()}", file=sys.stderr)
        return 2

    try:
        failures = run_script(ctx, lines)
    finally:
        ctx_free(ctx)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
