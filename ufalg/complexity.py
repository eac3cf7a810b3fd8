"""Time-complexity documentation for the union-find structures.

Classes and methods carry their documented cost as metadata::

    @time_complexity("O(N)", op="union")
    def union(self, p, q): ...

The records have no runtime effect. They are collected by
:func:`complexity_table` for the CLI ``--verbose`` output and compared against
measured growth rates in :mod:`ufalg.benchmark`.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Complexity:
    op: str
    value: str
    comment: str = ""


def time_complexity(value: str, *, op: str, comment: str = ""):
    """Attach a :class:`Complexity` record to a class or function."""

    record = Complexity(op=str(op), value=str(value), comment=str(comment))

    def deco(obj):
        # Only the records defined on obj itself, not inherited ones.
        existing = obj.__dict__.get("__complexity__", ()) if inspect.isclass(obj) else getattr(obj, "__complexity__", ())
        obj.__complexity__ = (record,) + tuple(existing)
        return obj

    return deco


def stateful(cls):
    """Mark a class whose instances are mutated in place by their operations."""
    cls.__stateful__ = True
    return cls


def is_stateful(obj: Any) -> bool:
    cls = obj if inspect.isclass(obj) else type(obj)
    return bool(getattr(cls, "__stateful__", False))


def complexity_of(obj: Any) -> Tuple[Complexity, ...]:
    if inspect.isclass(obj):
        return tuple(obj.__dict__.get("__complexity__", ()))
    return tuple(getattr(obj, "__complexity__", ()))


def complexity_table(cls) -> Dict[str, Complexity]:
    """Collect ``op -> Complexity`` for a class.

    Method records come first, in definition order along the MRO (base classes
    first); records attached to the class body are applied last and win.
    """
    table: Dict[str, Complexity] = {}
    for klass in reversed(cls.__mro__):
        for name, member in klass.__dict__.items():
            if name.startswith("_") and name != "__init__":
                continue
            for rec in complexity_of(member):
                table[rec.op] = rec
    for rec in complexity_of(cls):
        table[rec.op] = rec
    return table


def format_complexity_table(cls, *, indent: str = "") -> str:
    table = complexity_table(cls)
    lines = [f"{indent}{cls.__name__}:"]
    if not table:
        lines.append(f"{indent}  (no complexity records)")
        return "\n".join(lines)
    width = max(len(op) for op in table)
    for op, rec in table.items():
        line = f"{indent}  {op:<{width}}  {rec.value}"
        if rec.comment:
            line += f"  ({rec.comment})"
        lines.append(line)
    return "\n".join(lines)
