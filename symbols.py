"""Symbol table and symbol records.

This module defines the `SymbolRecord` dataclass describing one declared
variable or function and a flat `SymbolTable` keyed by name. The table keeps
the first declaration of a name: redeclaring it later, with any type or value,
is silently ignored. Records are kept in declaration order.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

NO_VALUE = "-"


@dataclass(frozen=True)
class SymbolRecord:
    name: str
    declared_type: str
    initializer: str = NO_VALUE
    declared_at_line: int = 1

    def __repr__(self) -> str:
        return (
            f"SymbolRecord({self.name}, {self.declared_type}, "
            f"value={self.initializer}, line={self.declared_at_line})"
        )


class SymbolTable:
    def __init__(self):
        self.symbols: Dict[str, SymbolRecord] = {}

    def declare(
        self,
        name: str,
        declared_type: str,
        initializer: Optional[str] = None,
        line: int = 1,
    ) -> SymbolRecord:
        """Record a declaration unless `name` is already known.

        Returns the record that is in the table afterwards, which is the
        earlier one when `name` was declared before.
        """
        if line < 1:
            raise ValueError(f"Line numbers start at 1, got {line}")
        existing = self.symbols.get(name)
        if existing is not None:
            return existing

        record = SymbolRecord(
            name, declared_type, NO_VALUE if initializer is None else initializer, line
        )
        self.symbols[name] = record
        return record

    def lookup(self, name: str) -> SymbolRecord:
        if name in self.symbols:
            return self.symbols[name]
        raise KeyError(f"Undeclared symbol '{name}'")

    def exists(self, name: str) -> bool:
        return name in self.symbols

    def records(self) -> List[SymbolRecord]:
        """Snapshot of the records in declaration order."""
        return list(self.symbols.values())

    def __iter__(self) -> Iterator[SymbolRecord]:
        return iter(self.records())

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, name: str) -> bool:
        return self.exists(name)
