"""
Duplicate-symbol index: which symbols the user holds in more than one account.

Derived from the full holdings list on every load and used only for
highlighting; never written back.
"""
from dataclasses import dataclass, field
from typing import Iterable

from utils.models import Holding


@dataclass
class SymbolRecord:
    account_ids: set[str] = field(default_factory=set)

    @property
    def duplicate(self) -> bool:
        return len(self.account_ids) > 1


DuplicateIndex = dict[str, SymbolRecord]


def build_duplicate_index(holdings: Iterable[Holding]) -> DuplicateIndex:
    index: DuplicateIndex = {}
    for holding in holdings:
        index.setdefault(holding.symbol, SymbolRecord()).account_ids.add(holding.account_id)
    return index


def is_highlighted(index: DuplicateIndex, symbol: str, account_id: str) -> bool:
    """True if ``symbol`` is held in several accounts, this one among them."""
    record = index.get(symbol)
    return record is not None and record.duplicate and account_id in record.account_ids
