from datetime import date
from typing import Iterable, List, Protocol
from finance_tracker.core.entities import LedgerEntry, TransactionType


class TransactionLedger(Protocol):
    """Read side of the transaction store used by the spending calculator.

    Implementations return every expense entry whose category equals
    ``category`` exactly and whose date lies in ``[start, end]`` (both ends
    included). Nothing else is filtered downstream.
    """

    def find_expenses(self, category: str, start: date, end: date) -> Iterable[LedgerEntry]:
        ...


def is_matching_expense(entry: LedgerEntry, category: str, start: date, end: date) -> bool:
    # Case-sensitive on purpose: "Food" and "food" are different categories
    if entry.category != category:
        return False
    if entry.type != TransactionType.EXPENSE:
        return False
    return start <= entry.date <= end


class InMemoryLedger:
    """List-backed ledger, used for demos and tests."""

    def __init__(self, entries: Iterable[LedgerEntry] = ()):
        self._entries: List[LedgerEntry] = list(entries)

    def add(self, entry: LedgerEntry) -> None:
        self._entries.append(entry)

    def find_expenses(self, category: str, start: date, end: date) -> List[LedgerEntry]:
        # Copy first so a concurrent add() does not change what we iterate
        snapshot = list(self._entries)
        return [e for e in snapshot if is_matching_expense(e, category, start, end)]

    def __len__(self):
        return len(self._entries)
