"""Session state for the estimator: salary text plus an ordered list of debts.

Every mutation is followed by a full, synchronous recompute; subscribers get
the fresh AffordabilityResult immediately.
"""
import logging
import uuid
from typing import Callable, Iterator, List, Optional, Tuple

from estimator.engine import AffordabilityEngine
from estimator.errors import InvalidFieldError
from estimator.models import (
    PENDING_RESULT,
    AffordabilityResult,
    DebtCategory,
    DebtEntry,
)

logger = logging.getLogger(__name__)

ENTRY_FIELDS = ("category", "amount_text")

Subscriber = Callable[[AffordabilityResult], None]


def new_entry_id() -> str:
    return uuid.uuid4().hex


class DebtLedger:
    def __init__(
        self,
        engine: Optional[AffordabilityEngine] = None,
        id_factory: Callable[[], str] = new_entry_id,
    ):
        self.engine = engine or AffordabilityEngine()
        self._id_factory = id_factory
        self._entries: List[DebtEntry] = []
        self._subscribers: List[Subscriber] = []
        self.salary_text = ""
        self.result: AffordabilityResult = PENDING_RESULT

    # ---------- read side ----------

    @property
    def entries(self) -> Tuple[DebtEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DebtEntry]:
        return iter(self.entries)

    def get_entry(self, entry_id: str) -> Optional[DebtEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def total_debt(self) -> float:
        return self.engine.total_debt(self._entries)

    # ---------- mutations ----------

    def set_salary(self, text: str) -> AffordabilityResult:
        self.salary_text = "" if text is None else str(text)
        return self.recompute()

    def add_entry(self) -> DebtEntry:
        entry_id = self._id_factory()
        while self.get_entry(entry_id) is not None:
            logger.debug("id %s already in ledger, drawing another", entry_id)
            entry_id = self._id_factory()
        entry = DebtEntry(id=entry_id, category=DebtCategory.default(), amount_text="")
        self._entries.append(entry)
        logger.debug("added debt entry %s (%d total)", entry_id, len(self._entries))
        self.recompute()
        return entry

    def remove_entry(self, entry_id: str) -> AffordabilityResult:
        kept = [e for e in self._entries if e.id != entry_id]
        if len(kept) == len(self._entries):
            logger.debug("remove: no entry with id %s", entry_id)
        self._entries = kept
        return self.recompute()

    def update_entry(self, entry_id: str, field: str, value) -> AffordabilityResult:
        """Replace `field` ("category" or "amount_text") on one entry.

        Unknown ids are ignored. Unknown fields and categories outside
        DebtCategory raise, since the UI can only send those by mistake.
        """
        if field not in ENTRY_FIELDS:
            raise InvalidFieldError(f"Cannot update field {field!r}; expected one of {ENTRY_FIELDS}")
        entry = self.get_entry(entry_id)
        if entry is None:
            logger.debug("update: no entry with id %s", entry_id)
        elif field == "category":
            entry.category = DebtCategory.parse(value)
        else:
            entry.amount_text = "" if value is None else str(value)
        return self.recompute()

    def clear_all(self) -> AffordabilityResult:
        self.salary_text = ""
        self._entries = []
        logger.debug("ledger cleared")
        return self.recompute()

    # ---------- reactive recompute ----------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call `callback(result)` after every recompute. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def recompute(self) -> AffordabilityResult:
        self.result = self.engine.compute(self.salary_text, self._entries)
        for callback in list(self._subscribers):
            callback(self.result)
        return self.result
