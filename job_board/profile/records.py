"""Record accessor protocol and an in-memory record."""

import copy
from typing import Any, Optional, Protocol


class ProfileRecord(Protocol):
    """Named-field access to one profile record and its pre-write snapshot."""

    def get(self, field: str) -> Any: ...

    def set(self, field: str, value: Any) -> None: ...

    def original(self) -> Optional["ProfileRecord"]: ...


class DictRecord:
    """Dict-backed record, used by the CLI and tests.

    ``original`` is the persisted state before the current write, or None for a
    record that is being created.
    """

    def __init__(self, data: Optional[dict] = None, original: Optional[dict] = None):
        self.data = dict(data or {})
        self._original = DictRecord(copy.deepcopy(original)) if original is not None else None

    def get(self, field: str) -> Any:
        return self.data.get(field)

    def set(self, field: str, value: Any) -> None:
        self.data[field] = value

    def original(self) -> Optional["DictRecord"]:
        return self._original
