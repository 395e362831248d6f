from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from app.enums import FetchStatus
from app.schemas import Character


@dataclass(frozen=True)
class Idle:
    status: ClassVar[FetchStatus] = FetchStatus.idle


@dataclass(frozen=True)
class Loading:
    status: ClassVar[FetchStatus] = FetchStatus.loading


@dataclass(frozen=True)
class Succeeded:
    """Records in the order the remote source returned them."""

    records: tuple[Character, ...]
    status: ClassVar[FetchStatus] = FetchStatus.succeeded
    _index: dict[int, Character] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", tuple(self.records))
        object.__setattr__(self, "_index", {record.id: record for record in self.records})

    def find(self, record_id: int) -> Character | None:
        return self._index.get(record_id)


@dataclass(frozen=True)
class Failed:
    kind: str
    error: str
    status: ClassVar[FetchStatus] = FetchStatus.failed

    @property
    def description(self) -> str:
        return f"{self.kind}: {self.error}"


FetchState = Union[Idle, Loading, Succeeded, Failed]


def records_of(state: FetchState) -> tuple[Character, ...]:
    if isinstance(state, Succeeded):
        return state.records
    return ()


def error_of(state: FetchState) -> str | None:
    if isinstance(state, Failed):
        return state.description
    return None
