from abc import ABC, abstractmethod

from app.enums import FailureKind
from app.services.fetch_state import FetchState


class FetchError(Exception):
    kind: FailureKind

    def describe(self) -> str:
        return f"{type(self).__name__}: {self}"


class TransportError(FetchError):
    kind = FailureKind.transport


class RemoteStatusError(TransportError):
    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP {status_code} from {url}")


class DecodeError(FetchError):
    kind = FailureKind.decode


class RecordFetcher(ABC):
    name: str

    @abstractmethod
    async def fetch(self) -> FetchState:
        """Perform one request and return Succeeded or Failed.

        Transport and decode failures are converted into a Failed state; they
        never propagate to the caller.
        """
