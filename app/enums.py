from enum import Enum


class FetchStatus(str, Enum):
    idle = "idle"
    loading = "loading"
    succeeded = "succeeded"
    failed = "failed"


class FailureKind(str, Enum):
    transport = "transport"
    decode = "decode"
