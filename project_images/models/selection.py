from dataclasses import dataclass
from enum import Enum


class SelectionErrorKind(Enum):
    NOT_FOUND = "not_found"
    STORE_UNAVAILABLE = "store_unavailable"
    REJECTED = "rejected"
    OTHER = "other"


@dataclass(frozen=True)
class SelectionError:
    kind: SelectionErrorKind
    message: str


@dataclass(frozen=True)
class SelectionResult:
    ok: bool
    image_name: str | None = None
    error: SelectionError | None = None

    def __post_init__(self):
        # a result is either accepted with no error, or failed with one
        if self.ok == (self.error is not None):
            raise ValueError("SelectionResult must carry an error exactly when it is not ok")
        if not self.ok and self.image_name is not None:
            raise ValueError("Failed SelectionResult cannot carry an image name")

    @classmethod
    def accepted(cls, image_name: str | None) -> "SelectionResult":
        return cls(ok=True, image_name=image_name)

    @classmethod
    def failed(cls, kind: SelectionErrorKind, message: str) -> "SelectionResult":
        return cls(ok=False, error=SelectionError(kind=kind, message=message))
