"""Item record and its on-disk encoding."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .errors import StoreEncodingError


class Status(str, Enum):
    """Item status. The value is the status character used on disk."""

    TODO = "0"
    DONE = "1"

    def flipped(self) -> "Status":
        return Status.DONE if self is Status.TODO else Status.TODO


@dataclass(frozen=True)
class Item:
    """A single checkable entry of a topic."""

    status: Status
    text: str

    @classmethod
    def todo(cls, text: str) -> "Item":
        return cls(Status.TODO, text)

    @property
    def done(self) -> bool:
        return self.status is Status.DONE

    def toggled(self) -> "Item":
        """Return a copy with the status flipped and the text unchanged."""
        return replace(self, status=self.status.flipped())

    def encode(self) -> str:
        """Encode as ``<status char><text>``, e.g. ``"0Buy milk"``."""
        return f"{self.status.value}{self.text}"

    @classmethod
    def decode(cls, raw: str) -> "Item":
        """Decode a ``<status char><text>`` string.

        Raises:
            StoreEncodingError: if ``raw`` is not a string, is empty, or starts
                with anything other than ``'0'`` or ``'1'``.
        """
        if not isinstance(raw, str):
            raise StoreEncodingError(f"item must be a string, got {type(raw).__name__}")
        if not raw:
            raise StoreEncodingError("item string is empty (missing status character)")
        try:
            status = Status(raw[0])
        except ValueError:
            raise StoreEncodingError(
                f"unknown status character {raw[0]!r} in item {raw!r}"
            ) from None
        return cls(status, raw[1:])
