"""Capability protocols for appointment identifiers and remarks."""

from typing import Protocol, TypeVar

NoteT = TypeVar("NoteT")

# Blank line between an existing remark and an appended one
REMARK_SEPARATOR = "\n\n"


class Identifier(Protocol):
    """Anything usable as a doctor or patient reference."""

    def __eq__(self, other: object, /) -> bool: ...

    def __str__(self) -> str: ...


class RemarkJoiner(Protocol[NoteT]):
    """Combines an existing remark with a newly appended one."""

    def __call__(self, existing: NoteT, new: NoteT | None, /) -> NoteT: ...


def join_text_remarks(existing: str, new: str | None) -> str:
    """Join two text remarks with a blank line between them, rendering None as text."""
    return f"{existing}{REMARK_SEPARATOR}{new!s}"
