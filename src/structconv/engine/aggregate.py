"""Error aggregator — collect field failures, raise once."""

from __future__ import annotations

from collections.abc import Iterable

from structconv.domain.errors import DEFAULT_MESSAGE, DecodeError, FieldError


class ErrorCollector:
    """Ordered field errors gathered during one decode call."""

    def __init__(self) -> None:
        self._errors: list[FieldError] = []

    def add(self, name: str, *messages: str, value: str = "") -> None:
        self._errors.append(FieldError(name=name, value=value, messages=list(messages)))

    def extend(self, errors: Iterable[FieldError]) -> None:
        self._errors.extend(errors)

    @property
    def errors(self) -> list[FieldError]:
        return list(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def raise_if_any(self, message: str = DEFAULT_MESSAGE) -> None:
        """Raise a :class:`DecodeError` carrying every collected error.

        Never raises an empty aggregate.
        """
        if self._errors:
            raise DecodeError(self._errors, message=message)
