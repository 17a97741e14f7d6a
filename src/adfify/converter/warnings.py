"""Accumulate skipped node types during a single conversion."""

from __future__ import annotations

from adfify.models import UNSUPPORTED_NODE, ConversionWarning


class WarningCollector:
    """Set of node type names skipped during one conversion.

    Adding the same name repeatedly records it once.  :meth:`finish`
    emits one warning per name, sorted by name, so output does not
    depend on where or how often a construct appeared.
    """

    __slots__ = ("_names",)

    def __init__(self) -> None:
        self._names: set[str] = set()

    def add(self, name: str) -> None:
        self._names.add(name)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def names(self) -> list[str]:
        return sorted(self._names)

    def finish(self) -> list[ConversionWarning]:
        return [
            ConversionWarning(
                code=UNSUPPORTED_NODE,
                message=f"skipped unsupported node type '{name}'",
                context={"node_type": name},
            )
            for name in self.names()
        ]
