"""AllowedValues — which values a state/country field may take.

Three cases:

- free text: anything goes, the user types it in
- fixed: the field is forced to one value and not shown to the user
- enumerated: the user picks from a closed, ordered list
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from addressable.domain.value_objects.enums import ChoiceKind


@dataclass(frozen=True)
class AllowedValues:
    kind: ChoiceKind = ChoiceKind.FREE_TEXT
    values: tuple[str, ...] = ()

    @classmethod
    def free_text(cls) -> AllowedValues:
        return cls()

    @classmethod
    def fixed(cls, value: str) -> AllowedValues:
        return cls(kind=ChoiceKind.FIXED, values=(value,))

    @classmethod
    def enumerated(cls, values: Iterable[str]) -> AllowedValues:
        return cls(kind=ChoiceKind.ENUMERATED, values=tuple(values))

    @classmethod
    def coerce(cls, raw: object) -> AllowedValues:
        """Map raw configuration input onto one of the three cases.

        ``None`` → free text, ``str`` → fixed, list/tuple → enumerated.
        Anything else falls back to free text.
        """
        if isinstance(raw, AllowedValues):
            return raw
        if isinstance(raw, str):
            return cls.fixed(raw)
        if isinstance(raw, (list, tuple)):
            return cls.enumerated(str(v) for v in raw)
        return cls.free_text()

    @property
    def is_fixed(self) -> bool:
        return self.kind == ChoiceKind.FIXED

    @property
    def is_enumerated(self) -> bool:
        return self.kind == ChoiceKind.ENUMERATED

    @property
    def fixed_value(self) -> str | None:
        return self.values[0] if self.is_fixed else None
