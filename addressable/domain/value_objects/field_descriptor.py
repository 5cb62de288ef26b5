"""FieldDescriptor — one form widget representing part of an address."""

from __future__ import annotations

from dataclasses import dataclass

from addressable.domain.value_objects.enums import FieldKind


@dataclass
class FieldDescriptor:
    name: str
    kind: FieldKind
    label: str
    choices: tuple[tuple[str, str], ...] = ()
    pattern: str | None = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "kind": self.kind.value,
            "label": self.label,
            "choices": [{"value": v, "label": lbl} for v, lbl in self.choices],
            "pattern": self.pattern,
        }
