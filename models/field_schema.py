# -*- coding: utf-8 -*-
"""
Field schema for wizard answers.

Each wizard variant declares its answer fields up front so that names and
value types are checked when the wizard is defined, not when a step is
rendered.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from models.catalog_options import Option, option_values


class FieldKind(Enum):
    """Value type of an answer field."""
    TEXT = "text"                  # free text
    CHOICE = "choice"              # one value out of an option list
    MULTI_CHOICE = "multi_choice"  # ordered set of option values
    FLAG = "flag"                  # boolean


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of one answer field."""
    name: str
    kind: FieldKind = FieldKind.TEXT
    default: Any = None
    options: Tuple[Option, ...] = ()

    def default_value(self) -> Any:
        if self.default is not None:
            return copy.deepcopy(self.default)
        if self.kind == FieldKind.MULTI_CHOICE:
            return []
        if self.kind == FieldKind.FLAG:
            return False
        return ""

    def default_matches_kind(self) -> bool:
        default = self.default_value()
        return self.accepts(default) and self.allows(default)

    def accepts(self, value: Any) -> bool:
        """True if value already has this field's type."""
        if self.kind == FieldKind.FLAG:
            return isinstance(value, bool)
        if self.kind == FieldKind.MULTI_CHOICE:
            return isinstance(value, list) and all(isinstance(v, str) for v in value)
        return isinstance(value, str)

    def allows(self, value: Any) -> bool:
        """
        True if value stays within the declared options.

        Fields without options allow anything; an empty choice is always
        allowed since it means "not answered yet".
        """
        if not self.options:
            return True
        allowed = option_values(self.options)
        if self.kind == FieldKind.MULTI_CHOICE:
            return all(member in allowed for member in value)
        if self.kind == FieldKind.CHOICE:
            return value == "" or value in allowed
        return True

    def coerce(self, value: Any) -> Any:
        """
        Convert value to this field's type.

        Raises:
            ValueError: If value is not a boolean for a flag, not a collection
                for a multi-choice field, or outside the declared options
        """
        if self.kind == FieldKind.FLAG:
            if not isinstance(value, bool):
                raise ValueError(f"{self.name}: expected a boolean, got {value!r}")
            return value
        if self.kind == FieldKind.MULTI_CHOICE:
            if not isinstance(value, (list, tuple, set, frozenset)):
                raise ValueError(f"{self.name}: expected a list, got {value!r}")
            coerced: Any = []
            for item in value:
                if isinstance(item, str) and item not in coerced:
                    coerced.append(item)
        elif value is None:
            coerced = ""
        else:
            coerced = value if isinstance(value, str) else str(value)

        if not self.allows(coerced):
            raise ValueError(f"{self.name}: {coerced!r} is not one of the options")
        return coerced


class FormSchema:
    """Ordered collection of field specs for one wizard variant."""

    def __init__(self, fields: Iterable[FieldSpec]):
        self._fields: Dict[str, FieldSpec] = {}
        for spec in fields:
            self._fields[spec.name] = spec

    def __contains__(self, name: str) -> bool:
        return name in self._fields

    def __iter__(self):
        return iter(self._fields.values())

    @property
    def names(self) -> List[str]:
        return list(self._fields.keys())

    def get(self, name: str) -> Optional[FieldSpec]:
        return self._fields.get(name)

    def is_set_field(self, name: str) -> bool:
        spec = self._fields.get(name)
        return spec is not None and spec.kind == FieldKind.MULTI_CHOICE

    def defaults(self) -> Dict[str, Any]:
        """Fresh answer dictionary with every field at its default."""
        return {spec.name: spec.default_value() for spec in self._fields.values()}

    def normalize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Build a complete answer dictionary from untrusted data.

        Unknown keys are dropped, missing keys take their default and
        values of the wrong type or outside the field's options are
        replaced by the default.
        """
        answers = self.defaults()
        for name, spec in self._fields.items():
            value = data.get(name)
            if value is None:
                continue
            if spec.kind != FieldKind.MULTI_CHOICE and not spec.accepts(value):
                continue
            try:
                answers[name] = spec.coerce(value)
            except ValueError:
                continue
        return answers
