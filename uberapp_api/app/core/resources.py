"""
Rule tables, partial‑update merging and validation shared by all resources.

Each resource (car, driver, passenger, ride) is described by a
:class:`ResourceRules` table listing its writable fields and the
constraints on them.  The same table drives three steps:

1. :func:`new_candidate` builds a candidate from a create payload;
2. :func:`merge_candidate` lays a sparse update payload over a stored
   snapshot;
3. :func:`validate_candidate` checks either kind of candidate.

Candidates are read‑only mappings over a fresh dict, so a rejected
candidate can simply be dropped and the stored snapshot is never
touched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
UUID_PATTERN = re.compile(r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$")


@dataclass(frozen=True)
class FieldRule:
    """Constraints for a single writable field.

    ``zero_is_absent`` marks numeric fields where the client sends ``0``
    to mean "not provided" (``maxPassengers``).  ``minimum`` is inclusive
    unless ``exclusive_minimum`` is set.
    """

    name: str
    required: bool = False
    choices: Optional[frozenset] = None
    pattern: Optional[re.Pattern] = None
    pattern_hint: str = "has an invalid format"
    minimum: Optional[float] = None
    exclusive_minimum: bool = False
    maximum: Optional[float] = None
    min_length: Optional[int] = None
    zero_is_absent: bool = False


@dataclass(frozen=True)
class ResourceRules:
    """Everything the generic pipeline needs to know about one resource."""

    label: str
    collection: str
    fields: Tuple[FieldRule, ...]
    read_only: Tuple[str, ...] = ()
    secret: Tuple[str, ...] = ()
    sortable_extra: Tuple[str, ...] = ("id",)

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self.fields)

    @property
    def sortable(self) -> Tuple[str, ...]:
        names = self.field_names + self.read_only + self.sortable_extra
        return tuple(name for name in names if name not in self.secret)


def is_absent(rule: FieldRule, value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and value == "":
        return True
    if rule.zero_is_absent and not isinstance(value, bool) and value == 0:
        return True
    return False


def new_candidate(payload: Mapping[str, Any], rules: ResourceRules) -> Mapping[str, Any]:
    """Build a create candidate holding every writable field of ``rules``."""
    data = {}
    for rule in rules.fields:
        value = payload.get(rule.name)
        data[rule.name] = None if is_absent(rule, value) else value
    return MappingProxyType(data)


def merge_candidate(
    stored: Mapping[str, Any],
    updates: Mapping[str, Any],
    rules: ResourceRules,
) -> Mapping[str, Any]:
    """Overlay ``updates`` on a copy of ``stored``.

    A field is taken from ``updates`` only when it is present and not
    empty; everything else, including ``id`` and read‑only fields, keeps
    its stored value.  ``stored`` is not modified.
    """
    data: Dict[str, Any] = dict(stored)
    for rule in rules.fields:
        value = updates.get(rule.name)
        if not is_absent(rule, value):
            data[rule.name] = value
    return MappingProxyType(data)


def changed_fields(
    stored: Mapping[str, Any],
    candidate: Mapping[str, Any],
    names: Iterable[str],
) -> Tuple[str, ...]:
    return tuple(name for name in names if stored.get(name) != candidate.get(name))


def _check(rule: FieldRule, value: Any) -> None:
    if is_absent(rule, value):
        if rule.required:
            raise ValidationError(rule.name, "is required")
        return
    if rule.choices is not None and value not in rule.choices:
        allowed = ", ".join(sorted(rule.choices))
        raise ValidationError(rule.name, f"must be one of {allowed}")
    if rule.min_length is not None and len(value) < rule.min_length:
        raise ValidationError(rule.name, f"must be at least {rule.min_length} characters")
    if rule.pattern is not None and not rule.pattern.match(str(value)):
        raise ValidationError(rule.name, rule.pattern_hint)
    if rule.minimum is not None:
        if rule.exclusive_minimum and not value > rule.minimum:
            raise ValidationError(rule.name, f"must be greater than {rule.minimum:g}")
        if not rule.exclusive_minimum and value < rule.minimum:
            raise ValidationError(rule.name, f"must be at least {rule.minimum:g}")
    if rule.maximum is not None and value > rule.maximum:
        raise ValidationError(rule.name, f"must be at most {rule.maximum:g}")


def validate_candidate(candidate: Mapping[str, Any], rules: ResourceRules) -> None:
    """Raise :class:`ValidationError` for the first field breaking its rule."""
    for rule in rules.fields:
        _check(rule, candidate.get(rule.name))
