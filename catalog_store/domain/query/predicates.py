"""Query predicates evaluated against stored documents.

A predicate is a small immutable tree. Each variant knows how to test a single
document (a plain mapping) through ``matches``. ``evaluate`` is the entry point
used by collections and treats a missing predicate as "match everything".

Field names may be dotted (``customer_info.email``) to reach into nested
mappings. A field that cannot be resolved never satisfies a clause, except
for an empty ``TextSearch`` term or an empty ``And``.
"""

from __future__ import annotations
import re
import dataclasses
from dataclasses import dataclass
from numbers import Real
from typing import Any, Mapping, Optional, Pattern, Tuple, Union

from ...exceptions import InvalidQueryError

_MISSING = object()


def resolve_field(document: Mapping[str, Any], path: str) -> Any:
    """Return the value at ``path`` or a sentinel when any segment is absent."""
    value: Any = document
    for part in path.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return _MISSING
        value = value[part]
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class Equals:
    """Exact equality on a field."""
    field: str
    value: Any

    def matches(self, document: Mapping[str, Any]) -> bool:
        return resolve_field(document, self.field) == self.value


@dataclass(frozen=True)
class RegexMatch:
    """Regular expression match on a string field.

    ``anchored`` requires the whole value to match (category filters);
    otherwise the pattern may match anywhere in the value.
    """
    field: str
    pattern: str
    anchored: bool = False
    case_insensitive: bool = True
    _compiled: Pattern = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        flags = re.IGNORECASE if self.case_insensitive else 0
        try:
            compiled = re.compile(self.pattern, flags)
        except re.error as e:
            raise InvalidQueryError(
                message=f"Invalid pattern for field '{self.field}': {e}",
                details={'field': self.field, 'pattern': self.pattern}
            ) from e
        object.__setattr__(self, "_compiled", compiled)

    def matches(self, document: Mapping[str, Any]) -> bool:
        value = resolve_field(document, self.field)
        if not isinstance(value, str):
            return False
        if self.anchored:
            return self._compiled.fullmatch(value) is not None
        return self._compiled.search(value) is not None


@dataclass(frozen=True)
class AnyOf:
    """Field shares at least one element with ``values``.

    A list field is intersected with ``values``; a scalar field is treated as a
    one-element list. Selecting more values broadens the result.
    """
    field: str
    values: Tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def matches(self, document: Mapping[str, Any]) -> bool:
        value = resolve_field(document, self.field)
        if value is _MISSING or value is None:
            return False
        candidates = value if isinstance(value, (list, tuple, set)) else [value]
        return any(item in candidates for item in self.values)


@dataclass(frozen=True)
class Range:
    """Inclusive numeric range; either bound may be omitted."""
    field: str
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    def __post_init__(self) -> None:
        for name in ("minimum", "maximum"):
            bound = getattr(self, name)
            if bound is not None and not _is_number(bound):
                raise InvalidQueryError(
                    message=f"Range {name} for field '{self.field}' must be a number",
                    details={'field': self.field, name: bound}
                )

    def matches(self, document: Mapping[str, Any]) -> bool:
        value = resolve_field(document, self.field)
        if not _is_number(value):
            return False
        if self.minimum is not None and value < self.minimum:
            return False
        if self.maximum is not None and value > self.maximum:
            return False
        return True


@dataclass(frozen=True)
class TextSearch:
    """Case-insensitive substring search across several text fields."""
    fields: Tuple[str, ...]
    term: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    def matches(self, document: Mapping[str, Any]) -> bool:
        needle = self.term.casefold()
        if not needle:
            return True
        for name in self.fields:
            value = resolve_field(document, name)
            if isinstance(value, str) and needle in value.casefold():
                return True
        return False


@dataclass(frozen=True)
class And:
    """Conjunction of clauses."""
    clauses: Tuple["Predicate", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "clauses", tuple(self.clauses))

    def matches(self, document: Mapping[str, Any]) -> bool:
        return all(clause.matches(document) for clause in self.clauses)


Predicate = Union[Equals, RegexMatch, AnyOf, Range, TextSearch, And]


def evaluate(predicate: Optional[Predicate], document: Mapping[str, Any]) -> bool:
    """Test ``document`` against ``predicate``; ``None`` matches everything."""
    if predicate is None:
        return True
    return predicate.matches(document)
