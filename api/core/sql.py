"""
Dynamic SQL fragments for partial updates and filtered reads.

Column names only ever come from application code (translation tables and
literal column arguments). Values always travel as positional parameters:
asyncpg placeholders are $1, $2, ...
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class SetClause:
    assignments: list[str]
    values: list[Any]

    @property
    def sql(self) -> str:
        return ", ".join(self.assignments)

    @property
    def next_index(self) -> int:
        """Placeholder index for the first parameter appended after the values."""
        return len(self.values) + 1


def sql_for_partial_update(data: Mapping[str, Any], translation: Mapping[str, str]) -> SetClause:
    """
    Build the SET part of an UPDATE from a sparse field mapping.

        {"name": "C4", "numEmployees": 5}, {"numEmployees": "num_employees"}
        -> '"name"=$1, "num_employees"=$2', ["C4", 5]

    Keys missing from `translation` are used as the column name verbatim, so
    callers must restrict keys to known field names.
    """
    if not data:
        raise InvalidArgumentError("No data to update")

    assignments: list[str] = []
    values: list[Any] = []
    for idx, (key, value) in enumerate(data.items(), start=1):
        column = translation.get(key, key)
        assignments.append(f'"{column}"=${idx}')
        values.append(value)
    return SetClause(assignments=assignments, values=values)


class Tristate(enum.Enum):
    """Optional boolean criterion: only TRUE constrains a query."""

    ABSENT = "absent"
    FALSE = "false"
    TRUE = "true"

    @classmethod
    def parse(cls, raw: str | bool | None) -> Tristate:
        if raw is None:
            return cls.ABSENT
        if isinstance(raw, bool):
            return cls.TRUE if raw else cls.FALSE
        text = raw.strip().lower()
        if not text:
            return cls.ABSENT
        if text == "true":
            return cls.TRUE
        if text == "false":
            return cls.FALSE
        raise InvalidArgumentError(f"Expected true or false, got: {raw}")


def escape_like(fragment: str) -> str:
    return fragment.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass(frozen=True)
class Predicate:
    # `{}` marks each parameter slot, in the order of `params`.
    template: str
    params: tuple[Any, ...] = ()


@dataclass(frozen=True)
class Filter:
    where: str
    params: list[Any]

    @property
    def is_empty(self) -> bool:
        return not self.where


@dataclass
class FilterBuilder:
    """
    Collects one predicate per present criterion and AND-joins them.

    Placeholders are numbered once, in `build()`, following the order the
    predicates were added.
    """

    predicates: list[Predicate] = field(default_factory=list)

    def contains(self, column: str, fragment: str | None) -> FilterBuilder:
        if fragment is None or fragment == "":
            return self
        self.predicates.append(Predicate(f"{column} ILIKE '%' || {{}} || '%'", (escape_like(fragment),)))
        return self

    def between(self, column: str, lower: int | None, upper: int | None) -> FilterBuilder:
        if lower is not None and upper is not None:
            if lower > upper:
                raise InvalidArgumentError("Minimum cannot be greater than maximum")
            self.predicates.append(Predicate(f"{column} BETWEEN {{}} AND {{}}", (lower, upper)))
        elif lower is not None:
            self.predicates.append(Predicate(f"{column} >= {{}}", (lower,)))
        elif upper is not None:
            self.predicates.append(Predicate(f"{column} <= {{}}", (upper,)))
        return self

    def flag(self, condition: str, state: Tristate) -> FilterBuilder:
        if state is Tristate.TRUE:
            self.predicates.append(Predicate(condition))
        return self

    def build(self) -> Filter:
        clauses: list[str] = []
        params: list[Any] = []
        for predicate in self.predicates:
            slots = [f"${len(params) + i}" for i in range(1, len(predicate.params) + 1)]
            clauses.append(predicate.template.format(*slots))
            params.extend(predicate.params)
        return Filter(where=" AND ".join(clauses), params=params)
