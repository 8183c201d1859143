"""
Driver, Rider and Trip entities.

Entities are frozen Pydantic models in strict mode: an id must be a real
``int`` (not ``"4"``, ``4.5`` or ``[4]``) and text fields must be real,
non-empty strings. Any failing field raises ``pydantic.ValidationError``,
which is a ``ValueError``. No partially built entity is ever returned.

Each entity can be built two ways:

- ``from_mapping`` takes already-typed fields, as a caller would pass them.
- ``from_row`` takes one raw CSV record (all strings, in ``columns`` order),
  converts the integer columns and then goes through ``from_mapping``.
"""

import datetime as dt
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

E = TypeVar("E", bound="Entity")


def _coerce_int(column: str, raw: Any) -> int:
    """Convert one raw integer cell, e.g. ``" 42"`` -> ``42``."""
    if not isinstance(raw, str):
        msg = f"Raw value for '{column}' must be a string, got {type(raw).__name__}"
        raise ValueError(msg)
    try:
        return int(raw.strip())
    except ValueError as e:
        msg = f"Column '{column}' is not an integer: {raw!r}"
        raise ValueError(msg) from e


class Entity(BaseModel):
    """Base class for immutable, validated records."""

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    # Raw record layout: column names in file order and which ones are integers
    columns: ClassVar[tuple[str, ...]] = ()
    integer_columns: ClassVar[frozenset[str]] = frozenset()

    id: int

    @classmethod
    def from_mapping(cls: type[E], fields: Mapping[str, Any]) -> E:
        """
        Build an entity from named fields.

        Args:
            fields: Mapping holding at least every required field.
                Unknown keys are ignored.

        Returns:
            Validated entity.

        Raises:
            ValueError: If a field is missing, mistyped, empty or out of range.
        """
        return cls.model_validate(dict(fields))

    @classmethod
    def from_row(cls: type[E], row: Sequence[Any]) -> E:
        """
        Build an entity from one raw record.

        Args:
            row: Field values as strings, ordered like ``columns``.

        Raises:
            ValueError: On a wrong field count, a non-integer in an
                integer column, or any entity validation failure.
        """
        if len(row) != len(cls.columns):
            msg = (
                f"{cls.__name__} record needs {len(cls.columns)} fields "
                f"({', '.join(cls.columns)}), got {len(row)}"
            )
            raise ValueError(msg)

        fields = {
            column: _coerce_int(column, raw) if column in cls.integer_columns else raw
            for column, raw in zip(cls.columns, row, strict=True)
        }
        return cls.from_mapping(fields)


class Driver(Entity):
    """A registered driver and the vehicle they drive."""

    columns: ClassVar[tuple[str, ...]] = ("id", "name", "vin")
    integer_columns: ClassVar[frozenset[str]] = frozenset({"id"})

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    vin: str = Field(min_length=1)


class Rider(Entity):
    """A registered rider."""

    columns: ClassVar[tuple[str, ...]] = ("id", "name", "phone")
    integer_columns: ClassVar[frozenset[str]] = frozenset({"id"})

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)


class Trip(Entity):
    """
    One completed trip.

    ``driver_id`` and ``rider_id`` are not checked against the loaded
    drivers and riders here; a dangling reference is a valid trip and only
    shows up when the trip is resolved (see RelationalQueries).
    """

    columns: ClassVar[tuple[str, ...]] = ("id", "driver_id", "rider_id", "date", "rating")
    integer_columns: ClassVar[frozenset[str]] = frozenset(
        {"id", "driver_id", "rider_id", "rating"}
    )

    id: int = Field(ge=0)
    driver_id: int = Field(ge=0)
    rider_id: int = Field(ge=0)
    date: dt.date
    rating: int = Field(ge=1, le=5)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> dt.date:
        """Parse the trip date from a non-empty YYYY-MM-DD string."""
        if not isinstance(v, str) or not v.strip():
            msg = f"date must be a non-empty string, got: {v!r}"
            raise ValueError(msg)
        try:
            return dt.date.fromisoformat(v.strip())
        except ValueError as e:
            msg = f"date is not a valid calendar date: {v!r}"
            raise ValueError(msg) from e
