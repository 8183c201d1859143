"""
Entity registries.

A registry is the load-once, read-only collection of every entity of one
type. It is built from a RawRecordSource and then handed explicitly to
whatever needs it; there is no process-wide cache.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from rideshare.domain.entities import Driver, Entity, Rider, Trip
from rideshare.utils.logging import get_logger

if TYPE_CHECKING:
    from rideshare.ingestion.source import RawRecordSource

log = get_logger(__name__)

E = TypeVar("E", bound=Entity)
R = TypeVar("R", bound="EntityRegistry[Any]")


class EntityRegistry(ABC, Generic[E]):
    """
    Ordered, immutable collection of entities of one type.

    Entities keep the order of the source rows. Nothing is sorted or
    deduplicated; when two rows share an id, ``find`` returns the first.
    """

    entity_type: ClassVar[type[Entity]]

    def __init__(self, entities: Iterable[E] = ()) -> None:
        """
        Initialize registry.

        Args:
            entities: Entities in load order.
        """
        self._entities: tuple[E, ...] = tuple(entities)
        self._by_id: dict[int, E] = {}
        for entity in self._entities:
            self._by_id.setdefault(entity.id, entity)

    @classmethod
    @abstractmethod
    def _read_rows(cls, source: "RawRecordSource") -> Sequence[Sequence[str]]:
        """Fetch this registry's table from the source. Implemented by subclasses."""
        ...

    @classmethod
    def from_rows(cls: type[R], rows: Sequence[Sequence[str]]) -> R:
        """
        Build a registry from raw rows, skipping the header row.

        Raises:
            ValueError: On the first row that is not a valid entity. The
                whole load is abandoned; no partial registry is returned.
        """
        entities = [cls.entity_type.from_row(row) for row in list(rows)[1:]]
        return cls(entities)

    @classmethod
    def load_all(cls: type[R], source: "RawRecordSource") -> R:
        """
        Load every entity of this type from a source.

        Args:
            source: Raw record source; its first row is a header.

        Returns:
            Registry holding one entity per data row, in source order.
        """
        registry = cls.from_rows(cls._read_rows(source))
        log.info(
            "Loaded entities",
            entity=cls.entity_type.__name__,
            count=registry.count(),
        )
        return registry

    def all(self) -> tuple[E, ...]:
        """Every entity in load order."""
        return self._entities

    def count(self) -> int:
        """Number of loaded entities."""
        return len(self._entities)

    def find(self, entity_id: int) -> E | None:
        """Entity with the given id, or None."""
        return self._by_id.get(entity_id)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[E]:
        return iter(self._entities)

    def __getitem__(self, index: int) -> E:
        return self._entities[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntityRegistry):
            return NotImplemented
        return type(self) is type(other) and self._entities == other._entities

    def __hash__(self) -> int:
        return hash((type(self), self._entities))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self.count()})"


class DriverRegistry(EntityRegistry[Driver]):
    """All loaded drivers."""

    entity_type = Driver

    @classmethod
    def _read_rows(cls, source: "RawRecordSource") -> Sequence[Sequence[str]]:
        return source.driver_rows()


class RiderRegistry(EntityRegistry[Rider]):
    """All loaded riders."""

    entity_type = Rider

    @classmethod
    def _read_rows(cls, source: "RawRecordSource") -> Sequence[Sequence[str]]:
        return source.rider_rows()


class TripRegistry(EntityRegistry[Trip]):
    """All loaded trips."""

    entity_type = Trip

    @classmethod
    def _read_rows(cls, source: "RawRecordSource") -> Sequence[Sequence[str]]:
        return source.trip_rows()
