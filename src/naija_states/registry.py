"""
Read-only registry of Nigerian states.

The default registry is built from the embedded dataset the first time it is
needed and then shared for the lifetime of the process. Records and the
sequences they hold are immutable, so concurrent readers need no locking.
"""

import logging
from functools import lru_cache
from typing import Any, Iterable, Iterator, Mapping
from pydantic import TypeAdapter

from .data import DATASET_FILE, read_dataset
from .errors import InvalidInput, StateNotFound
from .models import StateRecord
from .normalize import normalize, resolve_alias, strip_blanks
from .settings import get_settings

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[StateRecord])


class Registry:
    def __init__(self, records: Iterable[StateRecord]):
        self._records: tuple[StateRecord, ...] = tuple(records)

        for record in self._records:
            if not isinstance(record, StateRecord):
                raise TypeError(
                    f"Registry expects StateRecord items, got {type(record).__name__}; "
                    "use Registry.from_records() for raw mappings"
                )

        seen: dict[str, str] = {}
        for record in self._records:
            key = normalize(record.name)
            if key in seen:
                raise ValueError(
                    f"Duplicate state name '{record.name}' (clashes with '{seen[key]}')"
                )
            seen[key] = record.name

    @classmethod
    def from_records(cls, records: Iterable[StateRecord | Mapping[str, Any]]) -> "Registry":
        """
        Build a registry from records or raw mappings in the dataset shape
        (``state``, ``senatorial_districts``, ``lgas``).
        """
        return cls(
            record if isinstance(record, StateRecord) else StateRecord.model_validate(record)
            for record in records
        )

    @classmethod
    def from_json(cls, payload: bytes | str) -> "Registry":
        return cls(_records_adapter.validate_json(payload))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StateRecord]:
        return iter(self._records)

    def __contains__(self, query: object) -> bool:
        if not isinstance(query, str):
            return False
        try:
            self.find(query)
        except (InvalidInput, StateNotFound):
            return False
        return True

    def all(self) -> tuple[StateRecord, ...]:
        """Every record, in dataset order."""
        return self._records

    def names(self) -> tuple[str, ...]:
        return tuple(record.name for record in self._records)

    def find(self, query: str, *, case_sensitive: bool = False) -> StateRecord:
        """
        Look up a state by name.

        Matching ignores case and surrounding whitespace, and the common
        names of the Federal Capital Territory ("FCT", "Abuja", ...) resolve
        to it. With ``case_sensitive=True`` the stripped query must equal the
        state name exactly; FCT aliases still apply.

        Raises:
            InvalidInput: the query is empty or only whitespace
            StateNotFound: no state matches
        """
        normalized = normalize(query)
        if not normalized:
            raise InvalidInput(query)

        resolved = resolve_alias(normalized)
        exact = case_sensitive and resolved == normalized
        target = strip_blanks(query) if exact else normalize(resolved)

        for record in self._records:
            name = record.name if exact else normalize(record.name)
            if name == target:
                return record

        logger.debug(f"No state matches '{query}'")
        raise StateNotFound(query)

    def districts_of(self, query: str) -> tuple[str, ...]:
        return self.find(query).senatorial_districts

    def record_of(self, query: str) -> StateRecord:
        return self.find(query)


def load_registry(payload: bytes | str | None = None, expected_count: int | None = None) -> Registry:
    """
    Build a registry from JSON, defaulting to the embedded dataset.

    Raises ``ValueError`` when the number of records differs from
    ``expected_count`` (taken from settings when not given).
    """
    source = "provided payload"
    if payload is None:
        payload = read_dataset()
        source = DATASET_FILE
    if expected_count is None:
        expected_count = get_settings().expected_state_count

    registry = Registry.from_json(payload)
    if len(registry) != expected_count:
        raise ValueError(
            f"Expected {expected_count} states in {source}, found {len(registry)}"
        )
    logger.info(f"Loaded {len(registry)} states from {source}")
    return registry


@lru_cache
def default_registry() -> Registry:
    return load_registry()


def all_states() -> tuple[StateRecord, ...]:
    return default_registry().all()


def states() -> tuple[str, ...]:
    return default_registry().names()


def find_state(query: str, *, case_sensitive: bool = False) -> StateRecord:
    return default_registry().find(query, case_sensitive=case_sensitive)


def districts_of(query: str) -> tuple[str, ...]:
    return default_registry().districts_of(query)


def record_of(query: str) -> StateRecord:
    return default_registry().record_of(query)


# Short names of the public API
senatorial_districts = districts_of
lgas = record_of
