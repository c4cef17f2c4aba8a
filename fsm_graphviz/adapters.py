'''
Adapters that turn domain-specific transition records into uniform edges.

Every record shape gets its own adapter class; the emitter only ever sees
the Edge tuples they produce.
'''

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, NamedTuple, Optional

logger = logging.getLogger(__name__)


class AdaptError(ValueError):
    """Raised when a transition record cannot be mapped to an Edge."""


class Edge(NamedTuple):
    event: str
    from_state: str
    to_state: str


def _field(record: Any, key: str) -> Optional[Any]:
    # records may be dicts or plain objects
    if isinstance(record, dict):
        return record.get(key)
    return getattr(record, key, None)


def _token(record: Any, key: str) -> str:
    value = _field(record, key)
    if value is None:
        raise AdaptError(f"missing field {key!r} in transition record {record!r}")
    if not isinstance(value, str) or not value.strip():
        raise AdaptError(f"field {key!r} must be a non-empty string, got {value!r}")
    _check_quotable(value)
    return value


def _check_quotable(value: str):
    # dot cannot close a quoted id after a trailing backslash
    if value.endswith("\\"):
        raise AdaptError(f"token {value!r} ends with a backslash")


class BaseAdapter(ABC):
    """
    Holds a copy of the source records and maps each one through `into`.

    Subclasses only implement `into(record) -> Edge`; ordering is kept and
    nothing is deduplicated here.
    """

    def __init__(self, sources: Iterable[Any]):
        self._sources = tuple(sources)

    @abstractmethod
    def into(self, source: Any) -> Edge:
        ...

    def adapt(self) -> List[Edge]:
        edges = []
        for idx, source in enumerate(self._sources):
            try:
                edges.append(self.into(source))
            except AdaptError as e:
                raise AdaptError(f"record #{idx}: {e}") from e
        logger.debug("%s adapted %d records", type(self).__name__, len(edges))
        return edges


class StateMachineAdapter(BaseAdapter):
    """Records shaped as {event, from_state, expected_transition_state}."""

    def into(self, source):
        return Edge(
            event=_token(source, "event"),
            from_state=_token(source, "from_state"),
            to_state=_token(source, "expected_transition_state"),
        )


class TransitionAdapter(BaseAdapter):
    """
    FSM JSON transitions: {"from": ..., "event": ..., "to": ...}.

    Older extractions name the trigger "requisite" instead of "event";
    it is used when "event" is missing or blank.
    """

    def into(self, source):
        event = _field(source, "event")
        if not isinstance(event, str) or not event.strip():
            event = _token(source, "requisite")
        else:
            _check_quotable(event)
        return Edge(
            event=event,
            from_state=_token(source, "from"),
            to_state=_token(source, "to"),
        )


class TupleAdapter(BaseAdapter):
    # (from, event, to) triples
    def into(self, source):
        try:
            from_state, event, to_state = source
        except (TypeError, ValueError):
            raise AdaptError(f"expected a (from, event, to) triple, got {source!r}")
        for value in (from_state, event, to_state):
            if not isinstance(value, str) or not value.strip():
                raise AdaptError(f"triple {source!r} holds a non-string or empty token")
            _check_quotable(value)
        return Edge(event=event, from_state=from_state, to_state=to_state)


ADAPTERS = {
    "state_machine": StateMachineAdapter,
    "transition": TransitionAdapter,
    "tuple": TupleAdapter,
}
