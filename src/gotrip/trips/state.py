"""Trip status enumeration and transition table."""

from enum import Enum

from gotrip.core.exceptions import InvalidTransition


class TripStatus(str, Enum):
    """Trip lifecycle states."""

    SEARCHING = "searching"
    ACCEPTED = "accepted"
    ARRIVED = "arrived"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED_BY_RIDER = "cancelled_by_rider"
    CANCELLED_BY_PROVIDER = "cancelled_by_provider"
    NO_MATCH_FOUND = "no_match_found"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES

    def to_event_type(self) -> str:
        """Notifier event type for entering this state (e.g. 'trip.accepted')."""
        return f"trip.{self.value}"


class TripTrigger(str, Enum):
    """Events that move a trip between states."""

    ACCEPT = "accept"
    ARRIVE = "arrive"
    START = "start"
    COMPLETE = "complete"
    CANCEL_BY_RIDER = "cancel_by_rider"
    CANCEL_BY_PROVIDER = "cancel_by_provider"
    NO_MATCH = "no_match"


TERMINAL_STATUSES = frozenset(
    {
        TripStatus.COMPLETED,
        TripStatus.CANCELLED_BY_RIDER,
        TripStatus.CANCELLED_BY_PROVIDER,
        TripStatus.NO_MATCH_FOUND,
    }
)

ACTIVE_STATUSES = frozenset(s for s in TripStatus if s not in TERMINAL_STATUSES)

_CANCEL_EDGES = {
    TripTrigger.CANCEL_BY_RIDER: TripStatus.CANCELLED_BY_RIDER,
    TripTrigger.CANCEL_BY_PROVIDER: TripStatus.CANCELLED_BY_PROVIDER,
}

VALID_TRANSITIONS: dict[TripStatus, dict[TripTrigger, TripStatus]] = {
    TripStatus.SEARCHING: {
        TripTrigger.ACCEPT: TripStatus.ACCEPTED,
        TripTrigger.NO_MATCH: TripStatus.NO_MATCH_FOUND,
        **_CANCEL_EDGES,
    },
    TripStatus.ACCEPTED: {TripTrigger.ARRIVE: TripStatus.ARRIVED, **_CANCEL_EDGES},
    TripStatus.ARRIVED: {TripTrigger.START: TripStatus.IN_PROGRESS, **_CANCEL_EDGES},
    TripStatus.IN_PROGRESS: {TripTrigger.COMPLETE: TripStatus.COMPLETED, **_CANCEL_EDGES},
    TripStatus.COMPLETED: {},
    TripStatus.CANCELLED_BY_RIDER: {},
    TripStatus.CANCELLED_BY_PROVIDER: {},
    TripStatus.NO_MATCH_FOUND: {},
}


def next_status(status: TripStatus, trigger: TripTrigger) -> TripStatus:
    """Target status for ``trigger`` applied in ``status``.

    Raises:
        InvalidTransition: if the edge is not in the table.
    """
    details = {"from_status": status.value, "trigger": trigger.value}
    if status.is_terminal:
        raise InvalidTransition(
            f"Cannot {trigger.value} a trip in terminal state {status.value}", details
        )

    target = VALID_TRANSITIONS[status].get(trigger)
    if target is None:
        raise InvalidTransition(
            f"Invalid transition from {status.value} via {trigger.value}", details
        )
    return target
