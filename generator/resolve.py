"""Stateless decoding of SUIDs. Input is not validated; any int decodes to its bit pattern."""

from datetime import datetime

from generator.layout import (
    INSTANCE_ID_SHIFT,
    MAXIMUM_INSTANCE_ID,
    MAXIMUM_PERIOD,
    MAXIMUM_SEQUENCE,
    PERIOD_SHIFT,
    TIME_STEP,
)
from generator.suid import landmark_millis
from utils.timestamp import format_timestamp, to_datetime


def resolve_period(id):
    return (id >> PERIOD_SHIFT) & MAXIMUM_PERIOD


def resolve_millis(landmark_year, id):
    """Start of the id's period in ms since Unix epoch."""
    return landmark_millis(landmark_year) + resolve_period(id) * TIME_STEP


def resolve_instant(landmark_year, id):
    """Start of the id's period as an aware UTC datetime."""
    return to_datetime(resolve_millis(landmark_year, id))


def resolve_local_datetime(landmark_year, id):
    """Start of the id's period as a naive local datetime."""
    return datetime.fromtimestamp(resolve_millis(landmark_year, id) / 1000)


def resolve_instance_id(id):
    return (id >> INSTANCE_ID_SHIFT) & MAXIMUM_INSTANCE_ID


def resolve_sequence(id):
    return id & MAXIMUM_SEQUENCE


def resolve_lower_ipv4(instance_id):
    """Render an IP-derived instance id as its two low octets, e.g. ``"1.42"``."""
    return f"{instance_id >> 8}.{instance_id & 255}"


class DecomposedId:
    __slots__ = ("id", "period", "millis", "instance_id", "sequence")

    def __init__(self, id, period, millis, instance_id, sequence):
        self.id = id
        self.period = period
        self.millis = millis
        self.instance_id = instance_id
        self.sequence = sequence

    @property
    def lower_ipv4(self):
        return resolve_lower_ipv4(self.instance_id)

    def to_dict(self):
        return {
            "id": self.id,
            "id_str": str(self.id),
            "period": self.period,
            "instant": format_timestamp(self.millis),
            "instance_id": self.instance_id,
            "lower_ipv4": self.lower_ipv4,
            "sequence": self.sequence,
        }


def decompose(landmark_year, id):
    return DecomposedId(
        id,
        resolve_period(id),
        resolve_millis(landmark_year, id),
        resolve_instance_id(id),
        resolve_sequence(id),
    )
