from generator.suid import SUIDGenerator, derive_period, landmark_millis
from generator.resolve import (
    DecomposedId,
    decompose,
    resolve_instance_id,
    resolve_instant,
    resolve_local_datetime,
    resolve_lower_ipv4,
    resolve_millis,
    resolve_period,
    resolve_sequence,
)

__all__ = [
    "SUIDGenerator",
    "derive_period",
    "landmark_millis",
    "DecomposedId",
    "decompose",
    "resolve_instance_id",
    "resolve_instant",
    "resolve_local_datetime",
    "resolve_lower_ipv4",
    "resolve_millis",
    "resolve_period",
    "resolve_sequence",
]
