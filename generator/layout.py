"""
Bit layout of a SUID.

    sign (1) | period (39) | instance id (16) | sequence (8)

Field widths derive from the declared value ranges, so the shifts and masks
below stay consistent if a range changes. At 10 ms per period the 39-bit
period space lasts about 174 years; 256 sequence values per period allow
25600 ids per second per instance.
"""

ID_BITS = 63

INSTANCE_ID_RANGE_MAX = 65535
SEQUENCE_RANGE_MAX = 255

INSTANCE_ID_BITS = INSTANCE_ID_RANGE_MAX.bit_length()
SEQUENCE_BITS = SEQUENCE_RANGE_MAX.bit_length()
PERIOD_BITS = ID_BITS - INSTANCE_ID_BITS - SEQUENCE_BITS

MAXIMUM_PERIOD = (1 << PERIOD_BITS) - 1
MAXIMUM_INSTANCE_ID = (1 << INSTANCE_ID_BITS) - 1
MAXIMUM_SEQUENCE = (1 << SEQUENCE_BITS) - 1
MAXIMUM_ID = (1 << ID_BITS) - 1

INSTANCE_ID_SHIFT = SEQUENCE_BITS
PERIOD_SHIFT = INSTANCE_ID_BITS + SEQUENCE_BITS

# milliseconds
TIME_STEP = 10
CLOCK_OUTLIER_THRESHOLD = 2000


def encode(period, instance_id, sequence):
    """Pack the three fields into a non-negative 63-bit integer."""
    return (period << PERIOD_SHIFT) | (instance_id << INSTANCE_ID_SHIFT) | sequence
