import threading
from datetime import datetime

from core.errors import (
    ClockOutlierError,
    FutureLandmarkError,
    InstanceIdOutOfRangeError,
    NoAddressError,
    TimeLimitError,
)
from generator.layout import (
    CLOCK_OUTLIER_THRESHOLD,
    MAXIMUM_INSTANCE_ID,
    MAXIMUM_PERIOD,
    MAXIMUM_SEQUENCE,
    TIME_STEP,
    encode,
)
from internal.logging import LogLevel, get_logger
from utils.network import format_ip, get_ipv4
from utils.timestamp import format_timestamp, now_millis


def landmark_millis(landmark_year):
    """Jan 1 00:00:00 local time of ``landmark_year``, in ms since Unix epoch."""
    return int(datetime(landmark_year, 1, 1).timestamp()) * 1000


def derive_period(landmark, timestamp):
    """Number of whole 10 ms steps between ``landmark`` and ``timestamp``."""
    period = (timestamp - landmark) // TIME_STEP
    if period > MAXIMUM_PERIOD:
        raise TimeLimitError(landmark + MAXIMUM_PERIOD * TIME_STEP)
    return period


def check_instance_id(instance_id):
    if isinstance(instance_id, bool) or not isinstance(instance_id, int):
        raise InstanceIdOutOfRangeError(instance_id, MAXIMUM_INSTANCE_ID)
    if instance_id < 0 or instance_id > MAXIMUM_INSTANCE_ID:
        raise InstanceIdOutOfRangeError(instance_id, MAXIMUM_INSTANCE_ID)


def _host_ipv4():
    try:
        return format_ip(get_ipv4())
    except NoAddressError:
        return None


class SUIDGenerator:
    """
    Sonyflake-style generator of 63-bit, roughly time-ordered ids.

    ``last_timestamp`` is the last wall-clock time (ms) the instance was known
    to run; passing it narrows the window for duplicates after a clock rollback
    across restarts. ``clock`` returns the current time in ms.
    """

    def __init__(self, landmark_year, instance_id, last_timestamp=0, clock=None):
        self._clock = clock or now_millis
        self._log = get_logger()
        self._lock = threading.Lock()

        current_year = datetime.fromtimestamp(self._clock() / 1000).year
        if landmark_year > current_year:
            raise FutureLandmarkError(landmark_year, current_year)
        check_instance_id(instance_id)

        self._landmark_year = landmark_year
        self._landmark = landmark_millis(landmark_year)
        self._instance_id = instance_id
        # -1 means no prior period; any reading at or after the landmark advances past it
        self._period = max(derive_period(self._landmark, last_timestamp), -1)
        self._sequence = 0

        self._log.info("generator created", landmark_year=landmark_year,
                       landmark=format_timestamp(self._landmark), instance_id=instance_id,
                       period=self._period)

    @property
    def clock(self):
        return self._clock

    @property
    def landmark(self):
        return self._landmark

    @property
    def landmark_year(self):
        return self._landmark_year

    @property
    def instance_id(self):
        return self._instance_id

    @property
    def period(self):
        return self._period

    @property
    def sequence(self):
        return self._sequence

    def derive_period(self, timestamp):
        try:
            return derive_period(self._landmark, timestamp)
        except TimeLimitError as exc:
            self._log.error("period space exhausted", error=exc, instance_id=self._instance_id)
            raise

    def next_id(self):
        """Mint the next id. Serialized; may spin up to one period when a period's sequences run out."""
        with self._lock:
            period = self.derive_period(self._clock())

            if period > self._period:
                self._period = period
                # alternate the first sequence of a period between 1 and 0
                self._sequence = 0 if self._sequence % 2 else 1
            else:
                sequence = (self._sequence + 1) & MAXIMUM_SEQUENCE
                if sequence == 0:
                    if self._period >= MAXIMUM_PERIOD:
                        exc = TimeLimitError(self._landmark + MAXIMUM_PERIOD * TIME_STEP)
                        self._log.error("period space exhausted", error=exc, instance_id=self._instance_id)
                        raise exc
                    # state moves only once the clock has reached the next period
                    self._wait_for_period(self._period + 1)
                    self._period += 1
                self._sequence = sequence

            return encode(self._period, self._instance_id, self._sequence)

    def _wait_for_period(self, period):
        # spin on the clock with the lock held; no sleeping
        target = self._landmark + period * TIME_STEP
        if self._log.enabled(LogLevel.DEBUG):
            self._log.debug("sequence exhausted, waiting for next period", period=period,
                            target=format_timestamp(target))
        current = self._clock()
        while current < target:
            if target - current > CLOCK_OUTLIER_THRESHOLD:
                exc = ClockOutlierError(self._instance_id, target, current, ipv4=_host_ipv4())
                self._log.error("clock outlier", error=exc, instance_id=self._instance_id)
                raise exc
            current = self._clock()
