"""Generator errors carrying diagnostic values."""

from utils.timestamp import format_timestamp


class BaseSuidError(Exception):
    """Base error with a timestamp and structured context for triage."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def to_dict(self):
        return {
            "error": type(self).__name__,
            "msg": str(self),
            "timestamp": self.timestamp,
            "context": self.context,
        }


class ConfigError(BaseSuidError):
    """Invalid construction parameters."""


class FutureLandmarkError(ConfigError):
    """Landmark year is later than the current year."""

    def __init__(self, landmark_year, current_year, **kwargs):
        self.landmark_year = landmark_year
        self.current_year = current_year
        context = kwargs.pop("context", {})
        context.update(landmark_year=landmark_year, current_year=current_year)
        super().__init__(
            f"The landmark year {landmark_year} cannot be later than the current year {current_year}.",
            context=context,
            **kwargs,
        )


class InstanceIdOutOfRangeError(ConfigError):
    """Instance id outside the representable range."""

    def __init__(self, instance_id, maximum=65535, **kwargs):
        self.instance_id = instance_id
        self.maximum = maximum
        context = kwargs.pop("context", {})
        context.update(instance_id=instance_id, maximum=maximum)
        super().__init__(
            f"The instance id {instance_id!r} is not in the valid range (0 ~ {maximum}).",
            context=context,
            **kwargs,
        )


class TimeLimitError(BaseSuidError):
    """Period space under the current landmark is exhausted."""

    def __init__(self, last_instant, **kwargs):
        self.last_instant = last_instant
        context = kwargs.pop("context", {})
        context["last_instant"] = last_instant
        super().__init__(
            f"Over the time limit, the last valid time is {format_timestamp(last_instant)}",
            context=context,
            **kwargs,
        )


class ClockOutlierError(BaseSuidError):
    """Wall clock diverged from the expected next period."""

    def __init__(self, instance_id, target_instant, current_instant, ipv4=None, **kwargs):
        self.instance_id = instance_id
        self.target_instant = target_instant
        self.current_instant = current_instant
        self.outlier_ms = target_instant - current_instant
        self.ipv4 = ipv4
        context = kwargs.pop("context", {})
        context.update(
            ipv4=ipv4,
            instance_id=instance_id,
            target_instant=target_instant,
            current_instant=current_instant,
            outlier_ms=self.outlier_ms,
        )
        super().__init__(
            f"IPv4: {ipv4}, InstanceId: {instance_id}, "
            f"NextElapsedTime: {target_instant} [{format_timestamp(target_instant)}], "
            f"CurrentTime: {current_instant} [{format_timestamp(current_instant)}], "
            f"ClockOutliers: {self.outlier_ms}ms",
            context=context,
            **kwargs,
        )


class NoAddressError(BaseSuidError):
    """No usable private IPv4 address to derive an instance id from."""

    def __init__(self, message, address=None, **kwargs):
        context = kwargs.pop("context", {})
        if address:
            context["address"] = address
        super().__init__(message, context=context, **kwargs)
