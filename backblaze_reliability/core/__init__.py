import typing

__all__ = ("lifetimeColumns", "SurvivalEstimate")

lifetimeColumns = ("model", "serial_number", "drive_days", "failed", "capacity_tb")


class SurvivalEstimate:
	"""Kaplan-Meier estimate of a drive model at the horizon, together with the aggregates needed for reporting.
	`degenerate` is `None` for a normal estimate, otherwise it tells why the sentinel values are reported."""

	__slots__ = ("model", "survival", "lower", "drive_days", "failures", "drives", "capacity_tb", "degenerate")

	def __init__(self, model: str, survival: float, lower: float, drive_days: int, failures: int, drives: int, capacity_tb: float, degenerate: typing.Optional[str] = None):
		assert 0.0 <= lower <= survival <= 1.0, "Broken estimate for " + repr(model) + ": lower=" + repr(lower) + ", survival=" + repr(survival)
		self.model = model
		self.survival = survival
		self.lower = lower
		self.drive_days = drive_days
		self.failures = failures
		self.drives = drives
		self.capacity_tb = capacity_tb
		self.degenerate = degenerate

	def toDict(self):
		return {k: getattr(self, k) for k in self.__class__.__slots__}

	def __eq__(self, other):
		if isinstance(other, __class__):
			return self.toDict() == other.toDict()
		return NotImplemented

	def __repr__(self):
		return self.__class__.__name__ + "(" + ", ".join(k + "=" + repr(v) for k, v in self.toDict().items()) + ")"
