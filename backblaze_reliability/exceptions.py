__all__ = ("ReliabilityError", "DataError", "ConfigError", "EstimationError", "DegenerateEstimationError")


class ReliabilityError(Exception):
	"""A base class for all the errors of the package"""

	pass


class DataError(ReliabilityError):
	"""The input dataset is malformed: a column or a field is missing or has a value of a wrong kind. Aborts the run."""

	pass


class ConfigError(ReliabilityError):
	"""Analysis parameters are invalid. Raised before any computation starts."""

	pass


class EstimationError(ReliabilityError):
	pass


class DegenerateEstimationError(EstimationError):
	"""The survival curve exists, but its confidence bound doesn't. Carries the sentinel values to be reported instead."""

	def __init__(self, reason: str, survival: float, lower: float = 0.0):
		super().__init__(reason)
		self.reason = reason
		self.survival = survival
		self.lower = lower
