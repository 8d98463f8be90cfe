__all__ = ("oneYear", "defaultConfidenceLevel", "defaultMinLongLived", "defaultWorkers", "validateHorizon", "validateConfidenceLevel", "validateMinLongLived", "AnalysisConfig")
import math
import numbers

from .exceptions import ConfigError

oneYear = 365.2425  # days, Gregorian calendar mean
defaultConfidenceLevel = 0.95
defaultMinLongLived = 99  # a model needs strictly more long-lived drives than this to be estimated
defaultWorkers = 1


def _isReal(v):
	return isinstance(v, numbers.Real) and not isinstance(v, bool)


def _isInteger(v):
	return isinstance(v, numbers.Integral) and not isinstance(v, bool)


def validateHorizon(horizon) -> float:
	if not _isReal(horizon) or not math.isfinite(horizon) or horizon <= 0:
		raise ConfigError("horizon must be a finite positive number of days, but " + repr(horizon) + " was passed")
	return float(horizon)


def validateConfidenceLevel(confidenceLevel) -> float:
	if not _isReal(confidenceLevel) or not 0.0 < confidenceLevel < 1.0:
		raise ConfigError("confidence level must be within (0, 1), but " + repr(confidenceLevel) + " was passed")
	return float(confidenceLevel)


def validateMinLongLived(minLongLived) -> int:
	if not _isInteger(minLongLived) or minLongLived < 0:
		raise ConfigError("the threshold of long-lived drives must be a non-negative integer, but " + repr(minLongLived) + " was passed")
	return int(minLongLived)


class AnalysisConfig:
	"""Parameters of an analysis run. Validated on construction, so a broken config never reaches the estimator."""

	__slots__ = ("horizon", "confidenceLevel", "minLongLived", "workers")

	def __init__(self, horizon: float = oneYear, confidenceLevel: float = defaultConfidenceLevel, minLongLived: int = defaultMinLongLived, workers: int = defaultWorkers):
		self.horizon = validateHorizon(horizon)
		self.confidenceLevel = validateConfidenceLevel(confidenceLevel)
		self.minLongLived = validateMinLongLived(minLongLived)
		if not _isInteger(workers) or workers < 1:
			raise ConfigError("count of workers must be a positive integer, but " + repr(workers) + " was passed")
		self.workers = int(workers)

	def __repr__(self):
		return self.__class__.__name__ + "(" + ", ".join(k + "=" + repr(getattr(self, k)) for k in self.__class__.__slots__) + ")"
