"""Kaplan-Meier product-limit estimator evaluated at a fixed horizon.

The confidence band is built in log(-log S) scale with Greenwood's variance (so called "exponential Greenwood"), the same
way `lifelines.KaplanMeierFitter` does it, so the bounds always stay within [0, 1]."""

__all__ = ("criticalValue", "kaplanMeierAt", "logLogLowerBound", "survivalCurve", "estimateCohort")

import math
import typing
import warnings

import numpy as np
import pandas
from lifelines import KaplanMeierFitter
from scipy.stats import norm

from ..config import AnalysisConfig, defaultConfidenceLevel, oneYear, validateConfidenceLevel, validateHorizon
from ..exceptions import DegenerateEstimationError, EstimationError
from . import SurvivalEstimate

curveColumns = ("timeline", "at_risk", "observed", "censored", "survival", "lower")


def criticalValue(confidenceLevel: float) -> float:
	"""z of a two-sided interval, 1.96 for 0.95"""
	confidenceLevel = validateConfidenceLevel(confidenceLevel)
	return float(norm.ppf((1.0 + confidenceLevel) / 2.0))


def _asArrays(durations, events) -> typing.Tuple[np.ndarray, np.ndarray]:
	durations = np.asarray(durations, dtype=np.float64)
	events = np.asarray(events, dtype=bool)
	if durations.shape != events.shape:
		raise EstimationError("Durations and events must be of the same shape, but got " + repr(durations.shape) + " and " + repr(events.shape))
	if not durations.size:
		raise EstimationError("The cohort is empty")
	if not (np.isfinite(durations) & (durations > 0.0)).all():
		raise EstimationError("Durations must be finite positive numbers of days")
	return durations, events


def _eventTable(durations: np.ndarray, events: np.ndarray, horizon: float) -> typing.Tuple[np.ndarray, np.ndarray, np.ndarray]:
	"""Distinct failure times not later than `horizon`, sizes of risk sets and counts of failures at them.
	A drive censored exactly at a failure time is still at risk at it. Times are compared exactly."""
	eventTimes, deaths = np.unique(durations[events & (durations <= horizon)], return_counts=True)
	atRisk = durations.size - np.searchsorted(np.sort(durations), eventTimes, side="left")
	return eventTimes, atRisk.astype(np.float64), deaths.astype(np.float64)


def logLogLowerBound(survival: float, greenwood: float, z: float) -> float:
	"""Lower bound of exp(-exp(log(-log S) ± z·se)), where se = sqrt(greenwood) / |log S| is the delta-method standard error of log(-log S).
	`survival` must be within (0, 1). A standard error too large to exponentiate gives 0, the limit of S ** inf."""
	logSurvival = math.log(survival)
	se = math.sqrt(greenwood) / -logSurvival
	try:
		lower = survival ** math.exp(z * se)
	except OverflowError:
		return 0.0
	return min(survival, max(0.0, lower))


def _pointEstimate(atRisk: np.ndarray, deaths: np.ndarray, z: float) -> typing.Tuple[float, float]:
	if not deaths.size:
		raise DegenerateEstimationError("no failures", 1.0, 0.0)

	survivors = atRisk - deaths
	if not survivors[-1]:
		# only the last event time can exhaust the risk set
		raise DegenerateEstimationError("risk set exhausted", 0.0, 0.0)

	survival = float(np.prod(survivors / atRisk))
	if not 0.0 < survival < 1.0:
		raise DegenerateEstimationError("survival underflow", max(0.0, min(survival, 1.0)), 0.0)

	greenwood = float(np.sum(deaths / (atRisk * survivors)))
	return survival, logLogLowerBound(survival, greenwood, z)


def kaplanMeierAt(durations, events, horizon: float = oneYear, confidenceLevel: float = defaultConfidenceLevel, strict: bool = False) -> typing.Tuple[float, float]:
	"""Returns (S(horizon), lower bound of its confidence interval).

	If there were no failures until the horizon, or the risk set is exhausted, the bound is undefined and the sentinel
	lower bound 0 is returned with S of 1 or 0 respectively. With `strict` a `DegenerateEstimationError` carrying these
	values is raised instead. An empty cohort is always an `EstimationError`, invalid parameters are a `ConfigError`."""
	horizon = validateHorizon(horizon)
	z = criticalValue(confidenceLevel)
	durations, events = _asArrays(durations, events)
	eventTimes, atRisk, deaths = _eventTable(durations, events, horizon)
	try:
		return _pointEstimate(atRisk, deaths, z)
	except DegenerateEstimationError as ex:
		if strict:
			raise
		return (ex.survival, ex.lower)


def survivalCurve(durations, events, confidenceLevel: float = defaultConfidenceLevel) -> pandas.DataFrame:
	"""The whole step function fitted by `lifelines`: a row for time 0 and a row per distinct observed time.
	`lower` is NaN where the bound is undefined (before the first failure) and 0 after the risk set is exhausted."""
	confidenceLevel = validateConfidenceLevel(confidenceLevel)
	durations, events = _asArrays(durations, events)

	kmf = KaplanMeierFitter(alpha=1.0 - confidenceLevel).fit(durations, event_observed=events)
	table = kmf.event_table
	survival = kmf.survival_function_.iloc[:, 0].to_numpy(dtype=np.float64)
	lower = kmf.confidence_interval_survival_function_.min(axis=1).to_numpy(dtype=np.float64)
	lower = np.where(survival <= 0.0, 0.0, np.where(survival < 1.0, np.minimum(survival, lower), np.nan))

	return pandas.DataFrame(
		{
			"timeline": table.index.to_numpy(dtype=np.float64),
			"at_risk": table.loc[:, "at_risk"].to_numpy().astype(np.int64),
			"observed": table.loc[:, "observed"].to_numpy().astype(np.int64),
			"censored": table.loc[:, "censored"].to_numpy().astype(np.int64),
			"survival": survival,
			"lower": lower,
		},
		columns=curveColumns,
	)


def estimateCohort(model: str, cohort: pandas.DataFrame, config: AnalysisConfig = None) -> SurvivalEstimate:
	"""Estimates a single model from its lifetimes. Degenerate cohorts get sentinel values and a warning instead of an exception."""
	if config is None:
		config = AnalysisConfig()

	if cohort.empty:
		raise EstimationError("The cohort of " + repr(model) + " is empty")

	durations = cohort.loc[:, "drive_days"].to_numpy(dtype=np.float64)
	failed = cohort.loc[:, "failed"].to_numpy(dtype=bool)

	degenerate = None
	try:
		survival, lower = kaplanMeierAt(durations, failed, config.horizon, config.confidenceLevel, strict=True)
	except DegenerateEstimationError as ex:
		warnings.warn("Model " + repr(model) + " is reported with sentinel values because of " + ex.reason)
		survival, lower, degenerate = ex.survival, ex.lower, ex.reason

	return SurvivalEstimate(
		model=model,
		survival=survival,
		lower=lower,
		drive_days=int(durations.sum()),
		failures=int(failed.sum()),
		drives=len(cohort),
		capacity_tb=float(cohort.loc[:, "capacity_tb"].max()),
		degenerate=degenerate,
	)
