__all__ = ("ReliabilityAnalysis", "estimateModels", "analyse")
import sys
import typing
from concurrent.futures import ThreadPoolExecutor
from functools import partial

import pandas

from .config import AnalysisConfig
from .core import SurvivalEstimate
from .core.Aggregator import aggregateLifetimes
from .core.CohortFilter import filterCohorts, longLivedCounts
from .core.KaplanMeier import estimateCohort, survivalCurve
from .core.Ranker import bestPerCapacity, filterCapacity, rankEstimates
from .dataset import Dataset
from .exceptions import EstimationError
from .utils.mtqdm import mtqdm


def _estimateGroup(group: typing.Tuple[str, pandas.DataFrame], config: AnalysisConfig) -> SurvivalEstimate:
	model, cohort = group
	return estimateCohort(model, cohort, config)


def estimateModels(cohorts: pandas.DataFrame, config: AnalysisConfig, progress: bool = False) -> typing.List[SurvivalEstimate]:
	"""Estimates every model independently. With more than 1 worker the models are mapped through a thread pool. The result is in model name order either way."""
	groups = list(cohorts.groupby("model", sort=True))
	estimator = partial(_estimateGroup, config=config)
	desc = "Estimating survival of models..."

	if config.workers > 1 and len(groups) > 1:
		with ThreadPoolExecutor(max_workers=config.workers) as executor:
			return list(mtqdm(executor.map(estimator, groups), total=len(groups), desc=desc, disable=not progress))
	return [estimator(g) for g in mtqdm(groups, desc=desc, disable=not progress)]


class ReliabilityAnalysis:
	"""Ranks drive models by the lower confidence bound of their survival at the horizon.
	Lifetimes and cohorts are computed once on construction, estimates on the first request."""

	def __init__(self, dataset: Dataset, config: AnalysisConfig = None, progress: bool = False):
		if config is None:
			config = AnalysisConfig()
		self.ds = dataset
		self.config = config
		self.progress = progress

		self.log("Aggregating " + str(len(dataset)) + " records into lifetimes....")
		self.lifetimes = aggregateLifetimes(dataset.records)
		self.log(str(len(self.lifetimes)) + " drives of " + str(self.lifetimes.loc[:, "model"].nunique()) + " models")

		self.cohorts = filterCohorts(self.lifetimes, config.horizon, config.minLongLived)
		self.log(str(self.cohorts.loc[:, "model"].nunique()) + " models have more than " + str(config.minLongLived) + " long-lived drives")
		self._estimates = None

	def log(self, msg: str):
		if self.progress:
			print(msg, file=sys.stderr)

	def longLivedCounts(self) -> pandas.Series:
		return longLivedCounts(self.lifetimes, self.config.horizon)

	@property
	def estimates(self) -> typing.List[SurvivalEstimate]:
		if self._estimates is None:
			self._estimates = estimateModels(self.cohorts, self.config, self.progress)
		return self._estimates

	def ranking(self, capacityTb: int = None) -> typing.List[SurvivalEstimate]:
		estimates = self.estimates
		if capacityTb is not None:
			estimates = filterCapacity(estimates, capacityTb)
		return rankEstimates(estimates)

	def bestPerCapacity(self) -> typing.Mapping[int, SurvivalEstimate]:
		return bestPerCapacity(self.estimates)

	def curve(self, model: str) -> pandas.DataFrame:
		"""Survival curve of a model. The model doesn't have to pass the cohort filter."""
		cohort = self.lifetimes.loc[self.lifetimes.loc[:, "model"] == model]
		if cohort.empty:
			raise EstimationError("There are no drives of model " + repr(model) + " in the dataset")
		return survivalCurve(cohort.loc[:, "drive_days"], cohort.loc[:, "failed"], self.config.confidenceLevel)


def analyse(dataset: Dataset, config: AnalysisConfig = None) -> typing.List[SurvivalEstimate]:
	"""The whole pipeline, returns the ranked estimates"""
	return ReliabilityAnalysis(dataset, config).ranking()
