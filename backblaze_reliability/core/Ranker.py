__all__ = ("rankingKey", "rankEstimates", "capacityBucket", "filterCapacity", "bestPerCapacity")
import typing
from collections import OrderedDict

from . import SurvivalEstimate


def rankingKey(estimate: SurvivalEstimate):
	"""The higher the lower confidence bound, the better. Equal bounds are ordered by model name."""
	return (-estimate.lower, estimate.model)


def rankEstimates(estimates: typing.Iterable[SurvivalEstimate]) -> typing.List[SurvivalEstimate]:
	"""The head is the model to buy"""
	return sorted(estimates, key=rankingKey)


def capacityBucket(capacityTb: float) -> int:
	return int(round(capacityTb))


def filterCapacity(estimates: typing.Iterable[SurvivalEstimate], capacityTb: int) -> typing.List[SurvivalEstimate]:
	return [e for e in estimates if capacityBucket(e.capacity_tb) == capacityTb]


def bestPerCapacity(estimates: typing.Iterable[SurvivalEstimate]) -> typing.Mapping[int, SurvivalEstimate]:
	"""Best-in-class model for every capacity bucket, buckets in ascending order"""
	res = {}
	for e in rankEstimates(estimates):
		res.setdefault(capacityBucket(e.capacity_tb), e)
	return OrderedDict(sorted(res.items()))
