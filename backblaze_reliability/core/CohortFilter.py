"""Keeps only the models having enough drives observed for longer than the horizon.

Kaplan-Meier confidence bounds here are computed on the exact sample, without resampling, so for small cohorts they are
numerically fine but understate the uncertainty. Requiring many long-lived drives only mitigates that, it doesn't fix it."""

__all__ = ("longLivedCounts", "filterCohorts")

import numpy as np
import pandas

from ..config import defaultMinLongLived, oneYear, validateHorizon, validateMinLongLived


def longLivedCounts(lifetimes: pandas.DataFrame, horizon: float = oneYear) -> pandas.Series:
	"""Counts of lifetimes lasting at least `horizon` days, per model"""
	horizon = validateHorizon(horizon)
	longLived = lifetimes.loc[:, "drive_days"] >= horizon
	return longLived.groupby(lifetimes.loc[:, "model"], sort=True).sum().astype(np.int64).rename("long_lived")


def filterCohorts(lifetimes: pandas.DataFrame, horizon: float = oneYear, minLongLived: int = defaultMinLongLived) -> pandas.DataFrame:
	minLongLived = validateMinLongLived(minLongLived)
	counts = longLivedCounts(lifetimes, horizon)
	qualifying = counts.index[counts > minLongLived]
	return lifetimes.loc[lifetimes.loc[:, "model"].isin(qualifying)].reset_index(drop=True)
