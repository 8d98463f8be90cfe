__all__ = ("reportColumns", "estimatesToDataFrame", "makeReport", "naiveAnnualizedFailureRate", "formatPercent", "writeTable")
import typing
from pathlib import Path

import numpy as np
import pandas

from .config import defaultConfidenceLevel, oneYear
from .core import SurvivalEstimate

reportColumns = ("model", "capacity_tb", "drive_days", "failures", "one_year_failure_rate")


def ciColumnName(confidenceLevel: float = defaultConfidenceLevel) -> str:
	return "ci_" + format(round(confidenceLevel * 100, 6), "g")


def formatPercent(fraction: float) -> str:
	return "{:.2f}%".format(100.0 * fraction)


def estimatesToDataFrame(estimates: typing.Iterable[SurvivalEstimate]) -> pandas.DataFrame:
	return pandas.DataFrame.from_records([e.toDict() for e in estimates], columns=SurvivalEstimate.__slots__)


def naiveAnnualizedFailureRate(pds: pandas.DataFrame, year: float = oneYear) -> pandas.Series:
	"""The constant-rate estimate Backblaze publishes: failures per drive-year"""
	driveYears = pds.loc[:, "drive_days"] / year
	return (pds.loc[:, "failures"] / driveYears.replace(0, np.nan)).fillna(0.0)


def makeReport(estimates: typing.Iterable[SurvivalEstimate], confidenceLevel: float = defaultConfidenceLevel, naiveAFR: bool = False) -> pandas.DataFrame:
	"""The output table, in the order of `estimates`. Rates are percentage strings: 1 - S and 1 - lower bound."""
	pds = estimatesToDataFrame(estimates)
	ciCol = ciColumnName(confidenceLevel)
	pds["one_year_failure_rate"] = (1.0 - pds.loc[:, "survival"]).map(formatPercent)
	pds[ciCol] = (1.0 - pds.loc[:, "lower"]).map(formatPercent)
	columns = list(reportColumns) + [ciCol]
	if naiveAFR:
		pds["afr"] = naiveAnnualizedFailureRate(pds).map(formatPercent)
		columns.append("afr")
	return pds.loc[:, columns]


def writeTable(pds: pandas.DataFrame, output: Path = None) -> typing.Optional[str]:
	"""Saves into a CSV file if `output` is given, otherwise returns the table as text"""
	if output is None:
		if pds.empty:
			return "(no models)"
		return pds.to_string(index=False)
	pds.to_csv(Path(output), index=False)
