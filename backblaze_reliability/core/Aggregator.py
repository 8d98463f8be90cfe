__all__ = ("Aggregator", "DriveLifetimeAggregator", "aggregateLifetimes", "requiredColumns", "daysCountColumn")
import typing

import numpy as np
import pandas

from ..exceptions import DataError
from . import lifetimeColumns

requiredColumns = ("model", "serial_number", "capacity_bytes", "failure")
daysCountColumn = "N"  # optional, count of days a row stands for
bytesInTB = 1e12


class Aggregator:
	columnsToGroupBy = None
	columnsRequired = ()

	@classmethod
	def validate(cls, pds: pandas.DataFrame):
		missingColumns = [c for c in cls.columnsRequired if c not in pds.columns]
		if missingColumns:
			raise DataError("Following columns are missing: " + repr(missingColumns))

		emptyFields = pds.loc[:, list(cls.columnsRequired)].isna().any()
		emptyFields = list(emptyFields.index[emptyFields])
		if emptyFields:
			raise DataError("Following columns contain empty fields: " + repr(emptyFields))

	@classmethod
	def _aggregate(cls, pds: pandas.DataFrame, aggregations: typing.Mapping[str, typing.Tuple[str, str]]) -> pandas.DataFrame:
		assert cls.columnsToGroupBy, cls.__name__ + " doesn't define `columnsToGroupBy`"
		# sorting the groups makes the result independent of the order of input rows
		res = pds.groupby(list(cls.columnsToGroupBy), sort=True).agg(**aggregations)
		return res.reset_index()

	@classmethod
	def aggregate(cls, pds: pandas.DataFrame) -> pandas.DataFrame:
		raise NotImplementedError()


class DriveLifetimeAggregator(Aggregator):
	"""Collapses per-day records of drives into lifetimes, one per (model, serial number)"""

	columnsToGroupBy = ("model", "serial_number")
	columnsRequired = requiredColumns

	@classmethod
	def prepare(cls, pds: pandas.DataFrame) -> pandas.DataFrame:
		"""Validates the records and brings them to the types the aggregation relies on. Returns a new frame."""
		cls.validate(pds)
		columns = list(requiredColumns)
		hasDaysCount = daysCountColumn in pds.columns
		if hasDaysCount:
			columns.append(daysCountColumn)
			if pds.loc[:, daysCountColumn].isna().any():
				raise DataError("Column " + repr(daysCountColumn) + " contains empty fields")

		res = pds.loc[:, columns].copy()
		res["model"] = res.loc[:, "model"].astype(str)
		res["serial_number"] = res.loc[:, "serial_number"].astype(str)

		try:
			res["capacity_bytes"] = pandas.to_numeric(res.loc[:, "capacity_bytes"])
			failure = pandas.to_numeric(res.loc[:, "failure"])
			if hasDaysCount:
				daysCount = pandas.to_numeric(res.loc[:, daysCountColumn])
		except (ValueError, TypeError) as ex:
			raise DataError("Non-numeric value in a numeric column: " + str(ex)) from ex

		if not pandas.api.types.is_bool_dtype(failure) and not failure.isin((0, 1)).all():
			raise DataError("`failure` must be either 0 or 1, but got " + repr(sorted(set(failure[~failure.isin((0, 1))].tolist()))[:5]))
		res["failure"] = failure.astype(bool)

		if hasDaysCount:
			if not ((daysCount >= 1) & (daysCount == np.floor(daysCount))).all():
				raise DataError("`" + daysCountColumn + "` must contain positive integers")
			res[daysCountColumn] = daysCount.astype(np.int64)
		return res

	@classmethod
	def aggregate(cls, pds: pandas.DataFrame) -> pandas.DataFrame:
		pds = cls.prepare(pds)
		if pds.empty:
			return pandas.DataFrame({"model": [], "serial_number": [], "drive_days": [], "failed": [], "capacity_tb": []}).astype({"model": object, "serial_number": object, "drive_days": np.int64, "failed": bool, "capacity_tb": np.float64})

		if daysCountColumn in pds.columns:
			days = (daysCountColumn, "sum")
		else:
			days = ("failure", "size")  # a row is a day

		res = cls._aggregate(
			pds,
			{
				"drive_days": days,
				"failed": ("failure", "any"),
				"capacity_bytes": ("capacity_bytes", "max"),
			},
		)
		res["drive_days"] = res.loc[:, "drive_days"].astype(np.int64)
		res["failed"] = res.loc[:, "failed"].astype(bool)
		res["capacity_tb"] = (res.loc[:, "capacity_bytes"] / bytesInTB).round(1)
		return res.loc[:, list(lifetimeColumns)]


def aggregateLifetimes(records: pandas.DataFrame) -> pandas.DataFrame:
	return DriveLifetimeAggregator.aggregate(records)
