__all__ = ("Dataset",)
import pickle
from pathlib import Path

import pandas

from .core.Aggregator import requiredColumns
from .exceptions import DataError

compressionSuffixes = {".gz", ".bz2", ".xz", ".zip", ".zst"}

# identifiers must stay strings, otherwise serials like "0001" get mangled
csvDTypes = {"model": str, "serial_number": str}


def _readCSV(path: Path) -> pandas.DataFrame:
	return pandas.read_csv(path, dtype=csvDTypes)


readers = {
	".csv": _readCSV,
	".parquet": pandas.read_parquet,
	".feather": pandas.read_feather,
	".pkl": pandas.read_pickle,
	".pickle": pandas.read_pickle,
}


def detectFormat(path: Path) -> str:
	suffixes = [s.lower() for s in path.suffixes]
	if suffixes and suffixes[-1] in compressionSuffixes:
		suffixes = suffixes[:-1]
	if not suffixes or suffixes[-1] not in readers:
		raise DataError("Cannot detect the format of " + str(path) + ", supported ones are: " + ", ".join(readers.keys()))
	return suffixes[-1]


class Dataset:
	"""A read-only handle over the flat per-drive-day table. It is passed explicitly through the pipeline, nothing mutates it."""

	__slots__ = ("_records", "source")

	def __init__(self, records: pandas.DataFrame, source: Path = None):
		missingColumns = [c for c in requiredColumns if c not in records.columns]
		if missingColumns:
			raise DataError("Following columns are missing" + ((" in " + str(source)) if source else "") + ": " + repr(missingColumns))
		self._records = records
		self.source = source

	@classmethod
	def load(cls, path: Path) -> "Dataset":
		path = Path(path)
		reader = readers[detectFormat(path)]
		try:
			records = reader(path)
		except (ValueError, OSError, EOFError, ImportError, pickle.UnpicklingError, pandas.errors.ParserError) as ex:
			raise DataError("Cannot read " + str(path) + ": " + str(ex)) from ex
		return cls(records, path)

	@property
	def records(self) -> pandas.DataFrame:
		"""A copy, so the handle stays unchanged whatever the caller does with it"""
		return self._records.copy()

	def __len__(self):
		return len(self._records)

	def __repr__(self):
		return self.__class__.__name__ + "<" + (str(self.source) if self.source else "in-memory") + ", " + str(len(self)) + " records>"
