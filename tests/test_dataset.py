import pandas
import pytest
from pandas.testing import assert_frame_equal

from backblaze_reliability import dataset
from backblaze_reliability.dataset import Dataset, detectFormat
from backblaze_reliability.exceptions import DataError


def records():
	return pandas.DataFrame(
		{
			"model": ["ST4000DM000", "ST4000DM000"],
			"serial_number": ["0001", "0002"],
			"capacity_bytes": [4000787030016, 4000787030016],
			"N": [400, 20],
			"failure": [0, 1],
		}
	)


@pytest.mark.parametrize("name", ["drives.csv", "drives.csv.gz", "drives.csv.xz"])
def test_load_csv(tmp_path, name):
	path = tmp_path / name
	records().to_csv(path, index=False)
	ds = Dataset.load(path)
	assert len(ds) == 2
	assert ds.source == path
	# serials stay strings
	assert ds.records.loc[:, "serial_number"].tolist() == ["0001", "0002"]
	assert "2 records" in repr(ds)


def test_load_parquet(tmp_path):
	pytest.importorskip("pyarrow")
	path = tmp_path / "drives.parquet"
	records().to_parquet(path, index=False)
	assert_frame_equal(Dataset.load(path).records, records())


def test_load_pickle(tmp_path):
	path = tmp_path / "drives.pkl"
	records().to_pickle(path)
	assert_frame_equal(Dataset.load(path).records, records())


@pytest.mark.parametrize("name", ["drives.txt", "drives", "drives.gz"])
def test_unknown_format(tmp_path, name):
	with pytest.raises(DataError):
		detectFormat(tmp_path / name)


def test_missing_column(tmp_path):
	path = tmp_path / "drives.csv"
	records().drop(columns=["failure"]).to_csv(path, index=False)
	with pytest.raises(DataError, match="failure"):
		Dataset.load(path)


def test_in_memory():
	ds = Dataset(records())
	assert ds.source is None
	assert "in-memory" in repr(ds)


def test_records_cannot_be_changed_through_the_handle():
	ds = Dataset(records())
	changed = ds.records
	changed.loc[:, "failure"] = 1
	changed.drop(columns=["N"], inplace=True)
	assert_frame_equal(ds.records, records())


@pytest.mark.parametrize("name", ["drives.pkl", "drives.csv.gz"])
def test_unreadable_file(tmp_path, name):
	path = tmp_path / name
	path.write_bytes(b"\x00\x01 this is not a table")
	with pytest.raises(DataError, match="Cannot read"):
		Dataset.load(path)


def test_missing_columnar_backend(tmp_path, monkeypatch):
	def readParquet(path):
		raise ImportError("Unable to find a usable engine")

	monkeypatch.setitem(dataset.readers, ".parquet", readParquet)
	path = tmp_path / "drives.parquet"
	path.write_bytes(b"")
	with pytest.raises(DataError, match="usable engine"):
		Dataset.load(path)
