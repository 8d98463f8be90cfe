import pandas
import pytest

from backblaze_reliability.dataset import Dataset

TB = 10 ** 12


def makeDrives(model, count, days, capacityTb, failedAt=()):
	"""Run-length compressed records, a drive takes one or two rows. The first `len(failedAt)` drives fail on the given days."""
	rows = []
	for i in range(count):
		base = {"model": model, "serial_number": model + "-" + str(i).zfill(5), "capacity_bytes": int(capacityTb * TB)}
		if i < len(failedAt):
			rows.append(dict(base, N=failedAt[i] - 1, failure=0))
			rows.append(dict(base, N=1, failure=1))
		else:
			rows.append(dict(base, N=days, failure=0))
	return rows


alphaFailures = (30, 60, 90, 120, 150, 180, 210, 240, 270, 300)
bravoFailures = (50, 150, 250, 450)


@pytest.fixture
def fleetRecords() -> pandas.DataFrame:
	"""ALPHA and BRAVO are ranked, DELTA has no failures at all, CHARLIE and ECHO lack long-lived drives"""
	rows = []
	rows += makeDrives("ALPHA", 150, 500, 4, alphaFailures)
	rows += makeDrives("BRAVO", 150, 500, 8, bravoFailures)
	rows += makeDrives("CHARLIE", 50, 500, 4)
	rows += makeDrives("DELTA", 120, 400, 4)
	rows += makeDrives("ECHO", 101, 365, 12)
	return pandas.DataFrame.from_records(rows)


@pytest.fixture
def fleet(fleetRecords) -> Dataset:
	return Dataset(fleetRecords)


@pytest.fixture
def fleetCSV(fleetRecords, tmp_path):
	path = tmp_path / "drives.csv"
	fleetRecords.to_csv(path, index=False)
	return path
