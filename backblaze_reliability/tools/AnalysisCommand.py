import sys

from plumbum import cli

from ..analysis import ReliabilityAnalysis
from ..config import AnalysisConfig, defaultConfidenceLevel, defaultMinLongLived, defaultWorkers, oneYear
from ..dataset import Dataset
from ..exceptions import ReliabilityError


class AnalysisCommand(cli.Application):
	"""A base class for commands analysing a dataset. The dataset is a flat table of per-drive-day records (CSV, parquet, feather or pickle)."""

	horizon = cli.SwitchAttr("--horizon", float, default=oneYear, help="The time (in days) the survival is estimated at")
	confidenceLevel = cli.SwitchAttr(["-c", "--confidence"], float, default=defaultConfidenceLevel, help="Confidence level of the interval which lower bound is used for ranking")
	minLongLived = cli.SwitchAttr("--min-long-lived", int, default=defaultMinLongLived, help="A model is analysed only if it has strictly more drives living longer than the horizon")
	workers = cli.SwitchAttr(["-j", "--workers"], int, default=defaultWorkers, help="Count of threads estimating models in parallel")
	quiet = cli.Flag(["-q", "--quiet"], help="Don't print progress into stderr")

	def makeConfig(self) -> AnalysisConfig:
		return AnalysisConfig(horizon=self.horizon, confidenceLevel=self.confidenceLevel, minLongLived=self.minLongLived, workers=self.workers)

	def process(self, analysis: ReliabilityAnalysis):
		raise NotImplementedError()

	def main(self, datasetPath: cli.ExistingFile):
		try:
			config = self.makeConfig()
			ds = Dataset.load(str(datasetPath))
			return self.process(ReliabilityAnalysis(ds, config, progress=not self.quiet))
		except ReliabilityError as ex:
			print(ex.__class__.__name__ + ": " + str(ex), file=sys.stderr)
			return 1
