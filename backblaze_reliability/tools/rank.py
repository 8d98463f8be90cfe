import sys

from plumbum import cli

from ..exceptions import ConfigError
from ..report import makeReport
from .AnalysisCommand import AnalysisCommand
from .TableOutputCommand import TableOutputCommand


class RankCommand(AnalysisCommand, TableOutputCommand):
	"""Ranks drive models by the lower bound of the confidence interval of their survival at the horizon. The first one is the one to buy."""

	capacity = cli.SwitchAttr("--capacity", int, default=None, help="Rank only the models which capacity rounds to this count of TB")
	top = cli.SwitchAttr(["-n", "--top"], int, default=None, help="Output only this count of the best models")
	naiveAFR = cli.Flag("--naive-afr", help="Add a column with the constant-rate annualized failure rate for comparison")

	def makeConfig(self):
		if self.top is not None and self.top < 0:
			raise ConfigError("count of the best models to output must be non-negative, but " + repr(self.top) + " was passed")
		return super().makeConfig()

	def process(self, analysis):
		ranked = analysis.ranking(self.capacity)
		if self.top is not None:
			ranked = ranked[: self.top]
		self.emit(makeReport(ranked, analysis.config.confidenceLevel, self.naiveAFR))
		if ranked and not self.quiet:
			print("Recommended model: " + ranked[0].model, file=sys.stderr)


class BestCommand(AnalysisCommand, TableOutputCommand):
	"""Shows the best model for every capacity bucket (capacity rounded to TB)"""

	def process(self, analysis):
		best = analysis.bestPerCapacity()
		pds = makeReport(best.values(), analysis.config.confidenceLevel)
		pds.insert(0, "capacity_bucket_tb", list(best.keys()))
		self.emit(pds)
