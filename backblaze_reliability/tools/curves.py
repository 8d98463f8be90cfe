from plumbum import cli

from .AnalysisCommand import AnalysisCommand
from .TableOutputCommand import TableOutputCommand


class CurveCommand(AnalysisCommand, TableOutputCommand):
	"""Outputs the Kaplan-Meier survival curve of a model with the lower confidence band"""

	model = cli.SwitchAttr(["-m", "--model"], str, mandatory=True, help="The drive model")

	def process(self, analysis):
		self.emit(analysis.curve(self.model))


class CohortsCommand(AnalysisCommand, TableOutputCommand):
	"""Shows how many drives of each model lived longer than the horizon and whether the model is analysed"""

	def process(self, analysis):
		pds = analysis.longLivedCounts().reset_index()
		pds["analysed"] = pds.loc[:, "long_lived"] > analysis.config.minLongLived
		pds = pds.sort_values(by=["long_lived", "model"], ascending=[False, True], kind="mergesort")
		self.emit(pds.reset_index(drop=True))
