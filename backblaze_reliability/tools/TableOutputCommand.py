import sys
from pathlib import Path

from plumbum import cli

from ..report import writeTable


class TableOutputCommand(cli.Application):
	"""A base class for commands producing a table"""

	output = cli.SwitchAttr(["-o", "--output"], Path, default=None, help="A CSV file to save the table into. If not set, the table is printed.")

	def emit(self, pds):
		text = writeTable(pds, self.output)
		if text is not None:
			print(text)
		else:
			print("Saved into " + str(self.output), file=sys.stderr)
