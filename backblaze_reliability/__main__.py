from plumbum import cli


class BackblazeReliabilityCLI(cli.Application):
	"""Recommends a hard drive model to buy from its survival in the Backblaze dataset"""

	PROGNAME = "backblaze-reliability"


from .tools.rank import RankCommand
BackblazeReliabilityCLI.subcommand("rank")(RankCommand)

from .tools.rank import BestCommand
BackblazeReliabilityCLI.subcommand("best")(BestCommand)

from .tools.curves import CurveCommand
BackblazeReliabilityCLI.subcommand("curve")(CurveCommand)

from .tools.curves import CohortsCommand
BackblazeReliabilityCLI.subcommand("cohorts")(CohortsCommand)


def main():
	BackblazeReliabilityCLI.run()


if __name__ == "__main__":
	main()
