"""Picks the tqdm flavour matching the environment: widgets in Jupyter, text bars elsewhere"""

__all__ = ("isNotebook", "mtqdm")


def isNotebook():
	try:
		shell = get_ipython().__class__.__name__
	except NameError:
		return False  # plain interpreter
	return shell == "ZMQInteractiveShell"  # Jupyter notebook or qtconsole


if isNotebook():
	from tqdm.notebook import tqdm as mtqdm
else:
	from tqdm import tqdm as mtqdm
