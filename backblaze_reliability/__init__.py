"""Ranks hard drive models by the lower confidence bound of their Kaplan-Meier survival at one year"""

__version__ = "0.1.0"
