"""Wage Calc - Contract raise schedule comparison tools."""

__version__ = "0.1.0"
