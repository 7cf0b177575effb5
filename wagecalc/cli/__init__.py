"""Wage Calc CLI."""
