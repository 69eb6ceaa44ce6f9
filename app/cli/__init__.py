"""Typer command groups for the billingohu CLI."""
