"""Command modules registered on the root Typer app."""
