"""Command-line interface for Lettertrace."""

from lettertrace.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
