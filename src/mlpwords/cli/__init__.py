"""Command-line interface for mlpwords.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Alphabet reordering preview
- Lyndon and Christoffel factorization of single words
- MLP edge tables for chain codes, inline or from chain files
- JSON output for scripting
"""

from mlpwords.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
