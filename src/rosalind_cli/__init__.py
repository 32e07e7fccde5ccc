"""Rosalind CLI.

Runs one Rosalind problem per invocation:
- the task is chosen with `-t/--task`
- its input comes from a data file (`-d`) or numeric options (`-n`, `-k`, `-m`)
- the result is printed on stdout
"""

__version__ = "0.1.0"

from rosalind_cli.runner.config import RunnerSettings

__all__ = ["__version__", "RunnerSettings"]
