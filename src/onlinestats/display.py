"""Textual state reports for statistics and bootstraps."""

from __future__ import annotations

from typing import Any, Protocol

import numpy as np
from rich.console import Console
from rich.table import Table


class HasState(Protocol):
    """Anything exposing an ordered (name, value) state report."""

    @property
    def name(self) -> str: ...

    def statenames(self) -> list[str]: ...

    def state(self) -> list[Any]: ...


def _format_value(value: Any) -> str:
    if isinstance(value, (float, np.floating)):
        return f"{value:f}"
    if isinstance(value, tuple):
        return "(" + ", ".join(_format_value(v) for v in value) + ")"
    return str(value)


def state_pairs(obj: HasState) -> list[tuple[str, Any]]:
    """Return the state report of ``obj`` as ordered (name, value) pairs."""
    return list(zip(obj.statenames(), obj.state(), strict=True))


def format_state(obj: HasState) -> str:
    """
    Format a state report as a brief one-line summary.

    Args:
        obj: Statistic or bootstrap to describe

    Returns:
        Summary string like "Mean{mean=0.501223 nobs=10000}"
    """
    parts = [f"{name}={_format_value(value)}" for name, value in state_pairs(obj)]
    return f"{obj.name}{{{' '.join(parts)}}}"


def print_state(obj: HasState, console: Console | None = None) -> None:
    """
    Print a state report to console with Rich formatting.

    Args:
        obj: Statistic or bootstrap to display
        console: Rich console (creates new one if not provided)
    """
    if console is None:
        console = Console()

    table = Table(title=f"OnlineStat: {obj.name}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")

    for name, value in state_pairs(obj):
        table.add_row(name, _format_value(value))

    console.print(table)
