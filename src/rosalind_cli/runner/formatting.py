"""Render outcomes and errors as text for the terminal."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rosalind_cli.runner.dispatch import Failure, Outcome, Stage, Success
from rosalind_cli.runner.registry import UnknownTask


def format_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def format_error(error: BaseException) -> str:
    """`<Kind>: <details>`; unknown tasks keep their own wording."""

    if isinstance(error, UnknownTask):
        return str(error)
    kind = getattr(error, "kind", type(error).__name__)
    details = getattr(error, "details", None) or str(error)
    return f"{kind}: {details}"


def _format_stage(stage: Stage) -> str:
    separator = "\n" if stage.block else " "
    return f"{stage.label}:{separator}{format_value(stage.value)}"


def _format_stages(stages: Sequence[Stage]) -> list[str]:
    return [_format_stage(stage) for stage in stages]


def format_outcome(outcome: Outcome) -> str:
    """Render any outcome; this never raises."""

    try:
        if isinstance(outcome, Success):
            return "\n".join(_format_stages(outcome.stages))
        if isinstance(outcome, Failure):
            return "\n".join([*_format_stages(outcome.completed), format_error(outcome.error)])
    except Exception as e:  # noqa: BLE001 (terminal sink)
        return f"OutputError: could not render result for task {getattr(outcome, 'task_id', None)!r}: {e}"
    return f"OutputError: unsupported outcome {outcome!r}"
