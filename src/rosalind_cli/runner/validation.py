"""Resolve a task's required parameters into a typed invocation context.

Validation stops at the first problem. Unknown tasks raise `UnknownTask`
(from the registry); everything else raises a `ParameterError` subclass.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from rosalind_cli.runner.loader import read_data_file
from rosalind_cli.runner.registry import PARAMETERS, TASKS, InputMode, TaskSpec, lookup

logger = logging.getLogger(__name__)

RawOptions = Mapping[str, str | None]
Loader = Callable[[Path, str], str]

DEFAULT_MAX_NUMERIC_PARAM = 100_000


class ParameterError(Exception):
    """A command-line parameter problem; fatal for the run."""

    kind = "ParameterError"

    @property
    def details(self) -> str:
        return str(self)


class MissingParameter(ParameterError):
    kind = "MissingParameter"

    def __init__(self, task_id: str, name: str) -> None:
        super().__init__(f"task {task_id!r} requires option -{name}")
        self.task_id = task_id
        self.name = name


class InvalidNumber(ParameterError):
    kind = "InvalidNumber"

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"option -{name} got {value!r}: {reason}")
        self.name = name
        self.value = value


class InputUnreadable(ParameterError):
    kind = "InputUnreadable"

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"cannot read {str(path)!r}: {cause}")
        self.path = path
        self.cause = cause


@dataclass(frozen=True, slots=True)
class InvocationContext:
    """Typed input for exactly one dispatch.

    Only the data the task declared is present: `text` is None for numeric
    tasks and `numbers` is empty for file tasks.
    """

    task_id: str
    text: str | None = None
    path: Path | None = None
    numbers: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    def number(self, name: str) -> int:
        try:
            return self.numbers[name]
        except KeyError:
            raise KeyError(f"task {self.task_id!r} was not given numeric parameter {name!r}") from None

    def require_text(self) -> str:
        if self.text is None:
            raise KeyError(f"task {self.task_id!r} was not given file text")
        return self.text


def _parse_uint(name: str, raw: str, maximum: int) -> int:
    value = raw.strip()
    if not value.isascii() or not value.isdigit():
        raise InvalidNumber(name, raw, "expected a non-negative integer")
    # Length check first: int() refuses very long digit strings.
    if len(value.lstrip("0")) > len(str(maximum)) or int(value) > maximum:
        raise InvalidNumber(name, raw, f"must not exceed {maximum}")
    return int(value)


def _bound(name: str, max_numeric_param: int) -> int:
    maximum = PARAMETERS[name].maximum
    return max_numeric_param if maximum is None else min(maximum, max_numeric_param)


def _required_values(spec: TaskSpec, raw_options: RawOptions) -> dict[str, str]:
    values: dict[str, str] = {}
    for name in spec.required_params:
        raw = raw_options.get(name)
        if raw is None or not raw.strip():
            raise MissingParameter(spec.task_id, name)
        values[name] = raw
    return values


def validate(
    task_id: str | None,
    raw_options: RawOptions,
    *,
    encoding: str = "utf-8",
    max_numeric_param: int = DEFAULT_MAX_NUMERIC_PARAM,
    registry: Mapping[str, TaskSpec] = TASKS,
    loader: Loader = read_data_file,
) -> InvocationContext:
    """Build the invocation context for `task_id` from raw option values.

    Raises:
        UnknownTask: `task_id` is not registered.
        MissingParameter: A required option is absent or blank.
        InvalidNumber: A numeric option is not a non-negative integer in range.
        InputUnreadable: The data file could not be read.
    """

    spec = lookup(task_id, registry)
    values = _required_values(spec, raw_options)
    logger.debug(
        "Parameters present",
        extra={"task": spec.task_id, "params": list(spec.required_params)},
    )

    if spec.input_mode is InputMode.FILE_TEXT:
        (name,) = spec.required_params
        path = Path(values[name])
        try:
            text = loader(path, encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnreadable(path, e) from e
        return InvocationContext(task_id=spec.task_id, text=text, path=path)

    if spec.input_mode is InputMode.NUMERIC_PAIR:
        numbers = {
            name: _parse_uint(name, values[name], _bound(name, max_numeric_param))
            for name in spec.required_params
        }
        logger.debug("Numeric parameters parsed", extra={"task": spec.task_id, "numbers": numbers})
        return InvocationContext(task_id=spec.task_id, numbers=MappingProxyType(numbers))

    return InvocationContext(task_id=spec.task_id)
