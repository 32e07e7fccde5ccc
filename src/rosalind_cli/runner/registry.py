"""Task registry: which parameters each task needs and how its input arrives.

Adding a task means adding one `TaskSpec` to `TASKS` and one routine to the
dispatcher's table; nothing else changes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class ParamKind(str, Enum):
    PATH = "path"
    UINT = "uint"


class InputMode(str, Enum):
    FILE_TEXT = "file_text"
    NUMERIC_PAIR = "numeric_pair"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class ParamSpec:
    """A command-line option; `maximum` caps UINT values so results stay computable."""

    name: str
    kind: ParamKind
    help: str
    long_name: str | None = None
    metavar: str | None = None
    maximum: int | None = None


# Bounds follow the Rosalind problem statements (n <= 100, k <= 5, m <= 20).
PARAMETERS: Mapping[str, ParamSpec] = MappingProxyType(
    {
        "d": ParamSpec("d", ParamKind.PATH, "set data file name", long_name="data", metavar="NAME"),
        "k": ParamSpec("k", ParamKind.UINT, "offspring amount from each pair", metavar="K", maximum=5),
        "m": ParamSpec("m", ParamKind.UINT, "lifetime in months", metavar="M", maximum=20),
        "n": ParamSpec(
            "n", ParamKind.UINT, "month amount to calculate population", metavar="N", maximum=100
        ),
    }
)

_EXPECTED_KINDS: dict[InputMode, tuple[ParamKind, ...]] = {
    InputMode.FILE_TEXT: (ParamKind.PATH,),
    InputMode.NUMERIC_PAIR: (ParamKind.UINT, ParamKind.UINT),
    InputMode.NONE: (),
}


class UnknownTask(LookupError):
    """Raised when a task identifier has no registry entry."""

    kind = "UnknownTask"

    def __init__(self, task_id: str | None) -> None:
        super().__init__(f"Unknown task: {task_id}")
        self.task_id = task_id


@dataclass(frozen=True, slots=True)
class TaskSpec:
    """Static description of a task's input shape.

    `required_params` is ordered; for NUMERIC_PAIR tasks it is also the order
    in which the routine receives its arguments.
    """

    task_id: str
    title: str
    input_mode: InputMode
    required_params: tuple[str, ...]

    def __post_init__(self) -> None:
        unknown = [name for name in self.required_params if name not in PARAMETERS]
        if unknown:
            raise ValueError(f"Task {self.task_id!r} declares unknown parameters: {unknown}")
        if len(set(self.required_params)) != len(self.required_params):
            raise ValueError(f"Task {self.task_id!r} declares a parameter twice")

        kinds = tuple(PARAMETERS[name].kind for name in self.required_params)
        if kinds != _EXPECTED_KINDS[self.input_mode]:
            raise ValueError(
                f"Task {self.task_id!r} with input mode {self.input_mode.value} "
                f"cannot take parameters {list(self.required_params)}"
            )


def _file_task(task_id: str, title: str) -> TaskSpec:
    return TaskSpec(task_id, title, InputMode.FILE_TEXT, ("d",))


TASKS: Mapping[str, TaskSpec] = MappingProxyType(
    {
        spec.task_id: spec
        for spec in (
            _file_task("dna", "Counting DNA Nucleotides"),
            _file_task("rna", "Transcribing DNA into RNA"),
            _file_task("revc", "Complementing a Strand of DNA"),
            TaskSpec("fib", "Rabbits and Recurrence Relations", InputMode.NUMERIC_PAIR, ("n", "k")),
            TaskSpec("fibd", "Mortal Fibonacci Rabbits", InputMode.NUMERIC_PAIR, ("n", "m")),
            _file_task("prot", "Translating RNA into Protein"),
            _file_task("hamm", "Counting Point Mutations"),
            _file_task("subs", "Finding a Motif in DNA"),
            _file_task("gc", "Computing GC Content"),
            _file_task("mrna", "Inferring mRNA from Protein"),
            _file_task("iprb", "Mendel's First Law"),
            _file_task("prtm", "Calculating Protein Mass"),
            _file_task("cons", "Calculating Consensus and Profile"),
        )
    }
)


def lookup(task_id: str | None, registry: Mapping[str, TaskSpec] = TASKS) -> TaskSpec:
    """Return the spec for `task_id` or raise `UnknownTask`."""

    if task_id is None or task_id not in registry:
        raise UnknownTask(task_id)
    return registry[task_id]
