"""Invoke the computation routine registered for a task.

Each entry in `ROUTINES` turns an `InvocationContext` into one or more
labelled stages. Stages are produced lazily so that a multi-stage task stops
at the first failing stage and keeps what it already computed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from rosalind_cli.routines import (
    DomainError,
    best_gc_content_in_dataset,
    consensus,
    count_dna_nucleotides,
    dominant_allele_probability,
    get_number_of_rna_from_protein,
    get_protein_mass,
    hamming_distance,
    motif_lookup,
    parse_fasta_dataset,
    profile,
    recurrence_relation,
    recurrence_relation_with_stop,
    reverse_complement_dna,
    transcribe_dna_into_rna,
    translate_rna_into_protein,
)
from rosalind_cli.routines.errors import InvalidDataset
from rosalind_cli.runner.registry import UnknownTask
from rosalind_cli.runner.validation import InvocationContext

logger = logging.getLogger(__name__)

RESULT = "Result"
PROFILE = "Profile"
CONSENSUS = "Consensus"


@dataclass(frozen=True, slots=True)
class Stage:
    """One labelled result. Block stages print their value below the label."""

    label: str
    value: Any
    block: bool = False


@dataclass(frozen=True, slots=True)
class Success:
    task_id: str
    stages: tuple[Stage, ...]


@dataclass(frozen=True, slots=True)
class Failure:
    """A reportable failure; `completed` holds stages that finished before it."""

    task_id: str | None
    error: DomainError | UnknownTask
    completed: tuple[Stage, ...] = ()


Outcome = Success | Failure
Routine = Callable[[InvocationContext], Iterator[Stage]]


def _single(compute: Callable[[InvocationContext], Any]) -> Routine:
    def run(context: InvocationContext) -> Iterator[Stage]:
        yield Stage(RESULT, compute(context))

    return run


def _lines(text: str, expected: int) -> list[str]:
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) != expected:
        raise InvalidDataset(f"expected {expected} non-empty lines, got {len(lines)}")
    return lines


def _two_sequences(context: InvocationContext) -> tuple[str, str]:
    first, second = _lines(context.require_text(), 2)
    return first, second


def _population_counts(context: InvocationContext) -> tuple[int, int, int]:
    fields = context.require_text().split()
    if len(fields) != 3:
        raise InvalidDataset(f"expected three population counts, got {len(fields)}")
    try:
        k, m, n = (int(field) for field in fields)
    except ValueError:
        raise InvalidDataset(f"population counts must be integers, got {fields}") from None
    return k, m, n


def _profile_and_consensus(context: InvocationContext) -> Iterator[Stage]:
    records = parse_fasta_dataset(context.require_text())
    matrix = profile([record.sequence for record in records])
    yield Stage(PROFILE, matrix, block=True)
    yield Stage(CONSENSUS, consensus(matrix), block=True)


ROUTINES: Mapping[str, Routine] = MappingProxyType(
    {
        "dna": _single(lambda ctx: count_dna_nucleotides(ctx.require_text())),
        "rna": _single(lambda ctx: transcribe_dna_into_rna(ctx.require_text())),
        "revc": _single(lambda ctx: reverse_complement_dna(ctx.require_text())),
        "fib": _single(lambda ctx: recurrence_relation(ctx.number("n"), ctx.number("k"))),
        "fibd": _single(lambda ctx: recurrence_relation_with_stop(ctx.number("n"), ctx.number("m"))),
        "prot": _single(lambda ctx: translate_rna_into_protein(ctx.require_text())),
        "hamm": _single(lambda ctx: hamming_distance(*_two_sequences(ctx))),
        "subs": _single(lambda ctx: motif_lookup(*_two_sequences(ctx))),
        "gc": _single(lambda ctx: best_gc_content_in_dataset(ctx.require_text())),
        "mrna": _single(lambda ctx: get_number_of_rna_from_protein(ctx.require_text())),
        "iprb": _single(lambda ctx: dominant_allele_probability(*_population_counts(ctx))),
        "prtm": _single(lambda ctx: get_protein_mass(ctx.require_text())),
        "cons": _profile_and_consensus,
    }
)


def dispatch(
    task_id: str | None,
    context: InvocationContext,
    routines: Mapping[str, Routine] = ROUTINES,
) -> Outcome:
    """Run the routine for `task_id`; domain errors become a `Failure`."""

    routine = routines.get(task_id) if task_id is not None else None
    if routine is None:
        logger.warning("No routine registered", extra={"task": task_id})
        return Failure(task_id=task_id, error=UnknownTask(task_id))

    logger.info("Dispatching task", extra={"task": task_id})
    completed: list[Stage] = []
    try:
        for stage in routine(context):
            completed.append(stage)
    except DomainError as e:
        logger.warning(
            "Task failed on input data",
            extra={"task": task_id, "kind": e.kind, "completed_stages": len(completed)},
        )
        return Failure(task_id=task_id, error=e, completed=tuple(completed))

    logger.info("Task completed", extra={"task": task_id, "stages": len(completed)})
    return Success(task_id=task_id, stages=tuple(completed))
