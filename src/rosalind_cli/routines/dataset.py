"""Multi-record (FASTA) datasets: GC content, profile matrices and consensus strings."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from .errors import InvalidDataset, InvalidNucleotide, LengthMismatch
from .sequences import DNA_ALPHABET


@dataclass(frozen=True, slots=True)
class FastaRecord:
    identifier: str
    sequence: str


def parse_fasta_dataset(text: str) -> list[FastaRecord]:
    """Parse FASTA text; sequences may span several lines."""

    records: list[FastaRecord] = []
    identifier: str | None = None
    chunks: list[str] = []

    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith(">"):
            if identifier is not None:
                records.append(FastaRecord(identifier=identifier, sequence="".join(chunks)))
            identifier = line[1:].strip()
            if not identifier:
                raise InvalidDataset(f"record header without identifier on line {line_number}")
            chunks = []
        elif identifier is None:
            raise InvalidDataset(f"sequence data before the first header on line {line_number}")
        else:
            chunks.append(line)

    if identifier is not None:
        records.append(FastaRecord(identifier=identifier, sequence="".join(chunks)))
    if not records:
        raise InvalidDataset("dataset contains no records")
    return records


@dataclass(frozen=True, slots=True)
class GcContent:
    identifier: str
    percentage: float

    def __str__(self) -> str:
        return f"{self.identifier}\n{self.percentage:.6f}"


def _gc_percentage(sequence: str) -> float:
    if not sequence:
        return 0.0
    gc = sum(1 for base in sequence if base in "GC")
    return gc * 100 / len(sequence)


def best_gc_content_in_dataset(text: str) -> GcContent:
    """Return the record with the highest GC percentage (first one wins a tie)."""

    candidates = [
        GcContent(record.identifier, _gc_percentage(record.sequence))
        for record in parse_fasta_dataset(text)
    ]
    return max(candidates, key=lambda candidate: candidate.percentage)


@dataclass(frozen=True, slots=True)
class Profile:
    """Per-position nucleotide counts; `rows[base][i]` is the count of `base` at i."""

    rows: Mapping[str, tuple[int, ...]]

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", MappingProxyType(dict(self.rows)))

    def __hash__(self) -> int:
        return hash(tuple(self.rows.get(base, ()) for base in DNA_ALPHABET))

    @property
    def width(self) -> int:
        return len(self.rows[DNA_ALPHABET[0]])

    def __str__(self) -> str:
        return "\n".join(
            f"{base}: {' '.join(str(count) for count in self.rows[base])}"
            for base in DNA_ALPHABET
        )


def profile(sequences: Sequence[str]) -> Profile:
    if not sequences:
        raise InvalidDataset("profile requires at least one sequence")

    width = len(sequences[0])
    counts = {base: [0] * width for base in DNA_ALPHABET}
    for index, sequence in enumerate(sequences, start=1):
        if len(sequence) != width:
            raise LengthMismatch(
                f"sequence {index} has length {len(sequence)}, expected {width}"
            )
        for position, base in enumerate(sequence):
            if base not in counts:
                raise InvalidNucleotide(
                    f"unexpected symbol {base!r} in sequence {index} at position {position + 1}"
                )
            counts[base][position] += 1

    return Profile(rows={base: tuple(column) for base, column in counts.items()})


def consensus(matrix: Profile) -> str:
    """Majority base per position; ties resolve in A, C, G, T order."""

    if matrix.width == 0:
        raise InvalidDataset("profile is empty")
    return "".join(
        max(DNA_ALPHABET, key=lambda base: matrix.rows[base][position])
        for position in range(matrix.width)
    )
