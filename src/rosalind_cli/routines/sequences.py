"""Nucleotide-level routines: counting, transcription, complements, comparisons."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidNucleotide, LengthMismatch

DNA_ALPHABET = "ACGT"

_COMPLEMENTS = {"A": "T", "C": "G", "G": "C", "T": "A"}


def _check_dna(dna: str) -> str:
    dna = dna.strip()
    for position, base in enumerate(dna, start=1):
        if base not in DNA_ALPHABET:
            raise InvalidNucleotide(f"unexpected symbol {base!r} at position {position}")
    return dna


@dataclass(frozen=True, slots=True)
class NucleotideCounts:
    a: int
    c: int
    g: int
    t: int

    def __str__(self) -> str:
        return f"{self.a} {self.c} {self.g} {self.t}"


def count_dna_nucleotides(dna: str) -> NucleotideCounts:
    dna = _check_dna(dna)
    return NucleotideCounts(
        a=dna.count("A"),
        c=dna.count("C"),
        g=dna.count("G"),
        t=dna.count("T"),
    )


def transcribe_dna_into_rna(dna: str) -> str:
    return _check_dna(dna).replace("T", "U")


def reverse_complement_dna(dna: str) -> str:
    dna = _check_dna(dna)
    return "".join(_COMPLEMENTS[base] for base in reversed(dna))


def hamming_distance(s: str, t: str) -> int:
    """Number of positions at which two equal-length sequences differ."""

    s = s.strip()
    t = t.strip()
    if len(s) != len(t):
        raise LengthMismatch(f"sequences have different lengths ({len(s)} != {len(t)})")
    return sum(1 for a, b in zip(s, t) if a != b)


def motif_lookup(s: str, t: str) -> list[int]:
    """Return every 1-based position where `t` occurs in `s`, overlaps included."""

    s = s.strip()
    t = t.strip()
    if not t:
        raise InvalidNucleotide("motif is empty")
    if len(t) > len(s):
        raise LengthMismatch(f"motif is longer than the sequence ({len(t)} > {len(s)})")

    positions = []
    start = s.find(t)
    while start != -1:
        positions.append(start + 1)
        start = s.find(t, start + 1)
    return positions
