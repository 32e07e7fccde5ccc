"""Errors raised by computation routines for malformed domain data."""

from __future__ import annotations


class DomainError(ValueError):
    """Base class for failures caused by the input data rather than the CLI."""

    kind = "DomainError"

    def __init__(self, details: str) -> None:
        super().__init__(details)
        self.details = details


class InvalidNucleotide(DomainError):
    kind = "InvalidNucleotide"


class InvalidCodon(DomainError):
    kind = "InvalidCodon"


class InvalidAminoAcid(DomainError):
    kind = "InvalidAminoAcid"


class LengthMismatch(DomainError):
    kind = "LengthMismatch"


class InvalidDataset(DomainError):
    kind = "InvalidDataset"


class InvalidArgument(DomainError):
    kind = "InvalidArgument"
