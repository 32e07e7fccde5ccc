"""Computation routines for the supported Rosalind problems.

Each routine is a pure function: typed input in, typed result out, or a
`DomainError` when the data itself is malformed.
"""

from rosalind_cli.routines.dataset import (
    FastaRecord,
    GcContent,
    Profile,
    best_gc_content_in_dataset,
    consensus,
    parse_fasta_dataset,
    profile,
)
from rosalind_cli.routines.errors import DomainError
from rosalind_cli.routines.genetics import dominant_allele_probability
from rosalind_cli.routines.protein import (
    get_number_of_rna_from_protein,
    get_protein_mass,
    translate_rna_into_protein,
)
from rosalind_cli.routines.recurrence import recurrence_relation, recurrence_relation_with_stop
from rosalind_cli.routines.sequences import (
    NucleotideCounts,
    count_dna_nucleotides,
    hamming_distance,
    motif_lookup,
    reverse_complement_dna,
    transcribe_dna_into_rna,
)

__all__ = [
    "DomainError",
    "FastaRecord",
    "GcContent",
    "NucleotideCounts",
    "Profile",
    "best_gc_content_in_dataset",
    "consensus",
    "count_dna_nucleotides",
    "dominant_allele_probability",
    "get_number_of_rna_from_protein",
    "get_protein_mass",
    "hamming_distance",
    "motif_lookup",
    "parse_fasta_dataset",
    "profile",
    "recurrence_relation",
    "recurrence_relation_with_stop",
    "reverse_complement_dna",
    "transcribe_dna_into_rna",
]
