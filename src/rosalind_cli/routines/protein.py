"""RNA translation and protein-level calculations."""

from __future__ import annotations

from collections import Counter

from .errors import InvalidAminoAcid, InvalidCodon

STOP = "Stop"

RNA_CODON_TABLE: dict[str, str] = {
    "UUU": "F", "CUU": "L", "AUU": "I", "GUU": "V",
    "UUC": "F", "CUC": "L", "AUC": "I", "GUC": "V",
    "UUA": "L", "CUA": "L", "AUA": "I", "GUA": "V",
    "UUG": "L", "CUG": "L", "AUG": "M", "GUG": "V",
    "UCU": "S", "CCU": "P", "ACU": "T", "GCU": "A",
    "UCC": "S", "CCC": "P", "ACC": "T", "GCC": "A",
    "UCA": "S", "CCA": "P", "ACA": "T", "GCA": "A",
    "UCG": "S", "CCG": "P", "ACG": "T", "GCG": "A",
    "UAU": "Y", "CAU": "H", "AAU": "N", "GAU": "D",
    "UAC": "Y", "CAC": "H", "AAC": "N", "GAC": "D",
    "UAA": STOP, "CAA": "Q", "AAA": "K", "GAA": "E",
    "UAG": STOP, "CAG": "Q", "AAG": "K", "GAG": "E",
    "UGU": "C", "CGU": "R", "AGU": "S", "GGU": "G",
    "UGC": "C", "CGC": "R", "AGC": "S", "GGC": "G",
    "UGA": STOP, "CGA": "R", "AGA": "R", "GGA": "G",
    "UGG": "W", "CGG": "R", "AGG": "R", "GGG": "G",
}

MONOISOTOPIC_MASS_TABLE: dict[str, float] = {
    "A": 71.03711,
    "C": 103.00919,
    "D": 115.02694,
    "E": 129.04259,
    "F": 147.06841,
    "G": 57.02146,
    "H": 137.05891,
    "I": 113.08406,
    "K": 128.09496,
    "L": 113.08406,
    "M": 131.04049,
    "N": 114.04293,
    "P": 97.05276,
    "Q": 128.05858,
    "R": 156.10111,
    "S": 87.03203,
    "T": 101.04768,
    "V": 99.06841,
    "W": 186.07931,
    "Y": 163.06333,
}

MRNA_MODULUS = 1_000_000

_CODONS_PER_SYMBOL = Counter(RNA_CODON_TABLE.values())


def translate_rna_into_protein(rna: str) -> str:
    """Translate an mRNA string, stopping at the first stop codon."""

    rna = rna.strip()
    protein = []
    for start in range(0, len(rna) - len(rna) % 3, 3):
        codon = rna[start : start + 3]
        amino_acid = RNA_CODON_TABLE.get(codon)
        if amino_acid is None:
            raise InvalidCodon(f"unknown codon {codon!r} at position {start + 1}")
        if amino_acid == STOP:
            break
        protein.append(amino_acid)
    return "".join(protein)


def _check_protein(protein: str) -> str:
    protein = protein.strip()
    for position, amino_acid in enumerate(protein, start=1):
        if amino_acid not in MONOISOTOPIC_MASS_TABLE:
            raise InvalidAminoAcid(f"unexpected symbol {amino_acid!r} at position {position}")
    return protein


def get_number_of_rna_from_protein(protein: str) -> int:
    """Count the mRNA strings that translate into `protein`, modulo 1,000,000."""

    protein = _check_protein(protein)
    total = _CODONS_PER_SYMBOL[STOP]
    for amino_acid in protein:
        total = (total * _CODONS_PER_SYMBOL[amino_acid]) % MRNA_MODULUS
    return total % MRNA_MODULUS


def get_protein_mass(protein: str) -> float:
    protein = _check_protein(protein)
    return round(sum(MONOISOTOPIC_MASS_TABLE[amino_acid] for amino_acid in protein), 3)
