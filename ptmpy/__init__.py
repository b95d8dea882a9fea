from .structure.modification import (
    Modification, ModificationType, ModificationTable, ModificationSource,
    AminoAcidPattern, SequenceMatchingType,
    NeutralLoss, ReporterIon, CvTerm)
from .structure.residue import (
    AminoAcidResidue, get_all_residues, register_degenerate)
from .structure.composition import (
    Composition, ChemicalCompositionError, parse_atom_chain, format_atom_chain)
from .version import __version__


__all__ = [
    "Modification", "ModificationType", "ModificationTable", "ModificationSource",
    "AminoAcidPattern", "SequenceMatchingType",
    "NeutralLoss", "ReporterIon", "CvTerm",

    "AminoAcidResidue", "get_all_residues", "register_degenerate",

    "Composition", "ChemicalCompositionError", "parse_atom_chain", "format_atom_chain",

    "__version__",
]
