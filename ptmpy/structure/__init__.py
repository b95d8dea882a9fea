from .constants import constants

from . import composition
from .composition import (
    Composition, formula, ChemicalCompositionError,
    parse_atom_chain, format_atom_chain)

from . import base
from .base import (MoleculeBase, ModificationBase, ResidueBase)

from . import residue
from .residue import (
    AminoAcidResidue, UnknownAminoAcidException, register_degenerate, get_all_residues)

from . import modification
from .modification import (
    Modification, ModificationType, SequenceMatchingType, AminoAcidPattern,
    NeutralLoss, ReporterIon, CvTerm,
    ModificationSource, ModificationTable,
    ModificationStringParseError, ModificationNameResolutionError,
    UnsupportedModificationTypeError)


__all__ = [
    "constants",

    "composition", "Composition", "formula", "ChemicalCompositionError",
    "parse_atom_chain", "format_atom_chain",

    "base",
    "MoleculeBase", "ModificationBase", "ResidueBase",

    "residue",
    "AminoAcidResidue", "UnknownAminoAcidException", "register_degenerate", "get_all_residues",

    "modification",
    "Modification", "ModificationType", "SequenceMatchingType", "AminoAcidPattern",
    "NeutralLoss", "ReporterIon", "CvTerm",
    "ModificationSource", "ModificationTable",
    "ModificationStringParseError", "ModificationNameResolutionError",
    "UnsupportedModificationTypeError",
]
