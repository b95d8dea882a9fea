from .descriptors import (
    ModificationType, ModificationTypeValue, SequenceMatchingType, modification_types)
from .utils import (
    ModificationNameResolutionError, ModificationStringParseError,
    UnsupportedModificationTypeError)

from .pattern import AminoAcidPattern
from .ions import NeutralLoss, ReporterIon, CvTerm

from .modification import Modification, round_mass

from .source import (
    ModificationSource, ModificationTable, ModificationMassSearch,
    load_from_json, dump_to_json)


__all__ = [
    "ModificationType", "ModificationTypeValue", "SequenceMatchingType", "modification_types",
    "ModificationNameResolutionError", "ModificationStringParseError",
    "UnsupportedModificationTypeError",

    "AminoAcidPattern",
    "NeutralLoss", "ReporterIon", "CvTerm",

    "Modification", "round_mass",

    "ModificationSource", "ModificationTable", "ModificationMassSearch",
    "load_from_json", "dump_to_json",
]
