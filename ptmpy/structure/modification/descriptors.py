from glypy.utils import Enum
from glypy.utils.enum import EnumValue


_n_term_types = frozenset([
    "modn_protein", "modnaa_protein", "modn_peptide", "modnaa_peptide"])

_c_term_types = frozenset([
    "modc_protein", "modcaa_protein", "modc_peptide", "modcaa_peptide"])

_protein_terminal_types = frozenset([
    "modn_protein", "modnaa_protein", "modc_protein", "modcaa_protein"])

_peptide_terminal_types = frozenset([
    "modn_peptide", "modnaa_peptide", "modc_peptide", "modcaa_peptide"])

_pattern_types = frozenset([
    "modaa", "modnaa_protein", "modcaa_protein", "modnaa_peptide", "modcaa_peptide"])

_descriptions = {
    "modaa": "Modification at particular amino acids",
    "modn_protein": "Modification at the N terminus of a protein",
    "modnaa_protein": "Modification at the N terminus of a protein at particular amino acids",
    "modc_protein": "Modification at the C terminus of a protein",
    "modcaa_protein": "Modification at the C terminus of a protein at particular amino acids",
    "modn_peptide": "Modification at the N terminus of a peptide",
    "modnaa_peptide": "Modification at the N terminus of a peptide at particular amino acids",
    "modc_peptide": "Modification at the C terminus of a peptide",
    "modcaa_peptide": "Modification at the C terminus of a peptide at particular amino acids",
}


class ModificationTypeValue(EnumValue):
    '''A member of :class:`ModificationType`, carrying the placement
    predicates derived from the variant's identity.
    '''
    __slots__ = ()

    @property
    def index(self):
        return self.value

    @property
    def description(self):
        return _descriptions[self.name]

    @property
    def is_n_term(self):
        return self.name in _n_term_types

    @property
    def is_c_term(self):
        return self.name in _c_term_types

    @property
    def is_protein_terminus(self):
        return self.name in _protein_terminal_types

    @property
    def is_peptide_terminus(self):
        return self.name in _peptide_terminal_types

    @property
    def requires_pattern(self):
        '''Whether the placement is constrained by a residue pattern'''
        return self.name in _pattern_types


class ModificationType(Enum):
    '''The positions a modification may be placed at on a peptide or protein.

    The integer value of each member is its stable serialization index.
    '''
    __enum_type__ = ModificationTypeValue

    modaa = 0
    modn_protein = 1
    modnaa_protein = 2
    modc_protein = 3
    modcaa_protein = 4
    modn_peptide = 5
    modnaa_peptide = 6
    modc_peptide = 7
    modcaa_peptide = 8


modification_types = tuple(ModificationType[i] for i in range(9))


for _modification_type in modification_types:
    _modification_type.add_name(_modification_type.description)


class SequenceMatchingType(Enum):
    string = 0
    amino_acid = 1
    indistinguishable_amino_acids = 2


SequenceMatchingType.string.add_name("Character Sequence")
SequenceMatchingType.amino_acid.add_name("Amino Acids")
SequenceMatchingType.indistinguishable_amino_acids.add_name("Indistinguishable Amino Acids")
