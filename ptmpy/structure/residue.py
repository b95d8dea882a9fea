from .base import ResidueBase
from .composition import Composition


symbol_to_residue = {
    'A': 'Ala',
    'R': 'Arg',
    'N': 'Asn',
    'D': 'Asp',
    'C': 'Cys',
    'E': 'Glu',
    'Q': 'Gln',
    'G': 'Gly',
    'H': 'His',
    'I': 'Ile',
    'L': 'Leu',
    'K': 'Lys',
    'M': 'Met',
    'F': 'Phe',
    'P': 'Pro',
    'S': 'Ser',
    'T': 'Thr',
    'W': 'Trp',
    'Y': 'Tyr',
    'V': 'Val',
    "U": "Sec",
    "O": "Pyl",
    "X": "Unk"
}


residue_to_symbol = {value: key for key, value in symbol_to_residue.items()}


symbol_to_long = {
    "A": "Alanine",
    "R": "Arginine",
    "N": "Asparagine",
    "D": "Aspartic Acid",
    "C": "Cysteine",
    "E": "Glutamic Acid",
    "Q": "Glutamine",
    "G": "Glycine",
    "H": "Histidine",
    "I": "Isoleucine",
    "L": "Leucine",
    "K": "Lysine",
    "M": "Methionine",
    "F": "Phenylalanine",
    "P": "Proline",
    "S": "Serine",
    "T": "Threonine",
    "W": "Tryptophan",
    "Y": "Tyrosine",
    "V": "Valine",
    "X": "Unknown",
    "U": "Selenocysteine",
    "O": "Pyrrolysine",
}


residue_table = {
    'Ala': 'C3H5NO',
    'Arg': 'C6H12N4O1',
    'Asn': 'C4H6N2O2',
    'Asp': 'C4H5N1O3',
    'Cys': 'C3H5N1O1S1',
    'Glu': 'C5H7NO3',
    'Gln': 'C5H8N2O2',
    'Gly': 'C2H3N1O1',
    'His': 'C6H7N3O1',
    'Ile': 'C6H11N1O1',
    'Leu': 'C6H11N1O1',
    'Lys': 'C6H12N2O1',
    'Met': 'C5H9N1O1S1',
    'Phe': 'C9H9N1O1',
    'Pro': 'C5H7N1O1',
    'Ser': 'C3H5N1O2',
    'Thr': 'C4H7N1O2',
    'Trp': 'C11H10N2O1',
    'Tyr': 'C9H9N1O2',
    'Val': 'C5H9N1O1',
    "Sec": "C3H5NO1Se",
    "Pyl": "C12H19N3O2",
    "Unk": "",
}


degeneracy_index = {
}


standard_residues = [
    'Ala',
    'Arg',
    'Asn',
    'Asp',
    'Cys',
    'Glu',
    'Gln',
    'Gly',
    'His',
    'Ile',
    'Leu',
    'Lys',
    'Met',
    'Phe',
    'Pro',
    'Ser',
    'Thr',
    'Trp',
    'Tyr',
    'Val',
]


class UnknownAminoAcidException(KeyError):
    pass


class MemoizedResidueMetaclass(type):
    '''
    A metaclass that memoizes Residues as they are constructed
    by overriding the class __call__ method. It will attempt to
    look up previously created residues by symbol, then by name.
    If a previous instance is not found, it will be created and
    saved.

    Attributes
    ----------
    _cache: dict

    '''

    def __call__(self, symbol=None, name=None):
        try:
            cache = self._cache
        except AttributeError:
            cache = self._cache = dict()
        if symbol is None and name is None:
            raise UnknownAminoAcidException("Must provide a symbol or name parameter")
        key = symbol if symbol is not None else name
        try:
            return cache[key]
        except KeyError:
            if symbol is not None:
                inst = type.__call__(self, symbol=symbol)
            else:
                inst = type.__call__(self, name=name)
            cache[inst.symbol] = inst
            cache[inst.name] = inst
            return inst


class AminoAcidResidue(ResidueBase, metaclass=MemoizedResidueMetaclass):
    '''
    Represent a single amino acid residue which may be targeted by a
    modification. The structure itself is intended to be immutable.

    Attributes
    ----------
    name: str
        The three letter abbreviation for the amino acid
    symbol: str
        The single letter abbreviation for the amino acid
    mass: float
        The neutral mass of the amino acid
    composition: :class:`glypy.Composition`
        The chemical composition of the amino acid
    '''
    __slots__ = ["name", "symbol", "mass", "composition", "_hash"]

    def __init__(self, symbol=None, name=None):
        self.symbol = symbol
        self.name = name
        self.mass = 0.0
        try:
            if symbol is not None:
                self._by_symbol(symbol)
            elif name is not None:
                self._by_name(name)
        except KeyError:
            raise UnknownAminoAcidException(
                "No definition for Amino Acid %s" % (symbol if symbol is not None else name))
        self._hash = hash(self.name)

    def _by_name(self, name):
        self.composition = Composition(residue_table[name])
        self.name = name
        self.mass = self.composition.mass
        self.symbol = residue_to_symbol[name]

    def _by_symbol(self, symbol):
        try:
            name = symbol_to_residue[symbol]
            self._by_name(name)
        except KeyError:
            self._by_name(symbol)

    def __repr__(self):
        return self.name

    def __str__(self):
        return self.symbol

    def __hash__(self):
        return self._hash

    def __eq__(self, other):
        if self is other:
            return True
        try:
            return self.name == other.name or self.symbol == other.symbol
        except AttributeError:
            return self.name == other or self.symbol == other

    def __ne__(self, other):
        return not self == other

    def __reduce__(self):
        return AminoAcidResidue, (self.symbol, )

    @property
    def is_degenerate(self):
        try:
            return degeneracy_index[self.name]
        except KeyError:
            return False

    @property
    def is_unknown(self):
        return self.name == "Unk"

    @property
    def long_name(self):
        try:
            return symbol_to_long[self.symbol]
        except KeyError:
            return self.name

    def expand(self):
        '''The concrete residues this residue may stand for.

        A degenerate residue expands to its members, the unknown
        residue to all of the standard residues, and any other residue
        to itself.

        Returns
        -------
        frozenset
        '''
        if self.is_unknown:
            return frozenset(get_all_residues())
        degenerate = self.is_degenerate
        if degenerate:
            return frozenset(map(AminoAcidResidue, degenerate))
        return frozenset([self])


Residue = AminoAcidResidue


def register_degenerate(name, symbol, mappings):
    assert symbol not in symbol_to_residue
    assert name not in residue_table
    residue_to_symbol[name] = symbol
    symbol_to_residue[symbol] = name
    residue_table[name] = residue_table[mappings[0]]
    degeneracy_index[name] = frozenset(mappings)
    return AminoAcidResidue(symbol=symbol)


register_degenerate("Xle", "J", ["Leu", "Ile"])
register_degenerate("Asx", "B", ["Asn", "Asp"])
register_degenerate("Glx", "Z", ["Gln", "Glu"])


def get_all_residues(omit_unknown=True, standard_only=True):
    '''Get a collection of all :class:`AminoAcidResidue` types defined.

    Parameters
    ----------
    omit_unknown: bool
        Whether to discard ``X`` or not.
    standard_only: bool
        Whether to include only the 20 standard amino acids or all
        defined amino acids.
    Returns
    -------
    set
    '''
    if standard_only:
        return set(map(AminoAcidResidue, standard_residues))
    residues = set(map(AminoAcidResidue, symbol_to_residue))
    if omit_unknown:
        residues.remove(AminoAcidResidue("X"))
    return residues


AminoAcidResidue.get_all_residues = staticmethod(get_all_residues)
