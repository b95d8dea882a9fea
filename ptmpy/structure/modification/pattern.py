'''Represent the residue patterns targeted by modifications.

A pattern is a sequence of positions, each position allowing one or more
amino acids. One position of the pattern is the *target*, the residue that
actually carries the modification. Patterns are written with a bracketed
notation, one character per single-residue position and a bracketed group
for a position allowing several residues, e.g. ``"[ST]"`` or ``"N[ST]"``.
'''
from ..residue import AminoAcidResidue, UnknownAminoAcidException
from ..constants import constants

from .descriptors import SequenceMatchingType
from .utils import ModificationStringParseError


def _tokenize_pattern(pattern_string):
    positions = []
    i = 0
    n = len(pattern_string)
    while i < n:
        c = pattern_string[i]
        if c == "[":
            end = pattern_string.find("]", i + 1)
            if end == -1:
                raise ModificationStringParseError(
                    "Unclosed bracket in pattern %r" % (pattern_string,))
            group = pattern_string[i + 1:end]
            if "[" in group:
                raise ModificationStringParseError(
                    "Nested bracket in pattern %r" % (pattern_string,))
            positions.append(list(group))
            i = end + 1
        elif c == "]":
            raise ModificationStringParseError(
                "Unopened bracket in pattern %r" % (pattern_string,))
        elif c.isspace():
            i += 1
        else:
            positions.append([c])
            i += 1
    return positions


class AminoAcidPattern(object):
    '''A residue pattern targeted by a modification.

    Attributes
    ----------
    residue_targets: list
        For each position of the pattern, the list of single letter codes
        allowed there. An empty list allows any residue and is stored as ``X``.
    target: int
        The index of the modified position within the pattern
    '''

    def __init__(self, residue_targets=None, target=0):
        if residue_targets is None:
            residue_targets = []
        self.residue_targets = [self._validate(position) for position in residue_targets]
        self.target = target

    @staticmethod
    def _validate(position):
        symbols = []
        for symbol in position:
            symbol = str(symbol).strip().upper()
            try:
                AminoAcidResidue(symbol)
            except UnknownAminoAcidException:
                raise ModificationStringParseError(
                    "Unknown amino acid %r in pattern" % (symbol,))
            if symbol not in symbols:
                symbols.append(symbol)
        if not symbols:
            symbols.append("X")
        return symbols

    @classmethod
    def from_string(cls, pattern_string, target=0):
        """Parse a pattern from its bracketed string form, the inverse of
        :meth:`__str__`.

        Parameters
        ----------
        pattern_string : str
            The pattern, e.g. ``"C"``, ``"[ST]"`` or ``"N[ST]"``
        target : int, optional
            The index of the modified position, by default 0

        Returns
        -------
        :class:`AminoAcidPattern`
        """
        if pattern_string is None:
            return cls()
        return cls(_tokenize_pattern(pattern_string), target)

    @classmethod
    def from_residues(cls, residues):
        """Build a single-position pattern allowing any of `residues`.

        Parameters
        ----------
        residues : Iterable
            Single letter codes, e.g. ``["S", "T", "Y"]``

        Returns
        -------
        :class:`AminoAcidPattern`
        """
        residues = list(residues)
        if not residues:
            return cls()
        return cls([[str(residue)[0] for residue in residues]])

    def __len__(self):
        return len(self.residue_targets)

    def length(self):
        return len(self)

    @property
    def amino_acids_at_target(self):
        '''The single letter codes allowed at the target position.

        Returns
        -------
        list
        '''
        if not self.residue_targets or self.target >= len(self.residue_targets):
            return []
        return list(self.residue_targets[self.target])

    def standard_search_pattern(self):
        '''Compute a pattern targeting only the residues of the target position,
        which standard search engines can handle.

        Returns
        -------
        :class:`AminoAcidPattern`
        '''
        targets = self.amino_acids_at_target
        if not targets:
            return self.__class__()
        return self.__class__([targets], 0)

    def _position_key(self, position, matching_type):
        if matching_type == SequenceMatchingType.string:
            return frozenset(position)
        residues = set()
        for symbol in position:
            residues.update(AminoAcidResidue(symbol).expand())
        if matching_type == SequenceMatchingType.indistinguishable_amino_acids:
            leucine = AminoAcidResidue("L")
            isoleucine = AminoAcidResidue("I")
            if isoleucine in residues:
                residues.discard(isoleucine)
                residues.add(leucine)
        return frozenset(residues)

    def is_same_as(self, other, matching_type=None):
        """Whether `other` targets the same residues at each position.

        Parameters
        ----------
        other : :class:`AminoAcidPattern` or :const:`None`
            The pattern to compare against
        matching_type : :class:`~.SequenceMatchingType`, optional
            How residues are compared. ``string`` compares the codes verbatim,
            ``amino_acid`` expands degenerate codes and
            ``indistinguishable_amino_acids`` additionally confounds ``I`` and ``L``.
            Defaults to ``constants.DEFAULT_SEQUENCE_MATCHING``.

        Returns
        -------
        bool
        """
        if other is None:
            return False
        if matching_type is None:
            matching_type = constants.DEFAULT_SEQUENCE_MATCHING
        matching_type = SequenceMatchingType[matching_type]
        if len(self) != len(other):
            return False
        if self.target != other.target:
            return False
        for position, other_position in zip(self.residue_targets, other.residue_targets):
            if self._position_key(position, matching_type) != self._position_key(
                    other_position, matching_type):
                return False
        return True

    def __eq__(self, other):
        if isinstance(other, AminoAcidPattern):
            return self.is_same_as(other)
        return str(self) == other

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((tuple(frozenset(position) for position in self.residue_targets), self.target))

    def __str__(self):
        parts = []
        for position in self.residue_targets:
            if len(position) == 1:
                parts.append(position[0])
            else:
                parts.append("[%s]" % ''.join(position))
        return ''.join(parts)

    def __repr__(self):
        return "{self.__class__.__name__}({pattern!r}, target={self.target})".format(
            self=self, pattern=str(self))

    def clone(self):
        return self.__class__([list(position) for position in self.residue_targets], self.target)
