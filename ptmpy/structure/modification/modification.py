'''The :class:`Modification` entity describing one chemical change to a peptide
or protein, together with its derived mass and the equivalence test used to
reconcile modification catalogs.
'''
import threading

from decimal import Decimal, ROUND_HALF_UP

from ..base import ModificationBase
from ..composition import (
    Composition, format_atom_chain, parse_atom_chain,
    is_same_composition, is_empty_composition)
from ..constants import constants

from .descriptors import ModificationType
from .pattern import AminoAcidPattern
from .ions import NeutralLoss, ReporterIon, CvTerm
from .utils import UnsupportedModificationTypeError


def round_mass(mass, precision=None):
    """Round `mass` to `precision` decimal places, rounding ties away from zero.

    The rounding is applied to the shortest decimal representation of the
    float, so ``1.000005`` rounds to ``1.00001`` at 5 places although its binary
    approximation lies slightly below the tie.

    Parameters
    ----------
    mass : float
    precision : int, optional
        The number of decimal places, defaults to ``constants.ROUNDED_MASS_DECIMALS``

    Returns
    -------
    float
    """
    if precision is None:
        precision = constants.ROUNDED_MASS_DECIMALS
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(repr(float(mass))).quantize(quantum, rounding=ROUND_HALF_UP))


_target_phrases = {
    ModificationType.modaa: "{pattern}",
    ModificationType.modn_protein: "Protein N-terminus",
    ModificationType.modnaa_protein: "Protein N-terminus starting with {pattern}",
    ModificationType.modc_protein: "Protein C-terminus",
    ModificationType.modcaa_protein: "Protein C-terminus ending with {pattern}",
    ModificationType.modn_peptide: "Peptide N-terminus",
    ModificationType.modnaa_peptide: "Peptide N-terminus starting with {pattern}",
    ModificationType.modc_peptide: "Peptide C-terminus",
    ModificationType.modcaa_peptide: "Peptide C-terminus ending with {pattern}",
}


_position_phrases = {
    ModificationType.modaa: "Particular amino acid(s)",
    ModificationType.modn_protein: "Protein N terminus",
    ModificationType.modnaa_protein: "Protein N terminus",
    ModificationType.modc_protein: "Protein C terminus",
    ModificationType.modcaa_protein: "Protein C terminus",
    ModificationType.modn_peptide: "Peptide N terminus",
    ModificationType.modnaa_peptide: "Peptide N terminus",
    ModificationType.modc_peptide: "Peptide C terminus",
    ModificationType.modcaa_peptide: "Peptide C terminus",
}


def _lookup_phrase(table, modification_type):
    try:
        return table[modification_type]
    except (KeyError, TypeError):
        raise UnsupportedModificationTypeError(modification_type)


def _reconstruct_modification(cls):
    return cls.__new__(cls)


class Modification(ModificationBase):
    """A named chemical change to a peptide or protein.

    The mass of the modification is either derived from the atoms it adds and
    removes, or was given literally when the composition is unknown (see
    :meth:`from_mass`). A derived mass is computed on first access and cached
    until either composition is replaced. The cached value is computed at most
    once, even when several threads read it concurrently.

    The added and removed compositions and the pattern may be :const:`None`,
    which is distinct from an empty value when testing equivalence with
    :meth:`is_same_as`.

    Attributes
    ----------
    modification_type: :class:`~.ModificationType`
        Where the modification may be placed
    name: str
        The name of the modification
    short_name: str
        An abbreviated name, may be empty
    atom_chain_added: :class:`~.Composition`
        The atoms added to the modified residue
    atom_chain_removed: :class:`~.Composition`
        The atoms removed from the modified residue
    pattern: :class:`~.AminoAcidPattern`
        The residues targeted by the modification
    cv_term: :class:`~.CvTerm`
        A controlled vocabulary reference, may be :const:`None`
    neutral_losses: list of :class:`~.NeutralLoss`
    reporter_ions: list of :class:`~.ReporterIon`
    """

    __slots__ = [
        "_modification_type", "_name", "_short_name",
        "_atom_chain_added", "_atom_chain_removed", "_pattern",
        "_cv_term", "_neutral_losses", "_reporter_ions",
        "_mass", "_ambiguity_key", "_lock"]

    def __init__(self, modification_type, name, short_name=None, atom_chain_added=None,
                 atom_chain_removed=None, pattern=None, cv_term=None):
        if atom_chain_added is None:
            atom_chain_added = Composition()
        if atom_chain_removed is None:
            atom_chain_removed = Composition()
        if pattern is None:
            pattern = AminoAcidPattern()
        self._lock = threading.RLock()
        self._modification_type = ModificationType[modification_type]
        self._name = name
        self._short_name = short_name if short_name is not None else ""
        self._atom_chain_added = self._coerce_composition(atom_chain_added)
        self._atom_chain_removed = self._coerce_composition(atom_chain_removed)
        self._pattern = self._coerce_pattern(pattern)
        self._cv_term = cv_term
        self._neutral_losses = []
        self._reporter_ions = []
        self._mass = None
        self._ambiguity_key = None

    @classmethod
    def from_mass(cls, modification_type, name, mass, residues=None, short_name=None):
        """Create a :class:`Modification` whose mass is known but whose
        composition is not.

        The literal `mass` is authoritative until a composition is set.

        Parameters
        ----------
        modification_type : :class:`~.ModificationType`
        name : str
        mass : float
        residues : Iterable, optional
            The single letter codes of the targeted residues
        short_name : str, optional

        Returns
        -------
        :class:`Modification`
        """
        inst = cls(modification_type, name, short_name=short_name,
                   pattern=AminoAcidPattern.from_residues(residues or ()))
        inst._mass = float(mass)
        return inst

    @staticmethod
    def _coerce_composition(composition):
        if composition is None:
            return None
        if isinstance(composition, str):
            return parse_atom_chain(composition)
        return composition

    @staticmethod
    def _coerce_pattern(pattern, target=0):
        if pattern is None:
            return None
        if isinstance(pattern, str):
            return AminoAcidPattern.from_string(pattern, target)
        return pattern

    @property
    def modification_type(self):
        return self._modification_type

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self._name = value

    @property
    def short_name(self):
        return self._short_name

    @short_name.setter
    def short_name(self, value):
        self._short_name = value

    @property
    def atom_chain_added(self):
        return self._atom_chain_added

    @atom_chain_added.setter
    def atom_chain_added(self, value):
        with self._lock:
            self._atom_chain_added = self._coerce_composition(value)
            self._invalidate()

    @property
    def atom_chain_removed(self):
        return self._atom_chain_removed

    @atom_chain_removed.setter
    def atom_chain_removed(self, value):
        with self._lock:
            self._atom_chain_removed = self._coerce_composition(value)
            self._invalidate()

    @property
    def pattern(self):
        return self._pattern

    @pattern.setter
    def pattern(self, value):
        self._pattern = self._coerce_pattern(value)

    @property
    def cv_term(self):
        return self._cv_term

    @cv_term.setter
    def cv_term(self, value):
        self._cv_term = value

    @property
    def neutral_losses(self):
        return self._neutral_losses

    @neutral_losses.setter
    def neutral_losses(self, value):
        self._neutral_losses = list(value) if value is not None else []

    @property
    def reporter_ions(self):
        return self._reporter_ions

    @reporter_ions.setter
    def reporter_ions(self, value):
        self._reporter_ions = list(value) if value is not None else []

    def add_neutral_loss(self, neutral_loss):
        self._neutral_losses.append(neutral_loss)

    def add_reporter_ion(self, reporter_ion):
        self._reporter_ions.append(reporter_ion)

    def _invalidate(self):
        self._mass = None
        self._ambiguity_key = None

    def _compute_mass(self):
        mass = 0.0
        if self._atom_chain_added is not None:
            mass += self._atom_chain_added.mass
        if self._atom_chain_removed is not None:
            mass -= self._atom_chain_removed.mass
        return mass

    @property
    def mass(self):
        '''The mass delta this modification induces, in Daltons.

        Returns
        -------
        float
        '''
        mass = self._mass
        if mass is None:
            with self._lock:
                mass = self._mass
                if mass is None:
                    mass = self._compute_mass()
                    self._mass = mass
        return mass

    def rounded_mass(self, precision=None):
        """The mass rounded to `precision` decimal places, ties rounding away
        from zero.

        Parameters
        ----------
        precision : int, optional
            Defaults to ``constants.ROUNDED_MASS_DECIMALS``

        Returns
        -------
        float
        """
        return round_mass(self.mass, precision)

    @property
    def ambiguity_key(self):
        '''A key shared by all modifications with exactly the same unrounded mass.

        Returns
        -------
        str
        '''
        key = self._ambiguity_key
        if key is None:
            with self._lock:
                key = self._ambiguity_key
                if key is None:
                    key = repr(self.mass)
                    self._ambiguity_key = key
        return key

    def is_standard_search(self):
        '''Whether the modification targets at most a single residue position,
        as most search engines expect.

        Returns
        -------
        bool
        '''
        return self._pattern is None or len(self._pattern) <= 1

    def is_same_pattern(self, other):
        """Whether `other` targets the same residue pattern as this modification.

        A :const:`None` pattern is only equivalent to a :const:`None` or empty pattern.

        Parameters
        ----------
        other : :class:`Modification`

        Returns
        -------
        bool
        """
        pattern = self._pattern
        other_pattern = other.pattern
        if pattern is None:
            return other_pattern is None or len(other_pattern) == 0
        return pattern.is_same_as(other_pattern, constants.DEFAULT_SEQUENCE_MATCHING)

    @staticmethod
    def _is_same_chain(chain, other_chain):
        if chain is None:
            return other_chain is None or is_empty_composition(other_chain)
        return is_same_composition(chain, other_chain)

    def is_same_atomic_composition(self, other):
        """Whether `other` adds and removes the same atoms as this modification.

        A :const:`None` composition is equivalent to a :const:`None` or empty
        composition on either side, never to a populated one.

        Parameters
        ----------
        other : :class:`Modification`

        Returns
        -------
        bool
        """
        if not self._is_same_chain(self._atom_chain_added, other.atom_chain_added):
            return False
        return self._is_same_chain(self._atom_chain_removed, other.atom_chain_removed)

    def is_same_as(self, other):
        """Whether `other` describes the same chemical modification, placed at
        the same position type and targeting the same residues.

        Names, neutral losses, reporter ions and controlled vocabulary terms
        are not compared. Neither operand's cached mass is populated.

        Parameters
        ----------
        other : :class:`Modification`

        Returns
        -------
        bool
        """
        if self._modification_type is not other.modification_type:
            return False
        if not self.is_same_pattern(other):
            return False
        return self.is_same_atomic_composition(other)

    def _pattern_string(self):
        return str(self._pattern) if self._pattern is not None else ""

    def target_description(self):
        '''Describe the position targeted by the modification.

        Raises
        ------
        UnsupportedModificationTypeError
        '''
        template = _lookup_phrase(_target_phrases, self._modification_type)
        return template.format(pattern=self._pattern_string())

    def html_tooltip(self):
        mass = self.rounded_mass(constants.TOOLTIP_MASS_DECIMALS)
        position = _lookup_phrase(_position_phrases, self._modification_type)
        parts = ["<html>"]
        parts.append("Name: %s<br>" % (self._name,))
        parts.append("Mass: %s<br>" % (mass,))
        parts.append("Type: %s<br>" % (position,))
        if self._pattern is not None and self._pattern.amino_acids_at_target:
            parts.append("Target: %s" % (self._pattern,))
        parts.append("</html>")
        return ''.join(parts)

    def __str__(self):
        target = self.target_description()
        parts = [self._name]
        if self._short_name:
            parts.append("(%s)" % (self._short_name,))
        parts.append("\t")
        if self._atom_chain_added is not None and not is_empty_composition(self._atom_chain_added):
            parts.append("+{%s}" % format_atom_chain(self._atom_chain_added))
        if self._atom_chain_removed is not None and not is_empty_composition(self._atom_chain_removed):
            parts.append("-{%s}" % format_atom_chain(self._atom_chain_removed))
        parts.append(" ({:+})".format(self.rounded_mass()))
        parts.append(" targeting %s" % (target,))
        return ''.join(parts)

    def __repr__(self):
        template = "{self.__class__.__name__}({self.modification_type.name}, {self.name!r}, {mass})"
        return template.format(self=self, mass=self.mass)

    def clone(self):
        dup = self.__class__(
            self._modification_type, self._name, self._short_name,
            None, None, None, self._cv_term)
        dup._atom_chain_added = (
            self._atom_chain_added.clone() if self._atom_chain_added is not None else None)
        dup._atom_chain_removed = (
            self._atom_chain_removed.clone() if self._atom_chain_removed is not None else None)
        dup._pattern = self._pattern.clone() if self._pattern is not None else None
        dup._neutral_losses = list(self._neutral_losses)
        dup._reporter_ions = list(self._reporter_ions)
        dup._mass = self._mass
        dup._ambiguity_key = self._ambiguity_key
        return dup

    def __getstate__(self):
        return {
            "modification_type": self._modification_type.name,
            "name": self._name,
            "short_name": self._short_name,
            "atom_chain_added": self._atom_chain_added,
            "atom_chain_removed": self._atom_chain_removed,
            "pattern": self._pattern,
            "cv_term": self._cv_term,
            "neutral_losses": self._neutral_losses,
            "reporter_ions": self._reporter_ions,
            "mass": self._mass,
            "ambiguity_key": self._ambiguity_key,
        }

    def __setstate__(self, state):
        self._lock = threading.RLock()
        self._modification_type = ModificationType[state['modification_type']]
        self._name = state['name']
        self._short_name = state['short_name']
        self._atom_chain_added = state['atom_chain_added']
        self._atom_chain_removed = state['atom_chain_removed']
        self._pattern = state['pattern']
        self._cv_term = state['cv_term']
        self._neutral_losses = list(state['neutral_losses'])
        self._reporter_ions = list(state['reporter_ions'])
        self._mass = state['mass']
        self._ambiguity_key = state['ambiguity_key']

    def __reduce__(self):
        return _reconstruct_modification, (self.__class__,), self.__getstate__()

    def to_dict(self):
        """Encode the modification as a JSON-compatible record.

        The mass is only written when the modification has no composition to
        derive it from.

        Returns
        -------
        dict
        """
        added = self._atom_chain_added
        removed = self._atom_chain_removed
        d = {
            "name": self._name,
            "short_name": self._short_name,
            "type": self._modification_type.name,
            "added": format_atom_chain(added) if added is not None else None,
            "removed": format_atom_chain(removed) if removed is not None else None,
            "pattern": str(self._pattern) if self._pattern is not None else None,
        }
        if self._pattern is not None and self._pattern.target != 0:
            d['pattern_target'] = self._pattern.target
        has_composition = (
            (added is not None and not is_empty_composition(added)) or
            (removed is not None and not is_empty_composition(removed)))
        if not has_composition and self.mass != 0:
            d['mass'] = self.mass
        if self._cv_term is not None:
            d['cv_term'] = self._cv_term.to_dict()
        if self._neutral_losses:
            d['neutral_losses'] = [loss.to_dict() for loss in self._neutral_losses]
        if self._reporter_ions:
            d['reporter_ions'] = [ion.to_dict() for ion in self._reporter_ions]
        return d

    @classmethod
    def from_dict(cls, d):
        """Decode a record produced by :meth:`to_dict`.

        Parameters
        ----------
        d : dict

        Returns
        -------
        :class:`Modification`
        """
        modification_type = ModificationType[d['type']]
        pattern = cls._coerce_pattern(d.get('pattern'), d.get('pattern_target', 0))
        if 'mass' in d and not d.get('added') and not d.get('removed'):
            inst = cls.from_mass(
                modification_type, d['name'], d['mass'], short_name=d.get('short_name'))
            inst._pattern = pattern
        else:
            inst = cls(modification_type, d['name'], short_name=d.get('short_name'))
            inst._atom_chain_added = cls._coerce_composition(d.get('added'))
            inst._atom_chain_removed = cls._coerce_composition(d.get('removed'))
            inst._pattern = pattern
        cv_term = d.get('cv_term')
        if cv_term is not None:
            inst.cv_term = CvTerm.from_dict(cv_term)
        for loss in d.get('neutral_losses', ()):
            inst.add_neutral_loss(NeutralLoss.from_dict(loss))
        for ion in d.get('reporter_ions', ()):
            inst.add_reporter_ion(ReporterIon.from_dict(ion))
        return inst
