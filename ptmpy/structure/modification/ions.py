'''Fragmentation byproducts and controlled vocabulary annotations carried by
a :class:`~.Modification`. These are stored verbatim and do not participate in
mass calculation or equivalence testing.
'''
from glypy.utils import make_struct

from ..composition import Composition, formula, parse_atom_chain, format_atom_chain


def _coerce_composition(composition):
    if isinstance(composition, str):
        return parse_atom_chain(composition)
    return Composition(composition)


class NeutralLossBase(object):
    def __eq__(self, other):
        try:
            return self.label == other.label and self.mass == other.mass
        except AttributeError:
            return False

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.label)


class NeutralLoss(NeutralLossBase):
    '''A neutral fragment which may be lost from a modified residue during
    fragmentation.

    Attributes
    ----------
    composition: :class:`~.Composition`
        The elemental composition of the lost fragment
    mass: float
        The neutral mass of the lost fragment
    label: str
        A name for the loss, defaulting to the formula of `composition`
    fixed: bool
        Whether the loss is always observed when the modification fragments
    '''

    def __init__(self, composition, mass=None, label=None, fixed=False):
        composition = _coerce_composition(composition)
        if label is None:
            label = formula(composition)
        if mass is None:
            mass = composition.mass
        self.composition = composition
        self.mass = mass
        self.label = label
        self.fixed = fixed

    @property
    def name(self):
        return self.label

    def __repr__(self):
        template = "{self.__class__.__name__}({self.composition}, {self.mass}, {self.label})"
        return template.format(self=self)

    def to_dict(self):
        return {
            "name": self.label,
            "composition": format_atom_chain(self.composition),
            "fixed": self.fixed,
        }

    @classmethod
    def from_dict(cls, d):
        return cls(d['composition'], label=d.get('name'), fixed=d.get('fixed', False))


class ReporterIon(NeutralLossBase):
    '''A diagnostic fragment ion released by a modified residue.

    Attributes
    ----------
    composition: :class:`~.Composition`
    mass: float
    label: str
    '''

    def __init__(self, composition, mass=None, label=None):
        composition = _coerce_composition(composition)
        if label is None:
            label = formula(composition)
        if mass is None:
            mass = composition.mass
        self.composition = composition
        self.mass = mass
        self.label = label

    @property
    def name(self):
        return self.label

    def __repr__(self):
        template = "{self.__class__.__name__}({self.label}, {self.mass})"
        return template.format(self=self)

    def to_dict(self):
        return {
            "name": self.label,
            "composition": format_atom_chain(self.composition),
        }

    @classmethod
    def from_dict(cls, d):
        return cls(d['composition'], label=d.get('name'))


_CvTermBase = make_struct("CvTerm", ["ontology", "accession", "name", "value"])


class CvTerm(_CvTermBase):
    '''A reference to a controlled vocabulary entry, such as a Unimod or
    PSI-MOD accession, describing a modification.
    '''
    __slots__ = ()

    def __init__(self, ontology, accession, name, value=None):
        super(CvTerm, self).__init__(ontology, accession, name, value)

    def __eq__(self, other):
        if not isinstance(other, _CvTermBase):
            return False
        return super(CvTerm, self).__eq__(other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.ontology, self.accession))

    def __reduce__(self):
        return self.__class__, (self.ontology, self.accession, self.name, self.value)

    def to_dict(self):
        return {
            "ontology": self.ontology,
            "accession": self.accession,
            "name": self.name,
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, d):
        return cls(d['ontology'], d['accession'], d['name'], d.get('value'))
