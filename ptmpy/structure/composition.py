'''Chemical compositions are handled by :mod:`glypy.composition`. This module
adds the ``C(2)H(3)NO`` atom chain notation used by modification catalogs,
where counts are written in parentheses after the element and isotopes are
written as a prefix, e.g. ``13C(6)``.
'''
import re

from glypy.composition import formula, Composition
from glypy.composition.composition import (ChemicalCompositionError)


atom_chain_token = re.compile(
    r'''\s*(?P<isotope>[0-9]+)?
        (?P<element>[A-Z][a-z]*)
        (?:\((?P<count>[^)]*)\))?''',
    re.VERBOSE)

element_pattern = re.compile(r"^(?P<element>[A-Z][a-z]*)(?:\[(?P<isotope>[0-9]+)\])?$")


def parse_atom_chain(atom_chain_string):
    """Parse an atom chain string into a :class:`~.Composition`.

    Parameters
    ----------
    atom_chain_string : str
        An atom chain like ``"C(2)H(3)NO"`` or ``"13C(6)15N(2)"``. An empty
        string gives an empty composition.

    Returns
    -------
    :class:`~.Composition`

    Raises
    ------
    ChemicalCompositionError
        If the string is malformed or has a negative or missing count
    """
    composition = Composition()
    position = 0
    n = len(atom_chain_string)
    while position < n:
        if atom_chain_string[position].isspace():
            position += 1
            continue
        match = atom_chain_token.match(atom_chain_string, position)
        if match is None:
            raise ChemicalCompositionError(
                "Could not parse atom chain %r at position %d" % (atom_chain_string, position))
        element = match.group("element")
        isotope = match.group("isotope")
        count = match.group("count")
        if count is None:
            count = 1
        else:
            if not count.isdigit():
                raise ChemicalCompositionError(
                    "Invalid occurrence %r for %s in %r" % (count, element, atom_chain_string))
            count = int(count)
        if isotope is not None:
            element = "%s[%d]" % (element, int(isotope))
        composition[element] = composition[element] + count
        position = match.end()
    return composition


def _atom_chain_order(key):
    match = element_pattern.match(key)
    if match is None:
        return (3, key, 0)
    element = match.group("element")
    isotope = int(match.group("isotope") or 0)
    # Hill order, carbon then hydrogen then everything alphabetically
    if element == "C":
        rank = 0
    elif element == "H":
        rank = 1
    else:
        rank = 2
    return (rank, element, isotope)


def format_atom_chain(composition):
    """Render a :class:`~.Composition` in atom chain notation, the inverse of
    :func:`parse_atom_chain`.

    Elements with a zero count are omitted.

    Parameters
    ----------
    composition : :class:`~.Composition`

    Returns
    -------
    str
    """
    parts = []
    for key in sorted(composition, key=_atom_chain_order):
        count = composition[key]
        if count == 0:
            continue
        match = element_pattern.match(key)
        if match is not None and match.group("isotope"):
            token = match.group("isotope") + match.group("element")
        else:
            token = key
        if count != 1:
            token += "(%d)" % count
        parts.append(token)
    return ''.join(parts)


def is_empty_composition(composition):
    return not any(count for count in composition.values())


def is_same_composition(composition, other):
    """Structural equality of two compositions, treating an element
    with a zero count the same as an absent element. An empty composition
    is the same as a missing one.

    Parameters
    ----------
    composition : :class:`~.Composition`
    other : :class:`~.Composition` or :const:`None`

    Returns
    -------
    bool
    """
    if other is None:
        return is_empty_composition(composition)
    keys = set(composition) | set(other)
    for key in keys:
        if composition.get(key, 0) != other.get(key, 0):
            return False
    return True


__all__ = [
    "formula", "Composition",
    "ChemicalCompositionError",
    "parse_atom_chain", "format_atom_chain",
    "is_same_composition", "is_empty_composition",
]
