'''Represent queryable catalogs of peptide modifications, combining the bundled
default definitions with user-defined modifications.
'''
import json
import bisect
import logging
import warnings

from collections import OrderedDict
from collections.abc import Mapping
from importlib import resources

from ..constants import constants

from .modification import Modification
from .utils import ModificationNameResolutionError


logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def load_from_json(stream):
    """Load a sequence of :class:`~.Modification` objects from
    a JSON stream.

    The stream must contain a list of records as written by
    :meth:`~.Modification.to_dict`.

    Parameters
    ----------
    stream : file-like
        A file-like object over a JSON

    Returns
    -------
    list of :class:`~.Modification`
    """
    return list(map(Modification.from_dict, json.load(stream)))


def dump_to_json(modifications, stream):
    json.dump([mod.to_dict() for mod in modifications], stream, indent=2, sort_keys=True)


class ModificationSource(object):
    """An abstract provider of :class:`~.Modification` objects by name.

    Subclasses implement :meth:`get_modification`. This class also deals with
    loading definitions from file sources and managing the shared default
    instance. Use :class:`ModificationTable` for a concrete catalog.
    """

    _default_definitions = staticmethod(lambda: resources.files(
        "ptmpy.structure.modification").joinpath(
            "data/default_modifications.json").open("r", encoding="utf-8"))

    use_default_definitions = True

    @classmethod
    def _definitions_from_stream_default(cls):
        if not cls.use_default_definitions:
            return []
        with cls._default_definitions() as stream:
            defs = load_from_json(stream)
        logger.debug("Loaded %d default modification definitions", len(defs))
        return defs

    @classmethod
    def load_from_file(cls, stream=None):
        '''Load the modification definitions from a JSON file and instantiate a
        :class:`ModificationSource` from them, treating them as its defaults.'''
        if stream is None:
            return cls()
        defs = load_from_json(stream)
        logger.debug("Loaded %d modification definitions from %r", len(defs), stream)
        return cls(defs)

    bootstrapped = None

    @classmethod
    def bootstrap(cls, reuse=True):
        '''Instantiate a :class:`ModificationSource` from the bundled definitions,
        reusing the instance created by an earlier call if `reuse` is set.'''
        if cls.bootstrapped is not None and reuse:
            return cls.bootstrapped
        instance = cls.load_from_file()
        cls.bootstrapped = instance
        return instance

    def get_modification(self, name):
        """Find the :class:`~.Modification` with the specified name

        Parameters
        ----------
        name : :class:`str`

        Returns
        -------
        :class:`~.Modification` or :const:`None`
            :const:`None` if no modification has that name
        """
        raise NotImplementedError()

    def __getitem__(self, name):
        mod = self.get_modification(name)
        if mod is None:
            raise ModificationNameResolutionError(name)
        return mod

    def __contains__(self, name):
        return self.get_modification(name) is not None

    def __call__(self, name):
        """Find the :class:`~.Modification` with the specified name

        See Also
        --------
        :meth:`get_modification`
        """
        return self.get_modification(name)


class ModificationMassSearch(object):
    '''An index of modifications sorted by mass, searched with an absolute
    error tolerance in Daltons.
    '''
    def __init__(self, modifications):
        self.index = sorted(modifications, key=lambda x: (x.mass, x.name))
        self.masses = [mod.mass for mod in self.index]

    def search_mass(self, mass, error_tolerance=1e-3):
        lo = bisect.bisect_left(self.masses, mass - error_tolerance)
        hi = bisect.bisect_right(self.masses, mass + error_tolerance)
        return self.index[lo:hi]


class ModificationTable(ModificationSource):
    '''A catalog mapping modification names to :class:`~.Modification` instances.

    Default modifications come from the bundled definitions or whatever
    definitions the table was built from. User modifications are added later
    and take precedence over a default modification of the same name.
    '''

    def __init__(self, modifications=None):
        if modifications is None:
            modifications = self._definitions_from_stream_default()
        self.store = OrderedDict()
        self.user_store = OrderedDict()
        self._single_aa_cache = dict()
        self._mass_search = None
        for mod in modifications:
            if isinstance(mod, Mapping):
                mod = Modification.from_dict(mod)
            self.store[mod.name] = mod

    def get_modification(self, name):
        try:
            return self.user_store[name]
        except KeyError:
            pass
        try:
            return self.store[name]
        except KeyError:
            pass
        return self._single_aa_cache.get(name)

    def __len__(self):
        return len(self.modifications)

    def __iter__(self):
        return iter(self.modifications)

    def values(self):
        return [self[name] for name in self.modifications]

    @property
    def default_modifications(self):
        return list(self.store)

    @property
    def user_modifications(self):
        return list(self.user_store)

    @property
    def modifications(self):
        names = list(self.store)
        names.extend(name for name in self.user_store if name not in self.store)
        return names

    @staticmethod
    def _ordered(names):
        return sorted(names, key=lambda x: x.lower())

    @property
    def default_modifications_ordered(self):
        return self._ordered(self.store)

    @property
    def user_modifications_ordered(self):
        return self._ordered(self.user_store)

    @property
    def modifications_ordered(self):
        return self._ordered(self.modifications)

    def is_user_defined(self, name):
        return name in self.user_store

    def _changed(self):
        self._single_aa_cache.clear()
        self._mass_search = None

    def add_user_modification(self, modification):
        """Add a user defined :class:`~.Modification` to the catalog.

        A previous user modification with the same name is replaced. If the
        name is already in use, a warning is issued.

        Parameters
        ----------
        modification : :class:`~.Modification` or :class:`Mapping`
            The modification to add. A :class:`Mapping` is decoded with
            :meth:`~.Modification.from_dict`
        """
        if isinstance(modification, Mapping):
            modification = Modification.from_dict(modification)
        name = modification.name
        if name in self.user_store or name in self.store:
            warnings.warn(
                "Overriding an existing modification definition for %r" % (name,))
        self.user_store[name] = modification
        self._changed()

    def remove_user_modification(self, name):
        """Remove the user defined modification named `name`.

        Parameters
        ----------
        name : :class:`str`

        Returns
        -------
        :class:`~.Modification`
            The removed modification

        Raises
        ------
        ValueError
            If `name` denotes a default modification
        ModificationNameResolutionError
            If no modification has that name
        """
        try:
            modification = self.user_store.pop(name)
        except KeyError:
            if name in self.store:
                raise ValueError("Cannot remove the default modification %r" % (name,))
            raise ModificationNameResolutionError(name)
        self._changed()
        return modification

    def find_equivalent(self, modification):
        """Find the names of the modifications in this catalog which are
        equivalent to `modification` according to :meth:`~.Modification.is_same_as`.

        Parameters
        ----------
        modification : :class:`~.Modification`

        Returns
        -------
        list of :class:`str`
        """
        return [name for name in self.modifications
                if self[name].is_same_as(modification)]

    def ambiguity_groups(self):
        """Group the names of the modifications in this catalog which share
        the same mass, leaving out modifications with a unique mass.

        Returns
        -------
        :class:`OrderedDict`
            Mapping the :attr:`~.Modification.ambiguity_key` of each group to the
            names of its members
        """
        groups = OrderedDict()
        for name in self.modifications:
            key = self[name].ambiguity_key
            groups.setdefault(key, []).append(name)
        return OrderedDict((key, names) for key, names in groups.items() if len(names) > 1)

    def get_single_aa_modification(self, modification):
        """Get a version of `modification` targeting only the residues at the
        target position of its pattern, as needed by most search engines.

        Modifications which are already suitable for standard searches are
        returned unchanged.

        Parameters
        ----------
        modification : :class:`~.Modification` or :class:`str`
            The modification or its name

        Returns
        -------
        :class:`~.Modification`
        """
        if not isinstance(modification, Modification):
            modification = self[modification]
        if modification.is_standard_search():
            return modification
        name = modification.name + constants.SINGLE_AA_SUFFIX
        try:
            return self._single_aa_cache[name]
        except KeyError:
            single = modification.clone()
            single.name = name
            single.pattern = modification.pattern.standard_search_pattern()
            self._single_aa_cache[name] = single
            return single

    def search_mass(self, mass, error_tolerance=1e-3):
        """Find the modifications whose mass is within `error_tolerance`
        Daltons of `mass`.

        Parameters
        ----------
        mass : float
        error_tolerance : float, optional

        Returns
        -------
        list of :class:`~.Modification`
        """
        if self._mass_search is None:
            self._mass_search = ModificationMassSearch(self.values())
        return self._mass_search.search_mass(mass, error_tolerance)

    def dump(self, stream):
        '''Write the default modifications of this catalog to `stream` as JSON'''
        dump_to_json(self.store.values(), stream)

    def dump_user_modifications(self, stream):
        '''Write the user defined modifications of this catalog to `stream` as JSON'''
        dump_to_json(self.user_store.values(), stream)

    def load_user_modifications(self, stream):
        '''Read modifications from a JSON `stream` as written by
        :meth:`dump_user_modifications` and add them as user defined
        modifications.'''
        defs = load_from_json(stream)
        for mod in defs:
            self.add_user_modification(mod)
        logger.debug("Loaded %d user modification definitions from %r", len(defs), stream)
        return defs
