class MoleculeBase(object):
    __slots__ = ()
    mass = None

    def __copy__(self):
        return self.clone()


class ModificationBase(MoleculeBase):
    '''
    A base type for classes describing peptide sequence modifications
    '''
    __slots__ = ()

    def serialize(self):
        '''A string representation for inclusion in sequences'''
        return self.name


class ResidueBase(MoleculeBase):
    '''
    A base type for classes describing amino acid residues
    '''
    __slots__ = ()
