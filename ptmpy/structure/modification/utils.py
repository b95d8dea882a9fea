class ModificationStringParseError(ValueError):
    pass


class ModificationNameResolutionError(KeyError):
    pass


class UnsupportedModificationTypeError(ValueError):
    '''Raised when a value outside of :class:`~.ModificationType` reaches
    code dispatching on the modification type.
    '''

    def __init__(self, modification_type):
        self.modification_type = modification_type
        super(UnsupportedModificationTypeError, self).__init__(
            "Unsupported modification type variant: %r" % (modification_type,))
