class SeedLifeError(Exception):
    """Base class of the errors a run can abort with."""


class SeedNotFound(SeedLifeError):

    def __init__(self, label):
        super().__init__('Seed not found: {!r}'.format(label))
        self.label = label


class MalformedInput(SeedLifeError):
    """The submission could not be read into the expected shape."""
