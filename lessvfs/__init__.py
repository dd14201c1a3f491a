import os

__version__ = '0.1'


class InvalidArgument(ValueError):
    """
    Raised when a required value is absent, such as assigning None as a readers path resolver.
    """
    pass


def abspath(path):
    return os.path.abspath(os.path.expanduser(path))
