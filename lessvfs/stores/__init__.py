from lessvfs.resolver import normalize

available = {}
""":type: dict[str, type]"""


class StoreError(Exception):
    pass


class VirtualFileStore:
    """
    Base class for virtual file stores. A store maps absolute virtual paths ('/styles/site.less') to file contents,
    wherever those contents actually live. Readers only ever call exists and open, with paths that have already been
    resolved.
    """
    # Display name, set by the register decorator.
    name = None
    """:type: str | None"""

    def exists(self, path):
        """
        Check if a file exists at the given virtual path. Never raises for missing paths.

        :param path: Absolute virtual path.
        :type path: str
        :rtype: bool
        """
        raise NotImplementedError

    def open(self, path):
        """
        Open a file for binary reading. The caller is responsible for closing the returned stream.

        :param path: Absolute virtual path.
        :type path: str
        :return: Readable binary stream.
        :rtype: io.IOBase
        :raises FileNotFoundError: If no file exists at the path.
        """
        raise NotImplementedError

    @classmethod
    def from_config(cls, config, base_dir):
        """
        Create a store from its configuration section.

        :param config: The 'store' configuration section.
        :type config: dict[str, object]
        :param base_dir: Directory relative physical paths in the configuration are taken from.
        :type base_dir: str
        :rtype: VirtualFileStore
        """
        return cls()

    @staticmethod
    def normalize(path):
        return normalize(path)


# noinspection PyPep8Naming
class register:
    """
    Decorator to add VirtualFileStore class definitions to the available stores.
    """
    def __init__(self, name):
        """
        :param name: Name the store is selected by in configuration.
        :type name: str
        """
        self.name = name

    def __call__(self, cls):
        global available
        cls.name = self.name
        available[self.name] = cls
        return cls


def register_builtins():
    from .memory import MemoryStore
    from .directory import DirectoryStore
    from .chain import ChainStore


def build_store(config, base_dir):
    """
    Create a store from a 'store' configuration section.

    :param config: Store configuration, with at least a 'type' key naming a registered store.
    :type config: dict[str, object]
    :param base_dir: Directory relative physical paths are taken from.
    :type base_dir: str
    :rtype: VirtualFileStore
    :raises StoreError: If the store type is not registered.
    """
    register_builtins()
    store_type = config.get('type')
    if store_type not in available:
        raise StoreError('Unknown store type \'{0}\''.format(store_type))
    return available[store_type].from_config(config, base_dir)
