import logging
from collections import namedtuple
from lessvfs import InvalidArgument
from lessvfs.resolver import PathResolver
from lessvfs.sources import get_bytes

log = logging.getLogger('lessvfs.reader')


class ReaderCapabilities(namedtuple('ReaderCapabilities', ['cache_dependencies'])):
    """
    Optional features a file reader supports.

    cache_dependencies: The reader can report the files it has read, so a consumer can recompile when any of them
                        change.
    """
    def supports(self, name):
        """
        :param name: Capability field name.
        :type name: str
        :rtype: bool
        """
        return bool(getattr(self, name, False))


class FileReader:
    """
    Reads LESS sources from a virtual file store, resolving names against a PathResolver's current directory first.

    One reader (and its resolver) belongs to a single compile pass. Readers hold no locks, concurrent import chains need
    their own reader.
    """
    capabilities = ReaderCapabilities(cache_dependencies=False)
    """:type: ReaderCapabilities"""

    def __init__(self, store, path_resolver=None, encoding='utf-8-sig'):
        """
        :param store: Virtual file store to read from.
        :type store: lessvfs.stores.VirtualFileStore
        :param path_resolver: Resolver to use, a new PathResolver at the virtual root if None.
        :type path_resolver: lessvfs.resolver.PathResolver | None
        :param encoding: Text encoding used by read_text.
        :type encoding: str
        """
        self.store = store
        self.encoding = encoding
        self._path_resolver = None
        self.path_resolver = path_resolver if path_resolver is not None else PathResolver()

    @property
    def path_resolver(self):
        """
        :rtype: lessvfs.resolver.PathResolver
        """
        return self._path_resolver

    @path_resolver.setter
    def path_resolver(self, value):
        if not value:
            raise InvalidArgument('Path resolver may not be empty')
        self._path_resolver = value

    @property
    def use_cache_dependencies(self):
        return self.capabilities.cache_dependencies

    def supports(self, name):
        return self.capabilities.supports(name)

    def resolve(self, name):
        """
        Get the absolute virtual path a name currently resolves to.

        :type name: str
        :rtype: str
        """
        return self._path_resolver.get_full_path(name)

    def file_exists(self, name):
        """
        :param name: File name to resolve and check.
        :type name: str
        :return: If the resolved path exists in the store.
        :rtype: bool
        """
        path = self.resolve(name)
        return self.store.exists(path)

    def read_text(self, name):
        """
        Read the full text contents of a file.

        :param name: File name to resolve and read.
        :type name: str
        :rtype: str
        :raises FileNotFoundError: If the resolved path does not exist in the store.
        """
        path = self.resolve(name)
        log.debug('Reading text \'%s\' as \'%s\'', name, path)
        with self.store.open(path) as stream:
            return get_bytes(stream).decode(self.encoding)

    def read_binary(self, name):
        """
        Read the full contents of a file as bytes.

        :param name: File name to resolve and read.
        :type name: str
        :rtype: bytes
        :raises FileNotFoundError: If the resolved path does not exist in the store.
        """
        path = self.resolve(name)
        log.debug('Reading binary \'%s\' as \'%s\'', name, path)
        with self.store.open(path) as stream:
            return get_bytes(stream)
