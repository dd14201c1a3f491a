"""
Virtual path resolution for LESS imports.

Relative names resolve against a mutable current directory. The compilation driver moves the current directory as it
follows nested imports, and restores it on the way back out.
"""
from lessvfs import InvalidArgument

ROOT = '/'


def normalize(path):
    """
    Normalize a virtual path. Back slashes are treated as separators, '.' segments are dropped, and '..' segments are
    collapsed. A '..' segment that would climb above the virtual root is discarded, so the result is always rooted.

    :param path: Virtual path to normalize. Relative paths are taken as relative to the virtual root.
    :type path: str
    :return: Absolute virtual path, without a trailing slash (except for the root itself.)
    :rtype: str
    """
    parts = []
    for part in path.replace('\\', '/').split('/'):
        if part in ('', '.'):
            continue
        if part == '..':
            if len(parts) > 0:
                parts.pop()
            continue
        parts.append(part)
    return ROOT + '/'.join(parts)


def directory_of(path):
    """
    Get the directory of a virtual file path, with a trailing slash.

    :type path: str
    :rtype: str
    """
    path = normalize(path)
    head = path.rsplit('/', 1)[0]
    return head + '/' if head != '' else ROOT


class PathResolver:
    """
    Resolves import names to absolute virtual paths.

    Names starting with a registered alias (by default '~', the virtual root) are expanded first. Names starting with
    '/' are absolute. Anything else is joined to the current directory.
    """
    DEFAULT_ALIASES = {'~': ROOT}

    def __init__(self, current_directory=ROOT, aliases=None):
        """
        :param current_directory: Directory relative names are resolved against.
        :type current_directory: str
        :param aliases: Alias prefixes mapped to the virtual directories they stand for. None uses DEFAULT_ALIASES.
        :type aliases: dict[str, str] | None
        """
        self.aliases = dict(self.DEFAULT_ALIASES if aliases is None else aliases)
        """:type: dict[str, str]"""
        self._current_directory = ROOT
        self.current_directory = current_directory

    @property
    def current_directory(self):
        """
        Directory relative names are resolved against. Always rooted, always ending with a slash.

        :rtype: str
        """
        return self._current_directory

    @current_directory.setter
    def current_directory(self, value):
        if value is None:
            raise InvalidArgument('Current directory may not be None')
        path = normalize(value)
        self._current_directory = path if path.endswith('/') else path + '/'

    def get_full_path(self, name):
        """
        Resolve a name to an absolute virtual path. Nothing is cached, the current directory is read on every call.

        :param name: File name, relative, absolute, or alias prefixed.
        :type name: str
        :return: Absolute, normalized virtual path.
        :rtype: str
        :raises lessvfs.InvalidArgument: If name is None.
        """
        if name is None:
            raise InvalidArgument('File name may not be None')
        name = name.replace('\\', '/')

        expanded = self._expand_alias(name)
        if expanded is not None:
            return normalize(expanded)
        if name.startswith('/'):
            return normalize(name)
        return normalize(self._current_directory + name)

    def copy(self):
        """
        Get a new resolver with the same current directory and aliases, for use by a separate import chain.

        :rtype: PathResolver
        """
        return PathResolver(self._current_directory, self.aliases)

    def _expand_alias(self, name):
        """
        Replace a leading alias in a name with its directory. Longer aliases are matched first.

        :type name: str
        :return: The expanded name, or None if the name does not start with an alias.
        :rtype: str | None
        """
        for alias in sorted(self.aliases, key=len, reverse=True):
            if name == alias or name.startswith(alias + '/'):
                return self.aliases[alias].rstrip('/') + '/' + name[len(alias):].lstrip('/')
        return None

    def __repr__(self):
        return 'PathResolver({0!r})'.format(self._current_directory)
