import os
from lessvfs import abspath
from lessvfs.stores import register, VirtualFileStore


@register('directory')
class DirectoryStore(VirtualFileStore):
    """
    Store mapping the virtual root on to a physical directory. Virtual paths are normalized before being joined to the
    directory, so they can not reach outside of it.
    """
    def __init__(self, root):
        """
        :param root: Physical directory to serve files from.
        :type root: str
        """
        self.root = os.path.realpath(abspath(root))

    @classmethod
    def from_config(cls, config, base_dir):
        return cls(os.path.join(base_dir, config.get('root', '.')))

    def physical_path(self, path):
        """
        Get the physical file path for a virtual path.

        :type path: str
        :rtype: str
        """
        rel = self.normalize(path).lstrip('/')
        return os.path.join(self.root, *rel.split('/')) if rel != '' else self.root

    def exists(self, path):
        return os.path.isfile(self.physical_path(path))

    def open(self, path):
        physical = self.physical_path(path)
        if not os.path.isfile(physical):
            raise FileNotFoundError('Virtual file \'{0}\' does not exist in \'{1}\''.format(path, self.root))
        return open(physical, 'rb')
