import io
from lessvfs.stores import register, VirtualFileStore


@register('memory')
class MemoryStore(VirtualFileStore):
    """
    Store holding file contents in a dictionary. Opened files are io.BytesIO buffers.
    """
    def __init__(self, files=None, encoding='utf-8'):
        """
        :param files: Initial files, virtual paths mapped to contents. String contents are encoded with encoding.
        :type files: dict[str, bytes | str] | None
        :type encoding: str
        """
        self.encoding = encoding
        self.files = {}
        """:type: dict[str, bytes]"""
        for path, content in (files or {}).items():
            self.add(path, content)

    @classmethod
    def from_config(cls, config, base_dir):
        return cls(config.get('files'), config.get('encoding', 'utf-8'))

    def add(self, path, content):
        if isinstance(content, str):
            content = content.encode(self.encoding)
        self.files[self.normalize(path)] = bytes(content)

    def remove(self, path):
        self.files.pop(self.normalize(path), None)

    def exists(self, path):
        return self.normalize(path) in self.files

    def open(self, path):
        path = self.normalize(path)
        if path not in self.files:
            raise FileNotFoundError('Virtual file \'{0}\' does not exist'.format(path))
        return io.BytesIO(self.files[path])
