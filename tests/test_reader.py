import io
import pytest


class _TrackingStore:
    """
    Store wrapper recording every stream it opens, so tests can check streams get closed.
    """
    def __init__(self, store, stream_factory=None):
        self.store = store
        self.stream_factory = stream_factory
        self.opened = []

    def exists(self, path):
        return self.store.exists(path)

    def open(self, path):
        stream = self.store.open(path)
        if self.stream_factory is not None:
            stream = self.stream_factory(stream.read())
        self.opened.append(stream)
        return stream


def test_file_exists(memory_store):
    from lessvfs.reader import FileReader
    from lessvfs.resolver import PathResolver

    reader = FileReader(memory_store, PathResolver('/styles/'))
    assert reader.file_exists('variables.less')
    assert reader.file_exists('/images/logo.png')
    assert reader.file_exists('../images/logo.png')
    assert not reader.file_exists('missing.less')
    assert not reader.file_exists('/styles')


def test_read_text(memory_store):
    from lessvfs.reader import FileReader
    from lessvfs.resolver import PathResolver

    reader = FileReader(memory_store, PathResolver('/styles/'))
    assert reader.resolve('variables.less') == '/styles/variables.less'
    assert reader.read_text('variables.less') == '@base: #336699;\n'


def test_read_text_strips_bom():
    from lessvfs.reader import FileReader
    from lessvfs.stores.memory import MemoryStore

    reader = FileReader(MemoryStore({'/a.less': b'\xef\xbb\xbf.a {}'}), encoding='utf-8-sig')
    assert reader.read_text('a.less') == '.a {}'


def test_read_binary(memory_store):
    from lessvfs.reader import FileReader

    reader = FileReader(memory_store)
    assert reader.path_resolver.current_directory == '/'
    assert reader.read_binary('images/logo.png') == b'\x89PNG\r\n\x1a\n\x00\x01'


def test_missing_files(memory_store):
    from lessvfs.reader import FileReader

    reader = FileReader(memory_store)
    with pytest.raises(FileNotFoundError):
        reader.read_text('styles/missing.less')
    with pytest.raises(FileNotFoundError):
        reader.read_binary('styles/missing.less')


def test_resolution_not_cached(memory_store):
    from lessvfs.reader import FileReader
    from lessvfs.resolver import PathResolver

    resolver = PathResolver('/styles/')
    reader = FileReader(memory_store, resolver)
    first = reader.read_text('variables.less')
    resolver.current_directory = '/styles/partials/'
    second = reader.read_text('variables.less')

    assert first == '@base: #336699;\n'
    assert second == '@base: #993366;\n'


def test_streams_closed(memory_store):
    from lessvfs.reader import FileReader

    store = _TrackingStore(memory_store, lambda data: io.BufferedReader(io.BytesIO(data)))
    reader = FileReader(store)
    assert reader.read_binary('/styles/variables.less') == b'@base: #336699;\n'
    assert reader.read_text('/styles/variables.less') == '@base: #336699;\n'
    assert len(store.opened) == 2
    assert all(stream.closed for stream in store.opened)


def test_stream_closed_on_failure(memory_store):
    from lessvfs.reader import FileReader

    reader = FileReader(_TrackingStore(memory_store), encoding='ascii')
    reader.store.store.add('/bad.less', b'\xff\xfe')
    with pytest.raises(UnicodeDecodeError):
        reader.read_text('/bad.less')
    assert reader.store.opened[0].closed


def test_resolver_assignment(memory_store):
    from lessvfs import InvalidArgument
    from lessvfs.reader import FileReader
    from lessvfs.resolver import PathResolver

    resolver = PathResolver('/styles/')
    reader = FileReader(memory_store, resolver)

    with pytest.raises(InvalidArgument):
        reader.path_resolver = None
    assert reader.path_resolver is resolver

    other = PathResolver('/styles/partials/')
    reader.path_resolver = other
    assert reader.path_resolver is other
    assert reader.read_text('variables.less') == '@base: #993366;\n'


def test_capabilities(memory_store):
    from lessvfs.reader import FileReader

    reader = FileReader(memory_store)
    assert reader.use_cache_dependencies is False
    assert reader.capabilities.cache_dependencies is False
    assert not reader.supports('cache_dependencies')
    assert not reader.supports('unknown_feature')
    with pytest.raises(AttributeError):
        reader.use_cache_dependencies = True
