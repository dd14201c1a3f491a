import os
import pytest


def test_memory_store():
    from lessvfs.stores.memory import MemoryStore

    store = MemoryStore({'styles/a.less': '.a {}'})
    assert store.exists('/styles/a.less')
    assert store.exists('\\styles\\a.less')
    assert store.open('/styles/a.less').read() == b'.a {}'

    store.remove('/styles/a.less')
    assert not store.exists('/styles/a.less')
    with pytest.raises(FileNotFoundError):
        store.open('/styles/a.less')


def test_directory_store(temp_dir):
    from lessvfs.stores.directory import DirectoryStore

    os.makedirs(os.path.join(temp_dir, 'root', 'styles'))
    with open(os.path.join(temp_dir, 'root', 'styles', 'a.less'), 'wb') as fh:
        fh.write(b'.a {}')
    with open(os.path.join(temp_dir, 'outside.less'), 'wb') as fh:
        fh.write(b'.outside {}')

    store = DirectoryStore(os.path.join(temp_dir, 'root'))
    assert store.exists('/styles/a.less')
    assert not store.exists('/styles')
    assert not store.exists('/../outside.less')
    with store.open('/styles/a.less') as fh:
        assert fh.seekable()
        assert fh.read() == b'.a {}'
    with pytest.raises(FileNotFoundError):
        store.open('/../outside.less')


def test_chain_store():
    from lessvfs.stores.chain import ChainStore
    from lessvfs.stores.memory import MemoryStore

    store = ChainStore([MemoryStore({'/a.less': 'first'}),
                        MemoryStore({'/a.less': 'second', '/b.less': 'second'})])
    assert store.open('/a.less').read() == b'first'
    assert store.open('/b.less').read() == b'second'
    assert not store.exists('/c.less')
    with pytest.raises(FileNotFoundError):
        store.open('/c.less')


def test_build_store(temp_dir):
    from lessvfs.stores import build_store, StoreError
    from lessvfs.stores.chain import ChainStore
    from lessvfs.stores.directory import DirectoryStore
    from lessvfs.stores.memory import MemoryStore

    store = build_store({'type': 'chain', 'stores': [
        {'type': 'memory', 'files': {'/override.less': '.o {}'}},
        {'type': 'directory', 'root': 'source'}]}, temp_dir)

    assert isinstance(store, ChainStore)
    assert isinstance(store.stores[0], MemoryStore)
    assert isinstance(store.stores[1], DirectoryStore)
    assert store.stores[1].root == os.path.realpath(os.path.join(temp_dir, 'source'))
    assert store.exists('/override.less')

    with pytest.raises(StoreError):
        build_store({'type': 'nope'}, temp_dir)
    with pytest.raises(StoreError):
        build_store({'type': 'chain', 'stores': []}, temp_dir)


def test_base_store():
    from lessvfs.stores import VirtualFileStore

    store = VirtualFileStore()
    with pytest.raises(NotImplementedError):
        store.exists('/a.less')
    with pytest.raises(NotImplementedError):
        store.open('/a.less')
