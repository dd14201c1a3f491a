import os
import json
import pytest


# noinspection PyShadowingNames
@pytest.fixture
def temp_dir(tmpdir):
    return str(tmpdir)


@pytest.fixture
def memory_store():
    from lessvfs.stores.memory import MemoryStore

    return MemoryStore({
        '/styles/variables.less': '@base: #336699;\n',
        '/styles/partials/variables.less': '@base: #993366;\n',
        '/styles/site.less': '@import "variables";\n.a { color: @base; }\n',
        '/images/logo.png': b'\x89PNG\r\n\x1a\n\x00\x01'
    })


# noinspection PyShadowingNames
@pytest.fixture
def project(temp_dir):
    """
    Project directory with a lessvfs.json and a few sources under 'source'.
    """
    sources = {
        'styles/variables.less': '@width: 10px;\n',
        'styles/site.less': '@import "variables";\n@import "partials/box";\n.site { width: @width; }\n',
        'styles/partials/box.less': '@import "../variables";\n.box { width: @width * 2; }\n'
    }
    for rel, content in sources.items():
        path = os.path.join(temp_dir, 'source', *rel.split('/'))
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as fh:
            fh.write(content)

    with open(os.path.join(temp_dir, 'lessvfs.json'), 'w') as fh:
        json.dump({'current_directory': '/styles/', 'log': {'level': 'WARNING'}}, fh)

    return temp_dir
