"""
LESS compilation on top of a FileReader.

lesscpy only follows @import statements on the physical disk, so LESS imports are inlined here first, through the
reader. Plain CSS imports are lifted out of the source before lesscpy sees it, and put back at the top of the compiled
CSS, so lesscpy is handed a single self contained source.
"""
import io
import re
import logging
import posixpath
from lesscpy.lessc import parser, formatter
from lessvfs.resolver import directory_of

log = logging.getLogger('lessvfs.compiler')

IMPORT_RE = re.compile(r'''
    @import\s*
    (?:\((?P<options>[^)]*)\)\s*)?
    (?:
        url\(\s*(?P<url>[^)]*?)\s*\) |
        (?P<quote>["'])(?P<name>.*?)(?P=quote)
    )
    (?P<media>[^;]*);
    ''', re.VERBOSE)

# Strings and url() are matched so a '//' inside them is not taken as a comment.
SKIP_RE = re.compile(r'''
    (?P<string>"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*') |
    (?P<url>url\([^)]*\)) |
    (?P<comment>/\*.*?\*/|//[^\n]*)
    ''', re.VERBOSE | re.DOTALL)


class CompileError(Exception):
    pass


def comment_spans(text):
    """
    Get the start and end offsets of every block and line comment in a LESS source.

    :type text: str
    :rtype: list[tuple[int, int]]
    """
    return [match.span() for match in SKIP_RE.finditer(text) if match.group('comment') is not None]


def _commented(match, spans):
    return any(start <= match.start() < end for start, end in spans)


class LessCompiler:
    """
    Compiles LESS sources read through a FileReader.

    While an imported file is being expanded, the readers path resolver has its current directory set to that files
    directory, so relative imports inside it resolve next to it. The previous directory is restored once the file is
    done with, including when expansion fails.
    """
    DEFAULT_OPTIONS = {
        'minify': False,
        'xminify': False,
        'tabs': False,
        'spaces': True,
        'max_import_depth': 16
    }

    def __init__(self, reader, options=None):
        """
        :param reader: Reader to load sources through.
        :type reader: lessvfs.reader.FileReader
        :param options: Formatting and import options, merged over DEFAULT_OPTIONS.
        :type options: dict[str, object] | None
        """
        self.reader = reader
        self.options = dict(self.DEFAULT_OPTIONS)
        self.options.update(options or {})

    def compile(self, name):
        """
        Compile a LESS file to CSS. CSS imports that are left for the browser come first in the result.

        :param name: Entry file name, resolved against the readers current directory.
        :type name: str
        :return: CSS text.
        :rtype: str
        :raises CompileError: If imports can not be expanded, or lesscpy fails.
        :raises FileNotFoundError: If the entry file, or a non-optional import, does not exist.
        """
        css_imports, source = self.split_css_imports(self.flatten(name))
        less_parser = parser.LessParser(fail_with_exc=True)
        try:
            less_parser.parse(file=io.StringIO(source))
            css = formatter.Formatter(self._LessOpts(self.options)).format(less_parser)
        except Exception as e:
            raise CompileError('Could not compile \'{0}\': {1}'.format(name, e)) from e
        return '\n'.join(css_imports + [css]) if len(css_imports) > 0 else css

    def flatten(self, name):
        """
        Read a LESS file and inline all of its imports, recursively. Imports with a media query are wrapped in an
        @media block. CSS imports are left where they are.

        :param name: Entry file name, resolved against the readers current directory.
        :type name: str
        :return: LESS source with imports inlined.
        :rtype: str
        """
        if not self.reader.supports('cache_dependencies'):
            log.debug('Reader does not track cache dependencies, imports of \'%s\' will not be reported', name)
        return self._expand(self.reader.resolve(name), [], set())

    @staticmethod
    def split_css_imports(source):
        """
        Take the @import statements out of a flattened source. The '(css)' option is dropped, leaving plain CSS
        statements.

        :param source: Source from flatten().
        :type source: str
        :return: Tuple of the CSS import statements, in order, and the source without them.
        :rtype: tuple[list[str], str]
        """
        spans = comment_spans(source)
        statements = []

        def take(match):
            if _commented(match, spans):
                return match.group(0)
            if match.group('url') is not None:
                target = 'url({0})'.format(match.group('url'))
            else:
                target = match.group('quote') + match.group('name') + match.group('quote')
            statements.append('@import {0}{1};'.format(target, match.group('media').rstrip()))
            return ''

        source = IMPORT_RE.sub(take, source)
        return statements, source

    def _expand(self, path, chain, imported):
        """
        :param path: Absolute virtual path to expand.
        :type path: str
        :param chain: Paths currently being expanded, outermost first.
        :type chain: list[str]
        :param imported: Paths imported so far in this compile.
        :type imported: set[str]
        :rtype: str
        """
        if path in chain:
            raise CompileError('Import cycle: {0}'.format(' -> '.join(chain + [path])))
        if len(chain) >= self.options['max_import_depth']:
            raise CompileError('Import depth of {0} exceeded at \'{1}\''.format(self.options['max_import_depth'], path))

        text = self.reader.read_text(path)
        imported.add(path)

        resolver = self.reader.path_resolver
        previous = resolver.current_directory
        resolver.current_directory = directory_of(path)
        try:
            return self._replace_imports(text, chain + [path], imported)
        finally:
            resolver.current_directory = previous

    def _replace_imports(self, text, chain, imported):
        spans = comment_spans(text)

        def replace(match):
            if _commented(match, spans):
                return match.group(0)

            options = set(o.strip().lower() for o in (match.group('options') or '').split(',') if o.strip())
            is_url = match.group('url') is not None
            name = match.group('url').strip('\'"') if is_url else match.group('name')
            media = match.group('media').strip()

            name = self._import_name(name, options, is_url)
            if name is None:
                return match.group(0)

            path = self.reader.resolve(name)
            if 'optional' in options and not self.reader.file_exists(name):
                log.debug('Skipping missing optional import \'%s\'', path)
                return ''
            if path in imported and 'multiple' not in options:
                return ''
            if 'inline' in options:
                imported.add(path)
                content = self.reader.read_text(name)
            else:
                content = self._expand(path, chain, imported)
            if media != '':
                content = '@media {0} {{\n{1}\n}}'.format(media, content)
            return content

        return IMPORT_RE.sub(replace, text)

    @staticmethod
    def _import_name(name, options, is_url):
        """
        Get the file name a LESS import should read, or None if the import should be left for the browser.

        :type name: str
        :type options: set[str]
        :type is_url: bool
        :rtype: str | None
        """
        if name == '' or 'css' in options:
            return None
        if '://' in name or name.startswith('//'):
            return None

        ext = posixpath.splitext(name)[1].lower()
        if ext == '':
            name += '.less'
            ext = '.less'
        if (ext == '.css' or is_url) and 'less' not in options and 'inline' not in options and ext != '.less':
            return None
        return name

    class _LessOpts:
        def __init__(self, options):
            self.minify = options['minify']
            self.xminify = options['xminify']
            self.tabs = options['tabs']
            self.spaces = options['spaces']
