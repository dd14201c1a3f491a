import os
import logging
import logging.handlers
import importlib
from lessvfs import abspath, commands
from lessvfs.config import Config, ConfigError
from lessvfs.compiler import LessCompiler
from lessvfs.reader import FileReader
from lessvfs.resolver import PathResolver
from lessvfs.stores import build_store, StoreError


class AppError(Exception):
    pass


class App:
    CONFIG_FILE = 'lessvfs.json'

    def __init__(self, root=None, store=None, overrides=None):
        """
        Initialize a new App instance for the given project directory.

        :param root: Project directory holding lessvfs.json. If None the current working directory will be used.
        :type root: str | None
        :param store: Store to read from. If None, one is built from the 'store' configuration section.
        :type store: lessvfs.stores.VirtualFileStore | None
        :param overrides: Configuration values merged over those loaded from lessvfs.json.
        :type overrides: dict[str, object] | None
        """
        self.root = os.path.realpath(abspath(root if root is not None else './'))
        self.config_path = os.path.join(self.root, self.CONFIG_FILE)

        try:
            self.config = Config.load(self.config_path)
        except ConfigError as e:
            raise AppError(str(e))
        if overrides:
            self.config.values = Config.merge(self.config.values, overrides)

        self.commands = {}
        """:type: dict[str, lessvfs.commands.Command]"""

        # Import builtin commands
        importlib.import_module('lessvfs.commands.builtins')
        self.commands.update(commands.available)

        # Configure logging
        self.log = logging.getLogger('lessvfs')
        self._configure_logging()

        if store is None:
            try:
                store = build_store(self.config['store'], self.root)
            except StoreError as e:
                raise AppError('Could not build store from \'{0}\': {1}'.format(self.config_path, e))
        self.store = store

    def _configure_logging(self):
        level = logging.getLevelName(str(self.config.get('log.level', 'INFO')).upper())
        if not isinstance(level, int):
            raise AppError('Unknown log level \'{0}\''.format(self.config.get('log.level')))

        self.log.setLevel(logging.DEBUG)
        for handler in list(self.log.handlers):
            self.log.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter('%(asctime)s %(levelname)s: %(message)s')
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        self.log.addHandler(console_handler)

        log_file = self.config.get('log.file')
        if log_file:
            log_file = os.path.join(self.root, log_file)
            os.makedirs(os.path.dirname(log_file), exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(log_file,
                                                                encoding='utf-8',
                                                                maxBytes=2 * 1024 * 1024,
                                                                backupCount=2)
            file_handler.setFormatter(formatter)
            self.log.addHandler(file_handler)

    def resolver(self, current_directory=None):
        """
        Get a new path resolver using the configured aliases.

        :param current_directory: Starting directory, the configured 'current_directory' if None.
        :type current_directory: str | None
        :rtype: lessvfs.resolver.PathResolver
        """
        if current_directory is None:
            current_directory = self.config['current_directory']
        return PathResolver(current_directory, self.config['aliases'])

    def reader(self, current_directory=None):
        """
        Get a new file reader for the apps store. Each compile pass should use its own reader.

        :type current_directory: str | None
        :rtype: lessvfs.reader.FileReader
        """
        return FileReader(self.store, self.resolver(current_directory), self.config['encoding'])

    def compiler(self, current_directory=None):
        """
        :type current_directory: str | None
        :rtype: lessvfs.compiler.LessCompiler
        """
        return LessCompiler(self.reader(current_directory), self.config['compile'])

    def run_command(self, name, *args):
        """
        Run a command.

        :param name: Name of the command to run.
        :type name: str
        :param args: Arguments to pass to the command.
        :type args: list[object]
        :return: Return value of the command being run.
        :rtype: object
        :raises lessvfs.commands.CommandError: If a command with the given name does not exist.
        :raises lessvfs.commands.CommandError: If the number of arguments passed to the command is not correct.
        """
        if name not in self.commands:
            raise commands.CommandError('Command \'{0}\' does not exist'.format(name))
        self.log.debug('Running command \'%s\'', ' '.join([name] + list(args)))
        return self.commands[name](self, *args)
