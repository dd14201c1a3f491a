import inspect

available = {}
""":type: dict[str, Command]"""


class CommandError(Exception):
    pass


class Command:
    """
    A named function runnable from the command line. The arguments a command takes are read from its functions
    signature, leaving out the leading App parameter.
    """
    def __init__(self, func, name=None, help_msg=''):
        """
        :param func: Function to call, taking an App instance followed by the command arguments.
        :type func: callable[lessvfs.app.App, *str]
        :param name: Command name, the functions name if None.
        :type name: str | None
        :param help_msg: One line description of the command.
        :type help_msg: str
        """
        self.func = func
        self.name = name or func.__name__
        self.help_msg = help_msg

        params = list(inspect.signature(func).parameters.values())[1:]
        self.required = [p.name for p in params if p.kind == p.POSITIONAL_OR_KEYWORD and p.default is p.empty]
        self.optional = [p.name for p in params if p.kind == p.POSITIONAL_OR_KEYWORD and p.default is not p.empty]
        self.variadic = any(p.kind == p.VAR_POSITIONAL for p in params)

    @property
    def usage(self):
        """
        Argument usage text, e.g. 'NAME [OUTPUT]'.

        :rtype: str
        """
        parts = [name.upper() for name in self.required]
        parts += ['[{0}]'.format(name.upper()) for name in self.optional]
        if self.variadic:
            parts.append('...')
        return ' '.join(parts)

    def accepts(self, count):
        """
        :param count: Number of command line arguments given.
        :type count: int
        :rtype: bool
        """
        if count < len(self.required):
            return False
        return self.variadic or count <= len(self.required) + len(self.optional)

    def __call__(self, app, *args):
        if not self.accepts(len(args)):
            raise CommandError('Command \'{0}\' takes {1}, got {2} argument(s)'.format(self.name,
                                                                                        self.usage or 'no arguments',
                                                                                        len(args)))
        return self.func(app, *args)


# noinspection PyPep8Naming
class register:
    """
    Decorator adding a function to the available commands.
    """
    def __init__(self, name=None, help_msg=''):
        self.name = name
        self.help_msg = help_msg

    def __call__(self, func):
        command = Command(func, self.name, self.help_msg)
        available[command.name] = command
        return func
