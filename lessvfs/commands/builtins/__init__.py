from lessvfs.commands.builtins.resolve import resolve
from lessvfs.commands.builtins.exists import exists
from lessvfs.commands.builtins.read import read
from lessvfs.commands.builtins.compile import compile_less
from lessvfs.commands.builtins.list_commands import list_commands
