from lessvfs.commands import register


@register(name='commands', help_msg='List available commands')
def list_commands(app):
    """
    Print each command with its arguments and description, sorted by name.

    :type app: lessvfs.app.App
    """
    lines = []
    for command in sorted(app.commands.values(), key=lambda c: c.name):
        lines.append(((command.name + ' ' + command.usage).rstrip(), command.help_msg))

    width = max(len(usage) for usage, _ in lines)
    for usage, help_msg in lines:
        print('  {0}    {1}'.format(usage.ljust(width), help_msg))
