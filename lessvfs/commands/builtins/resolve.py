from lessvfs.commands import register


@register(help_msg='Print the virtual path a name resolves to')
def resolve(app, name):
    path = app.resolver().get_full_path(name)
    print(path)
    return path
