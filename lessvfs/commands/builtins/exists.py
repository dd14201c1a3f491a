from lessvfs.commands import register


@register(help_msg='Check if a name resolves to an existing file')
def exists(app, name):
    reader = app.reader()
    found = reader.file_exists(name)
    print('{0}\t{1}'.format(reader.resolve(name), 'exists' if found else 'missing'))
    return found
