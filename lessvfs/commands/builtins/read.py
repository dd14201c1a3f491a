from lessvfs.commands import register


@register(help_msg='Print the contents of a text file')
def read(app, name):
    from lessvfs.commands import CommandError

    reader = app.reader()
    try:
        content = reader.read_text(name)
    except FileNotFoundError as e:
        raise CommandError(str(e))
    except UnicodeDecodeError as e:
        raise CommandError('\'{0}\' is not {1} text: {2}'.format(reader.resolve(name), reader.encoding, e.reason))
    print(content, end='')
    return content
