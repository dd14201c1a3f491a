from lessvfs.commands import register


@register(name='compile', help_msg='Compile a LESS file, printing or writing the CSS')
def compile_less(app, name, output=None):
    import os
    from lessvfs.commands import CommandError
    from lessvfs.compiler import CompileError

    try:
        css = app.compiler().compile(name)
    except (CompileError, FileNotFoundError) as e:
        raise CommandError(str(e))

    if output is None:
        print(css, end='')
    else:
        target = os.path.abspath(os.path.expanduser(output))
        os.makedirs(os.path.dirname(target), exist_ok=True)
        with open(target, 'w', encoding='utf-8') as fh:
            fh.write(css)
        app.log.info('Compiled \'%s\' to \'%s\'', name, target)
    return css
