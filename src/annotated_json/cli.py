"""Command-line interface for annotated-json."""

import difflib
import click
from pathlib import Path
from .annotated_json import AnnotatedJSON


@click.group()
@click.version_option(version="1.0.0")
def main():
    """annotated-json - Check and re-format comment-annotated JSON arrays."""
    pass


@main.command()
@click.argument('files', nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(files):
    """Verify that each FILE survives parse -> stringify unchanged."""
    codec = AnnotatedJSON()
    failed = 0

    for path in files:
        # newline='' keeps CRLF so the comparison is byte-faithful
        with open(path, encoding='utf-8', newline='') as handle:
            original = handle.read()
        line_terminator = "\r\n" if "\r\n" in original else "\n"

        try:
            regenerated = codec.stringify(codec.parse(original), line_terminator=line_terminator)
        except ValueError as e:
            click.echo(f"❌ {path}: {e}")
            failed += 1
            continue

        if regenerated == original:
            click.echo(f"✅ {path}")
        else:
            failed += 1
            click.echo(f"❌ {path}: round-trip mismatch")
            diff = difflib.unified_diff(
                original.splitlines(keepends=True),
                regenerated.splitlines(keepends=True),
                fromfile=str(path),
                tofile=f"{path} (regenerated)"
            )
            click.echo("".join(diff), nl=False)

    if failed:
        raise SystemExit(1)


@main.command(name='format')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output file path (default: stdout)')
@click.option('--indent', '-i', default=2, show_default=True, help='Spaces per nesting level')
@click.option('--crlf', is_flag=True, help='Use CRLF line terminators')
def format_file(input_file: Path, output: Path, indent: int, crlf: bool):
    """Re-render INPUT_FILE in canonical annotated-json layout."""
    try:
        codec = AnnotatedJSON(indent=indent, line_terminator="\r\n" if crlf else "\n")
        text = codec.stringify(codec.parse(input_file.read_bytes()))
    except ValueError as e:
        raise click.ClickException(str(e))

    if output:
        with open(output, 'w', encoding='utf-8', newline='') as handle:
            handle.write(text)
        click.echo(f"✅ Wrote {output}")
    else:
        click.echo(text, nl=False)


if __name__ == '__main__':
    main()
