"""Module that contains the command line app.

Why does this file exist, and why not put this in __main__?

    You might be tempted to import things from __main__ later, but that will cause
    problems: the code will get executed twice:

    - When you run `python -mcommitgraph` python will execute
      ``__main__.py`` as a script. That means there won't be any
      ``commitgraph.__main__`` in ``sys.modules``.
    - When you import __main__ it will get executed again (as a module) because
      there's no ``commitgraph.__main__`` in ``sys.modules``.

    Also see (1) from http://click.pocoo.org/7/setuptools/#setuptools-integration
"""
import logging
from itertools import islice

import click

from commitgraph import __version__, config
from commitgraph.config_logging import setup_logging
from commitgraph.constants import NO_BRANCHES_MSG, NO_COMMITS_MSG
from commitgraph.graph import ColorAssigner, RenderOptions, render_branches, render_lines

from .utils import PaletteType, StyleType, load_document

logger = logging.getLogger(__name__)


def _theme():
    return config.get('theme', {}) or {}


def _placeholder(msg, opts):
    if opts.palette is None:
        click.echo(msg)
    else:
        click.echo(ColorAssigner(opts.palette, _theme()).muted(msg), color=True)


def _load(source):
    try:
        return load_document(source)
    except ValueError as e:
        raise click.ClickException(str(e))


@click.group(no_args_is_help=True, add_help_option=True)
@click.version_option(version=__version__, help='display current commitgraph version')
@click.option('--verbose', '-v', is_flag=True, default=False,
              help='log debug messages to stderr')
def main(verbose):  # pragma: no cover
    setup_logging(cfg_level=logging.DEBUG if verbose else None)


# -------------------------------- Render -------------------------------------


@main.command()
@click.argument('source', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--style', '-s', type=StyleType(), default=None,
              help='glyph set used to draw lanes')
@click.option('--width', '-w', type=int, default=None,
              help='maximum line length; values below 20 are raised to 20')
@click.option('--detailed/--no-detailed', default=None,
              help='add author and date lines under every commit')
@click.option('--meta/--no-meta', 'show_meta', default=None,
              help='append author and date after the message')
@click.option('--color/--no-color', default=None,
              help='colorize lanes and text with the configured theme')
@click.option('--palette', type=PaletteType(), default=None,
              help='comma separated lane colors, implies --color')
@click.option('--limit', '-n', type=click.IntRange(min=0), default=None,
              help='only draw the first N commits')
def render(source, style, width, detailed, show_meta, color, palette, limit):
    """Draw the commit graph of a YAML / JSON history document.

    SOURCE is a file holding a list of commit records (or a mapping with a
    ``commits`` list); use '-' to read from stdin.
    """
    commits, _ = _load(source)
    if limit is not None:
        commits = list(islice(commits, limit))
    try:
        opts = RenderOptions.from_config(style=style, width=width, detailed=detailed,
                                         show_meta=show_meta, color=color, palette=palette)
        if not commits:
            _placeholder(NO_COMMITS_MSG, opts)
            return
        lines = render_lines(commits,
                             opts.style,
                             opts.width,
                             opts.palette,
                             detailed=opts.detailed,
                             show_meta=opts.show_meta,
                             theme=_theme())
        for line in lines:
            click.echo(line, color=opts.palette is not None)
    except (TypeError, ValueError) as e:
        raise click.ClickException(str(e))


# -------------------------------- Branches -----------------------------------


@main.command()
@click.argument('source', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--style', '-s', type=StyleType(), default=None,
              help='glyph set used to mark the current branch')
@click.option('--color/--no-color', default=None,
              help='colorize the list with the configured theme')
def branches(source, style, color):
    """List the branches of a YAML / JSON history document.

    SOURCE must be a mapping holding a ``branches`` list of records with
    ``name``, ``current``, ``ahead`` and ``behind`` keys.
    """
    _, refs = _load(source)
    try:
        opts = RenderOptions.from_config(style=style, color=color)
        if not refs:
            _placeholder(NO_BRANCHES_MSG, opts)
            return
        for line in render_branches(refs, opts.style, opts.palette, theme=_theme()):
            click.echo(line, color=opts.palette is not None)
    except (TypeError, ValueError) as e:
        raise click.ClickException(str(e))


# -------------------------------- Config -------------------------------------


@main.command(name='config')
def show_config():
    """Print the effective configuration as YAML.

    Defaults are overlaid with files in ~/.config/commitgraph and with
    COMMITGRAPH_<SECTION>__<KEY> environment variables.
    """
    click.echo(config.to_yaml().rstrip('\n'))
