from __future__ import annotations

import logging
import sys

from typing import IO, Iterable

import click
import tomli

from . import config, html
from .attributes import merge_attributes

logger = logging.getLogger(__name__)

ATTR_HELP = 'Attribute as name=value, or a bare name for a boolean attribute. Dots nest names'


def parse_attributes(specs: Iterable[str]) -> dict:
    attributes = {}
    for spec in specs:
        name, sep, value = spec.partition('=')
        if not name:
            raise click.BadParameter(f'Missing attribute name in "{spec}"', param_hint='--attr')

        value = value if sep else True
        *parents, leaf = name.split('.')
        current = attributes
        for parent in parents:
            nested = current.get(parent)
            if not isinstance(nested, dict):
                # Keep an existing plain value on the bare parent name
                nested = {} if parent not in current else {None: nested}
                current[parent] = nested
            current = nested

        if isinstance(current.get(leaf), dict):
            current[leaf][None] = value
        else:
            current[leaf] = value
    return attributes


def _load_attributes(obj: dict, tag: str, specs: Iterable[str]) -> dict:
    try:
        cfg = config.get_config(path=obj['config_path'])
    except (RuntimeError, tomli.TOMLDecodeError) as exc:
        raise click.ClickException(f'Invalid config {obj["config_path"]}: {exc}')

    return merge_attributes(config.default_attributes(tag, cfg), parse_attributes(specs))


@click.group()
@click.option('--config', 'config_path', default='pyproject.toml', help='Read [tool.berns] from this file')
@click.option('--verbose', default=False, is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx: click.Context, config_path: str, verbose: bool):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level)
    logging.getLogger(__package__).setLevel(level)
    ctx.obj = {'config_path': config_path}


@cli.command()
@click.argument('tag')
@click.option('--attr', '-a', 'specs', multiple=True, help=ATTR_HELP)
@click.option('--content', '-c', default=None, help='Element content, may contain HTML')
@click.option('--stdin', default=False, is_flag=True, help='Read element content from stdin')
@click.option('--strip-tags', default=False, is_flag=True, help='Sanitize content before rendering')
@click.pass_obj
def element(obj: dict, tag: str, specs: tuple[str, ...], content: str, stdin: bool, strip_tags: bool):
    if content is not None and stdin:
        raise click.UsageError('--content and --stdin are mutually exclusive')
    if tag not in html.STANDARD:
        logger.warning('Unknown element <%s>', tag)

    attributes = _load_attributes(obj, tag, specs)

    if stdin:
        content = lambda: sys.stdin.read()
    if strip_tags:
        raw = content
        content = lambda: html.sanitize(raw() if callable(raw) else raw)

    click.echo(html.element(tag, attributes, content))


@cli.command()
@click.argument('tag')
@click.option('--attr', '-a', 'specs', multiple=True, help=ATTR_HELP)
@click.pass_obj
def void(obj: dict, tag: str, specs: tuple[str, ...]):
    if tag not in html.VOID:
        logger.warning('Unknown void element <%s>', tag)

    click.echo(html.void(tag, _load_attributes(obj, tag, specs)))


@cli.command()
@click.argument('text', required=False)
@click.option('--file', '-f', 'source', type=click.File('r'), default='-', help='Read text from this file when TEXT is omitted')
def sanitize(text: str, source: IO[str]):
    if text is None:
        text = source.read()
    click.echo(html.sanitize(text), nl=not text.endswith('\n'))
