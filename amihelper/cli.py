#!/usr/bin/env python3
import logging

import click

from amihelper import __version__
from amihelper.aws import AWSResources
from amihelper.aws.catalog import ImageCatalog
from amihelper.config import load_config, load_log_level
from amihelper.errors import AmiHelperError
from amihelper.image import Architecture, OsFamily, OutputShape, SelectionMode, SelectionQuery
from amihelper.matchers import get_matcher
from amihelper.presenter import present
from amihelper.resolver import resolve

_LOG = logging.getLogger('amihelper.cli')

_WINDOWS_DEFAULTS = {'locale': 'English', 'edition': 'Full', 'variant': 'Base'}


def _build_mode(singleton: bool, all_: bool, smoke_test: bool) -> SelectionMode:
    if all_ and (singleton or smoke_test):
        raise click.UsageError('--all can not be combined with --singleton or --smoke-test')
    if singleton or smoke_test:
        return SelectionMode.SINGLETON
    return SelectionMode.ALL if all_ else SelectionMode.FIRST


def _build_shape(just_ami: bool, smoke_test: bool) -> OutputShape:
    if just_ami and smoke_test:
        raise click.UsageError('--just-ami can not be combined with --smoke-test')
    if smoke_test:
        return OutputShape.SMOKE_TEST
    return OutputShape.JUST_IDENTIFIER if just_ami else OutputShape.FULL


def _matcher_options(family: OsFamily, locale: str, edition: str, variant: str) -> dict:
    options = {'locale': locale, 'edition': edition, 'variant': variant}
    if family == OsFamily.WINDOWS:
        return options
    for k, v in options.items():
        if v != _WINDOWS_DEFAULTS[k]:
            _LOG.warning('Option windows-%s=%s is ignored for %s', k, v, family.title)
    return {}


@click.group()
def cli():
    pass


@cli.command('select', help='Select the most recent general purpose image of the operating system for the '
                            'architecture in the region')
@click.option('-o', '--operating-system', required=True, type=click.Choice([f.value for f in OsFamily]),
              help='Operating system family')
@click.option('-a', '--architecture', default='amd64', show_default=True,
              type=click.Choice(['amd64', 'arm64', 'x86_64', 'aarch64']), help='CPU architecture')
@click.option('-r', '--region', type=click.STRING,
              help='AWS region. By default AMI_HELPER_REGION, AWS_REGION, AWS_DEFAULT_REGION, the region of the '
                   'current instance or us-east-2 is used')
@click.option('--release', type=click.STRING,
              help='Only select images of the release (2023, bookworm, 22.04, 2022, ...)')
@click.option('-1', '--singleton', is_flag=True, help='Exit with an error if more than one image shares the top rank')
@click.option('--all', 'all_', is_flag=True, help='List all matching images, most recent first')
@click.option('-j', '--just-ami', is_flag=True, help='Output just the selected image ids')
@click.option('-s', '--smoke-test', is_flag=True,
              help='Output ec2 run-instances arguments used in smoke tests. Implies --singleton')
@click.option('--windows-locale', default='English', show_default=True, help='Windows image locale')
@click.option('--windows-edition', default='Full', show_default=True, help='Windows edition (Full or Core)')
@click.option('--windows-variant', default='Base', show_default=True,
              help='Windows image variant (Base, ContainersLatest, SQL_2019_Standard, ...)')
def select_image(operating_system: str, architecture: str, region: str, release: str, singleton: bool, all_: bool,
                 just_ami: bool, smoke_test: bool, windows_locale: str, windows_edition: str, windows_variant: str):
    mode = _build_mode(singleton, all_, smoke_test)
    shape = _build_shape(just_ami, smoke_test)
    family = OsFamily(operating_system)
    try:
        logging.basicConfig(level=getattr(logging, load_log_level(), logging.WARNING))
        config = load_config(region=region)
        _LOG.info('Using config: %s', config)

        query = SelectionQuery(family=family, architecture=Architecture.from_string(architecture),
                               region=config.region, mode=mode, release=release)
        matcher = get_matcher(family, release=release, owners=config.owners.get(family),
                              **_matcher_options(family, windows_locale, windows_edition, windows_variant))
        catalog = ImageCatalog(AWSResources(region=config.region, retries=config.retries))
        result = resolve(catalog, query, matcher)
    except AmiHelperError as e:
        raise click.ClickException(str(e))

    for line in present(result, shape):
        click.echo(line)


@cli.command('version', help='Show version information for this program')
def version():
    click.echo(__version__)


if __name__ == '__main__':
    cli()
