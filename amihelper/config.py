import logging
import os
from collections import namedtuple

import yaml

from amihelper.amazon import Amazon
from amihelper.errors import ConfigError
from amihelper.image import OsFamily

_LOG = logging.getLogger('amihelper.config')

DEFAULT_REGION = 'us-east-2'

Config = namedtuple('Config', ('region', 'retries', 'owners', 'log_level'))


def _load_region(load_func, amazon: Amazon) -> str:
    for name in ('AMI_HELPER_REGION', 'AWS_REGION', 'AWS_DEFAULT_REGION'):
        if load_func(name):
            return load_func(name)
    region = amazon.get_aws_region() if amazon else None
    if region:
        _LOG.info('Using region %s of the current instance', region)
        return region
    return DEFAULT_REGION


def load_owners(path: str) -> dict:
    """
    Loads publisher account overrides from yaml file of form
    owners:
      ubuntu: ['099720109477']
    :return: dict OsFamily -> list of account ids
    """
    if not path:
        return {}
    _LOG.info('Loading owners from %s', path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError('Failed to read configuration file {}: {}'.format(path, e)) from e
    result = {}
    for family, owners in (data.get('owners') or {}).items():
        try:
            family_ = OsFamily(str(family).lower())
        except ValueError:
            raise ConfigError('Unknown operating system "{}" in {}'.format(family, path))
        if isinstance(owners, (str, int)):
            owners = [owners]
        result[family_] = [str(o) for o in owners]
    return result


def load_log_level(load_func=os.getenv) -> str:
    return str(load_func('AMI_HELPER_LOG_LEVEL') or 'WARNING').upper()


def load_config(load_func=os.getenv, amazon: Amazon = None, region: str = None) -> Config:
    """
    Loads configuration from environment. Explicit region wins over environment and instance metadata
    """
    retries = load_func('AMI_HELPER_RETRIES') or '5'
    if not retries.isdigit():
        raise ConfigError('AMI_HELPER_RETRIES must be a number, got "{}"'.format(retries))
    return Config(
        region=region or _load_region(load_func, amazon if amazon is not None else Amazon()),
        retries=int(retries),
        owners=load_owners(load_func('AMI_HELPER_CONFIG')),
        log_level=load_log_level(load_func))
