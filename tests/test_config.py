import os
from tempfile import mkstemp
from unittest.mock import MagicMock

import pytest

from amihelper.config import DEFAULT_REGION, load_config, load_log_level, load_owners
from amihelper.errors import ConfigError
from amihelper.image import OsFamily


def _amazon(region=None):
    amazon = MagicMock()
    amazon.get_aws_region.return_value = region
    return amazon


def _write_config(text: str) -> str:
    fd, fname = mkstemp(suffix='.yaml', text=True)
    with os.fdopen(fd, 'w') as f:
        f.write(text)
    return fname


def test_defaults():
    config = load_config({}.get, _amazon())
    assert config.region == DEFAULT_REGION
    assert config.retries == 5
    assert config.owners == {}
    assert config.log_level == 'WARNING'


def test_region_precedence():
    env = {'AMI_HELPER_REGION': 'eu-west-1', 'AWS_REGION': 'eu-west-2', 'AWS_DEFAULT_REGION': 'eu-west-3'}
    assert load_config(env.get, _amazon('eu-north-1')).region == 'eu-west-1'
    del env['AMI_HELPER_REGION']
    assert load_config(env.get, _amazon('eu-north-1')).region == 'eu-west-2'
    del env['AWS_REGION']
    assert load_config(env.get, _amazon('eu-north-1')).region == 'eu-west-3'
    del env['AWS_DEFAULT_REGION']
    assert load_config(env.get, _amazon('eu-north-1')).region == 'eu-north-1'


def test_explicit_region_skips_instance_metadata():
    amazon = _amazon('eu-north-1')
    assert load_config({'AWS_REGION': 'eu-west-2'}.get, amazon, region='ap-south-1').region == 'ap-south-1'
    amazon.get_aws_region.assert_not_called()


def test_retries_and_log_level():
    config = load_config({'AMI_HELPER_RETRIES': '10', 'AMI_HELPER_LOG_LEVEL': 'debug'}.get, _amazon())
    assert config.retries == 10
    assert config.log_level == 'DEBUG'

    with pytest.raises(ConfigError):
        load_config({'AMI_HELPER_RETRIES': 'many'}.get, _amazon())


def test_log_level():
    assert load_log_level({}.get) == 'WARNING'
    assert load_log_level({'AMI_HELPER_LOG_LEVEL': 'info'}.get) == 'INFO'


def test_owners_from_file():
    fname = _write_config("""
owners:
  ubuntu:
    - '837727238323'
  Windows: '016951021795'
""")
    config = load_config({'AMI_HELPER_CONFIG': fname}.get, _amazon())
    assert config.owners == {OsFamily.UBUNTU: ['837727238323'], OsFamily.WINDOWS: ['016951021795']}


def test_owners_empty_file():
    assert load_owners(_write_config('')) == {}
    assert load_owners(None) == {}


def test_owners_unknown_family():
    with pytest.raises(ConfigError) as e:
        load_owners(_write_config('owners:\n  gentoo: ["123456789012"]\n'))
    assert 'gentoo' in str(e.value)


def test_owners_missing_file():
    with pytest.raises(ConfigError):
        load_owners('/nonexistent/ami-helper.yaml')
