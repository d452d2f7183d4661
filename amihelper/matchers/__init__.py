from amihelper.image import OsFamily
from amihelper.matchers.amazon import AmazonLinuxMatcher
from amihelper.matchers.base import FamilyMatcher
from amihelper.matchers.debian import DebianMatcher
from amihelper.matchers.ubuntu import UbuntuMatcher
from amihelper.matchers.windows import WindowsMatcher

_MATCHERS = {
    OsFamily.AMAZON: AmazonLinuxMatcher,
    OsFamily.DEBIAN: DebianMatcher,
    OsFamily.UBUNTU: UbuntuMatcher,
    OsFamily.WINDOWS: WindowsMatcher,
}


def get_matcher(family: OsFamily, release: str = None, owners: list = None, **options) -> FamilyMatcher:
    """
    Creates matcher for the family. Options are passed to the matcher as is (only windows supports locale, edition
    and variant)
    """
    if family not in _MATCHERS:
        raise NotImplementedError('Operating system family "{}" is not supported'.format(family))
    return _MATCHERS[family](release=release, owners=owners, **options)
