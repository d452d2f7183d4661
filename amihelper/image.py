from collections import namedtuple
from enum import Enum


class OsFamily(Enum):
    AMAZON = 'amazon'
    DEBIAN = 'debian'
    UBUNTU = 'ubuntu'
    WINDOWS = 'windows'

    @property
    def title(self) -> str:
        return _FAMILY_TITLES[self]


_FAMILY_TITLES = {
    OsFamily.AMAZON: 'Amazon Linux',
    OsFamily.DEBIAN: 'Debian',
    OsFamily.UBUNTU: 'Ubuntu',
    OsFamily.WINDOWS: 'Windows',
}


class Architecture(Enum):
    AMD64 = 'amd64'
    ARM64 = 'arm64'

    @property
    def aws_name(self) -> str:
        return 'x86_64' if self == Architecture.AMD64 else 'arm64'

    @property
    def instance_group(self) -> str:
        """
        Burstable instance group used to smoke test an image of this architecture
        """
        return 't3a' if self == Architecture.AMD64 else 't4g'

    @staticmethod
    def from_string(value: str):
        """
        Maps any known spelling (x86_64, amd64, arm64, aarch64) to the canonical value
        :return: Architecture or None if the spelling is unknown
        """
        if not isinstance(value, str):
            return None
        return _ARCHITECTURE_ALIASES.get(value.strip().lower())


_ARCHITECTURE_ALIASES = {
    'amd64': Architecture.AMD64,
    'x86_64': Architecture.AMD64,
    'x86-64': Architecture.AMD64,
    'arm64': Architecture.ARM64,
    'aarch64': Architecture.ARM64,
}


class SelectionMode(Enum):
    FIRST = 'first'
    SINGLETON = 'singleton'
    ALL = 'all'


class OutputShape(Enum):
    FULL = 'full'
    JUST_IDENTIFIER = 'just-identifier'
    SMOKE_TEST = 'smoke-test'


RawImageRecord = namedtuple('RawImageRecord', ('owner_id', 'name', 'description', 'architecture', 'created_at',
                                               'identifier'))


def raw_image_from_boto(image: dict) -> RawImageRecord:
    return RawImageRecord(
        owner_id=image.get('OwnerId'),
        name=image.get('Name', ''),
        description=image.get('Description', ''),
        architecture=image.get('Architecture'),
        created_at=image.get('CreationDate'),
        identifier=image['ImageId'])


NormalizedImage = namedtuple('NormalizedImage', ('identifier', 'family', 'architecture', 'created_at', 'raw_name',
                                                 'owner_id'))

SelectionQuery = namedtuple('SelectionQuery', ('family', 'architecture', 'region', 'mode', 'release'))
SelectionQuery.__new__.__defaults__ = (None, SelectionMode.FIRST, None)

SelectionResult = namedtuple('SelectionResult', ('mode', 'images'))

# Ranking value extracted from an image name: date is YYYYMMDD, release and serial are tuples of ints
ComparableKey = namedtuple('ComparableKey', ('date', 'release', 'serial'))
