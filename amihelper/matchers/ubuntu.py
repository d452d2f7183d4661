import re

from amihelper.image import ComparableKey, NormalizedImage, OsFamily
from amihelper.matchers.base import FamilyMatcher, compact_date, int_tuple

# Only EBS backed general purpose server streams, best storage first
STORAGE_RANK = {
    'hvm-ssd-gp3': 3,
    'hvm-ssd': 2,
    'ebs-ssd': 1,
    'ebs': 0,
}

# ubuntu/images/hvm-ssd-gp3/ubuntu-noble-24.04-amd64-server-20240607
_NAME_RE = re.compile(
    r'^ubuntu/images/(?P<storage>' + '|'.join(sorted(STORAGE_RANK, key=len, reverse=True)) + r')/'
    r'ubuntu-(?P<codename>[a-z]+)-(?P<release>\d+\.\d+)-(?:amd64|arm64)-server-(?P<build>.+)$')
_BUILD_RE = re.compile(r'^(?P<date>\d{8})(?:\.(?P<revision>\d+))?$')


class UbuntuMatcher(FamilyMatcher):
    family = OsFamily.UBUNTU
    default_owners = ('099720109477',)
    name_patterns = ('ubuntu/images/*',)

    def _parse(self, name: str):
        return _NAME_RE.match(name or '')

    def _release_matches(self, parsed) -> bool:
        release = str(self.release).strip().lower()
        return release in (parsed.group('release'), parsed.group('codename'))

    def _key(self, image: NormalizedImage, parsed) -> ComparableKey:
        build = _BUILD_RE.match(parsed.group('build'))
        if not build:
            raise ValueError('Build {} is not recognized'.format(parsed.group('build')))
        return ComparableKey(compact_date(build.group('date')),
                             int_tuple(parsed.group('release')),
                             (int(build.group('revision') or 0), STORAGE_RANK[parsed.group('storage')]))
