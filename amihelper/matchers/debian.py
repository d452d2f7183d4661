import re

from amihelper.image import ComparableKey, NormalizedImage, OsFamily
from amihelper.matchers.base import FamilyMatcher, compact_date

CODENAMES = {
    'stretch': 9,
    'buster': 10,
    'bullseye': 11,
    'bookworm': 12,
    'trixie': 13,
    'forky': 14,
}

# debian-12-amd64-20240507-1740
_NAME_RE = re.compile(r'^debian-(?P<release>\d+|[a-z]+)-(?:amd64|arm64|x86_64)-(?P<build>.+)$')
_BUILD_RE = re.compile(r'^(?P<date>\d{8})-(?P<serial>\d+)$')


def release_number(value) -> int:
    value = str(value).strip().lower()
    if value.isdigit():
        return int(value)
    return CODENAMES.get(value)


class DebianMatcher(FamilyMatcher):
    family = OsFamily.DEBIAN
    default_owners = ('136693071363',)
    name_patterns = ('debian-*',)

    def _parse(self, name: str):
        parsed = _NAME_RE.match(name or '')
        if parsed and release_number(parsed.group('release')) is None:
            return None
        return parsed

    def _release_matches(self, parsed) -> bool:
        return release_number(parsed.group('release')) == release_number(self.release)

    def _key(self, image: NormalizedImage, parsed) -> ComparableKey:
        build = _BUILD_RE.match(parsed.group('build'))
        if not build:
            raise ValueError('Build {} is not recognized'.format(parsed.group('build')))
        return ComparableKey(compact_date(build.group('date')),
                             (release_number(parsed.group('release')),),
                             (int(build.group('serial')),))
