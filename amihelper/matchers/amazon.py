import re

from amihelper.image import ComparableKey, NormalizedImage, OsFamily
from amihelper.matchers.base import FamilyMatcher, compact_date, int_tuple

# amzn-ami-hvm-2018.03.0.20231218.0-x86_64-gp2
# amzn2-ami-kernel-5.10-hvm-2.0.20240610.1-arm64-gp2
# al2023-ami-2023.5.20240624.0-kernel-6.1-x86_64
_NAME_RE = re.compile(
    r'^(?P<label>al|amzn)(?P<major>\d*)-ami-(?P<minimal>minimal-)?(?:kernel-(?P<kernel>[\d.]+)-)?'
    r'(?:(?P<virtualization>hvm|pv)-)?(?P<version>\d+(?:\.\d+)*)(?:-kernel-(?P<kernel2>[\d.]+))?'
    r'-(?:x86_64|arm64|i386)(?:-(?P<storage>gp2|ebs|s3))?$')

_DATE_RE = re.compile(r'^20\d{6}$')

# Same build is published on gp2 and magnetic volumes, al2023 names carry no storage suffix
STORAGE_RANK = {None: 1, 'gp2': 1, 'ebs': 0}


class AmazonLinuxMatcher(FamilyMatcher):
    family = OsFamily.AMAZON
    default_owners = ('137112412989',)
    name_patterns = ('al20*-ami-*', 'amzn2-ami-*', 'amzn-ami-*')

    def _parse(self, name: str):
        return _NAME_RE.match(name or '')

    def _accepts(self, parsed) -> bool:
        # Paravirtual and instance store images do not start on current instance types
        return not parsed.group('minimal') and parsed.group('virtualization') != 'pv' \
            and parsed.group('storage') != 's3'

    @staticmethod
    def _major(parsed) -> int:
        return int(parsed.group('major')) if parsed.group('major') else 1

    def _release_matches(self, parsed) -> bool:
        release = re.sub('^(al|amzn)', '', str(self.release).lower())
        return release.isdigit() and int(release) == self._major(parsed)

    def _key(self, image: NormalizedImage, parsed) -> ComparableKey:
        parts = parsed.group('version').split('.')
        kernel = int_tuple(parsed.group('kernel') or parsed.group('kernel2'))
        release = (self._major(parsed),) + kernel
        storage = STORAGE_RANK.get(parsed.group('storage'), 0)
        dates = [idx for idx, part in enumerate(parts) if _DATE_RE.match(part)]
        if not dates:
            # Release date is not embedded into the name, image creation date is the best guess
            return ComparableKey(image.created_at.strftime('%Y%m%d'), release,
                                 tuple(int(p) for p in parts) + (storage,))
        idx = dates[-1]
        return ComparableKey(compact_date(parts[idx]), release, tuple(int(p) for p in parts[idx + 1:]) + (storage,))
