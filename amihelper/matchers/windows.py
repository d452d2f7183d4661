import re

from amihelper.image import ComparableKey, NormalizedImage, OsFamily
from amihelper.matchers.base import FamilyMatcher, compact_date

# Windows_Server-2022-English-Full-Base-2024.06.12
# Windows_Server-2012-R2_RTM-English-64Bit-Base-2024.06.12
# Windows_Server-2022-English-Full-EKS_Optimized-1.29-2024.06.12
_NAME_RE = re.compile(
    r'^Windows_Server-(?P<release>\d{4}(?:-R2)?(?:_RTM|_SP\d)?)-(?P<locale>[A-Za-z]+(?:_[A-Za-z]+)*)'
    r'-(?P<edition>Full|Core|64Bit)-(?P<variant>.+)-(?P<build>[^-]+)$')


class WindowsMatcher(FamilyMatcher):
    """
    Matches Windows Server images published by Amazon. By default only English, full edition, base images are
    accepted. Other locales, Core edition or variants (ContainersLatest, SQL_2019_Standard, ...) must be requested
    explicitly.
    """
    family = OsFamily.WINDOWS
    default_owners = ('801119661308',)
    name_patterns = ('Windows_Server-*',)

    def __init__(self, release: str = None, owners: list = None, locale: str = 'English', edition: str = 'Full',
                 variant: str = 'Base'):
        super().__init__(release, owners)
        self.locale = locale
        self.edition = edition
        self.variant = variant

    def _parse(self, name: str):
        return _NAME_RE.match(name or '')

    def _accepts(self, parsed) -> bool:
        if parsed.group('locale').lower() != self.locale.lower():
            return False
        edition = parsed.group('edition')
        if edition == '64Bit':
            # Pre 2016 releases name full edition this way
            edition = 'Full'
        if edition.lower() != self.edition.lower():
            return False
        return parsed.group('variant').lower() == self.variant.lower()

    def _release_matches(self, parsed) -> bool:
        return parsed.group('release').split('_')[0].upper() == str(self.release).strip().upper()

    def _key(self, image: NormalizedImage, parsed) -> ComparableKey:
        release = parsed.group('release')
        return ComparableKey(compact_date(parsed.group('build')), (int(release[:4]), 1 if '-R2' in release else 0), ())
