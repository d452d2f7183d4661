import re

from amihelper.image import Architecture, ComparableKey, NormalizedImage


class FamilyMatcher(object):
    """
    Encapsulates naming conventions of a single operating system family. Subclasses define family, default owners
    and name patterns, and implement _parse, that returns regexp match of the image name (or None).
    """
    family = None
    default_owners = ()
    name_patterns = ()

    def __init__(self, release: str = None, owners: list = None):
        self.release = release
        self.owners = list(owners) if owners else list(self.default_owners)

    def _parse(self, name: str):
        raise NotImplementedError('Not implemented')

    def _accepts(self, parsed) -> bool:
        return True

    def _release_matches(self, parsed) -> bool:
        raise NotImplementedError('Not implemented')

    def _key(self, image: NormalizedImage, parsed) -> ComparableKey:
        raise NotImplementedError('Not implemented')

    def matches(self, image: NormalizedImage) -> bool:
        if image.owner_id not in self.owners:
            return False
        parsed = self._parse(image.raw_name)
        if parsed is None or not self._accepts(parsed):
            return False
        return self.release is None or self._release_matches(parsed)

    def version_key(self, image: NormalizedImage) -> ComparableKey:
        """
        :return: ComparableKey, or None if image belongs to the family but carries no version information
        """
        parsed = self._parse(image.raw_name)
        if parsed is None:
            return None
        try:
            return self._key(image, parsed)
        except ValueError:
            return None

    def tag(self, image: NormalizedImage) -> NormalizedImage:
        return image._replace(family=self.family)

    def filters(self, architecture: Architecture) -> list:
        """
        Server side filters for ec2 describe_images call
        """
        return [{'Name': 'name', 'Values': list(self.name_patterns)},
                {'Name': 'state', 'Values': ['available']},
                {'Name': 'image-type', 'Values': ['machine']},
                {'Name': 'virtualization-type', 'Values': ['hvm']},
                {'Name': 'root-device-type', 'Values': ['ebs']},
                {'Name': 'architecture', 'Values': [architecture.aws_name]}]

    def __str__(self):
        return '{}(release={}, owners={})'.format(self.__class__.__name__, self.release, self.owners)


def compact_date(value: str) -> str:
    """
    Converts 2024.06.12 or 2024-06-12 to 20240612, validating that date is real
    """
    digits = re.sub('[.-]', '', value)
    if len(digits) != 8 or not digits.isdigit():
        raise ValueError('Invalid date {}'.format(value))
    month, day = int(digits[4:6]), int(digits[6:8])
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        raise ValueError('Invalid date {}'.format(value))
    return digits


def int_tuple(value: str, separator: str = '.') -> tuple:
    return tuple(int(v) for v in value.split(separator) if v) if value else ()
