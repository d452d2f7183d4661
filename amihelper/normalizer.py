from collections import namedtuple
from datetime import datetime, timezone

from amihelper.errors import NormalizeError, UnknownArchitecture, UnparseableTimestamp
from amihelper.image import Architecture, NormalizedImage, RawImageRecord

_TIMESTAMP_FORMATS = ('%Y-%m-%dT%H:%M:%S.%fZ', '%Y-%m-%dT%H:%M:%SZ')

NormalizedBatch = namedtuple('NormalizedBatch', ('images', 'skipped'))


def _parse_timestamp(value) -> datetime:
    if not isinstance(value, str):
        return None
    for fmt in _TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    return None


def normalize(raw: RawImageRecord) -> NormalizedImage:
    """
    Converts catalog record into comparable form. Family is left empty, it is set by family matchers.
    :raises UnknownArchitecture: if architecture spelling is not known
    :raises UnparseableTimestamp: if creation date is not in EC2 ISO-8601 format
    """
    architecture = Architecture.from_string(raw.architecture)
    if architecture is None:
        raise UnknownArchitecture(raw.identifier, raw.architecture)
    created_at = _parse_timestamp(raw.created_at)
    if created_at is None:
        raise UnparseableTimestamp(raw.identifier, raw.created_at)
    return NormalizedImage(
        identifier=raw.identifier,
        family=None,
        architecture=architecture,
        created_at=created_at,
        raw_name=raw.name or '',
        owner_id=raw.owner_id)


def normalize_all(records) -> NormalizedBatch:
    """
    Normalizes all the records, skipping (and counting) the ones that fail
    """
    images = []
    skipped = []
    for raw in records:
        try:
            images.append(normalize(raw))
        except NormalizeError as e:
            skipped.append(e)
    return NormalizedBatch(images=images, skipped=skipped)
