import logging

from amihelper.aws.catalog import ImageCatalog
from amihelper.image import SelectionQuery, SelectionResult
from amihelper.matchers import FamilyMatcher
from amihelper.normalizer import normalize_all
from amihelper.selector import select

_LOG = logging.getLogger('amihelper.resolver')


def resolve(catalog: ImageCatalog, query: SelectionQuery, matcher: FamilyMatcher) -> SelectionResult:
    """
    Fetches raw records from the catalog, normalizes them and selects images for the query
    """
    records = catalog.fetch(matcher, query.architecture)
    batch = normalize_all(records)
    if batch.skipped:
        _LOG.warning('Skipped %d of %d images that can not be normalized', len(batch.skipped), len(records))
        for error in batch.skipped:
            _LOG.debug('Skipped: %s', error)

    result = select(batch.images, query, matcher)
    _LOG.info('Selected %d %s image(s) using %s', len(result.images), query.family.title, matcher)
    for image in result.images:
        _LOG.debug('Selected %s (%s)', image.identifier, image.raw_name)
    return result
