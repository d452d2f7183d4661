from amihelper.errors import Ambiguous, NoMatch
from amihelper.image import ComparableKey, SelectionMode, SelectionQuery, SelectionResult
from amihelper.matchers import FamilyMatcher

_LOWEST_KEY = ComparableKey('', (), ())


def _rank(matcher: FamilyMatcher, images: list) -> list:
    """
    Returns (version_key, image) pairs, most recent first. Images without version key go after all ranked ones,
    equal keys are ordered by creation date and then by identifier.
    """
    keyed = [(matcher.version_key(image), image) for image in images]
    return sorted(
        keyed,
        key=lambda p: (p[0] is not None, p[0] or _LOWEST_KEY, p[1].created_at, p[1].identifier),
        reverse=True)


def select(images, query: SelectionQuery, matcher: FamilyMatcher) -> SelectionResult:
    """
    Selects images for the query. Region is not checked here, images are expected to come from the query region.
    :raises NoMatch: if there are no candidates in first or singleton mode
    :raises Ambiguous: if more than one candidate shares top rank in singleton mode
    """
    if matcher.family != query.family:
        raise ValueError('Matcher {} can not be used to select {} images'.format(matcher, query.family.title))
    candidates = [matcher.tag(image) for image in images
                  if image.architecture == query.architecture and matcher.matches(image)]
    ranked = _rank(matcher, candidates)

    if query.mode == SelectionMode.ALL:
        return SelectionResult(query.mode, [image for _, image in ranked])

    if not ranked:
        raise NoMatch(query)

    top_key, top_image = ranked[0]
    if query.mode == SelectionMode.SINGLETON:
        tied = [image for key, image in ranked if key == top_key]
        if len(tied) > 1:
            raise Ambiguous(tied)
    return SelectionResult(query.mode, [top_image])
