class AmiHelperError(Exception):
    pass


class NormalizeError(AmiHelperError):
    def __init__(self, identifier: str, msg: str):
        super(NormalizeError, self).__init__('Image {}: {}'.format(identifier, msg))
        self.identifier = identifier


class UnparseableTimestamp(NormalizeError):
    def __init__(self, identifier: str, value):
        super(UnparseableTimestamp, self).__init__(identifier, 'creation date {!r} can not be parsed'.format(value))
        self.value = value


class UnknownArchitecture(NormalizeError):
    def __init__(self, identifier: str, value):
        super(UnknownArchitecture, self).__init__(identifier, 'architecture {!r} is not supported'.format(value))
        self.value = value


class SelectError(AmiHelperError):
    pass


class NoMatch(SelectError):
    def __init__(self, query):
        msg = 'No {} image found for {} in {}'.format(
            query.family.title, query.architecture.value, query.region or 'the selected region')
        if query.release:
            msg += ' (release {})'.format(query.release)
        super(NoMatch, self).__init__(msg)
        self.query = query


class Ambiguous(SelectError):
    """
    Raised in singleton mode when more than one image shares the top rank.
    """

    def __init__(self, candidates: list):
        msg = 'Singleton was requested but {} images share the top rank: {}'.format(
            len(candidates), ', '.join('{} ({})'.format(c.identifier, c.raw_name) for c in candidates))
        super(Ambiguous, self).__init__(msg)
        self.candidates = candidates


class DataSourceError(AmiHelperError):
    pass


class ConfigError(AmiHelperError):
    pass
