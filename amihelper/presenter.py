from amihelper.image import OutputShape, SelectionResult

_COLUMNS = ('AMI', 'OS', 'Architecture', 'Created', 'Name')


def _format_table(table: list) -> list:
    lengths = {n: len(n) for n in _COLUMNS}
    for d in table:
        for k, v in d.items():
            if lengths[k] < len(str(v)):
                lengths[k] = len(str(v))
    format_string = '  '.join(['{!s:' + str(lengths[n]) + 's}' for n in _COLUMNS])
    lines = [format_string.format(*_COLUMNS).rstrip()]
    for item in table:
        lines.append(format_string.format(*[item.get(n, '') for n in _COLUMNS]).rstrip())
    return lines


def present(result: SelectionResult, shape: OutputShape) -> list:
    """
    Renders selection result into lines of text
    :param result: Result of selection
    :param shape: full table, identifiers only, or ec2 run-instances arguments for a smoke test
    :return: list of lines, without line separators
    """
    if shape == OutputShape.JUST_IDENTIFIER:
        return [image.identifier for image in result.images]
    if shape == OutputShape.SMOKE_TEST:
        return ['--image-id "{}" --instance-type "{}.medium"'.format(
            image.identifier, image.architecture.instance_group) for image in result.images]
    return _format_table([{
        'AMI': image.identifier,
        'OS': image.family.title if image.family else '',
        'Architecture': image.architecture.value,
        'Created': image.created_at.strftime('%Y-%m-%dT%H:%M:%SZ'),
        'Name': image.raw_name,
    } for image in result.images])
