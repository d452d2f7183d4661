from unittest.mock import MagicMock, patch

import requests

from amihelper.amazon import Amazon


@patch('amihelper.amazon.requests.put')
@patch('amihelper.amazon.requests.get')
def test_get_aws_region(get, put):
    put.return_value.text = 'token'
    response = MagicMock()
    response.json.return_value = {'region': 'eu-central-1', 'privateIp': '10.0.0.1'}
    get.return_value = response

    assert Amazon().get_aws_region() == 'eu-central-1'
    assert get.call_args[1]['headers'] == {'X-aws-ec2-metadata-token': 'token'}


@patch('amihelper.amazon.requests.put')
def test_not_on_instance(put):
    put.side_effect = requests.ConnectionError('No route to host')
    assert Amazon().get_aws_region() is None


@patch('amihelper.amazon.requests.put')
@patch('amihelper.amazon.requests.get')
def test_invalid_document(get, put):
    put.return_value.text = 'token'
    get.return_value.json.side_effect = ValueError('Not json')
    assert Amazon().get_aws_region() is None
