import logging

import requests

_LOG = logging.getLogger('amihelper.amazon')


class Amazon(object):
    """
    Access to instance metadata, available only when running on ec2 instance
    """

    def __init__(self, timeout: float = 1):
        self.aws_addr = '169.254.169.254'
        self.timeout = timeout

    def _get_token(self) -> str:
        return requests.put(
            'http://{}/latest/api/token'.format(self.aws_addr),
            headers={'X-aws-ec2-metadata-token-ttl-seconds': '60'},
            timeout=self.timeout).text

    def _get_document(self) -> dict:
        try:
            response = requests.get(
                'http://{}/latest/dynamic/instance-identity/document'.format(self.aws_addr),
                headers={'X-aws-ec2-metadata-token': self._get_token()},
                timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as ex:
            _LOG.info('Instance identity document is not available: %s', ex)
            return None

    def get_aws_region(self) -> str:
        doc = self._get_document()
        return doc.get('region') if doc else None
