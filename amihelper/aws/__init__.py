import logging

import boto3
from botocore.config import Config


class AWSResources(object):
    def __init__(self, region, retries=5):
        boto3.set_stream_logger('boto3', logging.WARNING)
        self.session = boto3.Session()
        self.region = region
        self.retries = retries
        self._ec2_client = None

    @property
    def ec2_client(self):
        if not self._ec2_client:
            self._ec2_client = self.session.client(
                'ec2',
                region_name=self.region,
                config=Config(retries={'max_attempts': self.retries}))
        return self._ec2_client
