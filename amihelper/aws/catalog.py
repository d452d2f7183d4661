import logging

from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from amihelper.aws import AWSResources
from amihelper.errors import DataSourceError
from amihelper.image import Architecture, raw_image_from_boto
from amihelper.matchers import FamilyMatcher

_LOG = logging.getLogger('amihelper.aws.catalog')


class ImageCatalog(object):
    """
    Lists images from ec2 image catalog of a single region
    """

    def __init__(self, aws: AWSResources):
        self._aws = aws

    @property
    def region(self):
        return self._aws.region

    def fetch(self, matcher: FamilyMatcher, architecture: Architecture) -> list:
        """
        Loads all the images published by the family owners. All the pages are merged before return.
        :raises DataSourceError: if ec2 api call fails
        """
        filters = matcher.filters(architecture)
        _LOG.info('Listing images of %s in %s with filters %s', matcher.owners, self.region, filters)
        try:
            paginator = self._aws.ec2_client.get_paginator('describe_images')
            records = []
            for page in paginator.paginate(Owners=matcher.owners, Filters=filters):
                records.extend(raw_image_from_boto(image) for image in page.get('Images', []))
        except NoCredentialsError as e:
            raise DataSourceError('AWS credentials are not configured: {}'.format(e)) from e
        except (ClientError, BotoCoreError) as e:
            raise DataSourceError('Failed to list images in {}: {}'.format(self.region, e)) from e
        _LOG.info('Loaded %d images from %s', len(records), self.region)
        return records
