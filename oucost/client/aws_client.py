#!/usr/bin/env python3

import boto3
from botocore.config import Config
from time import gmtime, strftime

# Every call is made exactly once; a failure is reported rather than retried
SINGLE_ATTEMPT = Config(retries={'max_attempts': 1, 'mode': 'standard'})

class AWS_Client():

    def create_session(self, region, role_arn=None, profile=None, valid_for=None):
        """
        Takes region, and optionally role_arn, profile and valid_for (duration in seconds),
        and returns a boto3 session. With a role_arn the session uses temporary credentials
        from assuming that role, otherwise the credentials of [profile] (or the default chain)
        """

        base_session = boto3.Session(profile_name=profile, region_name=region)

        if role_arn is None:
            return base_session

        sts_client = base_session.client('sts', region_name=region)

        credentials = sts_client.assume_role(
            RoleArn=role_arn,
            RoleSessionName="oucost-{}".format(strftime("%Y%m%d%H%M%S", gmtime())),
            DurationSeconds=valid_for or 900
        )

        return boto3.Session(
            aws_access_key_id=credentials['Credentials']['AccessKeyId'],
            aws_secret_access_key=credentials['Credentials']['SecretAccessKey'],
            aws_session_token=credentials['Credentials']['SessionToken'],
            region_name=region
        )

    def create_client(self, service, region, role_arn=None, profile=None, valid_for=None):
        """
        Takes service, region, and optionally role_arn, profile and valid_for, and returns a
        boto3 client for that service which makes a single attempt per call
        """

        session = self.create_session(region, role_arn=role_arn, profile=profile, valid_for=valid_for)

        return session.client(service, region_name=region, config=SINGLE_ATTEMPT)
