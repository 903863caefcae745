#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Lists what hangs off an organizational unit: child OUs, or the accounts directly in it.

Both listings are paged. The first request only has ParentId, every following one also
passes the NextToken of the response before it, and a response without a NextToken is the
last page. Nothing is cached, so every traversal sees the organization as it is now.
"""

from botocore.exceptions import BotoCoreError, ClientError
from oucost.libs import exceptions
import logging

class Organizations():
    def __init__(self, organizations_client):
        self.organizations_client = organizations_client

    def child_units(self, parent_id):
        """ Yield the IDs of the OUs directly under [parent_id], in listing order """

        for ou in self.paginate('list_organizational_units_for_parent', 'OrganizationalUnits', parent_id):
            yield ou['Id']

    def accounts(self, parent_id):
        """ Yield the IDs of the accounts directly under [parent_id] (not its child OUs) """

        for account in self.paginate('list_accounts_for_parent', 'Accounts', parent_id):
            yield account['Id']

    def paginate(self, operation, result_key, parent_id):
        list_call = getattr(self.organizations_client, operation)
        request = {'ParentId': parent_id}
        page = 0

        while True:
            try:
                response = list_call(**request)
            except (ClientError, BotoCoreError) as e:
                raise exceptions.DirectoryListError(
                    "Unable to {} for {}: {}".format(operation.replace('_', ' '), parent_id, e)
                ) from e

            page += 1
            logging.debug("{} page {} for {}: {} results".format(operation, page, parent_id, len(response.get(result_key, []))))

            for item in response.get(result_key, []):
                yield item

            if not response.get('NextToken'):
                break

            request['NextToken'] = response['NextToken']
