"""
Unit tests for listing child OUs and accounts from Organizations.
"""

import unittest

import boto3
from botocore.stub import Stubber

from oucost.libs import exceptions, organizations

from fakes import FakeOrganizationsClient


class TestPagination(unittest.TestCase):
    """Test that listings follow NextToken, against the real client's shapes."""

    def setUp(self):
        self.client = boto3.client(
            "organizations",
            region_name="us-east-1",
            aws_access_key_id="testing",
            aws_secret_access_key="testing",
        )
        self.stubber = Stubber(self.client)

    def tearDown(self):
        self.stubber.deactivate()

    def test_child_units_over_several_pages(self):
        self.stubber.add_response(
            "list_organizational_units_for_parent",
            {"OrganizationalUnits": [{"Id": "ou-abcd-11111111", "Name": "dev"}], "NextToken": "t1"},
            {"ParentId": "r-abcd"},
        )
        self.stubber.add_response(
            "list_organizational_units_for_parent",
            {"OrganizationalUnits": [{"Id": "ou-abcd-22222222", "Name": "prod"}]},
            {"ParentId": "r-abcd", "NextToken": "t1"},
        )
        self.stubber.activate()

        units = list(organizations.Organizations(self.client).child_units("r-abcd"))

        self.assertEqual(units, ["ou-abcd-11111111", "ou-abcd-22222222"])
        self.stubber.assert_no_pending_responses()

    def test_accounts_single_page(self):
        self.stubber.add_response(
            "list_accounts_for_parent",
            {"Accounts": [{"Id": "111111111111"}, {"Id": "222222222222"}]},
            {"ParentId": "ou-abcd-11111111"},
        )
        self.stubber.activate()

        accounts = list(organizations.Organizations(self.client).accounts("ou-abcd-11111111"))

        self.assertEqual(accounts, ["111111111111", "222222222222"])
        self.stubber.assert_no_pending_responses()

    def test_empty_page_with_token_keeps_going(self):
        self.stubber.add_response(
            "list_accounts_for_parent",
            {"Accounts": [], "NextToken": "t1"},
            {"ParentId": "ou-abcd-11111111"},
        )
        self.stubber.add_response(
            "list_accounts_for_parent",
            {"Accounts": [{"Id": "333333333333"}]},
            {"ParentId": "ou-abcd-11111111", "NextToken": "t1"},
        )
        self.stubber.activate()

        accounts = list(organizations.Organizations(self.client).accounts("ou-abcd-11111111"))

        self.assertEqual(accounts, ["333333333333"])

    def test_error_is_a_directory_list_error(self):
        self.stubber.add_client_error(
            "list_organizational_units_for_parent",
            service_error_code="ParentNotFoundException",
            service_message="We can't find a root or OU with the ParentId that you specified.",
        )
        self.stubber.activate()

        with self.assertRaises(exceptions.DirectoryListError) as raised:
            list(organizations.Organizations(self.client).child_units("ou-abcd-99999999"))

        self.assertIn("ou-abcd-99999999", str(raised.exception))
        self.assertIn("ParentNotFoundException", str(raised.exception))


class TestListingOrder(unittest.TestCase):
    """Test that listing order survives paging."""

    def test_page_size_does_not_change_the_listing(self):
        members = ["{:012d}".format(n) for n in range(1, 8)]

        for page_size in [1, 2, 3, 7, 100]:
            client = FakeOrganizationsClient({}, {"ou-a": members}, page_size=page_size)
            self.assertEqual(list(organizations.Organizations(client).accounts("ou-a")), members)

    def test_error_on_a_later_page(self):
        client = FakeOrganizationsClient({"ou-a": ["ou-b", "ou-c"]}, {}, page_size=1)
        directory = organizations.Organizations(client)
        units = directory.child_units("ou-a")

        self.assertEqual(next(units), "ou-b")
        client.broken_parents.add("ou-a")

        with self.assertRaises(exceptions.DirectoryListError):
            next(units)


if __name__ == "__main__":
    unittest.main()
