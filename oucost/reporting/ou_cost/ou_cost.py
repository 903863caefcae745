#!/usr/bin/env python3

"""
Cost of an organizational unit, in one of two modes:

flat:      only the accounts directly in the OU. Accounts in child OUs are deliberately left
           out; use recursive mode for those
recursive: a post-order walk of the OU tree. Every child OU (with everything under it) is
           totalled before the OU's own accounts are added

Every method returns the total for what it covered and callers add those up, so nothing
but the final number is kept. Any failure anywhere aborts the whole walk with an
exceptions.OUCostError; there is no partial total.
"""

from decimal import Decimal
from oucost.libs import time_window
import logging

class OUCost():
    def __init__(self, organizations, costexplorer, time_mode=None):
        self.organizations = organizations
        self.costexplorer = costexplorer
        self.time_mode = time_mode or time_window.ALL
        self.window = None

    def run(self, ou_id, recursive=False):
        """
        Return the cost of [ou_id], walking all of its descendants if [recursive]. The window
        reported for the run is left in self.window
        """

        self.window = time_window.select(self.time_mode)
        mode = "recursive" if recursive else "flat"
        logging.info("Getting {} cost of {} for {} ({})".format(mode, ou_id, self.time_mode, self.window))

        if recursive:
            total = self.recursive_cost(ou_id)
        else:
            total = self.flat_cost(ou_id)

        logging.info("Cost of {}: {}".format(ou_id, total))

        return total

    def flat_cost(self, ou_id):
        """ Return the summed cost of the accounts directly under [ou_id] """

        total = Decimal(0)

        for account_id in self.organizations.accounts(ou_id):
            total += self.costexplorer.account_cost(account_id, self.time_mode)

        logging.debug("Accounts directly in {} cost {}".format(ou_id, total))

        return total

    def recursive_cost(self, ou_id):
        """
        Return the cost of [ou_id] and everything under it. All child OUs are listed before
        any of them is walked, and they're walked in the order Organizations lists them
        """

        child_ou_ids = list(self.organizations.child_units(ou_id))
        logging.debug("{} has {} child OUs".format(ou_id, len(child_ou_ids)))

        total = Decimal(0)

        for child_ou_id in child_ou_ids:
            total += self.recursive_cost(child_ou_id)

        total += self.flat_cost(ou_id)

        logging.debug("{} and its descendants cost {}".format(ou_id, total))

        return total
