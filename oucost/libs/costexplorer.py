from decimal import Decimal, InvalidOperation
from botocore.exceptions import BotoCoreError, ClientError
from oucost.libs import exceptions, time_window
import logging

GRANULARITY = 'MONTHLY'
DEFAULT_METRIC = 'NetUnblendedCost'

class CostExplorer():
    def __init__(self, costexplorer_client, metric=None):
        self.costexplorer_client = costexplorer_client
        self.metric = metric or DEFAULT_METRIC

    def account_cost(self, account_id, time_mode):
        """
        Return the total [self.metric] cost of [account_id] over the window [time_mode]
        selects, as a Decimal. Each month in the window is its own result period, and they're
        all added up
        """

        window = time_window.select(time_mode)
        amounts = self.monthly_amounts(account_id, window)

        return self.sum_amounts(account_id, amounts)

    def monthly_amounts(self, account_id, window):
        """
        Yield the raw amount string of every result period Cost Explorer returns for
        [account_id] in [window], following NextPageToken until there isn't one
        """

        request = {
            'Filter': {
                'Dimensions': {
                    'Key': 'LINKED_ACCOUNT',
                    'Values': [account_id]
                }
            },
            'TimePeriod': window.as_time_period(),
            'Granularity': GRANULARITY,
            'Metrics': [self.metric]
        }

        while True:
            try:
                response = self.costexplorer_client.get_cost_and_usage(**request)
            except (ClientError, BotoCoreError) as e:
                raise exceptions.BillingQueryError(
                    "Unable to get cost for account {} ({}): {}".format(account_id, window, e)
                ) from e

            for result in response.get('ResultsByTime', []):
                try:
                    yield result['Total'][self.metric]['Amount']
                except KeyError as e:
                    raise exceptions.AmountParseError(
                        "No {} amount for account {} in period {}".format(self.metric, account_id, result.get('TimePeriod'))
                    ) from e

            if not response.get('NextPageToken'):
                break

            request['NextPageToken'] = response['NextPageToken']

    def sum_amounts(self, account_id, amounts):
        total = Decimal(0)

        for amount in amounts:
            try:
                value = Decimal(amount)
            except (InvalidOperation, TypeError, ValueError) as e:
                raise exceptions.AmountParseError(
                    "Unable to parse cost {!r} for account {}".format(amount, account_id)
                ) from e

            if not value.is_finite():
                raise exceptions.AmountParseError(
                    "Unable to parse cost {!r} for account {}".format(amount, account_id)
                )

            total += value

        logging.debug("Account {} cost {}".format(account_id, total))

        return total
