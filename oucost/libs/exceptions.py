class OUCostError(Exception):
    """ Anything that makes a total impossible to report """
    pass

class DirectoryListError(OUCostError):
    """ Listing child OUs or accounts from Organizations failed """
    pass

class BillingQueryError(OUCostError):
    """ Cost Explorer refused or failed the cost query for an account """
    pass

class AmountParseError(OUCostError):
    """ Cost Explorer returned an amount that isn't a finite decimal number """
    pass
