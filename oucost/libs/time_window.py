#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Works out the date range a cost query covers, from a mode keyword:

MTD: 1st of the current month until today
YTD: 1st of January this year until today
all: 1st of the current month one year ago until today, i.e. if today is 2020-06-29,
     the window is 2019-06-01 to 2020-06-29. Any unrecognised mode also ends up here

The window isn't validated; Cost Explorer is the one to complain about a bad range.
"""

from collections import namedtuple
from datetime import date

MONTH_TO_DATE = "MTD"
YEAR_TO_DATE = "YTD"
ALL = "all"

DATE_FORMAT = "%Y-%m-%d"

class TimeWindow(namedtuple('TimeWindow', ['start', 'end'])):
    __slots__ = ()

    def as_time_period(self):
        """ Return the window in the shape Cost Explorer's TimePeriod parameter wants """

        return {
            'Start': self.start.strftime(DATE_FORMAT),
            'End': self.end.strftime(DATE_FORMAT)
        }

    def __str__(self):
        return "{} to {}".format(self.start.strftime(DATE_FORMAT), self.end.strftime(DATE_FORMAT))

def select(mode, today=None):
    today = today or date.today()

    if mode == MONTH_TO_DATE:
        start = today.replace(day=1)
    elif mode == YEAR_TO_DATE:
        start = today.replace(month=1, day=1)
    else:
        start = today.replace(year=today.year - 1, day=1)

    return TimeWindow(start=start, end=today)
