from datetime import datetime
import logging

def set_logger(level='INFO'):
    return logging.basicConfig(level=level, format='%(asctime)s [%(levelname)s] %(message)s', datefmt='%Y-%m-%d %H:%M:%S%z')

def elapsed_since(start):
    """ Return the timedelta between [start] and now """

    return datetime.now() - start

def format_amount(amount):
    return "{:.2f}".format(amount)
