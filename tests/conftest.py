import logging

import pytest

from intervalmap import IntervalMap
from intervalmap.struct import STORES

##############################
# Global setup
##############################
logging.getLogger("intervalmap").setLevel(logging.DEBUG)


@pytest.fixture(params=sorted(STORES))
def store_name(request):
    """Every registered backing store."""
    return request.param


@pytest.fixture
def imap(store_name):
    """An unsigned map where everything starts at 0."""
    return IntervalMap(0, minimum=0, store=store_name)
