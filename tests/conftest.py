import random

import pytest

from keyed_priority_queue import EagerTreeStrategy, LazyHeapStrategy


@pytest.fixture(autouse=True)
def init_random() -> None:
    random.seed(0)


@pytest.fixture(params=[LazyHeapStrategy, EagerTreeStrategy], ids=['lazy', 'eager'])
def strategy_cls(request):
    return request.param
