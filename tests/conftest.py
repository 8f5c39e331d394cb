import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from api.routes.common import set_catalog
from engine.burst import InstanceCapacity, InstanceCatalog


@pytest.fixture(autouse=True)
def reset_catalog():
    """Make every test start without a cached API catalog so that routes
    always build (or receive) a fresh one.
    """
    set_catalog(None)
    yield
    set_catalog(None)


@pytest.fixture
def small_catalog():
    return InstanceCatalog({
        "b.small": InstanceCapacity(
            credit_accrual_rate=0.4,
            max_credits=576,
            vcpu_count=2,
            baseline_utilization_percent=20,
        ),
        "b.idle": InstanceCapacity(
            credit_accrual_rate=0.0,
            max_credits=0.0,
            vcpu_count=1,
            baseline_utilization_percent=0.0,
        ),
    })


# Prevent pytest from attempting to collect any modules inside the engine
# package itself.  Those files are imported by tests and contain utility
# functions; keeping collection focused on the tests directory avoids
# surprises if one of them ever starts with "test_".

def pytest_ignore_collect(collection_path, config):
    text = str(collection_path)
    if os.path.sep + 'engine' + os.path.sep in text:
        return True
