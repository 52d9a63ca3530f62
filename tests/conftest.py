import os
import sys

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from store.client import KeyValueClient
from store.transactions import TransactionStore


@pytest.fixture
def kv_client():
    """Memory-only key-value client; never touches the network."""
    return KeyValueClient(url=None)


@pytest.fixture
def txn_store(kv_client):
    return TransactionStore(kv_client)
