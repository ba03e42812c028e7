import os
import pytest
from unittest.mock import patch, MagicMock

os.environ.setdefault('TESTING', 'true')

from hashtable.hash_table import HashTable, hash_key


def find_colliding_keys(count, capacity=16, prefix="k"):
    """Return `count` distinct keys whose default hash shares one slot at `capacity`."""
    target = hash_key(prefix + "0") % capacity
    keys = []
    i = 0
    while len(keys) < count:
        key = f"{prefix}{i}"
        if hash_key(key) % capacity == target:
            keys.append(key)
        i += 1
    return keys


@pytest.fixture
def table():
    return HashTable()


@pytest.fixture
def single_chain_table():
    # every key hashes to slot 0, so the whole table is one chain
    return HashTable(hash_function=lambda key: 0)


@pytest.fixture
def colliding_keys():
    return find_colliding_keys(5)


@pytest.fixture(autouse=True)
def mock_logger():
    with patch('hashtable.logger.logger.logger') as mock_logger:
        mock_logger.info = MagicMock()
        mock_logger.error = MagicMock()
        yield mock_logger


@pytest.fixture
def sample_items():
    return {f"key-{i}": i for i in range(50)}
