import logging

from hashtable.hash_table import DEFAULT_CAPACITY, LOAD_FACTOR, NOT_FOUND, HashTable, hash_key

logging.getLogger('hashtable').addHandler(logging.NullHandler())

__all__ = ["HashTable", "hash_key", "NOT_FOUND", "DEFAULT_CAPACITY", "LOAD_FACTOR"]
