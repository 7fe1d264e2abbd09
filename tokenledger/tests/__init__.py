# flake8: noqa: F401

"""This module exposes base test classes for testing token ledger systems."""

from .base_test import BaseTest
from .base_test_token_ledger import BaseTestTokenLedger
from .base_test_dump_restore_clear import BaseTestDumpRestoreClear
