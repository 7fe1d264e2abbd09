"""Test suite for the LedgerState snapshot."""

import pytest
from tokenledger import Account, AccountNotFoundError, InsufficientBalanceError, LedgerState


@pytest.fixture
def state():
    state = LedgerState()
    state.mint("alice", 100)
    state.mint("bob", 50)
    return state


def test_get_or_create():
    state = LedgerState()
    account = state.get_or_create("alice")
    assert account == Account(id="alice", balance=0)
    assert state.get_or_create("alice") is account
    assert len(state) == 1
    assert state.total_supply == 0


def test_balance_of_does_not_create_account(state):
    assert state.balance_of("carol") == 0
    assert "carol" not in state


def test_failed_transfer_leaves_state_untouched(state):
    expected = state.to_dict()
    with pytest.raises(AccountNotFoundError):
        state.transfer("carol", "alice", 0)
    with pytest.raises(InsufficientBalanceError):
        state.transfer("bob", "carol", 51)
    assert state.to_dict() == expected


def test_self_transfer(state):
    state.transfer("alice", "alice", 100)
    assert state.balance_of("alice") == 100
    state.verify()


def test_serialization(state):
    state.transfer("alice", "carol", 10)
    data = state.to_dict()
    assert data == {
        "version": 1,
        "total_supply": 150,
        "accounts": {"alice": 90, "bob": 50, "carol": 10},
    }
    assert LedgerState.from_dict(data) == state


@pytest.mark.parametrize("data, message", [
    ({"version": 0, "total_supply": 0, "accounts": {}}, "version"),
    ({"total_supply": 0, "accounts": {}}, "version"),
    ({"version": 1, "total_supply": "0", "accounts": {}}, "total_supply"),
    ({"version": 1, "total_supply": True, "accounts": {}}, "total_supply"),
    ({"version": 1, "total_supply": 1, "accounts": [["alice", 1]]}, "mapping"),
    ({"version": 1, "total_supply": 1, "accounts": {1: 1}}, "string"),
    ({"version": 1, "total_supply": 1, "accounts": {"alice": 1.0}}, "balance"),
    ({"version": 1, "total_supply": -1, "accounts": {"alice": -1}}, "Negative"),
    ({"version": 1, "total_supply": 3, "accounts": {"alice": 1}}, "Total supply"),
    ("version: 1", "mapping"),
])
def test_from_dict_rejects_invalid_data(data, message):
    with pytest.raises(ValueError, match=message):
        LedgerState.from_dict(data)


def test_from_dict_without_accounts():
    state = LedgerState.from_dict({"version": 1, "total_supply": 0, "accounts": None})
    assert len(state) == 0
