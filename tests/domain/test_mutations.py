"""Tests for the mutation domain services."""

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from patrimony.domain.errors import NotFoundError, ValidationError
from patrimony.domain.models import Account, Document, HistoryEntry
from patrimony.domain.services.aggregation import (
    compute_current_total,
    order_history,
)
from patrimony.domain.services.mutations import (
    add_account,
    delete_account,
    edit_account,
    new_account_id,
    record_balances,
    seed_balances,
)

NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _document() -> Document:
    return Document(
        accounts=(
            Account(id="a", name="Checking", balance=Decimal("100")),
            Account(id="b", name="World ETF", account_type="ETF",
                    balance=Decimal("50")),
        ),
        history=(
            HistoryEntry(
                date=datetime(2024, 1, 1, tzinfo=timezone.utc),
                total=Decimal("100"),
                accounts={"a": Decimal("60"), "b": Decimal("40")},
            ),
        ),
    )


def test_add_account_appends_and_keeps_history() -> None:
    """New accounts go to the end of the list."""
    document = _document()
    account = Account(id="c", name="Savings", balance=Decimal("10"))

    updated = add_account(document, account)

    assert [acc.id for acc in updated.accounts] == ["a", "b", "c"]
    assert updated.history == document.history
    assert len(document.accounts) == 2


def test_add_account_rejects_duplicate_id() -> None:
    """Ids stay unique."""
    with pytest.raises(ValidationError):
        add_account(_document(), Account(id="a", name="Other"))


@pytest.mark.parametrize("account", [
    Account(id="", name="Nameless id"),
    Account(id="c", name="   "),
    Account(id="c", name="NaN", balance=Decimal("NaN")),
])
def test_add_account_rejects_malformed_accounts(account: Account) -> None:
    """Empty ids, blank names and non-finite balances are rejected."""
    with pytest.raises(ValidationError):
        add_account(_document(), account)


def test_edit_account_replaces_matching_account() -> None:
    """Only the account with the same id changes."""
    document = _document()
    edited = replace(document.accounts[0], name="Main checking", iban="ES12")

    updated = edit_account(document, edited)

    assert updated.accounts[0] == edited
    assert updated.accounts[1] is document.accounts[1]
    assert document.accounts[0].name == "Checking"


def test_edit_account_unknown_id() -> None:
    """Editing an unknown id raises NotFoundError."""
    with pytest.raises(NotFoundError):
        edit_account(_document(), Account(id="zzz", name="Ghost"))


def test_delete_account_leaves_history_untouched() -> None:
    """Historical snapshots keep the deleted id as an orphaned key."""
    document = _document()

    updated = delete_account(document, "a")

    assert [acc.id for acc in updated.accounts] == ["b"]
    assert updated.history == document.history
    assert "a" in updated.history[0].accounts
    assert compute_current_total(updated.accounts) == Decimal("50")


def test_delete_account_unknown_id() -> None:
    """Deleting an unknown id raises NotFoundError."""
    with pytest.raises(NotFoundError):
        delete_account(_document(), "zzz")


def test_record_balances_appends_snapshot() -> None:
    """Balances are updated and a new entry records them."""
    document = _document()

    updated = record_balances(
        document,
        {"a": Decimal("120"), "b": Decimal("50")},
        now=NOW,
    )

    entry = updated.history[-1]
    assert entry.date == NOW
    assert entry.total == Decimal("170")
    assert entry.accounts == {"a": Decimal("120"), "b": Decimal("50")}
    assert updated.accounts[0].balance == Decimal("120")
    assert updated.history[0] is document.history[0]
    assert len(document.history) == 1


def test_record_balances_seeds_unspecified_accounts() -> None:
    """Accounts missing from the update keep their balance in the snapshot."""
    updated = record_balances(_document(), {"a": Decimal("80")}, now=NOW)

    entry = updated.history[-1]
    assert entry.accounts == {"a": Decimal("80"), "b": Decimal("50")}
    assert entry.total == Decimal("130")
    assert updated.accounts[1].balance == Decimal("50")


def test_record_balances_rejects_unknown_ids() -> None:
    """Balances for unknown accounts are malformed input."""
    with pytest.raises(ValidationError):
        record_balances(_document(), {"zzz": Decimal("1")}, now=NOW)


def test_record_balances_rejects_non_finite_values() -> None:
    """Infinite balances are rejected before anything is built."""
    with pytest.raises(ValidationError):
        record_balances(_document(), {"a": Decimal("Infinity")}, now=NOW)


def test_record_balances_on_empty_document() -> None:
    """An empty document still gets a zero-total snapshot."""
    updated = record_balances(Document.empty(), {}, now=NOW)

    assert updated.history[-1].total == Decimal("0")
    assert updated.history[-1].accounts == {}


def test_seed_balances_and_new_ids() -> None:
    """Seeding maps every account id to its balance."""
    assert seed_balances(_document().accounts) == {
        "a": Decimal("100"),
        "b": Decimal("50"),
    }
    assert new_account_id() != new_account_id()


def test_record_balances_with_naive_time_keeps_history_sortable() -> None:
    """A naive snapshot time is stored as UTC next to aware entries."""
    updated = record_balances(
        _document(),
        {"a": Decimal("2")},
        now=datetime(2024, 2, 1),
    )

    ordered = order_history(updated.history)

    assert ordered[-1].date == datetime(2024, 2, 1, tzinfo=timezone.utc)
    assert ordered[0] is updated.history[0]
