import logging
import math
from unittest.mock import Mock

import pytest

from app.use_cases import ClearAllData, CreateExpense, CreateIncome, LedgerState, LoadLedgers
from domain.errors import StorageError
from domain.records import LedgerKind, Record
from infrastructure.repositories import LedgerRepository, SecureStoreLedgerRepository
from storage import InMemorySecureStore


class TestLedgerState:
    def test_empty(self):
        state = LedgerState.empty()
        assert state.incomes == ()
        assert state.expenses == ()

    def test_with_record_returns_new_state(self):
        state = LedgerState.empty()
        record = Record(amount=1.0, category="A")
        updated = state.with_record(LedgerKind.INCOME, record)
        assert updated.incomes == (record,)
        assert state.incomes == ()
        assert updated.ledger(LedgerKind.EXPENSE) == ()


class TestCreateIncome:
    def test_execute_saves_whole_ledger(self):
        mock_repo = Mock(spec=LedgerRepository)
        existing = Record(amount=100.0, category="Salary", id="1")
        state = LedgerState(incomes=(existing,))

        new_state, record = CreateIncome(mock_repo).execute(state, amount="50", category="Gift")

        assert record is not None
        assert record.amount == 50.0
        assert record.category == "Gift"
        assert new_state.incomes == (existing, record)
        mock_repo.save.assert_called_once_with(LedgerKind.INCOME, [existing, record])

    @pytest.mark.parametrize("amount, category", [("", "Food"), ("10", ""), ("", "")])
    def test_empty_field_is_ignored(self, amount, category):
        mock_repo = Mock(spec=LedgerRepository)
        state = LedgerState.empty()

        new_state, record = CreateIncome(mock_repo).execute(state, amount=amount, category=category)

        assert record is None
        assert new_state is state
        mock_repo.save.assert_not_called()

    def test_non_numeric_amount_is_stored_as_nan(self):
        mock_repo = Mock(spec=LedgerRepository)
        new_state, record = CreateIncome(mock_repo).execute(
            LedgerState.empty(), amount="abc", category="Food"
        )
        assert record is not None
        assert math.isnan(new_state.incomes[0].amount)

    def test_strict_mode_rejects_nan(self):
        mock_repo = Mock(spec=LedgerRepository)
        with pytest.raises(ValueError):
            CreateIncome(mock_repo, strict=True).execute(
                LedgerState.empty(), amount="abc", category="Food"
            )
        mock_repo.save.assert_not_called()

    def test_strict_mode_rejects_negative(self):
        mock_repo = Mock(spec=LedgerRepository)
        with pytest.raises(ValueError):
            CreateIncome(mock_repo, strict=True).execute(
                LedgerState.empty(), amount="-5", category="Food"
            )

    def test_write_failure_propagates(self):
        mock_repo = Mock(spec=LedgerRepository)
        mock_repo.save.side_effect = StorageError("disk full")
        with pytest.raises(StorageError):
            CreateIncome(mock_repo).execute(LedgerState.empty(), amount="10", category="Food")

    def test_category_stored_as_typed(self):
        mock_repo = Mock(spec=LedgerRepository)
        _, record = CreateIncome(mock_repo).execute(
            LedgerState.empty(), amount="10", category=" food "
        )
        assert record.category == " food "


class TestCreateExpense:
    def test_execute_appends_to_expenses_only(self):
        mock_repo = Mock(spec=LedgerRepository)
        new_state, record = CreateExpense(mock_repo).execute(
            LedgerState.empty(), amount="12.5", category="Food"
        )
        assert new_state.expenses == (record,)
        assert new_state.incomes == ()
        mock_repo.save.assert_called_once_with(LedgerKind.EXPENSE, [record])


class TestLoadLedgers:
    def test_loads_both_ledgers(self):
        repo = SecureStoreLedgerRepository(InMemorySecureStore())
        repo.save(LedgerKind.INCOME, [Record(amount=1.0, category="A", id="1")])
        repo.save(LedgerKind.EXPENSE, [Record(amount=2.0, category="B", id="2")])

        state = LoadLedgers(repo).execute()

        assert state.incomes == (Record(amount=1.0, category="A", id="1"),)
        assert state.expenses == (Record(amount=2.0, category="B", id="2"),)

    def test_read_failure_resets_to_empty(self, caplog):
        mock_repo = Mock(spec=LedgerRepository)
        mock_repo.load.side_effect = StorageError("unreadable")

        with caplog.at_level(logging.ERROR):
            state = LoadLedgers(mock_repo).execute()

        assert state == LedgerState.empty()
        assert "Failed to load ledgers" in caplog.text

    def test_corrupt_expenses_discard_valid_incomes(self):
        store = InMemorySecureStore()
        repo = SecureStoreLedgerRepository(store)
        repo.save(LedgerKind.INCOME, [Record(amount=1.0, category="A")])
        store.set_item("expenses_v2", "not json")

        state = LoadLedgers(repo).execute()

        assert state == LedgerState.empty()
        assert store.get_item("expenses_v2") == "not json"


class TestClearAllData:
    def test_clear_then_reload_is_empty(self):
        store = InMemorySecureStore()
        repo = SecureStoreLedgerRepository(store)
        repo.save(LedgerKind.INCOME, [Record(amount=1.0, category="A")])
        repo.save(LedgerKind.EXPENSE, [Record(amount=2.0, category="B")])

        state = ClearAllData(repo).execute()

        assert state == LedgerState.empty()
        assert store.keys() == []
        assert LoadLedgers(repo).execute() == LedgerState.empty()
