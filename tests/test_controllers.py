import pytest

from domain.errors import StorageError
from domain.records import LedgerKind
from gui.controllers import FinanceController
from infrastructure.repositories import SecureStoreLedgerRepository
from storage import InMemorySecureStore, JsonFileSecureStore


@pytest.fixture
def store():
    return InMemorySecureStore()


@pytest.fixture
def controller(store):
    ctrl = FinanceController(SecureStoreLedgerRepository(store))
    ctrl.load()
    return ctrl


class TestIncomeFlow:
    def test_end_to_end_income_totals(self, controller):
        controller.add_income("200", "Salary")
        controller.add_income("50", "Gift")

        view = controller.ledger_view(LedgerKind.INCOME)

        assert view.total == 250.0
        assert view.total_text == "Total incomes: 250.00 ₽"
        assert len(view.segments) == 2
        assert [segment.label for segment in view.segments] == ["Salary", "Gift"]
        assert view.items == ("Salary: 200 ₽", "Gift: 50 ₽")
        assert view.has_chart

    def test_duplicate_category_is_one_segment(self, controller):
        controller.add_expense("10", "A")
        controller.add_expense("5", "A")

        view = controller.ledger_view(LedgerKind.EXPENSE)

        assert len(view.segments) == 1
        assert view.segments[0].value == 15.0
        assert len(view.items) == 2

    def test_ignored_submission_returns_none(self, controller, store):
        assert controller.add_income("", "Salary") is None
        assert controller.add_income("100", "") is None
        assert controller.state.incomes == ()
        assert store.keys() == []

    def test_empty_view(self, controller):
        view = controller.ledger_view(LedgerKind.EXPENSE)
        assert not view.has_chart
        assert view.items == ()
        assert view.total_text == "Total expenses: 0.00 ₽"
        assert view.empty_list_text == "No expenses to display"
        assert view.empty_chart_text == "No data to display the chart"

    def test_sixth_category_reuses_first_color(self, controller):
        for category in "ABCDEF":
            controller.add_expense("1", category)
        segments = controller.ledger_view(LedgerKind.EXPENSE).segments
        assert segments[5].color == segments[0].color

    def test_custom_palette(self, store):
        ctrl = FinanceController(SecureStoreLedgerRepository(store), palette=["#abc"])
        ctrl.add_income("1", "A")
        ctrl.add_income("1", "B")
        assert {s.color for s in ctrl.ledger_view(LedgerKind.INCOME).segments} == {"#abc"}


class TestAnalysis:
    def test_positive_balance(self, controller):
        controller.add_income("100", "Salary")
        controller.add_expense("40", "Food")

        view = controller.analysis_view()

        assert view.balance == 60.0
        assert view.balance_color == "green"
        assert view.balance_text == "Balance: 60.00 ₽"
        assert view.income_text == "Incomes: 100.00 ₽"
        assert view.expense_text == "Expenses: 40.00 ₽"
        assert [bar.value for bar in view.bars] == [100.0, 40.0]
        assert view.has_data

    def test_overspend_is_red(self, controller):
        controller.add_income("40", "Salary")
        controller.add_expense("100", "Rent")
        view = controller.analysis_view()
        assert view.balance == -60.0
        assert view.balance_color == "red"

    def test_zero_balance_is_green(self, controller):
        view = controller.analysis_view()
        assert view.balance == 0
        assert view.balance_color == "green"
        assert not view.has_data
        assert view.empty_text == "No data for analysis"

    def test_nan_amount_poisons_totals(self, controller):
        controller.add_income("abc", "Oops")
        view = controller.analysis_view()
        assert view.income_text == "Incomes: NaN ₽"
        assert view.balance_color == "red"
        assert not view.has_data


class TestPersistence:
    def test_clear_all_resets_state_and_store(self, controller, store):
        controller.add_income("200", "Salary")
        controller.add_expense("20", "Food")

        controller.clear_all()

        assert controller.state.incomes == ()
        assert controller.state.expenses == ()
        assert store.keys() == []

        reloaded = FinanceController(SecureStoreLedgerRepository(store))
        reloaded.load()
        assert reloaded.state.incomes == ()
        assert reloaded.state.expenses == ()

    def test_reload_from_file_store(self, tmp_path):
        path = str(tmp_path / "store.json")
        first = FinanceController(SecureStoreLedgerRepository(JsonFileSecureStore(path)))
        first.load()
        first.add_income("200", "Salary")
        first.add_expense("12.5", "Food")

        second = FinanceController(SecureStoreLedgerRepository(JsonFileSecureStore(path)))
        second.load()

        assert second.state == first.state

    def test_failed_write_leaves_state_unchanged(self, controller, store, monkeypatch):
        controller.add_income("10", "A")
        before = controller.state

        def _fail(key, value):
            raise StorageError("write failed")

        monkeypatch.setattr(store, "set_item", _fail)
        with pytest.raises(StorageError):
            controller.add_income("20", "B")

        assert controller.state is before

    def test_failed_clear_still_empties_ledgers(self, controller, store, monkeypatch):
        controller.add_income("200", "Salary")
        controller.add_expense("20", "Food")
        delete_item = store.delete_item

        def _fail_on_expenses(key):
            if key == "expenses_v2":
                raise StorageError("delete failed")
            delete_item(key)

        monkeypatch.setattr(store, "delete_item", _fail_on_expenses)
        with pytest.raises(StorageError):
            controller.clear_all()

        assert controller.state.incomes == ()
        assert controller.state.expenses == ()

        monkeypatch.undo()
        reloaded = FinanceController(SecureStoreLedgerRepository(store))
        reloaded.load()
        assert reloaded.state.incomes == controller.state.incomes

    def test_corrupt_store_loads_empty(self, store):
        store.set_item("incomes_v2", "garbage")
        ctrl = FinanceController(SecureStoreLedgerRepository(store))
        ctrl.load()
        assert ctrl.state.incomes == ()
        assert ctrl.ledger_view(LedgerKind.INCOME).items == ()

    def test_strict_amounts(self, store):
        ctrl = FinanceController(SecureStoreLedgerRepository(store), strict_amounts=True)
        with pytest.raises(ValueError):
            ctrl.add_expense("abc", "Food")
        assert ctrl.state.expenses == ()


def test_build_report(controller):
    controller.add_income("200", "Salary")
    controller.add_expense("50", "Food")
    report = controller.build_report()
    assert report.balance() == 150.0
