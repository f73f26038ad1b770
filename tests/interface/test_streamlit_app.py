"""Tests for the Streamlit app module."""

from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from patrimony.adapters.interface.streamlit import app
from patrimony.application.ports.asset_uploader import UploadedAsset
from patrimony.application.use_cases import manage_accounts
from patrimony.application.use_cases.get_history_series import ChartSeries
from patrimony.domain.errors import StorageError, UploadError
from patrimony.domain.models import (
    Composition,
    CompositionItem,
    Document,
    SeriesRow,
    SeriesSelection,
)


def _row(values: dict[str, str], total: str) -> SeriesRow:
    return SeriesRow(
        date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        timestamp=1704067200000,
        total=Decimal(total),
        values={key: Decimal(value) for key, value in values.items()},
    )


def test_format_currency_hides_amounts_in_private_mode():
    """Private mode masks every amount."""
    assert app._format_currency(Decimal("1234.5")) == "1,234.50 €"
    assert app._format_currency(Decimal("1234.5"), private=True) == "••••••"


def test_format_delta_with_percent():
    """Deltas carry a sign and the absolute percentage."""
    assert (
        app._format_delta_with_percent(Decimal("50"), Decimal("12.346"))
        == "+50.00 € (12.35%)"
    )
    assert (
        app._format_delta_with_percent(Decimal("-5"), Decimal("-1"), True)
        == "•••••• (1.00%)"
    )


def test_prepare_area_chart_data_per_account():
    """Each account value becomes one long-format record."""
    series = ChartSeries(
        selection=SeriesSelection(account_ids=("a", "b")),
        rows=[_row({"a": "60", "b": "40"}, "100")],
        names={"a": "Checking"},
    )

    data = app._prepare_area_chart_data(series)

    assert data == [
        {"date": "2024-01-01T00:00:00+00:00", "series": "Checking", "value": 60.0},
        {"date": "2024-01-01T00:00:00+00:00", "series": "b", "value": 40.0},
    ]


def test_prepare_area_chart_data_total_only():
    """Total-only mode plots the stored snapshot total."""
    series = ChartSeries(
        selection=SeriesSelection(total_only=True),
        rows=[_row({}, "150")],
        names={},
    )

    data = app._prepare_area_chart_data(series)

    assert data == [
        {"date": "2024-01-01T00:00:00+00:00", "series": "Total", "value": 150.0},
    ]


def test_prepare_donut_chart_data_groups_tail_into_other():
    """Slices beyond max_items are merged into Other."""
    composition = Composition(
        group_by="account",
        items=[
            CompositionItem(name="A", value=Decimal("50"), share=Decimal("50")),
            CompositionItem(name="B", value=Decimal("30"), share=Decimal("30")),
            CompositionItem(name="C", value=Decimal("15"), share=Decimal("15")),
            CompositionItem(name="D", value=Decimal("5"), share=Decimal("5")),
        ],
        total=Decimal("100"),
    )

    data = app._prepare_donut_chart_data(composition, max_items=2)

    assert [row["category"] for row in data] == ["A", "B", "Other"]
    assert data[-1]["amount"] == 20.0
    assert data[-1]["share_label"] == "20.0%"
    assert data[0]["amount_label"] == "50.00 €"


class _FakeSidebar:
    def __init__(self, page: str) -> None:
        self.page = page

    def selectbox(self, label, options, **_kwargs):
        return self.page if label == "Page" else options[0]

    def toggle(self, _label, value=False):
        return value


class _FakeStreamlit:
    def __init__(self, page: str = "Dashboard") -> None:
        self.sidebar = _FakeSidebar(page)
        self.config_kwargs = None
        self.title_text = None
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def subheader(self, _text: str):
        pass

    def error(self, text: str):
        self.errors.append(text)

    def warning(self, text: str):
        self.warnings.append(text)


def _patch_renderers(monkeypatch) -> dict[str, list[bool]]:
    calls: dict[str, list[bool]] = {}
    for name in ("_render_dashboard", "_render_accounts", "_render_balance_updater"):
        calls[name] = []
        monkeypatch.setattr(
            app,
            name,
            lambda private, _name=name: calls[_name].append(private),
        )
    monkeypatch.setattr(app, "get_usage_logger", MagicMock)
    return calls


def test_main_routes_to_selected_page(monkeypatch):
    """main renders the page picked in the sidebar, private by default."""
    fake_st = _FakeStreamlit("Accounts")
    monkeypatch.setattr(app, "st", fake_st)
    calls = _patch_renderers(monkeypatch)

    app.main()

    assert fake_st.config_kwargs["layout"] == "wide"
    assert fake_st.title_text == "Patrimony Tracker"
    assert calls["_render_accounts"] == [True]
    assert calls["_render_dashboard"] == []
    assert calls["_render_balance_updater"] == []


def test_main_reports_storage_errors(monkeypatch):
    """Domain errors are shown instead of crashing the page."""
    fake_st = _FakeStreamlit("Dashboard")
    monkeypatch.setattr(app, "st", fake_st)
    _patch_renderers(monkeypatch)

    def _fail(_private):
        raise StorageError("Could not read finance_data.json")

    monkeypatch.setattr(app, "_render_dashboard", _fail)

    app.main()

    assert fake_st.errors == [
        "Could not load data: Could not read finance_data.json"
    ]


def test_balance_updater_warns_without_accounts(monkeypatch):
    """The updater asks for accounts first when none exist."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_fetch_accounts", lambda: [])

    app._render_balance_updater(private=False)

    assert fake_st.warnings == [
        "No accounts yet. Add your first account to get started."
    ]


def test_fetch_accounts_reads_store(monkeypatch):
    """_fetch_accounts returns the accounts of the loaded document."""
    accounts = (SimpleNamespace(id="a"),)
    store = MagicMock()
    store.load.return_value = SimpleNamespace(accounts=accounts)
    monkeypatch.setattr(app, "build_snapshot_store", lambda: store)

    assert app._fetch_accounts() == accounts


class _FakeForm:
    def __enter__(self):
        return self

    def __exit__(self, *_exc):
        return False


class _FakeFormStreamlit(_FakeStreamlit):
    def __init__(self, logo_file) -> None:
        super().__init__()
        self.logo_file = logo_file
        self.successes: list[str] = []

    def form(self, _key):
        return _FakeForm()

    def text_input(self, label, value=""):
        return "Broker" if label == "Name" else value

    def selectbox(self, _label, options, index=0):
        return options[index]

    def number_input(self, _label, value=0.0, **_kwargs):
        return value

    def file_uploader(self, _label, **_kwargs):
        return self.logo_file

    def form_submit_button(self, _label):
        return True

    def success(self, text: str):
        self.successes.append(text)


def test_account_form_upload_failure_does_not_save(monkeypatch):
    """A failing logo upload shows an error and never saves the account."""
    fake_st = _FakeFormStreamlit(logo_file=MagicMock())
    store = MagicMock()
    store.load.return_value = Document.empty()
    uploader = MagicMock()
    uploader.upload.side_effect = UploadError("Could not store the file.")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_snapshot_store", lambda: store)
    monkeypatch.setattr(app, "build_asset_uploader", lambda: uploader)
    monkeypatch.setattr(manage_accounts, "get_app_logger", MagicMock)

    app._render_account_form()

    assert fake_st.errors == ["Could not store the file."]
    assert fake_st.successes == []
    store.save.assert_not_called()


def test_account_form_saves_account_with_logo_in_one_write(monkeypatch):
    """The new account is saved once, already holding its logo path."""
    fake_st = _FakeFormStreamlit(logo_file=MagicMock())
    store = MagicMock()
    store.load.return_value = Document.empty()
    uploader = MagicMock()
    uploader.upload.return_value = UploadedAsset(path="/uploads/1-a.png")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_snapshot_store", lambda: store)
    monkeypatch.setattr(app, "build_asset_uploader", lambda: uploader)
    monkeypatch.setattr(app, "new_account_id", lambda: "new-id")
    monkeypatch.setattr(manage_accounts, "get_app_logger", MagicMock)

    app._render_account_form()

    store.save.assert_called_once()
    saved = store.save.call_args.args[0]
    assert saved.accounts[0].id == "new-id"
    assert saved.accounts[0].logo == "/uploads/1-a.png"
    assert fake_st.successes == ["Account saved."]
