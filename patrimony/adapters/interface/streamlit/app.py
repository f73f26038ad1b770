"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from patrimony.application.use_cases.get_composition import (
    GetCompositionUseCase,
)
from patrimony.application.use_cases.get_history_series import (
    ChartSeries,
    GetHistorySeriesUseCase,
)
from patrimony.application.use_cases.get_patrimony_summary import (
    GetPatrimonySummaryUseCase,
    PatrimonySummary,
)
from patrimony.application.use_cases.manage_accounts import (
    ManageAccountsUseCase,
)
from patrimony.application.use_cases.record_balances import (
    RecordBalancesUseCase,
)
from patrimony.domain.constants import (
    ALL_TYPES,
    DEFAULT_ACCOUNT_TYPES,
    GROUP_BY_ACCOUNT,
    GROUP_BY_TYPE,
    TOTAL_ONLY,
)
from patrimony.domain.errors import PatrimonyError
from patrimony.domain.models import Account, Composition, Timeframe
from patrimony.domain.services.mutations import new_account_id
from patrimony.infrastructure.container import (
    build_asset_uploader,
    build_snapshot_store,
)
from patrimony.infrastructure.logging.logger import get_usage_logger

_PALETTE = [
    "#38bdf8",
    "#a78bfa",
    "#34d399",
    "#f472b6",
    "#fbbf24",
    "#f87171",
]
_HIDDEN_AMOUNT = "••••••"


def _fetch_summary() -> PatrimonySummary:
    """Fetch the headline figures from the configured store."""
    use_case = GetPatrimonySummaryUseCase(store=build_snapshot_store())
    return use_case.execute()


def _fetch_history_series(
    timeframe: Timeframe,
    type_filter: str,
) -> ChartSeries:
    """Fetch chart rows for the selected window and account type."""
    use_case = GetHistorySeriesUseCase(store=build_snapshot_store())
    return use_case.execute(timeframe=timeframe, type_filter=type_filter)


def _fetch_composition(group_by: str) -> Composition:
    """Fetch the composition of current balances."""
    use_case = GetCompositionUseCase(store=build_snapshot_store())
    return use_case.execute(group_by=group_by)


def _fetch_accounts() -> Sequence[Account]:
    """Fetch the current accounts."""
    return build_snapshot_store().load().accounts


def _format_currency(value: Decimal, private: bool = False) -> str:
    """Format currency values for display."""
    if private:
        return _HIDDEN_AMOUNT
    return f"{value:,.2f} €"


def _format_delta_with_percent(
    delta: Decimal,
    percent: Decimal,
    private: bool = False,
) -> str:
    """Format a delta value with its percentage change."""
    sign = "+" if delta >= 0 else ""
    percent_label = f"{abs(percent):.2f}%"
    if private:
        return f"{sign}{_HIDDEN_AMOUNT} ({percent_label})"
    return f"{sign}{delta:,.2f} € ({percent_label})"


def _prepare_area_chart_data(
    series: ChartSeries,
) -> list[dict[str, str | float]]:
    """Convert chart rows into long-format records for Altair.

    Args:
        series: Selection and rows built by the history use case.

    Returns:
        list[dict]: One record per row and series key.
    """
    data: list[dict[str, str | float]] = []
    for row in series.rows:
        date_label = row.date.isoformat()
        if series.selection.total_only:
            data.append(
                {"date": date_label, "series": "Total", "value": float(row.total)}
            )
            continue
        for account_id, value in row.values.items():
            data.append(
                {
                    "date": date_label,
                    "series": series.names.get(account_id, account_id),
                    "value": float(value),
                }
            )
    return data


def _prepare_donut_chart_data(
    composition: Composition,
    max_items: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        composition: Sorted slices with shares.
        max_items: Maximum slices to keep before grouping into Other.

    Returns:
        list[dict]: Altair-ready chart data.
    """
    top_items = composition.items[:max_items]
    other_items = composition.items[max_items:]
    rows = [(item.name, item.value, item.share) for item in top_items]
    if other_items:
        other_value = sum((item.value for item in other_items), Decimal("0"))
        other_share = sum((item.share for item in other_items), Decimal("0"))
        rows.append(("Other", other_value, other_share))
    return [
        {
            "category": name,
            "amount": float(value),
            "amount_label": _format_currency(value),
            "share_label": f"{share:.1f}%",
        }
        for name, value, share in rows
    ]


def _render_metrics(summary: PatrimonySummary, private: bool) -> None:
    """Render the total and change metrics."""
    total_col, change_col = st.columns(2)
    total_col.metric(
        "Total patrimony",
        _format_currency(summary.total, private),
        f"{summary.account_count} accounts",
        delta_color="off",
    )
    change_col.metric(
        "Recent change",
        _format_currency(summary.change.delta, private),
        _format_delta_with_percent(
            summary.change.delta,
            summary.change.percent,
            private,
        ),
    )
    st.caption("Compared with the previous balance update")


def _render_history_chart(series: ChartSeries) -> None:
    """Render a stacked area chart of the filtered history."""
    st.subheader("Patrimony evolution")
    data = _prepare_area_chart_data(series)
    if not data:
        st.info(
            "No historical data available yet. "
            "Start tracking your wealth by updating balances!"
        )
        return
    chart = alt.Chart(alt.Data(values=data)).mark_area(
        opacity=0.6,
        line=True,
    ).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("value:Q", stack="zero", title=None),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(range=_PALETTE),
            legend=alt.Legend(orient="top", title=None),
        ),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("series:N"),
            alt.Tooltip("value:Q", format=",.2f"),
        ],
    ).properties(height=400)
    st.altair_chart(chart, width="stretch")


def _render_composition_chart(composition: Composition, title: str) -> None:
    """Render a donut chart of the composition."""
    st.subheader(title)
    if not composition.items:
        st.info("No positive balances to break down.")
        return
    data = _prepare_donut_chart_data(composition)
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=90,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=_PALETTE),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=320, height=320)
    st.altair_chart(chart, width="stretch")


def _render_dashboard(private: bool) -> None:
    """Render metrics, history chart and composition charts."""
    _render_metrics(_fetch_summary(), private)

    timeframe_label = st.sidebar.selectbox(
        "Timeframe",
        [timeframe.value for timeframe in Timeframe],
    )
    accounts = _fetch_accounts()
    account_types = sorted({account.account_type for account in accounts})
    type_filter = st.sidebar.selectbox(
        "Series",
        [ALL_TYPES, TOTAL_ONLY, *account_types],
    )
    _render_history_chart(
        _fetch_history_series(Timeframe(timeframe_label), type_filter)
    )

    by_account_col, by_type_col = st.columns(2)
    with by_account_col:
        _render_composition_chart(
            _fetch_composition(GROUP_BY_ACCOUNT),
            "Distribution by account",
        )
    with by_type_col:
        _render_composition_chart(
            _fetch_composition(GROUP_BY_TYPE),
            "Distribution by type",
        )


def _render_account_form(existing: Account | None = None) -> None:
    """Render the add or edit account form."""
    key = existing.id if existing else "new"
    with st.form(f"account-form-{key}"):
        name = st.text_input("Name", value=existing.name if existing else "")
        type_options = list(DEFAULT_ACCOUNT_TYPES)
        if existing and existing.account_type not in type_options:
            type_options.append(existing.account_type)
        account_type = st.selectbox(
            "Type",
            type_options,
            index=type_options.index(existing.account_type) if existing else 0,
        )
        iban = st.text_input("IBAN", value=(existing.iban or "") if existing else "")
        balance = st.number_input(
            "Balance",
            value=float(existing.balance) if existing else 0.0,
            step=0.01,
            format="%.2f",
        )
        logo_file = st.file_uploader("Logo", type=["png", "jpg", "jpeg", "svg"])
        submitted = st.form_submit_button("Update account" if existing else "Save account")

    if not submitted:
        return

    use_case = ManageAccountsUseCase(
        store=build_snapshot_store(),
        uploader=build_asset_uploader(),
    )
    account = Account(
        id=existing.id if existing else new_account_id(),
        name=name.strip(),
        account_type=account_type,
        balance=Decimal(str(balance)),
        iban=iban.strip() or None,
        logo=existing.logo if existing else None,
    )
    try:
        if existing:
            use_case.edit(account, logo_file=logo_file)
        else:
            use_case.add(account, logo_file=logo_file)
    except PatrimonyError as exc:
        st.error(str(exc))
        return
    st.success("Account saved.")


def _render_accounts(private: bool) -> None:
    """Render the account list with edit and delete actions."""
    accounts = _fetch_accounts()
    summary = _fetch_summary()
    st.subheader("Accounts")
    with st.expander("Add account"):
        _render_account_form()

    if not accounts:
        st.warning("No accounts yet. Add your first account to get started.")
        return

    for account in accounts:
        change = summary.account_changes.get(account.id)
        with st.container(border=True):
            logo_col, info_col, action_col = st.columns([1, 4, 1])
            if account.logo:
                logo_col.image(account.logo, width=64)
            info_col.markdown(f"**{account.name}** · {account.account_type}")
            if account.iban:
                info_col.caption(account.iban)
            info_col.write(_format_currency(account.balance, private))
            if change is not None and change.is_material():
                info_col.caption(f"{change.percent:+.2f}% vs previous update")
            if action_col.button("Delete", key=f"delete-{account.id}"):
                try:
                    ManageAccountsUseCase(store=build_snapshot_store()).delete(
                        account.id
                    )
                except PatrimonyError as exc:
                    st.error(str(exc))
                else:
                    st.rerun()
            with st.expander("Edit"):
                _render_account_form(account)


def _render_balance_updater(private: bool) -> None:
    """Render a form seeded with current balances to record a snapshot."""
    accounts = _fetch_accounts()
    st.subheader("Update balances")
    if not accounts:
        st.warning("No accounts yet. Add your first account to get started.")
        return

    balances: dict[str, Decimal] = {}
    with st.form("balance-updater"):
        for account in accounts:
            value = st.number_input(
                f"{account.name} ({account.account_type})",
                value=float(account.balance),
                step=0.01,
                format="%.2f",
                key=f"balance-{account.id}",
            )
            balances[account.id] = Decimal(str(value))
        submitted = st.form_submit_button("Save balances")

    st.caption(
        "New estimated total: "
        f"{_format_currency(sum(balances.values(), Decimal('0')), private)}"
    )
    if not submitted:
        return
    try:
        RecordBalancesUseCase(store=build_snapshot_store()).execute(balances)
    except PatrimonyError as exc:
        st.error(str(exc))
        return
    st.success("Balances recorded.")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Patrimony Tracker", layout="wide")
    st.title("Patrimony Tracker")

    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Accounts", "Update balances"],
    )
    private = st.sidebar.toggle("Private mode", value=True)
    get_usage_logger().info(f"Page viewed: {page}")

    try:
        if page == "Dashboard":
            _render_dashboard(private)
        elif page == "Accounts":
            _render_accounts(private)
        else:
            _render_balance_updater(private)
    except PatrimonyError as exc:
        st.error(f"Could not load data: {exc}")


if __name__ == "__main__":  # pragma: no cover
    main()
