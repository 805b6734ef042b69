"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date, datetime, time
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases.get_account_overviews import (
    AccountOverviewsResult,
)
from src.application.use_cases.get_history_series import SeriesResult
from src.application.use_cases.get_net_worth_summary import (
    NetWorthSummaryResult,
)
from src.domain.models import (
    AccountCategory,
    AccountOverview,
    ChartPeriod,
    InclusionPolicy,
    SeriesPoint,
)
from src.domain.services.ledger import signed_balance
from src.domain.services.series import thin
from src.infrastructure import container
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import NetWorthSettings
from src.utils.decimal_utils import coerce_decimal

_CURRENCY_SYMBOLS = {"GBP": "£", "EUR": "€", "USD": "$"}


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas expose what Altair needs.

    Returns:
        tuple[bool, str | None]: Flag and an error message when broken.
    """
    import numpy
    import pandas

    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed but incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed but incomplete (missing Timestamp)."
    return True, None


def _initialize_storage(settings: NetWorthSettings) -> bool:
    """Create the ledger tables and backfill missing snapshots.

    Args:
        settings: Settings carrying the snapshot inclusion policy.

    Returns:
        bool: True when the snapshot store is usable.
    """
    container.prepare_storage()
    result = container.build_snapshot_manager().build_all(
        settings.snapshot_policy
    )
    return result.ok


@st.cache_resource(show_spinner=False)
def _prepare_storage() -> bool:
    """Prepare storage once per server process."""
    return _initialize_storage(_load_settings())


def _load_settings() -> NetWorthSettings:
    return NetWorthSettings.from_env()


def _fetch_summary(policy: InclusionPolicy) -> NetWorthSummaryResult:
    """Fetch the net worth summary for the selected toggles."""
    use_case = container.build_net_worth_summary_use_case()
    return use_case.execute(policy)


def _fetch_history(
    policy: InclusionPolicy,
    period: ChartPeriod,
) -> SeriesResult:
    use_case = container.build_history_series_use_case()
    return use_case.execute(policy, period)


def _fetch_snapshots(period: ChartPeriod) -> SeriesResult:
    use_case = container.build_snapshot_series_use_case()
    return use_case.execute(period)


def _fetch_account_history(
    account_id: int,
    period: ChartPeriod,
) -> SeriesResult:
    use_case = container.build_account_history_use_case()
    return use_case.execute(account_id, period)


def _fetch_overviews() -> AccountOverviewsResult:
    use_case = container.build_account_overviews_use_case()
    return use_case.execute()


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = _CURRENCY_SYMBOLS.get(currency_code)
    if symbol is None:
        return f"{value:,.2f} {currency_code}"
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _format_delta_with_percent(
    delta: Decimal,
    baseline: Decimal,
) -> str:
    """Format delta value with percentage change."""
    if baseline == 0:
        return _format_delta(delta)
    percent = (delta / abs(baseline)) * Decimal("100")
    sign = "+" if percent >= 0 else ""
    return f"{_format_delta(delta)} ({sign}{percent:.2f}%)"


def _prepare_series_chart_data(
    points: Sequence[SeriesPoint],
) -> tuple[list[dict[str, str | float]], list[int]]:
    """Prepare Altair rows and the thinned axis tick positions.

    Args:
        points: Windowed series points.

    Returns:
        Tuple with chart rows and tick values in epoch milliseconds.
    """
    data = [
        {
            "at": point.at.isoformat(),
            "value": float(point.value),
            "label": point.at.strftime("%d %b %Y %H:%M"),
        }
        for point in points
    ]
    ticks = [
        int(point.at.timestamp() * 1000)
        for point in thin(points)
    ]
    return data, ticks


def _render_series_chart(
    points: Sequence[SeriesPoint],
    title: str,
    currency_code: str,
    color: str = "#1b9aaa",
) -> None:
    """Render a step line chart with thinned date labels."""
    st.subheader(title)
    if not points:
        st.info("No data for the selected period yet.")
        return
    data, ticks = _prepare_series_chart_data(points)
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        interpolate="step-after",
        color=color,
        point=True,
    ).encode(
        x=alt.X(
            "at:T",
            title=None,
            axis=alt.Axis(values=ticks, format="%d %b %y", labelAngle=0),
        ),
        y=alt.Y("value:Q", title=currency_code),
        tooltip=[
            alt.Tooltip("label:N", title="When"),
            alt.Tooltip("value:Q", title="Value", format=",.2f"),
        ],
    ).properties(
        height=320,
    ).configure_view(
        stroke=None
    )
    st.altair_chart(chart, width="stretch")


def _render_summary(result: NetWorthSummaryResult, currency_code: str) -> None:
    """Render the three headline metrics with their last-update deltas."""
    if not result.ok or result.summary is None:
        st.error(f"Could not compute net worth: {result.error}")
        return
    summary = result.summary
    change = result.change
    assets_col, debt_col, net_worth_col = st.columns(3)
    assets_col.metric(
        "Total Assets",
        _format_currency(summary.total_assets, currency_code),
        _format_delta(change.total_assets) if change else None,
    )
    debt_col.metric(
        "Total Debt",
        _format_currency(summary.total_debt, currency_code),
        _format_delta(change.total_debt) if change else None,
    )
    net_worth_col.metric(
        "Net Worth",
        _format_currency(summary.net_worth, currency_code),
        (
            _format_delta_with_percent(
                change.net_worth,
                summary.net_worth - change.net_worth,
            )
            if change
            else None
        ),
    )
    if change is not None:
        st.caption(
            f"Change since {change.previous_at.strftime('%d %b %Y %H:%M')}"
        )
    for warning in result.warnings:
        st.warning(warning.message)


def _overview_rows(
    overviews: Sequence[AccountOverview],
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {
            "Provider": item.provider,
            "Category": item.category,
            "Balance": _format_currency(item.current_value, currency_code),
            "Change": _format_delta(item.change),
            "Change %": f"{item.change_percentage:.2f}%",
            "Trend": "▲" if item.is_positive_trend else "▼",
            "Last Updated": (
                item.last_updated.strftime("%d %b %Y")
                if item.last_updated
                else "—"
            ),
        }
        for item in overviews
    ]


def _render_accounts(
    overviews: Sequence[AccountOverview],
    currency_code: str,
    period: ChartPeriod,
) -> None:
    """Render the account table and a per-account history chart."""
    st.subheader("Accounts")
    st.caption(f"{len(overviews)} accounts")
    st.dataframe(
        _overview_rows(overviews, currency_code),
        width="stretch",
        hide_index=True,
    )
    labels = {
        item.account_id: f"{item.provider} ({item.category})"
        for item in overviews
    }
    selected = st.selectbox(
        "Account history",
        options=list(labels),
        format_func=lambda account_id: labels[account_id],
    )
    if selected is None:
        return
    history = _fetch_account_history(selected, period)
    if not history.ok:
        st.error(f"Could not load history: {history.error}")
        return
    _render_series_chart(history.points, labels[selected], currency_code)


def _combine_timestamp(day: date | None) -> datetime | None:
    """Return a timestamp for a backdated entry, None for "now"."""
    if day is None or day >= date.today():
        return None
    return datetime.combine(day, time(12, 0))


def _render_update_forms(overviews: Sequence[AccountOverview]) -> None:
    """Render the forms mutating the ledger."""
    usage_logger = get_usage_logger()
    settings = _load_settings()

    st.subheader("Update balance")
    by_id = {item.account_id: item for item in overviews}
    with st.form("record_balance"):
        account_id = st.selectbox(
            "Account",
            options=list(by_id),
            format_func=lambda key: by_id[key].provider,
        )
        raw_amount = st.text_input("Balance", placeholder="0.00")
        observed_day = st.date_input("Date", value=date.today())
        submitted = st.form_submit_button("Save balance")
    if submitted and account_id is not None:
        account = by_id[account_id]
        try:
            amount = signed_balance(
                AccountCategory.parse(account.category),
                coerce_decimal(raw_amount),
            )
        except ValueError as exc:
            st.error(str(exc))
        else:
            use_case = container.build_record_observation_use_case(
                settings=settings,
            )
            result = use_case.execute(
                account_id,
                amount,
                observed_at=_combine_timestamp(observed_day),
            )
            if result.ok:
                usage_logger.info(
                    f"Balance update: account={account_id} amount={amount}"
                )
                st.success("Balance saved.")
            else:
                st.error(f"Balance update failed: {result.error}")

    st.subheader("Add account")
    with st.form("add_account"):
        category = st.selectbox(
            "Category",
            options=list(AccountCategory),
            format_func=lambda item: item.value,
        )
        provider = st.text_input("Provider")
        raw_opening = st.text_input("Opening balance", placeholder="0.00")
        added = st.form_submit_button("Add account")
    if added:
        if not provider.strip():
            st.error("Provider is required.")
        else:
            try:
                opening = signed_balance(category, coerce_decimal(raw_opening))
            except ValueError as exc:
                st.error(str(exc))
            else:
                use_case = container.build_add_account_use_case(
                    settings=settings,
                )
                result = use_case.execute(category, provider, opening)
                if result.ok:
                    usage_logger.info(
                        f"Account added: {category.value} {provider.strip()}"
                    )
                    st.success("Account added.")
                else:
                    st.error(f"Could not add account: {result.error}")

    st.subheader("Delete")
    with st.form("delete_observation"):
        observation_id = st.number_input(
            "Balance entry id",
            min_value=1,
            step=1,
        )
        delete_entry = st.form_submit_button("Delete balance entry")
    if delete_entry:
        use_case = container.build_delete_observation_use_case(
            settings=settings,
        )
        result = use_case.execute(int(observation_id))
        if result.ok:
            usage_logger.info(f"Balance entry deleted: {int(observation_id)}")
            st.success("Balance entry deleted.")
        else:
            st.error(str(result.error))

    with st.form("delete_account"):
        doomed = st.selectbox(
            "Account to delete",
            options=list(by_id),
            format_func=lambda key: by_id[key].provider,
        )
        delete_account = st.form_submit_button("Delete account")
    if delete_account and doomed is not None:
        use_case = container.build_delete_account_use_case(settings=settings)
        result = use_case.execute(doomed)
        if result.ok:
            usage_logger.info(f"Account deleted: {doomed}")
            st.success("Account deleted.")
        else:
            st.error(str(result.error))


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Net Worth Dashboard", layout="wide")
    st.title("Net Worth Dashboard")

    ok, message = _check_altair_dependencies()
    if not ok:
        st.error(message)
        return
    _prepare_storage()
    settings = _load_settings()
    currency_code = settings.currency

    page = st.sidebar.selectbox("Page", ["Dashboard", "Accounts", "Update"])
    policy = InclusionPolicy(
        include_retirement=st.sidebar.toggle("Include pensions", value=True),
        include_mortgage_debt=st.sidebar.toggle("Include mortgage", value=True),
    )
    period = st.sidebar.radio(
        "Period",
        options=list(ChartPeriod),
        index=list(ChartPeriod).index(ChartPeriod.ONE_YEAR),
        format_func=lambda item: item.display_name,
    )

    if page == "Dashboard":
        _render_summary(_fetch_summary(policy), currency_code)
        history = _fetch_history(policy, period)
        snapshots = _fetch_snapshots(period)
        chart_left, chart_right = st.columns(2)
        with chart_left:
            if history.ok:
                _render_series_chart(
                    history.points,
                    "Assets over time",
                    currency_code,
                )
            else:
                st.error(f"Could not build chart: {history.error}")
        with chart_right:
            if snapshots.ok:
                _render_series_chart(
                    snapshots.points,
                    "Daily net worth",
                    currency_code,
                    color="#2e7d32",
                )
            else:
                st.error(f"Could not load snapshots: {snapshots.error}")
        return

    overviews = _fetch_overviews()
    if not overviews.ok:
        st.error(f"Could not load accounts: {overviews.error}")
        return
    if page == "Accounts":
        if not overviews.overviews:
            st.warning("No accounts yet. Add one on the Update page.")
            return
        _render_accounts(overviews.overviews, currency_code, period)
    else:
        _render_update_forms(overviews.overviews)


if __name__ == "__main__":  # pragma: no cover
    main()
