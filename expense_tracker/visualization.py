"""Plotly figures for the analytics screen.

Each function takes the output of a :class:`~expense_tracker.analytics.LedgerAnalytics`
method and returns a `plotly.graph_objects.Figure` that Streamlit renders
via ``st.plotly_chart``.  Empty input yields a blank figure titled
"No data to display".
"""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go


def _empty_figure() -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title="No data to display")
    return fig


def create_category_bar_chart(breakdown: pd.DataFrame, title: str | None = None) -> go.Figure:
    """Generate a horizontal bar chart of expense totals per category.

    Parameters
    ----------
    breakdown : pandas.DataFrame
        Output of ``LedgerAnalytics.category_breakdown``: one row per
        category with ``Category``, ``Amount``, ``Percentage`` and
        ``Color`` columns, largest first.
    title : str, optional
        Title for the chart.

    Returns
    -------
    plotly.graph_objects.Figure
        Bar chart with each bar in its category colour.
    """
    if breakdown.empty:
        return _empty_figure()
    colors = dict(zip(breakdown["Category"], breakdown["Color"]))
    fig = px.bar(
        breakdown,
        x="Amount",
        y="Category",
        orientation="h",
        color="Category",
        color_discrete_map=colors,
        text=breakdown["Percentage"].map(lambda pct: f"{pct}%"),
    )
    fig.update_layout(
        title=title or "Spending by Category",
        xaxis_title="Amount",
        yaxis_title="Category",
        yaxis={"categoryorder": "array", "categoryarray": list(breakdown["Category"])[::-1]},
        showlegend=False,
    )
    return fig


def create_income_expense_pie_chart(income: float, expense: float, title: str | None = None) -> go.Figure:
    """Generate a pie chart comparing total income against total expense."""
    if income <= 0 and expense <= 0:
        return _empty_figure()
    df = pd.DataFrame({"Type": ["Income", "Expense"], "Value": [max(income, 0.0), max(expense, 0.0)]})
    fig = px.pie(
        df,
        names="Type",
        values="Value",
        color="Type",
        color_discrete_map={"Income": "#4CAF50", "Expense": "#F44336"},
    )
    fig.update_layout(title=title or "Income vs Expense")
    return fig
