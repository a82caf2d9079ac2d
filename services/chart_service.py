"""Headless matplotlib figures for the category pie and income/expense bars.

Figures are built with matplotlib.figure.Figure directly so no pyplot state
or GUI backend is involved; a front end embeds them in its own canvas.
"""
from matplotlib.figure import Figure

from services.report_service import percentage_of_total
from utils.constants import EXPENSE_COLOR, INCOME_COLOR
from utils.currency import format_currency, format_percentage


class ChartService:
    def __init__(self, currency_symbol: str = "$"):
        self._symbol = currency_symbol

    def build_pie_chart(self, title: str, group_sums: dict[str, float]) -> Figure:
        fig = Figure(figsize=(5, 4), dpi=80, tight_layout=True)
        ax = fig.add_subplot(111)
        ax.set_title(title)

        slices = {k: v for k, v in group_sums.items() if v > 0}
        if not slices:
            ax.text(0.5, 0.5, "No data", ha="center", va="center",
                    transform=ax.transAxes, color="gray")
            ax.set_axis_off()
            return fig

        shares = percentage_of_total(slices)
        labels = [f"{name} ({format_percentage(shares[name])})" for name in slices]
        ax.pie(list(slices.values()), labels=labels, startangle=90)
        ax.set_aspect("equal")
        return fig

    def build_income_expense_chart(
        self,
        months: list[str],
        income: list[float],
        expense: list[float],
        title: str = "Income vs Expense",
    ) -> Figure:
        if not (len(months) == len(income) == len(expense)):
            raise ValueError("Month, income and expense series must be aligned.")

        fig = Figure(figsize=(8, 5), dpi=80, tight_layout=True)
        ax = fig.add_subplot(111)
        ax.set_title(title)

        if not months:
            ax.text(0.5, 0.5, "No data", ha="center", va="center",
                    transform=ax.transAxes, color="gray")
            return fig

        x = list(range(len(months)))
        w = 0.35
        ax.bar([i - w / 2 for i in x], income, w, color=INCOME_COLOR, label="Income")
        ax.bar([i + w / 2 for i in x], expense, w, color=EXPENSE_COLOR, label="Expense")
        ax.set_xticks(x)
        ax.set_xticklabels(months)
        ax.set_xlabel("Month")
        ax.set_ylabel("Amount")
        ax.yaxis.set_major_formatter(
            lambda v, _: format_currency(v, self._symbol)
        )
        ax.legend()
        return fig
