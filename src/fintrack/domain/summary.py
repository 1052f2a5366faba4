"""Transaction aggregation and reporting.

The module-level functions are pure: they take transactions (and categories
where names or colors are needed) and never touch the store. ``SummaryService``
wires them to a store for the dashboard and analytics views.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from dateutil.relativedelta import relativedelta

from fintrack.domain.defaults import UNKNOWN_CATEGORY_COLOR, UNKNOWN_CATEGORY_NAME
from fintrack.domain.entities import (
    Category,
    Language,
    Period,
    Transaction,
    TransactionType,
)
from fintrack.domain.store import Store
from fintrack.utils.date_parser import get_period_range

TODAY_TITLE = "Today"
YESTERDAY_TITLE = "Yesterday"
BREAKDOWN_LIMIT = 8
TREND_MONTHS = 6
RECENT_LIMIT = 5


@dataclass(frozen=True)
class PeriodTotals:
    """Income, expense and net balance of a set of transactions."""

    income: Decimal
    expenses: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.expenses


@dataclass(frozen=True)
class CategoryTotal:
    """Summed expenses for one category."""

    category_id: Optional[str]
    name: str
    color: str
    total: Decimal


@dataclass(frozen=True)
class MonthlyTotal:
    """Income and expenses within one calendar month."""

    year: int
    month: int
    income: Decimal
    expenses: Decimal

    @property
    def key(self) -> str:
        return f"{self.year}-{self.month:02d}"

    @property
    def label(self) -> str:
        return date(self.year, self.month, 1).strftime("%b")


@dataclass(frozen=True)
class TrendSeries:
    """Fixed-length monthly series, oldest month first."""

    months: tuple[MonthlyTotal, ...]

    @property
    def labels(self) -> list[str]:
        return [m.label for m in self.months]

    @property
    def income(self) -> list[Decimal]:
        return [m.income for m in self.months]

    @property
    def expenses(self) -> list[Decimal]:
        return [m.expenses for m in self.months]


@dataclass(frozen=True)
class TransactionSection:
    """Transactions of one calendar day."""

    title: str
    date: date
    transactions: tuple[Transaction, ...]

    @property
    def total(self) -> Decimal:
        return calculate_balance(self.transactions)


@dataclass(frozen=True)
class DashboardSummary:
    """Current month figures plus the newest transactions."""

    income: Decimal
    expenses: Decimal
    balance: Decimal
    recent_transactions: tuple[Transaction, ...]


@dataclass(frozen=True)
class AnalyticsReport:
    """Everything the analytics view shows for one period."""

    period: Period
    start_date: date
    end_date: date
    totals: PeriodTotals
    breakdown: tuple[CategoryTotal, ...]
    trend: TrendSeries


def _today(today: Optional[date]) -> date:
    return today if today is not None else date.today()


def filter_by_period(
    transactions: Iterable[Transaction], period: Period, today: Optional[date] = None
) -> list[Transaction]:
    """Return transactions whose date falls inside a reporting period.

    Args:
        transactions: Transactions to filter
        period: thisMonth, lastMonth or thisYear, relative to ``today``
        today: Reference date (defaults to date.today())

    Returns:
        Matching transactions in their original order
    """
    start_date, end_date = get_period_range(Period(period), _today(today))
    return [t for t in transactions if start_date <= t.date <= end_date]


def calculate_totals(transactions: Iterable[Transaction]) -> PeriodTotals:
    """Sum income and expenses separately."""
    income = Decimal("0")
    expenses = Decimal("0")
    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            income += txn.amount
        else:
            expenses += txn.amount
    return PeriodTotals(income=income, expenses=expenses)


def calculate_balance(transactions: Iterable[Transaction]) -> Decimal:
    """Return income minus expenses."""
    return calculate_totals(transactions).balance


def category_breakdown(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    language: Language = Language.EN,
    limit: int = BREAKDOWN_LIMIT,
) -> list[CategoryTotal]:
    """Sum expenses per category, largest first.

    Transactions referencing a missing category are pooled under a single
    "Unknown" entry. Only the first ``limit`` entries are returned; the rest
    are dropped rather than merged.
    """
    category_index = {c.id: c for c in categories}
    totals: dict[Optional[str], Decimal] = defaultdict(Decimal)

    for txn in transactions:
        if txn.type != TransactionType.EXPENSE:
            continue
        key = txn.category_id if txn.category_id in category_index else None
        totals[key] += txn.amount

    results = []
    for category_id, total in totals.items():
        category = category_index.get(category_id) if category_id is not None else None
        if category is None:
            name, color = UNKNOWN_CATEGORY_NAME, UNKNOWN_CATEGORY_COLOR
        else:
            name, color = category.display_name(language), category.color
        results.append(CategoryTotal(category_id=category_id, name=name, color=color, total=total))

    # sorted() is stable so equal totals keep first-seen order
    results = sorted(results, key=lambda r: r.total, reverse=True)
    return results[:limit]


def monthly_trend(
    transactions: Iterable[Transaction],
    today: Optional[date] = None,
    months: int = TREND_MONTHS,
) -> TrendSeries:
    """Build income and expense totals for the last ``months`` calendar months.

    Every month in the window is present, including months without
    transactions. The current month is the last point.
    """
    first_of_month = _today(today).replace(day=1)
    buckets: dict[tuple[int, int], dict[str, Decimal]] = {}
    for offset in range(months - 1, -1, -1):
        month_start = first_of_month - relativedelta(months=offset)
        buckets[(month_start.year, month_start.month)] = {
            "income": Decimal("0"),
            "expenses": Decimal("0"),
        }

    for txn in transactions:
        bucket = buckets.get((txn.date.year, txn.date.month))
        if bucket is None:
            continue
        if txn.type == TransactionType.INCOME:
            bucket["income"] += txn.amount
        else:
            bucket["expenses"] += txn.amount

    return TrendSeries(
        months=tuple(
            MonthlyTotal(year=year, month=month, income=data["income"], expenses=data["expenses"])
            for (year, month), data in buckets.items()
        )
    )


def format_section_title(day: date, today: Optional[date] = None) -> str:
    """Return "Today", "Yesterday" or a M/D/YYYY date string."""
    today = _today(today)
    if day == today:
        return TODAY_TITLE
    if day == today - timedelta(days=1):
        return YESTERDAY_TITLE
    return f"{day.month}/{day.day}/{day.year}"


def group_into_sections(
    transactions: Iterable[Transaction], today: Optional[date] = None
) -> list[TransactionSection]:
    """Partition transactions into day sections.

    Sections are ordered Today, Yesterday, then remaining days newest first.
    Within a section, the most recently created transaction comes first.
    """
    today = _today(today)
    by_day: dict[date, list[Transaction]] = defaultdict(list)
    for txn in transactions:
        by_day[txn.date].append(txn)

    def section_order(day: date) -> tuple[int, int]:
        if day == today:
            return (0, 0)
        if day == today - timedelta(days=1):
            return (1, 0)
        return (2, -day.toordinal())

    sections = []
    for day in sorted(by_day, key=section_order):
        entries = sorted(by_day[day], key=lambda t: t.created_at, reverse=True)
        sections.append(
            TransactionSection(
                title=format_section_title(day, today),
                date=day,
                transactions=tuple(entries),
            )
        )
    return sections


def running_balance(transactions: Iterable[Transaction]) -> list[tuple[date, Decimal]]:
    """Return the cumulative balance at the end of each day, oldest first."""
    daily: dict[date, Decimal] = defaultdict(Decimal)
    for txn in transactions:
        daily[txn.date] += txn.signed_amount

    balance = Decimal("0")
    points = []
    for day in sorted(daily):
        balance += daily[day]
        points.append((day, balance))
    return points


def recent_transactions(
    transactions: Sequence[Transaction], limit: int = RECENT_LIMIT
) -> list[Transaction]:
    """Return the newest transactions by date, then creation time."""
    ordered = sorted(transactions, key=lambda t: (t.date, t.created_at), reverse=True)
    return ordered[:limit]


class SummaryService:
    """Service for building dashboard and analytics views from a store."""

    def __init__(self, store: Store):
        """Initialize summary service.

        Args:
            store: Domain store to read from
        """
        self.store = store

    def build_dashboard(self, today: Optional[date] = None) -> DashboardSummary:
        """Build the current-month dashboard summary."""
        state = self.store.state
        this_month = filter_by_period(state.transactions, Period.THIS_MONTH, today)
        totals = calculate_totals(this_month)
        return DashboardSummary(
            income=totals.income,
            expenses=totals.expenses,
            balance=totals.balance,
            recent_transactions=tuple(recent_transactions(state.transactions)),
        )

    def build_analytics_report(
        self, period: Period = Period.THIS_MONTH, today: Optional[date] = None
    ) -> AnalyticsReport:
        """Build totals, category breakdown and trend for a period.

        The trend always covers the last six months regardless of ``period``.
        """
        today = _today(today)
        state = self.store.state
        start_date, end_date = get_period_range(period, today)
        filtered = filter_by_period(state.transactions, period, today)
        return AnalyticsReport(
            period=period,
            start_date=start_date,
            end_date=end_date,
            totals=calculate_totals(filtered),
            breakdown=tuple(
                category_breakdown(filtered, state.categories, state.settings.language)
            ),
            trend=monthly_trend(state.transactions, today),
        )

    def build_sections(
        self, period: Optional[Period] = None, today: Optional[date] = None
    ) -> list[TransactionSection]:
        """Group transactions into day sections, optionally within a period."""
        transactions = self.store.transactions
        if period is not None:
            transactions = filter_by_period(transactions, period, today)
        return group_into_sections(transactions, today)
