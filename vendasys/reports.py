"""Daily and monthly sales reports built from the sales file."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from .console import Color, Console, colorize, format_date
from .sale import Sale, SaleStore

MONTH_NAMES = (
    "Janeiro",
    "Fevereiro",
    "Marco",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)

_DATE = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)")

_DAILY_RULE = "-" * 92 + "\n"
_MONTHLY_RULE = "-" * 61 + "\n"


class FilterType(Enum):
    """Period a report covers, relative to the current date."""

    DAY = 0
    MONTH = 1
    YEAR = 2


@dataclass
class SaleList:
    """Sales selected for a report, with their totals."""

    sales: List[Sale] = field(default_factory=list)
    total_value: float = 0.0
    total_sales: int = 0

    def __len__(self) -> int:
        return len(self.sales)


def _parse_date(text: str) -> Optional[Tuple[int, int, int]]:
    match = _DATE.match(text)
    if match is None:
        return None
    day, month, year = (int(part) for part in match.groups())
    return day, month, year


def is_date_in_range(sale_date: str, now: float, filter_type: FilterType) -> bool:
    """Tell whether ``sale_date`` (DD/MM/YY) falls in the period containing ``now``."""
    current = _parse_date(format_date(now))
    sale = _parse_date(sale_date)
    if current is None or sale is None:
        return False
    day, month, year = current
    sale_day, sale_month, sale_year = sale
    if filter_type is FilterType.DAY:
        return (sale_day, sale_month, sale_year) == (day, month, year)
    if filter_type is FilterType.MONTH:
        return (sale_month, sale_year) == (month, year)
    if filter_type is FilterType.YEAR:
        return sale_year == year
    return False


def sales_by_time(sales: Iterable[Sale], filter_type: FilterType, now: float) -> SaleList:
    """Select the sales in the period of ``now`` and total them.

    Consecutive lines sharing an id count as a single sale.
    """
    result = SaleList()
    previous_id: Optional[int] = None
    for sale in sales:
        if not is_date_in_range(sale.date, now, filter_type):
            continue
        result.total_value += sale.total
        if previous_id is None or previous_id != sale.id:
            result.total_sales += 1
        previous_id = sale.id
        result.sales.append(sale)
    return result


def month_totals(sales: Iterable[Sale]) -> List[Tuple[str, float]]:
    """Return (month name, total sold) for every month, in calendar order."""
    totals = [0.0] * len(MONTH_NAMES)
    for sale in sales:
        parsed = _parse_date(sale.date)
        if parsed is None:
            continue
        month = parsed[1]
        if 1 <= month <= len(MONTH_NAMES):
            totals[month - 1] += sale.total
    return list(zip(MONTH_NAMES, totals))


def sort_months_by_total(months: Sequence[Tuple[str, float]]) -> List[Tuple[str, float]]:
    """Return the months ordered by total, largest first; ties keep their order."""
    return sorted(months, key=lambda month: month[1], reverse=True)


def render_daily_report(sale_list: SaleList) -> str:
    """Render the daily report table."""
    parts = [
        colorize(
            "------------------------------------- Relatorio Diario "
            "-------------------------------------\n",
            Color.WHITE,
        ),
        "| ID \t| Tipo \t| Peso \t\t| Quantidade \t| Preco Item \t| Total Venda\t| Data \t   |\n",
        colorize(_DAILY_RULE, Color.WHITE),
    ]
    sales = sale_list.sales
    following_ids: List[Optional[int]] = [sale.id for sale in sales[1:]] + [None]
    for sale, next_id in zip(sales, following_ids):
        parts.append(
            f"| {sale.id} \t| {int(sale.item.type)} \t| {sale.item.weight:.3f}kg \t"
            f"| {sale.item.amount} \t\t| R${sale.item.price:.2f} \t"
            f"| R${sale.total:.2f} \t| {sale.date} |\n"
        )
        if next_id != sale.id:
            parts.append("|----\t|----\t|--------\t|----\t\t|-------\t|-------\t|----------|\n")
    parts += [
        colorize(_DAILY_RULE, Color.WHITE),
        colorize("|\t   Total Vendas Registradas\t\t|\t   Valor Total Vendido\t\t   |\n", Color.WHITE),
        colorize(_DAILY_RULE, Color.WHITE),
        f"|\t\t\t{sale_list.total_sales}\t\t\t|\t\tR${sale_list.total_value:.2f}\t\t\t   |\n",
        colorize(_DAILY_RULE, Color.WHITE),
    ]
    return "".join(parts)


def render_monthly_report(months: Iterable[Tuple[str, float]]) -> str:
    """Render the monthly report; months with no meaningful total are left out."""
    parts = [
        colorize("---------------------- Relatorio Mensal ---------------------\n", Color.WHITE),
        colorize("\tMes\t\t\t|\t\tTotal\t\n", Color.WHITE),
        colorize(_MONTHLY_RULE, Color.WHITE),
    ]
    parts += [f"\t{name:<15}\t\t|\t\tR${total:.2f}\t\n" for name, total in months if total > 0.1]
    parts.append(colorize(_MONTHLY_RULE, Color.WHITE))
    return "".join(parts)


def _load(console: Console, store: SaleStore, filter_type: FilterType, now: Optional[float]) -> SaleList:
    now = time.time() if now is None else now
    try:
        sales = store.read()
    except OSError:
        console.write("Erro ao abrir o arquivo de vendas.\n")
        sales = []
    return sales_by_time(sales, filter_type, now)


def show_sales_by_day(console: Console, store: SaleStore, now: Optional[float] = None) -> SaleList:
    """Print today's sales and return them."""
    sale_list = _load(console, store, FilterType.DAY, now)
    if not sale_list:
        console.write("Nenhuma venda registrada para o dia.\n", Color.YELLOW)
    else:
        console.write(render_daily_report(sale_list))
    return sale_list


def show_sales_by_month(
    console: Console, store: SaleStore, now: Optional[float] = None
) -> List[Tuple[str, float]]:
    """Print this year's totals per month, largest first, and return them."""
    sale_list = _load(console, store, FilterType.YEAR, now)
    if not sale_list:
        console.write("Nenhuma venda registrada durante esse ano.\n", Color.YELLOW)
        return []
    months = sort_months_by_total(month_totals(sale_list.sales))
    console.write(render_monthly_report(months))
    return months