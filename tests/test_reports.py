import io
import time

import pytest

from vendasys.console import Console
from vendasys.ids import SaleIdStore
from vendasys.reports import (
    MONTH_NAMES,
    FilterType,
    SaleList,
    is_date_in_range,
    month_totals,
    render_daily_report,
    render_monthly_report,
    sales_by_time,
    show_sales_by_day,
    show_sales_by_month,
    sort_months_by_total,
)
from vendasys.sale import Item, ItemType, Sale, SaleStore

NOW = time.mktime((2025, 6, 3, 12, 0, 0, 0, 0, -1))


def make_sale(sale_id, date, amount=1, price=10.0, item_type=ItemType.DRINK):
    return Sale(sale_id, Item(item_type, 0.0, amount, price), date)


@pytest.fixture
def console():
    return Console(stdin=io.StringIO(""), stdout=io.StringIO(), clear_screen=lambda: None)


@pytest.fixture
def store(tmp_path, console):
    ids = SaleIdStore(tmp_path / "saleID.txt", console)
    return SaleStore(tmp_path / "sales.txt", ids)


@pytest.mark.parametrize(
    "date, filter_type, expected",
    [
        ("03/06/25", FilterType.DAY, True),
        ("3/6/25", FilterType.DAY, True),
        ("04/06/25", FilterType.DAY, False),
        ("03/06/24", FilterType.DAY, False),
        ("04/06/25", FilterType.MONTH, True),
        ("03/07/25", FilterType.MONTH, False),
        ("01/01/25", FilterType.YEAR, True),
        ("01/01/24", FilterType.YEAR, False),
        ("garbage", FilterType.YEAR, False),
        ("03-06-25", FilterType.DAY, False),
    ],
)
def test_is_date_in_range(date, filter_type, expected):
    assert is_date_in_range(date, NOW, filter_type) is expected


def test_sales_by_time_filters_and_totals():
    sales = [
        make_sale(1, "03/06/25", 1, 20.0),
        make_sale(1, "03/06/25", 2, 5.0),
        make_sale(2, "02/06/25", 1, 7.0),
        make_sale(3, "03/06/25", 3, 4.0),
    ]
    result = sales_by_time(sales, FilterType.DAY, NOW)
    assert [s.id for s in result.sales] == [1, 1, 3]
    assert len(result) == 3
    assert result.total_sales == 2
    assert result.total_value == pytest.approx(sum(s.total for s in result.sales))


def test_sales_by_time_month_includes_other_days():
    sales = [make_sale(1, "03/06/25"), make_sale(2, "02/06/25"), make_sale(3, "02/05/25")]
    result = sales_by_time(sales, FilterType.MONTH, NOW)
    assert [s.id for s in result.sales] == [1, 2]
    assert result.total_sales == 2


def test_sales_by_time_empty():
    result = sales_by_time([], FilterType.YEAR, NOW)
    assert result == SaleList()
    assert len(result) == 0


def test_month_totals_calendar_order():
    sales = [
        make_sale(1, "03/06/25", 1, 10.0),
        make_sale(2, "05/06/25", 2, 3.0),
        make_sale(3, "01/01/25", 1, 4.0),
    ]
    months = month_totals(sales)
    assert [name for name, _ in months] == list(MONTH_NAMES)
    totals = dict(months)
    assert totals["Junho"] == pytest.approx(sales[0].total + sales[1].total)
    assert totals["Janeiro"] == pytest.approx(sales[2].total)
    assert totals["Dezembro"] == 0.0


def test_sort_months_by_total_descending_and_stable():
    months = [("Janeiro", 1.0), ("Fevereiro", 5.0), ("Marco", 1.0), ("Abril", 3.0)]
    ordered = sort_months_by_total(months)
    assert [name for name, _ in ordered] == ["Fevereiro", "Abril", "Janeiro", "Marco"]
    assert sorted(ordered) == sorted(months)


def test_render_monthly_report_skips_empty_months():
    text = render_monthly_report([("Junho", 12.5), ("Julho", 0.0), ("Maio", 0.05)])
    assert "Relatorio Mensal" in text
    assert "Junho" in text
    assert "Julho" not in text
    assert "Maio" not in text
    assert "R$12.50" in text


def test_render_daily_report_groups_by_id():
    sales = [
        make_sale(1, "03/06/25", 1, 20.0),
        make_sale(1, "03/06/25", 2, 5.0),
        make_sale(2, "03/06/25", 1, 7.0),
    ]
    result = sales_by_time(sales, FilterType.DAY, NOW)
    text = render_daily_report(result)
    assert "Relatorio Diario" in text
    assert "Total Vendas Registradas" in text
    separator = "|----\t|----\t|--------\t|----\t\t|-------\t|-------\t|----------|"
    assert text.count(separator) == result.total_sales
    assert text.count("| 03/06/25 |") == len(sales)


def test_show_sales_by_day_missing_file(console, store):
    result = show_sales_by_day(console, store, NOW)
    out = console._stdout.getvalue()
    assert len(result) == 0
    assert "Erro ao abrir o arquivo de vendas." in out
    assert "Nenhuma venda registrada para o dia." in out


def test_show_sales_by_day_reads_store(console, store):
    store.append(make_sale(1, "03/06/25", 2, 5.0))
    store.append(make_sale(2, "01/06/25", 1, 9.0))
    result = show_sales_by_day(console, store, NOW)
    assert [s.id for s in result.sales] == [1]
    assert "Relatorio Diario" in console._stdout.getvalue()


def test_show_sales_by_month_no_sales(console, store):
    store.append(make_sale(1, "03/06/24"))
    assert show_sales_by_month(console, store, NOW) == []
    assert "Nenhuma venda registrada durante esse ano." in console._stdout.getvalue()


def test_show_sales_by_month_sorted(console, store):
    store.append(make_sale(1, "03/06/25", 1, 10.0))
    store.append(make_sale(2, "03/02/25", 1, 30.0))
    months = show_sales_by_month(console, store, NOW)
    assert [name for name, _ in months[:2]] == ["Fevereiro", "Junho"]
    totals = [total for _, total in months]
    assert totals == sorted(totals, reverse=True)
    out = console._stdout.getvalue()
    assert out.index("Fevereiro") < out.index("Junho")