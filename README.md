# vendasys

A small terminal point-of-sale for a restaurant that sells meals by the
kilo, boxed meals (*quentinhas*) and drinks. It records each sale in a plain
text file and prints daily and monthly sales reports. The interface is in
Portuguese and uses ANSI colours.

## Installation

```
pip install .
```

## Usage

```
vendasys [--data-dir DIR] [--no-clear]
```

- `--data-dir DIR`: directory holding the data files (default: `data`,
  relative to the current directory).
- `--no-clear`: never clear the terminal between screens. Without it the
  screen is cleared with `clear` (or `cls` on Windows).

The main menu offers:

1. **Registrar Venda**: register a sale
2. **Relatorio Diario**: list today's sales with their totals
3. **Relatorio Mensal**: totals per month for the current year, largest
   first; months whose total is 0.10 or less are left out
4. **Sair**: quit

Any other choice prints an error and waits for Enter. The program also ends
quietly when its input runs out.

### Registering a sale

- **Refeicao a Quilo** (meal by weight): enter the weight in kg. The price is
  70.00 per kilo. You are then asked whether to add drinks to the same sale.
- **Quentinha** (boxed meal): enter the quantity. The recorded price is
  20.00 plus 0.50 for packaging, per box.
- **Bebida** (drink): enter the quantity and the unit price.

A short receipt is printed after each item is recorded. Drinks added to a
meal share its ID, so in the daily report consecutive lines with the same ID
count as one sale.

### Data files

Sales are appended to `sales.txt` in the data directory, one item per line:

```
<id> <type> <weight> <amount> <price> <DD/MM/YY>
```

`type` is 1 for a meal by weight, 2 for boxed meals and 3 for drinks. A
line's total is `amount * price`. Reading stops at the first malformed line.

The last sale ID used is kept in `saleID.txt`. It is created with ID 0 if it
is missing or does not start with a number.

## Using it from Python

The pieces of the program can be used directly:

- `vendasys.sale`: `Sale`, `Item`, `ItemType`, the file store `SaleStore`
  (`append`, `read`), the price helpers `meal_price` and `hot_meal_price`,
  `format_receipt`, and the interactive `SaleRegistrar`.
- `vendasys.ids`: `SaleIdStore` (`current`, `next_id`, `update`).
- `vendasys.reports`: `FilterType`, `SaleList`, `is_date_in_range`,
  `sales_by_time`, `month_totals`, `sort_months_by_total`,
  `render_daily_report`, `render_monthly_report`, `show_sales_by_day` and
  `show_sales_by_month`.
- `vendasys.console`: `Console`, `Color`, `colorize`, `format_date` and
  `clear_terminal`.

## Limitations

Sales can only be added: there is no way to edit or delete a recorded sale,
and reports only cover the current day and the current year.

## Development

```
pip install -e ".[test]"
pytest
```