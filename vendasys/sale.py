"""Sale records, their text file storage and interactive registration."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Callable, List, Optional, Union

from .console import Color, Console, colorize, format_date
from .ids import SaleIdStore

DEFAULT_SALES_PATH = Path("data") / "sales.txt"

KILO_PRICE = 70.00
HOTMEAL_PRICE = 20.00
PACKAGING_PRICE = 0.50


class ItemType(IntEnum):
    """Kinds of item that can be sold."""

    MEAL = 1
    HOTMEAL = 2
    DRINK = 3


@dataclass
class Item:
    """A sold item: weight for by-the-kilo meals, amount otherwise."""

    type: ItemType
    weight: float = 0.0
    amount: int = 0
    price: float = 0.0


@dataclass
class Sale:
    """One line of a sale; several lines may share an id."""

    id: int
    item: Item
    date: str = field(default="")

    @property
    def total(self) -> float:
        """Amount times unit price."""
        return self.item.amount * self.item.price

    def to_line(self) -> str:
        """Render the sale as a line of the sales file, without newline."""
        return (
            f"{self.id} {int(self.item.type)} {self.item.weight:.3f} "
            f"{self.item.amount} {self.item.price:.2f} {self.date}"
        )

    @classmethod
    def from_line(cls, line: str) -> "Sale":
        """Parse a line of the sales file; raise ValueError if malformed."""
        tokens = line.split()
        if len(tokens) != 6:
            raise ValueError(f"malformed sale line: {line!r}")
        sale_id, type_, weight, amount, price, date = tokens
        try:
            item = Item(ItemType(int(type_)), float(weight), int(amount), float(price))
            return cls(int(sale_id), item, date)
        except ValueError as exc:
            raise ValueError(f"malformed sale line: {line!r}") from exc


class SaleStore:
    """Append-only text file of sales."""

    def __init__(
        self,
        path: Union[str, Path] = DEFAULT_SALES_PATH,
        id_store: Optional[SaleIdStore] = None,
    ) -> None:
        self.path = Path(path)
        self.id_store = id_store if id_store is not None else SaleIdStore()

    def append(self, sale: Sale) -> None:
        """Append ``sale`` and record its id as the latest."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a") as handle:
            handle.write(sale.to_line() + "\n")
        self.id_store.update(sale.id)

    def read(self) -> List[Sale]:
        """Return the sales in file order, stopping at the first malformed line."""
        sales: List[Sale] = []
        with self.path.open() as handle:
            for line in handle:
                if not line.strip():
                    continue
                try:
                    sales.append(Sale.from_line(line))
                except ValueError:
                    break
        return sales


def meal_price(weight: float) -> float:
    """Price of a by-the-kilo meal."""
    return weight * KILO_PRICE


def hot_meal_price(amount: int) -> float:
    """Price of ``amount`` boxed meals including packaging."""
    return amount * HOTMEAL_PRICE + amount * PACKAGING_PRICE


def format_receipt(sale: Sale) -> str:
    """Return the confirmation box shown after a sale is recorded."""
    if sale.item.type == ItemType.MEAL:
        label, content = "Peso", sale.item.weight
    else:
        label, content = "Qntd", float(sale.item.amount)
    return (
        colorize("\n---------Venda registrada--------\n", Color.WHITE)
        + f"| {label} \t\t | Valor \t|\n"
        + f"| {content:.3f} \t | R$ {sale.item.price:.2f} \t|\n"
        + colorize("---------------------------------\n", Color.WHITE)
    )


class SaleRegistrar:
    """Walks the user through recording a sale."""

    def __init__(
        self,
        console: Console,
        store: SaleStore,
        id_store: SaleIdStore,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.console = console
        self.store = store
        self.id_store = id_store
        self.clock = clock

    def register(self) -> Optional[Sale]:
        """Ask for a sale type and record it; return the sale or None."""
        self.console.show_sale_menu()
        try:
            option = self.console.read_int()
        except ValueError:
            option = 0

        date = format_date(self.clock())
        sale_id = self.id_store.next_id()

        try:
            item_type = ItemType(option)
        except ValueError:
            self.console.clear()
            if option != 4:
                self.console.write("Tipo de Venda invalido! Tente novamente.\n", Color.RED)
            return None

        sale = Sale(sale_id, Item(item_type), date)
        if item_type == ItemType.MEAL:
            self.register_meal(sale)
        elif item_type == ItemType.HOTMEAL:
            self.register_hot_meal(sale)
        else:
            return self.register_drink(sale)
        return sale

    def _save(self, sale: Sale) -> None:
        try:
            self.store.append(sale)
        except OSError:
            self.console.write("Erro ao abrir o arquivo de vendas.\n", Color.RED)

    def register_meal(self, sale: Sale) -> None:
        """Record a by-the-kilo meal, optionally followed by drinks."""
        self.console.write("Digite o peso da refeicao a quilo (em kg): ", Color.WHITE)
        sale.item.weight = self.console.read_float()
        self.console.clear()

        sale.item.amount = 1
        sale.item.price = meal_price(sale.item.weight)
        self._save(sale)

        if self.ask_want_drink() == 1:
            self.register_drink(sale)

        self.console.write(format_receipt(sale))

    def register_hot_meal(self, sale: Sale) -> None:
        """Record boxed meals."""
        self.console.write("Digite a quantidade de quentinhas: ", Color.WHITE)
        sale.item.amount = self.console.read_int()
        self.console.clear()

        sale.item.price = hot_meal_price(sale.item.amount)
        sale.item.weight = 0.0
        self._save(sale)

        self.console.write(format_receipt(sale))

    def register_drink(self, sale: Sale) -> Sale:
        """Record drinks under the id and date of ``sale``; return the drink line."""
        drink = Sale(sale.id, Item(ItemType.DRINK), sale.date)

        self.console.write("Digite a quantidade de bebidas: ", Color.WHITE)
        drink.item.amount = self.console.read_int()
        self.console.write("Digite o valor unitario da bebida: R$ ", Color.WHITE)
        drink.item.price = self.console.read_float()

        self.console.clear()
        self._save(drink)
        self.console.write(format_receipt(drink))
        return drink

    def ask_want_drink(self) -> int:
        """Ask whether drinks should be added: 1 for yes, 2 for no."""
        while True:
            self.console.write("Deseja adicionar bebida(s)?\n", Color.WHITE)
            self.console.write("1. Sim\n", Color.GREEN)
            self.console.write("2. Nao\n", Color.RED)
            self.console.write("Digite a opcao: ", Color.WHITE)
            try:
                option = self.console.read_int()
            except ValueError:
                option = 0
            if option in (1, 2):
                return option
            self.console.clear()
            self.console.write("Opcao invalida! Tente novamente.\n", Color.RED)