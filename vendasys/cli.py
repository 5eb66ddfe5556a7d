"""Interactive sales system entry point."""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import List, Optional

from .console import Color, Console
from .ids import SaleIdStore
from .reports import show_sales_by_day, show_sales_by_month
from .sale import SaleRegistrar, SaleStore

_EXIT = 4


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="vendasys", description="Registro de vendas.")
    parser.add_argument("--data-dir", default="data", help="directory holding the data files")
    parser.add_argument("--no-clear", action="store_true", help="never clear the terminal")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the menu loop until the user leaves or input ends."""
    args = _parse_args(argv)
    data_dir = Path(args.data_dir)
    console = Console(clear_screen=(lambda: None) if args.no_clear else None)
    id_store = SaleIdStore(data_dir / "saleID.txt", console)
    store = SaleStore(data_dir / "sales.txt", id_store)
    registrar = SaleRegistrar(console, store, id_store, time.time)

    try:
        while True:
            console.show_menu()
            try:
                option = console.read_int()
            except ValueError:
                option = 0
            console.clear()

            if not 1 <= option <= _EXIT:
                console.write("Opcao invalida! Tente novamente.\n", Color.RED)
                console.pause()
                continue

            if option == _EXIT:
                console.write("Saindo do sistema...\n", Color.YELLOW)
                break

            if option == 1:
                registrar.register()
                continue

            if option == 2:
                show_sales_by_day(console, store)
            else:
                show_sales_by_month(console, store)
            console.pause()
            console.clear()
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())