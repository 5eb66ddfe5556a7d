"""Persistent storage of the last sale identifier."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Union

from .console import Color, Console

DEFAULT_ID_PATH = Path("data") / "saleID.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SaleIdStore:
    """Keeps the most recent sale id in a small text file."""

    def __init__(
        self,
        path: Union[str, Path] = DEFAULT_ID_PATH,
        console: Optional[Console] = None,
    ) -> None:
        self.path = Path(path)
        self.console = console if console is not None else Console()

    def current(self) -> int:
        """Return the stored id, resetting the file to 0 if missing or invalid."""
        try:
            content = self.path.read_text()
        except FileNotFoundError:
            self.console.write("Criando novo arquivo com o ID 0.\n", Color.YELLOW)
            self.update(0)
            return 0

        match = _LEADING_INT.match(content)
        if match is None:
            self.console.write(
                "Arquivo de ID inválido ou vazio. Definindo ID como 0.\n", Color.YELLOW
            )
            self.update(0)
            return 0
        return int(match.group(1))

    def next_id(self) -> int:
        """Return the id the next sale should use."""
        return self.current() + 1

    def update(self, sale_id: int) -> None:
        """Store ``sale_id`` as the most recent id."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(f"{sale_id}\n")
        except OSError:
            self.console.write("Erro ao abrir o arquivo de id.\n", Color.RED)