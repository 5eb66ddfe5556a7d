"""Terminal helpers: coloured output, token input, menus and screen clearing."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from collections import deque
from enum import IntEnum
from typing import Callable, Optional, TextIO


class Color(IntEnum):
    """ANSI foreground colour codes."""

    RESET = 0
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37


def colorize(text: str, color: Color) -> str:
    """Wrap ``text`` in the escape sequence for ``color`` followed by a reset."""
    return f"\033[{int(color)}m{text}\033[0m"


def format_date(timestamp: float) -> str:
    """Format a timestamp as local ``DD/MM/YY``."""
    return time.strftime("%d/%m/%y", time.localtime(timestamp))


def clear_terminal() -> None:
    """Clear the terminal using the platform's clear command."""
    if os.name == "nt":
        subprocess.run("cls", shell=True, check=False)
    else:
        subprocess.run(["clear"], check=False)


class Console:
    """Reads whitespace-separated values and writes coloured text."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        clear_screen: Optional[Callable[[], None]] = None,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._clear_screen = clear_screen if clear_screen is not None else clear_terminal
        self._pending: deque[str] = deque()

    def write(self, text: str, color: Optional[Color] = None) -> None:
        """Write ``text``; wrap it in colour codes when ``color`` is given."""
        self._stdout.write(text if color is None else colorize(text, color))
        self._stdout.flush()

    def _next_token(self) -> str:
        while not self._pending:
            line = self._stdin.readline()
            if not line:
                raise EOFError("end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_int(self) -> int:
        """Read the next token as an integer; raise ValueError if it is not one."""
        token = self._next_token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None

    def read_float(self) -> float:
        """Read the next token as a number; raise ValueError if it is not one."""
        token = self._next_token()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"not a number: {token!r}") from None

    def pause(self) -> None:
        """Drop the rest of the current input line and wait for Enter."""
        self.write("\nPressione Enter para continuar...")
        self._pending.clear()
        self._stdin.readline()

    def clear(self) -> None:
        """Clear the screen."""
        self._clear_screen()

    def show_menu(self) -> None:
        """Print the main menu."""
        self.write("\n----- Sistema de Vendas -----\n", Color.GREEN)
        self.write("1. Registrar Venda\n", Color.RESET)
        self.write("2. Relatorio Diario\n", Color.RESET)
        self.write("3. Relatorio Mensal\n", Color.RESET)
        self.write("4. Sair\n", Color.RED)
        self.write("-----------------------------\n", Color.GREEN)
        self.write("Escolha uma opcao: ", Color.WHITE)

    def show_sale_menu(self) -> None:
        """Print the sale type menu."""
        self.write("\n---- Registrar Venda ----\n", Color.GREEN)
        self.write("Selecione o tipo de venda:\n", Color.YELLOW)
        self.write("1. Refeicao a Quilo\n", Color.RESET)
        self.write("2. Quentinha\n", Color.RESET)
        self.write("3. Bebida\n", Color.RESET)
        self.write("4. Voltar\n", Color.RED)
        self.write("-------------------------\n", Color.GREEN)
        self.write("Opcao: ", Color.WHITE)