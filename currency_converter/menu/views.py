"""
Menu display and user interaction components for the Currency Converter.
"""
import sys
import math
from typing import List, Dict, Any, Optional, Iterable, Tuple, TextIO

from colorama import Fore, Style


def format_amount(value: float) -> str:
    """Grouped thousands, exactly two decimals (e.g. 1,234.56)."""
    return f"{value:,.2f}"


def format_exchange_rate(value: float) -> str:
    return f"{value:.6f}"


def format_table_row(code: str, name: str, rate: float) -> str:
    return f"{code:<4}\t{name:<20}\t{rate:<10.4f}"


class MenuView:
    """Handles all menu display and user interaction."""

    MESSAGE_COLORS = {
        "error": Fore.RED,
        "success": Fore.GREEN,
        "warning": Fore.YELLOW,
        "info": Fore.CYAN,
    }

    def __init__(self, stream: Optional[TextIO] = None, use_color: bool = True):
        """Read from `stream` line by line; None means interactive stdin via input()."""
        self.stream = stream
        self.use_color = use_color
        self.closed = False

    def colorize(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return color + text + Style.RESET_ALL

    def print_header(self, text: str) -> None:
        """Print a title followed by a dashed underline."""
        print("\n" + self.colorize(text, Fore.WHITE + Style.BRIGHT))
        print("-" * len(text))

    def display_menu(self, title: str, options: List[Dict[str, Any]]) -> None:
        print("\n" + self.colorize(f"{title}:", Fore.WHITE + Style.BRIGHT))
        for i, option in enumerate(options, 1):
            print(f"{i}. {option['text']}")

    def show_message(self, message: str, message_type: str = "info") -> None:
        """Display a message to the user. Green for success, red for errors, yellow for warnings, cyan for info."""
        color = self.MESSAGE_COLORS.get(message_type, Fore.CYAN)
        print(self.colorize(message, color))

    def read_line(self, prompt: str) -> str:
        """Read one stripped line. Raises EOFError when input is exhausted."""
        if self.stream is None:
            return input(self.colorize(prompt, Fore.YELLOW)).strip()
        print(self.colorize(prompt, Fore.YELLOW), end="", flush=True)
        line = self.stream.readline()
        if not line:
            raise EOFError("End of input")
        return line.strip()

    def read_int(self, prompt: str, minimum: int, maximum: int) -> int:
        while True:
            raw = self.read_line(prompt)
            try:
                value = int(raw)
            except ValueError:
                self.show_message("Invalid input. Please enter an integer.", "error")
                continue
            if value < minimum or value > maximum:
                self.show_message(f"Please enter a number between {minimum} and {maximum}", "error")
                continue
            return value

    def read_non_negative_float(self, prompt: str) -> float:
        while True:
            raw = self.read_line(prompt)
            try:
                value = float(raw)
            except ValueError:
                value = math.nan
            if not math.isfinite(value):
                self.show_message("Invalid input. Please enter a number.", "error")
                continue
            if value < 0:
                self.show_message("Please enter a positive number", "error")
                continue
            return value

    def read_currency(self, prompt: str, codes: Iterable[str]) -> str:
        valid_codes = list(codes)
        while True:
            code = self.read_line(prompt).upper()
            if code in valid_codes:
                return code
            self.show_message(
                "Invalid currency code. Supported codes are: " + ", ".join(valid_codes),
                "error",
            )

    def show_conversion(self, amount: float, from_currency: str, converted: float,
                        to_currency: str, exchange_rate: float) -> None:
        print("\n" + self.colorize("Conversion Result:", Fore.WHITE + Style.BRIGHT))
        self.show_message(
            f"{format_amount(amount)} {from_currency} = {format_amount(converted)} {to_currency}",
            "success",
        )
        print(f"Exchange Rate: 1 {from_currency} = {format_exchange_rate(exchange_rate)} {to_currency}")

    def show_rate_table(self, entries: List[Tuple[str, str, float]]) -> None:
        self.print_header("Supported Currencies:")
        print("Code\tCurrency Name\t\tRate per USD")
        print("----\t-------------\t\t-----------")
        for code, name, rate in entries:
            print(format_table_row(code, name, rate))

    def close(self) -> None:
        """Release the input stream. sys.stdin is left open for the interpreter."""
        if self.stream is not None and self.stream is not sys.stdin:
            self.stream.close()
        self.closed = True
