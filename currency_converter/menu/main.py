"""
Main menu and application entry point for the Currency Converter.
"""
import sys
import logging
from enum import Enum
from typing import Optional

from currency_converter.menu.models import RateTable
from currency_converter.menu.views import MenuView
from currency_converter.menu.handlers import MenuHandlers
from currency_converter.menu.exceptions import ConverterError, ConfigurationError

logger = logging.getLogger(__name__)


class SessionState(Enum):
    AWAITING_CHOICE = "awaiting_choice"
    TERMINATED = "terminated"


class ConverterSession:
    """Main menu for the Currency Converter application."""

    def __init__(self, rates: Optional[RateTable] = None, view: Optional[MenuView] = None):
        """Initialize the session with its own rate table and view."""
        self.rates = rates if rates is not None else RateTable()
        self.view = view if view is not None else MenuView()
        self.handlers = MenuHandlers(self.rates, self.view)
        self.state = SessionState.AWAITING_CHOICE

        self.main_menu = [
            {"text": "Convert Currency", "handler": self.handlers.handle_convert},
            {"text": "View All Supported Currencies", "handler": self.handlers.handle_list_currencies},
            {"text": "Update Exchange Rate", "handler": self.handlers.handle_update_rate},
            {"text": "Exit", "handler": self._exit_app},
        ]

    def _exit_app(self) -> None:
        self.view.show_message("Exiting currency converter. Goodbye!", "info")
        self.terminate()

    def terminate(self) -> None:
        """Move to the terminal state and release the input stream."""
        if self.state is SessionState.TERMINATED:
            return
        self.view.close()
        self.state = SessionState.TERMINATED
        logger.info("Session terminated")

    def step(self) -> None:
        """Show the menu once, read a choice and run its handler."""
        self.view.display_menu("Main Menu", self.main_menu)
        choice = self.view.read_int(f"Enter your choice (1-{len(self.main_menu)}): ", 1, len(self.main_menu))
        self.main_menu[choice - 1]["handler"]()

    def run(self) -> None:
        """Run the main menu loop until the session terminates."""
        if self.state is SessionState.AWAITING_CHOICE:
            print("Currency Converter (Manual Rates)")
            print("---------------------------------")

        while self.state is not SessionState.TERMINATED:
            try:
                self.step()
            except EOFError:
                logger.info("Input exhausted, leaving session")
                self.terminate()
            except KeyboardInterrupt:
                self.view.show_message("\nOperation cancelled by user.", "warning")
            except ConverterError as e:
                self.view.show_message(f"Error: {e}", "error")
            except Exception as e:
                logger.exception("Unexpected error in menu:")
                self.view.show_message(f"An unexpected error occurred: {e}", "error")


def main():
    """Entry point for the Currency Converter CLI."""
    from colorama import just_fix_windows_console
    from currency_converter.config import Config, configure_logging

    try:
        Config.validate()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging()
    just_fix_windows_console()

    session = ConverterSession(RateTable(), MenuView(use_color=Config.USE_COLOR))
    session.run()


if __name__ == "__main__":
    main()
