import math
import logging

from currency_converter.menu.models import RateTable
from currency_converter.menu.views import MenuView

logger = logging.getLogger(__name__)

class MenuHandlers:
    def __init__(self, rates: RateTable, view: MenuView):
        self.rates = rates
        self.view = view

    def handle_convert(self) -> None:
        self.view.print_header("Currency Conversion")

        amount = self.view.read_non_negative_float("Enter amount to convert: ")
        from_currency = self.view.read_currency("Enter source currency code: ", self.rates.codes())
        to_currency = self.view.read_currency("Enter target currency code: ", self.rates.codes())

        converted = self.rates.convert(amount, from_currency, to_currency)
        exchange_rate = self.rates.exchange_rate(from_currency, to_currency)
        if not math.isfinite(converted):
            logger.warning(f"Conversion of {amount} {from_currency} to {to_currency} overflowed")
            self.view.show_message("Error: Converted amount is too large to display.", "error")
            return

        self.view.show_conversion(amount, from_currency, converted, to_currency, exchange_rate)

    def handle_list_currencies(self) -> None:
        self.view.show_rate_table(self.rates.sorted_entries())

    def handle_update_rate(self) -> None:
        self.view.print_header("Update Exchange Rate")

        code = self.view.read_currency("Enter currency code to update: ", self.rates.codes())
        new_rate = self.view.read_non_negative_float("Enter new exchange rate (per USD): ")

        result = self.rates.update_rate(code, new_rate)
        if not result.success:
            self.view.show_message(f"Error: {result.error}", "error")
            return
        self.view.show_message(f"Exchange rate for {result.code} updated successfully.", "success")
