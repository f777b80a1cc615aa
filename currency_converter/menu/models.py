import math
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from currency_converter.menu.exceptions import UnknownCurrencyError

logger = logging.getLogger(__name__)

# Units of each currency per 1 USD
DEFAULT_RATES: Dict[str, float] = {
    "USD": 1.00,
    "EUR": 0.93,
    "GBP": 0.79,
    "JPY": 151.50,
    "INR": 83.30,
    "AUD": 1.52,
    "CAD": 1.37,
    "CNY": 7.24,
    "CHF": 0.91,
    "MXN": 16.75,
}

CURRENCY_NAMES: Dict[str, str] = {
    "USD": "US Dollar",
    "EUR": "Euro",
    "GBP": "British Pound",
    "JPY": "Japanese Yen",
    "INR": "Indian Rupee",
    "AUD": "Australian Dollar",
    "CAD": "Canadian Dollar",
    "CNY": "Chinese Yuan",
    "CHF": "Swiss Franc",
    "MXN": "Mexican Peso",
}

UNKNOWN_CURRENCY_NAME = "Unknown Currency"


def get_currency_name(code: str) -> str:
    return CURRENCY_NAMES.get(code, UNKNOWN_CURRENCY_NAME)


@dataclass(frozen=True)
class RateUpdateResult:
    """Outcome of RateTable.update_rate. `rate` is the rate in effect afterwards."""
    success: bool
    code: str
    rate: Optional[float] = None
    error: Optional[str] = None


class RateTable:
    """In-memory exchange rates, expressed per 1 USD."""

    def __init__(self, rates: Optional[Dict[str, float]] = None):
        rates = DEFAULT_RATES if rates is None else rates
        for code, rate in rates.items():
            if not rate > 0:
                raise ValueError(f"Exchange rate for {code} must be positive, got {rate}")
        self._rates: Dict[str, float] = dict(rates)

    def __contains__(self, code: str) -> bool:
        return code in self._rates

    def __len__(self) -> int:
        return len(self._rates)

    def codes(self) -> List[str]:
        """Currency codes in table order."""
        return list(self._rates)

    def get_rate(self, code: str) -> float:
        try:
            return self._rates[code]
        except KeyError:
            raise UnknownCurrencyError(f"Unsupported currency code: {code}") from None

    def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
        # Pivot through USD: amount -> USD -> target
        amount_in_usd = amount / self.get_rate(from_currency)
        result = amount_in_usd * self.get_rate(to_currency)
        logger.debug(f"Converted {amount} {from_currency} -> {result} {to_currency}")
        return result

    def exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """Units of `to_currency` per 1 unit of `from_currency`."""
        return self.get_rate(to_currency) / self.get_rate(from_currency)

    def sorted_entries(self) -> List[Tuple[str, str, float]]:
        """(code, display name, rate) for every currency, sorted by code."""
        return [
            (code, get_currency_name(code), rate)
            for code, rate in sorted(self._rates.items())
        ]

    def update_rate(self, code: str, new_rate: float) -> RateUpdateResult:
        if code not in self._rates:
            logger.warning(f"Rejected rate update for unknown currency {code}")
            return RateUpdateResult(False, code, error=f"Unsupported currency code: {code}")
        if not (math.isfinite(new_rate) and new_rate > 0):
            logger.warning(f"Rejected rate update for {code}: {new_rate}")
            return RateUpdateResult(False, code, rate=self._rates[code],
                                    error="Exchange rate must be positive")
        old_rate = self._rates[code]
        self._rates[code] = new_rate
        logger.info(f"Exchange rate for {code} changed from {old_rate} to {new_rate}")
        return RateUpdateResult(True, code, rate=new_rate)
