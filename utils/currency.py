"""Currency display helpers."""

from __future__ import annotations

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CAD": "C$",
    "AUD": "A$",
    "CHF": "CHF",
    "CNY": "¥",
    "INR": "₹",
    "BRL": "R$",
    "MXN": "MX$",
    "KRW": "₩",
    "SGD": "S$",
    "HKD": "HK$",
    "NZD": "NZ$",
    "SEK": "kr",
    "NOK": "kr",
    "DKK": "kr",
    "PLN": "zł",
    "CZK": "Kč",
    "HUF": "Ft",
    "TRY": "₺",
    "ZAR": "R",
    "THB": "฿",
    "MYR": "RM",
    "IDR": "Rp",
    "PHP": "₱",
    "VND": "₫",
    "NGN": "₦",
    "EGP": "E£",
    "KES": "KSh",
    "UAH": "₴",
    "RON": "lei",
    "BGN": "лв",
}


def get_currency_symbol(currency: str) -> str:
    """Symbol for an ISO currency code; the code itself when unknown."""
    return CURRENCY_SYMBOLS.get(currency.upper(), currency)


def format_amount(amount: float) -> str:
    """Two-decimal amount with thousands separators, e.g. '1,234.50'."""
    return f"{float(amount):,.2f}"


def format_currency(amount: float, currency: str) -> str:
    """Amount prefixed with its currency symbol, e.g. '$1,234.50'."""
    return f"{get_currency_symbol(currency)}{format_amount(amount)}"
