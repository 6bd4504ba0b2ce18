from __future__ import annotations

from typing import Any, Iterable


_SYMBOLS = {"INR": "₹", "USD": "$", "EUR": "€"}

_ONES = (
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine", "Ten",
    "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
)
_TENS = ("", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety")


def _indian_group(s: str) -> str:
    if len(s) <= 3:
        return s
    out = s[-3:]
    s = s[:-3]
    while s:
        out = s[-2:] + "," + out
        s = s[:-2]
    return out


def format_amount(value: float, currency: str = "INR") -> str:
    """Digits only: Indian grouping for INR, western grouping otherwise, at most two decimals."""
    n = round(abs(float(value)), 2)
    whole = int(n)
    paise = int(round((n - whole) * 100))
    if paise == 100:
        whole, paise = whole + 1, 0
    digits = _indian_group(str(whole)) if currency == "INR" else f"{whole:,}"
    out = f"{digits}.{paise:02d}" if paise else digits
    return ("-" if value < 0 and (whole or paise) else "") + out


def format_currency(value: Any, currency: str = "INR") -> str:
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return str(value)
    body = format_amount(amount, currency)
    sign = "-" if body.startswith("-") else ""
    body = body.lstrip("-")
    symbol = _SYMBOLS.get(currency)
    if symbol is None:
        return f"{sign}{currency} {body}"
    return f"{sign}{symbol}{body}"


def _amount(item: Any) -> float:
    raw = item.get("amount", 0) if isinstance(item, dict) else getattr(item, "amount", 0)
    try:
        return float(raw or 0)
    except (TypeError, ValueError):
        return 0.0


def sum_line_items(items: Iterable[Any]) -> float:
    return sum(_amount(i) for i in items)


def _below_thousand(n: int) -> str:
    words = []
    if n >= 100:
        words.append(f"{_ONES[n // 100]} Hundred")
        n %= 100
    if n >= 20:
        words.append(_TENS[n // 10] + (f" {_ONES[n % 10]}" if n % 10 else ""))
    elif n:
        words.append(_ONES[n])
    return " ".join(words)


def amount_in_words(value: float) -> str:
    """Whole-rupee amount in words using crore / lakh / thousand, e.g. 'One Lakh Five Thousand'."""
    n = int(round(abs(float(value))))
    if n == 0:
        return "Zero"
    parts = []
    for size, label in ((10_000_000, "Crore"), (100_000, "Lakh"), (1000, "Thousand")):
        if n >= size:
            chunk = n // size
            # crore counts can exceed 99, spell them recursively
            head = amount_in_words(chunk) if chunk >= 1000 else _below_thousand(chunk)
            parts.append(f"{head} {label}")
            n %= size
    if n:
        parts.append(_below_thousand(n))
    words = " ".join(parts)
    return f"Minus {words}" if value < 0 else words
