from datetime import datetime

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

def format_currency(amount: float) -> str:
    """1234.5 -> "$1,234.50" """
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"

def ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"

def format_date(value: datetime) -> str:
    """datetime(2026, 10, 1) -> "October 1st, 2026" """
    return f"{value.strftime('%B')} {ordinal(value.day)}, {value.year}"
