from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal


def parse_datetime(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_currency(amount: float) -> str:
    # cost is in cents
    dollars = (Decimal(str(amount)) / 100).quantize(Decimal("0.01"), ROUND_HALF_UP)
    text = f"{abs(dollars):,.2f}"
    if text.endswith(".00"):
        text = text[:-3]
    elif text.endswith("0"):
        text = text[:-1]
    sign = "-" if dollars < 0 else ""
    return f"{sign}${text}"


def format_duration(seconds: float) -> str:
    if seconds < 60:
        return f"{seconds:.1f}s"
    if seconds < 3600:
        minutes = int(seconds // 60)
        return f"{minutes}m {seconds % 60:.1f}s"
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    return f"{hours}h {minutes}m"


def format_datetime(value: str) -> str:
    try:
        date = parse_datetime(value)
    except ValueError:
        return "Invalid date"
    return f"{date:%b} {date.day}, {date:%Y %H:%M:%S}"


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def get_status_color(status: str) -> str:
    status = status.lower()
    if status == "completed":
        return "success"
    if status == "running":
        return "primary"
    if status == "failed":
        return "destructive"
    if status in ("pending", "queued"):
        return "warning"
    return "secondary"
