"""Time span formatting - render millisecond durations like '3 min 12 sec'."""

ONE_SECOND_MS = 1000
ONE_MINUTE_MS = 60 * ONE_SECOND_MS
ONE_HOUR_MS = 60 * ONE_MINUTE_MS
ONE_DAY_MS = 24 * ONE_HOUR_MS
ONE_MONTH_MS = 30 * ONE_DAY_MS
ONE_YEAR_MS = 365 * ONE_DAY_MS


def _days(count: int) -> str:
    return f"{count} day" if count == 1 else f"{count} days"


def _decimal(value: float) -> str:
    """Format with at most two decimals and no trailing zeros."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _two_units(big: int, big_label: str, small_label: str) -> str:
    # Second unit only adds information while the first is small
    if big < 10:
        return f"{big_label} {small_label}"
    return big_label


def format_timespan(duration_ms: int) -> str:
    """
    Format a duration as a human-readable time span.

    Shows the largest non-zero unit, followed by the next smaller unit when
    the largest is below 10: "3 min 12 sec", "2 hr 0 min", "14 hr".
    Under a minute: "12 sec", "1.1 sec", "0.12 sec", "40 ms".

    Args:
        duration_ms: Duration in milliseconds (negative values render as 0 ms)

    Returns:
        Formatted time span
    """
    duration = max(int(duration_ms), 0)

    years, duration = divmod(duration, ONE_YEAR_MS)
    months, duration = divmod(duration, ONE_MONTH_MS)
    days, duration = divmod(duration, ONE_DAY_MS)
    hours, duration = divmod(duration, ONE_HOUR_MS)
    minutes, duration = divmod(duration, ONE_MINUTE_MS)
    seconds, millis = divmod(duration, ONE_SECOND_MS)

    if years > 0:
        return _two_units(years, f"{years} yr", f"{months} mo")
    elif months > 0:
        return _two_units(months, f"{months} mo", _days(days))
    elif days > 0:
        return _two_units(days, _days(days), f"{hours} hr")
    elif hours > 0:
        return _two_units(hours, f"{hours} hr", f"{minutes} min")
    elif minutes > 0:
        return _two_units(minutes, f"{minutes} min", f"{seconds} sec")
    elif seconds >= 10:
        return f"{seconds} sec"
    elif seconds >= 1:
        return f"{_decimal(seconds + (millis // 100) / 10)} sec"
    elif millis >= 100:
        return f"{_decimal((millis // 10) / 100)} sec"
    return f"{millis} ms"
