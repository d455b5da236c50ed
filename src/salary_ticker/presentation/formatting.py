CURRENCY_SYMBOL = "¥"


def fmt_money(value, decimals: int = 2):
    """ Money formatter.
    - None -> 'N/A'
    - Int / float -> currency symbol, comma separated, fixed decimals
    """
    if value is None:
        return "N/A"
    try:
        return f"{CURRENCY_SYMBOL}{float(value):,.{decimals}f}"
    except (ValueError, TypeError):
        return str(value)


def fmt_percent(value):
    """ Percent formatter for values already on a 0-100 scale.
    - None -> 'N/A'
    """
    if value is None:
        return "N/A"
    try:
        return f"{float(value):.1f}%"
    except (ValueError, TypeError):
        return str(value)


def fmt_duration(seconds):
    """ Elapsed time as 'Xh Ym Zs'. """
    seconds = int(max(0, seconds or 0))
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    return f"{h}h {m}m {s}s"


def progress_bar(percent, width: int = 30):
    percent = min(100.0, max(0.0, float(percent or 0)))
    filled = int(round(width * percent / 100))
    return "[" + "#" * filled + "-" * (width - filled) + "]"
