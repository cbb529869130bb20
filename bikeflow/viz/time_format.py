# bikeflow/viz/time_format.py
from bikeflow.traffic.time_filter import NO_FILTER

ANY_TIME_LABEL = "(any time)"


def format_time(minutes: int) -> str:
    """
    Minutes since midnight -> US short time, e.g. 0 -> "12:00 AM", 785 -> "1:05 PM".
    """
    minutes = int(minutes)
    h, m = divmod(minutes, 60)
    h %= 24
    suffix = "AM" if h < 12 else "PM"
    h12 = h % 12 or 12
    return f"{h12}:{m:02d} {suffix}"


def time_label(t: int) -> str:
    if t == NO_FILTER:
        return ANY_TIME_LABEL
    return format_time(t)
