#pickers.py:
# Console stand-ins for the date and time picker dialogs.
# Each picker turns what the user typed into a formatted string, or None when the
# picker is dismissed because the input made no sense.

import logging
from datetime import datetime

import parsedatetime

from models import DATE_FORMAT, TIME_FORMAT

cal = parsedatetime.Calendar()


def _format_date(value):
    # strftime('%Y') drops the zero padding for years below 1000 on some platforms
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _format_time(value):
    return value.strftime(TIME_FORMAT)


def _parse(text, fmt, render, now, accept):
    text = text.strip()
    if now is None:
        now = datetime.now()
    if not text:
        return render(now)
    try:
        return render(datetime.strptime(text, fmt))
    except ValueError:
        pass
    time_struct, parse_status = cal.parse(text, now.timetuple())
    if not accept(parse_status):
        logging.warning("Failed to parse picker input: '%s'", text)
        return None
    return render(datetime(*time_struct[:6]))


def pick_date(text, now=None):
    """Return the date as YYYY-MM-DD. Blank input picks today."""
    return _parse(text, DATE_FORMAT, _format_date, now, lambda status: status != 0)


def pick_time(text, now=None):
    """Return the time as 24-hour HH:MM. Blank input picks the current time.

    Input that only names a day ("tomorrow") carries no time and is rejected.
    """
    return _parse(text, TIME_FORMAT, _format_time, now, lambda status: status & 2)
