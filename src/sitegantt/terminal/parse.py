# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from sitegantt.time import DateParseError, parse_calendar_date


def parse_date(
    date_param: Optional[str | int], today: pendulum.Date
) -> Optional[pendulum.Date]:
    """
    Parse a command line date relative to the site's `today`.

    Accepts YYYY-MM-DD, a signed day offset ("1", "-7"), and the words
    today/t, yesterday/y and tomorrow/o.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{1,2}-\d{1,2}", date):
        try:
            return parse_calendar_date(date, "period")
        except DateParseError as e:
            raise typer.BadParameter(str(e)) from e

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return today.add(days=int(date))

    if date == "today" or date == "t":
        return today
    if date == "yesterday" or date == "y":
        return today.subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today.add(days=1)
    raise typer.BadParameter(f"Incorrect date format: {date!r}")
