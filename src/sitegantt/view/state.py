"""Per-invocation display settings held in context variables."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

DEFAULT_LEFT_COLUMN_WIDTH = 40

_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)
_left_column_width_var: ContextVar[int] = ContextVar(
    "left_column_width", default=DEFAULT_LEFT_COLUMN_WIDTH
)


def set_show_header(value: bool) -> None:
    """Set whether the title header is printed above charts and tables.

    Args:
        value: True to show headers, False to hide them
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_left_column_width(value: int) -> None:
    _left_column_width_var.set(value)


def get_left_column_width() -> int:
    return _left_column_width_var.get()
