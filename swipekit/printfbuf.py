"""A growing text buffer written with printf-style calls, with HTML helpers."""

from __future__ import annotations

import enum
from typing import Any

from swipekit.nullable import NullableBool

_ERROR_SPAN = "<span style='color:red; font-weight:bold'>"
_OK_SPAN = "<span style='color:green'>"


class PrintfBuffer:
    """Accumulates text from ``%``-style format calls.

    With ``allowing_html`` the structural helpers emit HTML tags; otherwise
    they emit plain text.
    """

    def __init__(self, allowing_html: bool = True) -> None:
        self._parts: list[str] = []
        self.allowing_html = allowing_html
        self.in_table = False
        self.in_list = False
        self.table_row_number = 0

    def __str__(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        return sum(map(len, self._parts))

    @property
    def text(self) -> str:
        return str(self)

    def printf(self, fmt: str, *args: Any) -> None:
        self._parts.append(fmt % args)

    def _newline_or_break(self) -> None:
        self.printf("<br/>" if self.allowing_html else "\n")

    def _begin_list_item(self) -> None:
        if not self.in_list and self.allowing_html:
            self.printf("<ul>")
        self.in_list = True
        self.printf("<li>" if self.allowing_html else " - ")

    def end_list_if_in(self) -> None:
        if self.in_list and self.allowing_html:
            self.printf("</ul>")
        self.in_list = False

    def add_heading(self, fmt: str, *args: Any) -> None:
        self.end_list_if_in()
        if self.allowing_html:
            self.printf("<h3>")
            self.printf(fmt, *args)
            self.printf("</h3>")
        else:
            self.printf("\n")
            self.printf(fmt, *args)
            self.printf("\n")

    def add_list_item(self, fmt: str, *args: Any) -> None:
        self._begin_list_item()
        self.printf(fmt, *args)
        if not self.allowing_html:
            self.printf("\n")

    def add_list_item_with_error_highlighting(
        self, is_error: bool, fmt: str, *args: Any
    ) -> None:
        self._begin_list_item()
        self.print_with_error_highlighting(is_error, fmt, *args)
        if not self.allowing_html:
            self.printf("\n")

    def add_line(self, fmt: str, *args: Any) -> None:
        self.end_list_if_in()
        self.printf(fmt, *args)
        self._newline_or_break()

    def add_line_with_error_highlighting(
        self, is_error: bool, fmt: str, *args: Any
    ) -> None:
        self.end_list_if_in()
        self.print_with_error_highlighting(is_error, fmt, *args)
        self._newline_or_break()

    def add_opening_error_highlighting(self, is_error: bool) -> None:
        if self.allowing_html:
            self.printf(_ERROR_SPAN if is_error else _OK_SPAN)

    def add_closing_error_highlighting(self, is_error: bool) -> None:
        if self.allowing_html:
            self.printf("</span>")

    def print_with_error_highlighting(self, is_error: bool, fmt: str, *args: Any) -> None:
        """Write text red and bold for errors, green otherwise (HTML only)."""
        self.add_opening_error_highlighting(is_error)
        self.printf(fmt, *args)
        self.add_closing_error_highlighting(is_error)

    def reset(self) -> None:
        self._parts.clear()
        self.in_list = False


class TableAlignment(enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class ScopedTable:
    """Context manager that opens a table on entry and closes it on exit."""

    def __init__(self, buf: PrintfBuffer) -> None:
        self.buf = buf

    def __enter__(self) -> "ScopedTable":
        buf = self.buf
        buf.in_table = True
        buf.table_row_number = 0
        buf.end_list_if_in()
        buf.printf("<table>\n" if buf.allowing_html else "\n")
        return self

    def __exit__(self, *exc: object) -> None:
        buf = self.buf
        buf.in_table = False
        buf.printf("</table>\n" if buf.allowing_html else "\n")


class ScopedTableRow:
    """Context manager for one table row.

    In HTML mode the first row of a table writes a heading row, and its cell
    contents are held back and written as a second row when it closes.
    """

    def __init__(self, buf: PrintfBuffer) -> None:
        self.buf = buf
        self._cached_row = PrintfBuffer(allowing_html=buf.allowing_html)
        self._is_error = NullableBool()
        self._cell_n = 0

    def set_is_error(self, value: bool) -> None:
        self._is_error.set(value)

    def __enter__(self) -> "ScopedTableRow":
        if self.buf.allowing_html:
            self.buf.printf("<tr>")
        return self

    def __exit__(self, *exc: object) -> None:
        buf = self.buf
        buf.printf("</tr>\n" if buf.allowing_html else "\n")
        if buf.allowing_html and buf.table_row_number == 0:
            buf.printf("<tr>%s</tr>\n", str(self._cached_row))
        buf.table_row_number += 1

    def add_cell(
        self, alignment: TableAlignment, heading: str | None, fmt: str, *args: Any
    ) -> None:
        buf = self.buf
        target = buf
        if buf.allowing_html:
            if buf.table_row_number == 0:
                if self._cell_n:
                    buf.printf("<td>&nbsp;</td>")
                buf.printf("<td align='center'><b>%s</b></td>", heading or "")
                target = self._cached_row
        elif heading:
            buf.printf("%s:", heading)

        if buf.allowing_html:
            previous = self._cell_n
            self._cell_n += 1
            if previous:
                target.printf("<td>&nbsp;</td>")
            target.printf("<td align='%s'>", alignment.value)

        error = self._is_error.peek()
        if error is not None:
            target.add_opening_error_highlighting(error)
        target.printf(fmt, *args)
        if error is not None:
            target.add_closing_error_highlighting(error)

        if target.allowing_html:
            target.printf("</td>")
        else:
            previous = self._cell_n
            self._cell_n += 1
            if previous:
                buf.printf(" ")