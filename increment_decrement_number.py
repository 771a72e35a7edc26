from typing import List, Union

import sublime_plugin
from sublime import Edit, Region, View, set_timeout_async, status_message

from .fly_numbers import (
    NumberSettings,
    PaddingPolicy,
    cursor_after,
    shift_at_point,
    shift_block,
)


class ViewBuffer:
    def __init__(self, view: View, edit: Edit) -> None:
        self.view = view
        self.edit = edit

    def size(self) -> int:
        return self.view.size()

    def substr(self, a: int, b: int) -> str:
        return self.view.substr(Region(a, b))

    def replace(self, a: int, b: int, text: str) -> None:
        self.view.replace(self.edit, Region(a, b), text)


class NumberCommand(sublime_plugin.TextCommand):
    def op(self, amount: int) -> int:
        return amount

    def save(self):
        self.view.run_command("save")

    def amount(self, amount: int) -> int:
        v = self.view
        if (multiplier := v.settings().get("multiplier")) is not None:
            v.settings().erase("multiplier")
            v.settings().erase("set_number")
            return amount * multiplier
        return amount

    def run(
        self,
        edit: Edit,
        amount: int = 1,
        incremental: bool = False,
        padded: Union[None, bool, str] = None,
        lines: bool = False,
    ) -> None:
        buf = self.view
        if buf.is_read_only():
            status_message("Buffer is read only")
            return

        try:
            settings = NumberSettings.from_settings(buf.settings())
            policy = PaddingPolicy.from_argument(padded)
        except ValueError as e:
            status_message(str(e))
            return

        delta = self.op(self.amount(amount))
        buffer = ViewBuffer(buf, edit)
        selection = buf.sel()

        if rows := [r for r in selection if not r.empty()]:
            if lines:
                rows = [buf.line(r) for r in rows]
            shifted = shift_block(
                buffer,
                delta,
                [(r.begin(), r.end()) for r in rows],
                settings.rules,
                policy,
                settings.pad_default,
                incremental,
            )
            if not shifted:
                status_message("No number in selection")
                return
            first = min(r.begin() for r in rows)
            selection.clear()
            selection.add(first)
        else:
            cursors: List[int] = []
            found = False
            for region in reversed(selection):
                line = buf.line(region.b)
                result = shift_at_point(
                    buffer,
                    delta,
                    region.b,
                    (line.a, line.b),
                    settings.rules,
                    policy,
                    settings.pad_default,
                )
                if result is None:
                    cursors.append(region.b)
                    continue
                found = True
                # cursors further down moved with the rewrite
                cursors = [pt + result.growth for pt in cursors]
                cursors.append(cursor_after(result))

            if not found:
                status_message("No number at point or until end of line")
                return
            selection.clear()
            selection.add_all([Region(pt) for pt in cursors])

        if settings.save_after_change:
            set_timeout_async(self.save, 0)


class IncrementCommand(NumberCommand):
    def op(self, amount: int) -> int:
        return amount


class DecrementCommand(NumberCommand):
    def op(self, amount: int) -> int:
        return -amount
