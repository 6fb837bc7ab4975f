from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import NamedTuple


class Command(Enum):
    QUIT = auto()
    HOME = auto()
    END = auto()
    TOP_OF_PAGE = auto()
    MIDDLE_OF_PAGE = auto()
    BOTTOM_OF_PAGE = auto()
    UP = auto()
    DOWN = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()


@dataclass(frozen=True)
class ViewportState:
    topline: int = 0
    selection: int = 0
    page_size: int = 1
    total_lines: int = 0

    @property
    def last_line(self) -> int:
        return max(0, self.total_lines - 1)


class RenderRow(NamedTuple):
    line_index: int
    label: str
    value: str
    is_selected: bool


def _move_selection(state: ViewportState, command: Command, page_size: int) -> int:
    sel = state.selection
    last = state.last_line
    if command is Command.HOME:
        return 0
    if command is Command.END:
        return last
    if command is Command.TOP_OF_PAGE:
        return state.topline
    if command is Command.MIDDLE_OF_PAGE:
        return state.topline + (page_size - 1) // 2
    if command is Command.BOTTOM_OF_PAGE:
        return state.topline + page_size - 1
    if command is Command.UP:
        return sel - 1 if sel > 0 else sel
    if command is Command.DOWN:
        return sel + 1 if sel < last else sel
    if command is Command.PAGE_UP:
        return sel - page_size if sel - page_size >= 0 else 0
    if command is Command.PAGE_DOWN:
        return sel + page_size if sel + page_size < last else last
    return sel


def transition(state: ViewportState, command: Command, page_size: int) -> ViewportState:
    """Apply one navigation command and re-clamp the scroll position."""
    page_size = max(1, page_size)
    if state.total_lines <= 0:
        return replace(state, topline=0, selection=0, page_size=page_size)
    selection = _move_selection(state, command, page_size)
    selection = max(0, min(selection, state.last_line))

    topline = state.topline
    if topline > selection:
        topline = selection
    if topline + page_size - 1 < selection:
        topline = selection - (page_size - 1)
    # a taller page after a resize must not leave blank rows below the end
    topline = max(0, min(topline, state.total_lines - page_size))

    return ViewportState(
        topline=topline,
        selection=selection,
        page_size=page_size,
        total_lines=state.total_lines,
    )


class ViewportController:
    def __init__(self, total_lines: int, page_size: int = 1):
        self.state = ViewportState(
            page_size=max(1, page_size), total_lines=max(0, total_lines)
        )

    def apply(self, command: Command, page_size: int) -> ViewportState:
        self.state = transition(self.state, command, page_size)
        return self.state

    def resize(self, page_size: int) -> ViewportState:
        # QUIT moves nothing, so this only re-clamps for the new page size
        return self.apply(Command.QUIT, page_size)


def render_rows(record, catalog, state: ViewportState) -> list[RenderRow]:
    rows: list[RenderRow] = []
    end = min(state.total_lines, state.topline + state.page_size)
    for line in range(state.topline, end):
        cap_class, index = record.line_at(line)
        rows.append(
            RenderRow(
                line,
                catalog.name_for(cap_class, index),
                record.value_text(cap_class, index),
                line == state.selection,
            )
        )
    return rows
