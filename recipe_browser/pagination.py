"""
Pagination Presenter.

Derives what the page controls show from the service's pagination metadata:
the sequence of page buttons (with ellipsis markers), which buttons are
enabled, and the "showing X - Y of Z" range. Independent of the filter store;
callers wire the resulting page number to FilterStateStore.set_page().

Examples of visible_pages():
- total 5, current 3:  [1, 2, 3, 4, 5]
- total 10, current 2: [1, 2, 3, 4, "…", 10]
- total 10, current 5: [1, "…", 4, 5, 6, "…", 10]
- total 10, current 9: [1, "…", 7, 8, 9, 10]
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from recipe_browser.models import PaginationModel

ELLIPSIS = "…"

# At or below this many pages every page gets a button
MAX_PAGES_WITHOUT_ELLIPSIS = 7

KEY_PREVIOUS = "ArrowLeft"
KEY_NEXT = "ArrowRight"

PageItem = Union[int, str]


def visible_pages(current: int, total: int) -> List[PageItem]:
    """
    Compute the page buttons to display, with ELLIPSIS for skipped ranges.

    Args:
        current: Current 1-indexed page
        total: Total number of pages (0 yields an empty list)
    """
    if total <= 0:
        return []

    if total <= MAX_PAGES_WITHOUT_ELLIPSIS:
        return list(range(1, total + 1))

    if current <= 3:
        return [1, 2, 3, 4, ELLIPSIS, total]

    if current >= total - 2:
        return [1, ELLIPSIS, total - 3, total - 2, total - 1, total]

    return [1, ELLIPSIS, current - 1, current, current + 1, ELLIPSIS, total]


def can_go_previous(current: int, total: int) -> bool:
    # With no pages at all both directions are disabled
    return current > 1 and total > 0


def can_go_next(current: int, total: int) -> bool:
    return current < total


def page_for_key(key: str, current: int, total: int) -> Optional[int]:
    """
    Map a keydown to a target page.

    ArrowLeft acts like "previous", ArrowRight like "next". Returns None when
    the key is ignored or the matching button is disabled.
    """
    if key == KEY_PREVIOUS and can_go_previous(current, total):
        return current - 1
    if key == KEY_NEXT and can_go_next(current, total):
        return current + 1
    return None


@dataclass
class PageButton:
    """One entry of the page-number row; page is None for an ellipsis."""
    label: str
    page: Optional[int] = None
    is_current: bool = False

    @property
    def is_ellipsis(self) -> bool:
        return self.page is None

    @property
    def disabled(self) -> bool:
        return self.is_current or self.is_ellipsis

    @property
    def aria_current(self) -> Optional[str]:
        return "page" if self.is_current else None


@dataclass
class PaginationControls:
    """Everything a renderer needs to draw the pagination bar."""
    page: int
    total_pages: int
    start_item: int
    end_item: int
    total: int
    previous_enabled: bool
    next_enabled: bool
    buttons: List[PageButton] = field(default_factory=list)

    @property
    def summary(self) -> str:
        return f"Showing {self.start_item} - {self.end_item} of {self.total} recipes"


def result_range(page: int, limit: int, total: int) -> tuple:
    """First and last item numbers shown on a page; (0, 0) when there are no results."""
    if total <= 0:
        return 0, 0
    start = (page - 1) * limit + 1
    end = min(page * limit, total)
    return start, end


def build_pagination_controls(pagination: PaginationModel) -> PaginationControls:
    """Derive the full pagination bar state from the service metadata."""
    page = pagination.page
    total_pages = pagination.total_pages
    start_item, end_item = result_range(page, pagination.limit, pagination.total)

    buttons = []
    for item in visible_pages(page, total_pages):
        if item == ELLIPSIS:
            buttons.append(PageButton(label=ELLIPSIS))
        else:
            buttons.append(PageButton(label=str(item), page=item, is_current=item == page))

    return PaginationControls(
        page=page,
        total_pages=total_pages,
        start_item=start_item,
        end_item=end_item,
        total=pagination.total,
        previous_enabled=can_go_previous(page, total_pages),
        next_enabled=can_go_next(page, total_pages),
        buttons=buttons,
    )
