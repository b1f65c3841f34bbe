"""Common page shell: navbar, content slot, floating chat widget, footer."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date

from nicegui import ui

from tinychat.ui.chat_widget import ACCENT, chat_widget
from tinychat.ui.session import ChatSession

NAV_LINKS: list[tuple[str, str]] = [
    ("Home", "/"),
    ("API docs", "/docs"),
]


@dataclass
class PageShell:
    """Handles to the pieces a page fills in or inspects.

    Attributes:
        content: Column that holds the page's own elements.
        session: Chat state of the floating widget, set once the
                 shell has finished rendering.
    """

    content: ui.column
    session: ChatSession | None = None


def render_navbar(title: str) -> None:
    with ui.header().classes("items-center justify-between px-6 py-3").style(
        f"background: {ACCENT}"
    ):
        with ui.row().classes("items-center gap-2"):
            ui.icon("smart_toy").classes("text-white text-2xl")
            ui.label(title).classes("text-lg font-semibold text-white")
        with ui.row().classes("gap-4"):
            for label, target in NAV_LINKS:
                ui.link(label, target).classes("text-white no-underline hover:underline")


def render_footer(title: str) -> None:
    with ui.footer().classes("justify-center py-2 bg-slate-800"):
        ui.label(f"© {date.today().year} {title}").classes("text-xs text-slate-300")


@contextmanager
def common_layout(
    title: str = "TinyChat",
    session: ChatSession | None = None,
) -> Iterator[PageShell]:
    """Wrap a page's content in the shared shell.

    Usage::

        with common_layout() as shell:
            ui.label("Hello")

    Args:
        title: Brand text shown in the navbar and footer.
        session: Optional chat state for the widget. Each page load gets
                 a fresh one by default.

    Yields:
        PageShell whose content column is the active container.
    """
    render_navbar(title)
    with ui.column().classes(
        "w-full mx-auto px-5 md:px-0 max-w-5xl"
    ).style("min-height: calc(100vh - 80px)") as content:
        shell = PageShell(content=content)
        yield shell
    shell.session = chat_widget(session)
    render_footer(title)
