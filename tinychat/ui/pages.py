"""NiceGUI pages rendered inside the common shell."""

from nicegui import ui

from tinychat.inference.config import get_inference_config
from tinychat.ui.layout import common_layout


@ui.page("/")
def home_page() -> None:
    """Landing page with the floating chat widget."""
    config = get_inference_config()
    with common_layout():
        with ui.column().classes("w-full py-16 items-center gap-4 text-center"):
            ui.label("Welcome").classes("text-4xl font-bold text-slate-800")
            ui.label(
                "Open the chat bubble in the corner to talk to a model running "
                "on your own machine."
            ).classes("text-slate-500 max-w-xl")
            ui.label(f"Model: {config.model_name} at {config.base_url}").classes(
                "text-xs font-mono text-slate-400"
            )
