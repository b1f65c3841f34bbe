"""Floating NiceGUI chat widget backed by the local inference server."""

from nicegui import events, ui

from tinychat.models.schemas import Message
from tinychat.ui.session import ChatSession

ACCENT = "#F42D43"

WIDGET_CSS = f"""
<style>
    .chat-fab {{ background: {ACCENT} !important; }}
    .chat-fab.is-open {{ background: #b91c1c !important; }}

    .chat-panel {{
        width: 420px;
        max-width: calc(100vw - 3rem);
        height: 520px;
        border-radius: 16px;
        box-shadow: 0 25px 50px -12px rgba(0, 0, 0, 0.25);
        overflow: hidden;
    }}

    .chat-header {{ background: {ACCENT}; }}

    .bubble-user {{
        background: {ACCENT};
        color: white;
        border-radius: 16px 16px 4px 16px;
    }}

    .bubble-assistant {{
        background: white;
        border: 1px solid #e2e8f0;
        border-radius: 16px 16px 16px 4px;
    }}

    .typing-dot {{
        width: 10px; height: 10px;
        background: {ACCENT};
        border-radius: 50%;
        animation: chat-bounce 1.2s infinite ease-in-out;
    }}
    .typing-dot:nth-child(1) {{ animation-delay: -0.4s; }}
    .typing-dot:nth-child(2) {{ animation-delay: -0.2s; }}

    @keyframes chat-bounce {{
        0%, 80%, 100% {{ transform: translateY(0); }}
        40% {{ transform: translateY(-6px); }}
    }}

    .chat-send {{ background: {ACCENT} !important; }}
</style>
"""


def is_send_key(args: object) -> bool:
    """Return True for a plain Enter keydown; Shift+Enter does not send."""
    return not (isinstance(args, dict) and args.get("shiftKey"))


def chat_widget(session: ChatSession | None = None) -> ChatSession:
    """Render the floating chat button and panel on the current page.

    Args:
        session: Chat state to render. A fresh one is created if omitted,
                 so every page load starts with an empty history.

    Returns:
        The ChatSession driving the widget.
    """
    ui.add_head_html(WIDGET_CSS)
    session = session or ChatSession()

    panel: ui.card
    scroll: ui.scroll_area
    messages_container: ui.column
    input_field: ui.input
    send_btn: ui.button
    toggle_btn: ui.button

    def render_message(msg: Message) -> None:
        is_user = msg.role == "user"
        align = "justify-end" if is_user else "justify-start"
        bubble = "bubble-user" if is_user else "bubble-assistant"
        with ui.row().classes(f"w-full {align}"):
            ui.label(msg.content).classes(
                f"max-w-[80%] px-4 py-2 text-sm leading-relaxed whitespace-pre-wrap {bubble}"
            )

    def render_typing_indicator() -> None:
        with (
            ui.row().classes("w-full justify-start").mark("chat-typing"),
            ui.row().classes("bubble-assistant px-4 py-3 gap-1.5"),
        ):
            for _ in range(3):
                ui.element("div").classes("typing-dot")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not session.messages:
                with ui.column().classes(
                    "w-full h-80 items-center justify-center gap-2"
                ).mark("chat-empty"):
                    ui.icon("chat_bubble_outline").classes("text-5xl").style(
                        f"color: {ACCENT}66"
                    )
                    ui.label("Ask me anything!").classes("text-sm font-medium text-slate-500")
            else:
                for msg in session.messages:
                    render_message(msg)
            if session.is_busy:
                render_typing_indicator()

    def update_controls() -> None:
        if session.is_busy:
            input_field.disable()
            send_btn.disable()
            return
        input_field.enable()
        if session.can_send(input_field.value):
            send_btn.enable()
        else:
            send_btn.disable()

    def toggle_panel() -> None:
        is_open = session.toggle()
        panel.set_visibility(is_open)
        toggle_btn.props(f'icon={"close" if is_open else "chat"}')
        toggle_btn.props(f'aria-label="{"Close chat" if is_open else "Open chat"}"')
        if is_open:
            toggle_btn.classes(add="is-open")
        else:
            toggle_btn.classes(remove="is-open")

    async def send_message() -> None:
        text = input_field.value or ""
        if not session.can_send(text):
            return

        input_field.value = ""
        await session.send(text, on_update=on_update)

    async def handle_enter(e: events.GenericEventArguments) -> None:
        if is_send_key(e.args):
            await send_message()

    def on_update() -> None:
        refresh_messages()
        update_controls()
        # Scroll once the client has laid out the new bubbles
        with messages_container:
            ui.timer(0.05, lambda: scroll.scroll_to(percent=1.0), once=True)

    # === Floating button ===
    with ui.page_sticky(position="bottom-right", x_offset=32, y_offset=32):
        toggle_btn = (
            ui.button(icon="chat", on_click=toggle_panel)
            .props('fab color=none text-color=white aria-label="Open chat"')
            .classes("chat-fab")
            .mark("chat-toggle")
        )

    # === Panel ===
    with ui.page_sticky(position="bottom-right", x_offset=24, y_offset=104):
        with ui.card().tight().classes("chat-panel bg-white").mark("chat-panel") as panel:
            # Header
            with ui.row().classes("w-full chat-header px-5 py-3 items-center gap-3 no-wrap"):
                with ui.element("div").classes(
                    "w-9 h-9 rounded-full bg-white/25 flex items-center justify-center"
                ):
                    ui.icon("forum").classes("text-white text-lg")
                with ui.column().classes("gap-0"):
                    ui.label("TinyLlama Chat").classes("font-semibold text-white")
                    ui.label("powered by Ollama").classes("text-xs text-red-100")

            # Messages
            with (
                ui.scroll_area().classes("flex-grow w-full bg-slate-50") as scroll,
                ui.column().classes("w-full p-4"),
            ):
                messages_container = ui.column().classes("w-full gap-4")

            # Input
            with ui.row().classes("w-full p-4 gap-2 items-center no-wrap border-t bg-white"):
                input_field = (
                    ui.input(
                        placeholder="Type your message...",
                        on_change=lambda _: update_controls(),
                    )
                    .props("rounded outlined dense")
                    .classes("flex-grow")
                    .on("keydown.enter", handle_enter, args=["shiftKey"])
                    .mark("chat-input")
                )
                send_btn = (
                    ui.button("Send", on_click=send_message)
                    .props("rounded unelevated text-color=white")
                    .classes("chat-send")
                    .mark("chat-send")
                )

    panel.set_visibility(session.is_open)
    refresh_messages()
    update_controls()

    return session
