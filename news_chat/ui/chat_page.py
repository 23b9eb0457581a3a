"""NiceGUI chat page backed by a SessionController."""

from nicegui import app, ui

from news_chat.client.api_client import NewsApiClient
from news_chat.controller.session_controller import SessionController
from news_chat.models.schemas import Turn, TurnRole
from news_chat.ui.formatting import format_time, session_label

# Shared by every page
_api_client: NewsApiClient | None = None


def get_api_client() -> NewsApiClient:
    """Get or create the process-wide news service client."""
    global _api_client
    if _api_client is None:
        _api_client = NewsApiClient()
    return _api_client


async def close_api_client() -> None:
    global _api_client
    if _api_client is not None:
        await _api_client.aclose()
        _api_client = None


app.on_shutdown(close_api_client)

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #1e3a8a 0%, #2563eb 100%); }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }
    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }
    .message-error { background: #fee2e2; color: #991b1b; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #2563eb;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each visit gets its own controller and session."""
    ui.add_head_html(CUSTOM_CSS)
    controller = SessionController(get_api_client())

    input_field: ui.input
    send_btn: ui.button
    reset_btn: ui.button

    def render_turn(turn: Turn) -> None:
        is_user = turn.role == TurnRole.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"
        if turn.error:
            bubble += " message-error"

        with ui.row().classes(f"w-full {align}"):
            with ui.column().classes(f"max-w-[75%] gap-1 px-4 py-3 {bubble}"):
                with ui.row().classes("w-full justify-between gap-4 text-xs opacity-70"):
                    ui.label("You" if is_user else "Assistant")
                    ui.label(format_time(turn.timestamp))
                ui.markdown(turn.content).classes("text-sm")
                if turn.sources:
                    ui.label("Sources:").classes("text-xs font-semibold mt-2")
                    for source in turn.sources:
                        ui.link(source.title, source.link, new_tab=True).classes(
                            "text-xs text-blue-700 underline"
                        )

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start"):
            with ui.row().classes("message-assistant px-4 py-3 gap-1"):
                for _ in range(3):
                    ui.element("div").classes("typing-dot")

    @ui.refreshable
    def error_banner() -> None:
        if controller.last_error:
            with ui.row().classes("w-full bg-red-100 text-red-800 px-5 py-2"):
                ui.label(controller.last_error)

    @ui.refreshable
    def transcript_view() -> None:
        for turn in controller.transcript:
            render_turn(turn)
        if controller.busy:
            render_typing_indicator()

    @ui.refreshable
    def footer() -> None:
        ui.label(f"Session ID: {session_label(controller.session_id)}").classes(
            "text-xs text-gray-400 font-mono"
        )

    def refresh() -> None:
        error_banner.refresh()
        transcript_view.refresh()
        footer.refresh()
        idle = not controller.busy and not controller.pending
        ready = controller.session_id is not None and idle
        send_btn.set_enabled(ready)
        input_field.set_enabled(ready)
        reset_btn.set_enabled(idle)

    def lock_controls() -> None:
        send_btn.disable()
        input_field.disable()
        reset_btn.disable()

    def on_accepted() -> None:
        input_field.value = ""
        refresh()

    async def send_message() -> None:
        await controller.send(input_field.value or "", on_accepted=on_accepted)
        refresh()

    async def reset_session() -> None:
        lock_controls()
        await controller.reset()
        refresh()

    async def start() -> None:
        lock_controls()
        await controller.initialize()
        refresh()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container gap-0").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
            with ui.column().classes("gap-0"):
                ui.label("News Chatbot").classes("text-lg font-semibold text-white")
                ui.label("Ask about the latest headlines").classes("text-xs text-white/80")
            reset_btn = ui.button(icon="refresh", on_click=reset_session).props(
                "flat round color=white"
            )

        error_banner()

        with (
            ui.scroll_area().classes("flex-grow w-full bg-gray-50"),
            ui.column().classes("w-full p-5 gap-4"),
        ):
            transcript_view()

        with ui.row().classes("w-full p-4 gap-3 items-center bg-white border-t"):
            input_field = (
                ui.input(placeholder="Ask about the latest news...")
                .props("outlined dense")
                .classes("flex-grow")
                .on("keydown.enter", send_message)
            )
            send_btn = ui.button(icon="send", on_click=send_message).props(
                "round unelevated"
            )

        with ui.row().classes("w-full px-5 py-2 bg-white border-t"):
            footer()

    lock_controls()
    ui.timer(0.1, start, once=True)

