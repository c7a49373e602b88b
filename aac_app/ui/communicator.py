# aac_app/ui/communicator.py

from pathlib import Path
import streamlit as st
from aac_app.core.board import SECTIONS, Board, Card, clear_sentence, delete_last_word
from aac_app.core.cards import GRID_COLUMNS
from aac_app.core.speech import SpeechController
from aac_app.core.voice import LocalVoiceStore, VoiceContext, resolve_voice_settings
from aac_app.services.api import get_voice_settings
from aac_app.ui.edit import edit_card_panel
from aac_app.ui.landing import cookies
from aac_app.ui.speech import queue_script, run_queued_script
from aac_app.ui.voice import open_voice_dialog, show_save_status, voice_settings_panel


ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"


def init_state():
    if "board" not in st.session_state:
        st.session_state["board"] = Board()
    if "sentence" not in st.session_state:
        st.session_state["sentence"] = ""
    if "speech" not in st.session_state:
        st.session_state["speech"] = SpeechController()
    if "voice_context" not in st.session_state:
        st.session_state["voice_context"] = VoiceContext()


def local_voice_store() -> LocalVoiceStore:
    return LocalVoiceStore(cookies, on_change=cookies.save)


# -------------------------------
# Callbacks
# -------------------------------

def on_card_click(card_id: str):
    board: Board = st.session_state["board"]
    st.session_state["sentence"] = board.click(card_id, st.session_state["sentence"])
    if board.edit_mode:
        st.session_state.pop("edit_text", None)


def on_card_move(card_id: str):
    board: Board = st.session_state["board"]
    if board.dragged is None:
        board.start_drag(card_id)
    elif board.dragged.id == card_id:
        board.end_drag()
    else:
        board.drag_over(card_id)


def on_drop():
    board: Board = st.session_state["board"]
    if board.drop_target is not None:
        board.drop(board.drop_target.id)


def on_speak_or_stop():
    speech: SpeechController = st.session_state["speech"]
    settings = {}
    if not speech.is_speaking:
        settings = resolve_voice_settings(
            st.session_state["voice_context"],
            st.session_state.get("auth_token"),
            get_voice_settings,
            local_voice_store(),
        )
    queue_script(speech.toggle(st.session_state["sentence"], settings))


def on_delete_word():
    st.session_state["sentence"] = delete_last_word(st.session_state["sentence"])


def on_clear():
    st.session_state["sentence"] = clear_sentence()


def on_toggle_edit_mode():
    board: Board = st.session_state["board"]
    board.toggle_edit_mode()


# -------------------------------
# Rendering
# -------------------------------

def card_image(card: Card):
    if not card.image:
        return None
    if card.image.startswith(("http://", "https://")):
        return card.image
    path = ASSETS_DIR / card.image
    return str(path) if path.exists() else None


def render_card(board: Board, card: Card):
    image = card_image(card)
    if image:
        st.image(image, width=40)

    label = card.text or "＋"
    is_target = board.drop_target is not None and board.drop_target.id == card.id
    is_dragged = board.dragged is not None and board.dragged.id == card.id
    if is_dragged:
        label = f"✋ {label}"

    st.button(
        label,
        key=f"card_{card.id}",
        on_click=on_card_click,
        args=(card.id,),
        type="primary" if is_target else "secondary",
        use_container_width=True,
    )
    if board.edit_mode:
        st.button("↔", key=f"move_{card.id}", on_click=on_card_move, args=(card.id,),
                  help="Move this card")


def render_sidebar(token: str | None, on_logout):
    board: Board = st.session_state["board"]

    st.sidebar.markdown("## 📋 Menu")
    st.sidebar.button(
        "Exit Edit Mode" if board.edit_mode else "✏️ Edit Cards",
        on_click=on_toggle_edit_mode,
    )
    if st.sidebar.button("⚙️ Voice Settings"):
        if st.session_state.get("show_voice"):
            st.session_state["show_voice"] = False
        else:
            open_voice_dialog(st.session_state["voice_context"], local_voice_store(), token)
        st.rerun()
    if st.sidebar.button("🔓 Log Out"):
        on_logout()


def render_move_toolbar(board: Board):
    if board.dragged is None:
        return
    dragged = board.dragged.text or "＋"
    if board.drop_target is None:
        st.info(f"Moving '{dragged}'. Press ↔ on the card to drop it on.")
    else:
        target = board.drop_target.text or "＋"
        cols = st.columns(2)
        cols[0].button(f"Drop '{dragged}' on '{target}'", on_click=on_drop, type="primary")
        cols[1].button("Cancel move", on_click=board.end_drag)


def communicator_page(on_logout):
    init_state()
    run_queued_script()

    board: Board = st.session_state["board"]
    speech: SpeechController = st.session_state["speech"]
    token = st.session_state.get("auth_token")
    speech.refresh()

    render_sidebar(token, on_logout)
    show_save_status()

    top = st.columns([6, 1, 1, 1])
    with top[0]:
        st.text_area("Sentence", key="sentence", placeholder="Enter text", label_visibility="collapsed")
    top[1].button("⏹" if speech.is_speaking else "▶️", key="speak", on_click=on_speak_or_stop,
                  help="Speak / Stop", use_container_width=True)
    top[2].button("⌫", key="delete_word", on_click=on_delete_word, help="Delete last word",
                  use_container_width=True)
    top[3].button("🗑", key="clear", on_click=on_clear, help="Clear", use_container_width=True)

    if st.session_state.get("show_voice"):
        voice_settings_panel(st.session_state["voice_context"], local_voice_store(), token,
                             st.session_state["sentence"])

    if board.edit_mode:
        st.caption("Edit mode: click a card to edit it, use ↔ to move it.")
        if board.selected is not None:
            edit_card_panel(board)
        render_move_toolbar(board)

    columns = st.columns([1, 1, GRID_COLUMNS])
    for section, column in zip(SECTIONS[:2], columns[:2]):
        with column:
            for card in board.cards[section]:
                render_card(board, card)

    with columns[2]:
        grid = board.cards["grid"]
        for row_start in range(0, len(grid), GRID_COLUMNS):
            row = st.columns(GRID_COLUMNS)
            for col, card in zip(row, grid[row_start:row_start + GRID_COLUMNS]):
                with col:
                    render_card(board, card)
