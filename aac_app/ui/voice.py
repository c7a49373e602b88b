# aac_app/ui/voice.py

import streamlit as st
from aac_app.config import AVAILABLE_VOICES
from aac_app.core.speech import SpeechController
from aac_app.core.voice import (
    MAX_VALUE,
    MIN_VALUE,
    STEP,
    LocalVoiceStore,
    VoiceContext,
    VoiceDialog,
    resolve_voice_settings,
)
from aac_app.services.api import get_voice_settings, save_voice_settings
from aac_app.ui.speech import queue_script


SAVE_MESSAGES = {
    "saved": ("info", "Voice settings saved on this device."),
    "success": ("success", "Voice settings saved."),
    "error": ("error", "Voice settings saved on this device, but the server could not be updated."),
}


def open_voice_dialog(context: VoiceContext, local: LocalVoiceStore, token: str | None):
    settings = resolve_voice_settings(context, token, get_voice_settings, local)
    st.session_state["voice_draft"] = VoiceDialog.from_settings(settings, AVAILABLE_VOICES)
    st.session_state["voice_test"] = SpeechController()
    st.session_state["show_voice"] = True


def close_voice_dialog():
    st.session_state.pop("voice_draft", None)
    st.session_state.pop("voice_test", None)
    st.session_state.pop("voice_select", None)
    st.session_state["show_voice"] = False


def show_save_status():
    """
    Shows the outcome of the last save once.
    """
    status = st.session_state.pop("voice_save_status", None)
    if status:
        level, message = SAVE_MESSAGES[status]
        getattr(st, level)(message)


def voice_settings_panel(context: VoiceContext, local: LocalVoiceStore, token: str | None, sentence: str):
    draft: VoiceDialog = st.session_state["voice_draft"]
    tester: SpeechController = st.session_state["voice_test"]
    tester.refresh()

    with st.container(border=True):
        st.subheader("🔊 Voice Settings")

        cols = st.columns(2)
        with cols[0]:
            st.markdown(f"**Rate {draft.rate:.1f}**")
            minus, plus = st.columns(2)
            minus.button("➖", key="rate_down", on_click=draft.adjust_rate, args=(-STEP,),
                         disabled=draft.rate <= MIN_VALUE)
            plus.button("➕", key="rate_up", on_click=draft.adjust_rate, args=(STEP,),
                        disabled=draft.rate >= MAX_VALUE)
            st.progress((draft.rate - MIN_VALUE) / (MAX_VALUE - MIN_VALUE))
        with cols[1]:
            st.markdown(f"**Pitch {draft.pitch:.1f}**")
            minus, plus = st.columns(2)
            minus.button("➖", key="pitch_down", on_click=draft.adjust_pitch, args=(-STEP,),
                         disabled=draft.pitch <= MIN_VALUE)
            plus.button("➕", key="pitch_up", on_click=draft.adjust_pitch, args=(STEP,),
                        disabled=draft.pitch >= MAX_VALUE)
            st.progress((draft.pitch - MIN_VALUE) / (MAX_VALUE - MIN_VALUE))

        if AVAILABLE_VOICES:
            index = AVAILABLE_VOICES.index(draft.voice_name) if draft.voice_name in AVAILABLE_VOICES else 0
            choice = st.selectbox("Voice", options=AVAILABLE_VOICES, index=index, key="voice_select")
            draft.select_voice(choice)

        cancel_col, test_col, save_col = st.columns(3)

        if cancel_col.button("Cancel", key="voice_cancel"):
            if tester.is_speaking:
                queue_script(tester.toggle("", {}))
            close_voice_dialog()
            st.rerun()

        test_label = "⏹ Stop" if tester.is_speaking else "🔊 Test"
        if test_col.button(test_label, key="voice_test_button"):
            queue_script(tester.toggle(draft.test_text(sentence), draft.settings()))
            st.rerun()

        if save_col.button("💾 Save", key="voice_save", type="primary"):
            with st.spinner("Saving..."):
                status = draft.save(local, context, token, save_voice_settings)
            st.session_state["voice_save_status"] = status
            close_voice_dialog()
            st.rerun()
