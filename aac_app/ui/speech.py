# aac_app/ui/speech.py

import streamlit as st
import streamlit.components.v1 as components


def queue_script(script: str | None):
    """
    Keeps a browser speech script for the next run; a script rendered right
    before st.rerun() never reaches the browser.
    """
    if script:
        st.session_state["speech_script"] = script


def run_queued_script():
    script = st.session_state.pop("speech_script", None)
    if script:
        components.html(script, height=0)
