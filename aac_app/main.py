# aac_app/main.py

import streamlit as st
from dotenv import load_dotenv
from aac_app.ui.landing import landing_page, logout
from aac_app.ui.communicator import communicator_page


load_dotenv()


def handle_logout():
    logout()
    st.session_state.clear()
    st.session_state["flash"] = "You are logged out."
    st.rerun()


flash = st.session_state.pop("flash", None)
if flash:
    st.info(flash)

if "auth_token" not in st.session_state:
    landing_page()
else:
    communicator_page(handle_logout)
