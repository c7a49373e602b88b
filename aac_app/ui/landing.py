# aac_app/ui/landing.py

import streamlit as st
from streamlit_cookies_manager import EncryptedCookieManager
from aac_app.config import COOKIE_PASSWORD
from aac_app.services.api import get_user_info, login_user, signup_user


TOKEN_COOKIE = "auth_token"

cookies = EncryptedCookieManager(prefix="glpaac/", password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def logout():
    cookies.clear()
    cookies.save()


def restore_session():
    """
    Moves a token saved by an earlier visit into the session, unless the
    server no longer accepts it.
    """
    token = cookies.get(TOKEN_COOKIE)
    if "auth_token" in st.session_state or not token:
        return False

    result = get_user_info(token)
    if result.get("error"):
        if result.get("status") in (401, 404):
            del cookies[TOKEN_COOKIE]
            cookies.save()
        else:
            st.error(f"Could not restore your session: {result['error']}")
        return False

    st.session_state["auth_token"] = token
    st.session_state["user"] = result.get("user", {})
    return True


def landing_page():
    st.title("GLPAAC")
    st.markdown(
        "The first Augmentative and Alternative Communication (AAC) "
        "application for Gestalt Language Processors (GLP)."
    )
    st.caption('Choose "Sign Up" to open your free account.')

    if restore_session():
        st.rerun()

    if "show_signup" not in st.session_state:
        st.session_state["show_signup"] = False

    if st.session_state["show_signup"]:
        show_signup_form()
    else:
        show_login_form()

def show_login_form():
    st.subheader("Login to your account")

    with st.form("login_form"):
        username = st.text_input("Username", placeholder="Enter your username")
        password = st.text_input("Password", type="password", placeholder="Enter your password")
        submitted = st.form_submit_button("Log In")

    if submitted:
        with st.spinner("Logging in..."):
            result = login_user(username, password)
        if result.get("error"):
            st.error(f"Login failed: {result['error']}")
        elif not result.get("token"):
            st.error("Login failed: no token in the response.")
        else:
            st.session_state["auth_token"] = result["token"]
            st.session_state["user"] = result.get("user", {})
            cookies[TOKEN_COOKIE] = result["token"]
            cookies.save()

            st.success("Login successful!")
            st.rerun()

    if st.button("Sign Up"):
        st.session_state["show_signup"] = True
        st.rerun()

def show_signup_form():
    st.subheader("Create an account")

    with st.form("signup_form"):
        username = st.text_input("Username", placeholder="Choose a username")
        password = st.text_input("Password", type="password", placeholder="Create a password")
        cols = st.columns(2)
        with cols[0]:
            first_name = st.text_input("First Name", placeholder="Your first name")
        with cols[1]:
            last_name = st.text_input("Last Name", placeholder="Your last name")
        email = st.text_input("Email", placeholder="your.email@example.com")
        submitted = st.form_submit_button("Sign Up")

    if submitted:
        if not all([username, password, first_name, last_name, email]):
            st.error("Please fill in every field.")
        else:
            with st.spinner("Creating your account..."):
                result = signup_user(username, password, first_name, last_name, email)
            if result.get("error"):
                st.error(f"Sign up failed: {result['error']}")
            else:
                st.success("Sign up successful! Please log in.")
                st.session_state["show_signup"] = False

    if st.button("← Back to login"):
        st.session_state["show_signup"] = False
        st.rerun()
