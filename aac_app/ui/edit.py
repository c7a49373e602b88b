# aac_app/ui/edit.py

import streamlit as st
from aac_app.core.board import Board
from aac_app.services.api import search_symbols


RESULT_COLUMNS = 4


def close_edit_panel(board: Board):
    board.selected = None
    for key in ("edit_text", "symbol_query", "symbol_results", "symbol_search_for", "selected_image"):
        st.session_state.pop(key, None)


def edit_card_panel(board: Board):
    card = board.selected

    with st.container(border=True):
        st.subheader("✏️ Edit Card")

        if "edit_text" not in st.session_state:
            st.session_state["edit_text"] = card.text
        edit_text = st.text_input("Card text", key="edit_text")

        symbol_search_form()
        symbol_results()

        selected_image = st.session_state.get("selected_image")
        if selected_image:
            st.caption("Selected symbol")
            st.image(selected_image, width=64)

        cancel_col, save_col = st.columns(2)
        if cancel_col.button("Cancel", key="edit_cancel"):
            close_edit_panel(board)
            st.rerun()
        if save_col.button("Save", key="edit_save", type="primary"):
            board.update_card(card.id, text=edit_text, image=selected_image)
            close_edit_panel(board)
            st.rerun()


def symbol_search_form():
    with st.form("symbol_search", clear_on_submit=True):
        query = st.text_input("Search Symbols", key="symbol_query")
        submitted = st.form_submit_button("Search")

    if submitted and query.strip():
        with st.spinner("Searching symbols..."):
            results = search_symbols(query.strip())
        st.session_state["symbol_results"] = results
        st.session_state["symbol_search_for"] = query.strip()


def symbol_results():
    if "symbol_results" not in st.session_state:
        return

    results = st.session_state["symbol_results"]
    if isinstance(results, dict) and results.get("error"):
        st.error(f"Symbol search failed: {results['error']}")
        return

    st.markdown(f"**Results for: {st.session_state.get('symbol_search_for', '')}**")
    if not results:
        st.info("No symbols found.")
        return

    cols = st.columns(RESULT_COLUMNS)
    for i, symbol in enumerate(results):
        image_url = symbol.get("image_url")
        if not image_url:
            continue
        with cols[i % RESULT_COLUMNS]:
            st.image(image_url, caption=symbol.get("name"), width=64)
            if st.button("Select", key=f"symbol_{i}"):
                st.session_state["selected_image"] = image_url
                st.rerun()
