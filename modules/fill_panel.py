# modules/fill_panel.py
import streamlit as st
import pandas as pd

from modules.fill_settings import default_seed_rows, max_fill_rows
from modules.grid_fill import fill_range

STATE_KEY = "fill_grid"
READ_ONLY_DEFAULT = ["id"]


def demo_sessions_frame() -> pd.DataFrame:
    """Class sessions with the first one or two rows typed in; the rest waits to be filled."""
    blank = [None] * 6
    return pd.DataFrame({
        "id": list(range(1, 9)),
        "date": ["2024-09-02", "2024-09-09"] + blank,
        "lesson": ["Lesson 01", "Lesson 02"] + blank,
        "room": ["Room A1", "Room A1"] + blank,
        "term": ["甲", "乙"] + blank,
        "fee": [120, 120] + blank,
        "teacher": ["Ms. Rao", "Mr. Das"] + blank,
    })


def _grid() -> pd.DataFrame:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = demo_sessions_frame()
    return st.session_state[STATE_KEY]


def render_fill_panel():
    st.markdown("### 🧩 Smart Fill")
    st.caption("Pick a row range and columns, then fill from the first one or two rows, like dragging the fill handle.")

    df = _grid()
    edited = st.data_editor(
        df,
        use_container_width=True,
        hide_index=False,
        num_rows="dynamic",
        disabled=READ_ONLY_DEFAULT,
        key="fill_grid_editor",
    )
    edited = edited.reset_index(drop=True)

    if edited.empty:
        st.info("Add a few rows to start filling.")
        return

    last_row = len(edited) - 1
    editable_cols = [c for c in edited.columns if c not in READ_ONLY_DEFAULT]

    c1, c2, c3 = st.columns(3)
    with c1:
        start_row = st.number_input("From row", min_value=0, max_value=last_row, value=0, step=1)
    with c2:
        end_row = st.number_input("To row", min_value=0, max_value=last_row, value=last_row, step=1)
    with c3:
        seed_rows = st.radio(
            "Seed rows", [1, 2], index=[1, 2].index(default_seed_rows()), horizontal=True
        )

    columns = st.multiselect("Columns", editable_cols, default=editable_cols)

    b1, b2 = st.columns(2)
    with b1:
        if st.button("⬇️ Fill", use_container_width=True):
            try:
                filled = fill_range(
                    edited, int(start_row), int(end_row), columns,
                    seed_rows=int(seed_rows),
                    read_only=READ_ONLY_DEFAULT,
                    max_rows=max_fill_rows(),
                )
            except ValueError as e:
                st.error(f"❌ {e}")
            else:
                print(f"[FILL] rows={int(start_row)}..{int(end_row)} cols={columns} seeds={int(seed_rows)}")
                st.session_state[STATE_KEY] = filled
                st.session_state.pop("fill_grid_editor", None)  # drop stale edits
                st.toast(f"Filled rows {int(start_row)}–{int(end_row)}.")
                st.rerun()
    with b2:
        if st.button("🧹 Reset table", type="secondary", use_container_width=True):
            st.session_state[STATE_KEY] = demo_sessions_frame()
            st.session_state.pop("fill_grid_editor", None)
            st.rerun()
