import streamlit as st

from modules.fill_panel import render_fill_panel

st.set_page_config(page_title="School Admin · Smart Fill", page_icon="🧩", layout="wide")

# =========================
# 1️⃣ Header
# =========================
st.title("🏫 School Admin")
st.caption("Sessions grid with spreadsheet-style smart fill")

# =========================
# 2️⃣ Fill panel
# =========================
render_fill_panel()
