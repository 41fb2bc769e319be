import streamlit as st
import requests
import os

API_BASE = os.getenv("API_BASE", "http://127.0.0.1:8000")

st.set_page_config(page_title="PDF Question Generator", layout="wide")

def _headers():
    return {"Authorization": f"Bearer {st.session_state.get('token', '')}"}

def _show(view):
    st.session_state["view"] = view

# Login view
if not st.session_state.get("token"):
    st.title("Sign in")
    email = st.text_input("Email")
    if st.button("Sign in", type="primary") and email:
        r = requests.post(f"{API_BASE}/auth/sign-in", json={"email": email})
        if r.ok:
            st.session_state["token"] = r.json()["access_token"]
            st.rerun()
        else:
            st.error(r.text)
    st.stop()

# Home view
col_title, col_out = st.columns([5, 1])
col_title.title("📄 PDF Question Generator")
if col_out.button("Sign out"):
    requests.post(f"{API_BASE}/auth/sign-out", headers=_headers())
    st.session_state.clear()
    st.rerun()

st.subheader("Upload a PDF")
file = st.file_uploader("PDF", type=["pdf"])
if file is not None and st.session_state.get("uploaded") != file.file_id:
    with st.spinner("Processing the file, please wait..."):
        resp = requests.post(
            f"{API_BASE}/documents",
            files={"file": (file.name, file.getvalue(), file.type or "application/octet-stream")},
            headers=_headers(),
        )
    st.session_state["uploaded"] = file.file_id
    if resp.status_code == 401:
        st.session_state.clear()
        st.rerun()
    elif resp.ok:
        _show(resp.json())
    else:
        st.error(resp.text)

view = st.session_state.get("view") or {}
if view.get("error_message"):
    st.error(view["error_message"])

if view.get("show_generate_button") and st.button("Generate questions", type="primary"):
    with st.spinner("Generating questions..."):
        resp = requests.post(f"{API_BASE}/questions/generate", headers=_headers())
    if resp.ok:
        _show(resp.json())
        st.rerun()
    else:
        st.error(resp.text)

questions = view.get("questions") or []
if questions:
    st.subheader("Generated questions")
    for qa in questions:
        st.markdown(f"**{qa['question']}**")
        st.write(qa["answer"])
        st.divider()
