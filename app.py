import streamlit as st

from components import job_board, job_form, navbar
from services.logger import setup_logging
from state.session_state import initialize_session_state

# Set up page configuration (title, icon, layout, etc.)
st.set_page_config(
    page_title="Job Portal",
    page_icon="💼",
    layout="wide",
)

setup_logging()


def _inject_styles() -> None:
    """Navbar link styling."""
    css = (
        "<style>"
        ".job-portal-nav ul{list-style:none;display:flex;gap:24px;padding:0;margin:0;flex-wrap:wrap;}"
        ".job-portal-nav a{text-decoration:none;color:#333;font-size:16px;font-weight:500;}"
        ".job-portal-nav a:hover{color:#007bff;}"
        "</style>"
    )
    st.markdown(css, unsafe_allow_html=True)


initialize_session_state()
_inject_styles()

navbar.render_navbar(on_create_job=job_board.open_job_form)

# Fetch once per session, before the list is first drawn
if not st.session_state["jobs_loaded"]:
    with st.spinner("Loading job postings..."):
        job_board.load_jobs()

job_board.render_job_board()

if st.session_state["show_form"]:
    st.session_state["show_form"] = False
    job_form.job_posting_form(on_submit=job_board.handle_submit_job)

# Optimistic records are already on screen; confirm them with the backend
if job_board.submit_pending_jobs():
    st.rerun()
