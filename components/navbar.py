from __future__ import annotations
from html import escape
from typing import Callable

import streamlit as st

NAV_LINKS: list[tuple[str, str]] = [
    ("Home", "/"),
    ("Find Job", "/find-job"),
    ("About Us", "/about-us"),
    ("Testimonials", "/testimonials"),
]


def nav_links_html(links: list[tuple[str, str]] | None = None) -> str:
    """Return the navigation list as HTML for ``st.markdown``."""
    items = "".join(
        f'<li><a href="{escape(href)}" target="_self">{escape(label)}</a></li>'
        for label, href in links or NAV_LINKS
    )
    return f'<nav class="job-portal-nav"><ul>{items}</ul></nav>'


def render_navbar(on_create_job: Callable[[], None]) -> None:
    """Render the top bar: static links on the left, "Create Job" on the right."""
    col_links, col_action = st.columns([4, 1], vertical_alignment="center")
    with col_links:
        st.markdown(nav_links_html(), unsafe_allow_html=True)
    with col_action:
        st.button("Create Job", key="create_job", type="primary", on_click=on_create_job)
