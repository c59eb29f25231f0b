"""Simple Streamlit UI for AppGap."""

import streamlit as st
import logging

from appgap.api import build_analyzer, handle_analyze
from appgap.core.models import Impact, PrioritizedTheme, Theme

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

IMPACT_COLORS = {
    Impact.HIGH.value: "red",
    Impact.MEDIUM.value: "orange",
    Impact.LOW.value: "green",
}


def _impact(impact: str) -> str:
    color = IMPACT_COLORS.get(impact, "gray")
    return f":{color}[{impact or 'Unknown'}]"


def _run(value: str):
    with st.spinner("Fetching reviews and analyzing..."):
        body, status = handle_analyze({"input": value}, build_analyzer())
    st.session_state["result"] = body
    st.session_state["status"] = status
    st.session_state["last_input"] = value


# Page configuration
st.set_page_config(
    page_title="AppGap: Unmet Needs Finder",
    page_icon="🔍",
    layout="wide"
)

st.title("🔍 AppGap: Unmet Needs Finder")
st.write("Paste an App Store link or app id to find unmet user needs in its recent reviews.")

with st.form("analyze"):
    url = st.text_input(
        "App Store URL or ID",
        value=st.session_state.get("last_input", ""),
        placeholder="https://apps.apple.com/us/app/example/id284882215",
    )
    submitted = st.form_submit_button("Analyze Reviews")

if submitted:
    _run(url)

body = st.session_state.get("result")
if body is not None:
    if "error" in body:
        st.error(body["error"])
        if st.button("Retry"):
            _run(st.session_state.get("last_input", ""))
            st.rerun()
    else:
        info = body.get("appInfo") or {}
        if info.get("name"):
            cols = st.columns([1, 6])
            if info.get("artworkUrl512"):
                cols[0].image(info["artworkUrl512"], width=96)
            cols[1].subheader(info["name"])
            if info.get("averageUserRating") is not None:
                cols[1].caption(
                    f"⭐ {info['averageUserRating']:.1f} "
                    f"({info.get('userRatingCount') or 0:,} ratings)"
                )

        prioritized = [PrioritizedTheme.from_dict(t) for t in body.get("prioritizedThemes", [])]
        if prioritized:
            st.header("📊 Prioritized Themes")
            for item in prioritized:
                st.markdown(f"- **{item.title}** ({_impact(item.impact)})")

        themes = [Theme.from_dict(t) for t in body.get("themes", [])]
        st.header("💡 Themes")
        if not themes:
            st.info("The analysis returned no themes.")
        for theme in themes:
            with st.container(border=True):
                st.markdown(f"### {theme.title} ({_impact(theme.impact)})")
                st.write(theme.summary)
                if theme.quote:
                    st.markdown(f"> {theme.quote}")
                if theme.feature:
                    st.markdown(f"**Feature opportunity:** {theme.feature}")
