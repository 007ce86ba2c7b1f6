from __future__ import annotations

import time
from datetime import date

import pandas as pd
import streamlit as st

from app.client import ActivityClient
from app.errors import NetworkError
from app.models import ActivityType
from app.recommendations import summarize
from app.ui_state import NAV_ITEMS, LogForm, Page, navigate, submit_activity

TYPE_ICONS = {
    ActivityType.TRAVEL: "🚗",
    ActivityType.ENERGY: "⚡",
    ActivityType.FOOD: "🍽️",
}

# -------------------------------------------------
# Session State
# -------------------------------------------------
if "page" not in st.session_state:
    st.session_state.page = Page.DASHBOARD
if "log_form" not in st.session_state:
    st.session_state.log_form = LogForm.new()
if "flash" not in st.session_state:
    st.session_state.flash = None


@st.cache_resource
def get_client() -> ActivityClient:
    return ActivityClient()


# -------------------------------------------------
# Helpers
# -------------------------------------------------
def go_to(target) -> None:
    page = navigate(target)
    if page == Page.LOG and st.session_state.page != Page.LOG:
        # Entering the log page always starts from a fresh form
        st.session_state.reset_form = True
    st.session_state.page = page


def reset_log_form() -> None:
    # Widget keys can only be written before their widgets render
    form = LogForm.new()
    st.session_state.log_form = form
    st.session_state.log_type = form.type.value
    st.session_state.log_mode = form.mode
    st.session_state.log_date = form.date
    st.session_state.pop("log_distance", None)


def on_type_change() -> None:
    form = st.session_state.log_form.with_type(st.session_state.log_type)
    st.session_state.log_form = form
    st.session_state.log_mode = form.mode
    st.session_state.pop("log_distance", None)


def activity_card(activity) -> None:
    with st.container(border=True):
        left, right = st.columns([3, 1])
        with left:
            icon = TYPE_ICONS.get(activity.type, "🌿")
            st.markdown(f"**{icon} {activity.type.value} - {activity.details.mode}**")
            st.caption(activity.date.strftime("%b %d, %Y"))
        with right:
            st.markdown(f"### {activity.carbon_footprint:.2f}")
            st.caption("kg CO₂e")
        st.caption(f"Details: {activity.details.distance} {activity.details.unit} logged.")


# -------------------------------------------------
# Page config
# -------------------------------------------------
st.set_page_config(page_title="EcoAction Tracker", page_icon="🌿", layout="wide")

# -------------------------------------------------
# Header
# -------------------------------------------------
title, *nav = st.columns([4] + [1] * len(NAV_ITEMS))
with title:
    st.markdown("## 🌿 EcoAction Tracker")
for column, (label, target) in zip(nav, NAV_ITEMS):
    with column:
        st.button(
            label,
            key=f"nav_{target.value}",
            type="primary" if st.session_state.page == target else "secondary",
            on_click=go_to,
            args=(target,),
            use_container_width=True,
        )

st.divider()

flash = st.session_state.flash
if flash:
    st.success(flash)
    st.session_state.flash = None


# -------------------------------------------------
# Dashboard
# -------------------------------------------------
def render_dashboard() -> None:
    try:
        with st.spinner("Loading EcoAction data..."):
            activities = get_client().list_activities()
    except NetworkError as e:
        st.error(f"Error fetching data: {e.message} Please check API connection.")
        st.button("Retry", key="retry_dashboard")
        return

    summary = summarize(activities)

    st.metric("Your Total Carbon Footprint", f"{summary.total:.2f} kg CO₂e")

    left, right = st.columns([2, 1])
    with left:
        st.subheader("Carbon Breakdown by Category")
        if summary.breakdown:
            df = pd.DataFrame({"kg CO₂e": summary.breakdown})
            st.bar_chart(df)
        else:
            st.info("No data logged yet. Add your first activity!")
    with right:
        st.subheader("Action Tip")
        st.write(summary.recommendation)
        st.button(
            "Log New Activity",
            key="dashboard_log",
            on_click=go_to,
            args=(Page.LOG,),
            use_container_width=True,
        )

    st.subheader("Recent Activities")
    if not activities:
        st.caption("No activities to display.")
    for activity in activities[:5]:
        activity_card(activity)


# -------------------------------------------------
# Log Activity
# -------------------------------------------------
def render_log() -> None:
    if st.session_state.get("reset_form", True):
        reset_log_form()
        st.session_state.reset_form = False

    form: LogForm = st.session_state.log_form
    today = date.today()

    st.subheader("Log New Carbon Activity")

    st.selectbox(
        "Activity Category",
        [t.value for t in ActivityType],
        key="log_type",
        on_change=on_type_change,
    )
    mode = st.selectbox("Mode / Detail", form.modes, key="log_mode")
    distance = st.number_input(
        f"{form.amount_label} ({form.unit})",
        min_value=0.0,
        step=0.1,
        value=None,
        placeholder=f"Enter value in {form.unit}",
        key="log_distance",
    )
    picked = st.date_input("Date", max_value=today, key="log_date")

    form = form.with_mode(mode).with_distance(distance).with_date(picked, today)
    st.session_state.log_form = form

    if st.button("Calculate & Log Activity", type="primary"):
        with st.spinner("Submitting..."):
            result = submit_activity(form, get_client(), today)
        if not result.success:
            st.error(result.message)
            return
        st.success(result.message)
        time.sleep(result.redirect_after)
        st.session_state.flash = result.message
        go_to(result.next_page)
        st.rerun()


if st.session_state.page == Page.LOG:
    render_log()
else:
    render_dashboard()

st.caption("© EcoAction Tracker | SDG 13: Climate Action Project")
