"""Training Calendar — Streamlit plan viewer.

Run with:
    streamlit run streamlit_app/app.py

Loads a calendar dataset, validates it, and shows what each tier does on
a chosen date.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

import streamlit as st

from training_calendar import CalendarEngine, CalendarError, InvariantViolation, config_from_env, load_dataset
from training_calendar.civil_date import format_civil_date, load_zone, weekday_of
from training_calendar.models.enums import Tier
from training_calendar.serialization import resolved_day_to_json

from helpers import (
    DATA_DIR,
    INTENSITY_COLORS,
    format_interval,
    format_tier_source,
    list_datasets,
    week_grid,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Training Calendar",
    page_icon="📅",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Cached engine
# ---------------------------------------------------------------------------


@st.cache_resource
def get_engine(file_name: str) -> CalendarEngine:
    return CalendarEngine(load_dataset(DATA_DIR / file_name), config_from_env())


def _render_intervals(variant) -> None:
    """Render a variant's intervals as color-coded bars."""
    for interval in variant.intervals:
        color = INTENSITY_COLORS.get(interval.intensity, "#CCCCCC")
        notes = ""
        if interval.notes:
            notes = f'<br><small style="color:#666;">{interval.notes}</small>'
        st.markdown(
            f'<div style="background:{color};padding:6px 12px;'
            f'border-radius:4px;margin:2px 0;width:100%;">'
            f"{format_interval(interval)}{notes}</div>",
            unsafe_allow_html=True,
        )


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

st.sidebar.title("Training Calendar")

datasets = list_datasets()
if not datasets:
    st.error(f"No calendar datasets found in {DATA_DIR}")
    st.stop()

file_name = st.sidebar.selectbox("Dataset", datasets)
tier = Tier(st.sidebar.radio("Tier", [t.value for t in Tier], horizontal=True))

try:
    engine = get_engine(file_name)
except InvariantViolation as exc:
    st.error(f"Dataset failed validation: {exc}")
    st.caption(f"Entity: {exc.entity_kind} {exc.entity_id} · Rule: {exc.rule}")
    st.stop()
except CalendarError as exc:
    st.error(f"Could not load dataset: {exc}")
    st.stop()

today = datetime.now(load_zone(engine.config.timezone)).date()
selected: date = st.sidebar.date_input("Date", value=today)
st.sidebar.caption(f"Timezone: {engine.config.timezone} · Weeks start {engine.config.week_start.label}")

# ---------------------------------------------------------------------------
# Day view
# ---------------------------------------------------------------------------

st.header(f"{weekday_of(selected).label} {format_civil_date(selected)}")

try:
    resolved = engine.workout_of_day(selected)
except CalendarError as exc:
    logger.error("Resolution failed for %s: %s", format_civil_date(selected), exc)
    st.error(str(exc))
    st.stop()

if resolved is None:
    season = engine.active_season(selected)
    if season is None:
        st.info("No season covers this date.")
    elif engine.week_for_date(season, selected) is None:
        st.info(f"{season.name}: no planned week covers this date.")
    else:
        st.info("Rest day.")
else:
    col1, col2, col3 = st.columns(3)
    col1.metric("Season", resolved.season.name)
    col2.metric("Week", f"{resolved.week.index + 1} of {len(resolved.season.week_ids)}")
    col3.metric("Block", resolved.block.name)
    st.caption(resolved.block.intent)

    variant = resolved.tiers[tier]
    st.subheader(f"{resolved.workout.name or resolved.workout.workout_id} · {variant.name}")
    st.write(
        f"Workout `{resolved.workout.key}` · "
        f"Tier {format_tier_source(tier, resolved.tier_sources[tier])}"
    )
    _render_intervals(variant)

    with st.expander("Resolved day JSON"):
        st.code(resolved_day_to_json(resolved), language="json")

# ---------------------------------------------------------------------------
# Week grid
# ---------------------------------------------------------------------------

st.subheader("This week")
try:
    st.table(week_grid(engine, selected, tier))
except CalendarError as exc:
    st.error(str(exc))
