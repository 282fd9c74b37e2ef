"""OrbitWatch — Streamlit app for tracked orbital debris on an interactive globe."""

import asyncio
import logging
import time

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from orbitwatch.catalog import CatalogStore  # noqa: E402
from orbitwatch.config import configure_logging, load_settings  # noqa: E402
from orbitwatch.i18n import t  # noqa: E402
from orbitwatch.ingest import load_into  # noqa: E402
from orbitwatch.models import RISK_FILTER_ALL, RiskTier  # noqa: E402
from orbitwatch.presenters import (  # noqa: E402
    DetailPanel,
    TableView,
    TooltipView,
    tooltip_text,
)
from orbitwatch.renderers.plotly_globe import PlotlyGlobe  # noqa: E402
from orbitwatch.sync import DeadlineScheduler, ViewSynchronizer  # noqa: E402

_settings = load_settings()
configure_logging(_settings)
logger = logging.getLogger("orbitwatch.app")

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# The first run gets None; the rerun triggered by streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="🛰️",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# --- Dark theme CSS (static) ---
st.markdown(
    """
    <style>
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #050a1a !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    /* Tooltip and detail panel share the floating-card look */
    .ow-tooltip, .ow-detail {
        background: rgba(10, 22, 40, 0.95);
        border: 1px solid #00d4ff;
        border-radius: 10px;
        padding: 14px 18px;
        color: #e8f4fd;
        font-family: 'Share Tech Mono', monospace;
        font-size: 13px;
        line-height: 1.8;
        box-shadow: 0 0 20px rgba(0, 212, 255, 0.3);
    }
    .ow-tooltip { pointer-events: none; z-index: 9999; min-width: 220px; }
    .ow-title { color: #00d4ff; font-size: 14px; font-weight: bold; margin-bottom: 8px; }
    .ow-name {
        color: #00d4ff; font-weight: bold;
        border-bottom: 1px solid #1a3a5c; padding-bottom: 12px; margin-bottom: 12px;
    }
    .ow-label { color: #7a9cc7; }
    .ow-risk { margin-top: 14px; padding-top: 12px; border-top: 1px solid #1a3a5c; }
    .ow-hint { color: #7a9cc7; font-size: 11px; margin-top: 8px; }
    .ow-notice { color: #ffd700; margin-bottom: 0.5rem; }
    .ow-advisory {
        display: flex; align-items: center; justify-content: center;
        height: 400px; background: #000; color: white; text-align: center;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


def _init_session() -> None:
    """Build the store, views and synchronizer once per browser session."""
    store = CatalogStore()
    try:
        globe: PlotlyGlobe | None = PlotlyGlobe()
    except Exception:
        logger.exception("Error initialising globe")
        globe = None

    scheduler = DeadlineScheduler()
    table, tooltip, detail = TableView(), TooltipView(), DetailPanel()
    sync = ViewSynchronizer(globe, table, tooltip, detail, scheduler)
    sync.attach(store)

    st.session_state.store = store
    st.session_state.globe = globe
    st.session_state.scheduler = scheduler
    st.session_state.table = table
    st.session_state.tooltip = tooltip
    st.session_state.detail = detail
    st.session_state.sync = sync
    st.session_state.last_tick = time.monotonic()
    st.session_state.handled_globe_pick = None
    st.session_state.handled_table_pick = None

    with st.spinner(t("loading", _lang)):
        st.session_state.ingestion = asyncio.run(
            load_into(
                store,
                source_url=_settings.source_url,
                timeout=_settings.http_timeout,
                lang=_lang,
            )
        )


if "store" not in st.session_state:
    _init_session()

store: CatalogStore = st.session_state.store
globe: PlotlyGlobe | None = st.session_state.globe
sync: ViewSynchronizer = st.session_state.sync
table: TableView = st.session_state.table
tooltip: TooltipView = st.session_state.tooltip
detail: DetailPanel = st.session_state.detail

# --- Timers and idle spin advance once per rerun ---
_now = time.monotonic()
st.session_state.scheduler.run_due(_now)
if globe is not None:
    globe.advance(_now - st.session_state.last_tick)
st.session_state.last_tick = _now

# --- Sample data notice ---
if st.session_state.ingestion.notice:
    st.markdown(
        f"<div class='ow-notice'>{st.session_state.ingestion.notice}</div>",
        unsafe_allow_html=True,
    )

# --- Statistics ---
stats = store.statistics()
col1, col2, col3 = st.columns(3)
col1.metric(t("stat_total", _lang), f"{stats.total:,}")
col2.metric(t("stat_high", _lang), f"{stats.high_risk:,}")
col3.metric(t("stat_leo", _lang), f"{stats.low_earth_orbit:,}")

# --- Filter inputs ---
_RISK_OPTIONS = [RISK_FILTER_ALL] + [tier.value for tier in RiskTier]


def _on_search_change() -> None:
    store.set_search_text(st.session_state.search_input)


def _on_risk_change() -> None:
    store.set_risk_filter(st.session_state.risk_input)


col_search, col_risk = st.columns([3, 1])
with col_search:
    st.text_input(
        t("label_search", _lang),
        key="search_input",
        on_change=_on_search_change,
    )
with col_risk:
    st.selectbox(
        t("label_risk", _lang),
        _RISK_OPTIONS,
        format_func=lambda v: t(f"risk_{v}", _lang),
        key="risk_input",
        on_change=_on_risk_change,
    )

# --- Globe + detail panel ---
col_globe, col_detail = st.columns([3, 1])
with col_globe:
    if globe is None:
        st.markdown(
            f"<div class='ow-advisory'>{t('globe_unavailable', _lang)}</div>",
            unsafe_allow_html=True,
        )
    else:
        hover = {
            globe_id: tooltip_text(record, _lang)
            for globe_id in globe.marker_ids()
            if (record := sync.record_for_marker(globe_id)) is not None
        }
        event = st.plotly_chart(
            globe.figure(hover),
            use_container_width=False,
            on_select="rerun",
            selection_mode="points",
            key="globe",
            config={"scrollZoom": True, "displayModeBar": False},
        )
        points = event.selection.points if event else []
        if points:
            picked = points[0].get("customdata", points[0].get("point_index"))
            if isinstance(picked, list):
                picked = picked[0]
            if picked != st.session_state.handled_globe_pick:
                st.session_state.handled_globe_pick = picked
                screen = globe.locate(int(picked))
                if screen is not None:
                    sync.on_pointer_click(screen)
                    st.rerun()
        else:
            st.session_state.handled_globe_pick = None

    if tooltip.visible:
        st.markdown(tooltip.render_html(_lang), unsafe_allow_html=True)

with col_detail:
    if detail.is_open:
        st.markdown(detail.render_html(_lang), unsafe_allow_html=True)
        if st.button(t("btn_close", _lang), key="close_detail"):
            sync.close_detail()
            st.rerun()

# --- Table (row click focuses the globe) ---
if table.records:
    table_event = st.dataframe(
        table.rows(_lang),
        use_container_width=True,
        hide_index=True,
        on_select="rerun",
        selection_mode="single-row",
        key="table",
    )
    rows = table_event.selection.rows if table_event else []
    if rows:
        row = rows[0]
        if row != st.session_state.handled_table_pick and row < len(table.records):
            st.session_state.handled_table_pick = row
            sync.focus_record(table.records[row])
            st.rerun()
    else:
        st.session_state.handled_table_pick = None
else:
    st.markdown(t("no_results", _lang))
