"""View models for the table, hover tooltip and detail panel.

Each holds only what it was last told to show; the Streamlit shell reads
them on every rerun. HTML output is escaped and self-contained so it can be
passed straight to st.markdown(..., unsafe_allow_html=True).
"""

from __future__ import annotations

import html
import math

from orbitwatch.i18n import t
from orbitwatch.models import DebrisRecord, RiskTier, ScreenPoint

# Tooltip is drawn right of and above the cursor so it does not cover the marker
TOOLTIP_OFFSET = (15.0, -10.0)

_BADGE_COLORS: dict[RiskTier, tuple[str, str]] = {
    # tier: (text/border colour, background)
    RiskTier.HIGH: ("#ff3d3d", "rgba(255,61,61,0.2)"),
    RiskTier.MEDIUM: ("#ffd700", "rgba(255,215,0,0.2)"),
    RiskTier.LOW: ("#00ff88", "rgba(0,255,136,0.2)"),
}


def format_altitude(altitude_km: float) -> str:
    if not math.isfinite(altitude_km):
        return "—"
    return f"{altitude_km:,.0f} km"


def format_inclination(inclination: str | None) -> str:
    return f"{inclination}°" if inclination else "—"


def format_degrees(value: float) -> str:
    return f"{value:.2f}°"


def advisory_for(tier: RiskTier, lang: str = "en") -> str:
    return t(f"advisory_{tier.value}", lang)


def risk_badge_html(tier: RiskTier) -> str:
    color, background = _BADGE_COLORS[tier]
    return (
        f'<span style="padding:2px 10px; border-radius:20px; font-weight:bold;'
        f" margin-left:5px; background:{background}; color:{color};"
        f' border:1px solid {color};">{tier.value.upper()}</span>'
    )


def tooltip_text(record: DebrisRecord, lang: str = "en") -> str:
    """Tooltip body, also used as the Plotly hover label. Tier shown in badge colour."""
    color, _ = _BADGE_COLORS[record.risk_tier]
    return "<br>".join(
        [
            f"<b>{html.escape(record.name)}</b>",
            f"{t('field_norad', lang)}: {record.catalog_id}",
            f"{t('field_altitude', lang)}: {format_altitude(record.altitude_km)}",
            f"{t('field_inclination', lang)}: {format_inclination(record.inclination)}",
            f"{t('field_risk', lang)}: "
            f"<span style='color:{color}'>{record.risk_tier.value.upper()}</span>",
        ]
    )


class TableView:
    """Ordered rows for the catalog table."""

    def __init__(self) -> None:
        self.records: tuple[DebrisRecord, ...] = ()

    def show(self, records: tuple[DebrisRecord, ...]) -> None:
        self.records = tuple(records)

    def rows(self, lang: str = "en") -> list[dict[str, str | int]]:
        return [
            {
                t("field_name", lang): r.name,
                t("field_norad", lang): r.catalog_id,
                t("field_altitude", lang): format_altitude(r.altitude_km),
                t("field_inclination", lang): format_inclination(r.inclination),
                t("field_risk", lang): r.risk_tier.value.upper(),
            }
            for r in self.records
        ]


class TooltipView:
    def __init__(self) -> None:
        self.record: DebrisRecord | None = None
        self.position: ScreenPoint | None = None

    @property
    def visible(self) -> bool:
        return self.record is not None

    def show(self, record: DebrisRecord, at: ScreenPoint) -> None:
        dx, dy = TOOLTIP_OFFSET
        self.record = record
        self.position = ScreenPoint(at.x + dx, at.y + dy)

    def hide(self) -> None:
        self.record = None
        self.position = None

    def render_html(self, lang: str = "en") -> str:
        if self.record is None or self.position is None:
            return ""
        r = self.record
        return (
            f'<div class="ow-tooltip" style="position:fixed; left:{self.position.x:.0f}px;'
            f' top:{self.position.y:.0f}px;">'
            f'<div class="ow-title">🛰️ {html.escape(r.name)}</div>'
            f"<div>{t('field_norad', lang)}: {r.catalog_id}</div>"
            f"<div>{t('field_altitude', lang)}: {format_altitude(r.altitude_km)}</div>"
            f"<div>{t('field_inclination', lang)}: {format_inclination(r.inclination)}</div>"
            f"<div>{t('field_risk', lang)}: {risk_badge_html(r.risk_tier)}</div>"
            f'<div class="ow-hint">{t("tooltip_hint", lang)}</div>'
            "</div>"
        )


class DetailPanel:
    """Single-instance detail panel. Opening a record replaces the previous one."""

    def __init__(self) -> None:
        self.record: DebrisRecord | None = None

    @property
    def is_open(self) -> bool:
        return self.record is not None

    def open(self, record: DebrisRecord) -> None:
        self.record = record

    def close(self) -> None:
        self.record = None

    def render_html(self, lang: str = "en") -> str:
        if self.record is None:
            return ""
        r = self.record
        rows = [
            (t("field_norad", lang), str(r.catalog_id)),
            (t("field_altitude", lang), format_altitude(r.altitude_km)),
            (t("field_inclination", lang), format_inclination(r.inclination)),
            (t("field_latitude", lang), format_degrees(r.latitude)),
            (t("field_longitude", lang), format_degrees(r.longitude)),
        ]
        body = "".join(
            f'<div><span class="ow-label">{label}:</span> {value}</div>'
            for label, value in rows
        )
        footnote = (
            f'<div class="ow-hint">{t("placeholder_position", lang)}</div>'
            if r.position_is_placeholder
            else ""
        )
        return (
            '<div class="ow-detail">'
            f'<div class="ow-title">{t("detail_title", lang)}</div>'
            f'<div class="ow-name">{html.escape(r.name)}</div>'
            f'<div class="ow-grid">{body}</div>'
            f"<div class=\"ow-risk\">{t('field_risk', lang)}: {risk_badge_html(r.risk_tier)}</div>"
            f'<div class="ow-hint">{advisory_for(r.risk_tier, lang)}</div>'
            f"{footnote}"
            "</div>"
        )
