"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "오빗워치",
        "en": "OrbitWatch",
    },
    "label_search": {
        "ko": "이름 또는 NORAD ID 검색",
        "en": "Search name or NORAD ID",
    },
    "label_risk": {
        "ko": "위험 등급",
        "en": "Risk level",
    },
    "risk_all": {
        "ko": "전체",
        "en": "All",
    },
    "risk_high": {
        "ko": "높음",
        "en": "High",
    },
    "risk_medium": {
        "ko": "중간",
        "en": "Medium",
    },
    "risk_low": {
        "ko": "낮음",
        "en": "Low",
    },
    "stat_total": {
        "ko": "추적 객체",
        "en": "Tracked objects",
    },
    "stat_high": {
        "ko": "고위험",
        "en": "High risk",
    },
    "stat_leo": {
        "ko": "저궤도 (< 2000 km)",
        "en": "LEO (< 2000 km)",
    },
    "field_norad": {
        "ko": "NORAD ID",
        "en": "NORAD ID",
    },
    "field_name": {
        "ko": "이름",
        "en": "Name",
    },
    "field_altitude": {
        "ko": "고도",
        "en": "Altitude",
    },
    "field_inclination": {
        "ko": "경사각",
        "en": "Inclination",
    },
    "field_latitude": {
        "ko": "위도",
        "en": "Latitude",
    },
    "field_longitude": {
        "ko": "경도",
        "en": "Longitude",
    },
    "field_risk": {
        "ko": "위험 등급",
        "en": "Risk",
    },
    "tooltip_hint": {
        "ko": "클릭하면 상세 정보를 볼 수 있어요",
        "en": "Click for full details",
    },
    "detail_title": {
        "ko": "🛰️ 잔해 상세 정보",
        "en": "🛰️ Debris Details",
    },
    "btn_close": {
        "ko": "닫기",
        "en": "Close",
    },
    "advisory_high": {
        "ko": "⚠️ 위험 구역 — 500km 이하. 충돌 가능성이 높습니다.",
        "en": "⚠️ Critical zone — below 500km. High collision probability.",
    },
    "advisory_medium": {
        "ko": "⚡ 주의 구역 — 운용 위성 밀집 영역입니다.",
        "en": "⚡ Caution zone — active satellite region.",
    },
    "advisory_low": {
        "ko": "✅ 저위험 구역 — 덜 혼잡한 궤도입니다.",
        "en": "✅ Lower risk zone — less congested orbit.",
    },
    "placeholder_position": {
        "ko": "위치는 임의로 배치된 값이며 실제 궤도 위치가 아닙니다.",
        "en": "Position is a random placeholder, not a propagated ground track.",
    },
    "notice_sample": {
        "ko": "📱 샘플 데이터를 표시 중입니다 — 실시간 데이터는 서버를 실행하세요",
        "en": "📱 Showing sample data — run server for live data",
    },
    "loading": {
        "ko": "잔해 데이터를 불러오는 중",
        "en": "Loading debris data",
    },
    "globe_unavailable": {
        "ko": "3D 지구본을 불러오지 못했어요. 아래 통계와 표는 계속 사용할 수 있어요.",
        "en": "3D Globe Loading Failed. Check statistics and table below.",
    },
    "no_results": {
        "ko": "조건에 맞는 객체가 없어요",
        "en": "No objects match the current filter",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
