# aminpur/icons.py
from __future__ import annotations

from enum import Enum


class IconName(str, Enum):
    HOME = "Home"
    LAYOUT_DASHBOARD = "LayoutDashboard"
    GRADUATION_CAP = "GraduationCap"
    STETHOSCOPE = "Stethoscope"
    USER_ROUND = "UserRound"
    TRUCK = "Truck"
    BUS = "Bus"
    MAP_PIN = "MapPin"
    PHONE_CALL = "PhoneCall"
    BUILDING = "Building2"
    STORE = "Store"
    INFO = "Info"
    MAIL = "Mail"
    PHONE = "Phone"
    UNKNOWN = "Unknown"


class ColorName(str, Enum):
    BLUE = "bg-blue-500"
    GREEN = "bg-green-500"
    EMERALD = "bg-emerald-500"
    RED = "bg-red-500"
    ROSE = "bg-rose-500"
    ORANGE = "bg-orange-500"
    AMBER = "bg-amber-500"
    PURPLE = "bg-purple-500"
    INDIGO = "bg-indigo-500"
    TEAL = "bg-teal-500"
    SLATE = "bg-slate-500"
    UNKNOWN = "unknown"


# emoji shown by the HTML pages
ICON_GLYPHS = {
    IconName.HOME: "🏠",
    IconName.LAYOUT_DASHBOARD: "🗂️",
    IconName.GRADUATION_CAP: "🎓",
    IconName.STETHOSCOPE: "🩺",
    IconName.USER_ROUND: "👤",
    IconName.TRUCK: "🚚",
    IconName.BUS: "🚌",
    IconName.MAP_PIN: "📍",
    IconName.PHONE_CALL: "📞",
    IconName.BUILDING: "🏢",
    IconName.STORE: "🏪",
    IconName.INFO: "ℹ️",
    IconName.MAIL: "✉️",
    IconName.PHONE: "☎️",
    IconName.UNKNOWN: "❔",
}

_ICONS = {i.value: i for i in IconName if i is not IconName.UNKNOWN}
_COLORS = {c.value: c for c in ColorName if c is not ColorName.UNKNOWN}


def resolve_icon(name: str | None) -> IconName:
    return _ICONS.get((name or "").strip(), IconName.UNKNOWN)


def resolve_color(name: str | None) -> ColorName:
    return _COLORS.get((name or "").strip(), ColorName.UNKNOWN)


def glyph_for(name: str | None) -> str:
    return ICON_GLYPHS[resolve_icon(name)]
