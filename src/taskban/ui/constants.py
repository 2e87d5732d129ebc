"""Icons and shared UI constants."""

ICON_ADD = "+"
ICON_BOARD = "📋"
ICON_CALENDAR = "📅"
ICON_COLLAPSED = "▸"
ICON_EXPANDED = "▾"
ICON_FILTER = "🔍"
ICON_USER = "👤"
ICON_WARNING = "⚠"

PRIORITY_STYLES = {
    "low": "bold blue",
    "medium": "bold yellow",
    "high": "bold dark_orange",
    "urgent": "bold red",
}
