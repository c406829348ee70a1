"""Text shown on the dashboard and splash screens."""

from __future__ import annotations

LOGO_NAME = """
  ███╗   ██╗  ███████╗  ██╗  ██╗  ██╗   ██╗  ███████╗
  ████╗  ██║  ██╔════╝  ╚██╗██╔╝  ██║   ██║  ██╔════╝
  ██╔██╗ ██║  █████╗     ╚███╔╝   ██║   ██║  ███████╗
  ██║╚██╗██║  ██╔══╝     ██╔██╗   ██║   ██║  ╚════██║
  ██║ ╚████║  ███████╗  ██╔╝ ██╗  ╚██████╔╝  ███████║
  ╚═╝  ╚═══╝  ╚══════╝  ╚═╝  ╚═╝   ╚═════╝   ╚══════╝
"""

_VERSION_MARKER = "version "
_AVAILABLE_MARKER = " available"

# Status codes recognised inside HTML error pages, checked in this order.
_HTML_STATUS_MESSAGES = (
    ("502", "❌ HTTP 502 Bad Gateway"),
    ("503", "❌ HTTP 503 Service Unavailable"),
    ("504", "❌ HTTP 504 Gateway Timeout"),
    ("500", "❌ HTTP 500 Internal Server Error"),
    ("429", "⏳ HTTP 429 Rate Limited"),
)


def extract_version_from_message(message: str) -> str | None:
    """Pull the version out of a message like 'New version v0.9.1 available!'."""
    start = message.find(_VERSION_MARKER)
    if start < 0:
        return None
    after_version = message[start + len(_VERSION_MARKER):]
    end = after_version.find(_AVAILABLE_MARKER)
    if end < 0:
        return None
    return after_version[:end]


def format_compact_timestamp(timestamp: str) -> str:
    """Turn 'YYYY-MM-DD HH:MM:SS' into 'MM-DD HH:MM:SS'; other text is returned as is."""
    date_part, sep, time_part = timestamp.partition(" ")
    if not sep:
        return timestamp
    encoded = date_part.encode("utf-8")
    # Skip the five bytes of "YYYY-" only when that lands on a character boundary.
    if len(encoded) < 5 or (len(encoded) > 5 and 0x80 <= encoded[5] <= 0xBF):
        return timestamp
    month_day = encoded[5:].decode("utf-8")
    return f"{month_day} {time_part}"


def clean_http_error_message(msg: str) -> str:
    """Reduce an HTTP error message to its essentials; other messages pass unchanged."""
    if "<html>" in msg or "<!DOCTYPE" in msg:
        for code, text in _HTML_STATUS_MESSAGES:
            if code in msg:
                return text
        return "❌ HTTP Error (server returned HTML)"

    status_pos = msg.find("status ")
    if status_pos >= 0:
        rest = msg[status_pos:]
        status_end = rest.find(":")
        if status_end < 0:
            status_end = rest.find("<")
        if status_end >= 0:
            status_part = msg[: status_pos + status_end]
            error_start = status_part.rfind("error")
            if error_start < 0:
                error_start = status_part.rfind("Error")
            if error_start >= 0:
                return f"❌ {status_part[error_start:]}"
            return f"❌ HTTP {status_part[status_pos:]}"

    return msg


def uptime_text(seconds: float) -> str:
    """Format an uptime in whole seconds as days, hours, minutes and seconds."""
    total = int(seconds)
    days, remainder = divmod(total, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"UPTIME: {days}d {hours}h {minutes}m {secs}s"


def title_text(
    version: str, update_available: bool, latest_version: str | None
) -> str:
    """The dashboard's title line, announcing an update when one is available."""
    if not update_available:
        return f"=== NEXUS PROVER v{version} ==="
    if latest_version is not None:
        return (
            f"=== NEXUS PROVER v{version} → 🚀 {latest_version} UPDATE AVAILABLE ==="
        )
    return f"=== NEXUS PROVER v{version} → 🚀 UPDATE AVAILABLE ==="


def splash_lines(version: str) -> list[str]:
    """Lines of the splash screen: the logo, a spacer and the version."""
    lines = LOGO_NAME.strip("\n").splitlines()
    lines.append(" ")
    lines.append(f"Version {version}")
    return lines