"""QSS stylesheet and mode colours for Pom Pilot."""

from __future__ import annotations

from ..timer.state import Mode, MODE_ACCENTS

# ── palette ──────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":           "#FFFFFF",
    "bg_secondary": "#F4F4F5",
    "text":         "#18181B",
    "text_muted":   "#71717A",
    "border":       "#D4D4D8",
    "primary":      "#000000",
    "on_primary":   "#FFFFFF",
    "track":        "#E4E4E7",
    "fill":         "#8E8E93",
}

ACTIVE_MODE_COLOR = MODE_ACCENTS[Mode.WORK]
INACTIVE_MODE_COLOR = "#EFEFF0"


def mode_button_style(selected: bool) -> str:
    """Inline style for one mode-selector button."""
    if selected:
        bg, fg = ACTIVE_MODE_COLOR, "#FFFFFF"
    else:
        bg, fg = INACTIVE_MODE_COLOR, PALETTE["text"]
    return (
        f"background-color: {bg}; color: {fg}; border: none;"
        " border-radius: 8px; padding: 6px 14px;"
        " font-size: 14px; font-weight: 600;"
    )


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] = PALETTE) -> str:
    p = palette
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-size: 14px;
    }}

    QLabel#timeLabel {{
        font-size: 96px;
        font-weight: 600;
    }}

    QLabel#sessionsLabel {{
        color: {p['text_muted']};
        font-size: 13px;
    }}

    QLabel#sliderLabel {{
        font-size: 15px;
        font-weight: 600;
    }}

    QLabel#titleLabel {{
        font-size: 24px;
        font-weight: 600;
    }}

    QPushButton#primaryButton {{
        background-color: {p['primary']};
        color: {p['on_primary']};
        border: none;
        border-radius: 10px;
        padding: 10px 26px;
        font-size: 15px;
        font-weight: 600;
    }}

    QPushButton#secondaryButton {{
        background-color: {p['bg']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 10px;
        padding: 10px 22px;
        font-size: 15px;
        font-weight: 600;
    }}

    QPushButton#linkButton {{
        background-color: transparent;
        border: none;
        font-size: 13px;
        font-weight: 500;
        padding: 10px;
    }}

    QSlider::groove:horizontal {{
        height: 4px;
        background: {p['track']};
        border-radius: 2px;
    }}

    QSlider::sub-page:horizontal {{
        background: {p['primary']};
        border-radius: 2px;
    }}

    QSlider::handle:horizontal {{
        background: {p['bg']};
        border: 1px solid {p['border']};
        width: 18px;
        margin: -8px 0;
        border-radius: 9px;
    }}

    QFrame#divider {{
        background-color: {p['border']};
    }}
    """
