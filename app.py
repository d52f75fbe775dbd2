"""PassMeter -- Streamlit web interface."""

import streamlit as st

from passmeter import PasswordClassifier, meter_message, passwords_match

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_GAUGE = _LUCIDE.format(s=32, paths=(
    '<path d="m12 14 4-4"/><path d="M3.34 19a10 10 0 1 1 17.32 0"/>'
))

ICON_CIRCLE_CHECK = _LUCIDE.format(s=18, paths=(
    '<circle cx="12" cy="12" r="10"/><path d="m9 12 2 2 4-4"/>'
))

ICON_CIRCLE_X = _LUCIDE.format(s=18, paths=(
    '<circle cx="12" cy="12" r="10"/><path d="m15 9-6 6"/><path d="m9 9 6 6"/>'
))

# Indexed by ``verdict - 1``.
MESSAGES = [
    "Strong password",
    "Medium strength password",
    "Too many repeated characters in a row",
    "Too many sequential characters such as 'abc' or '321'",
    "Contains a well-known password",
    "Too short - use at least 8 characters",
    "Too few different characters",
]

COLORS = {"strong": "#388e3c", "medium": "#fbc02d", "weak": "#d32f2f"}
PROGRESS = {"strong": 1.0, "medium": 0.6, "weak": 0.25}

classifier = PasswordClassifier()

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Meter",
    page_icon="\U0001f6e1\ufe0f",
    layout="centered",
)

# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_GAUGE} Password Meter</h1>',
    unsafe_allow_html=True,
)
st.caption(
    "Checks are done locally: length, repeated and sequential characters, "
    "character variety and a list of well-known passwords.  \n"
    "Your password is **NEVER** sent anywhere."
)

# ── Inputs ────────────────────────────────────────────────────────────────

password = st.text_input(
    "Password",
    type="password",
    placeholder="Enter a password\u2026",
    autocomplete="off",
)
repeat = st.text_input(
    "Repeat password",
    type="password",
    placeholder="Repeat the password\u2026",
    autocomplete="off",
)

# ── Meter ─────────────────────────────────────────────────────────────────

if password:
    verdict = classifier.classify(password)
    color = COLORS[verdict.bucket]
    st.markdown(
        f"**Strength:** <span style='color:{color}'>"
        f"{meter_message(verdict, MESSAGES)}</span>",
        unsafe_allow_html=True,
    )
    st.progress(PROGRESS[verdict.bucket])

    if not verdict.accepted:
        st.warning("Please choose a different password.", icon="\u26a0\ufe0f")

if repeat:
    same = passwords_match(password, repeat)
    icon = ICON_CIRCLE_CHECK if same else ICON_CIRCLE_X
    label = "Passwords match" if same else "Passwords do not match"
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px;'
        f'color:{COLORS["strong" if same else "weak"]}">{icon} {label}</p>',
        unsafe_allow_html=True,
    )
