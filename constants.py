"""
PatrolLink — Shared Constants
All modules import from here. Single source of truth.
"""

# === Classification Confidence ===
DEFAULT_CONFIDENCE = 0.85
HIGH_CONFIDENCE = 0.95         # safety, stop, synthesized wait/stop brackets
LOW_CONFIDENCE = 0.5           # unknown clauses, ellipsis fallback

# === Context Memory Defaults ===
DEFAULT_SPEED_PCT = 50
DEFAULT_HEADING_DEG = 0

# === Quantities ===
PERCENT_MIN = 0
PERCENT_MAX = 100
CM_PER_METER = 100
SECONDS_PER_MINUTE = 60
MS_PER_SECOND = 1000
DEFAULT_ZOOM_STEP = 1

# Canonical unit symbols produced by the quantity extractor
UNIT_PERCENT = "%"
UNIT_SECONDS = "s"
UNIT_MINUTES = "min"
UNIT_METERS = "m"
UNIT_CENTIMETERS = "cm"
UNIT_DEGREES = "deg"
CANONICAL_UNITS = (
    UNIT_PERCENT,
    UNIT_SECONDS,
    UNIT_MINUTES,
    UNIT_METERS,
    UNIT_CENTIMETERS,
    UNIT_DEGREES,
)

# === Lowering ===
UNKNOWN_TOKEN = "unknown"
