"""
Configuration settings for the Derma Care service.
Contains classifier parameters, clinical thresholds, and system constants.
"""


# --- Stage 1: Feature Synthesis Parameters ---

# Linear-congruential generator constants. The generator output is
# seed / LCG_MODULUS, so every draw lies in [0, 1).
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

# Seed derivation per feature cluster: seed = hash * multiplier + offset.
# Each cluster owns an independent stream; draw order inside a stream is fixed.
FEATURE_STREAM_SEEDS = {
    "color": (2, 1),
    "texture": (3, 7),
    "pattern": (5, 13),
    "clinical": (7, 19),
}


# --- Stage 2: Profile Matching Parameters ---

# Clinical weight of each feature when scoring against a diagnostic profile.
# Inflammation is the most important clinical sign, asymmetry is critical
# for serious conditions, uniformity is a supporting feature.
FEATURE_WEIGHTS = {
    "redness": 1.2,
    "texture": 1.3,
    "inflammation": 1.5,
    "asymmetry": 1.4,
    "uniformity": 1.0,
}

# Maximum penalty applied to an in-range value sitting on the range edge.
IN_RANGE_MAX_PENALTY = 0.2

# Graduated scores for values falling outside a profile range.
# (distance limit, score) pairs are checked in order; beyond the last limit
# the score is max(0, FAR_MISS_BASE - distance).
NEAR_MISS_SCORES = [
    (0.15, 0.70),
    (0.30, 0.40),
]
FAR_MISS_BASE = 0.20


# --- Stage 3: Confidence Estimation ---

# Final confidence is clamped to this window and rounded to 2 decimals.
CONFIDENCE_BOUNDS = (0.70, 0.93)

# Applied when the feature vector fails the clinical consistency check.
INCONSISTENCY_PENALTY = 0.85

# Mapping of confidence to a qualitative accuracy level shown to the user.
# First class whose minimum is reached wins.
ACCURACY_CLASSES = [
    {"min": 0.85, "label": "High", "color_hint": "green"},
    {"min": 0.75, "label": "Good", "color_hint": "blue"},
    {"min": 0.65, "label": "Fair", "color_hint": "yellow"},
    {"min": 0.00, "label": "Low", "color_hint": "red"},
]


# --- Stage 4: Affected Area Estimation ---

# Percentage of the visible area, rounded to an integer.
AFFECTED_AREA_BOUNDS = (0, 60)

# Serious conditions are focal lesions; their area never exceeds this.
SERIOUS_AREA_CAP = 18

# Moderate inflammatory conditions spread further when inflammation is high.
MODERATE_SPREAD_INFLAMMATION = 0.65
MODERATE_SPREAD_FACTOR = 1.2


# --- Application State ---

# Newest-first history list is truncated to this many entries.
HISTORY_LIMIT = 50

# Number of most recent months reported by the progress tracker.
PROGRESS_MONTHS = 6

# Storage keys for the per-session key-value blobs.
STORAGE_KEY_PROFILE = "userProfile"
STORAGE_KEY_HISTORY = "skinHistory"
STORAGE_KEY_DETAILED_MODE = "isDetailedMode"
STORAGE_KEY_FIRST_TIME = "isFirstTime"

# Default DuckDB file, overridable with the DUCKDB_PATH environment variable.
DEFAULT_DUCKDB_PATH = "data/app.duckdb"

# Session cookie lifetime (1 day).
SESSION_COOKIE_NAME = "session_id"
SESSION_COOKIE_MAX_AGE = 86400
