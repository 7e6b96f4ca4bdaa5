"""Default configuration constants for the Store Operating Model."""

# Processes, in display order
PROCESSES = ["Decant", "Loadfill", "Packaway", "Digital", "Online", "Backfill"]
PROCESS_LABELS = {"Digital": "Digital Shopkeeping"}

# Processes that receive routed cartons (Decant always takes the full inbound)
DESTINATION_PROCESSES = ["Loadfill", "Packaway", "Digital", "Online", "Backfill"]

# Category split keys
CATEGORIES = ["Demand", "Non-demand", "Markup", "Clearance", "New lines", "LP", "OMS"]
EXTRA_CATEGORIES = ["Markup", "Clearance", "New lines", "LP"]

UNIT_TYPES = ["cartons", "online"]

# Weekly model inputs
DEFAULT_INPUTS = {
    "cartons_delivered": 12000,
    "online_units": 1600,
    "hourly_rate": 32.0,
    "stores": 270,
    "weeks_per_year": 52,
}
WEEKS_PER_YEAR = 52

DEFAULT_SPLIT = {
    "Demand": 0.68,
    "Non-demand": 0.10,
    "Markup": 0.02,
    "Clearance": 0.02,
    "New lines": 0.11,
    "LP": 0.02,
    "OMS": 0.05,
}

# Per-process config: unit, roster toggle, hours per 1000 units, roster hours
DEFAULT_CURRENT = {
    "Decant":   {"unit": "cartons", "use_roster": False, "rate": 13, "roster": 0},
    "Loadfill": {"unit": "cartons", "use_roster": False, "rate": 40, "roster": 0},
    "Packaway": {"unit": "cartons", "use_roster": False, "rate": 30, "roster": 0},
    "Digital":  {"unit": "online",  "use_roster": False, "rate": 88, "roster": 0},
    "Online":   {"unit": "online",  "use_roster": False, "rate": 55, "roster": 0},
    "Backfill": {"unit": "cartons", "use_roster": False, "rate": 15, "roster": 0},
}

DEFAULT_NEW = {
    "Decant":   {"unit": "cartons", "use_roster": False, "rate": 12, "roster": 0},
    "Loadfill": {"unit": "cartons", "use_roster": False, "rate": 36, "roster": 0},
    "Packaway": {"unit": "cartons", "use_roster": False, "rate": 32, "roster": 0},
    "Digital":  {"unit": "online",  "use_roster": False, "rate": 92, "roster": 0},
    "Online":   {"unit": "online",  "use_roster": False, "rate": 50, "roster": 0},
    "Backfill": {"unit": "cartons", "use_roster": False, "rate": 15, "roster": 0},
}

# Issue scenarios: fractional hour inflation per process
ISSUES = [
    {"id": "late", "name": "Late DC Delivery", "impact": {"Decant": 0.08, "Loadfill": 0.04}},
    {"id": "non_dem", "name": "High Non-demand Mix", "impact": {"Packaway": 0.08, "Loadfill": 0.03}},
    {"id": "roster", "name": "Roster Gaps", "impact": {"Decant": 0.07, "Loadfill": 0.07, "Online": 0.07}},
]
DEFAULT_MITIGATION = 0.5


def _extras(route: dict) -> dict:
    return {c: dict(route) for c in EXTRA_CATEGORIES}


# Category -> process routing, per preset and operating model.
# Fractions for each category sum to 1.
ALLOCATION_PRESETS = {
    "v1": {
        "label": "v1 - Baseline mapping",
        "current": {
            "Demand": {"Loadfill": 1.0},
            "Non-demand": {"Packaway": 0.6, "Backfill": 0.4},
            **_extras({"Loadfill": 0.7, "Digital": 0.3}),
            "OMS": {"Loadfill": 0.8, "Packaway": 0.2},
        },
        "new": {
            "Demand": {"Loadfill": 1.0},
            "Non-demand": {"Packaway": 0.8, "Loadfill": 0.2},
            **_extras({"Digital": 0.7, "Loadfill": 0.3}),
            "OMS": {"Digital": 1.0},
        },
    },
    "v2": {
        "label": "v2 - Refined flow",
        "current": {
            "Demand": {"Loadfill": 1.0},
            "Non-demand": {"Packaway": 0.8, "Backfill": 0.2},
            **_extras({"Loadfill": 0.7, "Digital": 0.3}),
            "OMS": {"Online": 0.8, "Packaway": 0.2},
        },
        "new": {
            "Demand": {"Loadfill": 1.0},
            "Non-demand": {"Packaway": 1.0},
            **_extras({"Digital": 1.0}),
            "OMS": {"Online": 1.0},
        },
    },
}
DEFAULT_ALLOCATION_PRESET = "v1"

# Benefit = current - new. Signed unless clamped.
CLAMP_BENEFIT = False

# Which model a forecast override replaces: "current", "new" or "both"
FORECAST_TARGETS = ["current", "new", "both"]
DEFAULT_FORECAST_TARGET = "current"

# Forecast workbook import
FORECAST_SHEET_NAMES = ["forecast roster hours", "forecast hours alternate"]

# Normalised (letters only) alias -> process. Longest aliases are tried first.
PROCESS_ALIASES = {
    "decant": "Decant",
    "loadfill": "Loadfill",
    "sequence": "Loadfill",
    "lf": "Loadfill",
    "packaway": "Packaway",
    "pa": "Packaway",
    "digitalshopkeeping": "Digital",
    "shopkeeping": "Digital",
    "digital": "Digital",
    "online": "Online",
    "oms": "Online",
    "backfill": "Backfill",
    "bf": "Backfill",
}
# Aliases shorter than this must match the whole name
MIN_FUZZY_ALIAS_LENGTH = 4
# Rows whose normalised name contains any of these are totals, not processes
SUMMARY_ROW_MARKERS = ("total",)

# Chart colours
NODE_COLORS = {
    "Inbound": "#1f2937",
    "Decant": "#2563eb",
    "Demand": "#16a34a",
    "Non-demand": "#f59e0b",
    "Markup": "#8b5cf6",
    "Clearance": "#ef4444",
    "New lines": "#0ea5e9",
    "LP": "#10b981",
    "OMS": "#eab308",
    "Loadfill": "#16a34a",
    "Packaway": "#f59e0b",
    "Digital": "#0ea5e9",
    "Online": "#0ea5e9",
    "Backfill": "#334155",
}
CURRENT_COLOR = "#0ea5e9"
NEW_COLOR = "#10b981"
INCREASE_COLOR = "#ef4444"
