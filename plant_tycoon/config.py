"""
Configuration constants for the Plant Tycoon simulation.
"""

# Simulation Time Unit: Milliseconds
SESSION_TIME = 600000  # 10 minutes
DECISION_INTERVAL_MS = 1000  # How often a scripted player acts

# Garden
PLOT_COUNT = 6
MAX_GROWTH = 100
GROWTH_STEP = 10
GROWTH_INTERVAL_MS = 2000  # One growth tick every 2 seconds

# Economy
STARTING_BALANCE = 100
SEED_COST = 10
DEFAULT_SEED_TYPE = "common"

# Plant value
MAX_HEALTH = 100
BASE_VALUE_BY_SPECIES = {
    "common": 20,
}
DEFAULT_BASE_VALUE = 20
STRICT_SPECIES = False  # True -> unknown species can't be moved to the nursery

# Recognized option keys for TycoonGame(settings)
DEFAULT_SETTINGS = {
    "PLOT_COUNT": PLOT_COUNT,
    "SEED_COST": SEED_COST,
    "GROWTH_STEP": GROWTH_STEP,
    "GROWTH_INTERVAL_MS": GROWTH_INTERVAL_MS,
    "MAX_GROWTH": MAX_GROWTH,
    "BASE_VALUE_BY_SPECIES": BASE_VALUE_BY_SPECIES,
    "DEFAULT_BASE_VALUE": DEFAULT_BASE_VALUE,
    "STRICT_SPECIES": STRICT_SPECIES,
    "STARTING_BALANCE": STARTING_BALANCE,
}

# Scenarios
# Scenario A: the stock six-plot garden
SCENARIO_A = {
    "NAME": "Scenario A (Baseline)",
    "PLOT_COUNT": 6,
}

# Scenario B: a bigger garden with faster growth
SCENARIO_B = {
    "NAME": "Scenario B (Expanded)",
    "PLOT_COUNT": 12,
    "GROWTH_INTERVAL_MS": 1500,
}


def build_settings(overrides=None):
    """Merge a partial settings dict over DEFAULT_SETTINGS.

    Scenario-only keys like NAME are ignored. Any other unknown key raises KeyError.
    """
    settings = dict(DEFAULT_SETTINGS)
    settings["BASE_VALUE_BY_SPECIES"] = dict(BASE_VALUE_BY_SPECIES)
    for key, value in (overrides or {}).items():
        if key == "NAME":
            continue
        if key not in DEFAULT_SETTINGS:
            raise KeyError(f"Unknown setting: {key}")
        settings[key] = value
    return settings
