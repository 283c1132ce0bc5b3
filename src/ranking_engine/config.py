# ADP at or beyond which a player's ADP component bottoms out at 0
MAX_ADP = 240

# Custom-formula coefficients
POSITION_COEF = 0.35
ADP_COEF = 0.25
UPSIDE_COEF = 0.15
OFFENSE_COEF = 0.15
ROOKIE_COEF = 0.10
RISK_COEF = 0.10

# Raw UI knob defaults (role weights on a 0-200 scale, knobs on 0-100)
DEFAULT_POSITION_WEIGHTS = {"QB": 100, "RB": 100, "WR": 100, "TE": 100}
DEFAULT_ROOKIE_BOOST = 20
DEFAULT_RISK_AVERSE = 50
DEFAULT_UPSIDE_WEIGHT = 50
DEFAULT_ADP_ANCHOR = 60
DEFAULT_OFFENSE_WEIGHT = 50

# Raw UI knob bounds (inclusive); out-of-range inputs are clamped
POSITION_WEIGHT_RANGE = (0, 200)
KNOB_RANGE = (0, 100)

# Raw knob value that maps to 1.0
KNOB_SCALE = 100

# Filter value meaning "every position"
ALL_POSITIONS = "ALL"

# Summary view sizes
SUMMARY_TOP_N = 24
BEST_AVAILABLE_LIMIT = 10
PREVIEW_ROUNDS = 3
