"""Column names used throughout the plotting system."""

# Observation table
OUTPUT_TYPE_COL: str = "OutputType"
STRATUM_AGE_COL: str = "StratumAgeYr"
TIME_SINCE_INITIAL_COL: str = "timeSinceInitialDateYr"
ESTIMATE_COL: str = "Estimate"
TOTAL_VARIANCE_COL: str = "TotalVariance"

# Derived observation columns
AGE_COL: str = "age"
STRATUM_COL: str = "stratum"
LOWER95_COL: str = "lower95"
UPPER95_COL: str = "upper95"

# Prediction table
PRED_AGE_COL: str = "AgeYr"
PRED_COL: str = "Pred"
PRED_VARIANCE_COL: str = "Variance"

# Derived prediction columns
PRED_LOWER95_COL: str = "predL95"
PRED_UPPER95_COL: str = "predU95"

STRATUM_SEPARATOR: str = "_"
