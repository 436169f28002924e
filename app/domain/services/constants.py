# Classification thresholds for the performance dashboard.
SALEABLE_MIN_UNITS = 20  # saleable when units sold is strictly above this
NON_SALEABLE_MAX_UNITS = 3  # non-saleable when 0 < units sold < this
TOP_N = 10  # cap for the saleable and non-saleable lists

# Bucket kinds
KIND_SALEABLE = "saleable"  # Top performing products
KIND_NON_SALEABLE = "non-saleable"  # Low performing products (1 or 2 units sold)
KIND_RATED = "rated"  # Products rated on the current UTC day

BUCKET_TITLES = {
    KIND_SALEABLE: "Top Performing Products",
    KIND_NON_SALEABLE: "Low Performing Products",
    KIND_RATED: "Current Rated Products",
}

BUCKET_EMPTY_MESSAGES = {
    KIND_SALEABLE: "No top performing products yet",
    KIND_NON_SALEABLE: "No low performing products yet",
    KIND_RATED: "No rated products yet",
}

# Distribution (two-slice summary)
SALEABLE_LABEL = "Saleable Products"
NON_SALEABLE_LABEL = "Non-Saleable Products"
DISTRIBUTION_COLORS = ("#4dab53", "#e38d1e")

NO_DISTRIBUTION_MESSAGE = "No product distribution data available"
NO_ANALYTICS_MESSAGE = "No analytics data available yet"

# Dashboard states
STATE_READY = "ready"
STATE_EMPTY = "empty"
STATE_ERROR = "error"

CURRENCY_SYMBOL = "₱"
