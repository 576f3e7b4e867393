"""
FanSelect configuration and constants.
"""

from enum import Enum


class AirflowUnit(str, Enum):
    M3H = "m³/h"  # Base unit: cubic metres per hour
    CFM = "CFM"   # Cubic feet per minute


class PressureUnit(str, Enum):
    PA = "Pa"      # Base unit: pascal
    INWG = "inWG"  # Inches of water gauge


# Conversion factors from base units
M3H_TO_CFM = 0.588578
PA_TO_INWG = 0.00401463

SECONDS_PER_HOUR = 3600.0

# Customer-facing filter defaults
DEFAULT_FILTER_AIRFLOW = 15000.0   # m³/h
DEFAULT_FILTER_PRESSURE = 400.0    # Pa
DEFAULT_FILTER_TEMPERATURE = 25.0  # °C

# Comparison limits
MIN_COMPARE_FANS = 2
MAX_COMPARE_FANS = 4

# Simulator: the default design point sits at this fraction of max airflow
DEFAULT_REQUIREMENT_FRACTION = 0.6

# Curve editor: step used when suggesting the next performance point
NEXT_POINT_AIRFLOW_STEP = 5000.0   # m³/h
NEXT_POINT_PRESSURE_FACTOR = 0.9
NEXT_POINT_POWER_STEP = 0.5        # kW

# Resampling
DEFAULT_RESAMPLE_POINTS = 50

# Economic analysis defaults
DEFAULT_ENERGY_COST = 5000.0  # rial per kWh
DEFAULT_HOURS_PER_DAY = 8.0
DEFAULT_DAYS_PER_YEAR = 250.0

# CORS: local frontend dev servers
CORS_ORIGINS = [
    "http://localhost:5173",  # Vite default
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]
