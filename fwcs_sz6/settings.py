"""
fwcs_sz6/settings.py

Settings for the console solver.
Values are read from the environment or a .env file via python-decouple;
with nothing set, the solver prints exactly its standard report.
"""

from decouple import config

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

# Include the "Processing Level ..." trace of the search in the report.
SHOW_SEARCH_TRACE = config('FWCS_SHOW_SEARCH_TRACE', default=True, cast=bool)

# Directory for solution_<n>.svg files; empty means no SVG output.
SVG_DIR = config('FWCS_SVG_DIR', default='')

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = config('FWCS_LOG_LEVEL', default='WARNING').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
            'level': LOG_LEVEL,
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
}
