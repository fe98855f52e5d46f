"""
Configuration constants for fatcat.
"""

VERSION = "0.1.0"

# --- Size Units (binary) ---
KB = 1024
MB = KB * 1024
GB = MB * 1024
TB = GB * 1024

# --- Size Distribution Buckets ---
# Edges are kept as the historical byte values; do not "normalise" them,
# that would move files near 500/100 MB between buckets.
HUGE_FILE_BYTES = 1_073_741_824    # >= 1 GB
LARGE_FILE_BYTES = 524_288_000     # 500 MB - 1 GB
MEDIUM_FILE_BYTES = 104_857_600    # 100 MB - 500 MB

# --- Defaults ---
DEFAULT_PATH = "./"
DEFAULT_MIN_SIZE_MB = 100
DEFAULT_TOP_N = 20
# Threads reading directories; 1 walks sequentially
DEFAULT_MAX_WORKERS = 4

# --- Progress Spinner ---
PROGRESS_REFRESH_EVERY = 500  # entries between postfix updates

# --- Console Rendering ---
BOX_MIN_WIDTH = 40
NO_RESULTS_MESSAGE = "No files found matching criteria."

# --- Log File ---
LOG_TITLE = "FATCAT - Scan Report"
LOG_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# --- Exit Codes ---
EXIT_OK = 0
EXIT_BAD_ROOT = 1
EXIT_LOG_WRITE_FAILED = 3
EXIT_INTERRUPTED = 130
