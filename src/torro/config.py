"""
Library-wide constants. A few can be overridden from the environment.
"""
import os

# --- Client identity ---
CLIENT_PREFIX = "TO"    # two-letter Azureus-style client code
CLIENT_VERSION = "0010"
PEER_ID_LENGTH = 20

# --- Metainfo ---
PIECE_HASH_LENGTH = 20  # SHA-1 digest size

# --- Decoder bounds ---
# Integer literals and string lengths are parsed as unsigned 32-bit magnitudes.
MAX_INTEGER_MAGNITUDE = 2**32 - 1
MAX_NESTING_DEPTH = int(os.environ.get("TORRO_MAX_NESTING_DEPTH", "256"))
