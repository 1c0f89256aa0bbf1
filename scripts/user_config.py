"""Identicon User Configuration.

This is the user-facing configuration file. Modify settings here to customize
where and how identicons are generated. Expert defaults are in
src/identicon/schemas/param.py

Usage:
    python scripts/run_identicon.py banana -c scripts/user_config.py
"""

CONFIG = {
    # ========================================================================
    # OUTPUT
    # ========================================================================
    "OUTPUT_DIR": ".",        # Images are written as <OUTPUT_DIR>/<input>.png
    "OVERWRITE": True,        # False: refuse to replace an existing image

    # ========================================================================
    # DIGEST
    # ========================================================================
    "ALGORITHM": "md5",       # "md5", "blake2b" or "shake_128" (all 16 bytes)

    # ========================================================================
    # RENDERING
    # ========================================================================
    "BACKEND": "pillow",      # "pillow" or "matplotlib"
    "BACKGROUND": (255, 255, 255),

    # ========================================================================
    # LOGGING
    # ========================================================================
    "LOG_LEVEL": "INFO",
    "LOG_FILE": None,         # e.g. "logs/identicon.log"
}
