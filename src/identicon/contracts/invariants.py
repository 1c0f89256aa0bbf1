"""Formal pipeline invariants.

This file documents what each stage MUST produce. Use it as a reviewer
anchor and system reference; enforcement lives in the assert_* functions.
"""

PIPELINE_INVARIANTS = {
    "hash": [
        "digest_bytes has exactly 16 elements",
        "Every digest value is in 0..255",
        "Identical input always yields identical digest_bytes",
    ],

    "color": [
        "color is (r, g, b) == digest_bytes[0:3]",
        "Each component is in 0..255",
    ],

    "grid": [
        "Exactly 25 (value, index) entries before filtering",
        "Indices are 0..24 in order",
        "Each row of five reads [v0, v1, v2, v1, v0]",
        "The 16th digest byte is never used",
    ],

    "filter": [
        "Only even values remain",
        "Indices keep their pre-filter values (gaps allowed, never renumbered)",
        "Relative order is preserved",
    ],

    "pixel_map": [
        "One rectangle per filtered grid entry, same order",
        "top_left = (index % 5 * 50, index // 5 * 50)",
        "bottom_right = top_left + (50, 50)",
        "All coordinates are multiples of 50 within 0..250",
    ],

    "persist": [
        "File name is '<input>.png' in the output directory",
        "OSError from the write reaches the caller unchanged",
        "A failed write leaves no partial file and keeps any previous image",
    ],
}

# Which stages are optional vs required
STAGE_REQUIREMENTS = {
    "hash": "REQUIRED",
    "color": "REQUIRED",
    "grid": "REQUIRED",
    "filter": "REQUIRED",
    "pixel_map": "REQUIRED",   # An empty pixel map is still a result
    "persist": "REQUIRED",
}
