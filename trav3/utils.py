#-
# #%L
# Trav3 Python Client
# %%
# Copyright (C) 2025 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security's commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

import os
import sys
import platform

DEBUG_MODE = os.environ.get("TRAV3_DEBUG_MODE", "false").lower() == "true"

# Unicode to ASCII fallback mappings for Windows
UNICODE_FALLBACKS = {
    '❌': 'X',  # ❌ -> X
    '✅': '',  # ✅ -> ''
    '→': '->',  # → -> ->
    '…': '...',  # … -> ...
}


def safe_print(message, file=None, flush=True):
    """Safely print message, handling encoding issues on Windows."""
    try:
        print(message, file=file, flush=flush)
    except UnicodeEncodeError:
        for unicode_char, ascii_fallback in UNICODE_FALLBACKS.items():
            message = message.replace(unicode_char, ascii_fallback)

        # Replace any remaining problematic Unicode characters with '?'
        if platform.system() == 'Windows':
            message = ''.join([c if ord(c) < 128 else '?' for c in message])

        print(message, file=file, flush=flush)


def log(message: str, is_error: bool = False, is_warning: bool = False):
    """Prints a message to stdout, or to stderr for errors."""
    if is_error:
        safe_print(message, file=sys.stderr, flush=True)
    elif is_warning:
        safe_print(f"WARNING: {message}", flush=True)
    else:
        safe_print(message, flush=True)


def debug_log(*args, **kwargs):
    """Prints only if DEBUG_MODE is True."""
    if DEBUG_MODE:
        message = " ".join(map(str, args))
        safe_print(message, flush=True)


def truncate(text: str, limit: int = 500) -> str:
    """Shortens long response bodies for log output."""
    if text is None:
        return ""
    if len(text) > limit:
        return f"{text[:limit]}... ({len(text)} chars)"
    return text
