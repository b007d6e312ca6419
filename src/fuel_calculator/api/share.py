"""WhatsApp share link for a summary message.

Opening the link is the caller's job (browser, ``st.link_button``, ...);
this module only builds it.
"""

from __future__ import annotations

from urllib.parse import quote

SHARE_BASE_URL = "https://wa.me/?text="

# Characters a browser's encodeURIComponent leaves untouched besides
# letters, digits and "_.-~" (which quote() never escapes).
_URI_COMPONENT_SAFE = "!*'()"


def encode_share_text(text: str) -> str:
    """Percent-encode ``text`` (UTF-8) for use as a URL query value."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def build_share_url(text: str) -> str:
    """``https://wa.me/?text=<encoded text>``."""
    return SHARE_BASE_URL + encode_share_text(text)
