"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides come from TAZU_* environment variables (#RRGGBB).
"""
from __future__ import annotations
import os, sys
from typing import Optional

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    """Convert a hex color code to an ANSI escape sequence."""
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)

def valid_hex(value: Optional[str]) -> bool:
    if not value:
        return False
    h = value.strip().lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def _palette(env_key: str, default: str) -> str:
    """Env override if it is a valid #RRGGBB, otherwise the default."""
    raw = os.environ.get(env_key)
    return '#' + raw.strip().lstrip('#') if valid_hex(raw) else default

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')
STRIKE = _code('9')

# Default palette: cyan ids, green done, red pending, yellow notices
HEX_ID_DEFAULT = '#2AA1B3'
HEX_DONE_DEFAULT = '#5FB962'
HEX_PENDING_DEFAULT = '#D9534F'
HEX_WARN_DEFAULT = '#E5C07B'

HEX_ID = _palette('TAZU_ID_COLOR', HEX_ID_DEFAULT)
HEX_DONE = _palette('TAZU_DONE_COLOR', HEX_DONE_DEFAULT)
HEX_PENDING = _palette('TAZU_PENDING_COLOR', HEX_PENDING_DEFAULT)
HEX_WARN = _palette('TAZU_WARN_COLOR', HEX_WARN_DEFAULT)

ID_COLOR = _from_hex(HEX_ID)
DONE_COLOR = _from_hex(HEX_DONE)
PENDING_COLOR = _from_hex(HEX_PENDING)
WARN_COLOR = _from_hex(HEX_WARN)

SUCCESS_COLOR = DONE_COLOR
ERROR_COLOR = PENDING_COLOR

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color','valid_hex','RESET','BOLD','DIM','STRIKE','ID_COLOR','DONE_COLOR','PENDING_COLOR',
    'WARN_COLOR','SUCCESS_COLOR','ERROR_COLOR','HEX_ID','HEX_DONE','HEX_PENDING','HEX_WARN',
    '_ENABLE','_USE_TRUECOLOR','_FORCE'
]
