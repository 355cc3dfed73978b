"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or project .env file.
"""
from __future__ import annotations
import logging
import os, sys
from pathlib import Path

logger = logging.getLogger(__name__)

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

PALETTE_KEYS = ('ORGANIZER_HEADER', 'ORGANIZER_IMPORTANT')

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def is_hex_color(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

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
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)

def parse_env_file(text: str) -> dict[str, str]:
    """Pick valid palette overrides out of .env file contents."""
    overrides: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip()
        if k not in PALETTE_KEYS:
            continue
        if is_hex_color(v):
            overrides[k] = '#' + v.lstrip('#')
        else:
            logger.warning("Ignoring %s=%r in .env: not a hex color", k, v)
    return overrides

def resolve_hex(key: str, default: str, overrides: dict[str, str]) -> str:
    """Priority: real env var > .env override > default."""
    value = os.environ.get(key)
    if value:
        if is_hex_color(value):
            return '#' + value.lstrip('#')
        logger.warning("Ignoring %s=%r: not a hex color", key, value)
    return overrides.get(key, default)

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_HEADER_DEFAULT = '#476EAE'
HEX_IMPORTANT_DEFAULT = '#D7263D'

_ENV_OVERRIDES: dict[str, str] = {}
_env_path = Path(__file__).resolve().parent.parent / '.env'
if _env_path.exists():
    try:
        _ENV_OVERRIDES = parse_env_file(_env_path.read_text())
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", _env_path, exc)

HEX_HEADER = resolve_hex('ORGANIZER_HEADER', HEX_HEADER_DEFAULT, _ENV_OVERRIDES)
HEX_IMPORTANT = resolve_hex('ORGANIZER_IMPORTANT', HEX_IMPORTANT_DEFAULT, _ENV_OVERRIDES)

HEADER_COLOR = _from_hex(HEX_HEADER)
ID_COLOR = HEADER_COLOR + BOLD
IMPORTANT_COLOR = _from_hex(HEX_IMPORTANT) + BOLD
RULE_COLOR = DIM + HEADER_COLOR

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color','RESET','BOLD','DIM','HEADER_COLOR','ID_COLOR','IMPORTANT_COLOR','RULE_COLOR',
    'HEX_HEADER','HEX_IMPORTANT','_ENABLE','_USE_TRUECOLOR','_FORCE'
]
