from enum import Enum
from typing import NamedTuple


class _COLOR(str, Enum):
    GREEN = "\033[92m"
    BRIGHT_GREEN = "\033[1;92m"
    RED = "\033[91m"
    YELLOW = "\033[93m"
    GRAY = "\033[90m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"
    RESET = "\033[0m"

    WARN = BLUE + "[WARN]" + RESET
    ERR = RED + "[CRIT]" + RESET
    INFO = YELLOW + "[INFO]" + RESET
    DBG = GRAY + "[DeBG]" + RESET
    OK = GREEN + "OK" + RESET
    FAIL = RED + "FAIL" + RESET


class Palette(NamedTuple):
    """Colours used per algorithm in reports."""
    dft: str = _COLOR.CYAN.value
    fft: str = _COLOR.GREEN.value
    stage: str = _COLOR.MAGENTA.value
    reset: str = _COLOR.RESET.value


PALETTE = Palette()


def colorize(value) -> str:
    if isinstance(value, bool):
        return _COLOR.OK.value if value else _COLOR.FAIL.value
    if isinstance(value, int):
        return f"{_COLOR.GREEN.value}{value:_}{_COLOR.RESET.value}"
    elif isinstance(value, float):
        return f"{_COLOR.CYAN.value}{value:.4f}{_COLOR.RESET.value}"
    elif isinstance(value, str):
        return f"{_COLOR.YELLOW.value}{value}{_COLOR.RESET.value}"
    return str(value)


def inject_colors_into(module_globals: dict) -> None:
    '''
    usage:
        # --- color names for IDE/static analysis suppress warnings ---
        GREEN: str; RED: str; YELLOW: str; GRAY: str; CYAN: str
        RESET: str; WARN: str; ERR: str; INFO: str; DBG: str
        inject_colors_into(globals())
    '''
    module_globals.update({k: v.value for k, v in _COLOR.__members__.items()})
