import os
import sys

ESC = "\033"
RESET = f"{ESC}[0m"
CLEAR_SCREEN = f"{ESC}[2J{ESC}[H"


def fg(r: int, g: int, b: int) -> str:
    return f"{ESC}[38;2;{r};{g};{b}m"


def bg(r: int, g: int, b: int) -> str:
    return f"{ESC}[48;2;{r};{g};{b}m"


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return (80, 24)
    size = os.get_terminal_size()
    return (size.columns, size.lines)


def clear_terminal(file=None) -> None:
    """Clear the screen and move the cursor home."""
    file = file if file is not None else sys.stdout
    file.write(CLEAR_SCREEN)
    file.flush()
