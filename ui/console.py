# ========================= ui/console.py =========================
import sys

RST = "\033[0m"
BG_GREY = "\033[100m"
FG_BLACK_ON_WHITE = "\033[47m\033[30m"
RESET_TERMINAL = "\033c"

def clear_screen(out=None):
    out = out or sys.stdout
    out.write(RESET_TERMINAL + "\n")
    out.flush()

def print_banner(version: str = "0.1", out=None):
    out = out or sys.stdout
    title = f" --Welcome to Ear Trainer v{version}!-- "
    pad = " " * (len(title) - 2)
    out.write(f"{RST}  {BG_GREY}{pad}\n")
    out.write(f"{FG_BLACK_ON_WHITE}{title}\n")
    out.write(f"{RST}  {BG_GREY}{pad}\n")
    out.write(f"{RST}\n")
    out.flush()

def print_summary(config, out=None):
    out = out or sys.stdout
    out.write("\nCurrent settings:\n")
    for line in config.summary().splitlines():
        out.write(f"  {line}\n")
    out.flush()
