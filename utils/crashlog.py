# utils/crashlog.py
import os, sys, faulthandler, datetime, traceback

LOG_DIR_ENV = "EAR_TRAINER_LOG_DIR"

_fault_file = None

def log_dir() -> str:
    d = os.environ.get(LOG_DIR_ENV) or os.path.join(os.getcwd(), "logs")
    os.makedirs(d, exist_ok=True)
    return d

def new_log_path(prefix: str = "crash") -> str:
    stamp = datetime.datetime.now().strftime("%Y%m%d-%H%M%S-%f")
    return os.path.join(log_dir(), f"{prefix}-{stamp}.txt")

def setup_crashlog():
    """Dump native faults and uncaught exceptions into logs/ before the process dies."""
    global _fault_file
    try:
        if _fault_file is None:
            _fault_file = open(new_log_path("native"), "w", encoding="utf-8")
        faulthandler.enable(_fault_file)
    except OSError:
        _fault_file = None

    def _hook(exc_type, exc, tb):
        try:
            with open(new_log_path("crash"), "w", encoding="utf-8") as out:
                out.write("UNCAUGHT EXCEPTION\n")
                out.write("=" * 60 + "\n")
                traceback.print_exception(exc_type, exc, tb, file=out)
        finally:
            sys.__excepthook__(exc_type, exc, tb)
    sys.excepthook = _hook

def log_exception(title: str, exc: BaseException) -> str:
    path = new_log_path("error")
    with open(path, "w", encoding="utf-8") as out:
        out.write(f"[{title}] {type(exc).__name__}: {exc}\n")
        out.write("Traceback:\n")
        out.write("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
    return path
