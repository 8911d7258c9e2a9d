# main.py
import sys, os
sys.path.append(os.path.dirname(__file__))  # 確保能找到 config.py

import argparse
import logging
import time
from logging.handlers import RotatingFileHandler

from utils.crashlog import setup_crashlog, log_exception, log_dir
from config import AppConfig, AudioConfig
from app import App
from audio.synth import list_output_ports

RESTART_DELAY = 1.0  # 秒；避免裝置不存在時瘋狂重試

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def _init_logging(level: str = "INFO"):
    if logging.getLogger().handlers:
        return

    # 終端機留給互動提示，只輸出 WARNING 以上
    console = logging.StreamHandler()
    console.setLevel(logging.WARNING)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), handlers=[console])
    try:
        fh = RotatingFileHandler(os.path.join(log_dir(), "app.log"),
                                 maxBytes=2*1024*1024, backupCount=3, encoding="utf-8")
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(fh)
    except OSError as e:
        logging.warning("file logging disabled: %s", e)

def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater: {value}")
    return value

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Console ear trainer driving a MIDI output")
    ap.add_argument('--port', type=_non_negative_int, default=None,
                    help="pygame.midi output device id (see --list-ports)")
    ap.add_argument('--list-ports', action='store_true', help="print MIDI output device ids and exit")
    ap.add_argument('--velocity', type=int, default=100)
    ap.add_argument('--tick-ms', type=_non_negative_int, default=150)
    ap.add_argument('--channel', type=int, default=0, choices=range(16))
    ap.add_argument('--instrument', type=int, default=None, choices=range(128), metavar="0-127",
                    help="GM program number")
    ap.add_argument('--note-test', action='store_true', help="type notes to hear them after setup")
    ap.add_argument('--once', action='store_true', help="do not restart the session after an error")
    ap.add_argument('--log-level', default='INFO', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return ap

def config_from_args(args) -> AppConfig:
    return AppConfig(
        audio=AudioConfig(
            port=args.port,
            velocity=max(1, min(127, args.velocity)),
            tick_ms=args.tick_ms,
            channel=args.channel,
            instrument=args.instrument,
        ),
        note_test=args.note_test,
        restart_on_error=not args.once,
    )

def supervise(cfg: AppConfig, make_app=App, delay: float = RESTART_DELAY) -> int:
    """Run sessions until one finishes cleanly.

    Each iteration builds a fresh App, so a restart never keeps the previous
    session's settings or device handle. Closed input or Ctrl+C ends the loop.
    """
    while True:
        try:
            make_app(cfg).run()
            return 0
        except (EOFError, KeyboardInterrupt):
            print("\nBye")
            return 0
        except Exception as e:
            logging.error("session failed: %s", e, exc_info=True)
            try:
                log_exception("session", e)
            except OSError:
                pass
            print(f"Error: {e}")
            if not cfg.restart_on_error:
                return 1
            time.sleep(delay)

def print_ports() -> int:
    ports = list_output_ports()
    if not ports:
        print("No MIDI output ports found")
    for dev, name in ports:
        print(f"{dev}: {name}")
    return 0

def main(argv=None) -> int:
    setup_crashlog()
    args = build_parser().parse_args(argv)
    _init_logging(args.log_level)
    logging.info("應用程式啟動")
    if args.list_ports:
        return print_ports()
    return supervise(config_from_args(args))

if __name__ == "__main__":
    sys.exit(main())
