"""CLI entry point for vocab-proxy.

Usage:
  python -m vocab_proxy serve [--host HOST] [--port PORT]
  python -m vocab_proxy stop
  python -m vocab_proxy status
  python -m vocab_proxy config [KEY VALUE]
  python -m vocab_proxy ask vocab_list [--count N]
  python -m vocab_proxy ask definition WORD
  python -m vocab_proxy ask quiz WORD
"""
from __future__ import annotations

import asyncio
import json
import os
import signal
import sys
from pathlib import Path

PID_FILE = Path(__file__).resolve().parent.parent / ".server.pid"


def main(argv: list[str] | None = None):
    args = sys.argv[1:] if argv is None else argv
    command, rest = (args[0], args[1:]) if args else ("serve", [])

    handler = COMMANDS.get(command)
    if handler is None:
        print(f"Unknown command: {command}")
        print(f"Commands: {', '.join(COMMANDS)}")
        sys.exit(1)
    handler(rest)


def _option(args: list[str], name: str, default: str) -> str:
    if name in args:
        i = args.index(name)
        if i + 1 < len(args):
            return args[i + 1]
    return default


def _running_pid() -> int | None:
    """PID of the live server, or None; a stale PID file is cleaned up."""
    try:
        pid = int(PID_FILE.read_text().strip())
        os.kill(pid, 0)
    except FileNotFoundError:
        return None
    except (ValueError, ProcessLookupError, PermissionError):
        PID_FILE.unlink(missing_ok=True)
        return None
    return pid


def _status(args: list[str]):
    pid = _running_pid()
    print("Server is not running." if pid is None else f"Server is running (PID {pid}).")


def _stop(args: list[str]):
    pid = _running_pid()
    if pid is None:
        print("Server is not running.")
        return
    try:
        os.kill(pid, signal.SIGTERM)
        print(f"Stopped server (PID {pid}).")
    except ProcessLookupError:
        print(f"Server (PID {pid}) already exited.")
    PID_FILE.unlink(missing_ok=True)


def _serve(args: list[str]):
    import uvicorn

    from vocab_proxy.config import load_settings

    pid = _running_pid()
    if pid is not None:
        print(f"Server already running (PID {pid}). Run 'stop' first.")
        sys.exit(1)

    settings = load_settings()
    host = _option(args, "--host", "127.0.0.1")
    port = int(_option(args, "--port", str(settings.port)))

    PID_FILE.write_text(str(os.getpid()))
    print(f"Proxy server running on http://{host}:{port} ({settings.llm_provider}/{settings.llm_model})")
    try:
        uvicorn.run("vocab_proxy.app:app", host=host, port=port, timeout_graceful_shutdown=5)
    finally:
        PID_FILE.unlink(missing_ok=True)


def _config(args: list[str]):
    from dataclasses import fields

    from vocab_proxy.config import Settings, load_settings, save_settings

    settings = load_settings()
    if not args:
        print(json.dumps(settings.to_dict(), indent=4))
        return
    if len(args) != 2:
        print("Usage: config [KEY VALUE]")
        sys.exit(1)

    key, value = args
    types = {f.name: type(f.default) for f in fields(Settings)}
    if key not in types:
        print(f"Unknown setting: {key}")
        print(f"Settings: {', '.join(types)}")
        sys.exit(1)
    try:
        setattr(settings, key, types[key](value))
    except ValueError:
        print(f"Invalid value for {key}: {value!r}")
        sys.exit(1)
    save_settings(settings)
    print(f"{key} = {getattr(settings, key)!r}")


def _ask(args: list[str]):
    from vocab_proxy import app as app_module
    from vocab_proxy.config import load_settings
    from vocab_proxy.extractor import extract_for_word
    from vocab_proxy.models import SHAPES, VOCAB_LIST, Success
    from vocab_proxy.providers.base import TransportError

    if not args or args[0] not in SHAPES:
        print(f"Usage: ask {{{','.join(SHAPES)}}} [WORD] [--count N]")
        sys.exit(1)
    shape = args[0]
    word = args[1] if len(args) > 1 and not args[1].startswith("--") else None
    if shape != VOCAB_LIST and not word:
        print(f"'{shape}' needs a word.")
        sys.exit(1)
    count = int(_option(args, "--count", "10"))

    app_module._settings = load_settings()
    llm = app_module._get_llm()
    print(f"Asking {llm.name()} for {shape}...")
    try:
        outcome = asyncio.run(extract_for_word(llm, word, shape, count=count))
    except TransportError as e:
        print(f"Transport error: {e}")
        sys.exit(2)

    if isinstance(outcome, Success):
        print(json.dumps(outcome.payload.to_dict(), indent=2))
        return
    print(f"Fallback ({outcome.reason}). Raw response:\n{outcome.raw_text}")
    if outcome.payload is not None:
        print(json.dumps(outcome.payload.to_dict(), indent=2))
    sys.exit(3)


COMMANDS = {
    "serve": _serve,
    "stop": _stop,
    "status": _status,
    "config": _config,
    "ask": _ask,
}


if __name__ == "__main__":
    main()
