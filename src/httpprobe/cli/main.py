# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpprobe CLI."""

from __future__ import annotations

import argparse
import asyncio
import json
import shlex
import sys
from typing import Any, TextIO

from ..config import ProbeSettings, load_probe_settings
from ..http import create_default_transport
from ..log import setup_logging
from ..models.probe import HTTP_METHODS, ProbeResult
from ..probe import ProbeRunner

EXIT_OK = 0
EXIT_PROBE_FAILED = 1
_QUIT_COMMANDS = {"quit", "exit", "q"}


def _parse_header(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"invalid header {raw!r} (expected 'Name: value')")
    return name.strip(), value.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="httpprobe",
        description="Fire one plain-HTTP request at a host and show the raw response (connectivity check)",
    )
    parser.add_argument("host", nargs="?", default="", help="Target host name or IP address")
    parser.add_argument("-p", "--port", default=None, help="Target port (1-65535); required unless --interactive")
    parser.add_argument("--path", default="/", help="Request path (default: /)")
    parser.add_argument(
        "-X",
        "--method",
        default="GET",
        type=str.upper,
        choices=HTTP_METHODS,
        help="HTTP method (default: GET)",
    )
    parser.add_argument(
        "-H",
        "--header",
        dest="headers",
        action="append",
        type=_parse_header,
        default=[],
        help="Extra request header, 'Name: value' (repeatable)",
    )
    parser.add_argument("-d", "--data", default=None, help="Request body")
    parser.add_argument(
        "--timeout-ms",
        type=int,
        default=None,
        help="Timeout in milliseconds for the race, connect and read phases (default: 10000)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of the human-friendly transcript",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: HTTPPROBE_LOG_LEVEL or WARNING)")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Read 'host port [path [method]]' lines from stdin, one probe per line",
    )
    return parser


def _print_json(data: dict[str, Any], out: TextIO) -> None:
    json.dump(data, out, indent=2, sort_keys=True)
    out.write("\n")


def _report(runner: ProbeRunner, result: ProbeResult | None) -> dict[str, Any]:
    return {
        "status": runner.status.state.value,
        "label": runner.status.label,
        "result": result.to_dict() if result is not None else None,
        "transcript": runner.transcript.entries,
    }


def _pretty_print(runner: ProbeRunner, entries: list[str], out: TextIO) -> None:
    print(f"[httpprobe] Status: {runner.status.label}", file=out)
    for entry in entries:
        print(entry, file=out)


def _parse_line(line: str) -> tuple[str, str, str, str] | None:
    try:
        parts = shlex.split(line, comments=True)
    except ValueError:
        parts = line.split()
    if not parts:
        return None
    parts += [""] * (4 - len(parts))
    host, port, path, method = parts[:4]
    return host, port, path, method or "GET"


async def _run_once(runner: ProbeRunner, args: argparse.Namespace, out: TextIO) -> int:
    result = await runner.submit(
        args.host,
        args.port,
        args.path,
        args.method,
        headers=dict(args.headers),
        body=args.data,
    )
    if args.json:
        _print_json(_report(runner, result), out)
    else:
        _pretty_print(runner, runner.transcript.entries, out)
    return EXIT_OK if result is not None and result.ok else EXIT_PROBE_FAILED


async def _run_interactive(runner: ProbeRunner, args: argparse.Namespace, stdin: TextIO, out: TextIO) -> int:
    exit_code = EXIT_OK
    if not args.json:
        _pretty_print(runner, runner.transcript.entries, out)
    for line in stdin:
        if line.strip().lower() in _QUIT_COMMANDS:
            break
        parsed = _parse_line(line)
        if parsed is None:
            continue
        host, port, path, method = parsed
        seen = len(runner.transcript)
        result = await runner.submit(host, port, path, method, headers=dict(args.headers), body=args.data)
        if result is None or not result.ok:
            exit_code = EXIT_PROBE_FAILED
        if args.json:
            _print_json(_report(runner, result), out)
        else:
            _pretty_print(runner, runner.transcript.entries[: len(runner.transcript) - seen], out)
    return exit_code


async def _run(args: argparse.Namespace, settings: ProbeSettings, stdin: TextIO, out: TextIO) -> int:
    transport = create_default_transport(settings)
    async with ProbeRunner(transport, settings, banner=args.interactive) as runner:
        if args.interactive:
            return await _run_interactive(runner, args, stdin, out)
        return await _run_once(runner, args, out)


def main(argv: list[str] | None = None, *, stdin: TextIO | None = None, out: TextIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.interactive and args.port is None:
        parser.error("the following arguments are required: -p/--port")
    setup_logging(args.log_level)

    settings: ProbeSettings = load_probe_settings()
    if args.timeout_ms is not None:
        settings = settings.with_timeout(args.timeout_ms)

    return asyncio.run(_run(args, settings, stdin or sys.stdin, out or sys.stdout))


if __name__ == "__main__":
    raise SystemExit(main())
