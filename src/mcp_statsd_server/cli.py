from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping, Sequence

from mcp_statsd_server.core import Message, ParseError, ServiceCheck, try_parse
from mcp_statsd_server.tools.decode import decode_line
from mcp_statsd_server.tools.models import resolve_limits


def _fmt_tags(tags: Mapping[str, str] | None) -> str:
    if tags is None:
        return "-"
    if not tags:
        return "{}"
    return ",".join(f"{k}:{v}" if v else k for k, v in sorted(tags.items()))


def format_message(msg: Message) -> str:
    """One-line human summary of a decoded message."""
    m = msg.metric
    if isinstance(m, ServiceCheck):
        ts = "-" if m.timestamp is None else f"{m.timestamp:g}"
        parts = [
            f"{m.kind.value} {msg.name!r} status={m.status.value}",
            f"ts={ts}",
            f"host={m.hostname or '-'}",
        ]
        if m.message is not None:
            parts.append(f"message={m.message!r}")
    else:
        rate = "-" if m.sample_rate is None else f"{m.sample_rate:g}"
        parts = [f"{m.kind.value} {msg.name!r} value={m.value:g}", f"rate={rate}"]
    parts.append(f"tags={_fmt_tags(msg.tags)}")
    return " ".join(parts)


def main(argv: Sequence[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Decode StatsD / DogStatsD lines.")
    p.add_argument("lines", nargs="+", help="One or more lines, e.g. 'gorets:1|c|@0.5'")
    p.add_argument("--json", dest="as_json", action="store_true", help="Print one JSON object per line")
    p.add_argument("--quiet", action="store_true", help="Only print failures")

    args = p.parse_args(argv)

    try:
        limits = resolve_limits()
        for line in args.lines:
            if len(line) > limits.max_line_length:
                raise ValueError(f"line longer than {limits.max_line_length} characters: {line[:40]!r}...")
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    failed = 0
    for line in args.lines:
        if args.as_json:
            result = decode_line(line, limits=limits)
            failed += not result.ok
            if result.ok and args.quiet:
                continue
            print(result.model_dump_json())
            continue

        out = try_parse(line)
        if isinstance(out, ParseError):
            failed += 1
            print(f"{line!r}: [{out.kind.value}] {out}", file=sys.stderr)
        elif not args.quiet:
            print(format_message(out))

    if not args.as_json and not args.quiet:
        print(f"\nDecoded {len(args.lines) - failed} of {len(args.lines)} lines.")
    if failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
