#!/usr/bin/env python3
"""Replay a recorded scroll trace and print the window realized for each offset."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, TextIO

import numpy as np
import orjson

from windowing.api.errors import InvalidViewportConfigError
from windowing.runtime.config import get_windowing_config
from windowing.runtime.json_codec import dumps_text, loads
from windowing.runtime.logging import setup_windowing_logging
from windowing.ui_runtime.batch import compute_visible_ranges, window_sizes

_LOG = logging.getLogger("windowing.tools.trace")

_OFFSET_KEYS: tuple[str, ...] = ("offset", "scroll_top", "scroll_offset")


def _offset_from_line(line: str) -> float | None:
    line = line.strip()
    if not line:
        return None
    try:
        value: Any = loads(line)
    except orjson.JSONDecodeError:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, dict):
        for key in _OFFSET_KEYS:
            raw = value.get(key)
            if isinstance(raw, (int, float)) and not isinstance(raw, bool):
                return float(raw)
    return None


def load_offsets(lines: Iterable[str]) -> list[float]:
    """Parse trace lines; blank or unrecognized lines are skipped."""
    offsets: list[float] = []
    skipped = 0
    for line in lines:
        offset = _offset_from_line(line)
        if offset is None:
            skipped += int(bool(line.strip()))
            continue
        offsets.append(offset)
    if skipped:
        _LOG.warning("trace_lines_skipped count=%d", skipped)
    return offsets


def replay(
    offsets: Sequence[float],
    *,
    item_height: float,
    container_height: float,
    overscan: int,
    item_count: int,
) -> tuple[list[dict[str, Any]], dict[str, Any]]:
    """Return per-offset window rows and a summary for the whole trace."""
    starts, ends = compute_visible_ranges(
        offsets,
        item_height=item_height,
        container_height=container_height,
        overscan=overscan,
        item_count=item_count,
    )
    sizes = window_sizes(starts, ends)
    rows: list[dict[str, Any]] = []
    for offset, start, end, size in zip(offsets, starts.tolist(), ends.tolist(), sizes.tolist()):
        empty = end < 0
        rows.append(
            {
                "offset": float(offset),
                "start": None if empty else start,
                "end": None if empty else end,
                "count": size,
                "offset_y": 0.0 if empty else start * float(item_height),
            }
        )
    changed = (np.diff(starts) != 0) | (np.diff(ends) != 0)
    summary = {
        "recomputes": len(rows),
        "window_changes": int(np.count_nonzero(changed)),
        "max_window": int(sizes.max()) if len(rows) else 0,
        "mean_window": float(sizes.mean()) if len(rows) else 0.0,
        "total_height": item_count * float(item_height),
    }
    return rows, summary


def _write_lines(out: TextIO, payloads: Iterable[dict[str, Any]]) -> None:
    for payload in payloads:
        out.write(dumps_text(payload))
        out.write("\n")


def main(argv: Sequence[str] | None = None, *, out: TextIO | None = None) -> int:
    config = get_windowing_config()
    parser = argparse.ArgumentParser(description="Replay a JSON-lines scroll trace.")
    parser.add_argument("trace", help="Trace file, or '-' for stdin.")
    parser.add_argument("--item-height", type=float, required=True)
    parser.add_argument("--container-height", type=float, required=True)
    parser.add_argument("--item-count", type=int, required=True)
    parser.add_argument("--overscan", type=int, default=config.default_overscan)
    parser.add_argument("--summary-only", action="store_true")
    args = parser.parse_args(argv)

    setup_windowing_logging(config)
    stream = out if out is not None else sys.stdout

    if args.trace == "-":
        offsets = load_offsets(sys.stdin)
    else:
        offsets = load_offsets(Path(args.trace).read_text(encoding="utf-8").splitlines())

    try:
        rows, summary = replay(
            offsets,
            item_height=args.item_height,
            container_height=args.container_height,
            overscan=args.overscan,
            item_count=args.item_count,
        )
    except InvalidViewportConfigError as exc:
        _LOG.error("trace_replay_rejected field=%s value=%r", exc.field, exc.value)
        return 2

    if not args.summary_only:
        _write_lines(stream, rows)
    _write_lines(stream, [{"summary": summary}])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
