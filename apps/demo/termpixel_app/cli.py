"""CLI entrypoints for the termpixel demos, benchmark and diagnostics."""

from __future__ import annotations

import argparse
import json
import platform
import sys
import time
from dataclasses import asdict
from importlib import metadata
from pathlib import Path

from PIL import Image

from termpixel_core import (
    AppConfig,
    PerformanceController,
    PerformanceTargets,
    config_path,
    configure_logging,
    get_logger,
    load_config,
)
from termpixel_core.logging_setup import log_dir
from termpixel_raster import PATTERNS, TerminalDisplay, draw_image, fit_image, pattern_colors
from termpixel_terminal import AnsiTerminal, RecordingTerminal, summarize

from .demos import draw_line, draw_square, run_color_wave


logger = get_logger("cli")

EXIT_NO_TERMINAL = 1
EXIT_BAD_IMAGE = 2


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _installed_version() -> str:
    try:
        return metadata.version("termpixel")
    except metadata.PackageNotFoundError:
        return "0.1.0"


def _terminal(cfg: AppConfig, args: argparse.Namespace) -> AnsiTerminal:
    return AnsiTerminal(
        fixed_columns=getattr(args, "columns", None) or cfg.display.fixed_columns,
        fixed_rows=getattr(args, "rows", None) or cfg.display.fixed_rows,
    )


def _hold(seconds: float | None) -> None:
    if seconds is None:
        try:
            input()
        except EOFError:
            pass
        return
    time.sleep(seconds)


def _run_still(args: argparse.Namespace, draw) -> int:
    cfg = load_config()
    terminal = _terminal(cfg, args)
    hold = args.hold if args.hold is not None else cfg.demo.hold_seconds
    try:
        with terminal.session(hide_cursor=cfg.display.hide_cursor, alternate_screen=cfg.display.alternate_screen):
            display = TerminalDisplay(terminal)
            draw(display)
            display.flush()
            _hold(hold)
    except OSError as exc:
        logger.error("terminal unavailable: %s", exc, extra={"event": "terminal_error"})
        print(f"termpixel: terminal unavailable: {exc}", file=sys.stderr)
        return EXIT_NO_TERMINAL
    return 0


def cmd_line(args: argparse.Namespace) -> int:
    return _run_still(args, draw_line)


def cmd_square(args: argparse.Namespace) -> int:
    return _run_still(args, draw_square)


def cmd_pattern(args: argparse.Namespace) -> int:
    def _draw(display: TerminalDisplay) -> None:
        box = display.bounding_box()
        display.fill_contiguous(box, pattern_colors(args.pattern, box.width, box.height))

    return _run_still(args, _draw)


def cmd_image(args: argparse.Namespace) -> int:
    try:
        with Image.open(Path(args.path).expanduser()) as img:
            img.load()
            source = img.convert("RGB")
    except OSError as exc:
        logger.error("cannot read image %s: %s", args.path, exc, extra={"event": "image_error"})
        print(f"termpixel: cannot read image: {exc}", file=sys.stderr)
        return EXIT_BAD_IMAGE

    def _draw(display: TerminalDisplay) -> None:
        display.clear()
        draw_image(display, fit_image(source, display.size()))

    return _run_still(args, _draw)


def cmd_color_wave(args: argparse.Namespace) -> int:
    cfg = load_config()
    terminal = _terminal(cfg, args)
    perf = PerformanceController(
        PerformanceTargets(
            cpu_percent_max=cfg.performance.cpu_percent_max,
            rss_mb_max=cfg.performance.rss_mb_max,
            fps_min=cfg.performance.fps_min,
        )
    )
    try:
        with terminal.session(hide_cursor=cfg.display.hide_cursor, alternate_screen=cfg.display.alternate_screen):
            display = TerminalDisplay(terminal)
            stats = run_color_wave(
                display,
                seconds=args.seconds,
                speed=args.speed if args.speed is not None else cfg.demo.wave_speed,
                delay_ms=cfg.demo.frame_delay_ms,
                perf=perf,
            )
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        logger.error("terminal unavailable: %s", exc, extra={"event": "terminal_error"})
        print(f"termpixel: terminal unavailable: {exc}", file=sys.stderr)
        return EXIT_NO_TERMINAL
    logger.info("color wave finished frames=%s fps=%.1f", stats.frames, stats.fps, extra={"event": "wave_done"})
    return 0


def cmd_benchmark(args: argparse.Namespace) -> int:
    cfg = load_config()
    perf = PerformanceController(
        PerformanceTargets(
            cpu_percent_max=cfg.performance.cpu_percent_max,
            rss_mb_max=cfg.performance.rss_mb_max,
            fps_min=cfg.performance.fps_min,
        )
    )

    command_counts: dict[str, int] = {}
    totals = {"cursor_moves": 0, "color_sets": 0, "color_resets": 0, "glyph_writes": 0, "cells_written": 0}

    if args.live:
        terminal = _terminal(cfg, args)
        try:
            with terminal.session(hide_cursor=True, alternate_screen=True):
                stats = run_color_wave(TerminalDisplay(terminal), seconds=args.seconds, speed=cfg.demo.wave_speed, perf=perf)
        except OSError as exc:
            logger.error("terminal unavailable: %s", exc, extra={"event": "terminal_error"})
            print(f"termpixel: terminal unavailable: {exc}", file=sys.stderr)
            return EXIT_NO_TERMINAL
        output = asdict(terminal.stats)
    else:
        recorder = RecordingTerminal(columns=args.columns or 80, rows=args.rows or 24)

        def _collect(_frame: int) -> None:
            report = summarize(recorder.events)
            for name, count in report.command_counts.items():
                command_counts[name] = command_counts.get(name, 0) + count
            for key in totals:
                totals[key] += getattr(report, key)
            recorder.clear_events()

        stats = run_color_wave(
            TerminalDisplay(recorder),
            seconds=args.seconds,
            speed=cfg.demo.wave_speed,
            perf=perf,
            on_frame=_collect,
        )
        output = {"command_counts": command_counts, **totals}

    budget = perf.sample(stats.fps, stats.delay_ms)
    _print_json(
        {
            "seconds": args.seconds,
            "mode": "live" if args.live else "headless",
            "frames": stats.frames,
            "fps": stats.fps,
            "output": output,
            "budget": {
                "targets": asdict(cfg.performance),
                "observed": asdict(budget),
                "pass": not budget.overloaded and stats.fps >= cfg.performance.fps_min,
            },
        }
    )
    return 0


def cmd_doctor(args: argparse.Namespace) -> int:
    cfg = load_config()
    terminal = _terminal(cfg, args)
    payload: dict[str, object] = {
        "version": _installed_version(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "config_path": str(config_path()),
        "log_dir": str(log_dir()),
        "config": asdict(cfg),
    }
    try:
        size = terminal.query_size()
        payload["terminal"] = {"columns": size.columns, "rows": size.rows, "pixels": [size.columns, 2 * size.rows]}
    except OSError as exc:
        payload["terminal"] = {"error": str(exc)}
    _print_json(payload)
    return 0


def _add_size_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--columns", type=int, default=None, help="Override detected terminal columns")
    cmd.add_argument("--rows", type=int, default=None, help="Override detected terminal rows")


def _add_hold_arg(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--hold", type=float, default=None, help="Seconds to keep the drawing up (default: until Enter)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termpixel", description="Half-block pixel rendering demos for the terminal")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_installed_version()}")
    sub = parser.add_subparsers(dest="command", required=True)

    line_cmd = sub.add_parser("line", help="Draw a diagonal line point by point")
    _add_size_args(line_cmd)
    _add_hold_arg(line_cmd)
    line_cmd.set_defaults(func=cmd_line)

    square_cmd = sub.add_parser("square", help="Draw a stroked square off the cell grid")
    _add_size_args(square_cmd)
    _add_hold_arg(square_cmd)
    square_cmd.set_defaults(func=cmd_square)

    wave_cmd = sub.add_parser("color-wave", help="Animate a rainbow with contiguous fills")
    wave_cmd.add_argument("--seconds", type=float, default=None, help="Stop after this many seconds")
    wave_cmd.add_argument("--speed", type=float, default=None, help="Hue shift in degrees per second")
    _add_size_args(wave_cmd)
    wave_cmd.set_defaults(func=cmd_color_wave)

    pat_cmd = sub.add_parser("pattern", help="Draw a deterministic test pattern")
    pat_cmd.add_argument("--pattern", default="quadrants", choices=list(PATTERNS))
    _add_size_args(pat_cmd)
    _add_hold_arg(pat_cmd)
    pat_cmd.set_defaults(func=cmd_pattern)

    image_cmd = sub.add_parser("image", help="Draw an image file scaled to fit")
    image_cmd.add_argument("path", help="Path to any image Pillow can open")
    _add_size_args(image_cmd)
    _add_hold_arg(image_cmd)
    image_cmd.set_defaults(func=cmd_image)

    bench_cmd = sub.add_parser("benchmark", help="Measure color-wave throughput")
    bench_cmd.add_argument("--seconds", type=float, default=5.0)
    bench_cmd.add_argument("--live", action="store_true", help="Draw to the real terminal instead of recording")
    _add_size_args(bench_cmd)
    bench_cmd.set_defaults(func=cmd_benchmark)

    doctor_cmd = sub.add_parser("doctor", help="Print environment and terminal diagnostics")
    _add_size_args(doctor_cmd)
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.diagnostics.keep_log_files, console=False)
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
