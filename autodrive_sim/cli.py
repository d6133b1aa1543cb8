"""CLI entrypoint.

Subcommands:

- ``run``          – simulate a JSON scenario file and print the report
- ``interactive``  – prompt for input on stdin, as the console program does

``run`` accepts ``--config path/to/config.json``; CLI arguments override
config-file values, which override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from autodrive_sim.config.types import RunConfig, SimulationMode
from autodrive_sim.io.console import ConsoleSession
from autodrive_sim.io.scenario import load_scenario
from autodrive_sim.simulation.engine import MultipleCarsResult, run_simulation
from autodrive_sim.simulation.report import format_result
from autodrive_sim.viz.render import render_trajectories
from autodrive_sim.viz.theme import REGISTERED_THEMES, get_theme

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Config resolution helpers
# ---------------------------------------------------------------------------


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_str(
    cli_val: str | None, key: str, file_cfg: dict[str, object], default: str | None
) -> str | None:
    """CLI > file > default resolution for optional string values."""
    raw = _get_val(cli_val, key, file_cfg, default)
    if raw is None:
        return None
    return _coerce_str(raw, key)


def _parse_mode(raw_mode: str | None) -> SimulationMode | None:
    """Parse simulation mode from CLI/config; None lets the car count decide."""
    if raw_mode is None:
        return None
    try:
        return SimulationMode(raw_mode)
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in SimulationMode)
        raise ValueError(f"mode must be one of {valid}") from exc


def _load_file_config(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        file_cfg = json.loads(Path(path).read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(file_cfg, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    return file_cfg


def _resolve_run_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> RunConfig:
    file_cfg = _load_file_config(parser, args.config)
    try:
        render = _get_str(
            str(args.render) if args.render is not None else None, "render", file_cfg, None
        )
        return RunConfig(
            mode=_parse_mode(_get_str(args.mode, "mode", file_cfg, None)),
            render_path=Path(render) if render is not None else None,
            theme=_get_str(args.theme, "theme", file_cfg, "default") or "default",
            log_level=(_get_str(args.log_level, "log_level", file_cfg, "WARNING") or "WARNING"),
        )
    except ValueError as exc:
        parser.error(str(exc))


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def _build_run_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("run", help="Simulate a JSON scenario file")
    p.set_defaults(func=_handle_run)
    p.add_argument("--scenario", type=Path, required=True)
    p.add_argument(
        "--mode",
        type=str,
        choices=[mode.value for mode in SimulationMode],
        default=None,
        help="Engine to use (default: single for one car, multiple otherwise)",
    )
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    p.add_argument("--render", type=Path, default=None, help="Write a trajectory plot here")
    p.add_argument("--theme", type=str, choices=sorted(REGISTERED_THEMES), default=None)
    p.add_argument("--log-level", type=str, default=None)


def _build_interactive_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("interactive", help="Prompt for simulations on stdin")
    p.set_defaults(func=_handle_interactive)
    p.add_argument("--log-level", type=str, default=None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autodrive-sim", description="Grid car simulation with collision detection"
    )
    sub = parser.add_subparsers(dest="command")
    _build_run_parser(sub)
    _build_interactive_parser(sub)
    return parser


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _handle_run(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    run_config = _resolve_run_config(parser, args)
    _configure_logging(run_config.log_level)
    try:
        sim_input = load_scenario(args.scenario)
        theme = get_theme(run_config.theme)
    except FileNotFoundError:
        parser.error(f"Scenario file not found: {args.scenario}")
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("loaded %s: %d car(s)", args.scenario, len(sim_input.vehicles))
    result = run_simulation(sim_input, run_config.mode)
    print(format_result(result))

    if run_config.render_path is not None:
        collisions = result.collisions if isinstance(result, MultipleCarsResult) else ()
        render_trajectories(
            result.trace,
            sim_input.width,
            sim_input.height,
            run_config.render_path,
            collisions=collisions,
            theme=theme,
        )


def _handle_interactive(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        _configure_logging(RunConfig(log_level=args.log_level or "WARNING").log_level)
    except ValueError as exc:
        parser.error(str(exc))
    ConsoleSession(sys.stdin, sys.stdout).run_choice_loop()


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for ``autodrive-sim``."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        parser.exit(2)
    args.func(parser, args)


if __name__ == "__main__":
    main()
