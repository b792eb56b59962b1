"""RangeForge — application entry point.

Boots the FastAPI internal server and provides the CLI entry point that
prints a range readout for one high/low measurement.
"""

import logging

from fastapi import FastAPI

from rangeforge.api.routers import router

app = FastAPI(title="RangeForge Internal API", version="0.1.0")
app.include_router(router)

logger = logging.getLogger("rangeforge")


@app.get("/health")
async def health():
    return {"status": "ok"}


def render_readout(readout: dict) -> str:
    """Format an analysis readout as the plain-text panel."""
    rng = readout["range"]
    quality = readout["quality"]
    lines = [
        f"{readout['pair']} {readout['method'].upper()} "
        f"({readout['anchor_mode']}-anchored)",
        f"  High {rng['high']}  Low {rng['low']}  "
        f"Equilibrium {rng['equilibrium']}  Range {rng['pips']:.1f} pips",
    ]
    if not rng["tradeable"]:
        lines.append(f"  ! {rng['invalidation_reason']}")
    lines.append(
        f"  Quality {quality['score']}/100 ({quality['grade']}) "
        f"{'valid' if quality['is_valid'] else 'INVALID'}"
    )
    lines.append("  Bullish targets: " + "  ".join(
        f"+{n} SD {p}" for n, p in enumerate(readout["sd_levels"]["highs"], 1)
    ))
    lines.append("  Bearish targets: " + "  ".join(
        f"-{n} SD {p}" for n, p in enumerate(readout["sd_levels"]["lows"], 1)
    ))
    lines.append("  Recommendations:")
    lines.extend(f"    - {r}" for r in quality["recommendations"])
    lines.append("  Pair guidance:")
    lines.extend(f"    - {r}" for r in readout["pair_recommendations"])
    return "\n".join(lines)


# ── CLI ──────────────────────────────────────────────────────────────────


def _run_cli(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and either print a readout or serve the API."""
    import argparse
    import json

    from rangeforge.api.routers import configure_routers
    from rangeforge.config import load_config
    from rangeforge.engine.analysis import analyze_range
    from rangeforge.engine.errors import RangeEngineError
    from rangeforge.engine.policy import METHOD_POLICIES

    config = load_config()

    parser = argparse.ArgumentParser(description="RangeForge SD projection engine")
    parser.add_argument("--high", type=float, help="Session high price")
    parser.add_argument("--low", type=float, help="Session low price")
    parser.add_argument(
        "--pair",
        default=config.default_pair,
        help=f"Currency pair (default: {config.default_pair})",
    )
    parser.add_argument(
        "--method",
        choices=list(METHOD_POLICIES.keys()),
        default=config.default_method,
        help=f"Range method (default: {config.default_method})",
    )
    parser.add_argument("--json", action="store_true", help="Print the readout as JSON")
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the internal API server instead of a single calculation",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.serve:
        import uvicorn

        configure_routers(config)
        logger.info("API available at %s", config.api_base_url)
        uvicorn.run(app, host=config.api_host, port=config.api_port, log_level="info")
        return 0

    if args.high is None or args.low is None:
        parser.error("--high and --low are required unless --serve is given")

    try:
        analysis = analyze_range(args.high, args.low, args.pair, args.method)
    except RangeEngineError as exc:
        logger.warning("Calculation rejected: %s", exc)
        print(f"error: {exc}")
        return 2

    readout = analysis.to_dict()
    if args.json:
        print(json.dumps(readout, indent=2))
    else:
        print(render_readout(readout))
    return 0


def main() -> None:
    raise SystemExit(_run_cli())


if __name__ == "__main__":
    main()
