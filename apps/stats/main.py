import argparse, asyncio, sys
from typing import Optional
from packages.config.constants import DEFAULT_ENV_FILE
from packages.config.endpoints import load_endpoints
from packages.config.env import Cfg, load_cfg, read_saved_address, save_address, update_env_file
from packages.config.logging import setup_logging
from packages.dashtec_adapter.rest import DashtecClient
from packages.normalizer.address import validate_address
from packages.normalizer.errors import InvalidAddress
from packages.report.pipeline import build_report
from packages.report.render import render_json, render_report

EXIT_OK = 0
EXIT_USAGE = 2


def resolve_address(arg: Optional[str], cfg: Cfg, address_file: Optional[str] = None) -> str:
    """Pick the address from the CLI, the env, the saved file, or a prompt, in that order."""
    if arg:
        return arg.strip()
    if cfg.validator_address:
        return cfg.validator_address.strip()
    saved = read_saved_address(address_file)
    if saved:
        return saved
    return input("Enter your validator address: ").strip()


async def run_report(args, cfg: Cfg, log) -> int:
    try:
        address = validate_address(resolve_address(args.address, cfg, args.address_file))
    except InvalidAddress as e:
        log.error("Invalid address", err=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except EOFError:
        print("error: no validator address given (pass it as an argument or set VALIDATOR_ADDRESS)",
              file=sys.stderr)
        return EXIT_USAGE
    save_address(address, args.address_file)

    endpoints = load_endpoints(cfg.endpoints_file)
    log.info("Fetching validator report", address=address, base_url=cfg.base_url,
             bypass=bool(cfg.bypass_token))
    async with DashtecClient(cfg, endpoints) as client:
        report = await build_report(client, address, span=cfg.epoch_span, unit=cfg.unit)

    if args.json:
        print(render_json(report))
    else:
        print(render_report(report, color=not args.no_color and sys.stdout.isatty()))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="aztec-stats",
                                 description="Validator status, performance and rank from the dashtec API")
    ap.add_argument("address", nargs="?", help="validator address (0x + 40 hex chars)")
    ap.add_argument("--env-file", default=DEFAULT_ENV_FILE, help="dotenv file with settings")
    ap.add_argument("--address-file", default=None, help="where the last used address is kept")
    ap.add_argument("--bypass-token", default=None, help="cf_clearance cookie value for the CDN challenge")
    ap.add_argument("--save-token", action="store_true", help="write --bypass-token into the env file")
    ap.add_argument("--base-url", default=None)
    ap.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    ap.add_argument("--epochs", type=int, default=None, help="leaderboard window size in epochs")
    ap.add_argument("--json", action="store_true", help="print the report as JSON")
    ap.add_argument("--no-color", action="store_true")
    ap.add_argument("--log-level", default=None, choices=["debug", "info", "warning", "error"])
    return ap


def apply_overrides(cfg: Cfg, args) -> Cfg:
    updates = {}
    if args.bypass_token:
        updates["bypass_token"] = args.bypass_token
    if args.base_url:
        updates["base_url"] = args.base_url.rstrip("/")
    if args.timeout is not None:
        updates["timeout"] = args.timeout
    if args.epochs is not None:
        updates["epoch_span"] = args.epochs
    if args.log_level:
        updates["log_level"] = args.log_level
    return cfg.model_copy(update=updates)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = apply_overrides(load_cfg(args.env_file), args)
    log = setup_logging(cfg.log_level)

    if args.save_token:
        if not args.bypass_token:
            print("error: --save-token needs --bypass-token", file=sys.stderr)
            return EXIT_USAGE
        update_env_file(args.env_file, "DASHTEC_BYPASS_TOKEN", args.bypass_token)
        log.info("Bypass token saved", env_file=args.env_file)

    return asyncio.run(run_report(args, cfg, log))


if __name__ == "__main__":
    sys.exit(main())
