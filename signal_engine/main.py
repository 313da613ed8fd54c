"""Command-line entry point.

Usage:
    signal-engine analyze <telemetry.json> [--config weights.yaml]
    signal-engine grants <niche-id> [--remote]
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from .catalog import GRANTS_SEED, GrantsClient
from .config import load_settings
from .matching import format_grant_amount, get_niche_by_id, rank_grants_for_niche, NICHES
from .opportunity import analyze_repository, card_to_markdown
from .scorer import load_engine_config

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def run_analyze(path: str, config_path: Optional[str]) -> int:
    """Score one telemetry file and print its opportunity card as Markdown."""
    config = load_engine_config(config_path)
    try:
        with open(path, "r") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read telemetry from {path}: {e}")
        return 1

    result = analyze_repository(payload, config)
    print(card_to_markdown(result.opportunity_card))
    return 0


def run_grants(niche_id: str, remote: bool, settings) -> int:
    """Print catalog grants ranked for one builder niche."""
    niche = get_niche_by_id(niche_id)
    if niche is None:
        known = ", ".join(n.id for n in NICHES)
        logger.error(f"Unknown niche '{niche_id}'. Known niches: {known}")
        return 1

    if remote:
        grants = asyncio.run(GrantsClient.from_settings(settings).fetch_grants())
    else:
        grants = list(GRANTS_SEED)

    matches = rank_grants_for_niche(niche, grants)
    print(f"{niche.icon} {niche.name}: {len(matches)} matching grants")
    for match in matches:
        grant = match.grant
        amount = format_grant_amount(grant.min_amount_usd, grant.max_amount_usd)
        print(f"[{match.score:>2}] {grant.name} ({grant.ecosystem}, {grant.status}) {amount}")
        for reason in match.reasons:
            print(f"       - {reason}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="signal-engine", description="Repository signal scoring and grant matching")
    subcommands = parser.add_subparsers(dest="command", required=True)

    analyze = subcommands.add_parser("analyze", help="Score a repository telemetry JSON file")
    analyze.add_argument("telemetry", help="Path to telemetry JSON")
    analyze.add_argument("--config", default=None, help="Engine config (.json/.yaml); overrides GRANTEE_ENGINE_CONFIG_PATH")

    grants = subcommands.add_parser("grants", help="List grants matching a builder niche")
    grants.add_argument("niche", help="Niche id, e.g. defi")
    grants.add_argument("--remote", action="store_true", help="Fetch the live catalog instead of the bundled seed")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        configure_logging()
        logger.error(str(e))
        return 2

    configure_logging(settings.log_level)

    try:
        if args.command == "analyze":
            return run_analyze(args.telemetry, args.config or settings.engine_config_path)
        return run_grants(args.niche, args.remote, settings)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
