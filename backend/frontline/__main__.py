"""Frontline CLI entry point."""

import argparse
import logging
import sys
from pathlib import Path
from uuid import UUID

from dotenv import load_dotenv

env_file = Path(__file__).parent.parent / ".env"
load_dotenv(env_file)

from frontline import __version__
from frontline.config import get_settings
from frontline.database import init_db
from frontline.engine import FrontlineError
from frontline.services import GameService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

CONFIG_TEMPLATE = """# Frontline Configuration
# Secrets (logfire token, database credentials) belong in .env, not here.

game:
  fee_bps: 500

database:
  url: ""
  echo: false

api:
  host: 127.0.0.1
  port: 8000
  allowed_origins:
    - http://localhost:3000
"""


def _init_logfire() -> None:
    """Initialize Logfire if available, without failing commands."""
    try:
        from frontline.observability import initialize_logfire

        initialize_logfire(get_settings())
    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")


def _print_round(rnd) -> None:
    state = "OPEN" if rnd.open else "CLOSED"
    print(f"Round {rnd.id}")
    print(f"  index:        {rnd.index}")
    print(f"  state:        {state}")
    print(f"  participants: A={len(rnd.a_users)} B={len(rnd.b_users)} C={len(rnd.c_users)}")
    print(f"  vault:        {rnd.vault}")


def cmd_init(args: argparse.Namespace) -> int:
    """Initialize data directory, configuration template and schema."""
    data_dir = get_settings().data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Created data directory: {data_dir}")

    config_path = data_dir / "config.yaml"
    if not config_path.exists():
        config_path.write_text(CONFIG_TEMPLATE)
        logger.info(f"Created config template: {config_path}")
    else:
        logger.info(f"Config file already exists: {config_path}")

    init_db()
    print(f"\n✓ Data directory initialized at {data_dir}")
    return 0


def cmd_create_round(args: argparse.Namespace) -> int:
    rnd = GameService().create_round()
    _print_round(rnd)
    return 0


def cmd_open(args: argparse.Namespace) -> int:
    _print_round(GameService().open_round(args.round_id))
    return 0


def cmd_close(args: argparse.Namespace) -> int:
    _print_round(GameService().close_round(args.round_id))
    return 0


def cmd_deposit(args: argparse.Namespace) -> int:
    balance = GameService().deposit(args.address, args.amount)
    print(f"{args.address}: {balance}")
    return 0


def cmd_stake(args: argparse.Namespace) -> int:
    player_round = GameService().stake(
        args.round_id, args.player, args.a, args.b, args.c, value=args.value
    )
    print(
        f"Staked in round #{player_round.round}: "
        f"A={player_round.a_amount} B={player_round.b_amount} C={player_round.c_amount}"
    )
    return 0


def cmd_score(args: argparse.Namespace) -> int:
    player_round = GameService().compute_points(args.round_id, args.player, args.round_index)
    print(f"{player_round.player}: {player_round.points} pts")
    return 0


def cmd_claim(args: argparse.Namespace) -> int:
    receipt = GameService().claim(
        args.round_id,
        args.player,
        args.caller or args.player,
        fee_bps=args.fee_bps,
        round_index=args.round_index,
    )
    print(f"Reward to {receipt.player}: {receipt.reward}")
    print(f"Fee to {receipt.caller}: {receipt.fee}")
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    service = GameService()
    rounds = [service.get_round(args.round_id)] if args.round_id else service.list_rounds()
    if not rounds:
        print("No rounds. Run 'python -m frontline create-round'.")
    for rnd in rounds:
        _print_round(rnd)
    return 0


def cmd_events(args: argparse.Namespace) -> int:
    for event in GameService().list_events(args.round_id, args.kind):
        print(event.model_dump_json())
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from frontline.api import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(),
        host=args.host or settings.api.host,
        port=args.port or settings.api.port,
        log_level=settings.log_level.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frontline",
        description="Round-based pooled-staking settlement engine",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    init_parser = subparsers.add_parser("init", help="Initialize data directory and schema")
    init_parser.set_defaults(func=cmd_init)

    create_parser = subparsers.add_parser("create-round", help="Create a new closed round")
    create_parser.set_defaults(func=cmd_create_round)

    open_parser = subparsers.add_parser("open", help="Open the next cycle of a round")
    open_parser.add_argument("round_id", type=UUID)
    open_parser.set_defaults(func=cmd_open)

    close_parser = subparsers.add_parser("close", help="Close a round for staking")
    close_parser.add_argument("round_id", type=UUID)
    close_parser.set_defaults(func=cmd_close)

    deposit_parser = subparsers.add_parser("deposit", help="Fund an account")
    deposit_parser.add_argument("address")
    deposit_parser.add_argument("amount", type=int)
    deposit_parser.set_defaults(func=cmd_deposit)

    stake_parser = subparsers.add_parser("stake", help="Stake into pools A, B and C")
    stake_parser.add_argument("round_id", type=UUID)
    stake_parser.add_argument("player")
    stake_parser.add_argument("-a", type=int, default=0, help="Amount for pool A")
    stake_parser.add_argument("-b", type=int, default=0, help="Amount for pool B")
    stake_parser.add_argument("-c", type=int, default=0, help="Amount for pool C")
    stake_parser.add_argument("--value", type=int, default=None, help="Payment value (default: a + b + c)")
    stake_parser.set_defaults(func=cmd_stake)

    score_parser = subparsers.add_parser("score", help="Compute a player's points")
    score_parser.add_argument("round_id", type=UUID)
    score_parser.add_argument("player")
    score_parser.add_argument("--round-index", type=int, default=None)
    score_parser.set_defaults(func=cmd_score)

    claim_parser = subparsers.add_parser("claim", help="Claim a player's payout")
    claim_parser.add_argument("round_id", type=UUID)
    claim_parser.add_argument("player")
    claim_parser.add_argument("--caller", default=None, help="Fee recipient (default: player)")
    claim_parser.add_argument("--fee-bps", type=int, default=None)
    claim_parser.add_argument("--round-index", type=int, default=None)
    claim_parser.set_defaults(func=cmd_claim)

    status_parser = subparsers.add_parser("status", help="Show round state")
    status_parser.add_argument("round_id", type=UUID, nargs="?", default=None)
    status_parser.set_defaults(func=cmd_status)

    events_parser = subparsers.add_parser("events", help="List round notifications")
    events_parser.add_argument("round_id", type=UUID)
    events_parser.add_argument(
        "--kind", choices=["bet_placed", "round_closed", "claimed"], default=None
    )
    events_parser.set_defaults(func=cmd_events)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=None)
    serve_parser.add_argument("--port", type=int, default=None)
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    _init_logfire()

    try:
        return args.func(args)
    except FrontlineError as e:
        logger.error(f"{args.command} failed [{e.code}]: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
