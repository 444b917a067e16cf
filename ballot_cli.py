#!/usr/bin/env python3
"""
Operate the sentiment-weighted ballot stored in DB_PATH.

Usage:
    python ballot_cli.py init                    # Create the candidate set
    python ballot_cli.py vote VOTER CANDIDATE    # Cast VOTER's single vote
    python ballot_cli.py increase CALLER         # Owner bumps sentiment up
    python ballot_cli.py decrease CALLER         # Owner bumps sentiment down
    python ballot_cli.py reset CALLER            # Owner resets sentiment to 0
    python ballot_cli.py results                 # Totals per candidate
    python ballot_cli.py preview                 # Weight a vote would carry now
    python ballot_cli.py sentiment               # Current decayed sentiment
    python ballot_cli.py events [KIND]           # Audit log
    python ballot_cli.py --validate              # Check state integrity

Options:
    --now N    Use N (integer seconds) as the current instant
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container
from app.errors import BallotError
from app.services.clock_source import FixedClock
from app.services.validation import validate_state
from settings.logging import setup_logging
from web.api.audit import get_events
from web.api.ballot import cast_vote, get_results, get_weight_preview, initialize_ballot
from web.api.errors import ValidationError
from web.api.sentiment import decrease_sentiment, get_sentiment, increase_sentiment, reset_sentiment

logger = setup_logging(level="INFO", to_file=True)


def run_validation() -> bool:
    """Print the integrity report for the stored ledger."""
    result = validate_state(container.db)
    status = "✅" if result["valid"] else "❌"
    stats = result["stats"]

    print("\n" + "=" * 60)
    print(f"LEDGER VALIDATION REPORT {status}")
    print("=" * 60)
    print(f"  Sentiment: {stats.get('sentiment')} (last update t={stats.get('last_update')})")
    print(f"  Candidates: {stats['candidates']}")
    print(f"  Voters: {stats['voters']:,}")
    print(f"  Total weight: {stats['total_weight']:,}")
    print(f"  VoteCast events: {stats['vote_events']:,}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")
    print("=" * 60 + "\n")

    return result["valid"]


def print_results() -> None:
    results = get_results()
    print("\nResults")
    for i, item in enumerate(results.items, 1):
        print(f"  {i}. {item.candidate:<10} {item.total:>8,}")
    print(f"  Total weight: {results.total_weight:,}\n")


def print_events(kind: str | None) -> None:
    for e in get_events(kind).items:
        print(f"  #{e.seq} t={e.recorded_at} {e.kind} {e.payload}")


def _pop_now(args: list[str]) -> int | None:
    if "--now" not in args:
        return None
    i = args.index("--now")
    try:
        now = int(args[i + 1])
    except (IndexError, ValueError):
        print("--now needs an integer value")
        sys.exit(2)
    del args[i : i + 2]
    return now


def dispatch(command: str, params: list[str]) -> None:
    """Run one command against the initialized container."""
    if command == "init":
        resp = initialize_ballot()
        print(f"Initialized: {', '.join(resp.candidates)}")
    elif command == "vote" and len(params) == 2:
        resp = cast_vote(params[0], params[1])
        print(f"Vote recorded: {resp.voter_id} -> {resp.candidate} (weight {resp.weight}, sentiment {resp.sentiment})")
    elif command in ("increase", "decrease", "reset") and len(params) == 1:
        action = {"increase": increase_sentiment, "decrease": decrease_sentiment, "reset": reset_sentiment}[command]
        resp = action(params[0])
        print(f"Sentiment {resp.cause}: {resp.value}")
    elif command == "results":
        print_results()
    elif command == "preview":
        resp = get_weight_preview()
        print(f"Weight now: {resp.weight} (sentiment {resp.sentiment})")
    elif command == "sentiment":
        resp = get_sentiment()
        print(f"Sentiment: {resp.value} (stored at t={resp.last_update})")
    elif command == "events":
        print_events(params[0] if params else None)
    else:
        print(__doc__)
        sys.exit(1)


def main():
    args = sys.argv[1:]
    now = _pop_now(args)
    clock = FixedClock(now) if now is not None else None

    if not args:
        print(__doc__)
        sys.exit(1)

    container.init(clock=clock)
    try:
        if "--validate" in args or args == ["validate"]:
            sys.exit(0 if run_validation() else 1)

        dispatch(args[0], args[1:])
    except (BallotError, ValidationError) as e:
        logger.error("{}: {}", e.__class__.__name__, e.message)
        sys.exit(1)
    finally:
        container.reset()


if __name__ == "__main__":
    main()
