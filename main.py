"""
Purchase Tracker - Main Entry Point

Command line access to the deadline engine:

    python main.py overview purchases.json [--today YYYY-MM-DD]
    python main.py actions purchases.json [--today YYYY-MM-DD]
    python main.py deadlines 2026-01-08 --return-days 30 --warranty-months 12
    python main.py demo [--today YYYY-MM-DD]
    python main.py serve
"""

import argparse
import json
import sys
import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from purchase_tracker.config import config
from purchase_tracker.compute import service
from purchase_tracker.compute.dates import parse_date, current_date
from purchase_tracker.store import PurchaseStore

# Configure logging
logging.basicConfig(
    level=config.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stdout
)
logger = logging.getLogger(__name__)


TIER_LABELS = {
    "urgent": "URGENT - act now",
    "upcoming": "UPCOMING - plan ahead",
    "reference": "REFERENCE",
}


def demo_purchases(today: date) -> List[Dict[str, Any]]:
    """Sample purchases spread across every tier, relative to ``today``."""
    def ago(days: int) -> str:
        return (today - timedelta(days=days)).isoformat()

    return [
        {"id": "DEMO-1", "name": "Noise-cancelling headphones", "store": "Best Buy",
         "purchaseDate": ago(13), "returnDeadline": ago(-2), "warrantyExpiry": ago(-352)},
        {"id": "DEMO-2", "name": "Hiking boots", "store": "REI",
         "purchaseDate": ago(95), "returnDeadline": ago(5), "warrantyExpiry": ago(-270)},
        {"id": "DEMO-3", "name": "Blender", "store": "Target",
         "purchaseDate": ago(20), "returnDeadline": ago(-10), "warrantyExpiry": ago(-345)},
        {"id": "DEMO-4", "name": "Laptop", "store": "Costco",
         "purchaseDate": ago(710), "warrantyExpiry": ago(-20)},
        {"id": "DEMO-5", "name": "Desk lamp", "store": "IKEA",
         "purchaseDate": ago(200), "status": "archived",
         "returnDeadline": ago(170), "warrantyExpiry": ago(-165)},
        {"id": "DEMO-6", "name": "Gift card", "purchaseDate": ago(3)},
    ]


def load_records(path: str) -> List[Dict[str, Any]]:
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)
    return payload.get("purchases", []) if isinstance(payload, dict) else payload


def print_overview(result: Dict[str, Any]) -> None:
    data = result["data"]
    print("═══════════════════════════════════════")
    print(f"  Purchases as of {data['reference_date']}")
    print(f"  Urgent items: {data['urgent_count']}")
    print("═══════════════════════════════════════")
    for tier, items in data["groups"].items():
        print(f"\n{TIER_LABELS[tier]} ({len(items)})")
        for item in items:
            urgency = item["urgency"]
            days = urgency["days_remaining"]
            detail = f"{urgency['primary_deadline']} in {days} days" if days is not None else "no deadline"
            if urgency["is_overdue"]:
                detail = f"{urgency['primary_deadline']} overdue by {abs(days)} days"
            print(f"  - {item['name'] or item['id']}: {detail}")


def print_actions(result: Dict[str, Any]) -> None:
    data = result["data"]
    print(f"Action items as of {data['reference_date']} ({data['total_count']} total)")
    for section in ("overdue", "return_due_soon", "warranty_expiring_soon"):
        print(f"\n{section.replace('_', ' ').title()} ({len(data[section])})")
        for item in data[section]:
            deadline = item["return_deadline"] if section != "warranty_expiring_soon" else item["warranty_expiry"]
            print(f"  - {item['name'] or item['id']}: {deadline}")


def report(result: Dict[str, Any], printer) -> int:
    if result["status"] != "ok":
        logger.error(f"{result['error_code']}: {result['message']}")
        return 1
    printer(result)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Track return windows and warranty deadlines")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (("overview", "Group purchases by urgency"), ("actions", "List action items")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("file", help="JSON file with a list of purchases")
        cmd.add_argument("--today", help="Reference date (YYYY-MM-DD)")

    deadlines = sub.add_parser("deadlines", help="Compute deadlines for a purchase date")
    deadlines.add_argument("purchase_date")
    deadlines.add_argument("--return-days", type=int, default=config.defaults.return_window_days)
    deadlines.add_argument("--warranty-months", type=int, default=config.defaults.warranty_months)
    deadlines.add_argument("--today", help="Reference date (YYYY-MM-DD)")

    demo = sub.add_parser("demo", help="Show the overview for built-in sample purchases")
    demo.add_argument("--today", help="Reference date (YYYY-MM-DD)")

    sub.add_parser("serve", help="Run the deadline tool server")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        from purchase_tracker.servers.deadlines import run
        run()
        return 0

    if args.command == "deadlines":
        result = service.calculate_deadlines(
            args.purchase_date, args.return_days, args.warranty_months, args.today
        )
        return report(result, lambda r: print(json.dumps(r["data"], indent=2)))

    if args.command == "demo":
        try:
            today = parse_date(args.today) if args.today else current_date()
        except ValueError:
            logger.error(f"Invalid reference date: {args.today}")
            return 1
        store = PurchaseStore()
        store.load_records(demo_purchases(today))
        records = [p.model_dump() for p in store.list()]
        return report(service.urgency_overview(records, today.isoformat()), print_overview)

    try:
        records = load_records(args.file)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read purchases from {args.file}: {e}")
        return 1

    if args.command == "overview":
        return report(service.urgency_overview(records, args.today), print_overview)
    return report(service.action_items_overview(records, args.today), print_actions)


if __name__ == "__main__":
    sys.exit(main())
