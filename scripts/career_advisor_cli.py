#!/usr/bin/env python3
"""
Career Advisor CLI

Fills the career advisor form from the command line and submits it to a
running server, printing what the page would show.

Start the server first:
    python demo_endpoint.py

Usage:
    python scripts/career_advisor_cli.py
    python scripts/career_advisor_cli.py --interests "fastapi, nodejs" --degree "Computer Science" \\
        --cgpa 3.5 --career-goal "become a data scientist"
"""

import argparse
import asyncio
import json
import logging
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from career_advisor.client.form_controller import CareerAdvisorFormController, Notification
from career_advisor.client.views import ResultsView
from career_advisor.schemas.career import DEGREES


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def print_notification(notification: Notification):
    """Print a notification the way the page would toast it."""
    print(f"\n❌ {notification.title}: {notification.description}\n")


def print_results(view: ResultsView):
    """Pretty print the three-part results view."""
    print("\n" + "=" * 60)
    print("🎯 CAREER SUGGESTIONS")
    print("=" * 60)

    for i, card in enumerate(view.career_cards, 1):
        print(f"\n--- Career #{i} [{card.badge}] ---")
        print(f"  {card.title}")
        print(f"  {card.description}")

    print("\n📚 SKILLS TO LEARN")
    print("  " + " | ".join(view.skill_badges))

    print("\n💡 AI ADVICE")
    print(f"  {view.advice}\n")


async def run_form(
    interests: str,
    degree: str,
    cgpa: str,
    career_goal: str,
    url: str | None = None,
    as_json: bool = False,
) -> int:
    """Fill the form, submit it, and print the outcome. Returns an exit code."""
    controller = CareerAdvisorFormController(
        endpoint_url=url,
        on_notify=print_notification,
    )
    controller.set_field("interests", interests)
    controller.set_field("degree", degree)
    controller.set_field("cgpa", cgpa)
    controller.set_field("careerGoal", career_goal)

    errors = controller.validate()
    if errors:
        print("\n⚠️  Please fix the following fields:")
        for field_name, message in errors.items():
            print(f"   {field_name}: {message}")
        return 2

    print(f"\nAnalyzing profile via {controller.endpoint_url} …")
    results = await controller.submit()
    if results is None:
        return 1

    if as_json:
        print(json.dumps(results.model_dump(), indent=2))
    else:
        print_results(ResultsView.from_recommendations(results))
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Get career recommendations from a running career advisor server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Degrees:
  {", ".join(DEGREES)}

Examples:
  python scripts/career_advisor_cli.py \\
    --interests "fastapi, nodejs, docker" \\
    --degree "Computer Science" \\
    --cgpa 3.5 \\
    --career-goal "become a data scientist"
        """
    )

    parser.add_argument(
        "--interests", "-i",
        type=str,
        default="fastapi, nodejs",
        help="Interests or skills, comma separated"
    )
    parser.add_argument(
        "--degree", "-d",
        type=str,
        default="Computer Science",
        help="Degree name (see list below)"
    )
    parser.add_argument(
        "--cgpa", "-c",
        type=str,
        default="3.5",
        help="CGPA between 0.0 and 4.0"
    )
    parser.add_argument(
        "--career-goal", "-g",
        type=str,
        default="become a data scientist",
        help="Career goal"
    )
    parser.add_argument(
        "--url",
        type=str,
        help="Career advisor endpoint (default: CAREER_ADVISOR_URL)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw recommendations as JSON"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    sys.exit(asyncio.run(run_form(
        interests=args.interests,
        degree=args.degree,
        cgpa=args.cgpa,
        career_goal=args.career_goal,
        url=args.url,
        as_json=args.json,
    )))


if __name__ == "__main__":
    main()
