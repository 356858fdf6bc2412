import asyncio
import sys

from models import FilterState
from monitor import StatusDashboard


async def main():
    import argparse

    parser = argparse.ArgumentParser(description="Cloudflare Status Dashboard")
    parser.add_argument(
        "--interval",
        type=int,
        default=60,
        help="Refresh interval in seconds (default: 60)",
    )
    parser.add_argument(
        "--test", action="store_true", help="Fetch and render once, then exit"
    )
    parser.add_argument(
        "--search", default="", help="Only show components whose name contains TERM"
    )
    parser.add_argument(
        "--only-issues",
        action="store_true",
        help="Only show components that are not operational",
    )
    parser.add_argument(
        "--expand-all",
        action="store_true",
        help="Show the components inside every group and maintenance section",
    )
    parser.add_argument(
        "--base-url",
        default=StatusDashboard.BASE_URL,
        help=f"Status page base URL (default: {StatusDashboard.BASE_URL})",
    )

    args = parser.parse_args()
    filters = FilterState(search_term=args.search, only_issues=args.only_issues)

    async with StatusDashboard(
        poll_interval=args.interval,
        base_url=args.base_url,
        filters=filters,
        expand_all=args.expand_all,
    ) as dashboard:
        if args.test:
            await dashboard.refresh()
            dashboard.render()
        else:
            await dashboard.start_monitoring()


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nGoodbye!")
        sys.exit(0)


if __name__ == "__main__":
    run()
