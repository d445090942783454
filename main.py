import asyncio
import logging
import sys

from jobquery.core.models import QueryOptions
from jobquery.core.runner import query

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)


async def main():
    """
    Main entry point.
    """
    # Example usage: Could be replaced by CLI arguments parser (e.g., typer or argparse)
    options = QueryOptions(
        keyword="Back End Developer",
        location="Philippines",
        date_since_posted="24hr",
        sort_by="recent",
        limit=30,
        page=0,
    )

    jobs = await query(options)
    for job in jobs:
        print(job.to_dict())  # Output to stdout for verification


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
