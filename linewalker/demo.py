"""
Small demonstration of linewalker's in-place updates.

Run with `python -m linewalker` or the `linewalker-demo` console script.
"""

import time

from .instance import get_instance, shutdown
from .levels import LogLevel


def main(delay: float = 0.25):
    logger = get_instance()

    logger.log("Hello, World!")

    logger.log("Update me!", LogLevel.WARNING)
    time.sleep(delay)
    logger.log("Update me again!", LogLevel.WARNING, update_previous=True)
    time.sleep(delay)
    logger.log("Finished!", update_previous=True)
    time.sleep(delay)

    # Progress counter redrawn on a single line
    logger.log("Loading... 0%")
    for pct in range(10, 101, 10):
        time.sleep(delay / 5)
        logger.log(f"Loading... {pct}%", update_previous=True)

    # A multi-line block collapsing to one line; the leftover lines are blanked
    logger.log(["Step 1: fetch", "Step 2: unpack", "Step 3: install"], LogLevel.DEBUG)
    time.sleep(delay)
    logger.log("All steps done", LogLevel.INFO, update_previous=True)

    logger.log("Something looks off", LogLevel.ERROR)
    logger.log("DONE!")

    # Drains everything queued above before returning
    shutdown()


if __name__ == "__main__":
    main()
