"""
Command-line demonstration: plan a small pipeline network and log its MST.

Usage:
    $ python -m pipelineplanner            # log to stdout
    $ python -m pipelineplanner --log      # also write DEFAULT_LOG_FILE
    $ python -m pipelineplanner --verbose  # show why sites/links are refused
"""
import logging
import sys
from typing import Optional

from pipelineplanner.app.state import Store
from pipelineplanner.logging_config import DEFAULT_LOG_FILE, setup_logging

logger = logging.getLogger("pipelineplanner.demo")


def main(argv: Optional[list[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    setup_logging(
        logging.INFO,
        log_file=DEFAULT_LOG_FILE if "--log" in args else None,
        model_level=logging.DEBUG if "--verbose" in args else None,
    )

    store = Store()
    # The last site is too close to the first one and gets refused
    sites = [(100.0, 100.0), (300.0, 120.0), (220.0, 300.0), (420.0, 320.0), (80.0, 380.0), (110.0, 110.0)]
    for x, y in sites:
        store.add_vertex(x, y)

    for a, b in [(0, 1), (0, 2), (1, 2), (1, 3), (2, 3), (2, 4), (0, 4), (4, 0)]:
        store.add_edge(a, b)

    result = store.compute_mst()
    for edge in result:
        logger.info(f"  {edge.a} - {edge.b} (weight {edge.weight})")
    logger.info(f"Total cost: {result.total_cost}")


if __name__ == "__main__":
    main()
