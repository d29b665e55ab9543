"""
Configuration constants for labelgraph.

Defaults shared by the graph containers and builders live here. The log level
can be overridden through the environment.
"""

import logging
import math
import os
from typing import Optional

# Weight given to edges added without an explicit weight.
DEFAULT_EDGE_WEIGHT = 0.0

# Lower bound used by get_neighbors when no minimum weight is given, so that
# every neighbour is returned regardless of weight.
DEFAULT_WEIGHT_MIN = -math.inf

# Weight range used by topology_builder.random_graph.
DEFAULT_RANDOM_WEIGHT_RANGE = (1.0, 10.0)

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LABELGRAPH_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a basic stderr handler at the configured level."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
