"""
Global constants used throughout the library
"""

# Default of to_neighbor_groups: sequence ends only merge when the opposite side agrees
MERGE_ENDS = False

DEBUG = False

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"
