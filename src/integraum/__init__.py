"""integraum - structural profiling of relational tables for data integration.

Discovers unique column combinations, unary inclusion dependencies,
near-duplicate records and attribute correspondences between schemas.
"""

__version__ = "0.1.0"
