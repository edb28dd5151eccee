"""Site cabin placement and ordering.

Lays out catalogued site-cabin and container units on a ground plane,
detects footprint collisions and builds checkout payloads.
"""

__version__ = "0.1.0"
