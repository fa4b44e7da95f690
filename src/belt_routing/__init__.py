"""
Asteroid belt route optimization package.

Three-layer architecture:
- core: Positions, labels, distance cache and route scoring
- algorithms: Ordinal baseline, exact and nearest-neighbour solvers, selection
- app: Loading clouds from files, display, CLI

Examples
--------
>>> from belt_routing.core import DistanceCache, Position
>>> from belt_routing.algorithms import select_route, Strategy
>>> from belt_routing.app import RoutingApp, RoutingConfig
"""

__version__ = "2025dev"
