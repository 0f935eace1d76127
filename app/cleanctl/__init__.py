"""cleanctl - Profile-driven filesystem cleanup.

Resolves declarative cleanup profiles into concrete filesystem paths
and removes them, honouring per-pattern retention rules.
"""

__version__ = "0.3.0"
