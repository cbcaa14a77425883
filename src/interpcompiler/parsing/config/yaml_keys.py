"""Constants used for YAML curve definitions."""

# Curve identification
NAME_KEY = "name"

# Point keys
POINTS_KEY = "points"
DOMAIN_KEY = "domain"
RANGE_KEY = "range"

# Compiler settings
ALGORITHM_KEY = "algorithm"
DOMAIN_EDGE_KEY = "domain_edge"
SANITIZE_KEY = "sanitize"

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
