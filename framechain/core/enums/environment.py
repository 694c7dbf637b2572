"""Runtime environment types.

Used by Settings to pick the log renderer:
- DEVELOPMENT: colored, human-readable console output
- TESTING: JSON output for test capture
- CI: JSON output for machine parsing
- PRODUCTION: JSON output for log shipping
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
