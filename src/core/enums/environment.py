"""Console runtime environments.

Selects environment-specific behavior in Settings and in the logger
factory (colored console output locally, JSON elsewhere).

Environments:
- DEVELOPMENT: Local development with reload and debug output
- TESTING: Automated test execution
- CI: Continuous integration runs
- PRODUCTION: Deployed console
"""

from enum import Enum


class Environment(str, Enum):
    """Console runtime environments."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
