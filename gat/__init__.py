"""gat — GitHub Actions tester: scenario-driven local workflow testing."""

__version__ = "0.4.0"
