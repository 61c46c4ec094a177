"""commentguard - Akismet spam-check gateway for comment pipelines."""

__version__ = "0.1.0"
