"""s3vim core: domain, interfaces, services and configuration."""

__version__ = "0.1.0"
