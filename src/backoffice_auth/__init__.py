"""backoffice-auth: back-office login metadata for external identity providers."""

__version__ = "0.1.0"
