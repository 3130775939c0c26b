"""tenantctl: organization and user resource mapping services."""

__version__ = "0.1.0"
