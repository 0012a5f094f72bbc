"""BoardSync - Two-way sync between HubSpot tickets and a Monday.com board."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the current version of BoardSync."""
    return __version__
