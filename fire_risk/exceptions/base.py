class FireRiskError(Exception):
    """Base exception for the fire risk web application."""

    pass
