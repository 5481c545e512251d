class ConfigurationError(ValueError):
    """Raised at startup when the application is misconfigured (e.g. no hashid salt)."""
