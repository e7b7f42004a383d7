class ProfileError(ValueError):
    """Submitted profile is incomplete or out of range; message is shown to the user."""
