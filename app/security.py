from app import config


# --- Get Current User (Dependency for every activity route) ---
def get_current_user_id() -> str:
    """
    Identity of the caller. There is no authentication yet, so this is the
    configured single user; swap this dependency to add real users.
    """
    return config.DEFAULT_USER_ID
