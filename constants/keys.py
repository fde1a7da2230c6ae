class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    WIZARD_SESSION = "job_wizard.session"


def wizard_session_key(wizard_id: str = "default") -> str:
    """Return the session-state key holding the wizard session for ``wizard_id``."""

    if wizard_id == "default":
        return StateKeys.WIZARD_SESSION
    return f"{StateKeys.WIZARD_SESSION}.{wizard_id}"
