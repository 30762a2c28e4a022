class InvariantViolation(Exception):
    """Raised when persisted page data breaks a domain invariant."""


class ValidationError(Exception):
    """
    Raised at the API boundary with the structured errors collected by the
    validation functions.
    """

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(f"{e['field']}: {e['message']}" for e in self.errors))


class PersistenceError(Exception):
    """A section list could not be loaded or saved."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class IllegalTransition(ValueError):
    pass


class StaleWrite(Exception):
    """The stored resource changed after the client last read it."""
