# ovp_builder/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Assembly Errors ---

class AssemblyError(DomainError):
    """
    Raised when a selection is not ready to be assembled into a sentence
    (a required slot is missing, or two slots contradict each other).
    Callers treat this as "sentence not complete yet", not as a fault.
    """
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Sentence cannot be assembled: {reason}")

# --- Data Errors ---

class LexiconInvariantError(DomainError):
    """Raised when the static lexicon tables violate one of their invariants."""
    def __init__(self, details: str):
        super().__init__(f"Lexicon data error: {details}")

# --- Collaborator Errors ---

class TranslationError(DomainError):
    """Raised when an external translation collaborator fails unexpectedly."""
    def __init__(self, details: str):
        super().__init__(f"Translation failed: {details}")
