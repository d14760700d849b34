# ABOUTME: Exception types shared across scoring, planner, history and API layers
# ABOUTME: ValidationError marks caller input outside the documented ranges


class ValidationError(ValueError):
    """Input outside its documented range. Surfaced to the caller, never retried."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}
