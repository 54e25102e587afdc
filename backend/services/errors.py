"""Error taxonomy for the review service."""


class ReviewError(Exception):
    """Base class for review failures."""


class ReviewInputError(ReviewError):
    """User-correctable input problem. The message is safe to show."""

    status_code = 400


class InputTooShort(ReviewInputError):
    def __init__(self, noun: str, minimum: int):
        self.minimum = minimum
        super().__init__(
            f"{noun} text is too short. Paste at least {minimum} characters."
        )


class InputTooLong(ReviewInputError):
    def __init__(self, noun: str, maximum: int):
        self.maximum = maximum
        super().__init__(
            f"{noun} text is too long. Keep it under {maximum} characters."
        )


class PreconditionViolation(ReviewError):
    """Internal invariant broken (bad profile, malformed score card).

    Never shown to the caller; surfaced as a generic server error.
    """
