"""Pricing errors: machine-readable code + human message."""


class PricingError(Exception):
    """Pricing failed: bad input or misconfigured rules. Rendered as {"error": {"code", "message"}}."""

    code = "PRICING_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        if code is not None:
            self.code = code
        self.message = message
        super().__init__(f"[{self.code}] {message}")


class InvalidInput(PricingError):
    """Missing cart item, bad price or flag, malformed request payload."""

    code = "INVALID_INPUT"


class UnknownRule(PricingError):
    """Rule name not present in the registry."""

    code = "UNKNOWN_RULE"
