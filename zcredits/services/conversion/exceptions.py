class ConversionError(Exception):
    pass


class ConversionRateNotFoundError(ConversionError):
    def __init__(self, message="No conversion rate has been published"):
        self.message = message
        super().__init__(self.message)


class InvalidConversionRateError(ConversionError):
    def __init__(self, rate, message=None):
        self.rate = rate
        self.message = message or f"Conversion rate must be a positive number, got {rate!r}"
        super().__init__(self.message)


class AmountBelowMinimumError(ConversionError):
    def __init__(self, amount: float, minimum: float, currency: str):
        self.amount = amount
        self.minimum = minimum
        self.currency = currency
        self.message = f"Minimum amount is {minimum} {currency}, got {amount}"
        super().__init__(self.message)
