class InvalidSearchParameterError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidDateFormatError(InvalidSearchParameterError):
    def __init__(self, message: str = "Invalid date format. Use YYYY-MM-DD"):
        super().__init__(message)


class InvalidDateRangeError(InvalidSearchParameterError):
    def __init__(self, message: str = "Check-out date must be after check-in date"):
        super().__init__(message)


class AgodaError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class AgodaDataMissingError(Exception):
    def __init__(self, message: str = "No hotel data received from Agoda"):
        self.message = message
        super().__init__(message)
