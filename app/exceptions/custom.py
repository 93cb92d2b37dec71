class GeoapifyError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class CityNotFoundError(Exception):
    def __init__(self, query: str):
        self.query = query
        super().__init__(f"City not found: {query}")


class InvalidSearchError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
