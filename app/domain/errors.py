FETCH_FAILED_MESSAGE = "Failed to fetch analytics data"


class AnalyticsFetchError(Exception):
    """
    Raised when either upstream data source is unreachable, answers with a
    non-success status or returns a body that is not JSON.
    Carries the single generic message shown to the dashboard.
    """

    def __init__(self, message: str = FETCH_FAILED_MESSAGE, *, source: str | None = None):
        super().__init__(message)
        self.message = message
        self.source = source
