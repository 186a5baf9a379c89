from typing import Any, Dict, Optional


class StringAnalyzerError(Exception):
    """Base class for every caller-correctable engine failure"""

    status_code = 500
    default_message = "String analyzer error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(StringAnalyzerError):
    """Missing or malformed caller-supplied data"""

    status_code = 400
    default_message = "Invalid request"


class InvalidType(InvalidInput):
    """Caller data is present but has the wrong type"""

    status_code = 422
    default_message = "Invalid data type"


class Conflict(StringAnalyzerError):
    status_code = 409
    default_message = "String already exists in the system"


class NotFound(StringAnalyzerError):
    status_code = 404
    default_message = "String does not exist in the system"


class Unparseable(StringAnalyzerError):
    status_code = 400
    default_message = "Unable to parse natural language query"


class Conflicting(StringAnalyzerError):
    """Natural language query parsed into a self-contradictory filter set"""

    status_code = 422
    default_message = "Query parsed but resulted in conflicting filters"

    def __init__(self, message: Optional[str] = None, parsed_filters: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.parsed_filters = parsed_filters or {}
