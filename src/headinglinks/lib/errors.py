"""Custom exception hierarchy for headinglinks configuration and input loading.

The annotation and rendering core never raises these across the document
boundary; they surface only from configuration and file loading.
"""


class HeadingLinksError(Exception):
    """Base exception for all headinglinks errors.

    Catching this class is enough to handle every failure the configuration
    and input loading layers can produce.
    """

    pass


class ConfigError(HeadingLinksError):
    """Exception raised for configuration errors.

    Raised when a configuration file cannot be parsed or does not validate
    against the link list configuration schema.

    Attributes:
        field: The configuration field (or error code) that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class ValidationError(HeadingLinksError):
    """Exception raised when field data does not have the expected shape.

    Raised while loading repeater field data for a document, e.g. a field
    data file that is not a mapping of field names to values.

    Attributes:
        source: Where the bad data came from (file path or field name)
        message: Description of the problem
        expected: Human description of the expected shape
        actual: What was found instead
    """

    def __init__(
        self,
        source: str,
        message: str,
        expected: str,
        actual: str,
    ) -> None:
        self.source = source
        self.message = message
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid field data in '{source}': {message}\n"
            f"  Expected: {expected}\n"
            f"  Received: {actual}"
        )


class FileNotFoundError(HeadingLinksError):
    """Exception raised when a document, field data or config file can't be read.

    Attributes:
        path: Path that could not be read
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"Cannot read '{path}': {message}")
