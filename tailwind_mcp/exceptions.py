"""Typed exception hierarchy. Every error tailwind-mcp can raise."""


class TailwindMCPError(Exception):
    """Base exception for all tailwind-mcp errors."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class InvalidInputError(TailwindMCPError):
    """Caller-supplied component source or payload is empty or malformed."""
    pass


class ConfigMismatchError(TailwindMCPError):
    """ProjectConfig.framework does not match the adapter that was invoked."""
    def __init__(self, message: str, expected: str = "", actual: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.actual = actual


class UnsupportedFeatureError(TailwindMCPError):
    """The selected build tool cannot express a requested capability."""
    def __init__(self, message: str, feature: str = "", tool: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.feature = feature
        self.tool = tool


class UnknownFrameworkError(TailwindMCPError):
    """Registry lookup miss."""
    def __init__(self, message: str, name: str = "", supported: list = None, **kwargs):
        super().__init__(message, **kwargs)
        self.name = name
        self.supported = supported or []


class UnknownBuildToolError(UnknownFrameworkError):
    """Build tool registry lookup miss."""
    pass


# ── AI text service ──────────────────────────────────────────────────────────


class AIServiceError(TailwindMCPError):
    """Base exception for AI text service failures. Always recoverable."""
    def __init__(self, message: str, model: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.model = model


class UpstreamUnavailableError(AIServiceError):
    """Backend unreachable, timed out, or returned an error payload."""
    pass


class AuthenticationError(AIServiceError):
    """No valid credential is configured for the AI backend."""
    pass
