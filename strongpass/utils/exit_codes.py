"""Centralized exit codes for the strongpass CLI."""


class ExitCodes:
    """Standard exit codes for strongpass CLI commands."""

    SUCCESS = 0

    VALIDATION_FAILED = 1
    WEAK_PASSWORD = 2

    COMMAND_FAILED = 3

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success - All passwords passed",
            cls.VALIDATION_FAILED: "One or more rules reported a violation",
            cls.WEAK_PASSWORD: "Strength estimate below the required minimum",
            cls.COMMAND_FAILED: "Command could not run (bad configuration or internal error)",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")
