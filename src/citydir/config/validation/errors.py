"""Config validation errors.

Messages name the environment variable (``CITYDIR_PAGE_SIZE``) rather than the
Python field, since that is what an operator has to fix.
"""
from citydir.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Directory settings could not be loaded or failed validation."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "setting_missing"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"{setting_name} is not set in the environment or .env file",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    default_code = "setting_invalid"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
