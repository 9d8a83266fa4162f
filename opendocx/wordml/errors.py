"""opendocx exceptions"""

from typing import Any, Optional


class OpenDocxError(Exception):
    """Base error"""
    pass


class InvalidUnit(OpenDocxError, ValueError):
    """A measurement that cannot be converted"""

    def __init__(self, value: Any, reason: str = "must be a finite number"):
        self.value = value
        super().__init__(f"Invalid measurement {value!r}: {reason}")


class InvalidPropertyValue(OpenDocxError, ValueError):
    """A declared property value failed validation"""

    def __init__(self, name: str, value: Any, message: str, element: Optional[str] = None):
        self.element = element
        self.name = name
        self.value = value
        self.message = message
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = f"{self.element} property" if self.element else "property"
        return f'Invalid {where} "{self.name}" value {self.value!r}: {self.message}'

    def with_element(self, element: str) -> "InvalidPropertyValue":
        """Same error attributed to an element kind"""
        return InvalidPropertyValue(self.name, self.value, self.message, element=element)


class StructuralError(OpenDocxError):
    """A builder call that is not allowed in the current table context"""
    pass


class MetadataUnavailable(OpenDocxError):
    """Image metadata could not be read"""

    def __init__(self, source: Any, reason: str = ""):
        self.source = source
        message = f"Invalid image. Unable to fetch image metadata from {source!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DocumentFormatError(OpenDocxError, ValueError):
    """Malformed JSON document description"""
    pass
