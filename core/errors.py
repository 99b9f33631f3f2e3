"""
Configuration Errors

Defines the single fatal error raised when the runtime environment
does not satisfy its schema.
"""

from typing import List, Sequence, Tuple


FieldFailure = Tuple[str, List[str]]


class ConfigurationInvalid(Exception):
    """
    Raised when one or more required environment variables are missing
    or invalid.

    Carries every failing field at once so startup can report the whole
    problem in one message instead of failing field by field.

    Attributes:
        fields: Ordered (field name, reasons) pairs
    """

    HEADER = "Invalid env provided.\nThe following variables are missing or invalid:"

    def __init__(self, fields: Sequence[FieldFailure]):
        self.fields: List[FieldFailure] = [(name, list(reasons)) for name, reasons in fields]
        super().__init__(self.format_message(self.fields))

    @property
    def field_names(self) -> List[str]:
        return [name for name, _ in self.fields]

    @classmethod
    def format_message(cls, fields: Sequence[FieldFailure]) -> str:
        """Build the multi-line startup diagnostic"""
        lines = [f"- {name}: {', '.join(reasons)}" for name, reasons in fields]
        return "\n".join([cls.HEADER, *lines])
