"""Custom exceptions for the UCS renamer."""


class UCSRenameError(Exception):
    """Base exception for all renamer errors."""

    def __init__(self, message: str, details: str = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class CatalogLoadError(UCSRenameError):
    """Raised when the category CSV cannot be read or parsed."""

    def __init__(self, message: str, file_path: str = None, details: str = None):
        super().__init__(message, details)
        self.file_path = file_path


class UnknownCategoryError(UCSRenameError):
    """Raised when a CatID has no entry in the catalog."""

    def __init__(self, cat_id: str, details: str = None):
        super().__init__(f"unknown CatID: {cat_id}", details)
        self.cat_id = cat_id


class SelectorExecutionError(UCSRenameError):
    """Raised when the fuzzy selector process fails."""

    def __init__(self, message: str, exit_code: int = None, details: str = None):
        super().__init__(message, details)
        self.exit_code = exit_code


class SelectionCancelledError(UCSRenameError):
    """Raised when the user leaves the selector without choosing a category."""

    def __init__(self, message: str = "no category selected", details: str = None):
        super().__init__(message, details)


class FieldValidationError(UCSRenameError):
    """Raised when an entered field value is not acceptable."""

    def __init__(self, message: str, field_name: str = None, details: str = None):
        super().__init__(message, details)
        self.field_name = field_name


class RequiredFieldMissingError(FieldValidationError):
    """Raised when a required field is left empty."""

    def __init__(self, field_name: str):
        super().__init__(f"{field_name} is required", field_name=field_name)


class DelimiterConflictError(FieldValidationError):
    """Raised when a value contains the filename field delimiter."""

    def __init__(self, field_name: str, delimiter: str):
        super().__init__(
            f'value cannot contain "{delimiter}", because it is the filename field delimiter',
            field_name=field_name,
        )
        self.delimiter = delimiter


class InputExhaustedError(UCSRenameError):
    """Raised when input ends before a field value was entered."""

    def __init__(self, field_name: str = None):
        message = "input closed"
        if field_name:
            message = f"input closed while reading {field_name}"
        super().__init__(message)
        self.field_name = field_name


class FileOperationError(UCSRenameError):
    """Raised when file operations fail."""

    def __init__(
        self,
        message: str,
        file_path: str = None,
        operation: str = None,
        details: str = None,
    ):
        super().__init__(message, details)
        self.file_path = file_path
        self.operation = operation


class NotAFileError(FileOperationError):
    """Raised when the source path is a directory."""

    def __init__(self, file_path: str):
        super().__init__(f"{file_path} is a directory", file_path=file_path, operation="stat")


class NoExtensionError(FileOperationError):
    """Raised when the source file has no extension to carry forward."""

    def __init__(self, file_path: str):
        super().__init__(
            "no file name extension found", file_path=file_path, operation="stat"
        )


class RenameError(FileOperationError):
    """Raised when the filesystem rename fails."""

    def __init__(self, message: str, file_path: str = None, details: str = None):
        super().__init__(message, file_path=file_path, operation="rename", details=details)


class InputDecodeError(UCSRenameError):
    """Raised when a line of input is not valid text."""

    def __init__(self, field_name: str = None, details: str = None):
        message = "input is not valid text"
        if field_name:
            message = f"input for {field_name} is not valid text"
        super().__init__(message, details)
        self.field_name = field_name
