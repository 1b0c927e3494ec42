class CodegenError(Exception):
    """Base class for exceptions thrown during assist code generation."""


class AssistStructureError(CodegenError):
    """Thrown when an assist comment is missing a fence or the '->' separator."""


class InvalidAssistIdError(CodegenError):
    """Thrown when an assist id contains anything but lowercase letters and '_'."""


class InvalidAssistDocError(CodegenError):
    """Thrown when an assist description is not a capitalised full sentence."""


class DuplicateAssistIdError(CodegenError):
    """Thrown when two assists are declared with the same id."""


class StaleFileError(CodegenError):
    """Thrown in verify mode when a generated file does not match its source."""


class FormatterError(CodegenError):
    """Thrown when the source formatter cannot be run or fails."""


class SourceDirectoryError(CodegenError):
    """Thrown when the assist source directory does not exist."""


class SourceEncodingError(CodegenError):
    """Thrown when an assist source file is not valid UTF-8."""
