from binpatch.constants import EXIT_OPEN_FAILED, EXIT_USAGE, EXIT_WRITE_MISMATCH


class PatchError(Exception):
    exit_code = EXIT_USAGE


class UsageError(PatchError):
    exit_code = EXIT_USAGE


class PathExpansionError(PatchError):
    exit_code = EXIT_USAGE

    def __init__(self, path):
        super().__init__(f"Path expansion produced no results for '{path}'.")
        self.path = path


class OpenError(PatchError):
    exit_code = EXIT_OPEN_FAILED

    def __init__(self, path, reason=None):
        message = "Failed to open specified binary file."
        if reason:
            message = f"{message} ({path}: {reason})"
        super().__init__(message)
        self.path = path
        self.reason = reason


class WriteMismatchError(PatchError):
    exit_code = EXIT_WRITE_MISMATCH

    def __init__(self, written, expected):
        super().__init__(
            f"Something went wrong when patching file. Wrote {written} bytes "
            f"(expected {expected})."
        )
        self.written = written
        self.expected = expected


class PayloadSizeError(PatchError):
    exit_code = EXIT_USAGE

    def __init__(self, length):
        super().__init__(f"Cannot build a {length}-byte string payload.")
        self.length = length
