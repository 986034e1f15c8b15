"""Fatal error classes raised by the input adapters and the assembler."""


class BstError(Exception):
    """Base class for errors that end the current action."""


class InputFileError(BstError):
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f'Error: input filename "{filename}" cannot be read.')


class AllocationError(BstError):
    def __init__(self, size: int):
        self.size = size
        super().__init__(f"{size} byte(s) memory allocation error.")


class AssemblyError(BstError):
    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f'Error: cannot assemble "{filename}": {reason}')
