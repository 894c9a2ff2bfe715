class MarkElfError(Exception):

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


# command line
class UsageError(MarkElfError):
    pass

class MissingFileError(MarkElfError):
    pass

class DependentFlagError(MarkElfError):
    pass

class NoActionError(MarkElfError):
    pass


# ABI resolution
class InvalidAbiNumberError(MarkElfError):
    pass

class UnknownAbiNameError(MarkElfError):
    pass

class AbiRangeError(MarkElfError):
    pass


# file I/O (wraps the underlying OSError)
class FileIOError(MarkElfError):

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause

class FileOpenError(FileIOError):
    pass

class SeekError(FileIOError):
    pass

class WriteError(FileIOError):
    pass
