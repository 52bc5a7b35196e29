class CompositeError(Exception):
    pass


class DecodeError(CompositeError):
    pass


class InvalidArgument(CompositeError, ValueError):
    pass


class EncodeOrWriteError(CompositeError):
    pass
