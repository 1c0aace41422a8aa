class TextTreeError(Exception):
    pass


class InvalidFormatError(TextTreeError):
    pass


class WriteError(TextTreeError):
    pass
