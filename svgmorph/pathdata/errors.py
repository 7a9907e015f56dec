class PathError(ValueError):
    pass


class PathSyntaxError(PathError):
    def __init__(self, message, token=None, position=None):
        if position is not None:
            message = '%s (token %r at position %s)' % (message, token, position)
        super().__init__(message)
        self.token = token
        self.position = position


class PathStructureError(PathError):
    def __init__(self, message, command=None, position=None):
        if position is not None:
            message = '%s (command %r at position %s)' % (message, command, position)
        super().__init__(message)
        self.command = command
        self.position = position


class CongruenceError(PathError):
    pass


class SegmentCountMismatch(CongruenceError):
    def __init__(self, len_a, len_b):
        super().__init__('Paths with different number of segments: %s and %s' % (len_a, len_b))
        self.len_a = len_a
        self.len_b = len_b


class SegmentTypeMismatch(CongruenceError):
    def __init__(self, index, expected, found):
        if index is None:
            message = 'Cannot blend a %s segment with a %s segment' % (expected, found)
        else:
            message = 'Paths with different type of segments at index %s: %s and %s' % (
                index, expected, found)
        super().__init__(message)
        self.index = index
        self.expected = expected
        self.found = found
