class MSTError(Exception):
    '''Base class for every error raised by mstsolve.'''


class InvalidSizeError(MSTError, ValueError):
    def __init__(self, size: int) -> None:
        super().__init__(f'vertex count must be at least 1, got {size}')
        self.size = size


class VertexOutOfRangeError(MSTError, IndexError):
    def __init__(self, vertex: int, size: int) -> None:
        super().__init__(f'vertex {vertex} is not in [0, {size})')
        self.vertex = vertex
        self.size = size


class UnderflowError(MSTError, IndexError):
    pass


class GraphFormatError(MSTError, ValueError):
    def __init__(self, message: str, lineno: int | None = None) -> None:
        if lineno is not None:
            message = f'line {lineno}: {message}'
        super().__init__(message)
        self.lineno = lineno


class UnknownStrategyError(MSTError, KeyError, ValueError):
    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(f'unknown MST strategy {name!r} (expected one of: {", ".join(known)})')
        self.name = name

    # KeyError would otherwise repr() the message
    def __str__(self) -> str:
        return self.args[0]


class OptimalityError(MSTError, AssertionError):
    def __init__(self, violations: list) -> None:
        lines = '\n'.join(f'  {v}' for v in violations)
        super().__init__(f'{len(violations)} optimality violation(s):\n{lines}')
        self.violations = list(violations)
