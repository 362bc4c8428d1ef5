class CurrencyException(Exception):
    pass


class InvalidInputError(CurrencyException):
    pass


class InvalidRatioError(InvalidInputError):
    pass


class InputSourceError(CurrencyException):
    pass


class PathReconstructionError(CurrencyException):
    pass
