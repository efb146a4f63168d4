
class SkimError(Exception):
    """ Base class for all skim errors"""
    pass

class SkimTypeError(SkimError):
    """ Raised when a value does not have the shape or type an operation requires"""
    pass

class SkimWalkError(SkimTypeError):
    """ Raised when a proper list is required but a non-list tail is found"""
    pass

class SkimArityError(SkimError):
    """ Raised when the number of arguments passed to a form is incorrect"""

class SkimInvalidSymbol(SkimError):
    """ Raised when a non-symbol is used as a binding name"""

class SkimUnboundSymbol(SkimError):
    """ Raised when a symbol is used before it is bound"""

class SkimRangeError(SkimError):
    """ Raised when a number does not fit its fixed-width representation"""
