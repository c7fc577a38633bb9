
class ShallotError(Exception):
    """ Base class for all Shallot errors"""
    pass

class ShallotUnboundSymbol(ShallotError):
    """ Raised when a symbol lookup walks off the end of the frame chain"""
    pass

class ShallotInvalidSymbol(ShallotError):
    """ Raised when something other than a symbol is used as a binding name"""
    pass

class ShallotMalformedExpression(ShallotError):
    """ Raised when a form has the wrong shape or arity for a special form or application"""

class ShallotTypeError(ShallotMalformedExpression):
    """ Raised when a primitive receives an argument of the wrong type"""

class ShallotNotCallable(ShallotError):
    """ Raised when the head of an application is not a closure, primitive or macro"""

class ShallotDivisionByZero(ShallotError):
    """ Raised when `/` is given a divisor of exactly zero"""

class ShallotSyntaxError(ShallotError):
    """ Raised by the reader on unbalanced or truncated input"""
