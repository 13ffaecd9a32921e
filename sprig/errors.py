

class SprigError(Exception):
    """ Base class for all Sprig errors"""
    pass

class SprigSyntaxError(SprigError):
    """ Raised by the tokenizer or parser on malformed source"""

class SprigEvaluationError(SprigError):
    """ Raised when an expression cannot be evaluated"""

class SprigInvalidSymbol(SprigEvaluationError):
    """ Raised when a symbol is required but something else was given"""

class SprigUnboundSymbol(SprigEvaluationError):
    """ Raised when a symbol is used before it is bound"""

class SprigDuplicateBinding(SprigEvaluationError):
    """ Raised when a name is bound twice in the same frame"""

class SprigArityError(SprigEvaluationError):
    """ Raised when the number of arguments or operands is incorrect"""

class SprigTypeError(SprigEvaluationError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""

class SprigArenaError(SprigError):
    """ Raised when the arena is used after release or released twice"""
