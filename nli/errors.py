class NliError(Exception):
    """ Base class for all NLI errors"""
    pass

class LexError(NliError):
    """ Raised when the source text cannot be tokenized (unterminated string or comment)"""
    pass

class ParseError(NliError):
    """ Raised when the token sequence violates a structural expectation"""

class EvalError(NliError):
    """ Raised when an operator or application receives a value outside its domain"""
