

class SchemeError(Exception):
    """ Base class for all minischeme errors"""
    pass

class SchemeSyntaxError(SchemeError):
    """ Raised when the source text cannot be tokenized or parsed"""

class SchemeNameError(SchemeError):
    """ Raised when a symbol is looked up before it is bound"""

class SchemeRuntimeError(SchemeError):
    """ Raised when a procedure is called with the wrong number or kind of arguments"""

class SchemeInternalError(SchemeError):
    """ Raised when a procedure is evaluated or printed directly"""
