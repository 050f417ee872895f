

class MonkeyError(Exception):
    """ Base class for all host-level Monkey errors"""
    pass

class MonkeySyntaxError(MonkeyError):
    """ Raised when source text produced parser diagnostics"""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)

class MonkeyArityError(MonkeyError):
    """ Raised when a macro is called with the wrong number of arguments"""

class MonkeyMacroError(MonkeyError):
    """ Raised when a macro body does not produce quoted syntax"""

class MonkeyOpcodeError(MonkeyError):
    """ Raised when an opcode has no definition"""

    def __init__(self, opcode: int):
        super().__init__(f"opcode {opcode} undefined")
        self.opcode = opcode

# Evaluation errors are deliberately not part of this hierarchy: they are
# monkey.types.objects.Error values so the language can inspect them.
