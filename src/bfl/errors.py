## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class BfError(Exception):
    def __init__(self, message: str = "", *, bf_ip=None, bf_instruction=None, bf_position=None):
        """Base class for all errors raised while executing a program."""
        super().__init__(message)
        self.bf_ip: int = bf_ip
        self.bf_instruction: object = bf_instruction
        self.bf_position: int = bf_position

class BfBranchError(BfError, RuntimeError):
    """Loop exit reached with no open loop entry left on the branch stack."""
    pass

class BfInputError(BfError, ValueError):
    def __init__(self, message, *, line=None, bf_ip=None, bf_instruction=None, bf_position=None):
        super().__init__(message, bf_ip=bf_ip, bf_instruction=bf_instruction, bf_position=bf_position)
        self.line: str | None = line
