# pshp/errors.py
#
# Only one failure kind is allowed to leave the loop: AllocationError.
# Everything else (bad cd, missing program, fork failure) is reported
# where it happens and the loop carries on.


class ShellError(RuntimeError):
    pass


class AllocationError(ShellError):
    """Line or token storage could not be grown. Fatal."""

    def __init__(self, message: str = "allocation error"):
        super().__init__(message)
