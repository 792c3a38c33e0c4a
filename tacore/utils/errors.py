# tacore/utils/errors.py
class TacoreError(RuntimeError):
    """
    Base class of every error raised by tacore.
    """


class OutOfRangeError(TacoreError, IndexError):
    """
    Raised for an index the series cannot serve:
    negative, beyond end_index, or already evicted from a bar lookup.
    """


class InvalidArgumentError(TacoreError, ValueError):
    """
    Raised for malformed construction parameters
    (null period, periods_per_slice < 1, threshold <= 0, ...).
    """


class UserInputError(TacoreError):
    """
    Raised for invalid user-provided config (yaml values, env overrides).
    Should NOT print traceback.
    """
