"""Exceptions raised by ecg-hr-sim."""


class ConfigError(ValueError):
    """Raised when a configuration makes the pipeline undefined.

    Examples are ``hr_min > hr_max``, a duration too short to hold two cardiac
    cycles, or a bandpass upper cutoff at or above the Nyquist frequency.
    Subclasses ``ValueError`` so callers that already guard against invalid
    values keep working.
    """
