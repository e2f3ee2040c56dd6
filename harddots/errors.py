"""Exception types raised by harddots."""


class HarddotsError(Exception):
    """Base error for every failure harddots reports."""


class ConfigError(HarddotsError):
    """The configuration file could not be read, parsed or validated."""