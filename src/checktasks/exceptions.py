"""
Exceptions raised by checktasks
"""


class CheckError(Exception):
    """Base class for all checktasks errors"""


class ConfigurationError(CheckError):
    """A configured directory or setting cannot be used"""


class LocaleDirectoryNotFoundError(ConfigurationError):
    """A configured locale directory does not exist"""


class MissingReferenceLocaleError(ConfigurationError):
    """A locale directory has no reference locale file"""


class LocaleParseError(CheckError):
    """A locale file is not a valid locale mapping"""


class TranslationServiceError(CheckError):
    """The external translation service failed"""
