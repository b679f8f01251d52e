from enum import Enum, IntEnum

class ApiErrorType(IntEnum):
    """Enumeration of error codes reported in the "type" field of an error envelope."""
    UNKNOWN = 0
    UNAUTHORIZED_USER = 1
    INVALID_JSON = 2
    RESOURCE_NOT_AVAILABLE = 3
    METHOD_NOT_AVAILABLE = 4
    MISSING_PARAMETERS = 5
    PARAMETER_NOT_AVAILABLE = 6
    INVALID_VALUE = 7
    PARAMETER_NOT_MODIFIABLE = 8
    TOO_MANY_ITEMS = 11
    PORTAL_CONNECTION_REQUIRED = 12
    LINK_BUTTON_NOT_PRESSED = 101
    DHCP_CANNOT_BE_DISABLED = 110
    INVALID_UPDATE_STATE = 111
    INTERNAL_ERROR = 901

    @classmethod
    def parse(cls, int_value: int) -> 'ApiErrorType':
        """Parse an error code, falling back to UNKNOWN for codes not listed here."""
        try:
            return cls(int_value)
        except ValueError:
            return cls.UNKNOWN

class SoftwareUpdateState(Enum):
    """Enumeration of software update states reported in swupdate.updatestate."""
    NO_UPDATE = 0
    DOWNLOADING = 1
    READY_TO_INSTALL = 2
    INSTALLING = 3
    UNKNOWN = -1

    @classmethod
    def parse(cls, int_value: int) -> 'SoftwareUpdateState':
        """Parse an update state code into a software update state."""
        if int_value == 0:
            return cls.NO_UPDATE
        elif int_value == 1:
            return cls.DOWNLOADING
        elif int_value == 2:
            return cls.READY_TO_INSTALL
        elif int_value == 3:
            return cls.INSTALLING
        else:
            return cls.UNKNOWN
