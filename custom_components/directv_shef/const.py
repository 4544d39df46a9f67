"""Constants and enums for the DirecTV SHEF integration."""

from enum import Enum, IntEnum

from homeassistant.const import Platform

DOMAIN = "directv_shef"

CONF_NAME = "name"
CONF_HOST = "host"
CONF_PORT = "port"
CONF_CLIENT_ADDR = "client_addr"

DEFAULT_NAME = "DirecTV"
DEFAULT_PORT = 8080
DEFAULT_POLL_INTERVAL = 10

# The device reports this minor number for channels without a subchannel.
NO_MINOR_CHANNEL = 65535

PLATFORMS = [Platform.MEDIA_PLAYER]


class _StrEnum(str, Enum):
    def __str__(self) -> str:

        return self.value


class RemoteKey(_StrEnum):
    """Remote control key names accepted by /remote/processKey."""

    POWER = "power"
    POWER_ON = "poweron"
    POWER_OFF = "poweroff"
    FORMAT = "format"
    PAUSE = "pause"
    REWIND = "rew"
    REPLAY = "replay"
    STOP = "stop"
    ADVANCE = "advance"
    FFWD = "ffwd"
    RECORD = "record"
    PLAY = "play"
    GUIDE = "guide"
    ACTIVE = "active"
    LIST = "list"
    EXIT = "exit"
    BACK = "back"
    MENU = "menu"
    INFO = "info"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SELECT = "select"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    CHANUP = "chanup"
    CHANDOWN = "chandown"
    PREV = "prev"
    DIGIT_0 = "0"
    DIGIT_1 = "1"
    DIGIT_2 = "2"
    DIGIT_3 = "3"
    DIGIT_4 = "4"
    DIGIT_5 = "5"
    DIGIT_6 = "6"
    DIGIT_7 = "7"
    DIGIT_8 = "8"
    DIGIT_9 = "9"
    DASH = "dash"
    ENTER = "enter"


REMOTE_KEYS = [key.value for key in RemoteKey]


class KeyHold(_StrEnum):
    """Key hold modes; the device presses and releases when omitted."""

    PRESS = "keyDown"
    RELEASE = "keyUp"
    PRESS_AND_RELEASE = "keyPress"


class SerialCommand(_StrEnum):
    """Serial command codes accepted by /serial/processCommand."""

    STANDBY = "FA81"
    ACTIVE = "FA82"
    GET_PRIMARY_STATUS = "FA83"
    GET_COMMAND_VERSION = "FA84"
    GET_CURRENT_CHANNEL = "FA87"
    GET_SIGNAL_QUALITY = "FA90"
    GET_CURRENT_TIME = "FA91"
    GET_USER_COMMAND = "FA92"
    GET_USER_ENTRY = "FA93"
    DISABLE_USER_ENTRY = "FA94"
    GET_RETURN_VALUE = "FA95"
    REBOOT = "FA96"
    SEND_USER_COMMAND = "FAA5"
    OPEN_USER_CHANNEL = "FAA6"
    GET_TUNER = "FA9A"
    GET_PRIMARY_STATUS_MT = "FA8A"
    GET_CURRENT_CHANNEL_MT = "FA8B"
    GET_SIGNAL_QUALITY_MT = "FA9D"
    OPEN_USER_CHANNEL_MT = "FA9F"


class OperatingMode(IntEnum):
    """Operating modes reported by /info/mode."""

    ACTIVE = 0
    STANDBY = 1
    UNKNOWN = -1
