"""Constants for the Hue bridge local API."""

__version__ = "0.1.0"

# Paths relative to http://<address>
API_PATH = "/api"
CONFIG_PATH = "/config"

# Fixed layout of every timestamp the bridge reports (local time, no zone)
TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Value of "proxyaddress" when the bridge is not using a proxy
NO_PROXY_ADDRESS = "none"

# Device type sent when pairing from the command line
DEFAULT_DEVICE_TYPE = "hue_cli#python"

USER_AGENT = f"hue-core/{__version__}"
