import logging
import sys
from typing import List, Optional

from hue_core import Bridge, HueError
from hue_core.const import DEFAULT_DEVICE_TYPE
from hue_core.timestamp import format_bridge_time


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) not in (1, 2):
        print("Usage: hue-cli <bridge address> [username]")
        print()
        print("Without a username, a new user is created on the bridge.")
        print("Press the link button on the bridge first, then run the command within 30 seconds.")
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    bridge = Bridge(argv[0])

    try:
        if len(argv) == 1:
            username = bridge.create_user(DEFAULT_DEVICE_TYPE)
            if not username:
                print("Error: the bridge did not return a username")
                return 1
            print(f"Created username: {username}")
            print(f"Run: hue-cli {bridge.address} {username}")
            return 0

        bridge = bridge.with_username(argv[1])
        config = bridge.fetch_configuration()
    except HueError as e:
        print(f"Error: {e}")
        return 1

    print(config)
    print(f"  time:     {format_bridge_time(config.utc) if config.utc else 'unknown'}")
    print(f"  network:  {config.ip_address}/{config.netmask} via {config.gateway} (dhcp={config.dhcp})")
    print(f"  proxy:    {f'{config.proxy_address}:{config.proxy_port}' if config.uses_proxy else 'none'}")
    print(f"  update:   {config.sw_update.state.name}")
    print("\nWhitelisted users:")
    for username, entry in config.whitelist.items():
        last_use = format_bridge_time(entry.last_use_date) if entry.last_use_date else "never"
        print(f"  {username}: {entry.name} (last used {last_use})")

    return 0

if __name__ == "__main__":
    sys.exit(main())
