# Example: print lobby and champion select events with AsyncLeagueClient.
import asyncio
import logging

from qso import AsyncLeagueClient, EndpointEvent

WATCHED = ("/lol-lobby/v2/lobby", "/lol-champ-select/v1/session")


async def on_event(event: EndpointEvent) -> None:
    if event.uri.startswith(WATCHED):
        print(f"{event.event_type:<6} {event.uri}")


async def main() -> None:
    client = await AsyncLeagueClient.connect()
    client.register_event_handler(on_event)
    try:
        build = client.build
        print(f"Connected to League {build.version}, waiting for events")
        while True:
            await asyncio.sleep(1)
    finally:
        await client.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
