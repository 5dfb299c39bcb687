# Example: create a custom practice lobby with bots, start champion select and
# lock in a champion as soon as it is our turn to pick.
import argparse
import logging
import time

from qso import BotDifficulty, ChampionID, EndpointEvent, LeagueClient, TeamID
from qso.exceptions import EndpointError


def auto_pick(client: LeagueClient, champion: ChampionID):
    def on_event(event: EndpointEvent) -> None:
        if event.uri != "/lol-champ-select/v1/session" or event.event_type == "Delete":
            return
        session = client.get_my_champ_select()
        for action in session.local_actions():
            if action.type == "pick" and action.is_in_progress and not action.completed:
                try:
                    session.select_champion(action, champion)
                except EndpointError as e:
                    logging.warning("Could not pick %s: %s", champion.name, e)

    return on_event


def main(args: argparse.Namespace) -> None:
    with LeagueClient.connect(port=args.port, password=args.password) as client:
        me = client.get_my_summoner()
        print(f"Logged in as {me.riot_id or me.display_name}")

        builder = client.build_lobby(args.lobby_name, team_size=args.team_size)
        for champion in (ChampionID.Annie, ChampionID.Garen, ChampionID.Ashe):
            builder.add_bot(champion, TeamID.CHAOS, BotDifficulty.EASY)
        lobby = builder.build()
        print(f"Created lobby {lobby.party_id}")

        client.subscribe(auto_pick(client, ChampionID[args.champion]))
        lobby.start_champ_select()

        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            client.leave_my_lobby()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Custom practice lobby")
    parser.add_argument("--lobby_name", type=str, default="Practice", help="Lobby name")
    parser.add_argument("--team_size", type=int, default=5, help="Players per team")
    parser.add_argument("--champion", type=str, default="Ahri", help="Champion to lock in")
    parser.add_argument("--port", type=int, default=None, help="Client port (skips discovery)")
    parser.add_argument("--password", type=str, default=None, help="Client password")

    main(parser.parse_args())
