"""High level client for the local League client API.

LeagueClient is the connection handle: it owns the Connection, the HTTP
bridge and the WebSocket event stream, and exposes typed wrappers for the
endpoints qso knows about. DTOs returned by it are bound to it, so their
convenience methods (``lobby.kick(...)``) go through the same connection.
"""

from __future__ import annotations

import logging
import ssl
from collections.abc import Mapping
from typing import Any, TypeVar

from websockets.exceptions import WebSocketException

from qso.builders import ChatProfileBuilder, LobbyBuilder
from qso.client.events import EventDispatcher, EventHandler, EventStream
from qso.client.http_client import LeagueHTTPClient
from qso.config import QsoConfig
from qso.connection import Connection, locate_connection, negotiate_ssl_context
from qso.exceptions import QsoConnectionError, QsoError
from qso.models import (
    BuildInfo,
    ChampSelectSession,
    ChatUser,
    ContentFilters,
    FriendRequest,
    GameType,
    LootRecipe,
    Lobby,
    MapID,
    MyChatUser,
    MySummoner,
    PerkPageResource,
    PlayerLoot,
    PlayerLootUpdate,
    Queue,
    QueueRequest,
    QueueType,
    ReplayMetadata,
    ServiceStatusTickerMessage,
    Summoner,
    bind_result,
)
from qso.serialization import encode_body, encode_value

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LeagueClient:
    """Connection handle and typed API for one running League client.

    Example:
        with LeagueClient.connect() as client:
            me = client.get_my_summoner()
            lobby = client.create_lobby(QueueType.ARAM)
            client.subscribe(lambda event: print(event.uri))
    """

    def __init__(self, connection: Connection, config: QsoConfig | None = None):
        """Initialize the client without connecting.

        Args:
            connection: Host, port and credential of the League client.
            config: Client configuration; defaults to QsoConfig().
        """
        self.connection = connection
        self.config = config or QsoConfig()
        self.http = LeagueHTTPClient(
            connection,
            connect_timeout=self.config.connect_timeout,
            very_verbose=self.config.very_verbose,
        )
        self.events = EventDispatcher(very_verbose=self.config.very_verbose)
        self._stream = EventStream(
            connection, self.events, connect_timeout=self.config.connect_timeout
        )
        self.ssl_context: ssl.SSLContext | None = None
        self.build: BuildInfo | None = None

    @classmethod
    def connect(
        cls,
        host: str | None = None,
        port: int | None = None,
        password: str | None = None,
        *,
        config: QsoConfig | None = None,
    ) -> LeagueClient:
        """Locate the League client (or use the given parameters) and open it.

        Raises:
            DiscoveryError: If auto-discovery fails.
            QsoConnectionError: If the connection cannot be initialized.
        """
        config = config or QsoConfig()
        connection = locate_connection(host, port, password, config=config)
        client = cls(connection, config)
        client.open()
        return client

    def __enter__(self) -> LeagueClient:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()

    # =========================================================================
    # Connection Lifecycle
    # =========================================================================

    @property
    def is_open(self) -> bool:
        return self.build is not None

    def open(self) -> BuildInfo:
        """Set up TLS trust, HTTP and WebSocket, then verify with one request.

        Returns:
            Build information reported by the client.

        Raises:
            QsoConnectionError: If any part of the initialization fails.
        """
        if self.build is not None:
            return self.build

        try:
            self.ssl_context = negotiate_ssl_context(
                self.connection.host,
                self.connection.port,
                self.config.certificate_thumbprint,
                timeout=self.config.connect_timeout,
            )
            self.http.connect(verify=self.ssl_context)
            if self.config.subscribe_events:
                self._stream.open(self.ssl_context)
            build = self.get_build()
        except QsoConnectionError:
            self.close()
            raise
        except (QsoError, OSError, WebSocketException) as e:
            self.close()
            raise QsoConnectionError(
                f"Could not initialize connection to {self.connection.base_url}: {e}"
            ) from e

        logger.info(
            "Qso initialized. (League branch %s, League version %s)",
            build.branch,
            build.version,
        )
        self.build = build
        return build

    def close(self) -> None:
        """Close the event stream and the HTTP client."""
        self._stream.close()
        self.http.close()
        self.build = None

    # =========================================================================
    # Bridge
    # =========================================================================

    def call(
        self,
        path: str,
        method: str = "GET",
        body: str | None = None,
        *params: Any,
        query: Mapping[str, Any] | None = None,
    ) -> str:
        """Perform one request and return the raw body. See LeagueHTTPClient.call."""
        return self.http.call(path, method, body, *params, query=query)

    def get_dto(
        self,
        target_type: type[T] | Any,
        path: str,
        method: str = "GET",
        body: str | None = None,
        *params: Any,
        query: Mapping[str, Any] | None = None,
    ) -> T:
        """Perform one request and deserialize the body as ``target_type``.

        Returned models with methods are bound to this client.
        """
        result = self.http.get_dto(target_type, path, method, body, *params, query=query)
        return bind_result(result, self)

    def subscribe(self, handler: EventHandler) -> EventHandler:
        """Register a handler called with every EndpointEvent."""
        return self.events.subscribe(handler)

    def unsubscribe(self, handler: EventHandler) -> None:
        self.events.unsubscribe(handler)

    # =========================================================================
    # System
    # =========================================================================

    def get_build(self) -> BuildInfo:
        return self.get_dto(BuildInfo, "/system/v1/builds")

    def get_ticker_messages(self) -> list[ServiceStatusTickerMessage]:
        return self.get_dto(
            list[ServiceStatusTickerMessage], "/lol-service-status/v1/ticker-messages"
        )

    def get_content_filters(self) -> list[str]:
        """Content targeting filters Riot applies to this account."""
        return self.get_dto(ContentFilters, "/lol-content-targeting/v1/filters").filters

    def get_queues(self) -> list[Queue]:
        return self.get_dto(list[Queue], "/lol-game-queues/v1/queues")

    def flash_ux(self) -> None:
        """Flash the client window and its taskbar icon."""
        self.call("/riotclient/ux-flash", "POST")

    def minimize_ux(self) -> None:
        self.call("/riotclient/ux-minimize", "POST")

    def show_ux(self) -> None:
        self.call("/riotclient/ux-show", "POST")

    # =========================================================================
    # Summoners & Chat
    # =========================================================================

    def get_my_summoner(self) -> MySummoner:
        return self.get_dto(MySummoner, "/lol-summoner/v1/current-summoner")

    def get_summoner_by_id(self, summoner_id: int) -> Summoner:
        return self.get_dto(
            Summoner, "/lol-summoner/v1/summoners/{0}", "GET", None, summoner_id
        )

    def get_summoners_by_name(self, name: str) -> list[Summoner]:
        return self.get_dto(
            list[Summoner], "/lol-summoner/v2/summoners", query={"name": name}
        )

    def get_my_chat_user(self) -> MyChatUser:
        return self.get_dto(MyChatUser, "/lol-chat/v1/me")

    def get_my_friends(self) -> list[ChatUser]:
        return self.get_dto(list[ChatUser], "/lol-chat/v1/friends")

    def build_chat_user(self) -> ChatProfileBuilder:
        """Start a builder for the local chat presence."""
        return ChatProfileBuilder(self)

    def send_friend_request(self, target: int | str) -> None:
        """Send a friend request by summoner id or by summoner name."""
        if isinstance(target, str):
            body = FriendRequest(name=target)
        else:
            body = FriendRequest(id=target)
        self.call("/lol-chat/v1/friend-requests", "POST", encode_body(body))

    def revoke_friend_request(self, summoner_id: int) -> None:
        self.call("/lol-chat/v1/friend-requests/{0}", "DELETE", None, summoner_id)

    def remove_friend(self, summoner_id: int) -> None:
        self.call("/lol-chat/v1/friends/{0}", "DELETE", None, summoner_id)

    # =========================================================================
    # Lobby & Matchmaking
    # =========================================================================

    def get_my_lobby(self) -> Lobby:
        return self.get_dto(Lobby, "/lol-lobby/v2/lobby")

    def leave_my_lobby(self) -> None:
        self.call("/lol-lobby/v2/lobby", "DELETE")

    def create_lobby(self, queue_id: QueueType | int) -> Lobby:
        """Create a matchmade lobby for ``queue_id``."""
        body = QueueRequest(queue_id=queue_id)
        return self.get_dto(Lobby, "/lol-lobby/v2/lobby", "POST", encode_body(body))

    def build_lobby(
        self,
        lobby_name: str,
        game_mode: str = "CLASSIC",
        game_type: GameType | int = GameType.BLIND_PICK,
        map_id: MapID | int = MapID.SUMMONERS_RIFT,
        team_size: int = 5,
    ) -> LobbyBuilder:
        """Start a builder for a custom game lobby."""
        return LobbyBuilder(self, lobby_name, game_mode, game_type, map_id, team_size)

    def start_queue(self) -> None:
        self.call("/lol-lobby/v2/lobby/matchmaking/search", "POST")

    def stop_queue(self) -> None:
        self.call("/lol-lobby/v2/lobby/matchmaking/search", "DELETE")

    def accept_queue(self) -> None:
        """Accept the ready check."""
        self.call("/lol-matchmaking/v1/ready-check/accept", "POST")

    def decline_queue(self) -> None:
        self.call("/lol-matchmaking/v1/ready-check/decline", "POST")

    def get_my_champ_select(self) -> ChampSelectSession:
        return self.get_dto(ChampSelectSession, "/lol-champ-select/v1/session")

    # =========================================================================
    # Loot
    # =========================================================================

    def get_my_player_loot(self) -> list[PlayerLoot]:
        return self.get_dto(list[PlayerLoot], "/lol-loot/v1/player-loot")

    def get_loot_by_id(self, loot_id: str) -> PlayerLoot:
        return self.get_dto(PlayerLoot, "/lol-loot/v1/player-loot/{0}", "GET", None, loot_id)

    def craft_recipe(
        self,
        item: PlayerLoot | str,
        recipe: LootRecipe | str,
        repeat: int = 0,
    ) -> PlayerLootUpdate:
        """Craft ``recipe`` from ``item``, ``repeat`` times if given."""
        loot_id = item.loot_id if isinstance(item, PlayerLoot) else item
        recipe_name = recipe.recipe_name if isinstance(recipe, LootRecipe) else recipe
        query = {"repeat": repeat} if repeat > 0 else None
        return self.get_dto(
            PlayerLootUpdate,
            "/lol-loot/v1/recipes/{0}/craft",
            "POST",
            encode_value([loot_id]),
            recipe_name,
            query=query,
        )

    # =========================================================================
    # Replays & Runes
    # =========================================================================

    def get_replay_metadata(self, game_id: int) -> ReplayMetadata:
        return self.get_dto(
            ReplayMetadata, "/lol-replays/v1/metadata/{0}", "GET", None, game_id
        )

    def download_replay(self, game_id: int) -> None:
        self.call("/lol-replays/v1/rofls/{0}/download", "POST", "{}", game_id)

    def get_replays_path(self) -> str:
        """Folder the client saves replays to."""
        return self.get_dto(str, "/lol-replays/v1/rofls/path")

    def get_my_rune_pages(self) -> list[PerkPageResource]:
        return self.get_dto(list[PerkPageResource], "/lol-perks/v1/pages")

    def get_rune_page_by_id(self, page_id: int) -> PerkPageResource:
        return self.get_dto(
            PerkPageResource, "/lol-perks/v1/pages/{0}", "GET", None, page_id
        )
