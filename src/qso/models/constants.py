"""Enumerations mirroring identifiers used by the League client API.

Integer enums serialize to their numeric value, string enums to their
string value, so they can be dropped straight into request models.
"""

from enum import Enum, IntEnum


class QueueType(IntEnum):
    """Matchmaking queue ids accepted by POST /lol-lobby/v2/lobby."""

    DRAFT_PICK = 400
    RANKED_SOLO_DUO = 420
    BLIND_PICK = 430
    RANKED_FLEX = 440
    ARAM = 450
    CLASH = 700
    COOP_VS_AI_INTRO = 830
    COOP_VS_AI_BEGINNER = 840
    COOP_VS_AI_INTERMEDIATE = 850
    URF = 900
    TFT_NORMAL = 1090
    TFT_RANKED = 1100
    TFT_TUTORIAL = 1110
    TFT_HYPER_ROLL = 1130
    TFT_DOUBLE_UP = 1160
    ARENA = 1700
    SWIFTPLAY = 480
    PRACTICE_TOOL = 3140


class GameType(IntEnum):
    """Custom game pick modes (``configuration.mutators.id``)."""

    BLIND_PICK = 1
    DRAFT_PICK = 2
    ALL_RANDOM = 4
    TOURNAMENT_DRAFT = 6


class MapID(IntEnum):
    """Map ids."""

    TWISTED_TREELINE = 10
    SUMMONERS_RIFT = 11
    HOWLING_ABYSS = 12
    CONVERGENCE = 22
    ARENA = 30


class TeamID(IntEnum):
    """Team ids; ORDER is blue side, CHAOS is red side."""

    ORDER = 100
    CHAOS = 200


class SpectatorPolicy(str, Enum):
    """Who may spectate a custom game."""

    ALL_ALLOWED = "AllAllowed"
    LOBBY_ALLOWED = "LobbyAllowed"
    NOT_ALLOWED = "NotAllowed"


class Position(str, Enum):
    """Position preferences for draft lobbies."""

    TOP = "TOP"
    JUNGLE = "JUNGLE"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"
    UTILITY = "UTILITY"
    FILL = "FILL"
    UNSELECTED = "UNSELECTED"


class BotDifficulty(str, Enum):
    """Difficulty levels for custom game bots."""

    NONE = "NONE"
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"
    UBER = "UBER"
    TUTORIAL = "TUTORIAL"
    INTRO = "INTRO"


class Availability(str, Enum):
    """Chat availability states."""

    CHAT = "chat"
    AWAY = "away"
    DND = "dnd"
    MOBILE = "mobile"
    OFFLINE = "offline"


class EventTypes:
    """``eventType`` values carried by WebSocket events."""

    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"


class ChampionID(IntEnum):
    """Champion ids. Member names are the champions' internal names."""

    Annie = 1
    Olaf = 2
    Galio = 3
    TwistedFate = 4
    XinZhao = 5
    Urgot = 6
    Leblanc = 7
    Vladimir = 8
    Fiddlesticks = 9
    Kayle = 10
    MasterYi = 11
    Alistar = 12
    Ryze = 13
    Sion = 14
    Sivir = 15
    Soraka = 16
    Teemo = 17
    Tristana = 18
    Warwick = 19
    Nunu = 20
    MissFortune = 21
    Ashe = 22
    Tryndamere = 23
    Jax = 24
    Morgana = 25
    Zilean = 26
    Singed = 27
    Evelynn = 28
    Twitch = 29
    Karthus = 30
    Chogath = 31
    Amumu = 32
    Rammus = 33
    Anivia = 34
    Shaco = 35
    DrMundo = 36
    Sona = 37
    Kassadin = 38
    Irelia = 39
    Janna = 40
    Gangplank = 41
    Corki = 42
    Karma = 43
    Taric = 44
    Veigar = 45
    Trundle = 48
    Swain = 50
    Caitlyn = 51
    Blitzcrank = 53
    Malphite = 54
    Katarina = 55
    Nocturne = 56
    Maokai = 57
    Renekton = 58
    JarvanIV = 59
    Elise = 60
    Orianna = 61
    MonkeyKing = 62
    Brand = 63
    LeeSin = 64
    Vayne = 67
    Rumble = 68
    Cassiopeia = 69
    Skarner = 72
    Heimerdinger = 74
    Nasus = 75
    Nidalee = 76
    Udyr = 77
    Poppy = 78
    Gragas = 79
    Pantheon = 80
    Ezreal = 81
    Mordekaiser = 82
    Yorick = 83
    Akali = 84
    Kennen = 85
    Garen = 86
    Leona = 89
    Malzahar = 90
    Talon = 91
    Riven = 92
    KogMaw = 96
    Shen = 98
    Lux = 99
    Xerath = 101
    Shyvana = 102
    Ahri = 103
    Graves = 104
    Fizz = 105
    Volibear = 106
    Rengar = 107
    Varus = 110
    Nautilus = 111
    Viktor = 112
    Sejuani = 113
    Fiora = 114
    Ziggs = 115
    Lulu = 117
    Draven = 119
    Hecarim = 120
    Khazix = 121
    Darius = 122
    Jayce = 126
    Lissandra = 127
    Diana = 131
    Quinn = 133
    Syndra = 134
    AurelionSol = 136
    Kayn = 141
    Zoe = 142
    Zyra = 143
    Kaisa = 145
    Seraphine = 147
    Gnar = 150
    Zac = 154
    Yasuo = 157
    Velkoz = 161
    Taliyah = 163
    Camille = 164
    Akshan = 166
    Belveth = 200
    Braum = 201
    Jhin = 202
    Kindred = 203
    Zeri = 221
    Jinx = 222
    TahmKench = 223
    Briar = 233
    Viego = 234
    Senna = 235
    Lucian = 236
    Zed = 238
    Kled = 240
    Ekko = 245
    Qiyana = 246
    Vi = 254
    Aatrox = 266
    Nami = 267
    Azir = 268
    Yuumi = 350
    Samira = 360
    Thresh = 412
    Illaoi = 420
    RekSai = 421
    Ivern = 427
    Kalista = 429
    Bard = 432
    Rakan = 497
    Xayah = 498
    Ornn = 516
    Sylas = 517
    Neeko = 518
    Aphelios = 523
    Rell = 526
    Pyke = 555
    Vex = 711
    Yone = 777
    Sett = 875
    Lillia = 876
    Gwen = 887
    Renata = 888
    Nilah = 895
    KSante = 897
    Smolder = 901
    Milio = 902
    Hwei = 910
    Naafiri = 950
