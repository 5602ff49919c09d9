from enum import StrEnum


class Rarity(StrEnum):
    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @property
    def order(self) -> int:
        return list(Rarity).index(self)


class Rank(StrEnum):
    SENTINEL = "sentinel"
    VANGUARD = "vanguard"
    PHANTOM = "phantom"
    REVENANT = "revenant"
    WARDEN = "warden"
    ARCANIST = "arcanist"
    ASCEDANT = "ascedant"
    IMMORTAL = "immortal"
    ETERNAL = "eternal"
    MYTHIC = "mythic"
    GODSLAYER = "godslayer"


class Element(StrEnum):
    FIRE = "Fire"
    WATER = "Water"
    EARTH = "Earth"
    WIND = "Wind"


class BattleMode(StrEnum):
    PVP = "pvp"
    PVE = "pve"
    RAID = "raid"


class BattleStatus(StrEnum):
    INIT_BATTLE = "init_battle"
    IN_BATTLE = "in_battle"
    END_BATTLE = "end_battle"


class TeamSide(StrEnum):
    TEAM_A = "teamA"
    TEAM_B = "teamB"


class SkillType(StrEnum):
    BASIC = "basic"
    SKILL = "skill"
    ULTIMATE = "ultimate"


class EventType(StrEnum):
    FRAGMENT_EARNED = "fragment_earned"
