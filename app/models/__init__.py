from .battle import Battle, BattlePlayer
from .character import Character, Skill
from .daily_earning import DailyEarning
from .event_log import EventLog
from .hero import Hero, Rune
from .hero_config import HeroConfig
from .match_earning import MatchEarning
from .player import Player
from .rank_config import RankConfig
from .team import Team, TeamMember

__all__ = (
    "Battle",
    "BattlePlayer",
    "Character",
    "DailyEarning",
    "EventLog",
    "Hero",
    "HeroConfig",
    "MatchEarning",
    "Player",
    "RankConfig",
    "Rune",
    "Skill",
    "Team",
    "TeamMember",
)
