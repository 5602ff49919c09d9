# pyright: reportAttributeAccessIssue=false, reportUndefinedVariable=false
"""initial schema

Revision ID: 3f1c2a7d9b10
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel.sql.sqltypes
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a7d9b10"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ENUMS = {
    "rarity": ("COMMON", "RARE", "EPIC", "LEGENDARY"),
    "rank": (
        "SENTINEL",
        "VANGUARD",
        "PHANTOM",
        "REVENANT",
        "WARDEN",
        "ARCANIST",
        "ASCEDANT",
        "IMMORTAL",
        "ETERNAL",
        "MYTHIC",
        "GODSLAYER",
    ),
    "element": ("FIRE", "WATER", "EARTH", "WIND"),
    "battlemode": ("PVP", "PVE", "RAID"),
    "battlestatus": ("INIT_BATTLE", "IN_BATTLE", "END_BATTLE"),
    "teamside": ("TEAM_A", "TEAM_B"),
    "eventtype": ("FRAGMENT_EARNED",),
}


def _enum(name: str) -> postgresql.ENUM:
    # Types are created once up front and shared by every table that uses them
    return postgresql.ENUM(*ENUMS[name], name=name, create_type=False)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    for name, values in ENUMS.items():
        sa.Enum(*values, name=name).create(op.get_bind(), checkfirst=True)

    op.create_table(
        "players",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("username", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("wallet_address", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("rank", _enum("rank"), nullable=False),
        sa.Column("total_earning", sa.Float(), nullable=False),
        sa.Column("last_active", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_players_id"), "players", ["id"], unique=False)
    op.create_index(op.f("ix_players_username"), "players", ["username"], unique=True)
    op.create_index(op.f("ix_players_wallet_address"), "players", ["wallet_address"], unique=False)

    op.create_table(
        "skills",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("atk_multiplier", sa.Float(), nullable=False),
        sa.Column("def_multiplier", sa.Float(), nullable=False),
        sa.Column("hp_multiplier", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_skills_id"), "skills", ["id"], unique=False)

    op.create_table(
        "runes",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("hp_bonus", sa.Integer(), nullable=False),
        sa.Column("atk_bonus", sa.Integer(), nullable=False),
        sa.Column("def_bonus", sa.Integer(), nullable=False),
        sa.Column("spd_bonus", sa.Integer(), nullable=False),
        sa.Column("crit_rate_bonus", sa.Float(), nullable=False),
        sa.Column("crit_dmg_bonus", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_runes_id"), "runes", ["id"], unique=False)

    op.create_table(
        "characters",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("element", _enum("element"), nullable=False),
        sa.Column("hp", sa.Integer(), nullable=False),
        sa.Column("atk", sa.Integer(), nullable=False),
        sa.Column("defense", sa.Integer(), nullable=False),
        sa.Column("spd", sa.Integer(), nullable=False),
        sa.Column("crit_rate", sa.Float(), nullable=False),
        sa.Column("crit_dmg", sa.Float(), nullable=False),
        sa.Column("basic_attack_id", sa.Integer(), nullable=True),
        sa.Column("skill_attack_id", sa.Integer(), nullable=True),
        sa.Column("ultimate_attack_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["basic_attack_id"], ["skills.id"]),
        sa.ForeignKeyConstraint(["skill_attack_id"], ["skills.id"]),
        sa.ForeignKeyConstraint(["ultimate_attack_id"], ["skills.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_characters_id"), "characters", ["id"], unique=False)
    op.create_index(op.f("ix_characters_name"), "characters", ["name"], unique=False)

    op.create_table(
        "heroes",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("character_id", sa.Integer(), nullable=False),
        sa.Column("rune_id", sa.Integer(), nullable=True),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column("rarity", _enum("rarity"), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False),
        sa.Column("hp", sa.Integer(), nullable=True),
        sa.Column("atk", sa.Integer(), nullable=True),
        sa.Column("defense", sa.Integer(), nullable=True),
        sa.Column("spd", sa.Integer(), nullable=True),
        sa.Column("crit_rate", sa.Float(), nullable=True),
        sa.Column("crit_dmg", sa.Float(), nullable=True),
        sa.ForeignKeyConstraint(["character_id"], ["characters.id"]),
        sa.ForeignKeyConstraint(["owner_id"], ["players.id"]),
        sa.ForeignKeyConstraint(["rune_id"], ["runes.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_heroes_id"), "heroes", ["id"], unique=False)
    op.create_index(op.f("ix_heroes_owner_id"), "heroes", ["owner_id"], unique=False)
    op.create_index(op.f("ix_heroes_character_id"), "heroes", ["character_id"], unique=False)
    op.create_index(op.f("ix_heroes_rune_id"), "heroes", ["rune_id"], unique=False)

    op.create_table(
        "teams",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["owner_id"], ["players.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("owner_id", "name", name="uq_team_owner_name"),
    )
    op.create_index(op.f("ix_teams_id"), "teams", ["id"], unique=False)
    op.create_index(op.f("ix_teams_owner_id"), "teams", ["owner_id"], unique=False)

    op.create_table(
        "team_members",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("team_id", sa.Integer(), nullable=False),
        sa.Column("hero_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["hero_id"], ["heroes.id"]),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("team_id", "position", name="uq_team_member_position"),
        sa.UniqueConstraint("team_id", "hero_id", name="uq_team_member_hero"),
    )
    op.create_index(op.f("ix_team_members_id"), "team_members", ["id"], unique=False)
    op.create_index(op.f("ix_team_members_team_id"), "team_members", ["team_id"], unique=False)
    op.create_index(op.f("ix_team_members_hero_id"), "team_members", ["hero_id"], unique=False)

    op.create_table(
        "battles",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("mode", _enum("battlemode"), nullable=False),
        sa.Column("status", _enum("battlestatus"), nullable=False),
        sa.Column("winner_side", _enum("teamside"), nullable=True),
        sa.Column("log", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_battles_id"), "battles", ["id"], unique=False)

    op.create_table(
        "battle_players",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("battle_id", sa.Integer(), nullable=False),
        sa.Column("player_id", sa.Integer(), nullable=False),
        sa.Column("team_id", sa.Integer(), nullable=False),
        sa.Column("side", _enum("teamside"), nullable=False),
        sa.Column("is_winner", sa.Boolean(), nullable=False),
        sa.Column("roster", sa.JSON(), nullable=True),
        sa.ForeignKeyConstraint(["battle_id"], ["battles.id"]),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"]),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_battle_players_id"), "battle_players", ["id"], unique=False)
    op.create_index(
        op.f("ix_battle_players_battle_id"), "battle_players", ["battle_id"], unique=False
    )
    op.create_index(
        op.f("ix_battle_players_player_id"), "battle_players", ["player_id"], unique=False
    )
    op.create_index(op.f("ix_battle_players_team_id"), "battle_players", ["team_id"], unique=False)

    op.create_table(
        "hero_configs",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("rarity", _enum("rarity"), nullable=False),
        sa.Column("team_modifier", sa.Float(), nullable=False),
        sa.Column("team_value", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_hero_configs_id"), "hero_configs", ["id"], unique=False)
    op.create_index(op.f("ix_hero_configs_rarity"), "hero_configs", ["rarity"], unique=True)

    op.create_table(
        "rank_configs",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("rank", _enum("rank"), nullable=False),
        sa.Column("modifier", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_rank_configs_id"), "rank_configs", ["id"], unique=False)
    op.create_index(op.f("ix_rank_configs_rank"), "rank_configs", ["rank"], unique=True)

    op.create_table(
        "match_earnings",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("player_id", sa.Integer(), nullable=False),
        sa.Column("battle_id", sa.Integer(), nullable=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("game_number", sa.Integer(), nullable=False),
        sa.Column("win_count", sa.Integer(), nullable=False),
        sa.Column("win_streak", sa.Integer(), nullable=False),
        sa.Column("skill_fragment", sa.Float(), nullable=False),
        sa.Column("economic_fragment", sa.Float(), nullable=False),
        sa.Column("booster", sa.Integer(), nullable=False),
        sa.Column("rank_modifier", sa.Float(), nullable=False),
        sa.Column("total_fragment", sa.Float(), nullable=False),
        sa.ForeignKeyConstraint(["battle_id"], ["battles.id"]),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "player_id", "date", "game_number", name="uq_match_earning_game_number"
        ),
    )
    op.create_index(op.f("ix_match_earnings_id"), "match_earnings", ["id"], unique=False)
    op.create_index(
        op.f("ix_match_earnings_player_id"), "match_earnings", ["player_id"], unique=False
    )
    op.create_index(
        op.f("ix_match_earnings_battle_id"), "match_earnings", ["battle_id"], unique=False
    )
    op.create_index(op.f("ix_match_earnings_date"), "match_earnings", ["date"], unique=False)

    op.create_table(
        "daily_earnings",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("player_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("rank", _enum("rank"), nullable=False),
        sa.Column("win_streak", sa.Integer(), nullable=False),
        sa.Column("total_fragment", sa.Float(), nullable=False),
        sa.Column("total_daily_earning", sa.Float(), nullable=False),
        sa.Column("heroes_used", sa.JSON(), nullable=False),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("player_id", "date", name="uq_daily_earning_player_date"),
    )
    op.create_index(op.f("ix_daily_earnings_id"), "daily_earnings", ["id"], unique=False)
    op.create_index(
        op.f("ix_daily_earnings_player_id"), "daily_earnings", ["player_id"], unique=False
    )
    op.create_index(op.f("ix_daily_earnings_date"), "daily_earnings", ["date"], unique=False)

    op.create_table(
        "event_logs",
        *_timestamps(),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("player_id", sa.Integer(), nullable=False),
        sa.Column("battle_id", sa.Integer(), nullable=True),
        sa.Column("event_type", _enum("eventtype"), nullable=False),
        sa.Column("context", sa.JSON(), nullable=False),
        sa.ForeignKeyConstraint(["battle_id"], ["battles.id"]),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_event_logs_id"), "event_logs", ["id"], unique=False)
    op.create_index(op.f("ix_event_logs_player_id"), "event_logs", ["player_id"], unique=False)
    op.create_index(op.f("ix_event_logs_battle_id"), "event_logs", ["battle_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        "event_logs",
        "daily_earnings",
        "match_earnings",
        "rank_configs",
        "hero_configs",
        "battle_players",
        "battles",
        "team_members",
        "teams",
        "heroes",
        "characters",
        "runes",
        "skills",
        "players",
    ):
        op.drop_table(table)

    for name in ENUMS:
        sa.Enum(name=name).drop(op.get_bind(), checkfirst=True)
