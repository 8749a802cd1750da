"""Create users, catalog, games and per-game ledger tables."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_create_ledger_tables"
down_revision = None
branch_labels = None
depends_on = None

GAME_STATUS = sa.Enum("active", "closing", "complete", name="game_status")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
        sa.Column("nickname", sa.String(length=64), nullable=False),
        sa.Column("turns", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.CheckConstraint("turns >= 0", name="ck_users_turns"),
    )
    op.create_index("ix_users_nickname", "users", ["nickname"], unique=True)

    op.create_table(
        "resource_types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "resource_type_attributes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "resource_type_id",
            sa.Integer(),
            sa.ForeignKey("resource_types.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("data_type", sa.String(length=20), nullable=False),
        sa.Column("is_required", sa.Boolean(), nullable=False),
        sa.Column("default_value", sa.String(length=255), nullable=True),
        sa.UniqueConstraint("resource_type_id", "name"),
    )
    op.create_table(
        "resources",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "resource_type_id",
            sa.Integer(),
            sa.ForeignKey("resource_types.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index(
        "ix_resources_resource_type_id", "resources", ["resource_type_id"]
    )
    op.create_table(
        "resource_attribute_values",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "resource_id",
            sa.Integer(),
            sa.ForeignKey("resources.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "attribute_id",
            sa.Integer(),
            sa.ForeignKey("resource_type_attributes.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("value", sa.String(length=255), nullable=False),
        sa.UniqueConstraint("resource_id", "attribute_id"),
    )
    op.create_index(
        "ix_resource_attribute_values_resource_id",
        "resource_attribute_values",
        ["resource_id"],
    )
    op.create_table(
        "resource_sets",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=True),
    )
    op.create_table(
        "resource_set_items",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "resource_set_id",
            sa.Integer(),
            sa.ForeignKey("resource_sets.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "resource_id",
            sa.Integer(),
            sa.ForeignKey("resources.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.UniqueConstraint("resource_set_id", "resource_id"),
    )
    op.create_index(
        "ix_resource_set_items_resource_set_id",
        "resource_set_items",
        ["resource_set_id"],
    )

    op.create_table(
        "games",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("length_days", sa.Integer(), nullable=False),
        sa.Column("status", GAME_STATUS, nullable=False, server_default="active"),
        sa.Column(
            "resource_set_id",
            sa.Integer(),
            sa.ForeignKey("resource_sets.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("starting_reserve", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("starting_bank", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.CheckConstraint("length_days > 0", name="ck_games_length_days"),
        sa.CheckConstraint("starting_reserve >= 0", name="ck_games_starting_reserve"),
        sa.CheckConstraint("starting_bank >= 0", name="ck_games_starting_bank"),
    )

    op.create_table(
        "ledger_partitions",
        sa.Column(
            "game_id",
            sa.Integer(),
            sa.ForeignKey("games.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("name", sa.String(length=64), nullable=False, unique=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_table(
        "players",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "game_id",
            sa.Integer(),
            sa.ForeignKey("ledger_partitions.game_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("location_id", sa.Integer(), nullable=True),
        sa.Column("turns_active", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("turns_reserve", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("turns_transferred", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("money_cash", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("money_bank", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.UniqueConstraint("game_id", "user_id", name="uq_players_game_user"),
        sa.UniqueConstraint("game_id", "name", name="uq_players_game_name"),
        sa.CheckConstraint("turns_active >= 0", name="ck_players_turns_active"),
        sa.CheckConstraint("turns_reserve >= 0", name="ck_players_turns_reserve"),
        sa.CheckConstraint(
            "turns_transferred >= 0", name="ck_players_turns_transferred"
        ),
        sa.CheckConstraint("money_cash >= 0", name="ck_players_money_cash"),
        sa.CheckConstraint("money_bank >= 0", name="ck_players_money_bank"),
    )
    op.create_index("ix_players_user_id", "players", ["user_id"])
    op.create_index("ix_players_location_id", "players", ["location_id"])

    op.create_table(
        "player_resources",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "game_id",
            sa.Integer(),
            sa.ForeignKey("ledger_partitions.game_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "player_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("players.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "resource_id",
            sa.Integer(),
            sa.ForeignKey("resources.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.UniqueConstraint(
            "player_id", "resource_id", name="uq_player_resources_pair"
        ),
        sa.CheckConstraint("quantity >= 0", name="ck_player_resources_quantity"),
    )
    op.create_index(
        "ix_player_resources_player_id", "player_resources", ["player_id"]
    )
    op.create_index(
        "ix_player_resources_resource_id", "player_resources", ["resource_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_player_resources_resource_id", table_name="player_resources")
    op.drop_index("ix_player_resources_player_id", table_name="player_resources")
    op.drop_table("player_resources")
    op.drop_index("ix_players_location_id", table_name="players")
    op.drop_index("ix_players_user_id", table_name="players")
    op.drop_table("players")
    op.drop_table("ledger_partitions")
    op.drop_table("games")
    GAME_STATUS.drop(op.get_bind(), checkfirst=True)
    op.drop_index("ix_resource_set_items_resource_set_id", table_name="resource_set_items")
    op.drop_table("resource_set_items")
    op.drop_table("resource_sets")
    op.drop_index(
        "ix_resource_attribute_values_resource_id",
        table_name="resource_attribute_values",
    )
    op.drop_table("resource_attribute_values")
    op.drop_index("ix_resources_resource_type_id", table_name="resources")
    op.drop_table("resources")
    op.drop_table("resource_type_attributes")
    op.drop_table("resource_types")
    op.drop_index("ix_users_nickname", table_name="users")
    op.drop_table("users")
