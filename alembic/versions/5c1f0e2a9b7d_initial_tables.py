from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
import sqlmodel

revision: str = "5c1f0e2a9b7d"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "translation_modules",
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column(
            "description", sqlmodel.sql.sqltypes.AutoString(length=500), nullable=False
        ),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "translation_sections",
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column(
            "description", sqlmodel.sql.sqltypes.AutoString(length=500), nullable=False
        ),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column("module", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.ForeignKeyConstraint(["module"], ["translation_modules.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_translation_sections_module"),
        "translation_sections",
        ["module"],
        unique=False,
    )
    op.create_table(
        "translations",
        sa.Column("en", sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=False),
        sa.Column("de", sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=False),
        sa.Column("fr", sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=False),
        sa.Column("es", sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("module", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column(
            "translation_key", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False
        ),
        sa.ForeignKeyConstraint(["module"], ["translation_modules.id"]),
        sa.ForeignKeyConstraint(["translation_key"], ["translation_sections.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("translation_key"),
    )
    op.create_index(
        op.f("ix_translations_module"), "translations", ["module"], unique=False
    )
    op.create_table(
        "languages",
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("code", sqlmodel.sql.sqltypes.AutoString(length=5), nullable=False),
        sa.Column("is_default", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_languages_code"), "languages", ["code"], unique=True)


def downgrade() -> None:
    op.drop_index(op.f("ix_languages_code"), table_name="languages")
    op.drop_table("languages")
    op.drop_index(op.f("ix_translations_module"), table_name="translations")
    op.drop_table("translations")
    op.drop_index(
        op.f("ix_translation_sections_module"), table_name="translation_sections"
    )
    op.drop_table("translation_sections")
    op.drop_table("translation_modules")
