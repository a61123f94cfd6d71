"""
Analysis result ORM model.

One row per analyzed document holding the final summary. The unique
constraint on document_id is what keeps concurrent submissions for the
same document from producing two rows.

Dependencies: sqlalchemy, tos_checker.boundary.db.base
System role: Persistent summaries that short-circuit repeat analyses
"""

from sqlalchemy import String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tos_checker.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class AnalysisResultModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Persisted summary for a document identity.

    Attributes:
        id: UUID primary key (auto-generated)
        document_id: Canonical document identity (unique)
        summary_text: Final summary or sentinel text
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "analysis_results"
    __table_args__ = (
        UniqueConstraint("document_id", name="uq_analysis_results_document_id"),
    )

    document_id: Mapped[str] = mapped_column(
        String(2048),
        nullable=False,
        doc="Canonical document identity, usually the page URL",
    )
    summary_text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Organized summary of flagged issues",
    )
