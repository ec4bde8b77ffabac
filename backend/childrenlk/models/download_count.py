"""Per-document download counter for published resources."""

from sqlalchemy import Column, String, Integer, ForeignKey, UniqueConstraint, Uuid

from childrenlk.models.base import Base, TimestampMixin, UUIDMixin


class DocumentDownloadCount(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "document_download_counts"

    resource_id = Column(Uuid(as_uuid=True), ForeignKey("resources.id", ondelete="CASCADE"), nullable=False, index=True)
    document_public_id = Column(String(255), nullable=False)
    count = Column(Integer, default=0, nullable=False)

    __table_args__ = (
        UniqueConstraint("resource_id", "document_public_id", name="uq_download_counts_resource_document"),
    )
