"""Core domain models for PaperTrend."""

from pydantic import BaseModel, ConfigDict, Field

NO_DESCRIPTION = "No description available"
FETCH_FAILED = "Failed to fetch details"
NOT_AVAILABLE = "Not available"


class ListedPaper(BaseModel):
    """A paper entry found on a listing page."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    paper_url: str = Field(alias="paperUrl")


class PaperDetail(BaseModel):
    """Summary of a single paper assembled from its detail page."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str = NO_DESCRIPTION
    github_url: str = Field(default=NOT_AVAILABLE, alias="githubUrl")
    arxiv_url: str = Field(default=NOT_AVAILABLE, alias="arxivUrl")
    paper_url: str = Field(alias="paperUrl")

    @classmethod
    def degraded(cls, paper: ListedPaper) -> "PaperDetail":
        """Placeholder record for a paper whose detail page could not be read."""
        return cls(
            title=paper.title,
            description=FETCH_FAILED,
            github_url=NOT_AVAILABLE,
            arxiv_url=NOT_AVAILABLE,
            paper_url=paper.paper_url,
        )

    def to_json_dict(self) -> dict[str, str]:
        """Serialize with the public camelCase keys."""
        return self.model_dump(by_alias=True)


__all__ = [
    "NO_DESCRIPTION",
    "FETCH_FAILED",
    "NOT_AVAILABLE",
    "ListedPaper",
    "PaperDetail",
]
