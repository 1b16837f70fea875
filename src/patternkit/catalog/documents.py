"""Document templates for the prototype registry."""
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from patternkit.domain.prototype import Prototype


@dataclass
class Author(Prototype):
    name: str
    email: Optional[str] = None

    def clone(self) -> "Author":
        return Author(name=self.name, email=self.email)


@dataclass
class Section(Prototype):
    heading: str
    paragraphs: List[str] = field(default_factory=list)

    def clone(self) -> "Section":
        return Section(heading=self.heading, paragraphs=list(self.paragraphs))


@dataclass
class Document(Prototype):
    """A pre-filled document such as a report or letter template.

    ``clone`` duplicates the author, every section and the tag and metadata
    containers; title and date are immutable and shared.
    """
    title: str
    author: Author
    created: date = field(default_factory=date.today)
    sections: List[Section] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)

    def clone(self) -> "Document":
        return Document(
            title=self.title,
            author=self.author.clone(),
            created=self.created,
            sections=[section.clone() for section in self.sections],
            tags=list(self.tags),
            metadata=dict(self.metadata),
        )

    def add_section(self, heading: str, *paragraphs: str) -> Section:
        section = Section(heading=heading, paragraphs=list(paragraphs))
        self.sections.append(section)
        return section

    def describe(self) -> str:
        return f"{self.title} by {self.author.name} ({len(self.sections)} sections)"
