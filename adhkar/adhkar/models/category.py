"""
Category taxonomy model.
"""

from enum import Enum

from pydantic import BaseModel, Field


class EntityType(str, Enum):
    """Kind of entity a category groups."""

    DUAS = "duas"
    AZKAR = "azkar"

    @property
    def category_prefix(self) -> str:
        """Id prefix of this type's categories; the two namespaces never overlap."""
        return "dua-cat-" if self is EntityType.DUAS else "zikr-cat-"

    @property
    def noun(self) -> str:
        """Plural noun used in generated descriptions."""
        return "duas" if self is EntityType.DUAS else "adhkar"


class Category(BaseModel):
    """
    A derived taxonomy node grouping entities by category name.

    Attributes:
        id: Type-prefixed slug of the name (e.g. "dua-cat-morning-adhkar")
        name: Category name as carried by the entities
        description: Generated description including the item count
        count: Number of entities carrying this category
    """

    model_config = {"frozen": True}

    id: str = Field(..., min_length=1)
    name: str = Field(...)
    description: str = Field(default="")
    count: int = Field(default=0, ge=0)

    @property
    def entity_type(self) -> EntityType:
        if self.id.startswith(EntityType.DUAS.category_prefix):
            return EntityType.DUAS
        return EntityType.AZKAR

    def __str__(self) -> str:
        return f"Category({self.id}, {self.count})"
