"""Value objects passed into and out of the generators.

Every model is frozen: a request is built once per invocation, handed to
a generator, and discarded along with its result.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Category(BaseModel):
    """A named character class with a minimum-count constraint.

    Charsets are caller-owned. The generator neither deduplicates a
    charset nor checks that categories are disjoint.
    """

    model_config = {"frozen": True}

    name: str
    charset: str
    minimum: int = 0


class GenerationRequest(BaseModel):
    """Constrained string request.

    Attributes:
        length: Exact length of the output.
        categories: Character classes in their declared order. Order only
            matters for reproducible test fixtures; the final shuffle
            removes any positional trace of it.
        enabled: Names of categories whose charsets form the optional pool
            used for characters beyond the minimums.
    """

    model_config = {"frozen": True}

    length: int
    categories: tuple[Category, ...] = ()
    enabled: frozenset[str] = Field(default_factory=frozenset)

    @property
    def required(self) -> int:
        """Total of all category minimums."""
        return sum(category.minimum for category in self.categories)

    def category(self, name: str) -> Category | None:
        """Return the category called *name*, or None."""
        for category in self.categories:
            if category.name == name:
                return category
        return None


class GenerationResult(BaseModel):
    """The generated string."""

    model_config = {"frozen": True}

    value: str

    @property
    def length(self) -> int:
        return len(self.value)


class IdentifierRequest(BaseModel):
    """Raw identifier request: how many random bytes to produce."""

    model_config = {"frozen": True}

    byte_length: int


class IdentifierResult(BaseModel):
    """Raw identifier bytes, encoded downstream into presentation strings."""

    model_config = {"frozen": True}

    data: bytes

    @property
    def byte_length(self) -> int:
        return len(self.data)
