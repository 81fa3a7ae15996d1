"""Pydantic configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FoldingOptions(BaseModel):
    """Selects which case-folding rows apply during a fold."""

    model_config = ConfigDict(frozen=True)

    use_full_mapping: bool = True
    use_turkic_mapping: bool = False

    @property
    def key(self) -> tuple[bool, bool]:
        return (self.use_full_mapping, self.use_turkic_mapping)


DEFAULT_OPTIONS = FoldingOptions()


class BenchConfig(BaseModel):
    """Settings for a timing run over the match modes."""

    iterations: int = Field(default=1000, ge=1)
    warmup: int = Field(default=10, ge=0)
    modes: list[str] = Field(default_factory=lambda: ["default", "canonical", "compatibility"])
    options: FoldingOptions = Field(default_factory=FoldingOptions)
