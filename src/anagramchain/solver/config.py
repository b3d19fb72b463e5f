"""Anagram chain solver configuration."""

from functools import lru_cache
from typing import Self

from dotenv import find_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the anagram chain solver."""

    max_word_len: int = Field(default=255, gt=0)
    """Words longer than this are skipped when building the dictionary. Default: 255."""

    max_dict_size: int = Field(default=1_000_000, gt=0)
    """Maximum number of valid words accepted; further input is truncated. Default: 1,000,000."""

    index_capacity: int = Field(default=1_000_003, gt=0)
    """Number of slots in the anagram index.  A prime reduces clustering. Default: 1,000,003."""

    alphabet_first: int = Field(default=33, ge=0, le=0x10FFFF)
    """First code point tried when looking for successor words. Default: 33 ('!')."""

    alphabet_last: int = Field(default=126, ge=0, le=0x10FFFF)
    """Last code point tried when looking for successor words. Default: 126 ('~')."""

    max_next_steps: int = Field(default=100, gt=0)
    """Maximum number of tied best next steps kept per word (the fan-out cap). Default: 100."""

    max_workers: int | None = None
    """Number of worker processes for the survey. If None (default), uses os.cpu_count() - 1."""

    survey_chunk_size: int = Field(default=256, gt=0)
    """Number of anagram groups handed to a survey worker per task. Default: 256."""

    survey_top_n: int = Field(default=10, gt=0)
    """Number of best starting groups reported by the survey. Default: 10."""

    log_dir: str | None = "logs"
    """Directory for per-run log files.  If None, no log file is written."""

    encoding: str = "utf-8"
    """Text encoding of the dictionary file."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )

    @model_validator(mode="after")
    def check_bounds(self) -> Self:
        """Reject configurations that could overflow the index or empty the alphabet."""
        if self.alphabet_first > self.alphabet_last:
            raise ValueError(
                f"alphabet_first ({self.alphabet_first}) must not exceed "
                f"alphabet_last ({self.alphabet_last})"
            )
        # Every group needs its own slot, and each accepted word adds at most one group.
        if self.index_capacity <= self.max_dict_size:
            raise ValueError(
                f"index_capacity ({self.index_capacity}) must be larger than "
                f"max_dict_size ({self.max_dict_size})"
            )
        return self


@lru_cache(maxsize=1)
def get_config() -> SolverConfig:
    """Return the default settings, read from the environment on first use."""
    return SolverConfig()
