#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/inlinemail/options.py
"""Configuration options for the image inlining pipelines.

Options are immutable; use ``create_updated`` to derive a modified copy.
"""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Self

from inlinemail.constants import (
    CID_PREFIX_PATTERN,
    DEFAULT_CID_PREFIX,
    DEFAULT_FAIL_ON_RESOURCE_ERRORS,
    DEFAULT_HASH_ALGORITHM,
    DEFAULT_MAX_ASSET_SIZE_BYTES,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class InlineOptions(CloneFrozenMixin):
    """Configuration for ``inline_images`` and ``cid_images``.

    Parameters
    ----------
    base_dir : str, Path or None, default None
        Directory used to resolve relative image references. ``None`` means
        the current working directory at call time.
    cid_prefix : str, default "img"
        Prefix of generated Content-IDs (``img1.png``, ``img2.jpeg``, ...).
    hash_algorithm : str, default "sha256"
        ``hashlib`` algorithm used to deduplicate identical images.
    max_asset_size_bytes : int
        Local files larger than this are left as references.
    fail_on_resource_errors : bool, default False
        Raise ``ResourceError`` for missing, oversized or untypable local
        files instead of leaving the reference unchanged.

    """

    base_dir: str | Path | None = field(
        default=None,
        metadata={"help": "Directory for resolving relative image references (default: cwd)", "importance": "core"},
    )
    cid_prefix: str = field(
        default=DEFAULT_CID_PREFIX,
        metadata={"help": "Prefix for generated Content-ID identifiers", "importance": "advanced"},
    )
    hash_algorithm: str = field(
        default=DEFAULT_HASH_ALGORITHM,
        metadata={"help": "hashlib algorithm used to deduplicate images", "importance": "advanced"},
    )
    max_asset_size_bytes: int = field(
        default=DEFAULT_MAX_ASSET_SIZE_BYTES,
        metadata={
            "help": "Maximum size in bytes of a local image that will be inlined",
            "type": int,
            "importance": "security",
        },
    )
    fail_on_resource_errors: bool = field(
        default=DEFAULT_FAIL_ON_RESOURCE_ERRORS,
        metadata={
            "help": "Raise ResourceError on unresolvable local images instead of leaving them unchanged",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.max_asset_size_bytes <= 0:
            raise ValueError(f"max_asset_size_bytes must be positive, got {self.max_asset_size_bytes}")

        if not re.fullmatch(CID_PREFIX_PATTERN, self.cid_prefix):
            raise ValueError(
                f"Invalid cid_prefix {self.cid_prefix!r}; expected a letter followed by word characters, '.' or '-'"
            )

        # shake_* digests need an explicit length and are not usable as keys here
        if self.hash_algorithm not in hashlib.algorithms_available or self.hash_algorithm.startswith("shake_"):
            raise ValueError(f"Unknown hash_algorithm {self.hash_algorithm!r}")

    def resolve_base_dir(self) -> Path:
        """Return the effective base directory as an absolute path."""
        if self.base_dir is None:
            return Path.cwd()
        return Path(self.base_dir).absolute()
