#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/inlinemail/attachments.py
"""Content-addressed image attachments for Content-ID embedding.

An ``AttachmentSet`` collects the images pulled out of a document during one
``cid_images`` pass. Identical ``src`` values hash to the same key and are
stored (and referenced) once; identifiers are handed out in order of first
appearance.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from email.mime.image import MIMEImage
from typing import Iterator

from inlinemail.constants import DEFAULT_CID_PREFIX, DEFAULT_HASH_ALGORITHM

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageAttachment:
    """One image to be sent as an inline MIME part.

    Attributes
    ----------
    cid : str
        Content-ID without angle brackets, e.g. ``img1.png``
    data : bytes
        Raw image bytes
    content_type : str
        MIME type, e.g. ``image/png``

    """

    cid: str
    data: bytes
    content_type: str

    @property
    def subtype(self) -> str:
        return self.content_type.split("/", 1)[1]

    def to_mime_part(self) -> MIMEImage:
        """Build an inline ``MIMEImage`` part referenced by ``cid:<cid>``."""
        part = MIMEImage(self.data, _subtype=self.subtype)
        part.add_header("Content-ID", f"<{self.cid}>")
        part.add_header("Content-Disposition", "inline", filename=self.cid)
        return part


class AttachmentSet:
    """Ordered, deduplicated collection of inline images.

    Create one per rewrite pass; the counter and hash table must not be
    shared between documents.

    Parameters
    ----------
    cid_prefix : str, default "img"
        Prefix for generated identifiers
    hash_algorithm : str, default "sha256"
        ``hashlib`` algorithm used to key the deduplication table

    Examples
    --------
        >>> images = AttachmentSet()
        >>> images.add("data:image/png;base64,AAAA", b"\\x00\\x00\\x00", "png")
        'img1.png'
        >>> images.add("data:image/png;base64,AAAA", b"\\x00\\x00\\x00", "png")
        'img1.png'
        >>> len(images)
        1

    """

    def __init__(self, cid_prefix: str = DEFAULT_CID_PREFIX, hash_algorithm: str = DEFAULT_HASH_ALGORITHM):
        self.cid_prefix = cid_prefix
        self.hash_algorithm = hash_algorithm
        self._images: dict[str, ImageAttachment] = {}
        self._cids_by_hash: dict[str, str] = {}
        self._counter = 0

    def _content_key(self, src: str) -> str:
        return hashlib.new(self.hash_algorithm, src.encode("utf-8")).hexdigest()

    def next_cid(self, subtype: str) -> str:
        """Reserve the next identifier in the sequence.

        No ``@domain`` part is added: with one, some webmail clients list the
        image as a separate downloadable file.
        """
        self._counter += 1
        return f"{self.cid_prefix}{self._counter}.{subtype}"

    def add(self, src: str, data: bytes, subtype: str) -> str:
        """Register an image and return its Content-ID.

        Parameters
        ----------
        src : str
            The original ``src`` value; its hash is the deduplication key
        data : bytes
            Decoded image bytes
        subtype : str
            Image subtype (``png``, ``jpeg``, ...)

        Returns
        -------
        str
            The identifier already assigned to this content, or a new one

        """
        key = self._content_key(src)
        cid = self._cids_by_hash.get(key)
        if cid is not None:
            logger.debug(f"Reusing Content-ID {cid} for duplicate image")
            return cid

        cid = self.next_cid(subtype)
        self._images[cid] = ImageAttachment(cid=cid, data=data, content_type=f"image/{subtype}")
        self._cids_by_hash[key] = cid
        return cid

    def __len__(self) -> int:
        return len(self._images)

    def __iter__(self) -> Iterator[ImageAttachment]:
        return iter(self._images.values())

    def __getitem__(self, cid: str) -> ImageAttachment:
        return self._images[cid]

    def __contains__(self, cid: object) -> bool:
        return cid in self._images

    def __repr__(self) -> str:
        return f"AttachmentSet({list(self._images)!r})"

    @property
    def cids(self) -> list[str]:
        """Identifiers in assignment order."""
        return list(self._images)

    def as_dict(self) -> dict[str, ImageAttachment]:
        """Return a copy of the ``cid -> ImageAttachment`` mapping."""
        return dict(self._images)

    def to_mime_parts(self) -> list[MIMEImage]:
        """Build one inline ``MIMEImage`` part per image, in order.

        The parts carry ``Content-ID`` and ``Content-Disposition: inline``
        headers and are ready to be attached to a ``multipart/related``
        message; serializing that message is left to the caller.
        """
        return [image.to_mime_part() for image in self]
