"""Typed view of the Google Books Volumes API response.

Only the fields the adapter reads are modelled; everything else is ignored.
See https://developers.google.com/books/docs/v1/reference/volumes#resource
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


class VolumeInfo(_ApiModel):
    """Bibliographic fields of a volume."""

    title: str | None = None
    subtitle: str | None = None
    canonical_volume_link: str | None = None
    description: str | None = None
    published_date: str | None = None
    print_type: str | None = None


class Volume(VolumeInfo):
    """One entry of ``items``.

    Depending on the endpoint, the bibliographic fields arrive either nested
    under ``volumeInfo`` or directly on the entry.
    """

    volume_info: VolumeInfo | None = None

    @property
    def info(self) -> VolumeInfo:
        return self.volume_info if self.volume_info is not None else self


class VolumesResponse(_ApiModel):
    """Successful response of ``GET volumes``. ``items`` is omitted when nothing matched.

    Entries of ``items`` that do not parse as a volume are dropped with a
    warning; the remaining entries keep their order.
    """

    total_items: int | None = None
    items: list[Volume] | None = None

    @field_validator("items", mode="before")
    @classmethod
    def _skip_malformed_items(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        volumes = []
        for position, entry in enumerate(value):
            try:
                volumes.append(Volume.model_validate(entry))
            except ValidationError as e:
                logger.warning("Skipping malformed Google Books item at position %d: %s", position, e.errors()[0]["msg"])
        return volumes
