"""Envelope of the learning catalog response.

Only the top level is modeled. Collections are kept as raw values so that an
unexpected payload is logged and passed through, never rejected here.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)


class CatalogPayload(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    # Shared across instances for the life of the process: each unmodeled key
    # is warned about once, not on every fetch.
    _logged_extra_keys: ClassVar[set[str]] = set()

    certifications: Any = None
    learning_paths: Any = Field(default=None, alias="learningPaths")
    modules: Any = None
    units: Any = None
    exams: Any = None
    courses: Any = None
    levels: Any = None
    roles: Any = None
    products: Any = None

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning("Catalog payload: unmodeled keys: %s", ", ".join(sorted(new_keys)))

    def collection_sizes(self) -> dict[str, int | None]:
        """Length of each known collection; ``None`` when absent or not a list."""

        sizes: dict[str, int | None] = {}
        for name, info in type(self).model_fields.items():
            value = getattr(self, name)
            sizes[info.alias or name] = len(value) if isinstance(value, list) else None
        return sizes
