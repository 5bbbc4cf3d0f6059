"""Notes attached to arbitrary resources.

The notes sub-resource is located through the owning resource's ``self``
link rather than a hard-coded path, so any resource implementing
:class:`~tigerbay.models.common.HasSelfLink` can be passed in.
"""

import structlog

from ..errors import NotesNotSupportedError, TransportError
from ..models.common import HasSelfLink
from ..models.notes import Note
from .base import ApiGroup

logger = structlog.get_logger(__name__)

HTTP_NOT_FOUND = 404


class NoteManager(ApiGroup):
    """Read and add notes on any resource that has a self link."""

    def notes(self, resource: HasSelfLink) -> list[Note]:
        """List the notes attached to ``resource``.

        Raises:
            LinkResolutionError: If ``resource`` has no self link.
            NotesNotSupportedError: If the resource type has no notes.
        """
        path = self._notes_path(resource)
        try:
            data = self._get(path)
        except TransportError as exc:
            if exc.status_code == HTTP_NOT_FOUND:
                raise self._not_supported(resource, path) from exc
            raise
        return [Note.model_validate(item) for item in data or []]

    def add(self, resource: HasSelfLink, note: Note) -> Note:
        """Attach a new note to ``resource``.

        Raises:
            LinkResolutionError: If ``resource`` has no self link.
            NotesNotSupportedError: If the resource type has no notes.
        """
        path = self._notes_path(resource)
        try:
            data = self._post(path, note)
        except TransportError as exc:
            if exc.status_code == HTTP_NOT_FOUND:
                raise self._not_supported(resource, path) from exc
            raise
        return self._parse(Note, data, path)

    @staticmethod
    def _notes_path(resource: HasSelfLink) -> str:
        return resource.self_href().rstrip("/") + "/notes"

    @staticmethod
    def _not_supported(resource: HasSelfLink, path: str) -> NotesNotSupportedError:
        logger.warning("Notes not supported", path=path)
        msg = f"{type(resource).__name__} at {path} does not support notes"
        return NotesNotSupportedError(msg)
