"""
Adapter: ObjectId identifier codec.

Implements IdentifierCodec port on top of ``bson.ObjectId``.
The canonical text form is the 24-character lowercase hex string,
used both in URLs and in JSON bodies.
"""

from bson import ObjectId
from bson.errors import InvalidId

from userapi.domain.users.errors import InvalidIdentifierError
from userapi.domain.users.ports import IdentifierCodec


class ObjectIdCodec(IdentifierCodec):
    """Converts between MongoDB ObjectIds and their hex form."""

    def decode(self, text: str) -> ObjectId:
        """Parse a 24-character hex string into an ObjectId.

        Raises:
            InvalidIdentifierError: On wrong length, non-hex characters
                or a non-string value.
        """
        if not isinstance(text, str):
            raise InvalidIdentifierError(repr(text))
        try:
            return ObjectId(text)
        except InvalidId as exc:
            raise InvalidIdentifierError(text, cause=exc) from exc

    def encode(self, native_id: ObjectId) -> str:
        return str(native_id)


object_id_codec = ObjectIdCodec()
